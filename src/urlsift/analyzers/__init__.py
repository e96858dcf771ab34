"""
urlsift Analysis Components

- CategoryClassifier: resource type from the URL suffix
- RiskCatalog: known-risky parameter names
- ParameterAnalyzer: parameter listing, risky matching and reflection probing
- DomSinkDetector: DOM-XSS sink heuristic over response bodies
"""

from .classifier import CategoryClassifier, CATEGORY_PATTERNS
from .risk_catalog import RiskCatalog
from .parameter_analyzer import ParameterAnalyzer, PROBE_MARKER
from .sink_detector import DomSinkDetector, DOM_SINK_PATTERN

__all__ = [
    'CategoryClassifier',
    'CATEGORY_PATTERNS',
    'RiskCatalog',
    'ParameterAnalyzer',
    'PROBE_MARKER',
    'DomSinkDetector',
    'DOM_SINK_PATTERN'
]
