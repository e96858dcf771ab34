"""
urlsift - per-URL categorisation, parameter risk matching, reflection
probing and DOM sink heuristics
"""

from .config import ScanConfiguration, load_env_file
from .exceptions import (
    URLSiftError,
    MalformedURLError,
    MalformedQueryEncodingError,
    ProbeNetworkError,
    CatalogLoadError,
)
from .models import Category, RiskEntry, ReflectedFinding, ParameterFindings, AnalysisResult
from .analyzers import CategoryClassifier, RiskCatalog, ParameterAnalyzer, DomSinkDetector, PROBE_MARKER
from .agents import ProbeClient, ProbeResponse
from .orchestrator import URLAnalysisOrchestrator

__version__ = "1.0.0"

__all__ = [
    # Config
    'ScanConfiguration', 'load_env_file',

    # Errors
    'URLSiftError', 'MalformedURLError', 'MalformedQueryEncodingError',
    'ProbeNetworkError', 'CatalogLoadError',

    # Models
    'Category', 'RiskEntry', 'ReflectedFinding', 'ParameterFindings', 'AnalysisResult',

    # Components
    'CategoryClassifier', 'RiskCatalog', 'ParameterAnalyzer', 'DomSinkDetector',
    'PROBE_MARKER', 'ProbeClient', 'ProbeResponse', 'URLAnalysisOrchestrator'
]
