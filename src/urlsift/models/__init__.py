"""
urlsift Data Models

This module contains the data classes produced by the analysis pipeline.
"""

from .results import (
    Category,
    RiskEntry,
    ReflectedFinding,
    ParameterFindings,
    AnalysisResult,
)

__all__ = [
    'Category',
    'RiskEntry',
    'ReflectedFinding',
    'ParameterFindings',
    'AnalysisResult'
]
