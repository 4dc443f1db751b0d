from docanalyst.analysis.analyzer import Analyzer
from docanalyst.analysis.base import BaseAnalyzer
from docanalyst.analysis.factory import AnalyzerFactory, CompletionClientFactory
from docanalyst.analysis.models import Analysis

__all__ = [
    "Analysis",
    "Analyzer",
    "AnalyzerFactory",
    "BaseAnalyzer",
    "CompletionClientFactory",
]
