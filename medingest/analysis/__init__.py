from medingest.analysis.analyzer import Analyzer
from medingest.analysis.base import BaseAnalyzer
from medingest.analysis.factory import AnalyzerFactory
from medingest.analysis.models import FindingsRecord, TestFinding

__all__ = ["Analyzer", "AnalyzerFactory", "BaseAnalyzer", "FindingsRecord", "TestFinding"]
