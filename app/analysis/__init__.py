"""
Analysis module for normalizing AI extraction output.
"""

from .services import AnalysisNormalizer
from .routes import create_analysis_routes
from .factory import create_analysis_module

__all__ = ['AnalysisNormalizer', 'create_analysis_routes', 'create_analysis_module']
