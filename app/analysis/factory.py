"""
Factory for creating the analysis module.
"""
from .services import AnalysisNormalizer
from .routes import create_analysis_routes


def create_analysis_module() -> dict:
    """
    Create the analysis module.

    Returns:
        Dictionary containing:
            - service: AnalysisNormalizer instance
            - blueprint: Flask blueprint for routes
    """
    service = AnalysisNormalizer()
    blueprint = create_analysis_routes(service)

    return {
        "service": service,
        "blueprint": blueprint
    }
