"""
Factory for creating the curriculum module.
"""
from knowledge_service.curriculum import get_catalog

from .routes import create_curriculum_routes


def create_curriculum_module(academic_year_start_month: int = 9) -> dict:
    """
    Create the curriculum module.

    Args:
        academic_year_start_month: Month in which a new academic year begins

    Returns:
        Dictionary containing:
            - catalog: The process-wide CurriculumCatalog
            - blueprint: Flask blueprint for routes
    """
    blueprint = create_curriculum_routes(academic_year_start_month)

    return {
        "catalog": get_catalog(),
        "blueprint": blueprint
    }
