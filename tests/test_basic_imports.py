"""
Basic import tests for the tag service packages.
"""


def test_knowledge_service_imports():
    """Test that the engine package imports and exposes its public API."""
    import knowledge_service
    from knowledge_service import normalize_tag, calculate_grade, infer_subject_from_name

    assert callable(normalize_tag)
    assert callable(calculate_grade)
    assert callable(infer_subject_from_name)
    assert "get_catalog" in knowledge_service.__all__


def test_subsystem_imports():
    """Test that every subsystem factory imports."""
    from app.custom_tags import create_custom_tags_module
    from app.tags import create_tags_module
    from app.curriculum import create_curriculum_module
    from app.analysis import create_analysis_module
    from app.error_items import ErrorItemRepository

    assert callable(create_custom_tags_module)
    assert callable(create_tags_module)
    assert callable(create_curriculum_module)
    assert callable(create_analysis_module)
    assert ErrorItemRepository is not None


def test_logging_setup():
    """Test that logging can be started and stopped."""
    from knowledge_service.logging_config import setup_logging, stop_logging, get_logger

    setup_logging(debug=False)
    logger = get_logger("test")
    logger.info("logging works")
    stop_logging()
