"""
Post-processing of AI analysis output before an error item is saved.
"""
import logging
from typing import Any, Dict

from knowledge_service import infer_subject_from_name, is_catalog_tag, normalize_tags
from knowledge_service.models import AnalysisResult

logger = logging.getLogger(__name__)


class AnalysisNormalizer:
    """Maps raw model output onto catalog tags and subject codes."""

    def normalize(self, result: AnalysisResult) -> Dict[str, Any]:
        """
        Normalize one analysis result.

        Returns:
            Dictionary with the inferred ``subject`` code (or None), the
            deduplicated canonical ``knowledgePoints`` and the ``customTags``
            among them that the catalog does not know.
        """
        knowledge_points = normalize_tags(result.knowledge_points)
        custom_tags = [tag for tag in knowledge_points if not is_catalog_tag(tag)]
        subject = infer_subject_from_name(result.subject)

        logger.info(
            f"Normalized analysis: subject={subject}, tags={len(knowledge_points)}, custom={len(custom_tags)}"
        )
        return {
            "subject": subject,
            "knowledgePoints": knowledge_points,
            "customTags": custom_tags,
        }
