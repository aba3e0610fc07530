"""
AI analysis data models.

This module contains the Pydantic model describing what the image analysis
service hands back for one uploaded question.
"""

from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class AnalysisResult(BaseModel):
    """Structured output of the question analysis service."""
    model_config = ConfigDict(populate_by_name=True)

    question_text: str = Field(default="", alias="questionText", description="Recognized question text")
    answer_text: str = Field(default="", alias="answerText", description="Recognized or generated answer")
    analysis: str = Field(default="", description="Step-by-step explanation")
    subject: Optional[str] = Field(default=None, description="Free-text subject name, e.g. '数学' or 'Math'")
    knowledge_points: List[str] = Field(
        default_factory=list,
        alias="knowledgePoints",
        description="Candidate knowledge-point tags as produced by the model",
    )

    @field_validator("knowledge_points", mode="before")
    @classmethod
    def _keep_string_tags(cls, value: Any) -> List[str]:
        """Drop non-string and blank candidates instead of rejecting the payload."""
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, list):
            raise ValueError("knowledgePoints must be a list of strings")
        return [item.strip() for item in value if isinstance(item, str) and item.strip()]
