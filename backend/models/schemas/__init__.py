"""Domain contracts passed between the scoring services."""

from models.schemas.assessment import (
    AssessmentEntry,
    AssessmentResult,
    EnhancedAssessment,
    Moat,
    RecommendedTool,
)

__all__ = [
    "AssessmentEntry",
    "AssessmentResult",
    "EnhancedAssessment",
    "Moat",
    "RecommendedTool",
]
