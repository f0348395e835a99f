from pydantic import BaseModel

from models.schemas.assessment import (
    AssessmentResult,
    EnhancedAssessment,
    Moat,
    RecommendedTool,
)


class AssessmentResponse(BaseModel):
    score: int
    moat: Moat
    saturation_year: int
    verdict: str
    timeline_context: str
    pivot_strategy: str
    # Populated only by a successful Gemini enhancement, all together
    upskilling_roadmap: list[str] | None = None
    human_moat_triggers: list[str] | None = None
    recommended_tools: list[RecommendedTool] | None = None
    scoring_method: str = "offline"  # "offline" | "gemini"
    degraded: bool = False

    @classmethod
    def from_offline(cls, result: AssessmentResult, degraded: bool = False) -> "AssessmentResponse":
        return cls(
            **result.model_dump(include=set(AssessmentResult.model_fields)),
            scoring_method="offline",
            degraded=degraded,
        )

    @classmethod
    def from_enhanced(cls, result: EnhancedAssessment) -> "AssessmentResponse":
        return cls(**result.model_dump(), scoring_method="gemini")


class StatsResponse(BaseModel):
    average_score: int | None = None
    most_vulnerable: str | None = None
    most_protected: str | None = None
    total_assessments: int = 0
    message: str | None = None


class DegreeOut(BaseModel):
    name: str
    category: str
    market_value: str
