"""Assessment contracts shared by the offline engine and the Gemini enhancer."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Moat(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class AssessmentResult(BaseModel):
    """Output of the offline classification-and-scoring engine.

    Built once per request with the final (elite-adjusted, clamped) score.
    """
    model_config = ConfigDict(frozen=True)

    score: int  # 0-100 after clamping
    moat: Moat
    saturation_year: int
    verdict: str
    timeline_context: str
    pivot_strategy: str


def _whole_number(value) -> int:
    # Gemini sometimes returns 42.0 or "42"
    try:
        return round(float(value))
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"expected a number, got {value!r}")


class RecommendedTool(BaseModel):
    name: str
    description: str
    url: str | None = None


class EnhancedAssessment(AssessmentResult):
    """Gemini-generated assessment: the six base fields plus the pivot plan.

    The three extension fields are required and non-empty, so a payload that
    carries only some of them fails validation as a whole.
    """
    upskilling_roadmap: list[str] = Field(..., min_length=1)  # 5 expected
    human_moat_triggers: list[str] = Field(..., min_length=1)  # 4-5 expected
    recommended_tools: list[RecommendedTool] = Field(..., min_length=1)  # 3-4 expected

    @field_validator("score", mode="before")
    @classmethod
    def _clamp_score(cls, value):
        return min(100, max(0, _whole_number(value)))

    @field_validator("saturation_year", mode="before")
    @classmethod
    def _whole_year(cls, value):
        return _whole_number(value)


class AssessmentEntry(BaseModel):
    """One row of the append-only audit log."""
    score: int
    major: str
    university: str
    source: str = "offline"
    timestamp: datetime
