"""Gemini enhancement of an assessment, with an explicit success/failure result.

Callers always hold the offline AssessmentResult before calling enhance();
an EnhancementFailed outcome means "serve the offline result unchanged".
"""

import logging
from dataclasses import dataclass
from enum import Enum

from pydantic import ValidationError

from models.schemas.assessment import EnhancedAssessment
from services import gemini_client, prompt_builder

logger = logging.getLogger(__name__)

# Fields that must be present and truthy before the payload is even parsed
REQUIRED_TRUTHY = ("score", "verdict", "upskilling_roadmap")


class EnhancementError(str, Enum):
    NOT_CONFIGURED = "not_configured"
    UNAVAILABLE = "unavailable"
    INCOMPLETE = "incomplete"
    INVALID = "invalid"


@dataclass(frozen=True)
class Enhanced:
    assessment: EnhancedAssessment


@dataclass(frozen=True)
class EnhancementFailed:
    error: EnhancementError
    detail: str = ""


EnhancementOutcome = Enhanced | EnhancementFailed


def parse_enhancement(data: dict) -> EnhancementOutcome:
    """Validate a raw Gemini payload into an EnhancedAssessment."""
    missing = [key for key in REQUIRED_TRUTHY if not data.get(key)]
    if missing:
        return EnhancementFailed(
            EnhancementError.INCOMPLETE,
            f"missing or empty: {', '.join(missing)}",
        )
    try:
        return Enhanced(EnhancedAssessment.model_validate(data))
    except ValidationError as e:
        return EnhancementFailed(EnhancementError.INVALID, f"{e.error_count()} validation errors")


async def enhance(client, major: str, university: str, *, timeout: float | None = None) -> EnhancementOutcome:
    """Ask Gemini for the rich assessment. Never raises."""
    if client is None:
        return EnhancementFailed(EnhancementError.NOT_CONFIGURED, "Gemini client not configured")

    prompt = prompt_builder.build_enhancement_prompt(university, major)
    data = await gemini_client.generate_json(
        client, prompt, timeout=timeout, response_schema=prompt_builder.ENHANCEMENT_SCHEMA
    )
    if data is None:
        return EnhancementFailed(EnhancementError.UNAVAILABLE, "no usable response from Gemini")

    outcome = parse_enhancement(data)
    if isinstance(outcome, EnhancementFailed):
        logger.warning("Gemini response rejected (%s): %s", outcome.error.value, outcome.detail)
    else:
        logger.info(
            "Gemini enhancement succeeded: score=%d verdict=%r",
            outcome.assessment.score,
            outcome.assessment.verdict,
        )
    return outcome
