"""Append-only audit log of served assessments.

Writes are best-effort: a failed save is logged and dropped so it can never
fail or delay the assessment response.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

import db
from models.records import AssessmentRecord
from models.schemas.assessment import AssessmentEntry

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def save_assessment(score: int, major: str, university: str, source: str = "offline") -> None:
    try:
        with db.db_session() as session:
            session.add(
                AssessmentRecord(
                    score=score,
                    major=major,
                    university=university,
                    source=source,
                    timestamp=datetime.now(timezone.utc),
                )
            )
        logger.info("Assessment saved: score=%d source=%s", score, source)
    except SQLAlchemyError:
        logger.exception(
            "Error saving assessment (score=%d, major=%r, university=%r)",
            score, major, university,
        )


def get_assessments(since: datetime | None = None) -> list[AssessmentEntry]:
    """Return logged assessments oldest first, optionally only those at/after `since`."""
    stmt = select(AssessmentRecord).order_by(AssessmentRecord.timestamp, AssessmentRecord.id)
    if since is not None:
        stmt = stmt.where(AssessmentRecord.timestamp >= since)

    with db.db_session() as session:
        rows = session.scalars(stmt).all()
        return [
            AssessmentEntry(
                score=row.score,
                major=row.major,
                university=row.university,
                source=row.source,
                timestamp=_as_utc(row.timestamp),
            )
            for row in rows
        ]
