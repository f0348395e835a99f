"""Global scoreboard: average score and most/least protected industries."""

import logging
from collections import defaultdict
from datetime import datetime, timedelta, timezone

from models.responses import StatsResponse
from models.schemas.assessment import AssessmentEntry
from services import score_storage

logger = logging.getLogger(__name__)

RECENT_WINDOW = timedelta(days=7)

# Checked in order; first industry with a matching substring wins
INDUSTRY_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Legal", ("law", "legal")),
    ("Technology", ("computer", "software", "programming", "data", "tech")),
    ("Healthcare", ("nursing", "health", "medical", "medicine")),
    ("Construction", ("construction", "trade", "plumb", "electric")),
    ("Business", ("business", "management", "finance", "account")),
    ("Education", ("education", "teaching")),
    ("Engineering", ("engineer",)),
    ("Arts", ("art", "design", "creative")),
    ("Social Sciences", ("psycholog", "philosoph")),
)


def industry_for_major(major: str) -> str:
    lower = major.lower()
    for industry, keywords in INDUSTRY_KEYWORDS:
        if any(kw in lower for kw in keywords):
            return industry
    return "Other"


def summarize(entries: list[AssessmentEntry], now: datetime | None = None) -> StatsResponse:
    """Aggregate the last 7 days of entries, or all of them if the week is empty."""
    if not entries:
        return StatsResponse(message="No data yet")

    now = now or datetime.now(timezone.utc)
    cutoff = now - RECENT_WINDOW
    recent = [e for e in entries if e.timestamp >= cutoff]
    window = recent or entries

    average = round(sum(e.score for e in window) / len(window))

    totals: dict[str, list[int]] = defaultdict(lambda: [0, 0])
    for entry in window:
        bucket = totals[industry_for_major(entry.major)]
        bucket[0] += entry.score
        bucket[1] += 1
    averages = {industry: total / count for industry, (total, count) in totals.items()}

    # min/max keep the first industry seen on ties
    return StatsResponse(
        average_score=average,
        most_vulnerable=min(averages, key=averages.get),
        most_protected=max(averages, key=averages.get),
        total_assessments=len(window),
    )


def compute_stats(now: datetime | None = None) -> StatsResponse:
    """Read only the recent window from the log; load everything only if it is empty."""
    now = now or datetime.now(timezone.utc)
    entries = score_storage.get_assessments(since=now - RECENT_WINDOW)
    if not entries:
        entries = score_storage.get_assessments()
    return summarize(entries, now=now)
