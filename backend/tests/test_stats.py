"""Tests for the global scoreboard aggregation."""

from datetime import datetime, timedelta, timezone

import pytest

from models.schemas.assessment import AssessmentEntry
from services import score_storage
from services.stats import RECENT_WINDOW, compute_stats, industry_for_major, summarize

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def _entry(score, major, days_ago=0):
    return AssessmentEntry(
        score=score,
        major=major,
        university="State College",
        timestamp=NOW - timedelta(days=days_ago),
    )


@pytest.mark.parametrize(
    "major, industry",
    [
        ("Corporate Law", "Legal"),
        ("Computer Science", "Technology"),
        ("Nursing", "Healthcare"),
        ("Plumbing", "Construction"),
        ("Accounting", "Business"),
        ("Early Childhood Education", "Education"),
        ("Civil Engineering", "Engineering"),
        ("Graphic Design", "Arts"),
        ("Psychology", "Social Sciences"),
        ("Underwater Basket Weaving", "Other"),
    ],
)
def test_industry_for_major(major, industry):
    assert industry_for_major(major) == industry


def test_legal_checked_before_technology():
    assert industry_for_major("Legal Data Analytics") == "Legal"


def test_empty():
    stats = summarize([], now=NOW)
    assert stats.average_score is None
    assert stats.most_vulnerable is None
    assert stats.most_protected is None
    assert stats.total_assessments == 0
    assert stats.message == "No data yet"


def test_recent_window_only():
    entries = [
        _entry(15, "Computer Science", days_ago=30),
        _entry(98, "Nursing", days_ago=1),
        _entry(88, "Plumbing", days_ago=2),
    ]
    stats = summarize(entries, now=NOW)
    assert stats.total_assessments == 2
    assert stats.average_score == 93
    assert stats.most_vulnerable == "Construction"
    assert stats.most_protected == "Healthcare"


def test_falls_back_to_all_entries_when_week_is_empty():
    entries = [
        _entry(15, "Computer Science", days_ago=30),
        _entry(45, "Business", days_ago=20),
    ]
    stats = summarize(entries, now=NOW)
    assert stats.total_assessments == 2
    assert stats.average_score == 30
    assert stats.most_vulnerable == "Technology"
    assert stats.most_protected == "Business"


def test_industry_average_not_single_entry():
    entries = [
        _entry(15, "Computer Science"),
        _entry(100, "Software Engineering"),
        _entry(60, "Accounting"),
    ]
    stats = summarize(entries, now=NOW)
    # Technology averages 57.5, Business 60
    assert stats.most_vulnerable == "Technology"
    assert stats.most_protected == "Business"


class TestComputeStats:
    def test_reads_only_recent_window(self, monkeypatch):
        calls = []

        def fake_get(since=None):
            calls.append(since)
            return [_entry(98, "Nursing")]

        monkeypatch.setattr(score_storage, "get_assessments", fake_get)
        stats = compute_stats(now=NOW)
        assert calls == [NOW - RECENT_WINDOW]
        assert stats.total_assessments == 1

    def test_full_read_only_when_window_empty(self, monkeypatch):
        calls = []

        def fake_get(since=None):
            calls.append(since)
            if since is not None:
                return []
            return [_entry(15, "Computer Science", days_ago=30)]

        monkeypatch.setattr(score_storage, "get_assessments", fake_get)
        stats = compute_stats(now=NOW)
        assert calls == [NOW - RECENT_WINDOW, None]
        assert stats.average_score == 15

    def test_against_audit_log(self):
        score_storage.save_assessment(88, "Plumbing", "State College")
        stats = compute_stats()
        assert stats.total_assessments == 1
        assert stats.most_protected == "Construction"
