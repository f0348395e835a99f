"""Shared test configuration, fixtures and pytest markers."""

import os
import tempfile

# Must run before config/db are imported by any test module
_TMP_DIR = tempfile.mkdtemp(prefix="career-singularity-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_DIR}/assessments.db"
os.environ["GEMINI_API_KEY"] = ""
os.environ["RATE_LIMIT_ENABLED"] = "false"

from types import SimpleNamespace

import pytest

import db
from models.records import Base


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: calls the real Gemini API (needs GEMINI_API_KEY)"
    )


@pytest.fixture(autouse=True)
def _reset_db():
    """Fresh audit-log table for every test."""
    Base.metadata.drop_all(bind=db.engine)
    db.init_db()
    yield


class FakeGeminiClient:
    """Stands in for google.genai.Client: exposes client.aio.models.generate_content."""

    def __init__(self, text: str | None = None, error: Exception | None = None, delay: float = 0.0):
        self.text = text
        self.error = error
        self.delay = delay
        self.calls: list[dict] = []
        self.aio = SimpleNamespace(models=SimpleNamespace(generate_content=self._generate_content))

    async def _generate_content(self, **kwargs):
        import asyncio

        self.calls.append(kwargs)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


@pytest.fixture
def fake_gemini():
    return FakeGeminiClient
