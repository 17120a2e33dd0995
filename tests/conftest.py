# tests/conftest.py
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from writing_assistant.main import app
from writing_assistant.core import config

# --------------------------------------------------------------------
# FastAPI test client available as fixture `client`
# --------------------------------------------------------------------
@pytest.fixture(scope="session")
def client() -> TestClient:
    return TestClient(app)

# --------------------------------------------------------------------
# Never wait on the simulated analysis delay during tests
# --------------------------------------------------------------------
@pytest.fixture(autouse=True)
def no_analysis_delay(monkeypatch):
    monkeypatch.setattr(config, "ANALYSIS_DELAY_SECONDS", 0.0)

# --------------------------------------------------------------------
# Sample texts
# --------------------------------------------------------------------
LONG_SENTENCE = (
    "The committee met on Tuesday afternoon to review the quarterly budget "
    "and discuss the many proposals submitted by the regional offices across "
    "the country during the previous fiscal year"
)

@pytest.fixture
def long_sentence() -> str:
    return LONG_SENTENCE + "."

@pytest.fixture
def busy_text() -> str:
    return "There is a lot of work due to the fact that we are busy."
