"""Shared fixtures for RetailIQ test suite."""

import os
import sys
import pytest

# Ensure the project root is on sys.path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from fastapi.testclient import TestClient

from retailiq.api.deps import get_db, get_llm_client
from retailiq.main import app
from retailiq.storage.db import connect


class FakeLLM:
    """Stands in for LLMClient: replays canned completions and records calls."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def is_available(self):
        return True

    def chat(self, messages, temperature=0.3, purpose=""):
        self.calls.append({"messages": messages, "temperature": temperature, "purpose": purpose})
        if not self.responses:
            raise AssertionError("unexpected LLM call")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture()
def store(tmp_path):
    """Return a freshly seeded retail store."""
    conn = connect(tmp_path / "retail_test.db")
    yield conn
    conn.close()


@pytest.fixture()
def fake_llm():
    return FakeLLM()


@pytest.fixture()
def client(store, fake_llm):
    """TestClient wired to the temp store and the fake LLM."""
    app.dependency_overrides[get_db] = lambda: store
    app.dependency_overrides[get_llm_client] = lambda: fake_llm
    yield TestClient(app)
    app.dependency_overrides.clear()
