import pytest
from fastapi.testclient import TestClient
from app.main import app
from app.core.config import settings
from app.llm.openai_client import Success

@pytest.fixture(autouse=True)
def api_key(monkeypatch):
    # never talk to a real provider from tests
    monkeypatch.setattr(settings, "OPENAI_API_KEY", "test-key")
    monkeypatch.setattr(settings, "DISCONNECT_POLL_SECONDS", 0.05)

@pytest.fixture()
def client():
    return TestClient(app)

@pytest.fixture()
def fake_llm(monkeypatch):
    """Replace the completion call; returns the list of captured requests."""
    calls = []

    def install(result=None, exc=None):
        async def fake_complete(req, transport=None):
            calls.append(req)
            if exc is not None:
                raise exc
            return result if result is not None else Success("ACK.")
        monkeypatch.setattr("app.llm.openai_client.complete", fake_complete)
        return calls

    return install
