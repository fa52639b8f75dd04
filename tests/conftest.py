import pytest
from fastapi.testclient import TestClient

from src.main import app
from src.services.gemini_service import get_gemini_service


class FakeGemini:
    """Records calls instead of hitting the provider"""

    def __init__(self, reply="Tell me about your architecture.", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def send_chat(self, history, message, temperature=None):
        self.calls.append({"history": history, "message": message})
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_gemini():
    return FakeGemini()


@pytest.fixture
def client(fake_gemini):
    app.dependency_overrides[get_gemini_service] = lambda: fake_gemini
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
