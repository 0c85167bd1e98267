import os

# Settings() читается при импорте пакета
os.environ.setdefault("CLOUDFLARE_ACCOUNT_ID", "test-account")
os.environ.setdefault("CLOUDFLARE_API_TOKEN", "test-token")

import pytest
from fastapi.testclient import TestClient

from chat_gateway.inference_client import get_inference_client
from chat_gateway.main import app


class FakeAI:
    """Подменяет InferenceClient: запоминает вызовы, отдаёт заданный результат или падает."""

    def __init__(self, result=None, error: Exception | None = None):
        self.result = {"response": "ok"} if result is None else result
        self.error = error
        self.calls = []

    async def run(self, model, inputs):
        self.calls.append((model, inputs))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def fake_ai():
    return FakeAI()


@pytest.fixture
def client(fake_ai):
    app.dependency_overrides[get_inference_client] = lambda: fake_ai
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
