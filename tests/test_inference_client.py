import asyncio
from types import SimpleNamespace

import pytest

from chat_gateway.inference_client import (
    MODEL_ID,
    WORKERS_AI_BASE_URL,
    InferenceClient,
    client as sdk_client,
    extract_text,
    get_inference_client,
)
from chat_gateway.settings import settings


class FakeCompletion:
    def __init__(self, data):
        self._data = data

    def model_dump(self):
        return self._data


class FakeCompletions:
    def __init__(self, data=None, error=None):
        self.data = data
        self.error = error
        self.kwargs = None

    async def create(self, **kwargs):
        self.kwargs = kwargs
        if self.error is not None:
            raise self.error
        return FakeCompletion(self.data)


def make_sdk(completions):
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


def test_extract_text():
    resp = {
        "model": MODEL_ID,
        "choices": [{"message": {"role": "assistant", "content": "8"}, "finish_reason": "stop"}],
    }
    assert extract_text(resp) == ("8", MODEL_ID, "stop")


def test_extract_text_empty():
    assert extract_text({}) == ("", None, None)
    assert extract_text({"choices": [{"message": {"content": None}}]}) == ("", None, None)


def test_run_returns_binding_shape():
    completions = FakeCompletions({
        "model": MODEL_ID,
        "choices": [{"message": {"content": "It has 8 legs."}, "finish_reason": "stop"}],
    })
    ai = InferenceClient(make_sdk(completions))
    messages = [{"role": "user", "content": "legs?"}]

    result = asyncio.run(ai.run(MODEL_ID, {"messages": messages, "max_tokens": 1000, "temperature": 0.3}))

    assert result == {"response": "It has 8 legs.", "model": MODEL_ID, "finish_reason": "stop"}
    assert completions.kwargs == {
        "model": MODEL_ID,
        "messages": messages,
        "max_tokens": 1000,
        "temperature": 0.3,
    }


def test_run_propagates_errors():
    ai = InferenceClient(make_sdk(FakeCompletions(error=RuntimeError("boom"))))
    with pytest.raises(RuntimeError, match="boom"):
        asyncio.run(ai.run(MODEL_ID, {"messages": []}))


def test_default_client_points_at_workers_ai():
    expected = settings.AI_BASE_URL or WORKERS_AI_BASE_URL.format(account_id=settings.CLOUDFLARE_ACCOUNT_ID)
    assert str(sdk_client.base_url).rstrip("/") == expected.rstrip("/")
    assert sdk_client.api_key == settings.CLOUDFLARE_API_TOKEN
    assert get_inference_client()._client is sdk_client
