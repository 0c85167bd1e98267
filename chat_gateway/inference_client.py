# chat_gateway/inference_client.py
from typing import Any, Tuple
from openai import AsyncOpenAI
from .settings import settings

MODEL_ID = "@cf/meta/llama-4-scout-17b-16e-instruct"

WORKERS_AI_BASE_URL = "https://api.cloudflare.com/client/v4/accounts/{account_id}/ai/v1"

def extract_text(resp: dict) -> Tuple[str, str | None, str | None]:
    """
    Возвращает (content, model, finish_reason) из ответа chat.completions (формат OpenAI-like).
    """
    choice = (resp.get("choices") or [{}])[0]
    msg = choice.get("message") or {}
    return (
        msg.get("content") or "",
        resp.get("model"),
        choice.get("finish_reason"),
    )

class InferenceClient:
    """
    Обёртка над OpenAI-совместимым API Workers AI.
    run() отдаёт результат в форме биндинга Workers AI: {"response": ..., ...}.
    """

    def __init__(self, client: AsyncOpenAI):
        self._client = client

    async def run(self, model: str, inputs: dict[str, Any]) -> dict[str, Any]:
        # inputs: messages, max_tokens, temperature и т.д. — пробрасываются в openai
        resp = await self._client.chat.completions.create(model=model, **inputs)
        content, model_name, finish = extract_text(resp.model_dump())
        return {"response": content, "model": model_name, "finish_reason": finish}

# Клиент OpenAI, но с base_url Cloudflare Workers AI
client = AsyncOpenAI(
    base_url=settings.AI_BASE_URL or WORKERS_AI_BASE_URL.format(account_id=settings.CLOUDFLARE_ACCOUNT_ID),
    api_key=settings.CLOUDFLARE_API_TOKEN,
    **({"timeout": settings.AI_TIMEOUT} if settings.AI_TIMEOUT else {}),
)

inference_client = InferenceClient(client)

def get_inference_client() -> InferenceClient:
    return inference_client
