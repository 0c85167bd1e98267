import json
from typing import Any, Literal
from pydantic import BaseModel, StrictStr, TypeAdapter, ValidationError
from .errors import ErrorKind, RequestError

class Message(BaseModel):
    role: Literal["system","user","assistant"]
    content: StrictStr

_messages_adapter = TypeAdapter(list[Message])

def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")

def load_body(raw: bytes) -> Any:
    """
    Разбирает тело запроса как строгий JSON: NaN/Infinity не допускаются.
    Битый UTF-8 заменяется на U+FFFD, BOM в начале отбрасывается.
    """
    text = raw.decode("utf-8", errors="replace").removeprefix("\ufeff")
    return json.loads(text, parse_constant=_reject_constant)

def parse_messages(body: Any) -> list[Message]:
    """
    Достаёт и проверяет `messages` из уже разобранного JSON-тела.
    Пустой список валиден и уходит в модель как есть.
    """
    raw = body.get("messages") if isinstance(body, dict) else None
    if not isinstance(raw, list):
        raise RequestError(ErrorKind.MISSING_MESSAGES)
    try:
        return _messages_adapter.validate_python(raw)
    except ValidationError:
        raise RequestError(ErrorKind.INVALID_MESSAGE_FORMAT) from None
