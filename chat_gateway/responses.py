import json
from typing import Any
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from .errors import ErrorKind
from .extract import extract_number

CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}
PREFLIGHT_HEADERS = {
    **CORS_HEADERS,
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

def extract_response_text(result: Any) -> str:
    """
    Текст ответа модели: поле `response`, если оно есть и это строка,
    иначе весь результат в виде компактного JSON (разные модели отдают
    результат в разной форме).
    """
    # нестроковый `response` (например, 5) не отдаём как есть: сериализуем весь результат
    if isinstance(result, dict) and isinstance(result.get("response"), str):
        return result["response"]
    return json.dumps(result, ensure_ascii=False, separators=(",", ":"))

def shape_success(text: str, concise: bool) -> dict[str, Any]:
    if concise:
        return {"data": extract_number(text)}
    return {"response": text}

def shape_error(kind: ErrorKind, concise: bool) -> dict[str, Any]:
    body: dict[str, Any] = {"error": kind.message}
    if concise:
        body["data"] = None
    return body

def preflight_response() -> Response:
    return Response(status_code=204, headers=PREFLIGHT_HEADERS)

def success_response(text: str, concise: bool) -> JSONResponse:
    return JSONResponse(shape_success(text, concise), headers=CORS_HEADERS)

def error_response(kind: ErrorKind, concise: bool = False) -> Response:
    # ошибки клиента — простым текстом, внутренние — JSON
    if kind.is_client_error:
        return PlainTextResponse(kind.message, status_code=kind.status_code, headers=CORS_HEADERS)
    return JSONResponse(shape_error(kind, concise), status_code=kind.status_code, headers=CORS_HEADERS)
