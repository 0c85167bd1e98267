# chat_gateway/routes.py
import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response
from .errors import ErrorKind, RequestError
from .inference_client import MODEL_ID, InferenceClient, get_inference_client
from .responses import error_response, extract_response_text, preflight_response, success_response
from .schemas import load_body, parse_messages

logger = logging.getLogger(__name__)

router = APIRouter()

MAX_TOKENS = 1000
TEMPERATURE = 0.3

# все методы, чтобы на не-POST отвечать своим 405
METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

@router.api_route("/{path:path}", methods=METHODS)
async def handle(request: Request, ai: InferenceClient = Depends(get_inference_client)) -> Response:
    if request.method == "OPTIONS":
        return preflight_response()

    if request.method != "POST":
        return error_response(ErrorKind.METHOD_NOT_ALLOWED)

    # читаем до валидации, чтобы и ошибки отдавать в concise-формате
    concise = "concise" in request.query_params

    try:
        content_type = request.headers.get("content-type") or ""
        if "application/json" not in content_type:
            raise RequestError(ErrorKind.INVALID_CONTENT_TYPE)

        body = load_body(await request.body())
        messages = parse_messages(body)

        result = await ai.run(
            MODEL_ID,
            {
                "messages": [m.model_dump() for m in messages],
                "max_tokens": MAX_TOKENS,
                "temperature": TEMPERATURE,
            },
        )
        return success_response(extract_response_text(result), concise)
    except RequestError as e:
        return error_response(e.kind, concise)
    except Exception as e:
        logger.exception("Processing error: %s", e)
        return error_response(ErrorKind.INTERNAL_ERROR, concise)
