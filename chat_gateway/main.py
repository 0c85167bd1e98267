import logging
import sys
import uvicorn
from fastapi import FastAPI, Request
from .routes import router as api_router
from .responses import CORS_HEADERS
from .settings import settings

def setup_logging(level: str = settings.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

setup_logging()

# без /docs и /openapi.json: catch-all маршрут отвечает на любой путь
app = FastAPI(title="Chat Gateway (Workers AI)", docs_url=None, redoc_url=None, openapi_url=None)

# Origin-заголовок нужен на любом ответе, включая 405 от самого Starlette
@app.middleware("http")
async def cors_origin(request: Request, call_next):
    response = await call_next(request)
    for key, value in CORS_HEADERS.items():
        response.headers.setdefault(key, value)
    return response

app.include_router(api_router)

def run() -> None:
    uvicorn.run("chat_gateway.main:app", host=settings.HOST, port=settings.PORT)

if __name__ == "__main__":
    run()
