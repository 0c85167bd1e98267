from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    CLOUDFLARE_ACCOUNT_ID: str
    CLOUDFLARE_API_TOKEN: str
    AI_BASE_URL: str | None = None  # по умолчанию OpenAI-совместимый эндпоинт Workers AI
    AI_TIMEOUT: float | None = None  # секунды, передаётся в клиент openai

    LOG_LEVEL: str = "INFO"

    HOST: str = "0.0.0.0"
    PORT: int = 8000

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

settings = Settings()
