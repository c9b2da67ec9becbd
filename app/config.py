from pydantic_settings import BaseSettings
from typing import List, Optional


DEFAULT_CORS_ORIGIN = "https://artinamr.xyz"


class Settings(BaseSettings):
    app_name: str = "Science Exam Question Proxy"
    debug: bool = False

    # OpenAI settings
    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4o-mini"
    openai_base_url: Optional[str] = None
    openai_timeout: float = 60.0

    # Application settings
    log_level: str = "INFO"
    cors_fallback_origin: str = DEFAULT_CORS_ORIGIN
    cors_allowed_origins: List[str] = [
        DEFAULT_CORS_ORIGIN,
        "http://localhost",
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5500",
        "http://127.0.0.1:8788",
        "http://localhost:8788",
    ]

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()


def get_settings() -> Settings:
    """Dependency returning the process-wide settings."""
    return settings
