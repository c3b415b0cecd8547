import json
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode


class ConfigurationError(RuntimeError):
    """Raised when required settings are missing at startup."""


class Settings(BaseSettings):
    # Stage 1: Firecrawl scrape of a job board search page
    firecrawl_api_key: str = ""
    firecrawl_api_url: str = "https://api.firecrawl.dev/v0/scrape"
    job_search_url_template: str = "https://www.jobkorea.co.kr/Search/?Stext={query}"
    market_data_max_chars: int = 15000

    # Stage 2: Gemini comparison
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    analysis_language: str = "Korean"

    request_timeout_seconds: float = 30.0
    max_upload_size_mb: int = 5
    cors_origins: Annotated[list[str], NoDecode] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    log_level: str = "INFO"
    debug: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_cors_origins(cls, value):
        """Accept CORS_ORIGINS as comma-separated string or JSON list."""
        if not isinstance(value, str):
            return value
        if value.startswith("["):
            return json.loads(value)
        return [o.strip() for o in value.split(",") if o.strip()]

    def require_pipeline_settings(self) -> None:
        """Fail fast if any upstream endpoint or credential is blank."""
        required = {
            "FIRECRAWL_API_KEY": self.firecrawl_api_key,
            "FIRECRAWL_API_URL": self.firecrawl_api_url,
            "GEMINI_API_KEY": self.gemini_api_key,
            "GEMINI_MODEL": self.gemini_model,
        }
        missing = [name for name, value in required.items() if not value.strip()]
        if missing:
            raise ConfigurationError(f"Missing required settings: {', '.join(missing)}")


settings = Settings()
