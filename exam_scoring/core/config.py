"""
Application configuration management with environment-based settings.
"""
import json
from typing import Annotated, List, Optional
from functools import lru_cache
from pydantic_settings import BaseSettings, NoDecode
from pydantic import Field, field_validator

class Settings(BaseSettings):
    """Main application settings."""

    # ============= Application Settings =============
    APP_NAME: str = "Exam Scoring Engine"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = "Grades exam attempts into detailed performance reports"
    DEBUG: bool = Field(default=False)
    ENVIRONMENT: str = Field(default="development")
    API_V1_PREFIX: str = "/v1"
    DOCS_URL: Optional[str] = "/docs"

    # CORS Settings
    CORS_ORIGINS: Annotated[List[str], NoDecode] = ["http://localhost:3000"]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: List[str] = ["*"]
    CORS_ALLOW_HEADERS: List[str] = ["*"]

    # ============= Scoring Settings =============
    DEFAULT_PASSING_THRESHOLD: float = Field(default=65, ge=0, le=100)
    STUDY_RECOMMENDATION_LIMIT: int = Field(default=3, ge=1)

    # ============= Monitoring Settings =============
    SENTRY_DSN: Optional[str] = None
    SENTRY_ENVIRONMENT: Optional[str] = None
    SENTRY_TRACES_SAMPLE_RATE: float = 0.1

    PROMETHEUS_ENABLED: bool = True

    # ============= Logging Settings =============
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str):
            if v.startswith("["):
                return json.loads(v)
            return [i.strip() for i in v.split(",") if i.strip()]
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    def is_production(self) -> bool:
        """Check if running in production."""
        return self.ENVIRONMENT.lower() == "production"

@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

settings = get_settings()
