"""
Configuration management using Pydantic Settings
"""
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from studystats.core.math.real_stats import DEFAULT_SMOOTHING_ALPHA


class Settings(BaseSettings):
    """Application settings (env prefix STUDYSTATS_)"""

    model_config = SettingsConfigDict(
        env_prefix="STUDYSTATS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Statistics
    smoothing_alpha: float = Field(
        default=DEFAULT_SMOOTHING_ALPHA,
        gt=0,
        lt=1,
        description="Smoothing factor for the efficiency trend",
    )

    # Recommendations
    min_sessions_for_recommendations: int = Field(
        default=3, ge=1, description="Sessions required before asking for recommendations"
    )
    recent_sessions_in_prompt: int = Field(
        default=5, ge=1, description="Latest sessions listed in the prompt"
    )
    ai_model: str = Field(
        default="google/gemini-2.5-flash", description="Chat completion model name"
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept 'debug', 'Info', ... and check the name"""
        level = v.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
