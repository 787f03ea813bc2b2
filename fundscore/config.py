"""Runtime settings for the calculator, loaded from FUNDSCORE_* environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

FIELD_POLICIES = ("clamp", "reject", "permissive")

DEFAULT_PAGE_TITLE = "Startup Funding Score Calculator"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FUNDSCORE_",
        extra="ignore",
    )

    field_policy: Literal["clamp", "reject", "permissive"] = Field(
        default="clamp", description="Out-of-range field handling: clamp, reject or permissive"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Logging level for the app"
    )
    page_title: str = Field(default=DEFAULT_PAGE_TITLE, description="Streamlit page title")

    @field_validator("field_policy", mode="before")
    @classmethod
    def _lower_policy(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v):
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("page_title", mode="before")
    @classmethod
    def _default_title(cls, v):
        if isinstance(v, str) and not v.strip():
            return DEFAULT_PAGE_TITLE
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance
    """
    return Settings()
