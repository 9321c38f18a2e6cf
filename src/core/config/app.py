"""Service identity, runtime and logging settings."""

from typing import List, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """Name, version, server options and CORS origins of the lab.

    Security Note:
        - Restrict ``ALLOWED_ORIGINS`` before exposing the lab beyond
          localhost (OWASP A05:2021).
    """

    PROJECT_NAME: str = "bac-lab"
    VERSION: str = "1.0.1"
    DESCRIPTION: str = (
        "Educational lab for Broken Access Control (OWASP A01:2021) "
        "with JWT authentication and role-based object authorization."
    )
    APP_ENV: str = "development"
    DEBUG: bool = False

    API_HOST: str = "0.0.0.0"
    API_PORT: int = Field(ge=1, le=65535, default=8080)
    API_WORKERS: int = Field(ge=1, default=1)
    RELOAD: bool = False

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    ALLOWED_ORIGINS: Union[str, List[str]] = Field(default="http://localhost:8080")
    DEFAULT_LANGUAGE: str = "en"

    @field_validator("ALLOWED_ORIGINS", mode="before")
    @classmethod
    def split_origins(cls, v: Union[str, List[str]]) -> List[str]:
        """Accept ``"a, b"`` as well as a list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v
