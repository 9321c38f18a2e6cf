"""JWT settings: the RS256 key pair, issuer, role claim and demo tokens."""

import logging
from pathlib import Path
from typing import Optional

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


def _read_pem(path: str) -> Optional[str]:
    pem_path = Path(path).resolve()
    if not pem_path.is_file():
        return None
    try:
        content = pem_path.read_text().strip()
    except OSError as e:
        logger.error("Cannot read %s: %s", pem_path.name, e)
        return None
    if content:
        logger.info("Using JWT key from %s", pem_path.name)
    return content or None


class AuthSettings(BaseSettings):
    """Key material for verifying bearer tokens and signing demo tokens.

    A PEM file at ``JWT_*_KEY_PATH`` takes precedence over the matching
    ``JWT_*_KEY`` variable.

    Security Note:
        - ``DEMO_TOKENS_ENABLED`` lets anyone mint a token for any role; turn
          it off outside a classroom.
        - Keep the PEM files readable by the service user only.
    """

    JWT_PRIVATE_KEY: SecretStr = SecretStr("")
    JWT_PUBLIC_KEY: str = ""
    JWT_PRIVATE_KEY_PATH: str = "private.pem"
    JWT_PUBLIC_KEY_PATH: str = "public.pem"
    JWT_ISSUER: str = "https://bac-lab.example.org"
    JWT_ROLES_CLAIM: str = "groups"
    JWT_DURATION_MINUTES: int = Field(ge=1, default=60)

    DEMO_TOKENS_ENABLED: bool = True

    @model_validator(mode="after")
    def _resolve_jwt_keys(self) -> "AuthSettings":
        """Apply PEM overrides, then require both keys.

        Raises:
            ValueError: If either key is still empty.
        """
        private_pem = _read_pem(self.JWT_PRIVATE_KEY_PATH)
        if private_pem:
            self.JWT_PRIVATE_KEY = SecretStr(private_pem)
        public_pem = _read_pem(self.JWT_PUBLIC_KEY_PATH)
        if public_pem:
            self.JWT_PUBLIC_KEY = public_pem

        missing = [
            name
            for name, value in (
                ("JWT_PRIVATE_KEY", self.JWT_PRIVATE_KEY.get_secret_value()),
                ("JWT_PUBLIC_KEY", self.JWT_PUBLIC_KEY),
            )
            if not value
        ]
        if missing:
            error_msg = (
                f"Missing {', '.join(missing)}: set the variable or provide "
                f"{self.JWT_PRIVATE_KEY_PATH} / {self.JWT_PUBLIC_KEY_PATH}"
            )
            logger.error(error_msg)
            raise ValueError(error_msg)
        return self
