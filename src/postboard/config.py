"""Application configuration via environment variables.

Uses pydantic-settings to load config from env vars (and an optional
.env file). The token secrets and the access-token lifetime have no
defaults: the process refuses to start without them.

Learn: JWT_TOKEN_EXPIRATION accepts plain seconds ("900") or a short
duration string ("15m", "1h", "2d", "500ms"), the same notation most
JWT libraries use for expiresIn.
"""

import re
from datetime import timedelta

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DURATION_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(ms|s|m|h|d)?\s*$")
_UNIT_SECONDS = {"ms": 0.001, "s": 1, "m": 60, "h": 3600, "d": 86400}


def parse_duration(value) -> timedelta:
    """Parse seconds or a "<n><unit>" string into a timedelta."""
    if isinstance(value, timedelta):
        return value
    if isinstance(value, (int, float)):
        return timedelta(seconds=value)
    match = _DURATION_RE.match(str(value))
    if not match:
        raise ValueError(f"Invalid duration: {value!r}")
    amount, unit = match.groups()
    return timedelta(seconds=float(amount) * _UNIT_SECONDS[unit or "s"])


class Settings(BaseSettings):
    """All app configuration. Set via env vars or .env."""

    # Database
    database_uri: str = "mongodb://localhost:27017"
    database_name: str = "postboard"

    # Auth
    access_token_secret: str
    refresh_token_secret: str
    jwt_token_expiration: timedelta
    jwt_algorithm: str = "HS256"
    bcrypt_rounds: int = 10

    # Server
    environment: str = "development"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 4000

    # CORS
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("jwt_token_expiration", mode="before")
    @classmethod
    def _parse_expiration(cls, value):
        return parse_duration(value)

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Access and refresh tokens must not share a secret outside development."""
        if (
            self.environment != "development"
            and self.access_token_secret == self.refresh_token_secret
        ):
            raise ValueError(
                "ACCESS_TOKEN_SECRET and REFRESH_TOKEN_SECRET must differ in "
                "non-development environments. Generate one with: "
                'python -c "import secrets; print(secrets.token_urlsafe(32))"'
            )
        return self


# Singleton — import this everywhere
settings = Settings()
