import os
import re
from datetime import timedelta
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

_DURATION_PATTERN = re.compile(r"^\s*(\d+)\s*([smhd]?)\s*$")
_DURATION_UNITS = {"": "seconds", "s": "seconds", "m": "minutes", "h": "hours", "d": "days"}


class Settings:
    """Centralised application configuration sourced from environment variables."""

    def __init__(self) -> None:
        load_dotenv()
        self.environment = os.getenv("APP_ENV", "development").strip().lower()
        prefix = os.getenv("API_PREFIX", "/api/v1").strip().strip("/")
        self.api_prefix = f"/{prefix}" if prefix else ""
        self.host = os.getenv("HOST", "0.0.0.0")
        self.port = self._get_int("PORT", default=3000)
        self.database_path = Path(os.getenv("DATABASE_PATH", "data/accounts.db")).resolve()
        self.jwt_secret = os.getenv("JWT_SECRET", "change-me")
        self.jwt_refresh_secret = os.getenv("JWT_REFRESH_SECRET", "change-me-refresh")
        self.jwt_expires_in = self._get_duration("JWT_EXPIRES_IN", default="24h")
        self.jwt_refresh_expires_in = self._get_duration("JWT_REFRESH_EXPIRES_IN", default="7d")
        self.bcrypt_rounds = self._get_int("BCRYPT_ROUNDS", default=10)
        origins = os.getenv("CORS_ALLOW_ORIGINS")
        if origins:
            self.cors_allow_origins = [item.strip() for item in origins.split(",") if item.strip()]
        else:
            self.cors_allow_origins = ["*"]

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @staticmethod
    def _get_int(key: str, default: Optional[int] = None) -> int:
        value = os.getenv(key)
        if value is None:
            if default is None:
                raise RuntimeError(f"Missing required environment variable: {key}")
            return default
        try:
            return int(value)
        except ValueError as exc:
            raise RuntimeError(f"Environment variable {key} must be an integer") from exc

    @staticmethod
    def _get_duration(key: str, default: str) -> timedelta:
        """Parse ``<n>[s|m|h|d]`` durations such as ``15m`` or ``7d``."""
        value = os.getenv(key, default)
        match = _DURATION_PATTERN.match(value)
        if not match:
            raise RuntimeError(f"Environment variable {key} must be a duration like 30m, 24h or 7d")
        amount, unit = match.groups()
        return timedelta(**{_DURATION_UNITS[unit]: int(amount)})
