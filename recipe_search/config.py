"""Centralized configuration loading.

Loads environment variables once and provides a typed Settings object
for the rest of the codebase. Values may also come from a local .env file.
"""

import os
from dataclasses import dataclass, field
from typing import Optional
from dotenv import load_dotenv


# Load .env once at import time
load_dotenv()


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@dataclass
class Settings:
    # Edamam Recipe Search API
    edamam_app_id: Optional[str] = field(default_factory=lambda: os.getenv("EDAMAM_APP_ID"))
    edamam_app_key: Optional[str] = field(default_factory=lambda: os.getenv("EDAMAM_APP_KEY"))
    edamam_base_url: str = field(
        default_factory=lambda: os.getenv(
            "EDAMAM_BASE_URL", "https://api.edamam.com/api/recipes/v2"
        )
    )
    request_timeout: float = field(
        default_factory=lambda: _float_env("EDAMAM_REQUEST_TIMEOUT", 10.0)
    )

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("RS_LOG_LEVEL", "INFO"))

    @property
    def has_credentials(self) -> bool:
        return bool(self.edamam_app_id and self.edamam_app_key)


def get_settings() -> Settings:
    """Return a new Settings instance (reads the environment at call time)."""
    return Settings()
