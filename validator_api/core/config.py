"""Application configuration loaded from environment variables.

  - TGA_BASE_URL       → public training registry scraped for unit details
  - USE_MOCK_FALLBACK  → serve built-in mock units when the registry is down
  - COVERAGE_THRESHOLD → fraction of a criterion's words that must appear
"""

from __future__ import annotations

import os


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    # training.gov.au lookup
    TGA_BASE_URL: str = os.getenv("TGA_BASE_URL", "https://training.gov.au")
    TGA_TIMEOUT_SECONDS: float = float(os.getenv("TGA_TIMEOUT_SECONDS", "15"))
    USE_MOCK_FALLBACK: bool = _env_bool("USE_MOCK_FALLBACK", True)

    # Scoring
    COVERAGE_THRESHOLD: float = float(os.getenv("COVERAGE_THRESHOLD", "0.35"))

    # HTTP
    CORS_ORIGINS: list[str] = [
        o.strip()
        for o in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
        if o.strip()
    ]
    PORT: int = int(os.getenv("PORT", "5050"))

    # Request limits
    MAX_UPLOAD_SIZE_MB: int = 25


settings = Settings()
