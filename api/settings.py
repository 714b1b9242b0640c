"""
API settings.

Values are read from the environment; a `.env` file in the project root is
loaded first when present.

Environment variables:
- LOG_LEVEL: Root logging level (default: INFO)
- ALLOWED_ORIGINS: Comma-separated CORS origins (default: *)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


def _split_origins(raw: str) -> List[str]:
    origins = [origin.strip() for origin in raw.split(",")]
    return [origin for origin in origins if origin] or ["*"]


ALLOWED_ORIGINS: List[str] = _split_origins(os.getenv("ALLOWED_ORIGINS", "*"))

__all__ = ["ALLOWED_ORIGINS", "LOG_LEVEL"]
