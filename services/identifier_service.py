"""
Lead identifier generation.

Lead ids are opaque random UUID4 strings drawn from the operating system's
CSPRNG. A missing entropy source is fatal for the invocation: an absent or
predictable id would break uniqueness, so there is no fallback.
"""

from __future__ import annotations

import logging
import uuid
from typing import Callable

logger = logging.getLogger(__name__)

# Any zero-argument callable returning a fresh id (tests inject deterministic ones).
LeadIdGenerator = Callable[[], str]


class IdentifierGenerationError(RuntimeError):
    """Raised when no secure random source is available to mint a lead id."""
    pass


def generate_lead_id() -> str:
    """
    Generate a new globally unique lead id.

    Raises:
        IdentifierGenerationError: If the OS entropy source is unavailable
    """
    try:
        return str(uuid.uuid4())
    except (NotImplementedError, OSError) as e:
        logger.error(
            "Secure random source unavailable, cannot generate lead id",
            extra={"error": str(e)},
        )
        raise IdentifierGenerationError(f"Failed to generate lead id: {e}") from e


__all__ = [
    "IdentifierGenerationError",
    "LeadIdGenerator",
    "generate_lead_id",
]
