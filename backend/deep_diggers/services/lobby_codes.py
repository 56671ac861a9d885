"""Short, human-typable lobby codes."""

import logging
import secrets
from collections.abc import Callable
from typing import TypeVar

from .errors import LobbyCodeExhausted

# Uppercase only, without 0/O and 1/I/L so codes read back unambiguously.
CODE_ALPHABET = "23456789ABCDEFGHJKMNPQRSTUVWXYZ"
DEFAULT_CODE_LENGTH = 4
CODE_RETRIES = 5

logger = logging.getLogger(__name__)

T = TypeVar("T")


def generate_code(length: int = DEFAULT_CODE_LENGTH) -> str:
    return "".join(secrets.choice(CODE_ALPHABET) for _ in range(length))


def normalize_code(code: str) -> str:
    return code.strip().upper()


def allocate_code(
    claim: Callable[[str], T | None],
    length: int = DEFAULT_CODE_LENGTH,
    retries: int = CODE_RETRIES,
) -> T:
    """
    Draw lobby codes until ``claim`` takes one.

    ``claim(code)`` returns the claimed result, or None when the code is
    already in use. The first draw is followed by at most ``retries``
    redraws; if every draw collides, LobbyCodeExhausted is raised.
    """
    for attempt in range(retries + 1):
        code = generate_code(length)
        claimed = claim(code)
        if claimed is not None:
            return claimed
        logger.info("[lobby_codes] Code %s taken (attempt %d)", code, attempt + 1)
    logger.warning("[lobby_codes] No free code after %d attempts (length=%d)", retries + 1, length)
    raise LobbyCodeExhausted(f"No free lobby code after {retries + 1} attempts")
