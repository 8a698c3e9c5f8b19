"""Small standalone helpers."""

import asyncio
import json
import logging
import random
import uuid
from collections.abc import Mapping
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def generate_uuid() -> str:
    """Return a random RFC 4122 version 4 UUID as a lowercase hyphenated string.

    Uses the operating system's random source. If that is unavailable, falls
    back to :mod:`random`, which is NOT cryptographically secure; a warning
    is logged when this happens.
    """
    try:
        return str(uuid.uuid4())
    except NotImplementedError:
        logger.warning("os.urandom unavailable, generating UUID from an insecure source")
        return str(_insecure_uuid4())


def _insecure_uuid4() -> uuid.UUID:
    return uuid.UUID(int=random.getrandbits(128), version=4)


def random_in_range(lo: int, hi: int) -> int:
    """Random integer N with ``lo <= N <= hi``. Not for security use."""
    return random.randint(lo, hi)


def capitalize(text: str) -> str:
    """Upper-case the first character and lower-case the rest."""
    return text[:1].upper() + text[1:].lower()


async def sleep(seconds: float) -> None:
    """Complete after *seconds*. Cancel the awaiting task to abort."""
    await asyncio.sleep(seconds)


def is_empty_object(value: Mapping[str, Any] | None) -> bool:
    """True for an empty mapping; False for ``None`` or a non-empty mapping."""
    return value is not None and len(value) == 0


def safe_json_parse(text: str | bytes, fallback: T) -> Any | T:
    """Parse JSON *text*, or return *fallback* if it cannot be parsed.

    Never raises: malformed JSON, non-string input and invalid encodings all
    produce *fallback*.
    """
    try:
        return json.loads(text)
    except (ValueError, TypeError, RecursionError) as exc:
        logger.debug("JSON parse failed, using fallback: %s", exc)
        return fallback
