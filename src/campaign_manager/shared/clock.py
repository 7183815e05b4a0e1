"""
Identifier and timestamp providers.
"""

from datetime import datetime, timezone
from typing import Callable
from uuid import uuid4

Clock = Callable[[], str]
IdFactory = Callable[[], str]


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, e.g. ``2024-03-01T12:00:00.000Z``."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def new_id() -> str:
    """Generate a new opaque record identifier."""
    return str(uuid4())
