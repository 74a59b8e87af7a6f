"""Injectable collaborators for plugins.

Provides:
- Clock / SystemClock: source of timestamps for audit results
- IDGenerator / UUIDGenerator: unique names for per-audit secrets
"""

from datetime import datetime, timezone
from typing import Protocol, runtime_checkable
from uuid import uuid4


@runtime_checkable
class Clock(Protocol):
    """Source of the current time."""

    def now(self) -> datetime:
        ...


@runtime_checkable
class IDGenerator(Protocol):
    """Source of globally unique identifiers."""

    def generate_id(self) -> str:
        ...


class SystemClock:
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class UUIDGenerator:
    """Random UUID4 identifiers, valid as Kubernetes object names."""

    def generate_id(self) -> str:
        return str(uuid4())
