from datetime import datetime, timezone
from typing import Protocol


class TimeSource(Protocol):
    def now(self) -> datetime: ...


class SystemTimeSource:
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedTimeSource:
    """Always reports the same instant; used for reproducible runs and tests."""

    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self.instant = instant

    def now(self) -> datetime:
        return self.instant
