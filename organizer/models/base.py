from datetime import datetime
from typing import Optional


def local_now() -> datetime:
    """Current local wall-clock time, naive (the storage convention for every timestamp)."""
    return datetime.now()


def to_local_naive(value: Optional[datetime]) -> Optional[datetime]:
    # Aware values are shifted into local time before the offset is dropped
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)
