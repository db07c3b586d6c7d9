from datetime import datetime
from typing import Any, Iterable, List, Optional

from ..core.errors import InvalidError


def clean_text(value: Optional[str]) -> Optional[str]:
    """Optional free-text fields: blank strings are stored as NULL."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def require_text(value: Optional[str], field: str) -> str:
    if value is None or not value.strip():
        raise InvalidError(f"{field} must not be empty", field=field)
    return value.strip()


def unique_ids(ids: Iterable[int]) -> List[int]:
    # order of first occurrence is kept
    return list(dict.fromkeys(ids))


def apply_completion(entity: Any, is_completed: Optional[bool], now: datetime) -> None:
    """Keep ``completed_at`` set exactly when ``is_completed`` is true."""
    if is_completed is None:
        raise InvalidError("is_completed must be true or false", field="is_completed")
    if is_completed:
        if not entity.is_completed or entity.completed_at is None:
            entity.completed_at = now
    else:
        entity.completed_at = None
    entity.is_completed = is_completed
