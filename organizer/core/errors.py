"""Domain errors raised by the organizer services.

The HTTP layer maps each kind to a status code; services never raise
``HTTPException`` or leak raw database exceptions.
"""

from typing import Iterable, List, Optional


class OrganizerError(Exception):
    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"detail": self.message, "error": self.kind}


class NotFoundError(OrganizerError):
    """The target of an update does not exist."""

    kind = "not_found"

    def __init__(self, entity: str, entity_id: int):
        super().__init__(f"{entity.capitalize()} with id {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class DanglingReferenceError(OrganizerError):
    """A create/update points at ids that do not resolve.

    ``missing_ids`` lists every unresolved id, not just the first one.
    """

    kind = "dangling_reference"

    def __init__(self, entity: str, missing_ids: Iterable[int]):
        self.entity = entity
        self.missing_ids: List[int] = sorted(set(missing_ids))
        noun = entity if len(self.missing_ids) == 1 else f"{entity}s"
        ids = ", ".join(str(i) for i in self.missing_ids)
        super().__init__(f"Referenced {noun} not found: {ids}")

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["entity"] = self.entity
        data["missing_ids"] = self.missing_ids
        return data


class ConflictError(OrganizerError):
    kind = "conflict"


class InvalidError(OrganizerError):
    kind = "invalid"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field
