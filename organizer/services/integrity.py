"""Referential integrity rules.

Writes that *set* a reference must point at an existing row; the check runs
before anything is written. Deleting a referenced area or project never
deletes dependents, it clears their reference instead.
"""

from typing import Dict, List, Optional, Tuple

from sqlalchemy import update
from sqlmodel import Session, select

from ..core.errors import DanglingReferenceError
from ..models import Area, Project, Tag, Task
from .normalize import unique_ids


def require_area(session: Session, area_id: Optional[int]) -> None:
    if area_id is None:
        return
    if session.get(Area, area_id) is None:
        raise DanglingReferenceError("area", [area_id])


def require_project(session: Session, project_id: Optional[int]) -> None:
    if project_id is None:
        return
    if session.get(Project, project_id) is None:
        raise DanglingReferenceError("project", [project_id])


def require_tags(session: Session, tag_ids: List[int]) -> List[Tag]:
    """Resolve every id or fail naming all of the missing ones at once."""
    wanted = unique_ids(tag_ids)
    if not wanted:
        return []
    found: Dict[int, Tag] = {
        tag.id: tag for tag in session.exec(select(Tag).where(Tag.id.in_(wanted))).all()
    }
    missing = [tag_id for tag_id in wanted if tag_id not in found]
    if missing:
        raise DanglingReferenceError("tag", missing)
    return [found[tag_id] for tag_id in wanted]


def clear_area_references(session: Session, area_id: int) -> Tuple[int, int]:
    """Null ``area_id`` on projects and tasks; returns (projects, tasks) touched."""
    projects = session.execute(
        update(Project).where(Project.area_id == area_id).values(area_id=None)
    )
    tasks = session.execute(
        update(Task).where(Task.area_id == area_id).values(area_id=None)
    )
    return projects.rowcount, tasks.rowcount


def clear_project_references(session: Session, project_id: int) -> int:
    # area_id on the task is left as it is
    tasks = session.execute(
        update(Task).where(Task.project_id == project_id).values(project_id=None)
    )
    return tasks.rowcount
