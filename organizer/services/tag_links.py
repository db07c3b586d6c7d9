"""Task <-> Tag association rows."""

from collections import defaultdict
from typing import Dict, Iterable, List

from sqlalchemy import delete
from sqlmodel import Session, select

from ..models import Tag, TaskTag
from .normalize import unique_ids


def add_task_links(session: Session, task_id: int, tag_ids: Iterable[int]) -> None:
    for tag_id in unique_ids(tag_ids):
        session.add(TaskTag(task_id=task_id, tag_id=tag_id))
    session.flush()


def replace_task_tags(session: Session, task_id: int, tag_ids: Iterable[int]) -> None:
    """Drop every existing link of the task, then insert one row per id."""
    drop_task_links(session, task_id)
    add_task_links(session, task_id, tag_ids)


def drop_task_links(session: Session, task_id: int) -> int:
    result = session.execute(delete(TaskTag).where(TaskTag.task_id == task_id))
    return result.rowcount


def drop_tag_links(session: Session, tag_id: int) -> int:
    result = session.execute(delete(TaskTag).where(TaskTag.tag_id == tag_id))
    return result.rowcount


def tags_by_task(session: Session, task_ids: Iterable[int]) -> Dict[int, List[Tag]]:
    """
    Tags for exactly the given tasks, keyed by task id.

    One query for the whole batch; tasks without links are simply absent
    from the mapping, callers default to an empty list.
    """
    ids = list(task_ids)
    lookup: Dict[int, List[Tag]] = defaultdict(list)
    if not ids:
        return lookup
    rows = session.exec(
        select(TaskTag.task_id, Tag)
        .join(Tag, Tag.id == TaskTag.tag_id)
        .where(TaskTag.task_id.in_(ids))
        .order_by(TaskTag.task_id, Tag.id)
    ).all()
    for task_id, tag in rows:
        lookup[task_id].append(tag)
    return lookup
