"""Task mutations.

Every reference (project, area, tags) is resolved before the first write, and
each call commits once, so a failing create or update leaves nothing behind.
"""

import structlog
from sqlmodel import Session

from ..core.errors import NotFoundError
from ..db.session import atomic
from ..models import Task
from ..models.base import local_now, to_local_naive
from ..schemas.task import TaskCreate, TaskRead, TaskUpdate
from .integrity import require_area, require_project, require_tags
from .normalize import apply_completion, clean_text, require_text
from .queries import enrich_tasks, to_task_read
from .tag_links import add_task_links, drop_task_links, replace_task_tags

logger = structlog.get_logger()

DATE_FIELDS = ("due_date", "deadline_date", "scheduled_date")


def create_task(session: Session, task_create: TaskCreate) -> TaskRead:
    title = require_text(task_create.title, "title")
    require_project(session, task_create.project_id)
    require_area(session, task_create.area_id)
    tags = require_tags(session, task_create.tag_ids or [])

    task = Task(
        title=title,
        notes=clean_text(task_create.notes),
        project_id=task_create.project_id,
        area_id=task_create.area_id,
        due_date=to_local_naive(task_create.due_date),
        deadline_date=to_local_naive(task_create.deadline_date),
        scheduled_date=to_local_naive(task_create.scheduled_date),
        priority=task_create.priority,
        is_completed=False,
        completed_at=None,
    )
    with atomic(session):
        session.add(task)
        # the id is needed for the link rows
        session.flush()
        add_task_links(session, task.id, [tag.id for tag in tags])
    session.refresh(task)
    logger.info("task_created", task_id=task.id, tag_count=len(tags))
    return to_task_read(task, sorted(tags, key=lambda tag: tag.id))


def update_task(session: Session, task_id: int, task_update: TaskUpdate) -> TaskRead:
    """
    Partial update: only fields set on ``task_update`` change.

    ``tag_ids`` (even empty) replaces the whole tag set; leaving it unset keeps
    the current links.
    """
    task = session.get(Task, task_id)
    if task is None:
        raise NotFoundError("task", task_id)

    data = task_update.model_dump(exclude_unset=True)
    changes = {}
    if "title" in data:
        changes["title"] = require_text(data["title"], "title")
    if "notes" in data:
        changes["notes"] = clean_text(data["notes"])
    if "project_id" in data:
        require_project(session, data["project_id"])
        changes["project_id"] = data["project_id"]
    if "area_id" in data:
        require_area(session, data["area_id"])
        changes["area_id"] = data["area_id"]
    for field in DATE_FIELDS:
        if field in data:
            changes[field] = to_local_naive(data[field])
    if "priority" in data:
        changes["priority"] = data["priority"]

    tag_ids = None
    if "tag_ids" in data:
        tag_ids = [tag.id for tag in require_tags(session, data["tag_ids"] or [])]

    now = local_now()
    with atomic(session):
        for key, value in changes.items():
            setattr(task, key, value)
        if "is_completed" in data:
            apply_completion(task, data["is_completed"], now)
        task.updated_at = now
        session.add(task)
        if tag_ids is not None:
            replace_task_tags(session, task_id, tag_ids)
    session.refresh(task)
    logger.info(
        "task_updated",
        task_id=task_id,
        fields=sorted(data),
        tags_replaced=tag_ids is not None,
    )
    return enrich_tasks(session, [task])[0]


def delete_task(session: Session, task_id: int) -> None:
    task = session.get(Task, task_id)
    if task is None:
        logger.debug("task_delete_skipped", task_id=task_id)
        return
    with atomic(session):
        links = drop_task_links(session, task_id)
        session.delete(task)
    logger.info("task_deleted", task_id=task_id, removed_links=links)
