"""Read views over tasks, projects, areas and tags.

Every task view returns ``TaskRead`` objects with their tags attached; the
tags of a result batch are fetched with a single lookup.
"""

from datetime import datetime, timedelta
from typing import List, Optional, Sequence, Tuple

from sqlmodel import Session, select, desc

from ..core.errors import NotFoundError
from ..models import Area, Project, Tag, Task
from ..models.base import local_now, to_local_naive
from ..schemas.area import AreaRead
from ..schemas.project import ProjectRead
from ..schemas.tag import TagRead
from ..schemas.task import TaskRead
from .tag_links import tags_by_task


def to_task_read(task: Task, tags: Sequence[Tag]) -> TaskRead:
    data = task.model_dump()
    data["tags"] = [TagRead.model_validate(tag) for tag in tags]
    return TaskRead.model_validate(data)


def enrich_tasks(session: Session, tasks: Sequence[Task]) -> List[TaskRead]:
    lookup = tags_by_task(session, [task.id for task in tasks])
    return [to_task_read(task, lookup.get(task.id, [])) for task in tasks]


def _newest_first(query):
    return query.order_by(desc(Task.created_at), desc(Task.id))


def get_tasks(session: Session) -> List[TaskRead]:
    tasks = session.exec(_newest_first(select(Task))).all()
    return enrich_tasks(session, tasks)


def get_task(session: Session, task_id: int) -> TaskRead:
    task = session.get(Task, task_id)
    if task is None:
        raise NotFoundError("task", task_id)
    return enrich_tasks(session, [task])[0]


def get_tasks_by_area(session: Session, area_id: int) -> List[TaskRead]:
    # Unknown area ids just match nothing
    tasks = session.exec(_newest_first(select(Task).where(Task.area_id == area_id))).all()
    return enrich_tasks(session, tasks)


def get_tasks_by_project(session: Session, project_id: int) -> List[TaskRead]:
    tasks = session.exec(_newest_first(select(Task).where(Task.project_id == project_id))).all()
    return enrich_tasks(session, tasks)


def today_window(now: Optional[datetime] = None) -> Tuple[datetime, datetime]:
    """Local calendar day containing ``now`` as a half-open ``[start, end)`` pair."""
    now = to_local_naive(now) if now is not None else local_now()
    start = now.replace(hour=0, minute=0, second=0, microsecond=0)
    return start, start + timedelta(days=1)


def get_today_tasks(session: Session, now: Optional[datetime] = None) -> List[TaskRead]:
    start, end = today_window(now)
    tasks = session.exec(
        select(Task)
        .where(
            Task.scheduled_date != None,  # noqa: E711
            Task.scheduled_date >= start,
            Task.scheduled_date < end,
        )
        .order_by(Task.scheduled_date, Task.id)
    ).all()
    return enrich_tasks(session, tasks)


def get_areas(session: Session) -> List[AreaRead]:
    areas = session.exec(select(Area).order_by(Area.id)).all()
    return [AreaRead.model_validate(area) for area in areas]


def get_projects(session: Session) -> List[ProjectRead]:
    projects = session.exec(select(Project).order_by(Project.id)).all()
    return [ProjectRead.model_validate(project) for project in projects]


def get_projects_by_area(session: Session, area_id: int) -> List[ProjectRead]:
    projects = session.exec(
        select(Project).where(Project.area_id == area_id).order_by(Project.id)
    ).all()
    return [ProjectRead.model_validate(project) for project in projects]


def get_tags(session: Session) -> List[TagRead]:
    tags = session.exec(select(Tag).order_by(Tag.name)).all()
    return [TagRead.model_validate(tag) for tag in tags]
