import structlog
from sqlmodel import Session

from ..core.errors import NotFoundError
from ..db.session import atomic
from ..models import Project
from ..models.base import local_now
from ..schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from .integrity import clear_project_references, require_area
from .normalize import apply_completion, clean_text, require_text

logger = structlog.get_logger()


def create_project(session: Session, project_create: ProjectCreate) -> ProjectRead:
    name = require_text(project_create.name, "name")
    require_area(session, project_create.area_id)

    project = Project(
        name=name,
        description=clean_text(project_create.description),
        area_id=project_create.area_id,
        color=clean_text(project_create.color),
        is_completed=False,
        completed_at=None,
    )
    with atomic(session):
        session.add(project)
    session.refresh(project)
    logger.info("project_created", project_id=project.id, area_id=project.area_id)
    return ProjectRead.model_validate(project)


def update_project(session: Session, project_id: int, project_update: ProjectUpdate) -> ProjectRead:
    project = session.get(Project, project_id)
    if project is None:
        raise NotFoundError("project", project_id)

    data = project_update.model_dump(exclude_unset=True)
    changes = {}
    if "name" in data:
        changes["name"] = require_text(data["name"], "name")
    if "description" in data:
        changes["description"] = clean_text(data["description"])
    if "color" in data:
        changes["color"] = clean_text(data["color"])
    if "area_id" in data:
        require_area(session, data["area_id"])
        changes["area_id"] = data["area_id"]

    now = local_now()
    with atomic(session):
        for key, value in changes.items():
            setattr(project, key, value)
        if "is_completed" in data:
            apply_completion(project, data["is_completed"], now)
        project.updated_at = now
        session.add(project)
    session.refresh(project)
    logger.info("project_updated", project_id=project_id, fields=sorted(data))
    return ProjectRead.model_validate(project)


def delete_project(session: Session, project_id: int) -> None:
    project = session.get(Project, project_id)
    if project is None:
        logger.debug("project_delete_skipped", project_id=project_id)
        return
    with atomic(session):
        cleared_tasks = clear_project_references(session, project_id)
        session.delete(project)
    logger.info("project_deleted", project_id=project_id, cleared_tasks=cleared_tasks)
