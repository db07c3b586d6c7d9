import structlog
from sqlmodel import Session

from ..core.errors import NotFoundError
from ..db.session import atomic
from ..models import Area
from ..models.base import local_now
from ..schemas.area import AreaCreate, AreaRead, AreaUpdate
from .integrity import clear_area_references
from .normalize import clean_text, require_text

logger = structlog.get_logger()


def create_area(session: Session, area_create: AreaCreate) -> AreaRead:
    area = Area(
        name=require_text(area_create.name, "name"),
        color=clean_text(area_create.color),
    )
    with atomic(session):
        session.add(area)
    session.refresh(area)
    logger.info("area_created", area_id=area.id)
    return AreaRead.model_validate(area)


def update_area(session: Session, area_id: int, area_update: AreaUpdate) -> AreaRead:
    area = session.get(Area, area_id)
    if area is None:
        raise NotFoundError("area", area_id)

    changes = {}
    data = area_update.model_dump(exclude_unset=True)
    if "name" in data:
        changes["name"] = require_text(data["name"], "name")
    if "color" in data:
        changes["color"] = clean_text(data["color"])

    with atomic(session):
        for key, value in changes.items():
            setattr(area, key, value)
        area.updated_at = local_now()
        session.add(area)
    session.refresh(area)
    logger.info("area_updated", area_id=area_id, fields=sorted(changes))
    return AreaRead.model_validate(area)


def delete_area(session: Session, area_id: int) -> None:
    """Delete the area; projects and tasks that pointed at it keep living with ``area_id`` cleared."""
    area = session.get(Area, area_id)
    if area is None:
        logger.debug("area_delete_skipped", area_id=area_id)
        return
    with atomic(session):
        cleared_projects, cleared_tasks = clear_area_references(session, area_id)
        session.delete(area)
    logger.info(
        "area_deleted",
        area_id=area_id,
        cleared_projects=cleared_projects,
        cleared_tasks=cleared_tasks,
    )
