import structlog
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from ..core.errors import ConflictError
from ..db.session import atomic
from ..models import Tag
from ..schemas.tag import TagCreate, TagRead
from .normalize import clean_text, require_text
from .tag_links import drop_tag_links

logger = structlog.get_logger()


def create_tag(session: Session, tag_create: TagCreate) -> TagRead:
    name = require_text(tag_create.name, "name")
    if session.exec(select(Tag).where(Tag.name == name)).first() is not None:
        raise ConflictError(f"Tag '{name}' already exists")

    tag = Tag(name=name, color=clean_text(tag_create.color))
    try:
        with atomic(session):
            session.add(tag)
    except IntegrityError:
        # Lost a race with a concurrent insert of the same name
        logger.warning("tag_name_conflict", name=name)
        raise ConflictError(f"Tag '{name}' already exists")
    session.refresh(tag)
    logger.info("tag_created", tag_id=tag.id, name=name)
    return TagRead.model_validate(tag)


def delete_tag(session: Session, tag_id: int) -> None:
    """Delete the tag and its task links; the tasks themselves are untouched."""
    tag = session.get(Tag, tag_id)
    if tag is None:
        logger.debug("tag_delete_skipped", tag_id=tag_id)
        return
    with atomic(session):
        links = drop_tag_links(session, tag_id)
        session.delete(tag)
    logger.info("tag_deleted", tag_id=tag_id, removed_links=links)
