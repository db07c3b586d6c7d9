from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session
from typing import List

from organizer.db.session import get_session
from organizer.schemas.tag import TagCreate, TagRead
from organizer import services

router = APIRouter()


@router.get("/", response_model=List[TagRead])
def list_tags(session: Session = Depends(get_session)):
    return services.get_tags(session)


@router.post("/", response_model=TagRead, status_code=status.HTTP_201_CREATED)
def create_tag(tag_create: TagCreate, session: Session = Depends(get_session)):
    return services.create_tag(session, tag_create)


@router.delete("/{tag_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_tag(tag_id: int, session: Session = Depends(get_session)):
    services.delete_tag(session, tag_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
