from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session
from typing import List

from organizer.db.session import get_session
from organizer.schemas.area import AreaCreate, AreaRead, AreaUpdate
from organizer.schemas.project import ProjectRead
from organizer.schemas.task import TaskRead
from organizer import services

router = APIRouter()


@router.get("/", response_model=List[AreaRead])
def list_areas(session: Session = Depends(get_session)):
    return services.get_areas(session)


@router.post("/", response_model=AreaRead, status_code=status.HTTP_201_CREATED)
def create_area(area_create: AreaCreate, session: Session = Depends(get_session)):
    return services.create_area(session, area_create)


@router.patch("/{area_id}", response_model=AreaRead)
def update_area(area_id: int, area_update: AreaUpdate, session: Session = Depends(get_session)):
    return services.update_area(session, area_id, area_update)


@router.delete("/{area_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_area(area_id: int, session: Session = Depends(get_session)):
    services.delete_area(session, area_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{area_id}/projects", response_model=List[ProjectRead])
def list_area_projects(area_id: int, session: Session = Depends(get_session)):
    return services.get_projects_by_area(session, area_id)


@router.get("/{area_id}/tasks", response_model=List[TaskRead])
def list_area_tasks(area_id: int, session: Session = Depends(get_session)):
    return services.get_tasks_by_area(session, area_id)
