from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session
from typing import List

from organizer.db.session import get_session
from organizer.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from organizer.schemas.task import TaskRead
from organizer import services

router = APIRouter()


@router.get("/", response_model=List[ProjectRead])
def list_projects(session: Session = Depends(get_session)):
    return services.get_projects(session)


@router.post("/", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
def create_project(project_create: ProjectCreate, session: Session = Depends(get_session)):
    return services.create_project(session, project_create)


@router.patch("/{project_id}", response_model=ProjectRead)
def update_project(project_id: int, project_update: ProjectUpdate, session: Session = Depends(get_session)):
    return services.update_project(session, project_id, project_update)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_project(project_id: int, session: Session = Depends(get_session)):
    services.delete_project(session, project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{project_id}/tasks", response_model=List[TaskRead])
def list_project_tasks(project_id: int, session: Session = Depends(get_session)):
    return services.get_tasks_by_project(session, project_id)
