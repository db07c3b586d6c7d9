from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session
from typing import List

from organizer.db.session import get_session
from organizer.schemas.task import TaskCreate, TaskRead, TaskUpdate
from organizer import services

router = APIRouter()


@router.get("/", response_model=List[TaskRead])
def list_tasks(session: Session = Depends(get_session)):
    return services.get_tasks(session)


# Declared before "/{task_id}" so "today" is not parsed as an id
@router.get("/today", response_model=List[TaskRead])
def list_today_tasks(session: Session = Depends(get_session)):
    return services.get_today_tasks(session)


@router.post("/", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
def create_task(task_create: TaskCreate, session: Session = Depends(get_session)):
    return services.create_task(session, task_create)


@router.get("/{task_id}", response_model=TaskRead)
def get_task(task_id: int, session: Session = Depends(get_session)):
    return services.get_task(session, task_id)


@router.patch("/{task_id}", response_model=TaskRead)
def update_task(task_id: int, task_update: TaskUpdate, session: Session = Depends(get_session)):
    return services.update_task(session, task_id, task_update)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: int, session: Session = Depends(get_session)):
    services.delete_task(session, task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
