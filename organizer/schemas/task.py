from sqlmodel import SQLModel, Field
from typing import List, Optional
from datetime import datetime
from ..models.task import TaskPriority
from .tag import TagRead


class TaskBase(SQLModel):
    title: str = Field(min_length=1)
    notes: Optional[str] = None
    project_id: Optional[int] = None
    area_id: Optional[int] = None
    due_date: Optional[datetime] = None
    deadline_date: Optional[datetime] = None
    scheduled_date: Optional[datetime] = None
    priority: Optional[TaskPriority] = None


class TaskCreate(TaskBase):
    tag_ids: Optional[List[int]] = None


class TaskRead(TaskBase):
    id: int
    is_completed: bool
    completed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    # Always present, empty when the task has no tags
    tags: List[TagRead] = []


class TaskUpdate(SQLModel):
    title: Optional[str] = Field(default=None, min_length=1)
    notes: Optional[str] = None
    project_id: Optional[int] = None
    area_id: Optional[int] = None
    due_date: Optional[datetime] = None
    deadline_date: Optional[datetime] = None
    scheduled_date: Optional[datetime] = None
    is_completed: Optional[bool] = None
    priority: Optional[TaskPriority] = None
    # Present (even empty) replaces the whole tag set; absent leaves it alone
    tag_ids: Optional[List[int]] = None
