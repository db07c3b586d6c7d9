from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
from sqlalchemy import DateTime
from enum import Enum

from .base import local_now


class TaskPriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class Task(SQLModel, table=True):
    __tablename__ = "tasks"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(nullable=False)
    notes: Optional[str] = Field(default=None)

    # Weak references: cleared when the project / area is deleted
    project_id: Optional[int] = Field(default=None, foreign_key="projects.id", ondelete="SET NULL", index=True)
    area_id: Optional[int] = Field(default=None, foreign_key="areas.id", ondelete="SET NULL", index=True)

    # Plain DateTime columns: values are naive local time
    due_date: Optional[datetime] = Field(sa_type=DateTime, default=None)
    deadline_date: Optional[datetime] = Field(sa_type=DateTime, default=None)
    scheduled_date: Optional[datetime] = Field(sa_type=DateTime, default=None, index=True)

    is_completed: bool = Field(default=False, nullable=False)
    completed_at: Optional[datetime] = Field(sa_type=DateTime, default=None)
    priority: Optional[TaskPriority] = Field(default=None)

    created_at: datetime = Field(sa_type=DateTime, default_factory=local_now, nullable=False)
    updated_at: datetime = Field(sa_type=DateTime, default_factory=local_now, nullable=False)
