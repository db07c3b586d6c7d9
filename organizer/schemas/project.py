from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime


class ProjectBase(SQLModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    area_id: Optional[int] = None
    color: Optional[str] = None


class ProjectCreate(ProjectBase):
    pass


class ProjectRead(ProjectBase):
    id: int
    is_completed: bool
    completed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class ProjectUpdate(SQLModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    area_id: Optional[int] = None
    color: Optional[str] = None
    is_completed: Optional[bool] = None
