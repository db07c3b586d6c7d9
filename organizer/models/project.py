from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
from sqlalchemy import DateTime

from .base import local_now


class Project(SQLModel, table=True):
    __tablename__ = "projects"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False)
    description: Optional[str] = Field(default=None)
    # Weak reference: cleared when the area is deleted
    area_id: Optional[int] = Field(default=None, foreign_key="areas.id", ondelete="SET NULL", index=True)
    color: Optional[str] = Field(default=None)
    is_completed: bool = Field(default=False, nullable=False)
    completed_at: Optional[datetime] = Field(sa_type=DateTime, default=None)
    created_at: datetime = Field(sa_type=DateTime, default_factory=local_now, nullable=False)
    updated_at: datetime = Field(sa_type=DateTime, default_factory=local_now, nullable=False)
