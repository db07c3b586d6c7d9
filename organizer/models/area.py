from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
from sqlalchemy import DateTime

from .base import local_now


class Area(SQLModel, table=True):
    __tablename__ = "areas"
    # ids are never reused after a delete
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False)
    color: Optional[str] = Field(default=None)
    created_at: datetime = Field(sa_type=DateTime, default_factory=local_now, nullable=False)
    updated_at: datetime = Field(sa_type=DateTime, default_factory=local_now, nullable=False)
