from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
from sqlalchemy import DateTime

from .base import local_now


class Tag(SQLModel, table=True):
    __tablename__ = "tags"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True, index=True, nullable=False)
    color: Optional[str] = Field(default=None)
    created_at: datetime = Field(sa_type=DateTime, default_factory=local_now, nullable=False)
