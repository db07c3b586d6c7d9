from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime


class AreaBase(SQLModel):
    name: str = Field(min_length=1)
    color: Optional[str] = None


class AreaCreate(AreaBase):
    pass


class AreaRead(AreaBase):
    id: int
    created_at: datetime
    updated_at: datetime


class AreaUpdate(SQLModel):
    name: Optional[str] = Field(default=None, min_length=1)
    color: Optional[str] = None
