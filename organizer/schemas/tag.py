from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime


class TagBase(SQLModel):
    name: str = Field(min_length=1)
    color: Optional[str] = None


class TagCreate(TagBase):
    pass


class TagRead(TagBase):
    id: int
    created_at: datetime
