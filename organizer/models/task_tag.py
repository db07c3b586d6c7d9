from sqlmodel import SQLModel, Field


class TaskTag(SQLModel, table=True):
    """Task <-> Tag association; one row per (task_id, tag_id) pair."""

    __tablename__ = "task_tags"

    task_id: int = Field(foreign_key="tasks.id", ondelete="CASCADE", primary_key=True)
    tag_id: int = Field(foreign_key="tags.id", ondelete="CASCADE", primary_key=True, index=True)
