# Importing every table model here registers them on SQLModel.metadata in one place
from .area import Area
from .project import Project
from .tag import Tag
from .task import Task, TaskPriority
from .task_tag import TaskTag

__all__ = ["Area", "Project", "Tag", "Task", "TaskPriority", "TaskTag"]
