from .areas import create_area, update_area, delete_area
from .projects import create_project, update_project, delete_project
from .tags import create_tag, delete_tag
from .tasks import create_task, update_task, delete_task
from .queries import (
    get_areas,
    get_projects,
    get_projects_by_area,
    get_tags,
    get_task,
    get_tasks,
    get_tasks_by_area,
    get_tasks_by_project,
    get_today_tasks,
)

__all__ = [
    "create_area",
    "update_area",
    "delete_area",
    "create_project",
    "update_project",
    "delete_project",
    "create_tag",
    "delete_tag",
    "create_task",
    "update_task",
    "delete_task",
    "get_areas",
    "get_projects",
    "get_projects_by_area",
    "get_tags",
    "get_task",
    "get_tasks",
    "get_tasks_by_area",
    "get_tasks_by_project",
    "get_today_tasks",
]
