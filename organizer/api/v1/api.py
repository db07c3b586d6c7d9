from fastapi import APIRouter
from .endpoints import areas, projects, tags, tasks

router = APIRouter()

# Include all API endpoints
router.include_router(areas.router, prefix="/areas", tags=["areas"])
router.include_router(projects.router, prefix="/projects", tags=["projects"])
router.include_router(tags.router, prefix="/tags", tags=["tags"])
router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
