from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import structlog

from .api.v1.api import router as api_router
from .core.config import settings
from .core.errors import ConflictError, DanglingReferenceError, InvalidError, NotFoundError, OrganizerError
from .core.logging import setup_logging
from .db.session import create_db_and_tables

logger = structlog.get_logger()

ERROR_STATUS = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    DanglingReferenceError: 422,
    ConflictError: status.HTTP_409_CONFLICT,
    InvalidError: status.HTTP_400_BAD_REQUEST,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    # Create tables on startup
    create_db_and_tables()
    logger.info("organizer_started", project=settings.PROJECT_NAME)
    yield


app = FastAPI(
    title=f"{settings.PROJECT_NAME} API",
    description="Areas, projects, tags and tasks for a personal organizer",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(OrganizerError)
async def organizer_error_handler(request: Request, exc: OrganizerError):
    status_code = ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)
    logger.info("request_rejected", path=request.url.path, error=exc.kind, status_code=status_code)
    return JSONResponse(status_code=status_code, content=exc.to_dict())


# Include API routers
app.include_router(api_router, prefix=settings.API_V1_STR)


@app.get("/")
def read_root():
    return {"message": f"{settings.PROJECT_NAME} API"}


@app.get("/health")
def health_check():
    return {"status": "healthy"}
