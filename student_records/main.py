from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from student_records.config.settings import settings
from student_records.db.json_storage import JsonFileStorage
from student_records.db.student_store import StudentStore
from student_records.utils.logging import get_logger
from student_records.routers import main_router
from student_records.utils.errors import setup_error_handlers
from student_records.middlewares import (
    RequestIDMiddleware,
    DevSecurityMiddleware,
    ProdSecurityMiddleware,
)

# Initialize the logger
logger = get_logger()


@asynccontextmanager
async def lifespan(application: FastAPI):
    store: StudentStore = application.state.student_store
    logger.info(f"{settings.NAME} is starting up, students file: {store.storage.path}")
    yield
    logger.info(f"{settings.NAME} is shutting down...")


def create_application(store: Optional[StudentStore] = None) -> FastAPI:
    """Initialize the FastAPI application with settings and lifespan events.

    The student store is built once here, from `settings.STUDENTS_FILE` unless
    one is passed in, and shared with every request through `app.state`.
    """
    application = FastAPI(
        title=settings.NAME, version=settings.VERSION, lifespan=lifespan
    )
    application.state.student_store = store or StudentStore(
        JsonFileStorage(settings.STUDENTS_FILE)
    )

    # Setup error handlers
    setup_error_handlers(application)

    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_HOSTS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "X-Request-ID"],
    )

    # Add custom middlewares
    application.add_middleware(
        DevSecurityMiddleware
        if settings.ENVIRONMENT == "development"
        else ProdSecurityMiddleware
    )
    application.add_middleware(RequestIDMiddleware)

    # Routers
    application.include_router(main_router, prefix=settings.API_PREFIX)

    return application


app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "student_records.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.ENVIRONMENT == "development",
        log_config=None,
        log_level=None,
    )
