from fastapi import APIRouter

from student_records.config.settings import settings
from student_records.utils.responses import ResponseBuilder

health_router = APIRouter()


@health_router.get("")
async def health_check():
    """
    Basic health check endpoint

    Returns application status and the running service name and version
    """
    return ResponseBuilder.success(
        data={"status": "healthy", "service": settings.NAME, "version": settings.VERSION},
    )
