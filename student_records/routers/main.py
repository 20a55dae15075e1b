from fastapi import APIRouter

from student_records.routers.students import students_router
from student_records.routers.shared import shared_router

main_router = APIRouter()

# Include resource routers
main_router.include_router(students_router, prefix="/students", tags=["Students"])
main_router.include_router(shared_router)
