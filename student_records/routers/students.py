from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Path, status

from student_records.services.student_service import (
    StudentService,
    get_student_service,
)
from student_records.schemas.student_schemas import (
    CreateStudentRequest,
    StudentResponse,
)
from student_records.utils.responses import ResponseBuilder

students_router = APIRouter()

StudentIdPath = Annotated[str, Path(description="Student ID")]


# API Endpoints
@students_router.get(
    "",
    response_model=None,
    status_code=status.HTTP_200_OK,
    summary="List all students",
    description="Return every stored student, or a message when there are none.",
)
async def list_students(
    student_service: StudentService = Depends(get_student_service),
):
    """List all students in storage order"""
    students = await student_service.get_all_students()

    if not students:
        return ResponseBuilder.message("No students found")

    return ResponseBuilder.success(
        data=[student.model_dump(by_alias=True) for student in students]
    )


@students_router.post(
    "",
    response_model=StudentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new student",
    description="Validate the submitted fields and store a new student under the next id.",
)
async def create_student(
    student_data: CreateStudentRequest,
    student_service: StudentService = Depends(get_student_service),
):
    """Create a new student"""
    student = await student_service.create_student(student_data)

    return ResponseBuilder.success(
        data=student.model_dump(by_alias=True),
        status_code=status.HTTP_201_CREATED,
    )


@students_router.get(
    "/{student_id}",
    response_model=StudentResponse,
    status_code=status.HTTP_200_OK,
    summary="Get a student by ID",
)
async def get_student(
    student_id: StudentIdPath,
    student_service: StudentService = Depends(get_student_service),
):
    student = await student_service.get_student(student_id)

    return ResponseBuilder.success(data=student.model_dump(by_alias=True))


@students_router.api_route(
    "/{student_id}",
    methods=["PUT", "PATCH"],
    response_model=StudentResponse,
    status_code=status.HTTP_200_OK,
    summary="Update a student",
    description="Apply a partial update. Fields left out keep their stored values.",
)
async def update_student(
    student_id: StudentIdPath,
    payload: Annotated[Any, Body()] = None,
    student_service: StudentService = Depends(get_student_service),
):
    """Update the supplied fields of an existing student"""
    student = await student_service.update_student(
        student_id, payload if payload is not None else {}
    )

    return ResponseBuilder.success(data=student.model_dump(by_alias=True))


@students_router.delete(
    "/{student_id}",
    response_model=None,
    status_code=status.HTTP_200_OK,
    summary="Delete a student",
)
async def delete_student(
    student_id: StudentIdPath,
    student_service: StudentService = Depends(get_student_service),
):
    await student_service.delete_student(student_id)

    return ResponseBuilder.message("Student deleted successfully")
