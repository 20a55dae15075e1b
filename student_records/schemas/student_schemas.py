from enum import Enum
from typing import Annotated, Any, Dict

from pydantic import BeforeValidator, Field

from student_records.schemas.camel_base_model import CamelCaseBaseModel as BaseModel


class StudentYear(str, Enum):
    """Year of study a student can be enrolled in"""

    FIRST_YEAR = "First Year"
    SECOND_YEAR = "Second Year"
    THIRD_YEAR = "Third Year"
    FOURTH_YEAR = "Fourth Year"
    FIFTH_YEAR = "Fifth Year"


def _strip_text(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


def _coerce_enrolled(value: Any) -> Any:
    """Accept true/false, 1/0 and "1"/"0"; reject every other value."""
    value = _strip_text(value)
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str) and value in ("0", "1"):
        return value == "1"
    raise ValueError("The enrolled field must be true or false")


YearOfStudy = Annotated[StudentYear, BeforeValidator(_strip_text)]
EnrolledFlag = Annotated[bool, BeforeValidator(_coerce_enrolled)]


class CreateStudentRequest(BaseModel):
    """Request schema for creating a new student"""

    first_name: str = Field(
        ..., min_length=1, max_length=255, strict=True, description="First name"
    )
    last_name: str = Field(
        ..., min_length=1, max_length=255, strict=True, description="Last name"
    )
    course: str = Field(..., min_length=1, strict=True, description="Course of study")
    year: YearOfStudy = Field(..., description="Year of study")
    enrolled: EnrolledFlag = Field(..., description="Whether the student is enrolled")


class UpdateStudentRequest(BaseModel):
    """
    Request schema for partially updating a student.

    Every field may be omitted, but a field that is sent must satisfy the same
    constraints as on create; an explicit null is rejected. Use `changes()`
    to get only the fields the client actually supplied.
    """

    first_name: str = Field(
        None, min_length=1, max_length=255, strict=True, description="First name"
    )
    last_name: str = Field(
        None, min_length=1, max_length=255, strict=True, description="Last name"
    )
    course: str = Field(None, min_length=1, strict=True, description="Course of study")
    year: YearOfStudy = Field(None, description="Year of study")
    enrolled: EnrolledFlag = Field(None, description="Whether the student is enrolled")

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class StudentResponse(BaseModel):
    """A stored student record, as persisted and as returned to clients"""

    id: int = Field(..., description="Student ID assigned by the store")
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    course: str = Field(..., description="Course of study")
    year: StudentYear = Field(..., description="Year of study")
    enrolled: bool = Field(..., description="Enrollment status")
