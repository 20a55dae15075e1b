import re
from typing import Any, Dict, List, Optional

from fastapi import Depends
from pydantic import ValidationError

from student_records.db.student_store import StudentStore, get_student_store
from student_records.schemas.student_schemas import (
    CreateStudentRequest,
    UpdateStudentRequest,
    StudentResponse,
)
from student_records.utils.errors import NotFoundError, RecordValidationError
from student_records.utils.logging import get_logger

logger = get_logger()

STUDENT_NOT_FOUND = "Student not found"
# Optional sign followed by ASCII digits only
INTEGER_ID = re.compile(r"[+-]?[0-9]+")


class StudentService:
    """Service provider for student record operations over the JSON store"""

    def __init__(self, store: StudentStore):
        self.store = store

    async def get_all_students(self) -> List[StudentResponse]:
        """Get every stored student in storage order"""
        students = self.store.load()
        logger.info(f"Retrieved {len(students)} students")
        return students

    async def get_student(self, student_id: Any) -> StudentResponse:
        """Get a single student or raise NotFoundError"""
        students = self.store.load()
        return students[self._find_index(students, student_id)]

    async def create_student(
        self, student_data: CreateStudentRequest
    ) -> StudentResponse:
        """Append a validated student under the next free id"""
        with self.store.transaction() as students:
            new_student = StudentResponse(
                id=self.store.next_id(students),
                **student_data.model_dump(),
            )
            students.append(new_student)
            self.store.save(students)

        logger.info(f"Created student {new_student.id}")
        return new_student

    async def update_student(
        self, student_id: Any, payload: Dict[str, Any]
    ) -> StudentResponse:
        """
        Merge the supplied fields into an existing student.

        The record is looked up before the payload is validated, so an unknown
        id is reported as not found even when the payload is also invalid.

        Args:
            student_id: Raw id taken from the request path
            payload: Decoded request body; only keys present are validated

        Returns:
            The student after the merge
        """
        with self.store.transaction() as students:
            index = self._find_index(students, student_id)

            try:
                changes = UpdateStudentRequest.model_validate(payload).changes()
            except ValidationError as e:
                raise RecordValidationError.from_pydantic(e)

            updated = StudentResponse.model_validate(
                {**students[index].model_dump(), **changes}
            )
            students[index] = updated
            self.store.save(students)

        logger.info(f"Updated student {updated.id}: {sorted(changes)}")
        return updated

    async def delete_student(self, student_id: Any) -> None:
        """Remove a student; its id is not handed out again while a higher id exists"""
        with self.store.transaction() as students:
            index = self._find_index(students, student_id)
            removed = students.pop(index)
            self.store.save(students)

        logger.info(f"Deleted student {removed.id}")

    @staticmethod
    def parse_student_id(raw_id: Any) -> Optional[int]:
        """Coerce a path parameter to an integer id, or None if it is not one"""
        if isinstance(raw_id, int) and not isinstance(raw_id, bool):
            return raw_id
        text = str(raw_id).strip()
        if not INTEGER_ID.fullmatch(text):
            return None
        return int(text)

    @classmethod
    def _find_index(cls, students: List[StudentResponse], student_id: Any) -> int:
        target = cls.parse_student_id(student_id)
        if target is not None:
            for index, student in enumerate(students):
                if student.id == target:
                    return index
        raise NotFoundError(message=STUDENT_NOT_FOUND, error_code="STUDENT_NOT_FOUND")


def get_student_service(
    store: StudentStore = Depends(get_student_store),
) -> StudentService:
    """Dependency to provide StudentService instance"""
    return StudentService(store)
