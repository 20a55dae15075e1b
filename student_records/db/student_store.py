import threading
from contextlib import contextmanager
from typing import Iterator, List

from fastapi import Request

from student_records.db.json_storage import JsonFileStorage
from student_records.schemas.student_schemas import StudentResponse
from student_records.utils.logging import get_logger

logger = get_logger()


class StudentStore:
    """
    The student collection persisted as one JSON array.

    Every call reads the whole collection from storage and every save writes
    the whole collection back. Callers that read, modify and save should do
    so inside `transaction()`, which serializes those cycles within this
    process. Separate processes sharing the file can still lose updates.
    """

    def __init__(self, storage: JsonFileStorage):
        self.storage = storage
        self._lock = threading.RLock()

    def load(self) -> List[StudentResponse]:
        """Read the full collection in storage order"""
        document = self.storage.read()
        if not isinstance(document, list):
            raise TypeError(
                f"Expected a JSON array in {self.storage.path}, got {type(document).__name__}"
            )
        return [StudentResponse.model_validate(item) for item in document]

    def save(self, students: List[StudentResponse]) -> None:
        """Replace the stored collection"""
        self.storage.write([student.model_dump(by_alias=True) for student in students])
        logger.debug(f"Saved {len(students)} students to {self.storage.path}")

    @contextmanager
    def transaction(self) -> Iterator[List[StudentResponse]]:
        """Load the collection under the store lock; the caller saves explicitly"""
        with self._lock:
            yield self.load()

    @staticmethod
    def next_id(students: List[StudentResponse]) -> int:
        """One past the highest id in the collection, or 1 when it is empty"""
        if not students:
            return 1
        return max(student.id for student in students) + 1


def get_student_store(request: Request) -> StudentStore:
    """Dependency to get the process-wide store created by the app factory"""
    return request.app.state.student_store
