import json
from pathlib import Path

import pytest

from student_records.db.student_store import StudentStore
from student_records.schemas.student_schemas import StudentResponse, StudentYear


def _student(student_id: int, first_name: str = "Ann") -> StudentResponse:
    return StudentResponse(
        id=student_id,
        first_name=first_name,
        last_name="Lee",
        course="CS",
        year=StudentYear.FIRST_YEAR,
        enrolled=True,
    )


class TestNextId:
    """Test id assignment for new records."""

    def test_empty_collection_starts_at_one(self):
        assert StudentStore.next_id([]) == 1

    def test_one_past_the_highest_id(self):
        assert StudentStore.next_id([_student(1), _student(2)]) == 3

    def test_gaps_below_the_maximum_are_not_filled(self):
        students = [_student(5), _student(2)]
        assert StudentStore.next_id(students) == 6


class TestLoadAndSave:
    """Test reading and writing the stored collection."""

    def test_load_missing_file_is_empty(self, store: StudentStore, students_file: Path):
        assert store.load() == []
        assert students_file.is_file()

    def test_save_writes_camel_case_records(self, store: StudentStore, students_file: Path):
        store.save([_student(1)])

        document = json.loads(students_file.read_text(encoding="utf-8"))
        assert document == [
            {
                "id": 1,
                "firstName": "Ann",
                "lastName": "Lee",
                "course": "CS",
                "year": "First Year",
                "enrolled": True,
            }
        ]

    def test_load_preserves_storage_order(self, store: StudentStore):
        store.save([_student(3, "Cy"), _student(1, "Ann"), _student(2, "Bo")])

        assert [s.id for s in store.load()] == [3, 1, 2]

    def test_load_rejects_non_array_document(self, store: StudentStore, students_file: Path):
        students_file.parent.mkdir(parents=True)
        students_file.write_text('{"id": 1}', encoding="utf-8")

        with pytest.raises(TypeError):
            store.load()

    def test_transaction_yields_current_collection(self, store: StudentStore):
        store.save([_student(1)])

        with store.transaction() as students:
            students.append(_student(2, "Bo"))
            store.save(students)

        assert [s.id for s in store.load()] == [1, 2]
