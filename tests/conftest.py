import pytest
from pathlib import Path
from typing import Any, Dict, Generator

from fastapi.testclient import TestClient

from student_records.db.json_storage import JsonFileStorage
from student_records.db.student_store import StudentStore
from student_records.main import create_application
from student_records.services.student_service import StudentService


@pytest.fixture
def students_file(tmp_path: Path) -> Path:
    """Location of the JSON document; the file itself does not exist yet."""
    return tmp_path / "storage" / "students.json"


@pytest.fixture
def storage(students_file: Path) -> JsonFileStorage:
    return JsonFileStorage(students_file)


@pytest.fixture
def store(storage: JsonFileStorage) -> StudentStore:
    """Create an isolated student store for each test."""
    return StudentStore(storage)


@pytest.fixture
def student_service(store: StudentStore) -> StudentService:
    return StudentService(store)


@pytest.fixture
def client(store: StudentStore) -> Generator[TestClient, None, None]:
    """HTTP client against an application wired to the isolated store."""
    application = create_application(store)
    with TestClient(application) as test_client:
        yield test_client


# Test data factories
@pytest.fixture
def ann_lee() -> Dict[str, Any]:
    return {
        "firstName": "Ann",
        "lastName": "Lee",
        "course": "CS",
        "year": "First Year",
        "enrolled": True,
    }


@pytest.fixture
def bob_kim() -> Dict[str, Any]:
    return {
        "firstName": "Bob",
        "lastName": "Kim",
        "course": "Mathematics",
        "year": "Third Year",
        "enrolled": False,
    }
