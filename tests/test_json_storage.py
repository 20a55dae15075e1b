import json
from pathlib import Path

from student_records.db.json_storage import JsonFileStorage


class TestJsonFileStorage:
    """Test the whole-document JSON storage handle."""

    def test_read_initializes_missing_file(self, storage: JsonFileStorage, students_file: Path):
        """Reading an absent document creates it as an empty array."""
        assert not students_file.exists()

        assert storage.read() == []
        assert students_file.is_file()
        assert json.loads(students_file.read_text(encoding="utf-8")) == []

    def test_write_creates_parent_directories(self, tmp_path: Path):
        nested = tmp_path / "a" / "b" / "students.json"
        JsonFileStorage(nested).write([{"id": 1}])

        assert json.loads(nested.read_text(encoding="utf-8")) == [{"id": 1}]

    def test_write_is_pretty_printed(self, storage: JsonFileStorage, students_file: Path):
        storage.write([{"id": 1, "firstName": "Ann"}])

        text = students_file.read_text(encoding="utf-8")
        assert text.startswith("[\n    {\n        \"id\": 1,")

    def test_write_replaces_whole_document(self, storage: JsonFileStorage):
        storage.write([{"id": 1}, {"id": 2}])
        storage.write([{"id": 2}])

        assert storage.read() == [{"id": 2}]

    def test_existing_document_is_not_overwritten(self, students_file: Path):
        students_file.parent.mkdir(parents=True)
        students_file.write_text('[{"id": 7}]', encoding="utf-8")

        assert JsonFileStorage(students_file).read() == [{"id": 7}]

    def test_non_ascii_text_is_kept_verbatim(self, storage: JsonFileStorage, students_file: Path):
        storage.write([{"firstName": "Zoë"}])

        assert "Zoë" in students_file.read_text(encoding="utf-8")
