import json
from pathlib import Path
from typing import Any, Union

from student_records.utils.logging import get_logger

logger = get_logger()


class JsonFileStorage:
    """Storage handle for a single JSON document on disk.

    The document is always read and written whole; there are no partial
    writes. An absent file is created holding ``default`` on first read.
    """

    def __init__(self, path: Union[str, Path], default: Any = None):
        self.path = Path(path)
        self.default = [] if default is None else default

    def exists(self) -> bool:
        return self.path.is_file()

    def read(self) -> Any:
        """Load the document, initializing the file first if it is missing"""
        if not self.exists():
            logger.info(f"Initializing empty document at {self.path}")
            self.write(self.default)

        with open(self.path, encoding="utf-8") as f:
            return json.load(f)

    def write(self, document: Any) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(document, f, indent=4, ensure_ascii=False)
