"""
Whole-file JSON storage for users.

Every call reads or rewrites the complete array. There is no locking, so
only one process should write the file at a time.
"""
import json
import os
import tempfile
from pathlib import Path
from typing import List

from .models import User


class UserRepository:
    def __init__(self, path: Path):
        self.path = Path(path)

    def ensure_file(self) -> None:
        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("[]", encoding="utf-8")

    def read_users(self) -> List[User]:
        self.ensure_file()
        data = json.loads(self.path.read_text(encoding="utf-8"))
        return [User.model_validate(u) for u in data]

    def write_users(self, users: List[User]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps([u.model_dump() for u in users], indent=2)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp, self.path)
        except BaseException:
            os.unlink(tmp)
            raise
