# taskpulse/storage/json_store.py
#
# Flat JSON collection files. Every operation reads the whole file, mutates the
# rows in memory and rewrites the whole file. Rewrites go through a temporary
# file that replaces the target, so a reader sees either the old or the new
# collection. There is no locking: two requests doing read-modify-write on the
# same file at the same time race and the last write wins.
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Callable, Iterable, List, Type

from pydantic import ValidationError

from taskpulse.schemas import (
    UserRecord, ClientRecord, ProjectRecord, TaskRecord, NotificationRecord, NoteRecord,
)
from taskpulse.storage.base import R, Repository, Store

logger = logging.getLogger(__name__)

COLLECTION_FILES = {
    "users": ("users.json", UserRecord),
    "clients": ("clients.json", ClientRecord),
    "projects": ("projects.json", ProjectRecord),
    "tasks": ("tasks.json", TaskRecord),
    "notifications": ("notifications.json", NotificationRecord),
    "notes": ("notes.json", NoteRecord),
}


class JsonCollection(Repository[R]):
    def __init__(self, path: Path, model: Type[R]):
        self.path = Path(path)
        self.model = model

    def _read_rows(self) -> List[dict]:
        """Read raw rows; a missing or corrupt file degrades to an empty collection"""
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as e:
            logger.error(f"Error reading file {self.path}: {e}")
            return []

        if not isinstance(data, list):
            logger.error(f"Error reading file {self.path}: expected a JSON array")
            return []
        return data

    def _write_rows(self, rows: List[dict]) -> bool:
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(rows, fh, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
            return True
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error writing file {self.path}: {e}")
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            return False

    def _parse(self, row: dict):
        try:
            return self.model.model_validate(row)
        except ValidationError as e:
            logger.warning(f"Skipping malformed row {row.get('id')!r} in {self.path.name}: {e.error_count()} errors")
            return None

    def _dump(self, record: R) -> dict:
        return record.model_dump(mode="json", by_alias=True)

    def list(self) -> List[R]:
        records = (self._parse(row) for row in self._read_rows() if isinstance(row, dict))
        return [r for r in records if r is not None]

    def add(self, record: R) -> R:
        rows = self._read_rows()
        rows.append(self._dump(record))
        self._write_rows(rows)
        return record

    def save(self, record: R) -> R:
        self.save_many([record])
        return record

    def save_many(self, records: Iterable[R]) -> None:
        rows = self._read_rows()
        index = {row.get("id"): i for i, row in enumerate(rows) if isinstance(row, dict)}
        for record in records:
            if record.id in index:
                rows[index[record.id]] = self._dump(record)
            else:
                index[record.id] = len(rows)
                rows.append(self._dump(record))
        self._write_rows(rows)

    def delete(self, record_id: str) -> bool:
        rows = self._read_rows()
        remaining = [row for row in rows if not (isinstance(row, dict) and row.get("id") == record_id)]
        if len(remaining) == len(rows):
            return False
        self._write_rows(remaining)
        return True

    def delete_where(self, predicate: Callable[[R], bool]) -> int:
        rows = self._read_rows()
        remaining = []
        for row in rows:
            record = self._parse(row) if isinstance(row, dict) else None
            if record is not None and predicate(record):
                continue
            remaining.append(row)

        removed = len(rows) - len(remaining)
        if removed:
            self._write_rows(remaining)
        return removed


class JsonStore(Store):
    def __init__(self, data_dir):
        self.data_dir = Path(data_dir)
        for name, (filename, model) in COLLECTION_FILES.items():
            setattr(self, name, JsonCollection(self.data_dir / filename, model))

    def ensure_files(self) -> None:
        """Create the data directory and any missing collection file"""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        for filename, _ in COLLECTION_FILES.values():
            path = self.data_dir / filename
            if not path.exists():
                path.write_text("[]", encoding="utf-8")
                logger.info(f"Created empty collection {path}")
