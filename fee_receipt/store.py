"""
On-disk receipt store.

One PDF per receipt in a flat directory plus an append-only ``meta.json``
index of ``{studentName, filename, date}`` entries used for searching.
Writers are not coordinated; run one writer per directory.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Union

from .emitter import suggest_stem
from .errors import ReceiptNotFound
from .models import ReceiptRecord

logger = logging.getLogger(__name__)

INDEX_NAME = 'meta.json'


@dataclass(frozen=True)
class StoredReceipt:
    filename: str
    path: Path
    student_name: str
    date: str

    def to_entry(self) -> Dict[str, str]:
        return {'studentName': self.student_name, 'filename': self.filename, 'date': self.date}


class ReceiptStore:
    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    @property
    def index_path(self) -> Path:
        return self.directory / INDEX_NAME

    def save(self, record: ReceiptRecord, data: bytes, timestamp: Optional[int] = None) -> StoredReceipt:
        """Write ``data`` under a name derived from the student and index it."""
        self.directory.mkdir(parents=True, exist_ok=True)
        filename = f'{suggest_stem(record.student_name, timestamp)}.pdf'
        path = self.directory / filename
        path.write_bytes(data)

        stored = StoredReceipt(filename=filename, path=path,
                               student_name=record.student_name, date=record.date)
        entries = self.entries()
        entries.append(stored.to_entry())
        self._write_index(entries)
        logger.info('Stored receipt %s (%d bytes)', filename, len(data))
        return stored

    def entries(self) -> List[Dict[str, str]]:
        if not self.index_path.exists():
            return []
        try:
            data = json.loads(self.index_path.read_text(encoding='utf-8'))
        except (OSError, ValueError) as exc:
            logger.error('Error loading receipt index %s: %s', self.index_path, exc)
            return []
        if not isinstance(data, list):
            logger.error('Receipt index %s is not a list, ignoring it', self.index_path)
            return []
        return [entry for entry in data if isinstance(entry, dict)]

    def search(self, student_name: Optional[str] = None) -> List[Dict[str, str]]:
        """Entries whose student name contains ``student_name``, ignoring case."""
        entries = self.entries()
        if not student_name:
            return entries
        needle = student_name.lower()
        matches = [e for e in entries if needle in (e.get('studentName') or '').lower()]
        logger.info('Receipt search %r matched %d of %d', student_name, len(matches), len(entries))
        return matches

    def path_for(self, filename: str) -> Path:
        if not filename or Path(filename).name != filename or filename in ('.', '..'):
            raise ReceiptNotFound(filename)
        path = self.directory / filename
        if not path.is_file():
            raise ReceiptNotFound(filename)
        return path

    def read(self, filename: str) -> bytes:
        return self.path_for(filename).read_bytes()

    def _write_index(self, entries: List[Dict[str, str]]) -> None:
        self.index_path.write_text(json.dumps(entries, indent=2), encoding='utf-8')
