"""
Resume stores. Append-only writes plus a full-scan snapshot read, which is
all the ranking engine needs.
"""

import threading
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import List, Optional

from .db import get_db, init_db, health_check
from .schema import ResumeRecord
from ..util.logging import logger


class IResumeStore(ABC):
    """Abstract interface for resume persistence."""

    @abstractmethod
    def append(self, record: ResumeRecord) -> str:
        """Persist a record and return its newly assigned id."""
        pass

    @abstractmethod
    def read_all(self) -> List[ResumeRecord]:
        """Return every stored record in insertion order."""
        pass

    @abstractmethod
    def get(self, resume_id: str) -> Optional[ResumeRecord]:
        """Get a single record by id."""
        pass

    @abstractmethod
    def count(self) -> int:
        pass

    @abstractmethod
    def update_embedding(self, resume_id: str, embedding: str) -> bool:
        """Replace a record's serialized embedding. Returns False if the id is unknown."""
        pass

    def healthy(self) -> bool:
        return True


def _now() -> datetime:
    return datetime.now(timezone.utc)


class SqliteResumeStore(IResumeStore):
    """SQLite-backed resume store. One connection per operation."""

    _COLUMNS = "id, name, email, text, embedding, file_name, created_at"

    def __init__(self, db_path: str):
        self.db_path = db_path
        init_db(db_path)

    def _row_to_record(self, row) -> ResumeRecord:
        id_, name, email, text, embedding, file_name, created_at = row
        return ResumeRecord(
            id=str(id_),
            name=name,
            email=email,
            text=text,
            embedding=embedding,
            file_name=file_name,
            created_at=datetime.fromisoformat(created_at) if created_at else None
        )

    def append(self, record: ResumeRecord) -> str:
        with get_db(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO resumes (name, email, text, embedding, file_name, created_at) VALUES (?, ?, ?, ?, ?, ?)",
                (record.name, record.email, record.text, record.embedding, record.file_name, _now().isoformat())
            )
            conn.commit()
            resume_id = str(cursor.lastrowid)

        logger.log_vector_operation("stored", resume_id, {"store": "sqlite"})
        return resume_id

    def read_all(self) -> List[ResumeRecord]:
        with get_db(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute(f"SELECT {self._COLUMNS} FROM resumes ORDER BY id ASC")
            return [self._row_to_record(row) for row in cursor.fetchall()]

    def get(self, resume_id: str) -> Optional[ResumeRecord]:
        try:
            numeric_id = int(resume_id)
        except (TypeError, ValueError):
            return None

        with get_db(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute(f"SELECT {self._COLUMNS} FROM resumes WHERE id = ?", (numeric_id,))
            row = cursor.fetchone()
            return self._row_to_record(row) if row else None

    def count(self) -> int:
        with get_db(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT COUNT(*) FROM resumes")
            return cursor.fetchone()[0]

    def update_embedding(self, resume_id: str, embedding: str) -> bool:
        try:
            numeric_id = int(resume_id)
        except (TypeError, ValueError):
            return False

        with get_db(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute("UPDATE resumes SET embedding = ? WHERE id = ?", (embedding, numeric_id))
            conn.commit()
            return cursor.rowcount > 0

    def healthy(self) -> bool:
        return health_check(self.db_path)


class InMemoryResumeStore(IResumeStore):
    """Process-local resume store for tests and throwaway runs."""

    def __init__(self):
        self._records: List[ResumeRecord] = []
        self._last_id = 0
        self._lock = threading.Lock()

    def append(self, record: ResumeRecord) -> str:
        with self._lock:
            self._last_id += 1
            resume_id = str(self._last_id)
            self._records.append(record.with_identity(resume_id, _now()))

        logger.log_vector_operation("stored", resume_id, {"store": "memory"})
        return resume_id

    def read_all(self) -> List[ResumeRecord]:
        with self._lock:
            return list(self._records)

    def get(self, resume_id: str) -> Optional[ResumeRecord]:
        with self._lock:
            for record in self._records:
                if record.id == str(resume_id):
                    return record
        return None

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def update_embedding(self, resume_id: str, embedding: str) -> bool:
        with self._lock:
            for index, record in enumerate(self._records):
                if record.id == str(resume_id):
                    self._records[index] = ResumeRecord(
                        id=record.id,
                        name=record.name,
                        email=record.email,
                        text=record.text,
                        embedding=embedding,
                        file_name=record.file_name,
                        created_at=record.created_at
                    )
                    return True
        return False
