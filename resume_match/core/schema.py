"""
Resume record as owned by the store.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional


@dataclass
class ResumeRecord:
    name: str
    email: str
    text: str
    embedding: str  # serialized vector, see vector.ops.serialize_vector
    file_name: Optional[str] = None
    id: Optional[str] = None
    created_at: Optional[datetime] = None

    def with_identity(self, id: str, created_at: datetime) -> "ResumeRecord":
        return replace(self, id=id, created_at=created_at)


@dataclass
class IngestResult:
    id: str
    snippet: str
