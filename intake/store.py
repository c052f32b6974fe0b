"""
Record store: every complaint ever filed, keyed by ID, in arrival order.

The store is the single source of truth. Queues only ever hold IDs that
resolve through it, and it is the only place a complaint's status changes.
"""

import logging
from typing import Dict, Iterator, Optional

from .errors import DuplicateIdError
from .models import Complaint, ComplaintStatus

logger = logging.getLogger(__name__)


class RecordStore:
    def __init__(self):
        # dicts keep insertion order, which is the arrival order
        self._records: Dict[int, Complaint] = {}

    def append(self, complaint: Complaint) -> None:
        if complaint.id in self._records:
            logger.error("Duplicate complaint ID %d appended to store", complaint.id)
            raise DuplicateIdError(complaint.id)
        self._records[complaint.id] = complaint

    def find_by_id(self, complaint_id: int) -> Optional[Complaint]:
        return self._records.get(complaint_id)

    def remove(self, complaint_id: int) -> bool:
        return self._records.pop(complaint_id, None) is not None

    def mark_processed(self, complaint_id: int) -> Complaint:
        complaint = self._records[complaint_id]
        complaint.status = ComplaintStatus.PROCESSED
        return complaint

    def snapshot(self) -> Iterator[Complaint]:
        """Yield every record in insertion order. Each call starts a fresh pass."""
        yield from self._records.values()

    def pending_snapshot(self) -> Iterator[Complaint]:
        return (c for c in self.snapshot() if c.is_pending)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, complaint_id: int) -> bool:
        return complaint_id in self._records
