"""
Dispatch engine: intake, dual-discipline serving, deletion and reporting.

One ``DispatchEngine`` owns the record store, the duplicate index, both
queues and the ID counter. It is constructed explicitly and passed to
whoever needs it; nothing here is a module-level singleton. Calls are
synchronous and not reentrant-safe, so a caller sharing one engine across
threads must hold a single lock around every call.
"""

import logging
from typing import Callable, Dict, List, Optional

from pydantic import ValidationError

from .config import URGENCY_THRESHOLD, now_utc
from .dedup import DuplicateIndex, duplicate_key
from .errors import InvalidInputError, NotFoundError
from .models import Complaint, ComplaintCreate, ComplaintStatus
from .queues import FallbackQueue, PriorityQueue
from .store import RecordStore

logger = logging.getLogger(__name__)


def _validation_message(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        field = ".".join(str(loc) for loc in err.get("loc", ()))
        parts.append(f"{field}: {err.get('msg')}" if field else err.get("msg", ""))
    return "; ".join(parts)


def report_order(complaint: Complaint):
    """Sort key: severity desc, then timestamp asc, then id asc."""
    return (-complaint.severity, complaint.timestamp, complaint.id)


class DispatchEngine:
    def __init__(self, urgency_threshold: int = URGENCY_THRESHOLD,
                 clock: Callable = now_utc):
        self.urgency_threshold = urgency_threshold
        self.clock = clock
        self.store = RecordStore()
        self.duplicates = DuplicateIndex()
        self.priority_queue = PriorityQueue()
        self.fallback_queue = FallbackQueue()
        self._next_id = 1

    # -----------------------------------------------------------------------
    # Intake
    # -----------------------------------------------------------------------
    def check_duplicate(self, area: str, description: str) -> Optional[int]:
        """Return the ID of an open complaint with the same normalized area and description."""
        return self.duplicates.lookup(duplicate_key(area, description))

    def submit(self, complaint_type, area: str, description: str, severity: int) -> int:
        try:
            data = ComplaintCreate(type=complaint_type, area=area, description=description, severity=severity)
        except ValidationError as e:
            raise InvalidInputError(_validation_message(e)) from e
        return self.commit(data)

    def commit(self, data: ComplaintCreate) -> int:
        """File an already-validated complaint and route it. Returns the new ID."""
        complaint = Complaint(
            id=self._next_id, type=data.type, area=data.area,
            description=data.description, severity=data.severity,
            timestamp=self.clock())
        self.store.append(complaint)
        self._next_id += 1

        key = complaint.duplicate_key()
        previous = self.duplicates.lookup(key)
        if previous is not None:
            logger.warning("Complaint %d filed as possible duplicate of %d", complaint.id, previous)
        self.duplicates.put(key, complaint.id)
        self._route(complaint)
        logger.info("Filed complaint %d (%s, severity %d) in %s queue", complaint.id,
                    complaint.type.value, complaint.severity,
                    "priority" if self._is_urgent(complaint) else "fallback")
        return complaint.id

    def _is_urgent(self, complaint: Complaint) -> bool:
        return complaint.severity >= self.urgency_threshold

    def _route(self, complaint: Complaint) -> None:
        if self._is_urgent(complaint):
            self.priority_queue.insert(complaint.id, complaint.severity, complaint.timestamp)
        else:
            self.fallback_queue.enqueue(complaint.id)

    # -----------------------------------------------------------------------
    # Dispatch
    # -----------------------------------------------------------------------
    def serve_next(self, use_priority: bool = True) -> Optional[Complaint]:
        """Serve one complaint: priority heap first when ``use_priority``, else arrival order first."""
        if use_priority:
            complaint_id = self.priority_queue.extract_max()
            if complaint_id is None:
                complaint_id = self.fallback_queue.dequeue()
        else:
            complaint_id = self.fallback_queue.dequeue()
            if complaint_id is None:
                complaint_id = self.priority_queue.extract_max()
        if complaint_id is None:
            return None

        complaint = self.store.mark_processed(complaint_id)
        self.duplicates.remove(complaint.duplicate_key())
        logger.info("Served complaint %d (severity %d, %s mode)", complaint.id,
                    complaint.severity, "priority" if use_priority else "fifo")
        return complaint

    # -----------------------------------------------------------------------
    # Lookup / deletion
    # -----------------------------------------------------------------------
    def search_by_id(self, complaint_id: int) -> Optional[Complaint]:
        return self.store.find_by_id(complaint_id)

    def require(self, complaint_id: int) -> Complaint:
        complaint = self.store.find_by_id(complaint_id)
        if complaint is None:
            raise NotFoundError(complaint_id)
        return complaint

    def delete_by_id(self, complaint_id: int) -> bool:
        complaint = self.store.find_by_id(complaint_id)
        if complaint is None:
            return False
        self.store.remove(complaint_id)
        self.duplicates.remove(complaint.duplicate_key())
        self.rebuild()
        logger.info("Deleted complaint %d", complaint_id)
        return True

    def rebuild(self) -> None:
        """Drop both queues and re-route every pending record from the store."""
        self.priority_queue.clear()
        self.fallback_queue.clear()
        for complaint in self.store.pending_snapshot():
            self._route(complaint)
        logger.info("Rebuilt queues: %d priority, %d fallback",
                    len(self.priority_queue), len(self.fallback_queue))

    # -----------------------------------------------------------------------
    # Reporting
    # -----------------------------------------------------------------------
    def all_records(self) -> List[Complaint]:
        return list(self.store.snapshot())

    def pending_report(self) -> List[Complaint]:
        return sorted(self.store.pending_snapshot(), key=report_order)

    def stats(self) -> Dict[str, int]:
        processed = sum(1 for c in self.store.snapshot() if c.status == ComplaintStatus.PROCESSED)
        return {
            "total": len(self.store),
            "pending": len(self.store) - processed,
            "processed": processed,
            "priority_queue": len(self.priority_queue),
            "fallback_queue": len(self.fallback_queue),
        }
