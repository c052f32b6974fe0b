"""
Exception hierarchy for the complaint intake core.

Every error is raised before any structure is touched, so a failed call
leaves the store, the duplicate index and both queues exactly as they were.
"""

from typing import Any, Dict, Optional


class ComplaintDeskError(Exception):
    """Base class for all intake errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidInputError(ComplaintDeskError):
    """Blank area/description, unknown type, or severity outside 1-5."""


class NotFoundError(ComplaintDeskError):
    """No complaint with the requested ID exists in the store."""

    def __init__(self, complaint_id: int):
        super().__init__(f"Complaint {complaint_id} not found", {"id": complaint_id})
        self.complaint_id = complaint_id


class DuplicateIdError(ComplaintDeskError):
    """An ID was appended twice. IDs are assigned monotonically, so this is an invariant violation."""

    def __init__(self, complaint_id: int):
        super().__init__(f"Complaint ID {complaint_id} already exists", {"id": complaint_id})
        self.complaint_id = complaint_id
