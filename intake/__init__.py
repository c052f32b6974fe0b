"""In-memory complaint intake and dispatch core."""

from .engine import DispatchEngine
from .errors import ComplaintDeskError, DuplicateIdError, InvalidInputError, NotFoundError
from .models import Complaint, ComplaintCreate, ComplaintStatus, ComplaintType

__all__ = [
    "DispatchEngine",
    "Complaint",
    "ComplaintCreate",
    "ComplaintStatus",
    "ComplaintType",
    "ComplaintDeskError",
    "InvalidInputError",
    "NotFoundError",
    "DuplicateIdError",
]
