# Complaint models: input validation and the stored record

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from .config import MIN_SEVERITY, MAX_SEVERITY
from .dedup import duplicate_key

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class ComplaintType(str, Enum):
    WATER = "water"
    ELECTRICITY = "electricity"
    GARBAGE = "garbage"
    TRAFFIC = "traffic"
    OTHER = "other"

class ComplaintStatus(str, Enum):
    PENDING = "Pending"
    PROCESSED = "Processed"

# ---------------------------------------------------------------------------
# Pydantic Models
# ---------------------------------------------------------------------------
class ComplaintCreate(BaseModel):
    type: ComplaintType
    area: str
    description: str
    severity: int = Field(..., ge=MIN_SEVERITY, le=MAX_SEVERITY)

    @field_validator("area", "description")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

class Complaint(BaseModel):
    """A filed complaint. Everything but ``status`` is fixed at creation."""
    id: int = Field(..., frozen=True)
    type: ComplaintType = Field(..., frozen=True)
    area: str = Field(..., frozen=True)
    description: str = Field(..., frozen=True)
    severity: int = Field(..., ge=MIN_SEVERITY, le=MAX_SEVERITY, frozen=True)
    timestamp: datetime = Field(..., frozen=True)
    status: ComplaintStatus = ComplaintStatus.PENDING

    @property
    def is_pending(self) -> bool:
        return self.status == ComplaintStatus.PENDING

    def duplicate_key(self) -> str:
        return duplicate_key(self.area, self.description)
