"""
Flat CSV export of the record store.

Rows are written as plain comma-joined text rather than quoted CSV: commas
inside ``area`` and ``description`` are replaced by semicolons and line
breaks by spaces, so every record stays on a single row.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Union

from .models import Complaint

logger = logging.getLogger(__name__)

CSV_COLUMNS = ["id", "type", "area", "description", "severity", "timestamp", "status"]
CSV_HEADER = ",".join(CSV_COLUMNS)


def _clean(text: str) -> str:
    return (text or "").replace(",", ";").replace("\r", " ").replace("\n", " ")


def complaint_to_row(c: Complaint) -> str:
    return ",".join([
        str(c.id), c.type.value, _clean(c.area), _clean(c.description),
        str(c.severity), c.timestamp.isoformat(), c.status.value,
    ])


def render_csv(complaints: Iterable[Complaint]) -> str:
    lines: List[str] = [CSV_HEADER]
    lines.extend(complaint_to_row(c) for c in complaints)
    return "\n".join(lines) + "\n"


def export_csv(complaints: Iterable[Complaint], path: Union[str, Path]) -> int:
    """Write ``complaints`` to ``path``. Returns the number of records written."""
    records = list(complaints)
    path = Path(path)
    path.write_text(render_csv(records), encoding="utf-8")
    logger.info("Exported %d complaints to %s", len(records), path)
    return len(records)
