# Seed data: sample Karachi complaints for demos
#
# Coverage:
#   Types      : water, electricity, garbage, traffic, other
#   Severities : 1-5 (both queues populated)
#   Special    : one near-duplicate pair (same area/description, different case)

import logging
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Complaint records
# ---------------------------------------------------------------------------
SAMPLE_COMPLAINTS: List[Dict] = [
    {"type": "water", "area": "Gulshan-e-Iqbal Block 13",
     "description": "Main water line burst, street flooded since morning", "severity": 5},
    {"type": "garbage", "area": "Saddar",
     "description": "Garbage not collected for a week near Empress Market", "severity": 2},
    {"type": "electricity", "area": "Korangi Industrial Area",
     "description": "Exposed live wire hanging from pole near school gate", "severity": 5},
    {"type": "traffic", "area": "Shahrah-e-Faisal",
     "description": "Signal at Nursery stop out of order, heavy jam", "severity": 4},
    {"type": "water", "area": "Lyari",
     "description": "Low water pressure in the evenings", "severity": 3},
    {"type": "other", "area": "Clifton Block 5",
     "description": "Stray dogs near the park", "severity": 1},
    {"type": "electricity", "area": "North Nazimabad",
     "description": "Load shedding beyond the announced schedule", "severity": 3},
    {"type": "garbage", "area": "saddar",
     "description": "Garbage not collected for a week near Empress Market ", "severity": 2},
]

# ---------------------------------------------------------------------------
# Import
# ---------------------------------------------------------------------------
def seed_engine(engine, complaints: Optional[List[Dict]] = None) -> List[int]:
    """Submit sample complaints through the normal intake path. Returns the new IDs."""
    complaints = SAMPLE_COMPLAINTS if complaints is None else complaints
    ids = []
    for c in complaints:
        ids.append(engine.submit(c["type"], c["area"], c["description"], c["severity"]))
    logger.info("Seeded %d sample complaints", len(ids))
    return ids
