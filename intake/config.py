# Shared configuration, helpers, and constants for the intake core

import os
from pathlib import Path
from datetime import datetime, timezone
from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------
_package_dir = Path(__file__).resolve().parent                # intake/
for _env_path in [_package_dir / ".env", _package_dir.parent / ".env", Path.cwd() / ".env"]:
    if _env_path.is_file():
        load_dotenv(_env_path, override=True)
        break
else:
    load_dotenv(override=True)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")

# ---------------------------------------------------------------------------
# Dispatch policy
# ---------------------------------------------------------------------------
URGENCY_THRESHOLD = int(os.getenv("URGENCY_THRESHOLD", "4"))
MIN_SEVERITY = 1
MAX_SEVERITY = 5

# ---------------------------------------------------------------------------
# Persistence / runtime
# ---------------------------------------------------------------------------
COMPLAINTS_CSV = os.getenv("COMPLAINTS_CSV", "complaints_data.csv")
SEED_DEMO_DATA = _env_flag("SEED_DEMO_DATA")
LOG_LEVEL      = os.getenv("LOG_LEVEL", "INFO").upper()
HOST           = os.getenv("HOST", "127.0.0.1")
PORT           = int(os.getenv("PORT", "8000"))

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def now_utc() -> datetime:
    return datetime.now(timezone.utc)
