# Municipal Complaint Desk: intake & dispatch service
# FastAPI front for the in-memory dispatch engine in ``intake``

import logging
import threading
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

import uvicorn
from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field

from intake import (
    Complaint, ComplaintCreate, DispatchEngine,
    DuplicateIdError, InvalidInputError, NotFoundError,
)
from intake.config import COMPLAINTS_CSV, HOST, LOG_LEVEL, PORT, SEED_DEMO_DATA
from intake.export import export_csv, render_csv
from intake.seed import seed_engine

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Request / Response Models
# ---------------------------------------------------------------------------
class DispatchMode(str, Enum):
    PRIORITY = "priority"
    FIFO = "fifo"

class ComplaintSubmission(ComplaintCreate):
    # Request-size caps for the HTTP body only; the core accepts any length.
    area: str = Field(..., max_length=200)
    description: str = Field(..., max_length=2000)
    confirm_duplicate: bool = False

class SubmitResponse(BaseModel):
    id: int
    possible_duplicate_of: Optional[int] = None
    complaint: Complaint

class DuplicateCheckResponse(BaseModel):
    existing_id: Optional[int] = None

class ServeResponse(BaseModel):
    served: Optional[Complaint] = None

class StatsResponse(BaseModel):
    total: int
    pending: int
    processed: int
    priority_queue: int
    fallback_queue: int

# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(engine: Optional[DispatchEngine] = None,
               export_path: Optional[Union[str, Path]] = COMPLAINTS_CSV,
               seed_demo: bool = SEED_DEMO_DATA) -> FastAPI:
    if engine is None:
        engine = DispatchEngine()
    # One lock over store, index, queues and ID counter: serve/delete read then write across all of them.
    engine_lock = threading.Lock()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if seed_demo and len(engine.store) == 0:
            with engine_lock:
                seed_engine(engine)
        logger.info("Complaint desk ready | urgency threshold: %d | autosave: %s",
                    engine.urgency_threshold, export_path or "disabled")
        yield
        if export_path:
            with engine_lock:
                records = engine.all_records()
            try:
                export_csv(records, export_path)
            except OSError as e:
                logger.error("Autosave to %s failed: %s", export_path, e)

    app = FastAPI(title="Municipal Complaint Desk", lifespan=lifespan)
    app.state.engine = engine
    app.state.engine_lock = engine_lock

    # -----------------------------------------------------------------------
    # Error handlers
    # -----------------------------------------------------------------------
    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError):
        return JSONResponse(status_code=400, content={"detail": exc.message})

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"detail": exc.message})

    @app.exception_handler(DuplicateIdError)
    async def duplicate_id_handler(request: Request, exc: DuplicateIdError):
        logger.error("Invariant violation: %s", exc.message)
        return JSONResponse(status_code=500, content={"detail": "Internal record store error"})

    # -----------------------------------------------------------------------
    # COMPLAINT ENDPOINTS
    # -----------------------------------------------------------------------
    @app.post("/complaints", response_model=SubmitResponse)
    async def submit_complaint(data: ComplaintSubmission):
        with engine_lock:
            existing = engine.check_duplicate(data.area, data.description)
            if existing is not None and not data.confirm_duplicate:
                raise HTTPException(status_code=409, detail={
                    "message": f"A similar complaint (ID {existing}) exists. Resubmit with confirm_duplicate to add anyway.",
                    "existing_id": existing})
            complaint_id = engine.commit(ComplaintCreate(**data.model_dump(exclude={"confirm_duplicate"})))
            complaint = engine.require(complaint_id)
        return SubmitResponse(id=complaint_id, possible_duplicate_of=existing, complaint=complaint)

    @app.get("/complaints", response_model=List[Complaint])
    async def list_complaints():
        with engine_lock:
            return engine.all_records()

    @app.get("/complaints/duplicate", response_model=DuplicateCheckResponse)
    async def check_duplicate(area: str = Query(..., max_length=200),
                              description: str = Query(..., max_length=2000)):
        with engine_lock:
            return DuplicateCheckResponse(existing_id=engine.check_duplicate(area, description))

    @app.get("/complaints/report", response_model=List[Complaint])
    async def pending_report():
        with engine_lock:
            return engine.pending_report()

    @app.get("/complaints/stats", response_model=StatsResponse)
    async def complaint_stats():
        with engine_lock:
            return StatsResponse(**engine.stats())

    @app.get("/complaints/export")
    async def export_complaints():
        with engine_lock:
            records = engine.all_records()
        return Response(content=render_csv(records), media_type="text/csv")

    @app.get("/complaints/{complaint_id}", response_model=Complaint)
    async def get_complaint(complaint_id: int):
        with engine_lock:
            return engine.require(complaint_id)

    @app.delete("/complaints/{complaint_id}")
    async def delete_complaint(complaint_id: int):
        with engine_lock:
            if not engine.delete_by_id(complaint_id):
                raise NotFoundError(complaint_id)
        return {"detail": f"Deleted complaint {complaint_id}", "id": complaint_id}

    # -----------------------------------------------------------------------
    # DISPATCH
    # -----------------------------------------------------------------------
    @app.post("/dispatch/next", response_model=ServeResponse)
    async def serve_next(mode: DispatchMode = DispatchMode.PRIORITY):
        with engine_lock:
            served = engine.serve_next(use_priority=mode == DispatchMode.PRIORITY)
        return ServeResponse(served=served)

    # -----------------------------------------------------------------------
    # HEALTH
    # -----------------------------------------------------------------------
    @app.get("/health")
    async def health():
        return {"status": "healthy", "system": "Municipal Complaint Desk",
                "timestamp": datetime.now(timezone.utc)}

    return app


if __name__ == "__main__":
    uvicorn.run("dispatcher:create_app", factory=True, host=HOST, port=PORT)
