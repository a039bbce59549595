"""
FastAPI application exposing duplicate detection.

Supports:
- Import previews for a whole account export
- Single record duplicate checks per entity kind
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import List, Dict, Any
import logging

from ... import __version__
from ...core.record import EntityKind
from ...importing import generate_preview_data
from ...matching import check_duplicates
from ...utils.config import configure_logging, default_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Set up logging when the server starts, not on import."""
    configure_logging(default_config)
    logger.info(f"TripMerge API {__version__} starting")
    yield


# Initialize FastAPI app
app = FastAPI(
    title="TripMerge API",
    description="Duplicate detection for imported travel account data",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Pydantic models for API
class ImportPreviewRequest(BaseModel):
    importData: Dict[str, Any]
    currentUserData: Dict[str, Any] = {}


class DuplicateCheckRequest(BaseModel):
    record: Dict[str, Any]
    candidates: List[Dict[str, Any]] = []


@app.get("/api/health")
async def health():
    """Liveness check."""
    return {"status": "ok"}


@app.post("/api/import/preview")
async def import_preview(request: ImportPreviewRequest):
    """Generate a duplicate-annotated preview of an account export."""
    try:
        return generate_preview_data(request.importData, request.currentUserData)
    except ValueError as e:
        logger.error(f"Invalid import data: {e}")
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/api/duplicates/{kind}")
async def check_record(kind: str, request: DuplicateCheckRequest):
    """Check one record of the given kind against candidate records."""
    try:
        entity_kind = EntityKind.from_value(kind)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown entity kind: {kind}")

    result = check_duplicates(entity_kind, request.record, request.candidates)
    return result.to_dict()
