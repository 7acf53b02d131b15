"""
GPS Point Routes

Endpoints for batch ingestion, listing and moderation of point-pairs.
"""

import json
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from gps_collector.config import settings
from gps_collector.db.session import get_db
from gps_collector.features.points import (
    BatchIngestor,
    BatchResponse,
    GpsPointRepository,
    GpsPointSchema,
    HideRequest,
    HideResponse,
    LatestResponse,
    MalformedInputError,
    StorageFailureError,
)
from gps_collector.features.points.ingestor import utc_now
from gps_collector.features.points.validator import as_number

logger = logging.getLogger(__name__)

router = APIRouter()


def clamp_limit(raw: Optional[str]) -> int:
    """Parse ?limit=, falling back to the default and clamping to [1, max]."""
    number = as_number(raw)
    if number is None:
        return settings.latest_default_limit
    return max(1, min(settings.latest_max_limit, int(number)))


@router.post("/batch", response_model=BatchResponse)
async def ingest_batch(
    request: Request,
    db: Session = Depends(get_db)
):
    """
    Ingest a batch of point-pairs.

    Invalid items are reported in `errors` with their index; valid items
    are stored. Nothing is stored if the database write fails.
    """
    body = await request.body()
    if not body.strip():
        raise HTTPException(status_code=400, detail="Empty body")

    try:
        payload = json.loads(body)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid JSON")

    ingestor = BatchIngestor(db, trust_client_metrics=settings.trust_client_metrics)
    try:
        result = ingestor.ingest(payload)
    except MalformedInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageFailureError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return BatchResponse(
        inserted=result.inserted,
        errors=[error.to_dict() for error in result.errors],
    )


@router.get("/latest", response_model=LatestResponse)
async def get_latest(
    limit: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """
    Get the latest stored rows, newest first.

    Args:
        limit: Number of rows (clamped to 1..500, default 50)
    """
    clamped = clamp_limit(limit)
    repo = GpsPointRepository(db)
    rows = repo.get_latest(clamped)

    return LatestResponse(
        total=repo.count(),
        limit=clamped,
        count=len(rows),
        rows=[GpsPointSchema.model_validate(row) for row in rows],
    )


@router.post("/hide", response_model=HideResponse)
async def hide_point(
    request: HideRequest,
    db: Session = Depends(get_db)
):
    """Hide a row (or unhide it with `hide: false`)."""
    repo = GpsPointRepository(db)
    if request.hide:
        changed = repo.hide(request.id, request.reason, hidden_at=utc_now())
    else:
        changed = repo.unhide(request.id)
    db.commit()

    logger.info(f"Point {request.id} {'hidden' if request.hide else 'unhidden'} (changed={changed})")
    return HideResponse(id=request.id, hide=int(request.hide), changed=changed)
