"""Storage endpoints — persistence and store health.

Routes
------
POST /save-summary      Body: {title, url, summary, urdu_summary, full_text}
GET  /summaries         ?limit=N, newest summaries first
GET  /test-db           Per-store health check
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, HTTPException, Query, Request
from pydantic import BaseModel

from pagedigest.config import settings
from pagedigest.db.summaries import list_summaries
from pagedigest.pipeline import Digest, check_stores, save_digest

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class SaveRequest(BaseModel):
    title: Optional[str] = None
    url: Optional[str] = None
    summary: Optional[str] = None
    urdu_summary: Optional[str] = None
    full_text: Optional[str] = None


class SaveResponse(BaseModel):
    success: bool
    summary_saved: bool
    content_saved: bool
    summary_id: Optional[str] = None
    content_id: Optional[str] = None
    errors: list[str]


class SummaryOut(BaseModel):
    id: str
    title: str
    url: str
    summary: str
    urdu_summary: str
    created_at: int


class StoreStatusResponse(BaseModel):
    summaries: bool
    contents: bool
    errors: list[str]


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("/save-summary", response_model=SaveResponse)
def save_summary_endpoint(body: SaveRequest, request: Request) -> dict[str, Any]:
    """Persist a digest to both stores; partial success is still a 200."""
    if not (body.title and body.url and body.summary and body.full_text):
        raise HTTPException(status_code=400, detail="Missing required fields")

    digest = Digest(
        url=body.url,
        title=body.title,
        content=body.full_text[: settings.content_preview_chars],
        full_text=body.full_text,
        summary=body.summary,
        urdu_summary=body.urdu_summary or "",
    )
    report = save_digest(request.app.state.summaries_db, request.app.state.contents_db, digest)
    return {
        "success": report.success,
        "summary_saved": report.summary_saved,
        "content_saved": report.content_saved,
        "summary_id": report.summary_id,
        "content_id": report.content_id,
        "errors": report.errors,
    }


@router.get("/summaries", response_model=list[SummaryOut])
def list_summaries_endpoint(
    request: Request,
    limit: int = Query(20, ge=1, le=200),
) -> list[dict[str, Any]]:
    """Return the most recently stored summaries."""
    records = list_summaries(request.app.state.summaries_db, limit=limit)
    return [vars(r) for r in records]


@router.get("/test-db", response_model=StoreStatusResponse)
def test_db_endpoint(request: Request) -> dict[str, Any]:
    """Report whether each store answers a trivial query."""
    status = check_stores(request.app.state.summaries_db, request.app.state.contents_db)
    return {"summaries": status.summaries, "contents": status.contents, "errors": status.errors}
