"""Digest endpoints — scrape and summarise.

Routes
------
POST /scrape            Body: {"url": "https://..."}   → title, content, fullText
POST /summarize         Body: {"url": "https://..."}   → scrape + summary + urduSummary
POST /summarize/text    Body: {"text": "..."}          → summary + urduSummary
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from pagedigest.pipeline import Digest, digest_url
from pagedigest.scraper.fetcher import InvalidUrlError
from pagedigest.summary.summarizer import summarize
from pagedigest.translator import translate_to_urdu

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class UrlRequest(BaseModel):
    url: Optional[str] = None


class TextRequest(BaseModel):
    text: str = ""


class ScrapeResponse(BaseModel):
    title: str
    content: str
    fullText: str


class SummarizeResponse(ScrapeResponse):
    summary: str
    urduSummary: str


class TextSummaryResponse(BaseModel):
    summary: str
    urduSummary: str


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _run_digest(url: Optional[str]) -> Digest:
    """Run the pipeline, mapping request-level failures to HTTP errors."""
    if not url or not url.strip():
        raise HTTPException(status_code=400, detail="URL is required")
    try:
        return digest_url(url)
    except InvalidUrlError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except httpx.HTTPStatusError as exc:
        logger.warning("Upstream returned %d for %s", exc.response.status_code, url)
        raise HTTPException(
            status_code=502,
            detail=f"Failed to fetch URL: upstream returned HTTP {exc.response.status_code}",
        ) from exc
    except httpx.RequestError as exc:
        logger.warning("Fetch failed for %s: %s", url, exc)
        raise HTTPException(
            status_code=502, detail=f"Failed to fetch URL: {exc}"
        ) from exc


def _scrape_payload(digest: Digest) -> dict[str, Any]:
    return {
        "title": digest.title,
        "content": digest.content,
        "fullText": digest.full_text,
    }


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("/scrape", response_model=ScrapeResponse)
def scrape_endpoint(body: UrlRequest) -> dict[str, Any]:
    """Fetch a page and return its title, preview content and full text."""
    return _scrape_payload(_run_digest(body.url))


@router.post("/summarize", response_model=SummarizeResponse)
def summarize_endpoint(body: UrlRequest) -> dict[str, Any]:
    """Fetch a page, summarise it and translate the summary."""
    digest = _run_digest(body.url)
    return {
        **_scrape_payload(digest),
        "summary": digest.summary,
        "urduSummary": digest.urdu_summary,
    }


@router.post("/summarize/text", response_model=TextSummaryResponse)
def summarize_text_endpoint(body: TextRequest) -> dict[str, Any]:
    """Summarise caller-supplied text without fetching anything."""
    summary = summarize(body.text)
    return {"summary": summary, "urduSummary": translate_to_urdu(summary)}
