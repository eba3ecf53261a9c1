"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from pagedigest.api import app

    uvicorn pagedigest.api:app --reload
"""

from pagedigest.api.app import app

__all__ = ["app"]
