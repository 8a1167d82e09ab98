"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from streamscout.api import app

    uvicorn streamscout.api:app --reload
"""

from streamscout.api.app import app

__all__ = ["app"]
