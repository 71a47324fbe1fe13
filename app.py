"""
App assembly entry point.

Re-exports the FastAPI `app` from `estate.api.main` for `uvicorn app:app`.
"""

from estate.api.main import app  # noqa: F401
