"""
Ebike status server. Status page at /, JSON under /api.

Run from repo root: uvicorn ebike_status.server:app --reload
Then open http://127.0.0.1:8000/ (page) or .../api/stations (JSON).
"""

from fastapi import APIRouter, FastAPI, HTTPException, Query, Request
from fastapi.responses import Response

from ebike_status.errors import FeedError
from ebike_status.handler import StatusRequest, handle, report
from ebike_status.log import configure_logging

configure_logging()

app = FastAPI(title="Ebike status")


@app.get("/")
def index(request: Request, fmt: str | None = Query(None, alias="format")):
    """Status page; HTML for browsers, text for curl. Optional query: format=text|html."""
    resp = handle(
        StatusRequest(
            accept=request.headers.get("accept"),
            user_agent=request.headers.get("user-agent"),
            fmt=fmt,
        )
    )
    return Response(content=resp.body, status_code=resp.status_code, media_type=resp.content_type)


api_router = APIRouter(prefix="/api", tags=["api"])


@api_router.get("/stations")
def stations():
    """Configured stations grouped by region, with e-bike count and color."""
    try:
        return report()
    except FeedError:
        raise HTTPException(status_code=502, detail="Get Status Failed")


app.include_router(api_router)
