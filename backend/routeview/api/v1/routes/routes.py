"""
Route Upload Routes

Endpoint for parsing uploaded GPX files into route records.
"""

from fastapi import APIRouter, UploadFile, File, HTTPException

from routeview.config import settings
from routeview.features.gpx import (
    GPXParseError,
    GPXRouteParser,
    NoTrackDataError,
    Route,
)

router = APIRouter()


@router.post("/parse", response_model=Route)
async def parse_route(file: UploadFile = File(...)):
    """
    Upload and parse a GPX file.

    Returns the full route record: segments, totals, bounds, waypoints
    and data-quality warnings. Storing it is left to the caller.
    """
    # Validate file
    if not file.filename or not file.filename.lower().endswith('.gpx'):
        raise HTTPException(status_code=400, detail="Only .gpx files are allowed")

    # Read content
    content = await file.read()

    if len(content) == 0:
        raise HTTPException(status_code=400, detail="File is empty")

    if len(content) > settings.max_upload_size_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large (max {settings.max_upload_size_mb}MB)"
        )

    # Parse GPX
    try:
        route = GPXRouteParser(settings).parse(content, filename=file.filename)
    except NoTrackDataError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except GPXParseError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return route
