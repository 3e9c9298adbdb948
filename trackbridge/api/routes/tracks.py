"""Track hand-off: host loads a track (JSON, mapping, or raw audio), audio layer reads it back."""
import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request
from pydantic import BaseModel

from trackbridge.api.state import AppState, get_state
from trackbridge.core.track_loader import (
    BufferRejected,
    check_buffer_size,
    load_from_buffer,
    load_from_mapping,
    load_from_text,
    summarize,
)
from trackbridge.models.track import MalformedInput

router = APIRouter()
logger = logging.getLogger(__name__)


class TrackSummary(BaseModel):
    """Normalized track as seen by the audio layer."""
    track: Optional[dict[str, str]] = None
    is_using_path: bool = False
    source: Optional[str] = None  # "path" | "buffer"
    buffer_size: int = 0


@router.post("/", response_model=TrackSummary)
def load_track(
    data: Any = Body(None),
    state: AppState = Depends(get_state),
):
    """Load a track from a JSON object body. Unknown keys and non-string values are ignored."""
    track = load_from_mapping(data)
    state.set_current(track)
    return summarize(track)


@router.post("/json", response_model=TrackSummary)
async def load_track_json(
    request: Request,
    state: AppState = Depends(get_state),
):
    """Load a track from raw JSON text (e.g. forwarded verbatim from a plugin channel)."""
    text = await request.body()
    try:
        track = load_from_text(text)
    except MalformedInput as e:
        logger.warning("Rejected track JSON: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    state.set_current(track)
    return summarize(track)


@router.post("/buffer", response_model=TrackSummary)
async def load_track_buffer(
    request: Request,
    title: Optional[str] = None,
    artist: Optional[str] = None,
    album_art_url: Optional[str] = Query(None, alias="albumArtUrl"),
    album_art_asset: Optional[str] = Query(None, alias="albumArtAsset"),
    album_art_file: Optional[str] = Query(None, alias="albumArtFile"),
    state: AppState = Depends(get_state),
):
    """Load an in-memory track from the raw request body; metadata comes from query params."""
    metadata = {
        "title": title,
        "artist": artist,
        "albumArtUrl": album_art_url,
        "albumArtAsset": album_art_asset,
        "albumArtFile": album_art_file,
    }
    try:
        # Reject on the declared size first, then stop reading once the limit is passed
        declared = request.headers.get("content-length")
        if declared is not None and declared.isdigit():
            check_buffer_size(int(declared))
        data = bytearray()
        async for chunk in request.stream():
            data.extend(chunk)
            check_buffer_size(len(data))
        track = load_from_buffer(bytes(data), metadata)
    except BufferRejected as e:
        logger.warning("Rejected track buffer: %s", e)
        raise HTTPException(status_code=413 if e.too_large else 400, detail=str(e))
    state.set_current(track)
    return summarize(track)


@router.get("/current", response_model=TrackSummary)
def get_current(state: AppState = Depends(get_state)):
    """Return the currently loaded track, or track=null."""
    return summarize(state.get_current())


@router.delete("/current", status_code=204)
def clear_current(state: AppState = Depends(get_state)):
    """Forget the currently loaded track."""
    if state.clear_current():
        logger.info("Cleared current track")
