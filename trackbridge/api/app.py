"""FastAPI app, CORS, and route registration."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from trackbridge.config import LOG_LEVEL

# Configure logging in the worker process (uvicorn --reload spawns a fresh one)
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(levelname)s: %(name)s: %(message)s",
)

from trackbridge.api.state import AppState, get_state

# Import routes after state to avoid circular imports
from trackbridge.api.routes import tracks

__all__ = ["app", "AppState", "get_state"]

app = FastAPI(
    title="TrackBridge API",
    description="Local API handing normalized track descriptors from the host to the audio layer",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(tracks.router, prefix="/api/tracks", tags=["tracks"])
