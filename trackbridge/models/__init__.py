"""Data models for tracks handed to the audio layer."""
from trackbridge.models.track import TRACK_KEYS, MalformedInput, TrackDescriptor

__all__ = [
    "MalformedInput",
    "TRACK_KEYS",
    "TrackDescriptor",
]
