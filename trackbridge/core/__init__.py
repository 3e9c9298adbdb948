"""Core services: loading host payloads into track descriptors."""
from trackbridge.core.track_loader import (
    BufferRejected,
    load_from_buffer,
    load_from_mapping,
    load_from_text,
    summarize,
)

__all__ = [
    "BufferRejected",
    "load_from_buffer",
    "load_from_mapping",
    "load_from_text",
    "summarize",
]
