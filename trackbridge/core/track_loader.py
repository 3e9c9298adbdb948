"""Turn host payloads into TrackDescriptors and summarize them for the audio layer."""
import logging
from typing import Any, Optional

from trackbridge.config import MAX_BUFFER_BYTES
from trackbridge.models.track import TRACK_KEYS, TrackDescriptor

logger = logging.getLogger(__name__)


class BufferRejected(ValueError):
    """Uploaded audio buffer is empty or larger than the configured limit."""

    def __init__(self, message: str, too_large: bool = False) -> None:
        super().__init__(message)
        self.too_large = too_large


def source_of(track: TrackDescriptor) -> Optional[str]:
    """Return "path", "buffer", or None when the track carries no audio source."""
    if track.is_using_path():
        return "path"
    if track.buffer_size > 0:
        return "buffer"
    return None


def summarize(track: Optional[TrackDescriptor]) -> dict[str, Any]:
    """Map a descriptor to the API response shape (buffer bytes are not echoed)."""
    if track is None:
        return {"track": None, "is_using_path": False, "source": None, "buffer_size": 0}
    return {
        "track": track.to_dict(),
        "is_using_path": track.is_using_path(),
        "source": source_of(track),
        "buffer_size": track.buffer_size,
    }


def load_from_text(text: str | bytes) -> TrackDescriptor:
    """Build from raw JSON text. Raises MalformedInput."""
    track = TrackDescriptor.from_json(text)
    logger.debug("Loaded track from JSON text: source=%s", source_of(track))
    return track


def load_from_mapping(data: Any) -> TrackDescriptor:
    """Build from an already-parsed JSON body; anything but an object yields an empty track."""
    track = TrackDescriptor.from_dict(data)
    if isinstance(data, dict):
        ignored = sorted(k for k in data if k not in TRACK_KEYS)
        if ignored:
            logger.debug("Ignoring unrecognized track keys: %s", ", ".join(ignored))
    logger.debug("Loaded track from mapping: source=%s", source_of(track))
    return track


def check_buffer_size(size: int, max_bytes: Optional[int] = None) -> None:
    """Raise BufferRejected if `size` exceeds max_bytes (default MAX_BUFFER_BYTES)."""
    if max_bytes is None:
        max_bytes = MAX_BUFFER_BYTES
    if size > max_bytes:
        raise BufferRejected(
            f"Audio buffer is {size} bytes; limit is {max_bytes}",
            too_large=True,
        )


def load_from_buffer(
    data: bytes,
    metadata: dict[str, Optional[str]],
    max_bytes: Optional[int] = None,
) -> TrackDescriptor:
    """Build an in-memory track from uploaded bytes plus wire-keyed metadata.

    max_bytes defaults to MAX_BUFFER_BYTES. Raises BufferRejected for an empty
    or oversized payload.
    """
    if not data:
        raise BufferRejected("Audio buffer is empty")
    check_buffer_size(len(data), max_bytes)
    # Reuse the mapping rules so metadata gets the same string-only coercion
    meta = TrackDescriptor.from_dict({k: v for k, v in metadata.items() if k != "path"})
    track = TrackDescriptor.from_buffer(
        data,
        title=meta.title,
        artist=meta.artist,
        album_art_url=meta.album_art_url,
        album_art_asset=meta.album_art_asset,
        album_art_file=meta.album_art_file,
    )
    logger.debug("Loaded track from buffer: %d bytes", track.buffer_size)
    return track
