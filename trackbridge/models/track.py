"""Track descriptor: metadata plus audio source (path or in-memory buffer)."""
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

# Wire key -> attribute name
TRACK_KEYS = {
    "path": "path",
    "title": "title",
    "artist": "artist",
    "albumArtUrl": "album_art_url",
    "albumArtAsset": "album_art_asset",
    "albumArtFile": "album_art_file",
}


class MalformedInput(ValueError):
    """JSON text could not be turned into a track (bad syntax or not an object)."""


def _owned_bytes(data: Any) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"data_buffer must be bytes-like, got {type(data).__name__}")


@dataclass(frozen=True)
class TrackDescriptor:
    """One playable track as handed from the host to the audio layer.

    Absent fields are None, never "". The audio source is either `path` or
    `data_buffer`; see is_using_path().
    """
    path: Optional[str] = None
    title: Optional[str] = None
    artist: Optional[str] = None
    album_art_url: Optional[str] = None
    album_art_asset: Optional[str] = None
    album_art_file: Optional[str] = None
    data_buffer: Optional[bytes] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.data_buffer is not None:
            # frozen: bypass __setattr__ to store our own copy
            object.__setattr__(self, "data_buffer", _owned_bytes(self.data_buffer))

    @classmethod
    def from_json(cls, json_string: str | bytes | bytearray) -> "TrackDescriptor":
        """Parse JSON text and build from the resulting object.

        Raises MalformedInput if the text is not valid JSON or not a JSON object.
        """
        try:
            # Integers are never track fields; float avoids the int digit limit
            data = json.loads(json_string, parse_int=float)
        except (ValueError, TypeError) as e:
            raise MalformedInput(f"Invalid track JSON: {e}") from e
        except RecursionError as e:
            raise MalformedInput("Track JSON is nested too deeply") from e
        if not isinstance(data, dict):
            raise MalformedInput(
                f"Track JSON must be an object, got {type(data).__name__}"
            )
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TrackDescriptor":
        """Build from a mapping; non-string values and unknown keys are ignored."""
        if not isinstance(data, Mapping):
            return cls()
        values = {}
        for key, attr in TRACK_KEYS.items():
            value = data.get(key)
            if isinstance(value, str):
                values[attr] = value
        return cls(**values)

    @classmethod
    def from_path(
        cls,
        path: str,
        *,
        title: Optional[str] = None,
        artist: Optional[str] = None,
        album_art_url: Optional[str] = None,
        album_art_asset: Optional[str] = None,
        album_art_file: Optional[str] = None,
    ) -> "TrackDescriptor":
        """Track whose audio lives at a file path or URI."""
        return cls(
            path=path,
            title=title,
            artist=artist,
            album_art_url=album_art_url,
            album_art_asset=album_art_asset,
            album_art_file=album_art_file,
        )

    @classmethod
    def from_buffer(
        cls,
        data: bytes | bytearray | memoryview,
        *,
        title: Optional[str] = None,
        artist: Optional[str] = None,
        album_art_url: Optional[str] = None,
        album_art_asset: Optional[str] = None,
        album_art_file: Optional[str] = None,
    ) -> "TrackDescriptor":
        """Track whose audio is already in memory. `path` stays absent."""
        return cls(
            data_buffer=_owned_bytes(data),
            title=title,
            artist=artist,
            album_art_url=album_art_url,
            album_art_asset=album_art_asset,
            album_art_file=album_art_file,
        )

    def is_using_path(self) -> bool:
        """True if playback should open `path`; False means decode `data_buffer`."""
        return isinstance(self.path, str) and len(self.path) > 0

    @property
    def buffer_size(self) -> int:
        return len(self.data_buffer) if self.data_buffer is not None else 0

    def to_dict(self) -> dict[str, str]:
        """Wire keys of the present string fields. The buffer is never included."""
        out = {}
        for key, attr in TRACK_KEYS.items():
            value = getattr(self, attr)
            if value is not None:
                out[key] = value
        return out
