import dataclasses
import json

import pytest

from trackbridge.models.track import TRACK_KEYS, MalformedInput, TrackDescriptor


def test_song_a_from_json():
    t = TrackDescriptor.from_json('{"title":"Song A","path":"/music/a.mp3"}')
    assert t.title == "Song A"
    assert t.path == "/music/a.mp3"
    assert t.artist is None
    assert t.album_art_url is None
    assert t.album_art_asset is None
    assert t.album_art_file is None
    assert t.data_buffer is None
    assert t.is_using_path()


def test_empty_object_leaves_everything_absent():
    t = TrackDescriptor.from_json("{}")
    assert t == TrackDescriptor()
    assert not t.is_using_path()


def test_json_and_mapping_agree():
    doc = {
        "path": "https://example.com/a.ogg",
        "title": "T",
        "artist": "A",
        "albumArtUrl": "https://example.com/cover.png",
        "albumArtAsset": "assets/cover.png",
        "albumArtFile": "/tmp/cover.png",
    }
    assert TrackDescriptor.from_json(json.dumps(doc)) == TrackDescriptor.from_dict(doc)


@pytest.mark.parametrize("key", list(TRACK_KEYS))
def test_missing_key_is_absent_not_empty(key):
    doc = {k: "x" for k in TRACK_KEYS if k != key}
    t = TrackDescriptor.from_json(json.dumps(doc))
    assert getattr(t, TRACK_KEYS[key]) is None


@pytest.mark.parametrize("key", list(TRACK_KEYS))
@pytest.mark.parametrize("value", [3, 1.5, True, None, ["a"], {"a": "b"}])
def test_non_string_value_is_absent(key, value):
    t = TrackDescriptor.from_json(json.dumps({key: value}))
    assert getattr(t, TRACK_KEYS[key]) is None


def test_unknown_keys_ignored():
    t = TrackDescriptor.from_json('{"title": "X", "duration": 12, "codec": "mp3"}')
    assert t == TrackDescriptor(title="X")


def test_data_buffer_key_in_json_ignored():
    t = TrackDescriptor.from_json('{"dataBuffer": "AAEC"}')
    assert t.data_buffer is None


def test_explicit_empty_string_is_kept():
    t = TrackDescriptor.from_dict({"path": "", "title": ""})
    assert t.path == ""
    assert t.title == ""
    assert not t.is_using_path()


@pytest.mark.parametrize("text", ["{not json", "", "{'path': 'a'}", "[1, 2"])
def test_malformed_json_raises(text):
    with pytest.raises(MalformedInput):
        TrackDescriptor.from_json(text)


@pytest.mark.parametrize("text", ["[]", '"a string"', "42", "null", "true"])
def test_json_that_is_not_an_object_raises(text):
    with pytest.raises(MalformedInput):
        TrackDescriptor.from_json(text)


def test_non_text_json_argument_raises():
    with pytest.raises(MalformedInput):
        TrackDescriptor.from_json(None)


def test_json_bytes_accepted():
    t = TrackDescriptor.from_json(b'{"artist": "B"}')
    assert t.artist == "B"


def test_malformed_input_is_value_error():
    assert issubclass(MalformedInput, ValueError)


@pytest.mark.parametrize("data", [None, [], "path", 5])
def test_from_dict_non_mapping_yields_empty(data):
    assert TrackDescriptor.from_dict(data) == TrackDescriptor()


def test_buffer_only_track_does_not_use_path():
    t = TrackDescriptor.from_buffer(b"\x00\x01\x02", title="Clip")
    assert t.path is None
    assert t.title == "Clip"
    assert t.buffer_size == 3
    assert not t.is_using_path()


def test_direct_construction_with_buffer():
    t = TrackDescriptor(data_buffer=b"RIFF")
    assert not t.is_using_path()
    assert t.data_buffer == b"RIFF"


def test_buffer_is_copied():
    raw = bytearray(b"abc")
    t = TrackDescriptor.from_buffer(raw)
    raw[0] = ord("z")
    assert t.data_buffer == b"abc"
    assert isinstance(t.data_buffer, bytes)


def test_memoryview_buffer_via_constructor():
    t = TrackDescriptor(data_buffer=memoryview(b"xyz"))
    assert t.data_buffer == b"xyz"


def test_from_buffer_rejects_non_bytes():
    with pytest.raises(TypeError):
        TrackDescriptor.from_buffer("not bytes")


def test_from_path():
    t = TrackDescriptor.from_path("/music/b.flac", artist="B")
    assert t.is_using_path()
    assert t.data_buffer is None
    assert t.artist == "B"


def test_path_wins_when_both_set():
    t = TrackDescriptor(path="/music/c.mp3", data_buffer=b"\x00")
    assert t.is_using_path()


def test_fields_are_read_only():
    t = TrackDescriptor(title="X")
    with pytest.raises(dataclasses.FrozenInstanceError):
        t.title = "Y"


def test_to_dict_omits_absent_fields_and_buffer():
    doc = {"title": "Song A", "path": "/music/a.mp3"}
    t = TrackDescriptor.from_dict(doc)
    assert t.to_dict() == doc
    assert TrackDescriptor.from_buffer(b"\x01", artist="A").to_dict() == {"artist": "A"}


def test_repr_hides_buffer():
    t = TrackDescriptor.from_buffer(b"\x00" * 1024)
    assert "data_buffer" not in repr(t)


def test_huge_integer_value_is_absent():
    t = TrackDescriptor.from_json('{"path": "/a.mp3", "title": ' + "1" * 5000 + "}")
    assert t.path == "/a.mp3"
    assert t.title is None


def test_deeply_nested_unknown_key_raises_malformed():
    text = '{"path": "/a.mp3", "extra": ' + "[" * 100000 + "]" * 100000 + "}"
    with pytest.raises(MalformedInput):
        TrackDescriptor.from_json(text)
