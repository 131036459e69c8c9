import json

import pytest

import entries
from entries import Content, ContentEntry
from errs import MalformedManifest

def test_encode_layout():
    content = Content(content=[ContentEntry("a.json", "k" * 32), ContentEntry("manifest.json", None)])
    assert json.loads(entries.encode(content)) == {
        "version": 1,
        "content": [{"path": "a.json", "key": "k" * 32}, {"path": "manifest.json", "key": None}]}
    assert b" " not in entries.encode(content)

def test_decode_roundtrip():
    content = Content(content=[ContentEntry("x/y.png", "k" * 32), ContentEntry("z", None)])
    assert entries.decode(entries.encode(content)) == content

def test_decode_without_version_defaults():
    content = entries.decode(b'{"content":[{"path":"a","key":null}]}')
    assert content.version == 1
    assert content.content == [ContentEntry("a", None)]

@pytest.mark.parametrize("data", [
    b"",
    b"\x8f\x01garbage",
    b"[]",
    b'{"version":1}',
    b'{"content":{}}',
    b'{"content":[1]}',
    b'{"content":[{"key":null}]}',
    b'{"content":[{"path":"a","key":5}]}',
    b'{"version":"1","content":[]}',
])
def test_decode_rejects_bad_shapes(data):
    with pytest.raises(MalformedManifest):
        entries.decode(data)

def test_normalize_sorts_and_keeps_first_duplicate():
    content = Content(content=[
        ContentEntry("b", "first-b"),
        ContentEntry("a", None),
        ContentEntry("b", "second-b"),
    ])
    normalized = entries.normalize(content)
    assert [e.path for e in normalized.content] == ["a", "b"]
    assert normalized.content[1].key == "first-b"
