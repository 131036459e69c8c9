## entries.py
## last updated: 19/10/2026 <d/m/y>
## m-c-r-p
import json
from dataclasses import dataclass, field
from typing import List, Optional
from errs import MalformedManifest

CONTENT_VERSION = 1

@dataclass
class ContentEntry:
    path: str
    key: Optional[str] = None

    @property
    def encrypted(self):
        return self.key is not None

    def to_dict(self):
        return {"path": self.path, "key": self.key}

@dataclass
class Content:
    content: List[ContentEntry] = field(default_factory=list)
    version: int = CONTENT_VERSION

    def to_dict(self):
        return {"version": self.version, "content": [e.to_dict() for e in self.content]}

def encode(content):
    return json.dumps(content.to_dict(), separators=(",", ":"), ensure_ascii=False).encode("utf-8")

def _entry_from(item, index):
    if not isinstance(item, dict):
        raise MalformedManifest(f"Manifest entry {index} is not an object.")
    path = item.get("path")
    key = item.get("key")
    if not isinstance(path, str):
        raise MalformedManifest(f"Manifest entry {index} has no string 'path'.")
    if key is not None and not isinstance(key, str):
        raise MalformedManifest(f"Manifest entry {index} ('{path}') has a non-string 'key'.")
    return ContentEntry(path=path, key=key)

def decode(data):
    try:
        raw = json.loads(bytes(data).decode("utf-8"))
    except (ValueError, RecursionError) as e:
        raise MalformedManifest(f"Manifest is not valid JSON: {e}") from e
    if not isinstance(raw, dict):
        raise MalformedManifest("Manifest root is not an object.")
    items = raw.get("content")
    if not isinstance(items, list):
        raise MalformedManifest("Manifest has no 'content' list.")
    version = raw.get("version", CONTENT_VERSION)
    if isinstance(version, bool) or not isinstance(version, int):
        raise MalformedManifest(f"Manifest version {version!r} is not an integer.")
    return Content(content=[_entry_from(item, i) for i, item in enumerate(items)], version=version)

def normalize(content):
    ## stable sort, first occurrence of a path wins
    seen = set()
    entries = []
    for entry in sorted(content.content, key=lambda e: e.path):
        if entry.path in seen:
            continue
        seen.add(entry.path)
        entries.append(entry)
    return Content(content=entries, version=content.version)

## end
