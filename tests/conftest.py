import json
import random

import pytest

from keygen import KeyGenerator

PACK_UUID = "1f0c5e2a-8d3b-4c1e-9a77-3b5d2e6f9c10"
TOP_KEY = "abcdefghijklmnopqrstuvwxyz012345"

def write_file(root, rel_path, data):
    path = root.joinpath(*rel_path.split("/"))
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(data, str):
        data = data.encode("utf-8")
    path.write_bytes(data)
    return path

@pytest.fixture
def keygen():
    return KeyGenerator(random.Random(1234))

@pytest.fixture
def pack(tmp_path):
    root = tmp_path / "pack"
    write_file(root, "manifest.json", json.dumps({"format_version": 2, "header": {"uuid": PACK_UUID, "name": "Test"}}, indent=4))
    write_file(root, "pack_icon.png", b"\x89PNG\r\n\x1a\nicon")
    write_file(root, "a.json", '{\n    "a": 1,\n    "b": [1, 2, 3]\n}\n')
    write_file(root, "b.png", b"\x89PNG\r\n\x1a\nbody")
    write_file(root, "textures/blocks/stone.png", bytes(range(256)) * 4)
    write_file(root, "texts/en_US.lang", "pack.name=Test\npack.description=Ünïcode\n")
    write_file(root, "broken.json", "{ not json")
    return root
