## container.py
## last updated: 19/10/2026 <d/m/y>
## m-c-r-p
import os
import struct
from errs import ContainerError

CONTAINER_NAME = "contents.json"
FORMAT_VERSION = 0
MAGIC_NUMBER = 0x9BCFB9FC
HEADER_PREFIX = struct.pack("<II", FORMAT_VERSION, MAGIC_NUMBER)  ## 00 00 00 00 FC B9 CF 9B
CONTENT_ID_OFFSET = 0x10
PAYLOAD_OFFSET = 0x100
MAX_CONTENT_ID_LEN = 0xFF
## ids longer than this get their tail overwritten by the payload at 0x100
UNCLOBBERED_CONTENT_ID_LEN = PAYLOAD_OFFSET - CONTENT_ID_OFFSET - 1

def container_path(root):
    return os.path.join(root, CONTAINER_NAME)

def check_content_id(content_id):
    id_bytes = content_id.encode("utf-8")
    if len(id_bytes) > MAX_CONTENT_ID_LEN:
        raise ContainerError(f"Content id is {len(id_bytes)} bytes; the length field holds at most {MAX_CONTENT_ID_LEN}.")
    return id_bytes

def write(path, content_id, payload):
    id_bytes = check_content_id(content_id)
    with open(path, "wb") as f:
        f.write(HEADER_PREFIX)
        f.seek(CONTENT_ID_OFFSET)
        f.write(struct.pack("<B", len(id_bytes)))
        f.write(id_bytes)
        f.seek(PAYLOAD_OFFSET)
        f.write(payload)

def _open(path):
    try:
        return open(path, "rb")
    except OSError as e:
        raise ContainerError(f"Unable to open '{path}': {e}") from e

def _read_content_id(f, path):
    f.seek(CONTENT_ID_OFFSET)
    raw = f.read(1)
    if len(raw) < 1:
        raise ContainerError(f"Invalid container '{path}': unexpected end while reading content id length.")
    id_len = struct.unpack("<B", raw)[0]
    id_bytes = f.read(id_len)
    if len(id_bytes) != id_len:
        raise ContainerError(f"Invalid container '{path}': unexpected end while reading content id.")
    try:
        return id_bytes.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ContainerError(f"Invalid container '{path}': content id is not UTF-8.") from e

def has_magic(path):
    with _open(path) as f:
        return f.read(len(HEADER_PREFIX)) == HEADER_PREFIX

def read_content_id(path):
    with _open(path) as f:
        return _read_content_id(f, path)

def read(path, verify_magic=False):
    with _open(path) as f:
        size = os.fstat(f.fileno()).st_size
        if size < PAYLOAD_OFFSET:
            raise ContainerError(f"Invalid container '{path}': {size} bytes is shorter than the 0x{PAYLOAD_OFFSET:X} byte header.")
        if verify_magic and f.read(len(HEADER_PREFIX)) != HEADER_PREFIX:
            raise ContainerError(f"Invalid container '{path}': bad magic number.")
        ## the id is bookkeeping only, decrypt must not depend on it
        try:
            content_id = _read_content_id(f, path)
        except ContainerError:
            content_id = None
        f.seek(PAYLOAD_OFFSET)
        payload = f.read()
    return content_id, payload

## end
