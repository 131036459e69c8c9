## core.py
## last updated: 19/10/2026 <d/m/y>
## m-c-r-p
import os
import json
import shutil
import stat as _stat
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import List, Optional

import outs
import jnorm
import entries
import container
from cfb import encrypt_bytes, decrypt_bytes
from entries import Content, ContentEntry
from excl import ExclusionMatcher, normalize_path
from keygen import KeyGenerator, check_key, is_valid_key, key_bytes
from errs import ManifestUnreadable, KeyFileUnreadable, MalformedManifest, OperationCanceled

MANIFEST_NAME = "manifest.json"
KEY_FILE_SUFFIX = ".key"

@dataclass
class PackResult:
    key: str
    content: Content
    processed: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    content_id: Optional[str] = None

def key_file_path(root):
    return os.path.normpath(root) + KEY_FILE_SUFFIX

def read_content_id(input_root):
    manifest_path = os.path.join(input_root, MANIFEST_NAME)
    try:
        with open(manifest_path, "rb") as f:
            data = json.loads(f.read().decode("utf-8"))
    except OSError as e:
        raise ManifestUnreadable(f"Unable to open '{manifest_path}': {e}") from e
    except (ValueError, RecursionError) as e:
        raise ManifestUnreadable(f"Unable to parse '{manifest_path}': {e}") from e
    header = data.get("header") if isinstance(data, dict) else None
    uuid = header.get("uuid") if isinstance(header, dict) else None
    if not isinstance(uuid, str):
        raise ManifestUnreadable(f"Unable to parse '{manifest_path}': missing string header.uuid")
    return uuid

def iter_files(root):
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for name in sorted(filenames):
            path = os.path.join(dirpath, name)
            try:
                st = os.stat(path)
            except OSError:
                continue
            if not _stat.S_ISREG(st.st_mode):
                continue
            yield path

def relative_path(path, root):
    return normalize_path(os.path.relpath(path, root))

def mirrored_path(root, rel_path):
    return os.path.join(root, *rel_path.split("/"))

def _same_path(a, b):
    return os.path.normcase(os.path.abspath(a)) == os.path.normcase(os.path.abspath(b))

def _read(path):
    with open(path, "rb") as f:
        return f.read()

def _write(path, data):
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(path, "wb") as f:
        f.write(data)

def _copy(in_file, out_file, rel_path, transform):
    if jnorm.is_json_path(rel_path):
        _write(out_file, transform(jnorm.parse(_read(in_file))))
    else:
        os.makedirs(os.path.dirname(os.path.abspath(out_file)), exist_ok=True)
        shutil.copyfile(in_file, out_file)

def _key_text(key):
    return key_bytes(key).decode("utf-8", errors="replace")

class PackWorker:
    def __init__(self, in_path, out_path, key=None, exclude=None, max_workers=1, verify_magic=False, key_generator=None, progress_callback=None, quiet=False):
        self.in_path = in_path
        self.out_path = out_path
        self.key = key
        self.exclude = list(exclude or [])
        self.max_workers = max(1, int(max_workers or 1))
        self.verify_magic = verify_magic
        self.key_generator = key_generator or KeyGenerator()
        self.progress_callback = progress_callback
        self.quiet = quiet
        self.is_canceled = False

    def cancel(self):
        self.is_canceled = True

    def _log(self, func, message):
        if not self.quiet:
            func(message)

    def _check_canceled(self):
        if self.is_canceled:
            raise OperationCanceled("Operation canceled by user.")

    def _run_all(self, items, func):
        ## results come back in input order whatever the worker count
        total = len(items)
        results = [None] * total
        if self.progress_callback:
            self.progress_callback(0.0)
        if self.max_workers == 1 or total <= 1:
            for idx, item in enumerate(items):
                self._check_canceled()
                results[idx] = func(item)
                if self.progress_callback:
                    self.progress_callback(((idx + 1) / total) * 100.0)
            return results
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {}
            for idx, item in enumerate(items):
                self._check_canceled()
                futures[executor.submit(func, item)] = idx
            done = 0
            for future in as_completed(futures):
                results[futures[future]] = future.result()
                done += 1
                if self.progress_callback:
                    self.progress_callback((done / total) * 100.0)
        return results

    def _resolve_encrypt_key(self):
        if self.key is None:
            return self.key_generator.generate()
        return self.key

    def encrypt_pack(self):
        content_id = read_content_id(self.in_path)
        container.check_content_id(content_id)
        top_key = self._resolve_encrypt_key()
        top_key_data = check_key(top_key, "Top-level key")
        os.makedirs(self.out_path, exist_ok=True)
        with open(key_file_path(self.out_path), "wb") as f:
            f.write(top_key_data)
        matcher = ExclusionMatcher(self.exclude)
        files = list(iter_files(self.in_path))
        content_entries = self._run_all(files, lambda in_file: self._encrypt_entry(in_file, matcher))
        content = Content(content=content_entries)
        payload = encrypt_bytes(top_key_data, entries.encode(content))
        container.write(container.container_path(self.out_path), content_id, payload)
        return PackResult(
            key=_key_text(top_key),
            content=content,
            processed=[e.path for e in content_entries],
            content_id=content_id)

    def _encrypt_entry(self, in_file, matcher):
        rel_path = relative_path(in_file, self.in_path)
        out_file = mirrored_path(self.out_path, rel_path)
        in_place = _same_path(in_file, out_file)
        if in_place or matcher.is_excluded(rel_path):
            if not in_place:
                _copy(in_file, out_file, rel_path, jnorm.minify)
                self._log(outs.info, f"Copied {rel_path}")
            return ContentEntry(path=rel_path, key=None)
        file_key = self.key_generator.generate()
        data = jnorm.minify_for(rel_path, _read(in_file))
        _write(out_file, encrypt_bytes(file_key, data))
        self._log(outs.info, f"Encrypted {rel_path} with key {file_key}")
        return ContentEntry(path=rel_path, key=file_key)

    def _resolve_decrypt_key(self):
        if self.key is not None:
            return self.key
        path = key_file_path(self.in_path)
        try:
            return _read(path)
        except OSError as e:
            raise KeyFileUnreadable(f"Unable to open '{path}': {e}") from e

    def read_content(self, top_key_data):
        content_id, payload = container.read(container.container_path(self.in_path), verify_magic=self.verify_magic)
        try:
            content = entries.decode(decrypt_bytes(top_key_data, payload))
        except MalformedManifest as e:
            raise MalformedManifest(f"Unable to read the manifest of '{self.in_path}', the key might be wrong. ({e})") from e
        return content_id, entries.normalize(content)

    def decrypt_pack(self):
        top_key = self._resolve_decrypt_key()
        top_key_data = check_key(top_key, "Top-level key")
        content_id, content = self.read_content(top_key_data)
        outcomes = self._run_all(content.content, self._decrypt_entry)
        result = PackResult(key=_key_text(top_key), content=content, content_id=content_id)
        for entry, done in zip(content.content, outcomes):
            (result.processed if done else result.skipped).append(entry.path)
        return result

    def _decrypt_entry(self, entry):
        in_file = mirrored_path(self.in_path, entry.path)
        if not os.path.isfile(in_file):
            return False
        out_file = mirrored_path(self.out_path, entry.path)
        if entry.key is None:
            if not _same_path(in_file, out_file):
                _copy(in_file, out_file, entry.path, jnorm.prettify)
                self._log(outs.info, f"Copied {entry.path}")
            return True
        if not is_valid_key(entry.key):
            outs.warn(f"Skipping {entry.path}: key must be exactly 32 bytes, got {len(key_bytes(entry.key))}")
            return False
        data = decrypt_bytes(entry.key, _read(in_file))
        _write(out_file, jnorm.prettify_for(entry.path, data))
        self._log(outs.info, f"Decrypted {entry.path} with key {entry.key}")
        return True

## end
