from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from sha3fics.core.errors import ErrorKind, Failure
from sha3fics.core.hash import WideDigest
from sha3fics.core.settings import DEFAULT_CHUNK_SIZE, HashSettings


@dataclass(frozen=True)
class FileEntry:
    relative_path: str
    digest_hex: str


@dataclass(frozen=True)
class HashRun:
    entries: tuple[FileEntry, ...]
    skipped: tuple[Failure, ...] = field(default=())


def digest_file(path: Path, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    """Stream a file through the wide digest and return lowercase hex.

    Memory use is one ``chunk_size`` buffer, owned by this call. Raises
    OSError on any open/read failure.
    """

    digest = WideDigest()
    buf = bytearray(chunk_size)
    view = memoryview(buf)
    with open(path, "rb", buffering=0) as f:
        while True:
            n = f.readinto(buf)
            if not n:
                break
            digest.update(view[:n])
    return digest.hexdigest()


def hash_entry(path: Path, base_dir: Path, *, settings: HashSettings) -> FileEntry | Failure:
    try:
        rel = os.path.relpath(path, base_dir)
        return FileEntry(relative_path=rel, digest_hex=digest_file(path, chunk_size=settings.chunk_size))
    except (OSError, ValueError) as e:
        return Failure(kind=ErrorKind.PER_FILE, message=f"skipping '{path}': {e}")


def hash_many(paths: Iterable[Path], base_dir: Path, *, settings: HashSettings) -> HashRun:
    entries: list[FileEntry] = []
    skipped: list[Failure] = []
    for p in paths:
        result = hash_entry(p, base_dir, settings=settings)
        if isinstance(result, Failure):
            print(f"warn: {result.message}", file=sys.stderr)
            skipped.append(result)
            continue
        entries.append(result)
    return HashRun(entries=tuple(entries), skipped=tuple(skipped))
