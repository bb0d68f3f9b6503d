"""Deterministic manifest rendering.

Format, one line per file:
    <relative/path>\\t<lowercase hex digest>\\n

- Byte-ordinal ordering by relative path (never locale-aware)
- UTF-8 without BOM, LF newlines, no header or footer
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from sha3fics.core.engine import FileEntry


def _ordinal_key(entry: FileEntry) -> bytes:
    return entry.relative_path.encode("utf-8", errors="surrogateescape")


def sort_entries(entries: Iterable[FileEntry]) -> list[FileEntry]:
    return sorted(entries, key=_ordinal_key)


def render_manifest_bytes(entries: Iterable[FileEntry]) -> bytes:
    text = "".join(f"{e.relative_path}\t{e.digest_hex}\n" for e in sort_entries(entries))
    # Undecodable file names round-trip to their original bytes.
    return text.encode("utf-8", errors="surrogateescape")


def write_manifest(out_path: Path, entries: Iterable[FileEntry]) -> int:
    """Overwrite ``out_path`` with the sorted manifest; return the entry count."""

    if not isinstance(out_path, Path):
        raise TypeError("out_path must be pathlib.Path")
    if out_path.exists() and (out_path.is_symlink() or not out_path.is_file()):
        raise ValueError(f"invalid output path: {out_path}")
    materialized = list(entries)
    out_path.write_bytes(render_manifest_bytes(materialized))
    return len(materialized)
