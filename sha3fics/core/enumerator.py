"""Turn a classified target into the list of files to hash.

Every strategy returns either an ``Enumerated`` value or a ``Failure`` of
kind ENUMERATION; filesystem errors never escape as exceptions.
"""

from __future__ import annotations

import fnmatch
import os
from dataclasses import dataclass
from pathlib import Path

from sha3fics.core.classify import Classified, TargetKind
from sha3fics.core.errors import ErrorKind, Failure


@dataclass(frozen=True)
class Scope:
    """Absolute resolution of a target.

    ``base_dir`` is the directory relative paths are computed against.
    ``search`` is the bare file name (FILE), the name pattern (WILDCARD), or
    the directory's own name (DIRECTORY).
    """

    kind: TargetKind
    target: str
    path: Path
    base_dir: Path
    search: str


@dataclass(frozen=True)
class Enumerated:
    base_dir: Path
    paths: tuple[Path, ...]


def _anchor_bare_pattern(pattern: str) -> str:
    if os.path.isabs(pattern):
        return pattern
    if os.sep in pattern or (os.altsep is not None and os.altsep in pattern):
        return pattern
    return os.path.join(os.getcwd(), pattern)


def resolve_scope(classified: Classified) -> Scope:
    target = classified.target
    if classified.kind is TargetKind.FILE:
        full = os.path.abspath(target)
        return Scope(
            kind=classified.kind,
            target=target,
            path=Path(full),
            base_dir=Path(os.path.dirname(full)),
            search=os.path.basename(full),
        )
    if classified.kind is TargetKind.WILDCARD:
        full = os.path.abspath(_anchor_bare_pattern(target))
        return Scope(
            kind=classified.kind,
            target=target,
            path=Path(full),
            base_dir=Path(os.path.dirname(full)),
            search=os.path.basename(full),
        )
    if classified.kind is TargetKind.DIRECTORY:
        # abspath() normalizes away any trailing separator.
        full = os.path.abspath(target)
        return Scope(
            kind=classified.kind,
            target=target,
            path=Path(full),
            base_dir=Path(full),
            search=os.path.basename(full),
        )
    raise ValueError(f"cannot resolve scope for {classified.kind.value} target: {target!r}")


def matches_search_pattern(name: str, search: str) -> bool:
    """Shell-style match where only ``*`` and ``?`` are special.

    ``[`` is escaped so bracket expressions are taken literally. Case
    sensitivity follows ``os.path.normcase`` of the host.
    """

    return fnmatch.fnmatch(name, search.replace("[", "[[]"))


def _same_path(a: Path, b: Path) -> bool:
    return os.path.normcase(str(a)) == os.path.normcase(str(b))


def _reraise(err: OSError) -> None:
    raise err


def _iter_files(root: Path, *, recursive: bool) -> list[Path]:
    out: list[Path] = []
    for dirpath, _dirnames, filenames in os.walk(root, topdown=True, onerror=_reraise, followlinks=False):
        dir_path = Path(dirpath)
        for name in filenames:
            p = dir_path / name
            if p.is_file():
                out.append(p)
        if not recursive:
            break
    return out


def enumerate_file(scope: Scope) -> Enumerated:
    return Enumerated(base_dir=scope.base_dir, paths=(scope.path,))


def enumerate_wildcard(scope: Scope, *, exclude: Path | None = None) -> Enumerated | Failure:
    try:
        found: list[Path] = []
        with os.scandir(scope.base_dir) as it:
            for entry in it:
                if not matches_search_pattern(entry.name, scope.search):
                    continue
                if not entry.is_file():
                    continue
                found.append(Path(entry.path))
    except (OSError, ValueError) as e:
        return Failure(
            kind=ErrorKind.ENUMERATION,
            message=f"unable to evaluate wildcard '{scope.target}': {e}",
        )
    if exclude is not None:
        found = [p for p in found if not _same_path(p, exclude)]
    return Enumerated(base_dir=scope.base_dir, paths=tuple(found))


def enumerate_directory(scope: Scope, *, recursive: bool, exclude: Path | None = None) -> Enumerated | Failure:
    try:
        found = _iter_files(scope.path, recursive=recursive)
    except (OSError, ValueError) as e:
        return Failure(
            kind=ErrorKind.ENUMERATION,
            message=f"unable to enumerate directory '{scope.target}': {e}",
        )
    if exclude is not None:
        found = [p for p in found if not _same_path(p, exclude)]
    return Enumerated(base_dir=scope.base_dir, paths=tuple(found))


def enumerate_scope(scope: Scope, *, recursive: bool, exclude: Path | None = None) -> Enumerated | Failure:
    if scope.kind is TargetKind.FILE:
        return enumerate_file(scope)
    if scope.kind is TargetKind.WILDCARD:
        return enumerate_wildcard(scope, exclude=exclude)
    return enumerate_directory(scope, recursive=recursive, exclude=exclude)
