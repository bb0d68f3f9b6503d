from __future__ import annotations

from pathlib import Path

from sha3fics.core.classify import TargetKind
from sha3fics.core.enumerator import Scope
from sha3fics.core.settings import MANIFEST_SUFFIX


# Wildcards plus characters that are illegal in file names on common platforms.
_SAFE_NAME_TOKENS = {
    "*": "[any]",
    "?": "[x]",
    ":": "[colon]",
    "|": "[bar]",
    '"': "[quote]",
    "<": "[lt]",
    ">": "[gt]",
}


def safe_wildcard_name(search: str) -> str:
    return "".join(_SAFE_NAME_TOKENS.get(c, c) for c in search)


def output_path_for(scope: Scope, *, suffix: str = MANIFEST_SUFFIX) -> Path:
    if scope.kind is TargetKind.FILE:
        return scope.path.with_name(scope.path.name + suffix)
    if scope.kind is TargetKind.WILDCARD:
        return scope.base_dir / (safe_wildcard_name(scope.search) + suffix)
    if scope.kind is TargetKind.DIRECTORY:
        return scope.path.parent / (scope.path.name + suffix)
    raise ValueError(f"no output path for {scope.kind.value} target: {scope.target!r}")
