from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

from sha3fics.core.errors import ErrorKind, Failure


WILDCARD_CHARS = ("*", "?")


class TargetKind(str, Enum):
    FILE = "file"
    WILDCARD = "wildcard"
    DIRECTORY = "directory"
    INVALID = "invalid"


@dataclass(frozen=True)
class Classified:
    kind: TargetKind
    target: str


def is_wildcard_pattern(s: str) -> bool:
    return any(c in s for c in WILDCARD_CHARS)


def target_kind(target: str) -> TargetKind:
    """Classify a target string; order matters.

    An existing file wins over the wildcard check, so a file literally named
    ``a?.txt`` is hashed as a file. A metacharacter-free path that does not
    exist is INVALID, never a degenerate wildcard.
    """

    if os.path.isfile(target):
        return TargetKind.FILE
    if is_wildcard_pattern(target):
        return TargetKind.WILDCARD
    if os.path.isdir(target):
        return TargetKind.DIRECTORY
    return TargetKind.INVALID


def classify_target(target: str) -> Classified | Failure:
    kind = target_kind(target)
    if kind is TargetKind.INVALID:
        return Failure(
            kind=ErrorKind.TARGET_RESOLUTION,
            message=f"'{target}' does not exist and is not a wildcard pattern.",
        )
    return Classified(kind=kind, target=target)
