from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    USAGE = "usage"
    TARGET_RESOLUTION = "target_resolution"
    ENUMERATION = "enumeration"
    PER_FILE = "per_file"
    FATAL = "fatal"


EXIT_OK = 0

_EXIT_CODES = {
    ErrorKind.USAGE: 1,
    ErrorKind.TARGET_RESOLUTION: 2,
    ErrorKind.ENUMERATION: 2,
    ErrorKind.FATAL: 3,
}


@dataclass(frozen=True)
class Failure:
    """Failed outcome of one pipeline step, carried back to the caller."""

    kind: ErrorKind
    message: str


class UsageError(Exception):
    pass


def exit_code_for(kind: ErrorKind) -> int:
    # PER_FILE failures are recovered by the hashing engine and never terminate a run.
    if kind not in _EXIT_CODES:
        raise ValueError(f"error kind has no exit code: {kind.value}")
    return _EXIT_CODES[kind]
