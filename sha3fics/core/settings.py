from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from sha3fics.core.errors import UsageError


DEFAULT_CHUNK_SIZE = 1024 * 1024
MANIFEST_SUFFIX = ".sha3"

ENV_CHUNK_SIZE = "SHA3FICS_CHUNK_SIZE"


@dataclass(frozen=True)
class HashSettings:
    chunk_size: int = DEFAULT_CHUNK_SIZE
    suffix: str = MANIFEST_SUFFIX

    def __post_init__(self) -> None:
        if not isinstance(self.chunk_size, int) or isinstance(self.chunk_size, bool) or self.chunk_size <= 0:
            raise UsageError(f"chunk size must be a positive integer, got {self.chunk_size!r}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "HashSettings":
        env = os.environ if environ is None else environ
        raw = str(env.get(ENV_CHUNK_SIZE, "") or "").strip()
        if not raw:
            return cls()
        try:
            chunk_size = int(raw, 10)
        except ValueError as e:
            raise UsageError(f"{ENV_CHUNK_SIZE} must be an integer byte count, got {raw!r}") from e
        return cls(chunk_size=chunk_size)
