from __future__ import annotations

from cryptography.hazmat.primitives import hashes

# 1024-bit output of the SHAKE256 sponge (Keccak family).
DIGEST_BITS = 1024
DIGEST_BYTES = DIGEST_BITS // 8
DIGEST_HEX_LEN = 2 * DIGEST_BYTES


class WideDigest:
    """Streaming adapter over the wide Keccak-family digest.

    Construction initializes the sponge; ``update`` absorbs bytes-like chunks;
    ``finalize`` squeezes ``DIGEST_BYTES`` bytes and may be called once.
    """

    def __init__(self) -> None:
        self._ctx = hashes.Hash(hashes.SHAKE256(digest_size=DIGEST_BYTES))

    def update(self, data: bytes | bytearray | memoryview) -> None:
        self._ctx.update(data)

    def finalize(self) -> bytes:
        return self._ctx.finalize()

    def hexdigest(self) -> str:
        return self.finalize().hex()


def wide_digest_bytes(data: bytes) -> str:
    d = WideDigest()
    d.update(data)
    return d.hexdigest()


def is_hex_wide_digest(s: str) -> bool:
    if not isinstance(s, str) or len(s) != DIGEST_HEX_LEN:
        return False
    for c in s:
        if c not in "0123456789abcdef":
            return False
    return True
