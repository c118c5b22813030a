"""Keccak-256, the hash used by the "v4" identity scheme."""

from Crypto.Hash import keccak

from lean_enr.types import Bytes32


def keccak256(data: bytes) -> Bytes32:
    """Return the 32-byte Keccak-256 digest of `data` (pre-standard SHA-3 padding)."""
    k = keccak.new(digest_bits=256)
    k.update(data)
    return Bytes32(k.digest())
