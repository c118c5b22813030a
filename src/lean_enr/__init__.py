"""
Identity keys for Ethereum Node Records (EIP-778).

A node identity may be backed by secp256k1 (the "v4" identity scheme) or by
ed25519. Callers use a single composite key type regardless of the scheme:

    key = CombinedKey.generate("ed25519")
    signature = key.sign(content)
    public = CombinedKey.resolve_public_key(record_fields)
    assert public.verify(content, signature)

Record encoding, storage and transport are left to the record layer.

References:
----------
- EIP-778: https://eips.ethereum.org/EIPS/eip-778
"""

from .keys import (
    CombinedKey,
    CombinedPublicKey,
    InvalidKeyEncoding,
    KeyScheme,
    NoRecognizedScheme,
    SignatureFailure,
    resolve_public_key,
)

__all__ = [
    "CombinedKey",
    "CombinedPublicKey",
    "KeyScheme",
    "resolve_public_key",
    "InvalidKeyEncoding",
    "SignatureFailure",
    "NoRecognizedScheme",
]
