"""
Ed25519 primitives for the alternative identity scheme.

Any 32 bytes form a valid Ed25519 secret seed. The message is signed as is
(Ed25519 hashes internally with SHA-512). Public keys and signatures have a
single fixed-size encoding of 32 and 64 bytes.
"""

from __future__ import annotations

from typing import Final

from Crypto.Signature import eddsa
from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric import ed25519

from lean_enr.types import Bytes32, Bytes64

from .exceptions import InvalidKeyEncoding, SignatureFailure
from .scheme import KeyScheme

SecretKey = ed25519.Ed25519PrivateKey
PublicKey = ed25519.Ed25519PublicKey

SCHEME: Final = KeyScheme.ED25519

SECRET_KEY_SIZE: Final = 32
PUBLIC_KEY_SIZE: Final = 32
SIGNATURE_SIZE: Final = 64


def secret_key_from_bytes(data: bytes | bytearray | memoryview) -> SecretKey:
    """
    Load a secret key from a 32-byte seed.

    The caller owns `data` and is responsible for erasing it.

    Raises:
        InvalidKeyEncoding: If `data` is not 32 bytes long.
    """
    size = memoryview(data).nbytes
    if size != SECRET_KEY_SIZE:
        raise InvalidKeyEncoding(SCHEME, f"expected {SECRET_KEY_SIZE} bytes, got {size}")

    try:
        return ed25519.Ed25519PrivateKey.from_private_bytes(bytes(data))
    except ValueError as e:
        raise InvalidKeyEncoding(SCHEME, str(e)) from e


def secret_key_to_bytes(key: SecretKey) -> bytearray:
    """Return the 32-byte seed of `key` in an erasable buffer."""
    return bytearray(key.private_bytes_raw())


def public_key_from_bytes(data: bytes) -> PublicKey:
    """
    Parse a 32-byte Ed25519 public key.

    The encoding is decompressed before it is accepted: a 32-byte value
    whose y coordinate has no matching x on the curve is rejected.

    Raises:
        InvalidKeyEncoding: If the length is wrong or the point is not on the curve.
    """
    data = bytes(data)
    if len(data) != PUBLIC_KEY_SIZE:
        raise InvalidKeyEncoding(SCHEME, f"expected {PUBLIC_KEY_SIZE} bytes, got {len(data)}")

    try:
        eddsa.import_public_key(data)
    except ValueError as e:
        raise InvalidKeyEncoding(SCHEME, f"not a curve point: {e}") from e

    try:
        return ed25519.Ed25519PublicKey.from_public_bytes(data)
    except ValueError as e:
        raise InvalidKeyEncoding(SCHEME, str(e)) from e


def encode(key: PublicKey) -> Bytes32:
    """Encode the public key. Ed25519 has no separate uncompressed form."""
    return Bytes32(key.public_bytes_raw())


def sign_v4(key: SecretKey, message: bytes) -> Bytes64:
    """
    Sign `message` directly with Ed25519.

    Raises:
        SignatureFailure: If the backend rejects the signing request.
    """
    try:
        return Bytes64(key.sign(bytes(message)))
    except (ValueError, UnsupportedAlgorithm) as e:
        raise SignatureFailure(SCHEME, str(e)) from e


def verify_v4(key: PublicKey, message: bytes, signature: bytes) -> bool:
    """Verify an Ed25519 signature. Malformed signatures return False."""
    if len(signature) != SIGNATURE_SIZE:
        return False

    try:
        key.verify(bytes(signature), bytes(message))
    except InvalidSignature:
        return False
    return True
