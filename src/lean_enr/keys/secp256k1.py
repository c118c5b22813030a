"""
secp256k1 primitives for the "v4" identity scheme.

The "v4" scheme signs `keccak256(content)` with ECDSA over secp256k1:

- Secret keys are 32-byte big-endian scalars in [1, n - 1].
- Signatures are 64 bytes `r || s` with no recovery id. Signing normalizes
  `s` to the lower half of the curve order; verification accepts either half.
- Public keys are stored in records compressed (33 bytes). The uncompressed
  form used for node ids is the 64-byte `x || y` without the 0x04 prefix.

The curve arithmetic itself is delegated to `cryptography`.
"""

from __future__ import annotations

from typing import Final

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import (
    Prehashed,
    decode_dss_signature,
    encode_dss_signature,
)

from lean_enr.types import Bytes33, Bytes64

from .exceptions import InvalidKeyEncoding, SignatureFailure
from .hashing import keccak256
from .scheme import KeyScheme

SecretKey = ec.EllipticCurvePrivateKey
PublicKey = ec.EllipticCurvePublicKey

SCHEME: Final = KeyScheme.SECP256K1

CURVE_ORDER: Final = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
"""secp256k1 group order n. Valid secret scalars are in [1, n - 1]."""

HALF_CURVE_ORDER: Final = CURVE_ORDER // 2
"""Upper bound for a normalized (low) `s` value."""

SECRET_KEY_SIZE: Final = 32
COMPRESSED_PUBLIC_KEY_SIZE: Final = 33
RAW_PUBLIC_KEY_SIZE: Final = 64
"""Uncompressed point without the 0x04 prefix (x || y)."""
UNCOMPRESSED_PUBLIC_KEY_SIZE: Final = 65
SIGNATURE_SIZE: Final = 64


def is_valid_secret(data: bytes | bytearray | memoryview) -> bool:
    """Check that `data` is a 32-byte scalar strictly between 0 and the curve order."""
    if memoryview(data).nbytes != SECRET_KEY_SIZE:
        return False
    return 0 < int.from_bytes(data, "big") < CURVE_ORDER


def secret_key_from_bytes(data: bytes | bytearray | memoryview) -> SecretKey:
    """
    Parse a 32-byte big-endian scalar into a secret key.

    The caller owns `data` and is responsible for erasing it.

    Raises:
        InvalidKeyEncoding: If the length is wrong or the scalar is out of range.
    """
    size = memoryview(data).nbytes
    if size != SECRET_KEY_SIZE:
        raise InvalidKeyEncoding(SCHEME, f"expected {SECRET_KEY_SIZE} bytes, got {size}")
    if not is_valid_secret(data):
        raise InvalidKeyEncoding(SCHEME, "scalar is zero or not below the curve order")

    return ec.derive_private_key(int.from_bytes(data, "big"), ec.SECP256K1())


def secret_key_to_bytes(key: SecretKey) -> bytearray:
    """Return the 32-byte big-endian scalar of `key` in an erasable buffer."""
    return bytearray(key.private_numbers().private_value.to_bytes(SECRET_KEY_SIZE, "big"))


def public_key_from_bytes(data: bytes) -> PublicKey:
    """
    Parse a secp256k1 public key.

    Accepts the 33-byte compressed form, the 65-byte 0x04-prefixed form, or
    the raw 64-byte `x || y` form.

    Raises:
        InvalidKeyEncoding: If the length is wrong or the point is not on the curve.
    """
    data = bytes(data)
    if len(data) == RAW_PUBLIC_KEY_SIZE:
        data = b"\x04" + data
    if len(data) not in (COMPRESSED_PUBLIC_KEY_SIZE, UNCOMPRESSED_PUBLIC_KEY_SIZE):
        raise InvalidKeyEncoding(SCHEME, f"unsupported public key length {len(data)}")

    try:
        return ec.EllipticCurvePublicKey.from_encoded_point(ec.SECP256K1(), data)
    except ValueError as e:
        raise InvalidKeyEncoding(SCHEME, str(e)) from e


def encode_compressed(key: PublicKey) -> Bytes33:
    """Encode as 33 bytes: 0x02 (even y) or 0x03 (odd y), then the x coordinate."""
    return Bytes33(
        key.public_bytes(
            encoding=serialization.Encoding.X962,
            format=serialization.PublicFormat.CompressedPoint,
        )
    )


def encode_uncompressed(key: PublicKey) -> Bytes64:
    """Encode as 64 bytes `x || y`, dropping the 0x04 prefix."""
    uncompressed = key.public_bytes(
        encoding=serialization.Encoding.X962,
        format=serialization.PublicFormat.UncompressedPoint,
    )
    return Bytes64(uncompressed[1:])


def sign_v4(key: SecretKey, message: bytes) -> Bytes64:
    """
    Sign `message` under the "v4" identity scheme.

    The message is hashed with keccak256 and the digest is signed with
    deterministic ECDSA (RFC 6979). The DER signature from the library is
    converted to fixed-size `r || s` with `s` normalized to the lower half.

    Raises:
        SignatureFailure: If the backend rejects the signing request.
    """
    digest = keccak256(message)

    try:
        der_signature = key.sign(
            digest, ec.ECDSA(Prehashed(hashes.SHA256()), deterministic_signing=True)
        )
    except (ValueError, UnsupportedAlgorithm) as e:
        raise SignatureFailure(SCHEME, str(e)) from e

    r, s = decode_dss_signature(der_signature)
    if s > HALF_CURVE_ORDER:
        s = CURVE_ORDER - s
    return Bytes64(r.to_bytes(32, "big") + s.to_bytes(32, "big"))


def verify_v4(key: PublicKey, message: bytes, signature: bytes) -> bool:
    """
    Verify a "v4" signature over `message`.

    Returns False, never raises, for signatures of the wrong length,
    out-of-range `r` or `s` components, or a signature that does not match.
    A high `s` is accepted: only signing normalizes it.
    """
    if len(signature) != SIGNATURE_SIZE:
        return False

    r = int.from_bytes(signature[:32], "big")
    s = int.from_bytes(signature[32:], "big")
    if not (0 < r < CURVE_ORDER and 0 < s < CURVE_ORDER):
        return False

    digest = keccak256(message)
    try:
        key.verify(encode_dss_signature(r, s), digest, ec.ECDSA(Prehashed(hashes.SHA256())))
    except InvalidSignature:
        return False
    return True
