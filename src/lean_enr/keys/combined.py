"""
Composite ENR identity keys.

A node identity may be backed by more than one signature scheme while the
record layer handles a single key type. `CombinedKey` holds exactly one
scheme's secret key and `CombinedPublicKey` exactly one scheme's public key;
every operation dispatches on the held key with a single `match`.

Supported schemes:

- `secp256k1`: the "v4" identity scheme from EIP-778 (keccak256 + ECDSA).
  Records signed with any other scheme are supported by this library but do
  not follow "v4".
- `ed25519`: Ed25519 over the raw message.

Secret material
---------------

Buffers holding secret bytes in transit (random samples during generation,
caller buffers passed to import, secrets returned by `export_raw`) are
mutable and zero-filled once consumed, on success and failure alike. The
long-lived secret lives inside the `cryptography` key object and is released
with it.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from cryptography.hazmat.primitives.asymmetric import ec

from lean_enr import config
from lean_enr.types import Bytes64, NodeId

from . import ed25519, secp256k1
from .erasure import SecretBuffer, erasing
from .exceptions import InvalidKeyEncoding
from .hashing import keccak256
from .scheme import KeyScheme

__all__ = [
    "CombinedKey",
    "CombinedPublicKey",
]

logger = logging.getLogger(__name__)


def _unreachable(value: object) -> RuntimeError:
    """Build the error raised when a key holds an object of no supported scheme."""
    return RuntimeError(f"Composite key holds unsupported key object {type(value).__name__}")


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class CombinedPublicKey:
    """
    Public key of any supported scheme.

    Carries no secret material. Two public keys are equal when they belong to
    the same scheme and have the same compressed encoding.

    Attributes:
        public_key: The scheme's public key object.
    """

    public_key: secp256k1.PublicKey | ed25519.PublicKey

    def __post_init__(self) -> None:
        match self.public_key:
            case secp256k1.PublicKey():
                if not isinstance(self.public_key.curve, ec.SECP256K1):
                    raise InvalidKeyEncoding(
                        secp256k1.SCHEME, f"wrong curve {self.public_key.curve.name}"
                    )
            case ed25519.PublicKey():
                pass
            case _:
                raise TypeError(f"Unsupported public key type {type(self.public_key).__name__}")

    @classmethod
    def from_secp256k1(cls, public_key: secp256k1.PublicKey) -> CombinedPublicKey:
        """Wrap an existing secp256k1 public key."""
        return cls(public_key)

    @classmethod
    def from_ed25519(cls, public_key: ed25519.PublicKey) -> CombinedPublicKey:
        """Wrap an existing Ed25519 public key."""
        return cls(public_key)

    @classmethod
    def from_bytes(cls, scheme: KeyScheme | str, data: bytes) -> CombinedPublicKey:
        """
        Decode a public key encoding for an explicit scheme.

        Raises:
            InvalidKeyEncoding: If `data` is not a valid encoding for `scheme`.
            ValueError: If `scheme` is not a supported scheme name.
        """
        match KeyScheme(scheme):
            case KeyScheme.SECP256K1:
                return cls(secp256k1.public_key_from_bytes(data))
            case KeyScheme.ED25519:
                return cls(ed25519.public_key_from_bytes(data))

    @property
    def scheme(self) -> KeyScheme:
        """The scheme backing this key."""
        match self.public_key:
            case secp256k1.PublicKey():
                return secp256k1.SCHEME
            case ed25519.PublicKey():
                return ed25519.SCHEME
            case _:
                raise _unreachable(self.public_key)

    def scheme_tag(self) -> str:
        """Reserved record field name under which this key is stored."""
        return self.scheme.value

    def verify(self, message: bytes, signature: bytes) -> bool:
        """
        Verify `signature` over `message` with this key's scheme.

        A signature that does not match, or that is malformed for the scheme,
        yields False rather than an error.
        """
        match self.public_key:
            case secp256k1.PublicKey():
                return secp256k1.verify_v4(self.public_key, message, signature)
            case ed25519.PublicKey():
                return ed25519.verify_v4(self.public_key, message, signature)
            case _:
                raise _unreachable(self.public_key)

    def encode_compressed(self) -> bytes:
        """Encode in compressed form: 33 bytes for secp256k1, 32 for Ed25519."""
        match self.public_key:
            case secp256k1.PublicKey():
                return secp256k1.encode_compressed(self.public_key)
            case ed25519.PublicKey():
                return ed25519.encode(self.public_key)
            case _:
                raise _unreachable(self.public_key)

    def encode_uncompressed(self) -> bytes:
        """
        Encode in uncompressed form.

        secp256k1 keys yield the 64-byte `x || y`. Ed25519 has a single
        encoding and yields the same 32 bytes as `encode_compressed`.
        """
        match self.public_key:
            case secp256k1.PublicKey():
                return secp256k1.encode_uncompressed(self.public_key)
            case ed25519.PublicKey():
                return ed25519.encode(self.public_key)
            case _:
                raise _unreachable(self.public_key)

    def node_id(self) -> NodeId:
        """
        Compute the node id: keccak256 of the uncompressed public key.

        For secp256k1 this is the EIP-778 "v4" node id, keccak256(x || y).
        """
        return NodeId(keccak256(self.encode_uncompressed()))

    def enr_fields(self) -> dict[str, bytes]:
        """Return the record field carrying this key, `{scheme_tag: compressed}`."""
        return {self.scheme_tag(): self.encode_compressed()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CombinedPublicKey):
            return NotImplemented
        if self.scheme is not other.scheme:
            return False
        return self.encode_compressed() == other.encode_compressed()

    def __hash__(self) -> int:
        return hash((self.scheme, self.encode_compressed()))

    def __repr__(self) -> str:
        return f"CombinedPublicKey({self.scheme.value}, {self.encode_compressed().hex()})"


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class CombinedKey:
    """
    Secret key of any supported scheme, used to sign ENR records.

    The held scheme never changes after construction. The secret is never
    included in `repr()`.

    Attributes:
        private_key: The scheme's secret key object.
    """

    private_key: secp256k1.SecretKey | ed25519.SecretKey

    def __post_init__(self) -> None:
        match self.private_key:
            case secp256k1.SecretKey():
                if not isinstance(self.private_key.curve, ec.SECP256K1):
                    raise InvalidKeyEncoding(
                        secp256k1.SCHEME, f"wrong curve {self.private_key.curve.name}"
                    )
            case ed25519.SecretKey():
                pass
            case _:
                raise TypeError(f"Unsupported secret key type {type(self.private_key).__name__}")

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def from_secp256k1(cls, private_key: secp256k1.SecretKey) -> CombinedKey:
        """Wrap an existing secp256k1 secret key."""
        return cls(private_key)

    @classmethod
    def from_ed25519(cls, private_key: ed25519.SecretKey) -> CombinedKey:
        """Wrap an existing Ed25519 secret key."""
        return cls(private_key)

    @classmethod
    def generate(cls, scheme: KeyScheme | str | None = None) -> CombinedKey:
        """
        Generate a fresh key for `scheme`.

        Without a scheme, the configured default (`LEAN_ENR_SCHEME`) is used.

        Raises:
            ValueError: If `scheme` is not a supported scheme name.
        """
        match KeyScheme(scheme if scheme is not None else config.LEAN_ENR_SCHEME):
            case KeyScheme.SECP256K1:
                return cls.generate_secp256k1()
            case KeyScheme.ED25519:
                return cls.generate_ed25519()

    @classmethod
    def generate_secp256k1(cls) -> CombinedKey:
        """
        Generate a new secp256k1 key by rejection sampling.

        32 random bytes are drawn until they form a scalar in [1, n - 1].
        An out-of-range draw has probability below 2^-127, but it is
        resampled rather than reduced, to keep the distribution uniform.
        """
        buf = bytearray(secp256k1.SECRET_KEY_SIZE)
        with erasing(buf):
            while True:
                buf[:] = os.urandom(secp256k1.SECRET_KEY_SIZE)
                if secp256k1.is_valid_secret(buf):
                    break
                logger.debug("Discarded out-of-range secp256k1 sample, resampling")
            key = cls(secp256k1.secret_key_from_bytes(buf))

        logger.debug("Generated secp256k1 key")
        return key

    @classmethod
    def generate_ed25519(cls) -> CombinedKey:
        """Generate a new Ed25519 key. Every 32-byte seed is valid."""
        with erasing(bytearray(os.urandom(ed25519.SECRET_KEY_SIZE))) as buf:
            try:
                key = cls(ed25519.secret_key_from_bytes(buf))
            except InvalidKeyEncoding as e:
                raise RuntimeError(
                    f"Ed25519 rejected a {len(buf)}-byte seed; only the length is checked"
                ) from e

        logger.debug("Generated ed25519 key")
        return key

    @classmethod
    def from_bytes(cls, scheme: KeyScheme | str, data: SecretBuffer) -> CombinedKey:
        """
        Import a secret key from raw bytes, erasing `data` afterwards.

        `data` is zero-filled before this returns or raises, whether or not it
        held a valid key.

        Args:
            scheme: Scheme the bytes belong to.
            data: Mutable buffer holding the raw secret (32-byte scalar for
                secp256k1, 32-byte seed for Ed25519).

        Raises:
            InvalidKeyEncoding: If `data` is not a valid secret for `scheme`.
            TypeError: If `data` is immutable and therefore cannot be erased.
            ValueError: If `scheme` is not a supported scheme name.
        """
        with erasing(data):
            match KeyScheme(scheme):
                case KeyScheme.SECP256K1:
                    parse = secp256k1.secret_key_from_bytes
                case KeyScheme.ED25519:
                    parse = ed25519.secret_key_from_bytes
            try:
                return cls(parse(data))
            except InvalidKeyEncoding as e:
                logger.debug("Rejected %s secret key import: %s", e.scheme, e.detail)
                raise

    @classmethod
    def secp256k1_from_bytes(cls, data: SecretBuffer) -> CombinedKey:
        """Import a secp256k1 key from a 32-byte scalar. See `from_bytes`."""
        return cls.from_bytes(KeyScheme.SECP256K1, data)

    @classmethod
    def ed25519_from_bytes(cls, data: SecretBuffer) -> CombinedKey:
        """Import an Ed25519 key from a 32-byte seed. See `from_bytes`."""
        return cls.from_bytes(KeyScheme.ED25519, data)

    @classmethod
    def resolve_public_key(cls, content: Mapping[str, bytes]) -> CombinedPublicKey:
        """Recover the public key of a record from its fields. See `resolve_public_key`."""
        from .resolver import resolve_public_key

        return resolve_public_key(content)

    # =========================================================================
    # Operations
    # =========================================================================

    @property
    def scheme(self) -> KeyScheme:
        """The scheme backing this key."""
        match self.private_key:
            case secp256k1.SecretKey():
                return secp256k1.SCHEME
            case ed25519.SecretKey():
                return ed25519.SCHEME
            case _:
                raise _unreachable(self.private_key)

    def sign(self, message: bytes) -> Bytes64:
        """
        Sign `message` with this key's scheme.

        Only secp256k1 keys follow the "v4" identity scheme. Ed25519 keys are
        supported but produce records outside it.

        Raises:
            SignatureFailure: If the scheme's primitive rejects the request.
        """
        match self.private_key:
            case secp256k1.SecretKey():
                return secp256k1.sign_v4(self.private_key, message)
            case ed25519.SecretKey():
                return ed25519.sign_v4(self.private_key, message)
            case _:
                raise _unreachable(self.private_key)

    def derive_public(self) -> CombinedPublicKey:
        """Derive the public key. Deterministic: equal on every call."""
        match self.private_key:
            case secp256k1.SecretKey() | ed25519.SecretKey():
                return CombinedPublicKey(self.private_key.public_key())
            case _:
                raise _unreachable(self.private_key)

    def export_raw(self) -> bytearray:
        """
        Export the raw secret: the 32-byte scalar or the 32-byte Ed25519 seed.

        SENSITIVE: the returned buffer holds the secret key. The caller owns
        it and must erase it (`zeroize`) when done.
        """
        match self.private_key:
            case secp256k1.SecretKey():
                return secp256k1.secret_key_to_bytes(self.private_key)
            case ed25519.SecretKey():
                return ed25519.secret_key_to_bytes(self.private_key)
            case _:
                raise _unreachable(self.private_key)

    def __repr__(self) -> str:
        return f"CombinedKey({self.scheme.value}, <secret>)"
