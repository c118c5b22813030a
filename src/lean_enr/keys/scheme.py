"""
Identity schemes and reserved record field names (EIP-778).

Each supported signature scheme stores its public key in a record under a
reserved field whose name is the scheme's tag:

| Key       | Value                                      |
|-----------|--------------------------------------------|
| id        | name of identity scheme, "v4"              |
| secp256k1 | compressed secp256k1 public key, 33 bytes  |
| ed25519   | ed25519 public key, 32 bytes               |

References:
----------
- EIP-778: https://eips.ethereum.org/EIPS/eip-778
"""

from enum import Enum
from typing import Final

IDENTITY_SCHEME: Final = "v4"
"""Value of the `id` field for records signed under the "v4" identity scheme."""


class KeyScheme(str, Enum):
    """
    Supported signature schemes.

    The value doubles as the reserved record field name holding the public key.
    """

    SECP256K1 = "secp256k1"
    """The "v4" scheme: keccak256 + secp256k1 ECDSA."""

    ED25519 = "ed25519"
    """Alternative scheme: Ed25519 over the raw message."""

    def __str__(self) -> str:
        """Return the scheme's field name."""
        return self.value


class EnrKey(str, Enum):
    """Reserved ENR keys read by the key layer."""

    ID = "id"
    """Identity scheme name."""

    SECP256K1 = KeyScheme.SECP256K1.value
    """Compressed secp256k1 public key (33 bytes)."""

    ED25519 = KeyScheme.ED25519.value
    """Ed25519 public key (32 bytes)."""

    def __str__(self) -> str:
        """Return the key's string value for ENR encoding."""
        return self.value
