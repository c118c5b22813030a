"""
ENR identity keys.

Composite secret and public keys over the supported signature schemes
(secp256k1 for the "v4" identity scheme, and ed25519), with generation,
import with erasure, sign/verify dispatch, and recovery of a public key from
record content.
"""

from .combined import CombinedKey, CombinedPublicKey
from .erasure import erasing, zeroize
from .exceptions import EnrKeyError, InvalidKeyEncoding, NoRecognizedScheme, SignatureFailure
from .resolver import RESOLUTION_ORDER, resolve_public_key
from .scheme import IDENTITY_SCHEME, EnrKey, KeyScheme

__all__ = [
    "CombinedKey",
    "CombinedPublicKey",
    "resolve_public_key",
    "RESOLUTION_ORDER",
    "KeyScheme",
    "EnrKey",
    "IDENTITY_SCHEME",
    "zeroize",
    "erasing",
    "EnrKeyError",
    "InvalidKeyEncoding",
    "SignatureFailure",
    "NoRecognizedScheme",
]
