"""
Public key resolution from untyped record content.

A decoded record is a mapping of field names to byte strings. Which scheme
signed it is not declared separately: the scheme is recovered from which
reserved public key field is present and parses.

Resolution order
----------------

Reserved fields are tried in a fixed order, secp256k1 ("v4") first, then
ed25519. The first field that is present and parses wins:

- A payload carrying both fields resolves to its secp256k1 key; the ed25519
  field is ignored.
- A field that is present but malformed is skipped, as if absent.

The order is part of the record compatibility surface. Records already
deployed may carry both fields, so neither the order nor the "first wins"
rule should change without checking them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Final

from .combined import CombinedPublicKey
from .exceptions import InvalidKeyEncoding, NoRecognizedScheme
from .scheme import KeyScheme

logger = logging.getLogger(__name__)

RESOLUTION_ORDER: Final[tuple[tuple[str, Callable[[bytes], CombinedPublicKey]], ...]] = (
    (
        KeyScheme.SECP256K1.value,
        lambda data: CombinedPublicKey.from_bytes(KeyScheme.SECP256K1, data),
    ),
    (
        KeyScheme.ED25519.value,
        lambda data: CombinedPublicKey.from_bytes(KeyScheme.ED25519, data),
    ),
)
"""Reserved field names paired with their parsers, in resolution order."""


def resolve_public_key(content: Mapping[str, bytes]) -> CombinedPublicKey:
    """
    Recover the signer's public key from a record's fields.

    The mapping is only read.

    Args:
        content: Record fields, field name to raw value.

    Returns:
        The public key stored under the first reserved field that parses.

    Raises:
        NoRecognizedScheme: If no reserved field is present and parses.
    """
    for field, parse in RESOLUTION_ORDER:
        raw = content.get(field)
        if raw is None:
            continue
        try:
            return parse(raw)
        except InvalidKeyEncoding as e:
            logger.debug("Ignoring unparseable %s field: %s", field, e.detail)

    raise NoRecognizedScheme([field for field, _ in RESOLUTION_ORDER])
