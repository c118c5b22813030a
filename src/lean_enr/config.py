"""
Global configuration for ENR identity keys.

This module contains environment-specific settings read once at import time.
"""

import os

_SUPPORTED_SCHEMES: list[str] = ["secp256k1", "ed25519"]

LEAN_ENR_SCHEME = os.environ.get("LEAN_ENR_SCHEME", "secp256k1").lower()
"""Scheme used when a key is generated without an explicit scheme. Defaults to "v4" (secp256k1)."""

if LEAN_ENR_SCHEME not in _SUPPORTED_SCHEMES:
    raise ValueError(
        f"Invalid LEAN_ENR_SCHEME environment variable: '{LEAN_ENR_SCHEME}'. "
        f"Supported values: {_SUPPORTED_SCHEMES}"
    )
