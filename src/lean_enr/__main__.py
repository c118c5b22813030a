"""
ENR identity key tool.

Generate, inspect, and use composite identity keys from the command line.

Usage::

    python -m lean_enr generate --scheme ed25519
    python -m lean_enr inspect --scheme secp256k1 --secret <hex>
    python -m lean_enr sign --scheme secp256k1 --secret <hex> --message hello
    python -m lean_enr verify --field secp256k1=<hex> --message hello --signature <hex>

Commands:
    generate  Create a new key and print it as JSON (includes the secret)
    inspect   Print the public key and node id of a secret key
    sign      Sign a UTF-8 message and print the signature as hex
    verify    Resolve the public key from record fields and check a signature
              (exit status 0 when valid, 1 when invalid)
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from lean_enr.keys import (
    CombinedKey,
    CombinedPublicKey,
    EnrKeyError,
    KeyScheme,
    resolve_public_key,
    zeroize,
)
from lean_enr.types import NodeId, StrictBaseModel

logger = logging.getLogger(__name__)


class KeyInfo(StrictBaseModel):
    """JSON view of a key, as printed by `generate` and `inspect`."""

    scheme: str
    """Scheme tag, also the record field name holding the public key."""

    public_key: str
    """Compressed public key, hex."""

    node_id: NodeId
    """keccak256 of the uncompressed public key."""

    secret_key: str | None = None
    """Raw secret, hex. Only present for freshly generated keys."""

    @classmethod
    def from_public(cls, public: CombinedPublicKey, secret_key: str | None = None) -> KeyInfo:
        """Build the view from a public key."""
        return cls(
            scheme=public.scheme_tag(),
            public_key=public.encode_compressed().hex(),
            node_id=public.node_id(),
            secret_key=secret_key,
        )


def setup_logging(verbose: bool = False) -> None:
    """Configure stderr logging for the tool."""
    level = logging.DEBUG if verbose else logging.WARNING

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def _load_key(scheme: str, secret_hex: str) -> CombinedKey:
    """Import a secret from hex. The intermediate buffer is erased by the import."""
    return CombinedKey.from_bytes(scheme, bytearray.fromhex(secret_hex.removeprefix("0x")))


def _parse_field(text: str) -> tuple[str, bytes]:
    """Parse a `name=hex` record field argument."""
    name, sep, value = text.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"Expected NAME=HEX, got '{text}'")
    try:
        return name, bytes.fromhex(value.removeprefix("0x"))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid hex for field '{name}': {e}") from e


def cmd_generate(args: argparse.Namespace) -> int:
    """Generate a new key and print it."""
    key = CombinedKey.generate(args.scheme)

    secret = key.export_raw()
    try:
        info = KeyInfo.from_public(key.derive_public(), secret_key=secret.hex())
    finally:
        zeroize(secret)

    print(info.model_dump_json(by_alias=True, exclude_none=True))
    return 0


def cmd_inspect(args: argparse.Namespace) -> int:
    """Print the public view of a secret key."""
    key = _load_key(args.scheme, args.secret)
    info = KeyInfo.from_public(key.derive_public())
    print(info.model_dump_json(by_alias=True, exclude_none=True))
    return 0


def cmd_sign(args: argparse.Namespace) -> int:
    """Sign a message and print the signature."""
    key = _load_key(args.scheme, args.secret)
    print(key.sign(args.message.encode("utf-8")).hex())
    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    """Resolve the public key from record fields and verify a signature."""
    content = dict(args.fields)
    public = resolve_public_key(content)
    logger.debug("Resolved %s public key %s", public.scheme_tag(), public.encode_compressed().hex())

    signature = bytes.fromhex(args.signature.removeprefix("0x"))
    if public.verify(args.message.encode("utf-8"), signature):
        print("valid")
        return 0

    print("invalid")
    return 1


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one sub-command per operation."""
    parser = argparse.ArgumentParser(
        prog="lean_enr",
        description="ENR identity key tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    schemes = [scheme.value for scheme in KeyScheme]
    commands = parser.add_subparsers(dest="command", required=True)

    generate = commands.add_parser("generate", help="Generate a new key")
    generate.add_argument(
        "--scheme",
        choices=schemes,
        default=None,
        help="Signature scheme (default: LEAN_ENR_SCHEME, secp256k1)",
    )
    generate.set_defaults(handler=cmd_generate)

    inspect = commands.add_parser("inspect", help="Show the public key of a secret key")
    inspect.add_argument("--scheme", choices=schemes, required=True, help="Signature scheme")
    inspect.add_argument("--secret", required=True, help="Raw secret key, hex")
    inspect.set_defaults(handler=cmd_inspect)

    sign = commands.add_parser("sign", help="Sign a message")
    sign.add_argument("--scheme", choices=schemes, required=True, help="Signature scheme")
    sign.add_argument("--secret", required=True, help="Raw secret key, hex")
    sign.add_argument("--message", required=True, help="Message to sign (UTF-8)")
    sign.set_defaults(handler=cmd_sign)

    verify = commands.add_parser("verify", help="Verify a signature against record fields")
    verify.add_argument(
        "--field",
        action="append",
        type=_parse_field,
        default=[],
        dest="fields",
        help="Record field as NAME=HEX (can be repeated)",
    )
    verify.add_argument("--message", required=True, help="Signed message (UTF-8)")
    verify.add_argument("--signature", required=True, help="Signature, hex")
    verify.set_defaults(handler=cmd_verify)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    try:
        return args.handler(args)
    except (EnrKeyError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
