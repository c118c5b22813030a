"""Shared key vectors and fixtures for ENR identity key tests."""

from __future__ import annotations

import pytest

from lean_enr.keys import CombinedKey

# From EIP-778 (example record, "v4" identity scheme)
EIP778_PRIVKEY = bytes.fromhex("b71c71a67e1177ad4e901695e1b4b9ee17ae16c6668d313eac2f96dbcda3f291")
EIP778_PUBKEY = bytes.fromhex("03ca634cae0d49acb401d8a4c6b6fe8c55b70d115bf400769cc1400f3258cd3138")
EIP778_NODE_ID = bytes.fromhex("a448f24c6d18e575453db13171562b71999873db5b286df957af199ec94617f7")

# RLP of [seq=1, "id", "v4", "ip", 127.0.0.1, "secp256k1", pubkey, "udp", 30303]
EIP778_CONTENT = bytes.fromhex(
    "f84201826964827634826970847f000001"
    "89736563703235366b31"
    "a103ca634cae0d49acb401d8a4c6b6fe8c55b70d115bf400769cc1400f3258cd3138"
    "8375647082765f"
)
EIP778_SIGNATURE = bytes.fromhex(
    "7098ad865b00a582051940cb9cf36836572411a47278783077011599ed5cd16b"
    "76f2635f4e234738f30813a89eb9137e3e3df5266e3a1f11df72ecf1145ccb9c"
)

# From devp2p discv5 wire test vectors
NODE_A_PRIVKEY = bytes.fromhex("eef77acb6c6a6eebc5b363a475ac583ec7eccdb42b6481424c60f59aa326547f")
NODE_A_ID = bytes.fromhex("aaaa8419e9f49d0083561b48287df592939a8d19947d8c0ef88f2a4856a69fbb")
NODE_B_PRIVKEY = bytes.fromhex("66fb62bfbd66b9177a138c1e5cddbe4f7c30c343e94e68df8769459cb1cde628")
NODE_B_ID = bytes.fromhex("bbbb9d047f0488c0b5a93c1c3f2d8bafc7c8ff337024a55434a0d0555de64db9")
NODE_B_PUBKEY = bytes.fromhex("0317931e6e0840220642f230037d285d122bc59063221ef3226b1f403ddc69ca91")

# From RFC 8032, section 7.1, TEST 1 (empty message)
RFC8032_SECRET = bytes.fromhex("9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60")
RFC8032_PUBLIC = bytes.fromhex("d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a")
RFC8032_SIGNATURE = bytes.fromhex(
    "e5564300c360ac729086e2cc806e828a84877f1eb8e5d974d873e06522490155"
    "5fb8821590a33bacc61e39701cf9b46bd25bf5f0595bbe24655141438e7a100b"
)

SECP256K1_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141


@pytest.fixture
def eip778_key() -> CombinedKey:
    """secp256k1 key of the EIP-778 example record."""
    return CombinedKey.secp256k1_from_bytes(bytearray(EIP778_PRIVKEY))


@pytest.fixture
def rfc8032_key() -> CombinedKey:
    """Ed25519 key of RFC 8032 test 1."""
    return CombinedKey.ed25519_from_bytes(bytearray(RFC8032_SECRET))


@pytest.fixture(params=["secp256k1", "ed25519"])
def scheme(request: pytest.FixtureRequest) -> str:
    """Each supported scheme name."""
    return request.param
