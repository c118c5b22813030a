"""Tests for the fixed-length byte types."""

from __future__ import annotations

import pytest

from lean_enr.types import Bytes32, Bytes33, Bytes64, NodeId, StrictBaseModel


class _Record(StrictBaseModel):
    node_id: NodeId


class TestBaseBytes:
    """Tests for BaseBytes construction and behavior."""

    @pytest.mark.parametrize("cls, length", [(Bytes32, 32), (Bytes33, 33), (Bytes64, 64)])
    def test_exact_length(self, cls: type[Bytes32], length: int) -> None:
        """Only values of exactly LENGTH bytes are accepted."""
        assert len(cls(b"\x01" * length)) == length

        with pytest.raises(ValueError, match=f"expects exactly {length} bytes"):
            cls(b"\x01" * (length - 1))

    def test_hex_and_iterable_inputs(self) -> None:
        """Hex strings and integer iterables are coerced."""
        assert Bytes32("0x" + "ab" * 32) == b"\xab" * 32
        assert Bytes32([0] * 32) == Bytes32.zero()

    def test_repr(self) -> None:
        """repr shows the type name and hex content."""
        assert repr(Bytes32.zero()) == f"Bytes32({'00' * 32})"

    def test_hash_matches_plain_bytes(self) -> None:
        """Byte types hash like the equal plain bytes."""
        node_id = NodeId(b"\x0f" * 32)

        assert node_id == b"\x0f" * 32
        assert hash(node_id) == hash(b"\x0f" * 32)
        assert {b"\x0f" * 32: "peer"}[node_id] == "peer"


class TestPydantic:
    """Tests for the pydantic integration."""

    def test_serializes_as_hex(self) -> None:
        """Byte types serialize to hex in JSON."""
        record = _Record(node_id=NodeId(b"\x0f" * 32))

        assert record.model_dump_json(by_alias=True) == f'{{"nodeId":"{"0f" * 32}"}}'

    def test_wrong_length_rejected(self) -> None:
        """Validation rejects bytes of the wrong length."""
        with pytest.raises(ValueError):
            _Record(node_id=b"\x0f" * 31)  # type: ignore[arg-type]
