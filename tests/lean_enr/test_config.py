"""Tests for environment configuration."""

from __future__ import annotations

import importlib
from collections.abc import Iterator

import pytest

from lean_enr import config


@pytest.fixture
def reload_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Restore the configuration module after the test changes the environment."""
    yield
    monkeypatch.delenv("LEAN_ENR_SCHEME", raising=False)
    importlib.reload(config)


class TestConfig:
    """Tests for LEAN_ENR_SCHEME."""

    def test_default_is_secp256k1(
        self, monkeypatch: pytest.MonkeyPatch, reload_config: None
    ) -> None:
        """Without the variable, keys default to the v4 scheme."""
        monkeypatch.delenv("LEAN_ENR_SCHEME", raising=False)

        assert importlib.reload(config).LEAN_ENR_SCHEME == "secp256k1"

    def test_value_is_case_insensitive(
        self, monkeypatch: pytest.MonkeyPatch, reload_config: None
    ) -> None:
        """Scheme names are lower-cased."""
        monkeypatch.setenv("LEAN_ENR_SCHEME", "ED25519")

        assert importlib.reload(config).LEAN_ENR_SCHEME == "ed25519"

    def test_unsupported_value_raises(
        self, monkeypatch: pytest.MonkeyPatch, reload_config: None
    ) -> None:
        """Unknown schemes fail at import."""
        monkeypatch.setenv("LEAN_ENR_SCHEME", "rsa")

        with pytest.raises(ValueError, match="Invalid LEAN_ENR_SCHEME"):
            importlib.reload(config)
