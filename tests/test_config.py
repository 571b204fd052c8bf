"""Tests for environment-driven configuration."""

from __future__ import annotations

import pytest

from geotiles.config import LookupConfig, config_from_env


def test_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset variables fall back to the documented defaults."""
    for name in (
        "GEOTILES_DEFAULT_DEPTH",
        "GEOTILES_MAX_DEPTH",
        "GEOTILES_MAX_SECTOR_CODES",
        "GEOTILES_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    assert config_from_env() == LookupConfig(default_depth=6, max_depth=12, max_sector_codes=6561, log_level="WARNING")


def test_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment values override defaults; log level is case-insensitive."""
    monkeypatch.setenv("GEOTILES_DEFAULT_DEPTH", "3")
    monkeypatch.setenv("GEOTILES_MAX_DEPTH", "8")
    monkeypatch.setenv("GEOTILES_LOG_LEVEL", "debug")

    cfg = config_from_env()

    assert cfg.default_depth == 3
    assert cfg.max_depth == 8
    assert cfg.log_level == "DEBUG"


def test_config_rejects_non_integer_depth(monkeypatch: pytest.MonkeyPatch) -> None:
    """Depth variables must parse as integers."""
    monkeypatch.setenv("GEOTILES_DEFAULT_DEPTH", "six")

    with pytest.raises(ValueError, match="GEOTILES_DEFAULT_DEPTH"):
        config_from_env()


def test_config_rejects_default_beyond_max() -> None:
    """The default depth cannot exceed the maximum."""
    with pytest.raises(ValueError, match="default_depth"):
        LookupConfig(default_depth=9, max_depth=4)
    with pytest.raises(ValueError, match="log_level"):
        LookupConfig(log_level="LOUD")


def test_config_reads_sector_cap(monkeypatch: pytest.MonkeyPatch) -> None:
    """GEOTILES_MAX_SECTOR_CODES bounds sector expansion and must be positive."""
    monkeypatch.setenv("GEOTILES_MAX_SECTOR_CODES", "729")
    assert config_from_env().max_sector_codes == 729

    monkeypatch.setenv("GEOTILES_MAX_SECTOR_CODES", "0")
    with pytest.raises(ValueError, match="max_sector_codes"):
        config_from_env()
