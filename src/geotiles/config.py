"""Runtime configuration read from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class LookupConfig:
    """Defaults applied by the CLI and batch helpers."""

    default_depth: int = 6
    max_depth: int = 12
    max_sector_codes: int = 9**4
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError("max_depth must be >= 0")
        if not 0 <= self.default_depth <= self.max_depth:
            raise ValueError("default_depth must be within [0, max_depth]")
        if self.max_sector_codes <= 0:
            raise ValueError("max_sector_codes must be positive")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {', '.join(LOG_LEVELS)}")


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def config_from_env() -> LookupConfig:
    """
    Build LookupConfig from environment variables.

    Optional:
      - GEOTILES_DEFAULT_DEPTH (default 6)
      - GEOTILES_MAX_DEPTH (default 12)
      - GEOTILES_MAX_SECTOR_CODES (default 6561, i.e. four levels)
      - GEOTILES_LOG_LEVEL (default WARNING)
    """
    return LookupConfig(
        default_depth=_int_from_env("GEOTILES_DEFAULT_DEPTH", 6),
        max_depth=_int_from_env("GEOTILES_MAX_DEPTH", 12),
        max_sector_codes=_int_from_env("GEOTILES_MAX_SECTOR_CODES", 9**4),
        log_level=os.getenv("GEOTILES_LOG_LEVEL", "WARNING").strip().upper(),
    )
