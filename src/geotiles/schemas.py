"""Pydantic schemas for JSON tile payloads."""

from __future__ import annotations

from pydantic import BaseModel, Field

from geotiles.contracts import TileTriangle


class TileResponse(BaseModel):
    """One tile with its corners as ``[lat, lon]`` pairs."""

    code: str
    corners: list[list[float]]
    inverted: bool = False

    @classmethod
    def from_contract(cls, tile: TileTriangle, inverted: bool = False) -> "TileResponse":
        """Build the response from a TileTriangle contract."""
        return cls(**tile.to_dict(), inverted=inverted)


class SubTilesResponse(BaseModel):
    """A parent tile and its nine children."""

    parent: TileResponse
    children: list[TileResponse]


class LocateRequest(BaseModel):
    """Reverse lookup input."""

    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)
    depth: int = Field(default=6, ge=0)


class LocateResponse(BaseModel):
    """Reverse lookup result; `code` is None when no face contains the point."""

    lat: float
    lon: float
    depth: int
    code: str | None
    resolved_depth: int | None = None


class SectorResponse(BaseModel):
    """All descendant codes of a sector."""

    sector: str
    levels: int
    total: int
    codes: list[str]
