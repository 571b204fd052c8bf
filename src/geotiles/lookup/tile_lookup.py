"""Geodesic tile lookup on a 9-way subdivided icosahedron.

A tile code is a facet letter ``A``-``T`` naming one of the 20 icosahedron
faces, followed by any number of digits ``1``-``9``. Each digit picks one of
the nine children of the current triangle, so ``M713289`` is a depth-6 tile
inside face ``M``.
"""

from __future__ import annotations

from functools import lru_cache

from geotiles.contracts import LatLon, TileTriangle
from geotiles.geo.sphere import Vector, geo_to_point, interp, point_to_geo, within
from geotiles.logging import get_logger
from geotiles.lookup.errors import InvalidDigitError, InvalidFacetLetterError
from geotiles.lookup.icosahedron import (
    FACET_LETTERS,
    ICOSAHEDRON_FACES,
    ICOSAHEDRON_VERTICES,
    SUBFACE,
    SUBVERT,
)

Triangle = tuple[Vector, Vector, Vector]

log = get_logger(__name__)


class TileLookup:
    """Convert between tile codes and geographic triangles.

    Instances hold only the fixed icosahedron tables, so a single instance
    can be shared freely between threads.
    """

    def __init__(self) -> None:
        self.facets = FACET_LETTERS
        self.vertices = ICOSAHEDRON_VERTICES
        self.faces = ICOSAHEDRON_FACES
        self.subvert = SUBVERT
        self.subface = SUBFACE

    def face_triangle(self, face_index: int) -> Triangle:
        a, b, c = self.faces[face_index]
        return (self.vertices[a], self.vertices[b], self.vertices[c])

    def subdivision_points(self, tri: Triangle) -> list[Vector]:
        """Return the ten points ``v0``..``v9`` of one subdivision level."""
        points = list(tri)
        for i, j, k in self.subvert:
            points.append(interp(tri[i], tri[j], tri[k]))
        return points

    def sub_triangle(self, tri: Triangle, digit: int) -> Triangle:
        """Return child ``digit`` (1-9) of ``tri``, keeping the parent's winding."""
        corners: list[Vector] = []
        for k in self.subface[digit]:
            if k < 3:
                corners.append(tri[k])
            else:
                i, j, m = self.subvert[k - 3]
                corners.append(interp(tri[i], tri[j], tri[m]))
        return (corners[0], corners[1], corners[2])

    def _face_index(self, code: str) -> int:
        letter = code[:1].upper()
        if not letter or letter not in self.facets:
            raise InvalidFacetLetterError(code)
        return self.facets.index(letter)

    def name_to_facet(self, code: str) -> Triangle:
        """Return the three unit-sphere corners of ``code``.

        Raises:
            InvalidFacetLetterError: first character is not ``A``-``T``.
            InvalidDigitError: a later character is not ``1``-``9``.
        """
        tri = self.face_triangle(self._face_index(code))
        for position, char in enumerate(code[1:], start=1):
            if char not in "123456789":
                raise InvalidDigitError(code, position)
            tri = self.sub_triangle(tri, int(char))
        return tri

    def name_to_locations(self, code: str) -> list[LatLon]:
        """Return the ``(lat, lon)`` corners of ``code`` in subdivision order."""
        return [point_to_geo(v) for v in self.name_to_facet(code)]

    def tile(self, code: str) -> TileTriangle:
        """Return ``code`` as a :class:`TileTriangle` with an upper-cased letter."""
        corners = self.name_to_locations(code)
        return TileTriangle(code=code[0].upper() + code[1:], corners=tuple(corners))

    def sub_tiles(self, code: str) -> list[TileTriangle]:
        """Return the nine children of ``code`` in digit order."""
        return [self.tile(f"{code}{digit}") for digit in range(1, 10)]

    def find_face(self, point: Vector) -> int | None:
        """Return the index of the first base face containing ``point``."""
        for face_index in range(len(self.faces)):
            if within(point, *self.face_triangle(face_index)):
                return face_index
        return None

    def find_child(self, tri: Triangle, point: Vector) -> tuple[int, Triangle] | None:
        """Return ``(digit, child)`` for the first child of ``tri`` containing ``point``."""
        points = self.subdivision_points(tri)
        for digit in range(1, 10):
            a, b, c = self.subface[digit]
            child = (points[a], points[b], points[c])
            if within(point, *child):
                return digit, child
        return None

    def point_to_name(self, point: Vector, depth: int) -> str | None:
        """Return the code of depth at most ``depth`` containing a unit vector.

        Returns ``None`` when no base face contains the point. If no child
        matches at some level the code resolved so far is returned.
        """
        face_index = self.find_face(point)
        if face_index is None:
            log.warning(f"Point ({point[0]}, {point[1]}, {point[2]}) is not within any face")
            return None

        tri = self.face_triangle(face_index)
        code = self.facets[face_index]
        for _ in range(max(depth, 0)):
            found = self.find_child(tri, point)
            if found is None:
                log.debug(f"Descent stopped at {code}: no child contains the point")
                break
            digit, tri = found
            code += str(digit)
        return code

    def location_to_name(self, lat: float, lon: float, depth: int = 6) -> str | None:
        """Return the tile code containing ``(lat, lon)`` down to ``depth`` digits."""
        return self.point_to_name(geo_to_point(lat, lon), depth)

    # Aliases matching the names used by map front-ends.
    nameToLocations = name_to_locations
    locationToName = location_to_name


@lru_cache(maxsize=1)
def default_lookup() -> TileLookup:
    """Return a process-wide shared :class:`TileLookup`."""
    return TileLookup()
