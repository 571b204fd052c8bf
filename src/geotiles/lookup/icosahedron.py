"""Fixed icosahedron geometry and the 9-way subdivision tables.

Subdivision of a triangle ``v0, v1, v2`` (``v3``..``v9`` are derived)::

            v0
           /  \\
          /  9 \\
         v3----v8
        / \\  8 / \\
       / 4 \\  / 7 \\
      v4----v9----v7
     / \\ 3 /  \\ 6 / \\
    / 1 \\ /  2 \\ / 5 \\
   v1----v5----v6----v2

Children 3, 6 and 8 point the opposite way to their parent.
"""

from __future__ import annotations

from geotiles.geo.sphere import Vector

FACET_LETTERS: tuple[str, ...] = tuple("ABCDEFGHIJKLMNOPQRST")

ICOSAHEDRON_VERTICES: tuple[Vector, ...] = (
    (0.0, 0.0, 1.0),
    (0.89442719099991587856, 0.0, 0.44721359549995793),
    (0.27639320225002104342, 0.85065080835203993366, 0.44721359549995793),
    (-0.72360679774997893378, 0.52573111211913365982, 0.44721359549995793),
    (-0.72360679774997893378, -0.52573111211913365982, 0.44721359549995793),
    (0.27639320225002104342, -0.85065080835203993366, 0.44721359549995793),
    (0.72360679774997893378, 0.52573111211913365982, -0.44721359549995793),
    (-0.27639320225002104342, 0.85065080835203993366, -0.44721359549995793),
    (-0.89442719099991587856, 0.0, -0.44721359549995793),
    (-0.27639320225002104342, -0.85065080835203993366, -0.44721359549995793),
    (0.72360679774997893378, -0.52573111211913365982, -0.44721359549995793),
    (0.0, 0.0, -1.0),
)

# Vertex indices per face, in FACET_LETTERS order.
ICOSAHEDRON_FACES: tuple[tuple[int, int, int], ...] = (
    (2, 0, 1),
    (3, 0, 2),
    (4, 0, 3),
    (5, 0, 4),
    (1, 0, 5),
    (1, 6, 2),
    (7, 2, 6),
    (2, 7, 3),
    (8, 3, 7),
    (3, 8, 4),
    (9, 4, 8),
    (4, 9, 5),
    (10, 5, 9),
    (5, 10, 1),
    (6, 1, 10),
    (6, 11, 7),
    (7, 11, 8),
    (8, 11, 9),
    (9, 11, 10),
    (10, 11, 6),
)

# Corners summed to form v3..v9.
SUBVERT: tuple[tuple[int, int, int], ...] = (
    (0, 0, 1),
    (0, 1, 1),
    (1, 1, 2),
    (1, 2, 2),
    (0, 2, 2),
    (0, 0, 2),
    (0, 1, 2),
)

# Child corners by digit; entry 0 is the parent itself.
SUBFACE: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2),
    (4, 1, 5),
    (9, 5, 6),
    (5, 9, 4),
    (3, 4, 9),
    (7, 6, 2),
    (6, 7, 9),
    (8, 9, 7),
    (9, 8, 3),
    (0, 3, 8),
)

INVERTED_CHILDREN = frozenset({3, 6, 8})
