"""
conversions.py — sticker <-> cubie conversion
=============================================

`to_sticker_cube` paints a CubieCube onto the 54 sticker positions and
`to_cubie_cube` reads a StickerCube back into pieces and orientations. Both
only look at the tables in `cube_geometry`; they do not check that the cube
is solvable (permutation parity, twist or flip sums).

Corner orientation is the axis (0=x, 1=y, 2=z) that the corner's U/D sticker
points along, so a solved corner has orientation 1. Edge flip follows the
usual F/B edge-orientation rules: quarter turns of F or B flip edges, every
other move keeps them.

--------------------------------------------------------------------------

Copyright (c) 2025 Facundo Gauna & Ulises Carnevale. Licensed under MIT License.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from app_types import Corner, CubieCube, Edge, StickerCube, UnrecognizedCorner, UnrecognizedEdge
from config import COLOR_D, COLOR_U, FB_COLORS, UD_COLORS
from cube_geometry import (
    CORNER_INDEXES,
    CORNER_PIECES,
    EDGE_INDEXES,
    EDGE_PIECES,
    ODD_CORNER_SWAPS,
)

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def to_sticker_cube(cubie: CubieCube) -> StickerCube:
    """Convert a CubieCube to a StickerCube. Never fails on a well-typed cube."""
    res = list(StickerCube.solved().stickers)

    # edges
    for i, edge in enumerate(cubie.edges):
        s1, s2 = EDGE_PIECES[edge.piece]
        if edge.flip:
            s1, s2 = s2, s1
        dest = EDGE_INDEXES[i]
        res[dest[0]] = s1
        res[dest[1]] = s2

    # corners
    for i, corner in enumerate(cubie.corners):
        s1, s2, s3 = CORNER_PIECES[corner.piece]

        # A corner sitting in a slot of the other handedness shows its x and z
        # colors mirrored; (piece ^ slot) has an odd number of bits set then.
        if (corner.piece ^ i) & 7 in ODD_CORNER_SWAPS:
            s1, s3 = s3, s1

        # twist
        if corner.orientation == 2:
            s1, s2, s3 = s3, s1, s2
        elif corner.orientation == 0:
            s1, s2, s3 = s2, s3, s1

        dest = CORNER_INDEXES[i]
        res[dest[0]] = s1
        res[dest[1]] = s2
        res[dest[2]] = s3

    return StickerCube(tuple(res))


def to_cubie_cube(stickers: StickerCube) -> CubieCube:
    """
    Convert a StickerCube to a CubieCube.

    Raises UnrecognizedCorner / UnrecognizedEdge (both ConversionError) for the
    first slot whose colors are not those of any piece. Nothing is returned in
    that case.
    """
    corners: List[Corner] = []
    for i, idx in enumerate(CORNER_INDEXES):
        colors = (stickers[idx[0]], stickers[idx[1]], stickers[idx[2]])
        try:
            piece, orientation = find_corner(colors)
        except UnrecognizedCorner:
            logger.debug("corner slot %d holds unknown colors %s", i, colors)
            raise UnrecognizedCorner(colors, slot=i) from None
        corners.append(Corner(piece, orientation))

    edges: List[Edge] = []
    for i, idx in enumerate(EDGE_INDEXES):
        colors = (stickers[idx[0]], stickers[idx[1]])
        try:
            piece, flip = find_edge(colors)
        except UnrecognizedEdge:
            logger.debug("edge slot %d holds unknown colors %s", i, colors)
            raise UnrecognizedEdge(colors, slot=i) from None
        edges.append(Edge(piece, flip))

    return CubieCube(corners=tuple(corners), edges=tuple(edges))


def find_corner(stickers: Sequence[int]) -> Tuple[int, int]:
    """Find the physical corner given its three colors; returns (piece, orientation)."""
    for i, colors in enumerate(CORNER_PIECES):
        if not sets_equal(stickers, colors):
            continue
        orientation = list_index(stickers, COLOR_U)
        if orientation == -1:
            orientation = list_index(stickers, COLOR_D)
        return i, orientation
    raise UnrecognizedCorner(stickers)


def find_edge(stickers: Sequence[int]) -> Tuple[int, bool]:
    """Find the physical edge given its two colors; returns (piece, flip)."""
    for i, colors in enumerate(EDGE_PIECES):
        if not sets_equal(stickers, colors):
            continue

        flip = False
        if stickers[1] in UD_COLORS:
            # U/D color on the wrong sticker
            flip = True
        elif stickers[1] in FB_COLORS:
            if stickers[0] not in UD_COLORS:
                # E-slice edge with its F/B color on the wrong sticker
                flip = True
        return i, flip
    raise UnrecognizedEdge(stickers)


def list_contains(values: Sequence[int], num: int) -> bool:
    for x in values:
        if x == num:
            return True
    return False


def list_index(values: Sequence[int], num: int) -> int:
    for i, x in enumerate(values):
        if x == num:
            return i
    return -1


def sets_equal(set1: Sequence[int], set2: Sequence[int]) -> bool:
    # fixed sizes of 2 or 3, a linear scan is enough
    if len(set1) != len(set2):
        return False
    for x in set1:
        if not list_contains(set2, x):
            return False
    for x in set2:
        if not list_contains(set1, x):
            return False
    return True
