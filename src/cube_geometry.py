"""
 * <pre>
 * The names of the sticker positions of the cube
 *                |************|
 *                |*U1**U2**U3*|
 *                |************|
 *                |*U4**U5**U6*|
 *                |************|
 *                |*U7**U8**U9*|
 *                |************|
 * |************|************|************|************|
 * |*L1**L2**L3*|*F1**F2**F3*|*R1**R2**R3*|*B1**B2**B3*|
 * |************|************|************|************|
 * |*L4**L5**L6*|*F4**F5**F6*|*R4**R5**R6*|*B4**B5**B6*|
 * |************|************|************|************|
 * |*L7**L8**L9*|*F7**F8**F9*|*R7**R8**R9*|*B7**B8**B9*|
 * |************|************|************|************|
 *                |************|
 *                |*D1**D2**D3*|
 *                |************|
 *                |*D4**D5**D6*|
 *                |************|
 *                |*D7**D8**D9*|
 *                |************|
 * </pre>
 *
 * A sticker cube stores the faces in the order U, D, F, B, R, L, nine stickers
 * each: U1..U9 are indexes 0..8, D1..D9 are 9..17, F1..F9 are 18..26,
 * B1..B9 are 27..35, R1..R9 are 36..44 and L1..L9 are 45..53.
 *
 * Corner slots are numbered by the bits zyx of their position: x=1 is the R
 * side (0 is L), y=1 is U (0 is D), z=1 is F (0 is B). So slot 0 is the LDB
 * corner and slot 7 is RUF. The three stickers of a corner are always listed
 * in axis order x, y, z.
"""

from typing import Dict, FrozenSet, List, Tuple

from config import FACE_AXIS, FACE_ORDER, STICKER_COUNT, STICKERS_PER_FACE

# Named sticker positions, U1 = 0 ... L9 = 53.
facelets: Dict[str, int] = {
    f"{face}{n + 1}": fi * STICKERS_PER_FACE + n
    for fi, face in enumerate(FACE_ORDER)
    for n in range(STICKERS_PER_FACE)
}

# ++++++++++++++++++++++++++++++++ Corner slots ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++

LDB = 0
RDB = 1
LUB = 2
RUB = 3
LDF = 4
RDF = 5
LUF = 6
RUF = 7

corner_keys = ('LDB', 'RDB', 'LUB', 'RUB', 'LDF', 'RDF', 'LUF', 'RUF')

# Sticker positions of every corner slot, in x, y, z order.
CORNER_INDEXES: Tuple[Tuple[int, int, int], ...] = (
    (51, 15, 35),
    (44, 17, 33),
    (45, 0, 29),
    (38, 2, 27),
    (53, 9, 24),
    (42, 11, 26),
    (47, 6, 18),
    (36, 8, 20),
)

# Colors of every corner piece on the solved cube, in x, y, z order.
CORNER_PIECES: Tuple[Tuple[int, int, int], ...] = (
    (6, 2, 4),
    (5, 2, 4),
    (6, 1, 4),
    (5, 1, 4),
    (6, 2, 3),
    (5, 2, 3),
    (6, 1, 3),
    (5, 1, 3),
)

# ++++++++++++++++++++++++++++++++ Edge slots ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++

UF = 0
FR = 1
DF = 2
FL = 3
UL = 4
UR = 5
UB = 6
BR = 7
DB = 8
BL = 9
DL = 10
DR = 11

edge_keys = ('UF', 'FR', 'DF', 'FL', 'UL', 'UR', 'UB', 'BR', 'DB', 'BL', 'DL', 'DR')

# Sticker positions of every edge slot. The first one is on the U/D face when
# the slot has one, on the F/B face otherwise.
EDGE_INDEXES: Tuple[Tuple[int, int], ...] = (
    (7, 19),
    (23, 39),
    (10, 25),
    (21, 50),
    (3, 46),
    (5, 37),
    (1, 28),
    (30, 41),
    (16, 34),
    (32, 48),
    (12, 52),
    (14, 43),
)

# Colors of every edge piece on the solved cube, same order as EDGE_INDEXES.
EDGE_PIECES: Tuple[Tuple[int, int], ...] = (
    (1, 3),
    (3, 5),
    (2, 3),
    (3, 6),
    (1, 6),
    (1, 5),
    (1, 4),
    (4, 5),
    (2, 4),
    (4, 6),
    (2, 6),
    (2, 5),
)

# ++++++++++++++++++++++++++++++++ Derived tables ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++

CENTER_INDEXES: Tuple[int, ...] = tuple(
    fi * STICKERS_PER_FACE + STICKERS_PER_FACE // 2 for fi in range(len(FACE_ORDER))
)


def sticker_face(idx: int) -> str:
    """Face letter the sticker position lies on."""
    if not 0 <= idx < STICKER_COUNT:
        raise IndexError(f"sticker index out of range: {idx}")
    return FACE_ORDER[idx // STICKERS_PER_FACE]


def sticker_normal(idx: int) -> Tuple[int, int, int]:
    """Outward unit normal of the face holding sticker `idx`, as an (x, y, z) tuple."""
    axis, sign = FACE_AXIS[sticker_face(idx)]
    normal = [0, 0, 0]
    normal[axis] = sign
    return tuple(normal)


def _slot_coords(indexes) -> Tuple[int, int, int]:
    # a slot sits where the normals of its stickers add up
    return tuple(sum(sticker_normal(i)[k] for i in indexes) for k in range(3))


# Slot positions with the cube centered at the origin, each coordinate -1, 0 or +1.
CORNER_COORDS: Tuple[Tuple[int, int, int], ...] = tuple(_slot_coords(ix) for ix in CORNER_INDEXES)
EDGE_COORDS: Tuple[Tuple[int, int, int], ...] = tuple(_slot_coords(ix) for ix in EDGE_INDEXES)

CORNER_BY_COORDS: Dict[Tuple[int, int, int], int] = {c: i for i, c in enumerate(CORNER_COORDS)}
EDGE_BY_COORDS: Dict[Tuple[int, int, int], int] = {c: i for i, c in enumerate(EDGE_COORDS)}

# Handedness of the x, y, z sticker triple at every corner slot (+1 or -1).
# Neighbouring slots alternate, so a corner that travels to a slot of the other
# handedness shows its x and z colors in the mirrored order.
CORNER_CHIRALITY: Tuple[int, ...] = tuple(x * y * z for x, y, z in CORNER_COORDS)

# Values of (piece ^ slot) & 7 for which those handedness values differ.
ODD_CORNER_SWAPS: FrozenSet[int] = frozenset(
    (p ^ s) & 7
    for p in range(8)
    for s in range(8)
    if CORNER_CHIRALITY[p] != CORNER_CHIRALITY[s]
)


def slot_sticker_indexes() -> List[int]:
    """Every sticker position owned by a corner or edge slot, in slot order."""
    out: List[int] = []
    for ix in CORNER_INDEXES:
        out.extend(ix)
    for ix in EDGE_INDEXES:
        out.extend(ix)
    return out
