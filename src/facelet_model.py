"""
facelet_model.py — face turns on the sticker level
==================================================

Places every one of the 54 sticker positions in space (position of its piece
and outward normal, cube centered at the origin) using only the slot tables
of `cube_geometry`, and precomputes for each face the 54-index permutation of
a clockwise quarter turn.

This gives a second, independent way of turning a cube: turning the sticker
cube here must give the same stickers as turning the cubie cube with
`cube_moves` and converting afterwards.
"""

from __future__ import annotations

import logging
from typing import Dict, Tuple, Union

import numpy as np

from app_types import StickerCube
from config import FACE_AXIS, FACE_ORDER, STICKER_COUNT
from cube_geometry import (
    CENTER_INDEXES,
    CORNER_COORDS,
    CORNER_INDEXES,
    EDGE_COORDS,
    EDGE_INDEXES,
    sticker_normal,
)
from cube_moves import Move, MoveLike, parse_move, parse_moves

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def face_normal(face: str) -> np.ndarray:
    axis, sign = FACE_AXIS[face]
    n = np.zeros(3, dtype=int)
    n[axis] = sign
    return n


def quarter_turn_matrix(face: str) -> np.ndarray:
    """Rotation matrix of a clockwise quarter turn seen from `face` (integer entries)."""
    n = face_normal(face)
    cross = np.array([
        [0, -n[2], n[1]],
        [n[2], 0, -n[0]],
        [-n[1], n[0], 0],
    ])
    # rotation by -90 degrees about n
    return np.outer(n, n) - cross


def _sticker_positions() -> Tuple[np.ndarray, np.ndarray]:
    pos = np.zeros((STICKER_COUNT, 3), dtype=int)
    normals = np.zeros((STICKER_COUNT, 3), dtype=int)
    for idx in range(STICKER_COUNT):
        normals[idx] = sticker_normal(idx)
    for slot, indexes in enumerate(CORNER_INDEXES):
        pos[list(indexes)] = CORNER_COORDS[slot]
    for slot, indexes in enumerate(EDGE_INDEXES):
        pos[list(indexes)] = EDGE_COORDS[slot]
    for idx in CENTER_INDEXES:
        pos[idx] = normals[idx]
    return pos, normals


STICKER_POSITIONS, STICKER_NORMALS = _sticker_positions()


def _place(pos, normal) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    return tuple(int(v) for v in pos), tuple(int(v) for v in normal)


_BY_PLACE: Dict[Tuple[Tuple[int, ...], Tuple[int, ...]], int] = {
    _place(STICKER_POSITIONS[i], STICKER_NORMALS[i]): i for i in range(STICKER_COUNT)
}


def _turn_destinations(face: str) -> np.ndarray:
    axis, sign = FACE_AXIS[face]
    rot = quarter_turn_matrix(face)
    dest = np.arange(STICKER_COUNT)
    layer = np.flatnonzero(STICKER_POSITIONS[:, axis] == sign)
    new_pos = STICKER_POSITIONS[layer] @ rot.T
    new_normals = STICKER_NORMALS[layer] @ rot.T
    for src, p, n in zip(layer, new_pos, new_normals):
        dest[src] = _BY_PLACE[_place(p, n)]
    return dest


# face letter -> dest, where the sticker at index i moves to index dest[i]
TURN_DESTINATIONS: Dict[str, np.ndarray] = {face: _turn_destinations(face) for face in FACE_ORDER}


def turn_sticker_cube(stickers: StickerCube, move: Union[str, Move]) -> StickerCube:
    """Return a new StickerCube with one move applied."""
    if isinstance(move, str):
        move = parse_move(move)
    arr = np.asarray(stickers.stickers)
    dest = TURN_DESTINATIONS[move.face]
    for _ in range(move.turns):
        out = np.empty_like(arr)
        out[dest] = arr
        arr = out
    return StickerCube(tuple(int(c) for c in arr))


def turn_sticker_cube_many(stickers: StickerCube, moves: MoveLike) -> StickerCube:
    parsed = parse_moves(moves)
    for move in parsed:
        stickers = turn_sticker_cube(stickers, move)
    logger.debug("turned sticker cube by %d moves", len(parsed))
    return stickers
