"""
cube_moves.py — face turns on the cubie level
=============================================

Applies outer-face quarter/half turns to a CubieCube and parses the usual
move notation ("R", "U'", "F2"; "Ri" is accepted for "R'").

A turn moves every piece of the turned layer to the slot its position
rotates to (clockwise as seen looking at the face). Corner orientation is an
axis number, so a corner keeps it when it points along the turn axis and
otherwise swaps to the remaining axis. F and B quarter turns flip the four
edges they move; no other move changes edge orientation.

--------------------------------------------------------------------------

Copyright (c) 2025 Facundo Gauna & Ulises Carnevale. Licensed under MIT License.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from app_types import Corner, CubieCube, Edge
from config import AXIS_Z, FACE_AXIS, MOVE_FACES, MOVE_SUFFIXES, SCRAMBLE_LENGTH
from cube_geometry import CORNER_BY_COORDS, CORNER_COORDS, EDGE_BY_COORDS, EDGE_COORDS

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class Move:
    face: str
    turns: int = 1   # clockwise quarter turns: 1, 2 or 3

    def __post_init__(self):
        if self.face not in MOVE_FACES:
            raise ValueError(f"Unknown move face: {self.face!r}")
        if self.turns not in (1, 2, 3):
            raise ValueError(f"Move turns must be 1, 2 or 3, got {self.turns!r}")

    def __str__(self) -> str:
        return self.face + {1: "", 2: "2", 3: "'"}[self.turns]

    def inverse(self) -> "Move":
        return Move(self.face, 4 - self.turns)


MoveLike = Union[str, Move, Iterable[Union[str, Move]]]


def parse_move(token: str) -> Move:
    """Parse a single move token (e.g. "R", "U'", "F2", "Bi")."""
    token = token.strip()
    if not token:
        raise ValueError("Empty move token")
    face = token[0].upper()
    suffix = token[1:]
    if face not in MOVE_FACES or suffix not in MOVE_SUFFIXES:
        raise ValueError(f"Unknown move token: {token!r}")
    return Move(face, MOVE_SUFFIXES[suffix])


def parse_moves(moves: MoveLike) -> List[Move]:
    """
    Parse a move sequence. Accepts a whitespace separated string, a single
    Move, or an iterable of tokens/Move objects.
    """
    if isinstance(moves, Move):
        return [moves]
    if isinstance(moves, str):
        moves = moves.split()
    return [m if isinstance(m, Move) else parse_move(m) for m in moves]


def format_moves(moves: Iterable[Move]) -> str:
    return " ".join(str(m) for m in moves)


def invert_moves(moves: MoveLike) -> List[Move]:
    """Moves that undo `moves`."""
    return [m.inverse() for m in reversed(parse_moves(moves))]


def _rotate(vec: Tuple[int, int, int], face: str) -> Tuple[int, int, int]:
    # clockwise quarter turn about the face's outward normal n:
    # v' = n (n . v) - n x v
    axis, sign = FACE_AXIS[face]
    n = [0, 0, 0]
    n[axis] = sign
    dot = n[0] * vec[0] + n[1] * vec[1] + n[2] * vec[2]
    cross = (
        n[1] * vec[2] - n[2] * vec[1],
        n[2] * vec[0] - n[0] * vec[2],
        n[0] * vec[1] - n[1] * vec[0],
    )
    return tuple(n[k] * dot - cross[k] for k in range(3))


def _quarter_turn(cubie: CubieCube, face: str) -> CubieCube:
    axis, sign = FACE_AXIS[face]

    corners = list(cubie.corners)
    for i, coords in enumerate(CORNER_COORDS):
        if coords[axis] != sign:
            continue
        dest = CORNER_BY_COORDS[_rotate(coords, face)]
        corner = cubie.corners[i]
        ori = corner.orientation
        if ori != axis:
            ori = 3 - axis - ori
        corners[dest] = Corner(corner.piece, ori)

    edges = list(cubie.edges)
    for i, coords in enumerate(EDGE_COORDS):
        if coords[axis] != sign:
            continue
        dest = EDGE_BY_COORDS[_rotate(coords, face)]
        edge = cubie.edges[i]
        edges[dest] = Edge(edge.piece, edge.flip != (axis == AXIS_Z))

    return CubieCube(corners=tuple(corners), edges=tuple(edges))


def apply_move(cubie: CubieCube, move: Union[str, Move]) -> CubieCube:
    """Return a new CubieCube with a single move applied."""
    if isinstance(move, str):
        move = parse_move(move)
    for _ in range(move.turns):
        cubie = _quarter_turn(cubie, move.face)
    return cubie


def apply_moves(cubie: CubieCube, moves: MoveLike) -> CubieCube:
    """Return a new CubieCube with a move sequence applied, left to right."""
    parsed = parse_moves(moves)
    for move in parsed:
        cubie = apply_move(cubie, move)
    logger.debug("applied %d moves: %s", len(parsed), format_moves(parsed))
    return cubie


def random_scramble(length: int = SCRAMBLE_LENGTH, rng: Optional[random.Random] = None) -> List[Move]:
    """
    Generate a random scramble. The same face is never turned twice in a row,
    so no two consecutive moves cancel or merge.
    """
    rng = rng or random
    moves: List[Move] = []
    prev_face = None
    for _ in range(length):
        face = rng.choice([f for f in MOVE_FACES if f != prev_face])
        moves.append(Move(face, rng.choice((1, 2, 3))))
        prev_face = face
    return moves
