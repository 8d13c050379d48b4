"""
conftest.py — Shared pytest fixtures for the cube conversion tests
"""

import random

import pytest

from app_types import CubieCube, StickerCube
from cube_moves import apply_moves

# B U D B' L2 D' R' F2 L F D2 R2 F' U2 R B2 L' U'
SCRAMBLE_18 = "B U D B' L2 D' R' F2 L F D2 R2 F' U2 R B2 L' U'"

# The same scramble recorded sticker by sticker from a physical cube
# (W=U, Y=D, G=F, B=B, R=R, O=L).
SCRAMBLED_LETTERS = ("OGBYWWOOY OWOGYGGBR WBBGGOBRB "
                     "RWYYBRWYR RBWWROWYG GRGBORYOY")


@pytest.fixture
def solved_stickers():
    return StickerCube.solved()


@pytest.fixture
def solved_cubie():
    return CubieCube.solved()


@pytest.fixture
def scrambled_cubie():
    """Cubie cube after the 18-move scramble."""
    return apply_moves(CubieCube.solved(), SCRAMBLE_18)


def random_cubie_cube(rng: random.Random) -> CubieCube:
    """Any assignment of pieces/orientations, reachable by moves or not."""
    cp = list(range(8))
    ep = list(range(12))
    rng.shuffle(cp)
    rng.shuffle(ep)
    co = [rng.randrange(3) for _ in cp]
    eo = [rng.randrange(2) for _ in ep]
    return CubieCube.from_lists(cp, co, ep, eo)


@pytest.fixture(params=range(20))
def random_cubie(request):
    return random_cubie_cube(random.Random(request.param))
