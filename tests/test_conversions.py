"""
test_conversions.py — Sticker <-> cubie conversion
==================================================

Verifies:
  - solved stickers read back as the identity cubie cube and vice versa
  - cubie -> sticker -> cubie is the identity for any piece assignment
  - the 18-move scramble survives the round trip and matches the same
    scramble recorded from a physical cube
  - corrupted corner/edge slots are reported with their exact colors
  - orientation and flip derivation for individual pieces
"""

import pytest

from app_types import (
    ConversionError,
    Corner,
    CubieCube,
    Edge,
    StickerCube,
    UnrecognizedCorner,
    UnrecognizedEdge,
)
from config import AXIS_X, AXIS_Y, AXIS_Z
from conversions import (
    find_corner,
    find_edge,
    list_index,
    sets_equal,
    to_cubie_cube,
    to_sticker_cube,
)
from cube_geometry import CORNER_INDEXES, EDGE_INDEXES
from sticker_notation import format_sticker_cube, parse_sticker_cube

from conftest import SCRAMBLED_LETTERS

SCRAMBLED_DIGITS = "634211662 616323345 144336454 512245125 541156123 353465262"


class TestSolvedState:

    def test_solved_stickers_to_identity_cubies(self, solved_stickers):
        cubies = to_cubie_cube(solved_stickers)
        for i, corner in enumerate(cubies.corners):
            assert corner.piece == i
            assert corner.orientation == AXIS_Y
        for i, edge in enumerate(cubies.edges):
            assert edge.piece == i
            assert edge.flip is False

    def test_solved_cubies_to_solved_stickers(self, solved_cubie, solved_stickers):
        assert to_sticker_cube(solved_cubie) == solved_stickers

    def test_solved_fixpoint(self, solved_cubie, solved_stickers):
        assert to_cubie_cube(solved_stickers) == solved_cubie


class TestRoundTrip:

    def test_any_assignment_round_trips(self, random_cubie):
        assert to_cubie_cube(to_sticker_cube(random_cubie)) == random_cubie

    def test_scramble_round_trips(self, scrambled_cubie):
        stickers = to_sticker_cube(scrambled_cubie)
        assert to_cubie_cube(stickers) == scrambled_cubie

    def test_scramble_matches_recorded_cube(self, scrambled_cubie):
        recorded = parse_sticker_cube(SCRAMBLED_LETTERS)
        assert to_cubie_cube(recorded) == scrambled_cubie
        assert to_sticker_cube(scrambled_cubie) == recorded
        assert format_sticker_cube(recorded) == SCRAMBLED_DIGITS

    def test_scramble_is_not_solved(self, scrambled_cubie, solved_cubie):
        assert scrambled_cubie != solved_cubie

    def test_color_counts_preserved(self, random_cubie):
        stickers = to_sticker_cube(random_cubie)
        assert len(stickers) == 54
        assert sorted(stickers) == sorted(StickerCube.solved())

    def test_deterministic(self, scrambled_cubie):
        assert to_sticker_cube(scrambled_cubie) == to_sticker_cube(scrambled_cubie)
        stickers = to_sticker_cube(scrambled_cubie)
        assert to_cubie_cube(stickers) == to_cubie_cube(stickers)

    def test_input_not_modified(self, scrambled_cubie):
        before = CubieCube(scrambled_cubie.corners, scrambled_cubie.edges)
        to_sticker_cube(scrambled_cubie)
        assert scrambled_cubie == before


class TestCorruption:

    @pytest.mark.parametrize("slot", range(8))
    def test_corrupted_corner_slot(self, slot, scrambled_cubie):
        stickers = to_sticker_cube(scrambled_cubie)
        bad = (6, 6, 4)
        stickers = stickers.replace(zip(CORNER_INDEXES[slot], bad))
        with pytest.raises(UnrecognizedCorner) as exc:
            to_cubie_cube(stickers)
        assert exc.value.colors == bad
        assert exc.value.slot == slot

    @pytest.mark.parametrize("slot", range(12))
    def test_corrupted_edge_slot(self, slot, scrambled_cubie):
        stickers = to_sticker_cube(scrambled_cubie)
        bad = (1, 2)
        stickers = stickers.replace(zip(EDGE_INDEXES[slot], bad))
        with pytest.raises(UnrecognizedEdge) as exc:
            to_cubie_cube(stickers)
        assert exc.value.colors == bad
        assert exc.value.slot == slot

    def test_opposite_colors_on_corner(self, solved_stickers):
        # U and D colors on one corner
        stickers = solved_stickers.replace(zip(CORNER_INDEXES[7], (5, 2, 1)))
        with pytest.raises(UnrecognizedCorner) as exc:
            to_cubie_cube(stickers)
        assert exc.value.colors == (5, 2, 1)
        assert exc.value.slot == 7

    def test_errors_are_conversion_errors(self, solved_stickers):
        stickers = solved_stickers.replace(zip(EDGE_INDEXES[0], (3, 3)))
        with pytest.raises(ConversionError):
            to_cubie_cube(stickers)
        with pytest.raises(ValueError):
            to_cubie_cube(stickers)

    def test_error_message_lists_colors(self):
        err = UnrecognizedEdge((3, 3), slot=4)
        assert str(err) == "unrecognized edge: 3,3 (slot 4)"
        assert str(UnrecognizedCorner([6, 6, 4])) == "unrecognized corner: 6,6,4"

    def test_corners_checked_before_edges(self, solved_stickers):
        stickers = solved_stickers.replace(zip(EDGE_INDEXES[0], (3, 3)))
        stickers = stickers.replace(zip(CORNER_INDEXES[5], (1, 1, 1)))
        with pytest.raises(UnrecognizedCorner):
            to_cubie_cube(stickers)


class TestIdentification:

    @pytest.mark.parametrize("colors, expected", [
        ((6, 2, 4), (0, AXIS_Y)),
        ((2, 4, 6), (0, AXIS_X)),
        ((4, 6, 2), (0, AXIS_Z)),
        ((3, 1, 5), (7, AXIS_Y)),
        ((1, 5, 3), (7, AXIS_X)),
        ((5, 3, 1), (7, AXIS_Z)),
    ])
    def test_find_corner(self, colors, expected):
        assert find_corner(colors) == expected

    def test_find_corner_unknown(self):
        with pytest.raises(UnrecognizedCorner) as exc:
            find_corner((1, 2, 3))
        assert exc.value.colors == (1, 2, 3)
        assert exc.value.slot is None

    @pytest.mark.parametrize("colors, expected", [
        ((1, 3), (0, False)),
        ((3, 1), (0, True)),
        ((3, 5), (1, False)),
        ((5, 3), (1, True)),
        ((2, 5), (11, False)),
        ((5, 2), (11, True)),
        ((4, 6), (9, False)),
        ((6, 4), (9, True)),
    ])
    def test_find_edge(self, colors, expected):
        assert find_edge(colors) == expected

    def test_find_edge_unknown(self):
        with pytest.raises(UnrecognizedEdge) as exc:
            find_edge((5, 6))
        assert exc.value.colors == (5, 6)

    def test_flipped_edge_in_cube(self, solved_cubie):
        edges = list(solved_cubie.edges)
        edges[0] = Edge(0, True)
        edges[1] = Edge(1, True)
        cube = CubieCube(solved_cubie.corners, edges)
        stickers = to_sticker_cube(cube)
        assert (stickers[7], stickers[19]) == (3, 1)
        assert to_cubie_cube(stickers) == cube

    def test_twisted_corner_in_cube(self, solved_cubie):
        corners = list(solved_cubie.corners)
        corners[7] = Corner(7, AXIS_Z)
        cube = CubieCube(corners, solved_cubie.edges)
        stickers = to_sticker_cube(cube)
        assert tuple(stickers[i] for i in CORNER_INDEXES[7]) == (3, 5, 1)
        assert to_cubie_cube(stickers) == cube


class TestHelpers:

    def test_sets_equal(self):
        assert sets_equal((1, 2, 3), (3, 1, 2))
        assert sets_equal([4, 6], (6, 4))
        assert not sets_equal((6, 6, 4), (6, 2, 4))
        assert not sets_equal((6, 2, 4), (6, 6, 4))
        assert not sets_equal((1, 3), (1, 3, 5))

    def test_list_index(self):
        assert list_index((6, 2, 4), 2) == 1
        assert list_index((6, 2, 4), 1) == -1
