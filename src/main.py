"""
main.py — command line entry point for the cube converter
=========================================================

Reads a sticker cube and prints its cubie representation, or scrambles the
solved cube and prints both representations.

Examples:
    python src/main.py --stickers "111111111 222222222 333333333 444444444 555555555 666666666"
    python src/main.py --scramble "R U R' U'"
    python src/main.py --random 20 --seed 7

Exit codes: 0 ok, 2 malformed input, 3 a slot holds colors of no known piece.

------------------------------------------------------------------

Copyright (c) 2025 Facundo Gauna & Ulises Carnevale. MIT License.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List, Optional, Sequence

from app_types import ConversionError, CubieCube, StickerCube
from config import COLOR_SYMBOLS, LOG_FORMAT
from conversions import to_cubie_cube, to_sticker_cube
from cube_geometry import corner_keys, edge_keys
from cube_moves import apply_moves, format_moves, parse_moves, random_scramble
from sticker_notation import build_net_text, format_sticker_cube, parse_sticker_cube

logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
logger = logging.getLogger("main")


def create_arg_parser() -> argparse.ArgumentParser:
    """
    Build and return the CLI argument parser.
    """
    p = argparse.ArgumentParser(
        description="Convert Rubik's cube states between stickers and cubies",
        allow_abbrev=False,
    )
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--stickers", help="54 sticker symbols in U,D,F,B,R,L face order.")
    src.add_argument("--scramble", help="Move sequence applied to the solved cube.")
    src.add_argument("--random", type=int, metavar="N", help="Random scramble of N moves.")

    p.add_argument("--seed", type=int, default=None, help="Seed for --random.")
    p.add_argument("--colors", action="store_true", help="Print stickers with color letters.")
    p.add_argument("--debug", action="store_true", help="Enable verbose logging.")
    return p


def describe_cubie_cube(cubie: CubieCube) -> str:
    lines: List[str] = ["corners:"]
    for i, c in enumerate(cubie.corners):
        lines.append(f"  {corner_keys[i]}: {corner_keys[c.piece]} ori={c.orientation}")
    lines.append("edges:")
    for i, e in enumerate(cubie.edges):
        lines.append(f"  {edge_keys[i]}: {edge_keys[e.piece]} flip={int(e.flip)}")
    return "\n".join(lines)


def _print_stickers(stickers: StickerCube, colors: bool) -> None:
    symbols = COLOR_SYMBOLS if colors else None
    print(format_sticker_cube(stickers, symbols))
    print(build_net_text(stickers, symbols))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point.

    Returns integer exit code.
    """
    args = create_arg_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Debug mode enabled.")

    try:
        if args.stickers is not None:
            stickers = parse_sticker_cube(args.stickers)
        else:
            if args.random is not None:
                moves = random_scramble(args.random, random.Random(args.seed))
            else:
                moves = parse_moves(args.scramble)
            logger.info("Scramble: %s", format_moves(moves))
            stickers = to_sticker_cube(apply_moves(CubieCube.solved(), moves))
    except ValueError as e:
        logger.error("Invalid input: %s", e)
        return 2

    _print_stickers(stickers, args.colors)

    try:
        cubie = to_cubie_cube(stickers)
    except ConversionError as e:
        logger.error("Not a recognizable cube state: %s", e)
        return 3

    print(describe_cubie_cube(cubie))
    return 0


if __name__ == "__main__":
    sys.exit(main())
