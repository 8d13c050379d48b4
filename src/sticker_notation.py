"""
sticker_notation.py — text <-> StickerCube
==========================================

Sticker cubes are written as 54 symbols in face order U, D, F, B, R, L
(whitespace is ignored, so "111111111 222222222 ..." and a single 54-char
string are the same). Symbols are either the color codes 1-6 themselves, or
any six distinct characters: in that case each center sticker names the
color of its face, e.g. "OGBYWWOOY OWOGYGGBR ..." where the U center is 'W'.

--------------------------------------------------------------------------

Copyright (c) 2025 Facundo Gauna & Ulises Carnevale. Licensed under MIT License.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional

from app_types import StickerCube
from config import COLOR_CODES, FACE_ORDER, STICKER_COUNT, STICKERS_PER_FACE
from cube_geometry import CENTER_INDEXES

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

_DIGITS = {str(code): code for code in COLOR_CODES}


def clean_sticker_string(s: str) -> str:
    return re.sub(r'\s+', '', s)


def parse_sticker_cube(text: str) -> StickerCube:
    """
    Parse 54 sticker symbols into a StickerCube.
    Raises ValueError on a wrong length, repeated center symbols or a symbol
    that does not appear on any center.
    """
    symbols = clean_sticker_string(text)
    if len(symbols) != STICKER_COUNT:
        raise ValueError(
            f"sticker string must have {STICKER_COUNT} symbols, got {len(symbols)}"
        )

    if all(ch in _DIGITS for ch in symbols):
        return StickerCube(tuple(_DIGITS[ch] for ch in symbols))

    # Map center symbol -> color code of its face
    symbol_to_code: Dict[str, int] = {}
    for code, idx in zip(COLOR_CODES, CENTER_INDEXES):
        center = symbols[idx]
        if center in symbol_to_code:
            raise ValueError(f"center symbol {center!r} used on more than one face")
        symbol_to_code[center] = code
    logger.debug("center symbols: %s", symbol_to_code)

    unknown = sorted({ch for ch in symbols if ch not in symbol_to_code})
    if unknown:
        raise ValueError(f"sticker symbols not found on any center: {unknown}")
    return StickerCube(tuple(symbol_to_code[ch] for ch in symbols))


def _symbol(code: int, symbols: Optional[Dict[int, str]]) -> str:
    if symbols is None:
        return str(code)
    return symbols.get(code, '?')


def format_sticker_cube(stickers: StickerCube, symbols: Optional[Dict[int, str]] = None) -> str:
    """Six space separated groups of nine symbols, in face order."""
    groups: List[str] = []
    for fi in range(len(FACE_ORDER)):
        groups.append(''.join(_symbol(c, symbols) for c in stickers.face(fi)))
    return ' '.join(groups)


def build_net_text(stickers: StickerCube, symbols: Optional[Dict[int, str]] = None) -> str:
    """Unfolded cube: U on top, then L F R B side by side, then D."""
    faces = {
        face: [_symbol(c, symbols) for c in stickers.face(fi)]
        for fi, face in enumerate(FACE_ORDER)
    }
    row = STICKERS_PER_FACE // 3
    pad = ' ' * (2 * row + 1)
    out: List[str] = []
    for r in range(row):
        out.append(pad + ' '.join(faces['U'][r * row:(r + 1) * row]))
    for r in range(row):
        out.append('  '.join(' '.join(faces[f][r * row:(r + 1) * row]) for f in 'LFRB'))
    for r in range(row):
        out.append(pad + ' '.join(faces['D'][r * row:(r + 1) * row]))
    return '\n'.join(out)
