"""config.py — project configuration
------------------------------------

Constants shared by the conversion engine, the move engine and the command
line tool. Everything here is plain module-level data evaluated once at
import time; nothing is read from the environment.

Notes
- The sticker face order below is the one used by the 54-sticker arrays
  (`StickerCube`). It is NOT the kociemba U,R,F,D,L,B order.
- Color codes are small integers; only equality matters.

-------------------------------------------------------------------------------

Copyright (c) 2025 Facundo Gauna & Ulises Carnevale. Licensed under MIT License.
"""

from typing import Dict, List, Tuple

# ---------------- Sticker layout ----------------

STICKERS_PER_FACE: int = 9
STICKER_COUNT: int = 54

# Face letters in sticker-array order. Face f owns indexes 9*f .. 9*f+8,
# stored row-major as seen when looking straight at the face.
FACE_ORDER: List[str] = ['U', 'D', 'F', 'B', 'R', 'L']

# ---------------- Color codes ----------------

# Color code k is the color of face FACE_ORDER[k-1] on a solved cube.
COLOR_U: int = 1
COLOR_D: int = 2
COLOR_F: int = 3
COLOR_B: int = 4
COLOR_R: int = 5
COLOR_L: int = 6

COLOR_CODES: Tuple[int, ...] = (COLOR_U, COLOR_D, COLOR_F, COLOR_B, COLOR_R, COLOR_L)

# Colors on each axis. The U/D pair is the reference for corner orientation
# and, together with the F/B pair, for edge orientation.
UD_COLORS: Tuple[int, int] = (COLOR_U, COLOR_D)
FB_COLORS: Tuple[int, int] = (COLOR_F, COLOR_B)

# Default display symbols (western color scheme, white on top, green in front).
COLOR_SYMBOLS: Dict[int, str] = {
    COLOR_U: 'W',
    COLOR_D: 'Y',
    COLOR_F: 'G',
    COLOR_B: 'B',
    COLOR_R: 'R',
    COLOR_L: 'O',
}

# ---------------- Axes ----------------

# Axis numbers. Corner orientation is expressed as one of these.
AXIS_X: int = 0   # L -> R
AXIS_Y: int = 1   # D -> U
AXIS_Z: int = 2   # B -> F

# Face letter -> (axis, sign of the outward normal along that axis)
FACE_AXIS: Dict[str, Tuple[int, int]] = {
    'U': (AXIS_Y, 1),
    'D': (AXIS_Y, -1),
    'F': (AXIS_Z, 1),
    'B': (AXIS_Z, -1),
    'R': (AXIS_X, 1),
    'L': (AXIS_X, -1),
}

# ---------------- Moves ----------------

MOVE_FACES: str = 'UDFBRL'
# suffix -> number of clockwise quarter turns
MOVE_SUFFIXES: Dict[str, int] = {'': 1, '2': 2, "'": 3, 'i': 3}
SCRAMBLE_LENGTH: int = 25

# ---------------- Logging ----------------

LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
