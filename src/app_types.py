from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from config import AXIS_Y, COLOR_CODES, STICKER_COUNT, STICKERS_PER_FACE


@dataclass(frozen=True)
class Corner:
    piece: int
    orientation: int   # axis (0=x, 1=y, 2=z) the piece's U/D sticker faces


@dataclass(frozen=True)
class Edge:
    piece: int
    flip: bool = False


@dataclass(frozen=True)
class CubieCube:
    """Cube on the cubie level: what piece sits in every slot and how it is turned."""
    corners: Tuple[Corner, ...]
    edges: Tuple[Edge, ...]

    def __post_init__(self):
        object.__setattr__(self, 'corners', tuple(self.corners))
        object.__setattr__(self, 'edges', tuple(self.edges))
        if len(self.corners) != 8:
            raise ValueError(f"CubieCube needs 8 corners, got {len(self.corners)}")
        if len(self.edges) != 12:
            raise ValueError(f"CubieCube needs 12 edges, got {len(self.edges)}")

    @classmethod
    def solved(cls) -> "CubieCube":
        return cls(
            corners=tuple(Corner(i, AXIS_Y) for i in range(8)),
            edges=tuple(Edge(i, False) for i in range(12)),
        )

    @classmethod
    def from_lists(cls, cp: Sequence[int], co: Sequence[int],
                   ep: Sequence[int], eo: Sequence[int]) -> "CubieCube":
        """Build from separate permutation/orientation lists (cp, co, ep, eo)."""
        return cls(
            corners=tuple(Corner(p, o) for p, o in zip(cp, co)),
            edges=tuple(Edge(p, bool(f)) for p, f in zip(ep, eo)),
        )

    @property
    def cp(self) -> Tuple[int, ...]:
        return tuple(c.piece for c in self.corners)

    @property
    def co(self) -> Tuple[int, ...]:
        return tuple(c.orientation for c in self.corners)

    @property
    def ep(self) -> Tuple[int, ...]:
        return tuple(e.piece for e in self.edges)

    @property
    def eo(self) -> Tuple[int, ...]:
        return tuple(int(e.flip) for e in self.edges)


@dataclass(frozen=True)
class StickerCube:
    """Cube on the facelet level: one color code per sticker position (54)."""
    stickers: Tuple[int, ...]

    def __post_init__(self):
        object.__setattr__(self, 'stickers', tuple(self.stickers))
        if len(self.stickers) != STICKER_COUNT:
            raise ValueError(
                f"StickerCube needs {STICKER_COUNT} stickers, got {len(self.stickers)}"
            )

    @classmethod
    def solved(cls) -> "StickerCube":
        return cls(tuple(code for code in COLOR_CODES for _ in range(STICKERS_PER_FACE)))

    def __getitem__(self, idx):
        return self.stickers[idx]

    def __len__(self) -> int:
        return len(self.stickers)

    def __iter__(self):
        return iter(self.stickers)

    def replace(self, changes: Iterable[Tuple[int, int]]) -> "StickerCube":
        """Return a copy with (index, color) pairs overwritten."""
        stickers = list(self.stickers)
        for idx, color in changes:
            stickers[idx] = color
        return StickerCube(tuple(stickers))

    def face(self, face_idx: int) -> Tuple[int, ...]:
        base = face_idx * STICKERS_PER_FACE
        return self.stickers[base:base + STICKERS_PER_FACE]


# ---------------- Conversion errors ----------------

class ConversionError(ValueError):
    """A sticker cube that cannot be read as a cubie cube."""

    kind = "piece"

    def __init__(self, colors: Sequence[int], slot: Optional[int] = None):
        self.colors: Tuple[int, ...] = tuple(colors)
        self.slot = slot
        super().__init__(self._format())

    def _format(self) -> str:
        msg = f"unrecognized {self.kind}: " + ",".join(str(c) for c in self.colors)
        if self.slot is not None:
            msg += f" (slot {self.slot})"
        return msg


class UnrecognizedCorner(ConversionError):
    kind = "corner"


class UnrecognizedEdge(ConversionError):
    kind = "edge"
