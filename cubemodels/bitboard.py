"""A cube model that packs each face's eight outer stickers into one integer."""

from __future__ import annotations

from .base import Color, Face, RubiksCube

_MASK64 = (1 << 64) - 1
_BYTE = 0xFF

# Position of each sticker in a face's ring of eight bytes; 8 is the centre.
_RING = (
    (0, 1, 2),
    (7, 8, 3),
    (6, 5, 4),
)
_CENTRE = 8

_BYTE_COLORS = {1 << color.value: color for color in Color}

_SOLVED = tuple(
    sum((1 << face.value) << (8 * position) for position in range(8)) for face in Face
)

# For each face, four strips of ring positions as (face, positions).
# A clockwise quarter turn moves each strip's stickers into the strip before
# it; the first strip's stickers move into the last.
_STRIPS = {
    Face.UP: (
        (Face.LEFT, (0, 1, 2)),
        (Face.FRONT, (0, 1, 2)),
        (Face.RIGHT, (0, 1, 2)),
        (Face.BACK, (0, 1, 2)),
    ),
    Face.LEFT: (
        (Face.FRONT, (0, 7, 6)),
        (Face.UP, (0, 7, 6)),
        (Face.BACK, (4, 3, 2)),
        (Face.DOWN, (0, 7, 6)),
    ),
    Face.FRONT: (
        (Face.UP, (4, 5, 6)),
        (Face.LEFT, (2, 3, 4)),
        (Face.DOWN, (0, 1, 2)),
        (Face.RIGHT, (6, 7, 0)),
    ),
    Face.RIGHT: (
        (Face.UP, (2, 3, 4)),
        (Face.FRONT, (2, 3, 4)),
        (Face.DOWN, (2, 3, 4)),
        (Face.BACK, (7, 6, 0)),
    ),
    Face.BACK: (
        (Face.UP, (0, 1, 2)),
        (Face.RIGHT, (2, 3, 4)),
        (Face.DOWN, (4, 5, 6)),
        (Face.LEFT, (6, 7, 0)),
    ),
    Face.DOWN: (
        (Face.FRONT, (4, 5, 6)),
        (Face.LEFT, (4, 5, 6)),
        (Face.BACK, (4, 5, 6)),
        (Face.RIGHT, (4, 5, 6)),
    ),
}


class RubiksCubeBitBoard(RubiksCube):
    """Each face is a 64-bit integer of eight one-hot colour bytes.

    The bytes run clockwise round the face from the top-left sticker; the
    centre is never stored, since it always shows the face's own colour.
    """

    def __init__(self) -> None:
        self.cube = list(_SOLVED)

    def get_color(self, face, row, col) -> Color:
        position = _RING[row][col]
        if position == _CENTRE:
            return Color(int(face))
        value = self._sticker(int(face), position)
        try:
            return _BYTE_COLORS[value]
        except KeyError:
            raise ValueError(f"invalid sticker byte: {value:#x}") from None

    def is_solved(self) -> bool:
        return tuple(self.cube) == _SOLVED

    def _sticker(self, face: int, position: int) -> int:
        return (self.cube[face] >> (8 * position)) & _BYTE

    def _set_sticker(self, face: int, position: int, value: int) -> None:
        shift = 8 * position
        self.cube[face] = (self.cube[face] & ~(_BYTE << shift) & _MASK64) | (
            value << shift
        )

    def _rotate_face(self, face: Face) -> None:
        value = self.cube[face]
        self.cube[face] = ((value << 16) | (value >> 48)) & _MASK64

    def _turn(self, face: Face, times: int = 1) -> "RubiksCubeBitBoard":
        strips = _STRIPS[face]
        for _ in range(times):
            self._rotate_face(face)
            values = [
                [self._sticker(side, position) for position in positions]
                for side, positions in strips
            ]
            shifted = values[1:] + values[:1]
            for (side, positions), stickers in zip(strips, shifted):
                for position, value in zip(positions, stickers):
                    self._set_sticker(side, position, value)
        return self

    def u(self) -> "RubiksCubeBitBoard":
        return self._turn(Face.UP)

    def u_prime(self) -> "RubiksCubeBitBoard":
        return self._turn(Face.UP, 3)

    def u2(self) -> "RubiksCubeBitBoard":
        return self._turn(Face.UP, 2)

    def d(self) -> "RubiksCubeBitBoard":
        return self._turn(Face.DOWN)

    def d_prime(self) -> "RubiksCubeBitBoard":
        return self._turn(Face.DOWN, 3)

    def d2(self) -> "RubiksCubeBitBoard":
        return self._turn(Face.DOWN, 2)

    def l(self) -> "RubiksCubeBitBoard":  # noqa: E743
        return self._turn(Face.LEFT)

    def l_prime(self) -> "RubiksCubeBitBoard":
        return self._turn(Face.LEFT, 3)

    def l2(self) -> "RubiksCubeBitBoard":
        return self._turn(Face.LEFT, 2)

    def r(self) -> "RubiksCubeBitBoard":
        return self._turn(Face.RIGHT)

    def r_prime(self) -> "RubiksCubeBitBoard":
        return self._turn(Face.RIGHT, 3)

    def r2(self) -> "RubiksCubeBitBoard":
        return self._turn(Face.RIGHT, 2)

    def f(self) -> "RubiksCubeBitBoard":
        return self._turn(Face.FRONT)

    def f_prime(self) -> "RubiksCubeBitBoard":
        return self._turn(Face.FRONT, 3)

    def f2(self) -> "RubiksCubeBitBoard":
        return self._turn(Face.FRONT, 2)

    def b(self) -> "RubiksCubeBitBoard":
        return self._turn(Face.BACK)

    def b_prime(self) -> "RubiksCubeBitBoard":
        return self._turn(Face.BACK, 3)

    def b2(self) -> "RubiksCubeBitBoard":
        return self._turn(Face.BACK, 2)

    def copy(self) -> "RubiksCubeBitBoard":
        """Return an independent cube in the same state."""
        other = RubiksCubeBitBoard()
        other.cube = list(self.cube)
        return other

    def __eq__(self, other) -> bool:
        if not isinstance(other, RubiksCubeBitBoard):
            return NotImplemented
        return self.cube == other.cube

    def __hash__(self) -> int:
        result = 0
        for side in self.cube:
            result ^= side
        return result