"""A cube model that keeps its stickers as one flat list of 54 colour letters."""

from __future__ import annotations

from .base import Color, Face, RubiksCube, color_letter
from .flat_layout import STICKERS, cycle_strips, rotate_face

_LETTER_COLORS = {color_letter(color): color for color in Color}

_SOLVED = tuple(color_letter(Color(face.value)) for face in Face for _ in range(9))


def _strip(face: Face, positions) -> tuple:
    return tuple((face, row, col) for row, col in positions)


def _row(face: Face, row: int, reverse: bool = False) -> tuple:
    cols = (2, 1, 0) if reverse else (0, 1, 2)
    return _strip(face, ((row, col) for col in cols))


def _column(face: Face, col: int, reverse: bool = False) -> tuple:
    rows = (2, 1, 0) if reverse else (0, 1, 2)
    return _strip(face, ((row, col) for row in rows))


# One quarter step per face: the face turns clockwise, then each strip takes
# the stickers of the strip after it and the last strip takes the first's.
_STEPS = {
    Face.FRONT: (
        _column(Face.RIGHT, 0),
        _row(Face.UP, 2),
        _column(Face.LEFT, 2, reverse=True),
        _row(Face.DOWN, 0, reverse=True),
    ),
    Face.UP: (
        _row(Face.LEFT, 0),
        _row(Face.FRONT, 0),
        _row(Face.RIGHT, 0),
        _row(Face.BACK, 0),
    ),
    Face.DOWN: (
        _row(Face.LEFT, 2),
        _row(Face.FRONT, 2),
        _row(Face.RIGHT, 2),
        _row(Face.BACK, 2),
    ),
    Face.BACK: (
        _row(Face.UP, 0),
        _column(Face.RIGHT, 2),
        _row(Face.DOWN, 2, reverse=True),
        _column(Face.LEFT, 0, reverse=True),
    ),
    Face.RIGHT: (
        _column(Face.UP, 2),
        _column(Face.FRONT, 2),
        _column(Face.DOWN, 2),
        _column(Face.BACK, 0, reverse=True),
    ),
    Face.LEFT: (
        _column(Face.DOWN, 0),
        _column(Face.FRONT, 0),
        _column(Face.UP, 0),
        _column(Face.BACK, 2, reverse=True),
    ),
}


class RubiksCube1D(RubiksCube):
    """Stickers stored face after face, row after row, in one list."""

    def __init__(self) -> None:
        self.cube = list(_SOLVED)

    def get_color(self, face, row, col) -> Color:
        letter = self.cube[int(face) * 9 + row * 3 + col]
        try:
            return _LETTER_COLORS[letter]
        except KeyError:
            raise ValueError(f"unknown sticker letter: {letter!r}") from None

    def is_solved(self) -> bool:
        return tuple(self.cube) == _SOLVED

    def _turn(self, face: Face, times: int = 1) -> "RubiksCube1D":
        strips = _STEPS[face]
        for _ in range(times):
            rotate_face(self.cube, face)
            cycle_strips(self.cube, strips)
        return self

    def f(self) -> "RubiksCube1D":
        return self._turn(Face.FRONT)

    def f_prime(self) -> "RubiksCube1D":
        return self._turn(Face.FRONT, 3)

    def f2(self) -> "RubiksCube1D":
        return self._turn(Face.FRONT, 2)

    def u(self) -> "RubiksCube1D":
        return self._turn(Face.UP)

    def u_prime(self) -> "RubiksCube1D":
        return self._turn(Face.UP, 3)

    def u2(self) -> "RubiksCube1D":
        return self._turn(Face.UP, 2)

    def d(self) -> "RubiksCube1D":
        return self._turn(Face.DOWN, 3)

    def d_prime(self) -> "RubiksCube1D":
        return self._turn(Face.DOWN)

    def d2(self) -> "RubiksCube1D":
        return self._turn(Face.DOWN, 2)

    def b(self) -> "RubiksCube1D":
        return self._turn(Face.BACK)

    def b_prime(self) -> "RubiksCube1D":
        return self._turn(Face.BACK, 3)

    def b2(self) -> "RubiksCube1D":
        return self._turn(Face.BACK, 2)

    def r(self) -> "RubiksCube1D":
        return self._turn(Face.RIGHT)

    def r_prime(self) -> "RubiksCube1D":
        return self._turn(Face.RIGHT, 3)

    def r2(self) -> "RubiksCube1D":
        return self._turn(Face.RIGHT, 2)

    def l(self) -> "RubiksCube1D":  # noqa: E743
        return self._turn(Face.LEFT)

    def l_prime(self) -> "RubiksCube1D":
        return self._turn(Face.LEFT, 3)

    def l2(self) -> "RubiksCube1D":
        return self._turn(Face.LEFT, 2)

    def copy(self) -> "RubiksCube1D":
        """Return an independent cube in the same state."""
        other = RubiksCube1D()
        other.cube = list(self.cube)
        return other

    def __eq__(self, other) -> bool:
        if not isinstance(other, RubiksCube1D):
            return NotImplemented
        return self.cube == other.cube

    def __hash__(self) -> int:
        return hash("".join(self.cube))


assert len(_SOLVED) == STICKERS