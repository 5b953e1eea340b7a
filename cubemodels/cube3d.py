"""A cube model that keeps its stickers as six 3x3 grids of colour letters."""

from __future__ import annotations

from .base import Color, Face, RubiksCube, color_letter

_LETTER_COLORS = {color_letter(color): color for color in Color}

# For each face, four strips of three stickers as (face, row, col).
# A quarter turn moves each strip's stickers into the strip before it;
# the first strip's stickers move into the last.
_STRIPS = {
    Face.FRONT: (
        tuple((Face.RIGHT, i, 0) for i in range(3)),
        tuple((Face.UP, 2, i) for i in range(3)),
        tuple((Face.LEFT, 2 - i, 2) for i in range(3)),
        tuple((Face.DOWN, 0, 2 - i) for i in range(3)),
    ),
    Face.UP: (
        tuple((Face.LEFT, 0, i) for i in range(3)),
        tuple((Face.FRONT, 0, i) for i in range(3)),
        tuple((Face.RIGHT, 0, i) for i in range(3)),
        tuple((Face.BACK, 0, i) for i in range(3)),
    ),
    Face.DOWN: (
        tuple((Face.LEFT, 2, i) for i in range(3)),
        tuple((Face.BACK, 2, i) for i in range(3)),
        tuple((Face.RIGHT, 2, i) for i in range(3)),
        tuple((Face.FRONT, 2, i) for i in range(3)),
    ),
    Face.BACK: (
        tuple((Face.UP, 0, i) for i in range(3)),
        tuple((Face.LEFT, 2 - i, 0) for i in range(3)),
        tuple((Face.DOWN, 2, 2 - i) for i in range(3)),
        tuple((Face.RIGHT, i, 2) for i in range(3)),
    ),
    Face.RIGHT: (
        tuple((Face.UP, i, 2) for i in range(3)),
        tuple((Face.FRONT, i, 2) for i in range(3)),
        tuple((Face.DOWN, i, 2) for i in range(3)),
        tuple((Face.BACK, 2 - i, 0) for i in range(3)),
    ),
    Face.LEFT: (
        tuple((Face.DOWN, i, 0) for i in range(3)),
        tuple((Face.FRONT, i, 0) for i in range(3)),
        tuple((Face.UP, i, 0) for i in range(3)),
        tuple((Face.BACK, 2 - i, 2) for i in range(3)),
    ),
}


class RubiksCube3D(RubiksCube):
    """Stickers stored as ``cube[face][row][col]`` colour letters."""

    def __init__(self) -> None:
        self.cube = [
            [[color_letter(Color(face.value)) for _ in range(3)] for _ in range(3)]
            for face in Face
        ]

    def get_color(self, face, row, col) -> Color:
        letter = self.cube[int(face)][row][col]
        try:
            return _LETTER_COLORS[letter]
        except KeyError:
            raise ValueError(f"unknown sticker letter: {letter!r}") from None

    def is_solved(self) -> bool:
        return all(
            letter == color_letter(Color(face.value))
            for face in Face
            for row in self.cube[face]
            for letter in row
        )

    def _rotate_face(self, face: Face) -> None:
        grid = self.cube[face]
        self.cube[face] = [list(column) for column in zip(*reversed(grid))]

    def _turn(self, face: Face, times: int = 1) -> "RubiksCube3D":
        strips = _STRIPS[face]
        for _ in range(times):
            self._rotate_face(face)
            values = [
                [self.cube[f][r][c] for f, r, c in strip] for strip in strips
            ]
            shifted = values[1:] + values[:1]
            for strip, letters in zip(strips, shifted):
                for (f, r, c), letter in zip(strip, letters):
                    self.cube[f][r][c] = letter
        return self

    def f(self) -> "RubiksCube3D":
        return self._turn(Face.FRONT)

    def f_prime(self) -> "RubiksCube3D":
        return self._turn(Face.FRONT, 3)

    def f2(self) -> "RubiksCube3D":
        return self._turn(Face.FRONT, 2)

    def u(self) -> "RubiksCube3D":
        return self._turn(Face.UP)

    def u_prime(self) -> "RubiksCube3D":
        return self._turn(Face.UP, 3)

    def u2(self) -> "RubiksCube3D":
        return self._turn(Face.UP, 2)

    def d(self) -> "RubiksCube3D":
        return self._turn(Face.DOWN, 3)

    def d_prime(self) -> "RubiksCube3D":
        return self._turn(Face.DOWN)

    def d2(self) -> "RubiksCube3D":
        return self._turn(Face.DOWN, 2)

    def b(self) -> "RubiksCube3D":
        return self._turn(Face.BACK)

    def b_prime(self) -> "RubiksCube3D":
        return self._turn(Face.BACK, 3)

    def b2(self) -> "RubiksCube3D":
        return self._turn(Face.BACK, 2)

    def r(self) -> "RubiksCube3D":
        return self._turn(Face.RIGHT)

    def r_prime(self) -> "RubiksCube3D":
        return self._turn(Face.RIGHT, 3)

    def r2(self) -> "RubiksCube3D":
        return self._turn(Face.RIGHT, 2)

    def l(self) -> "RubiksCube3D":  # noqa: E743
        return self._turn(Face.LEFT)

    def l_prime(self) -> "RubiksCube3D":
        return self._turn(Face.LEFT, 3)

    def l2(self) -> "RubiksCube3D":
        return self._turn(Face.LEFT, 2)

    def copy(self) -> "RubiksCube3D":
        """Return an independent cube in the same state."""
        other = RubiksCube3D()
        other.cube = [[list(row) for row in grid] for grid in self.cube]
        return other

    def _key(self) -> str:
        return "".join(letter for grid in self.cube for row in grid for letter in row)

    def __eq__(self, other) -> bool:
        if not isinstance(other, RubiksCube3D):
            return NotImplemented
        return self.cube == other.cube

    def __hash__(self) -> int:
        return hash(self._key())