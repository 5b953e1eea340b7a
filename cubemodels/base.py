"""Shared vocabulary and behaviour for every Rubik's cube model."""

from __future__ import annotations

import abc
import random
from enum import IntEnum


class Face(IntEnum):
    """The six faces, in storage order."""

    UP = 0
    LEFT = 1
    FRONT = 2
    RIGHT = 3
    BACK = 4
    DOWN = 5


class Color(IntEnum):
    """Sticker colours; a solved face has the colour with its own number."""

    WHITE = 0
    GREEN = 1
    RED = 2
    BLUE = 3
    ORANGE = 4
    YELLOW = 5


class Move(IntEnum):
    """The eighteen face turns, numbered as the random shuffle draws them."""

    U = 0
    U2 = 1
    U_PRIME = 2
    L = 3
    L2 = 4
    L_PRIME = 5
    F = 6
    F2 = 7
    F_PRIME = 8
    R = 9
    R2 = 10
    R_PRIME = 11
    B = 12
    B2 = 13
    B_PRIME = 14
    D = 15
    D2 = 16
    D_PRIME = 17


_COLOR_LETTERS = {
    Color.WHITE: "W",
    Color.GREEN: "G",
    Color.RED: "R",
    Color.BLUE: "B",
    Color.ORANGE: "O",
    Color.YELLOW: "Y",
}

_MOVE_LETTERS = {
    Move.F: "F",
    Move.F_PRIME: "FPRIME",
    Move.F2: "F2",
    Move.U: "U",
    Move.U_PRIME: "UPRIME",
    Move.U2: "U2",
    Move.D: "D",
    Move.D_PRIME: "DPRIME",
    Move.D2: "D2",
    Move.R: "R",
    Move.R_PRIME: "RPRIME",
    Move.R2: "R2",
    Move.L: "L",
    Move.L_PRIME: "LPRIME",
    Move.L2: "L2",
    Move.B: "B",
    Move.B_PRIME: "BPRIME",
    Move.B2: "B2",
}

_STICKER_ESCAPES = {
    "W": "\033[38;2;255;255;255mW\033[0m ",
    "G": "\033[38;2;0;255;0mG\033[0m ",
    "R": "\033[1;31mR\033[0m ",
    "B": "\033[1;34mB\033[0m ",
    "O": "\033[38;2;255;165;0mO\033[0m ",
    "Y": "\033[38;2;255;255;0mY\033[0m ",
}
_UNKNOWN_STICKER = "\033[0m? "

# Method performing each move, and the method that undoes it.
_MOVE_METHODS = {
    Move.U: ("u", "u_prime"),
    Move.U2: ("u2", "u2"),
    Move.U_PRIME: ("u_prime", "u"),
    Move.L: ("l", "l_prime"),
    Move.L2: ("l2", "l2"),
    Move.L_PRIME: ("l_prime", "l"),
    Move.F: ("f", "f_prime"),
    Move.F2: ("f2", "f2"),
    Move.F_PRIME: ("f_prime", "f"),
    Move.R: ("r", "r_prime"),
    Move.R2: ("r2", "r2"),
    Move.R_PRIME: ("r_prime", "r"),
    Move.B: ("b", "b_prime"),
    Move.B2: ("b2", "b2"),
    Move.B_PRIME: ("b_prime", "b"),
    Move.D: ("d", "d_prime"),
    Move.D2: ("d2", "d2"),
    Move.D_PRIME: ("d_prime", "d"),
}

# Position of each face in the unfolded net, as (block row, block column).
_NET = {
    (0, 1): Face.UP,
    (1, 0): Face.LEFT,
    (1, 1): Face.FRONT,
    (1, 2): Face.RIGHT,
    (1, 3): Face.BACK,
    (2, 1): Face.DOWN,
}

_SEPARATOR = "-" * 39

# Stickers of each corner: UFR, UFL, UBL, UBR, DFR, DFL, DBR, DBL.
_CORNERS = (
    ((Face.UP, 2, 2), (Face.FRONT, 0, 2), (Face.RIGHT, 0, 0)),
    ((Face.UP, 2, 0), (Face.FRONT, 0, 0), (Face.LEFT, 0, 2)),
    ((Face.UP, 0, 0), (Face.BACK, 0, 2), (Face.LEFT, 0, 0)),
    ((Face.UP, 0, 2), (Face.BACK, 0, 0), (Face.RIGHT, 0, 2)),
    ((Face.DOWN, 0, 2), (Face.FRONT, 2, 2), (Face.RIGHT, 2, 0)),
    ((Face.DOWN, 0, 0), (Face.FRONT, 2, 0), (Face.LEFT, 2, 2)),
    ((Face.DOWN, 2, 2), (Face.BACK, 2, 0), (Face.RIGHT, 2, 2)),
    ((Face.DOWN, 2, 0), (Face.BACK, 2, 2), (Face.LEFT, 2, 0)),
)


def color_letter(color) -> str:
    """Return the one-letter code of a colour, or '?' for an unknown one."""
    try:
        return _COLOR_LETTERS[Color(color)]
    except ValueError:
        return "?"


def move_letter(move) -> str:
    """Return the name of a move, or '?' for an unknown one."""
    try:
        return _MOVE_LETTERS[Move(move)]
    except ValueError:
        return "?"


def colored_sticker(letter: str) -> str:
    """Return a sticker letter wrapped in its terminal colour, plus a space."""
    return _STICKER_ESCAPES.get(letter, _UNKNOWN_STICKER)


class RubiksCube(abc.ABC):
    """A 3x3x3 cube: concrete models supply storage and the face turns."""

    @abc.abstractmethod
    def get_color(self, face: Face, row: int, col: int) -> Color:
        """Return the colour of one sticker."""

    def is_solved(self) -> bool:
        """True when every sticker shows its own face's colour."""
        return all(
            self.get_color(face, row, col) == Color(face.value)
            for face in Face
            for row in range(3)
            for col in range(3)
        )

    def render(self) -> str:
        """Return the unfolded net in terminal colours, ending with a rule."""
        lines = []
        for i in range(9):
            cells = []
            for j in range(12):
                face = _NET.get((i // 3, j // 3))
                if face is None:
                    cells.append("  ")
                else:
                    colour = self.get_color(face, i % 3, j % 3)
                    cells.append(colored_sticker(color_letter(colour)))
            lines.append("".join(cells))
        lines.append(_SEPARATOR)
        return "\n".join(lines) + "\n"

    def print(self) -> None:
        """Write the rendered net to standard output."""
        print(self.render(), end="")

    def move(self, move) -> "RubiksCube":
        """Perform a move and return the cube."""
        name, _ = _MOVE_METHODS[Move(move)]
        return getattr(self, name)()

    def invert(self, move) -> "RubiksCube":
        """Perform the move that undoes the given one and return the cube."""
        _, name = _MOVE_METHODS[Move(move)]
        return getattr(self, name)()

    def random_shuffle(self, times: int) -> list[Move]:
        """Perform random moves and return them in the order performed."""
        moves_made = []
        for _ in range(times):
            chosen = Move(random.randrange(len(Move)))
            moves_made.append(chosen)
            self.move(chosen)
        return moves_made

    def corner_color_string(self, index: int) -> str:
        """Return the three sticker letters of corner ``index`` (0-7)."""
        if not 0 <= index < len(_CORNERS):
            raise ValueError(f"corner index out of range: {index}")
        return "".join(
            color_letter(self.get_color(face, row, col))
            for face, row, col in _CORNERS[index]
        )

    def corner_index(self, index: int) -> int:
        """Identify the cubie at corner ``index`` by its colours as a 3-bit number."""
        corner = self.corner_color_string(index)
        result = 0
        if "Y" in corner:
            result |= 1 << 2
        if "O" in corner:
            result |= 1 << 1
        if "G" in corner:
            result |= 1 << 0
        return result

    def corner_orientation(self, index: int) -> int:
        """Return 0, 1 or 2: where the white or yellow sticker of a corner sits."""
        corner = self.corner_color_string(index)
        marker = next((c for c in corner if c in "WY"), None)
        if marker is None:
            raise ValueError(f"corner {index} has no white or yellow sticker")
        if corner[1] == marker:
            return 1
        if corner[2] == marker:
            return 2
        return 0

    @abc.abstractmethod
    def u(self) -> "RubiksCube":
        """Turn the up face clockwise."""

    @abc.abstractmethod
    def u_prime(self) -> "RubiksCube":
        """Turn the up face counterclockwise."""

    @abc.abstractmethod
    def u2(self) -> "RubiksCube":
        """Turn the up face half a turn."""

    @abc.abstractmethod
    def d(self) -> "RubiksCube":
        """Turn the down face clockwise."""

    @abc.abstractmethod
    def d_prime(self) -> "RubiksCube":
        """Turn the down face counterclockwise."""

    @abc.abstractmethod
    def d2(self) -> "RubiksCube":
        """Turn the down face half a turn."""

    @abc.abstractmethod
    def l(self) -> "RubiksCube":  # noqa: E743
        """Turn the left face clockwise."""

    @abc.abstractmethod
    def l_prime(self) -> "RubiksCube":
        """Turn the left face counterclockwise."""

    @abc.abstractmethod
    def l2(self) -> "RubiksCube":
        """Turn the left face half a turn."""

    @abc.abstractmethod
    def r(self) -> "RubiksCube":
        """Turn the right face clockwise."""

    @abc.abstractmethod
    def r_prime(self) -> "RubiksCube":
        """Turn the right face counterclockwise."""

    @abc.abstractmethod
    def r2(self) -> "RubiksCube":
        """Turn the right face half a turn."""

    @abc.abstractmethod
    def f(self) -> "RubiksCube":
        """Turn the front face clockwise."""

    @abc.abstractmethod
    def f_prime(self) -> "RubiksCube":
        """Turn the front face counterclockwise."""

    @abc.abstractmethod
    def f2(self) -> "RubiksCube":
        """Turn the front face half a turn."""

    @abc.abstractmethod
    def b(self) -> "RubiksCube":
        """Turn the back face clockwise."""

    @abc.abstractmethod
    def b_prime(self) -> "RubiksCube":
        """Turn the back face counterclockwise."""

    @abc.abstractmethod
    def b2(self) -> "RubiksCube":
        """Turn the back face half a turn."""