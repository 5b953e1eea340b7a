"""Helpers for a cube stored as one flat sequence of 54 stickers."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

FACES = 6
SIDE = 3
STICKERS = FACES * SIDE * SIDE


def sticker_index(face, row, col) -> int:
    """Return the flat position of a sticker: face-major, then row, then column."""
    face = int(face)
    if not 0 <= face < FACES:
        raise ValueError(f"face out of range: {face}")
    if not 0 <= row < SIDE or not 0 <= col < SIDE:
        raise ValueError(f"sticker position out of range: ({row}, {col})")
    return face * SIDE * SIDE + row * SIDE + col


def rotate_face(stickers: MutableSequence, face) -> None:
    """Turn the nine stickers of one face a quarter turn clockwise, in place."""
    grid = [
        [stickers[sticker_index(face, row, col)] for col in range(SIDE)]
        for row in range(SIDE)
    ]
    for row, line in enumerate(grid):
        for col, value in enumerate(line):
            stickers[sticker_index(face, col, SIDE - 1 - row)] = value


def cycle_strips(stickers: MutableSequence, strips: Sequence[Sequence]) -> None:
    """Move each strip's stickers into the strip before it, in place.

    Each strip is a sequence of (face, row, col) positions, all strips of
    equal length; the first strip's stickers move into the last strip.
    """
    positions = [
        [sticker_index(face, row, col) for face, row, col in strip] for strip in strips
    ]
    if len({len(strip) for strip in positions}) > 1:
        raise ValueError("strips must all have the same length")
    values = [[stickers[i] for i in strip] for strip in positions]
    shifted = values[1:] + values[:1]
    for strip, moved in zip(positions, shifted):
        for index, value in zip(strip, moved):
            stickers[index] = value