# cubemodels

This package has three models of a 3x3 Rubik's Cube. All three share one interface:

- `RubiksCube3D` (`cubemodels.cube3d`) keeps six 3x3 grids of colour letters.
- `RubiksCube1D` (`cubemodels.cube1d`) keeps one flat list of 54 colour letters.
- `RubiksCubeBitBoard` (`cubemodels.bitboard`) keeps one 64-bit integer per face. Each of
  the eight outer stickers is a one-hot colour byte. The centre is not stored.

Each model derives from the abstract class `RubiksCube` in `cubemodels.base`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from cubemodels.base import Move
from cubemodels.cube3d import RubiksCube3D

cube = RubiksCube3D()
cube.r().u().r_prime().u_prime()
print(cube.is_solved())        # False

moves = cube.random_shuffle(20)
for move in reversed(moves):
    cube.invert(move)

cube.print()                   # unfolded net with ANSI colours
```

### Turns

Every model has these 18 turn methods:

- `u`, `u_prime`, `u2`
- `d`, `d_prime`, `d2`
- `l`, `l_prime`, `l2`
- `r`, `r_prime`, `r2`
- `f`, `f_prime`, `f2`
- `b`, `b_prime`, `b2`

Each turn changes the cube in place and returns the cube itself, so you can chain turns.

- `move(Move.X)` performs the turn named by a `Move` member.
- `invert(Move.X)` performs the turn that undoes it.
- `random_shuffle(times)` performs `times` random moves and returns them as a list of `Move`, in the order they were performed.

The `Move` members are numbered 0 to 17, in this order:

`U, U2, U_PRIME, L, L2, L_PRIME, F, F2, F_PRIME, R, R2, R_PRIME, B, B2, B_PRIME, D, D2, D_PRIME`

Each model's own turns are consistent with each other: a prime turn undoes the plain turn, and a double turn is two plain turns. The models keep their stickers in different layouts. Do not assume that one move sequence gives identical sticker colours in every model.

### Inspecting the cube

- `get_color(face, row, col)` returns the `Color` of a sticker on a `Face`.
- `is_solved()` is true when every sticker shows its own face's colour.
- `render()` returns the unfolded net as a string. It uses ANSI colours and ends with a rule of dashes. `print()` writes that string to standard output.
- `corner_color_string(i)` returns the three sticker letters of corner slot `i`, from 0 to 7. The slots are UFR, UFL, UBL, UBR, DFR, DFL, DBR and DBL. An index outside 0–7 raises `ValueError`.
- `corner_index(i)` identifies the corner piece by its colours as a 3-bit number:
  - bit 2 is set for yellow;
  - bit 1 is set for orange;
  - bit 0 is set for green.
- `corner_orientation(i)` returns 0, 1 or 2, according to which sticker of the corner shows white or yellow. It raises `ValueError` if the corner has neither colour.

`cubemodels.base` also provides these functions:

- `color_letter(color)` returns the one-letter code of a colour, for example `"W"`.
- `move_letter(move)` returns the name of a move, for example `"UPRIME"`.
- `colored_sticker(letter)` returns a letter wrapped in its terminal colour.

Both `color_letter` and `move_letter` return `"?"` for a value they do not know.

### Copies, equality and hashing

All three models support `copy()`, `==` and `hash()`, so you can keep cube states in sets and dicts. Equality only holds between cubes of the same model.

### Flat layout helpers

`cubemodels.flat_layout` holds the helpers behind the flat model:

- `sticker_index(face, row, col)` returns a sticker's position in the flat list. It raises `ValueError` when the position is out of range.
- `rotate_face(stickers, face)` turns one face's nine stickers clockwise, in place.
- `cycle_strips(stickers, strips)` moves each strip of stickers into the strip before it, in place. The first strip's stickers move into the last strip.

## What this package does not do

- It has no solver.
- It does not parse move notation from text.
- It provides no command-line program. It is a library to import.