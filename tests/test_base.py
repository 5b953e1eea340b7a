import pytest

from cubemodels.base import (
    Color,
    Face,
    Move,
    RubiksCube,
    color_letter,
    colored_sticker,
    move_letter,
)


def _recorder(name):
    def method(self):
        self.log.append(name)
        return self

    return method


class StickerCube(RubiksCube):
    """Stickers kept in a dict; turns are only recorded."""

    def __init__(self):
        self.log = []
        self.stickers = {
            (face, row, col): Color(face.value)
            for face in Face
            for row in range(3)
            for col in range(3)
        }

    def get_color(self, face, row, col):
        return self.stickers[(face, row, col)]

    u = _recorder("u")
    u_prime = _recorder("u_prime")
    u2 = _recorder("u2")
    d = _recorder("d")
    d_prime = _recorder("d_prime")
    d2 = _recorder("d2")
    l = _recorder("l")  # noqa: E741
    l_prime = _recorder("l_prime")
    l2 = _recorder("l2")
    r = _recorder("r")
    r_prime = _recorder("r_prime")
    r2 = _recorder("r2")
    f = _recorder("f")
    f_prime = _recorder("f_prime")
    f2 = _recorder("f2")
    b = _recorder("b")
    b_prime = _recorder("b_prime")
    b2 = _recorder("b2")


MOVE_TABLE = [
    (Move.U, "u", "u_prime"),
    (Move.U2, "u2", "u2"),
    (Move.U_PRIME, "u_prime", "u"),
    (Move.L, "l", "l_prime"),
    (Move.L2, "l2", "l2"),
    (Move.L_PRIME, "l_prime", "l"),
    (Move.F, "f", "f_prime"),
    (Move.F2, "f2", "f2"),
    (Move.F_PRIME, "f_prime", "f"),
    (Move.R, "r", "r_prime"),
    (Move.R2, "r2", "r2"),
    (Move.R_PRIME, "r_prime", "r"),
    (Move.B, "b", "b_prime"),
    (Move.B2, "b2", "b2"),
    (Move.B_PRIME, "b_prime", "b"),
    (Move.D, "d", "d_prime"),
    (Move.D2, "d2", "d2"),
    (Move.D_PRIME, "d_prime", "d"),
]


def test_color_letters():
    letters = "".join(color_letter(c) for c in Color)
    assert letters == "WGRBOY"


def test_color_letter_unknown():
    assert color_letter(42) == "?"


@pytest.mark.parametrize(
    "move, letter",
    [
        (Move.F, "F"),
        (Move.F_PRIME, "FPRIME"),
        (Move.U2, "U2"),
        (Move.D_PRIME, "DPRIME"),
        (Move.B2, "B2"),
    ],
)
def test_move_letter(move, letter):
    assert move_letter(move) == letter


def test_move_letter_unknown():
    assert move_letter(99) == "?"


def test_move_letters_are_unique():
    assert len({move_letter(m) for m in Move}) == 18


def test_colored_sticker_values():
    assert colored_sticker("R") == "\033[1;31mR\033[0m "
    assert colored_sticker("O") == "\033[38;2;255;165;0mO\033[0m "
    assert colored_sticker("x") == "\033[0m? "


def test_base_is_abstract():
    with pytest.raises(TypeError):
        RubiksCube()


@pytest.mark.parametrize("move, forward, backward", MOVE_TABLE)
def test_move_dispatch(move, forward, backward):
    cube = StickerCube()
    assert RubiksCube.move(cube, move) is cube
    assert RubiksCube.invert(cube, move) is cube
    assert cube.log == [forward, backward]


def test_move_accepts_integer():
    cube = StickerCube()
    RubiksCube.move(cube, 8)
    assert cube.log == ["f_prime"]


def test_move_rejects_unknown():
    cube = StickerCube()
    with pytest.raises(ValueError):
        RubiksCube.move(cube, 18)


def test_random_shuffle_records_moves():
    cube = StickerCube()
    moves = RubiksCube.random_shuffle(cube, 25)
    assert len(moves) == 25
    names = {m: fwd for m, fwd, _ in MOVE_TABLE}
    assert cube.log == [names[m] for m in moves]
    assert all(isinstance(m, Move) for m in moves)


def test_random_shuffle_zero_and_negative():
    cube = StickerCube()
    assert RubiksCube.random_shuffle(cube, 0) == []
    assert RubiksCube.random_shuffle(cube, -3) == []
    assert cube.log == []


def test_solved_cube_is_solved():
    assert RubiksCube.is_solved(StickerCube()) is True


def test_modified_cube_not_solved():
    cube = StickerCube()
    cube.stickers[(Face.FRONT, 1, 1)] = Color.WHITE
    assert RubiksCube.is_solved(cube) is False


def test_render_layout():
    text = StickerCube().render()
    lines = text.split("\n")
    assert lines[-1] == ""
    assert len(lines) == 11
    assert lines[9] == "---------------------------------------"
    assert lines[0].startswith("      ")
    for letter in "WGRBOY":
        assert text.count(colored_sticker(letter)) == 9


def test_render_row_order():
    text = StickerCube().render()
    middle = text.split("\n")[4]
    expected = "".join(colored_sticker(c) * 3 for c in "GRBO")
    assert middle == expected


def test_print_writes_render(capsys):
    cube = StickerCube()
    RubiksCube.print(cube)
    assert capsys.readouterr().out == RubiksCube.render(cube)


def test_corner_color_string_solved():
    cube = StickerCube()
    assert RubiksCube.corner_color_string(cube, 0) == "WRB"


def test_corner_indices_of_solved_cube_are_distinct():
    cube = StickerCube()
    indices = {RubiksCube.corner_index(cube, i) for i in range(8)}
    assert indices == set(range(8))


def test_corner_orientation_solved():
    cube = StickerCube()
    orientations = [RubiksCube.corner_orientation(cube, i) for i in range(8)]
    assert orientations == [0] * 8


def test_corner_orientation_twisted():
    cube = StickerCube()
    cube.stickers[(Face.UP, 2, 2)] = Color.RED
    cube.stickers[(Face.FRONT, 0, 2)] = Color.WHITE
    assert RubiksCube.corner_orientation(cube, 0) == 1
    cube.stickers[(Face.FRONT, 0, 2)] = Color.BLUE
    cube.stickers[(Face.RIGHT, 0, 0)] = Color.WHITE
    assert RubiksCube.corner_orientation(cube, 0) == 2


def test_corner_index_ignores_sticker_order():
    cube = StickerCube()
    before = RubiksCube.corner_index(cube, 7)
    cube.stickers[(Face.DOWN, 2, 0)] = Color.GREEN
    cube.stickers[(Face.LEFT, 2, 0)] = Color.YELLOW
    assert RubiksCube.corner_index(cube, 7) == before


def test_corner_orientation_without_marker_raises():
    cube = StickerCube()
    cube.stickers[(Face.UP, 2, 2)] = Color.GREEN
    with pytest.raises(ValueError):
        RubiksCube.corner_orientation(cube, 0)


@pytest.mark.parametrize("index", [-1, 8])
def test_corner_index_out_of_range(index):
    cube = StickerCube()
    with pytest.raises(ValueError):
        RubiksCube.corner_color_string(cube, index)