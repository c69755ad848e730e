import random

import pytest

from cubesolve.cube import (
    Color,
    Face,
    Move,
    RubiksCube,
    color_letter,
    move_name,
)

_LETTER_TO_COLOR = {color_letter(c): c for c in Color}


class _FaceletCube(RubiksCube):
    """Minimal sticker-array cube used to exercise the shared behaviour."""

    def __init__(self):
        self.cube = [
            [[color_letter(Color(face)) for _ in range(3)] for _ in range(3)]
            for face in range(6)
        ]

    def __eq__(self, other):
        return isinstance(other, _FaceletCube) and self.cube == other.cube

    def get_color(self, face, row, col):
        return _LETTER_TO_COLOR[self.cube[Face(face).value][row][col]]

    def is_solved(self):
        return all(
            letter == color_letter(Color(face))
            for face in range(6)
            for row in self.cube[face]
            for letter in row
        )

    def _rotate_face(self, face):
        grid = self.cube[face]
        self.cube[face] = [list(row) for row in zip(*reversed(grid))]

    def _cycle(self, *strips):
        values = [[self.cube[f][r][c] for f, r, c in strip] for strip in strips]
        for target, source in zip(strips, values[1:] + values[:1]):
            for (f, r, c), letter in zip(target, source):
                self.cube[f][r][c] = letter

    def u(self):
        self._rotate_face(0)
        self._cycle(
            [(4, 0, 2 - i) for i in range(3)],
            [(1, 0, 2 - i) for i in range(3)],
            [(2, 0, 2 - i) for i in range(3)],
            [(3, 0, 2 - i) for i in range(3)],
        )
        return self

    def l(self):  # noqa: E743
        self._rotate_face(1)
        self._cycle(
            [(0, i, 0) for i in range(3)],
            [(4, 2 - i, 2) for i in range(3)],
            [(5, i, 0) for i in range(3)],
            [(2, i, 0) for i in range(3)],
        )
        return self

    def f(self):
        self._rotate_face(2)
        self._cycle(
            [(0, 2, i) for i in range(3)],
            [(1, 2 - i, 2) for i in range(3)],
            [(5, 0, 2 - i) for i in range(3)],
            [(3, i, 0) for i in range(3)],
        )
        return self

    def r(self):
        self._rotate_face(3)
        self._cycle(
            [(0, 2 - i, 2) for i in range(3)],
            [(2, 2 - i, 2) for i in range(3)],
            [(5, 2 - i, 2) for i in range(3)],
            [(4, i, 0) for i in range(3)],
        )
        return self

    def b(self):
        self._rotate_face(4)
        self._cycle(
            [(0, 0, 2 - i) for i in range(3)],
            [(3, 2 - i, 2) for i in range(3)],
            [(5, 2, i) for i in range(3)],
            [(1, i, 0) for i in range(3)],
        )
        return self

    def d(self):
        self._rotate_face(5)
        self._cycle(
            [(2, 2, i) for i in range(3)],
            [(1, 2, i) for i in range(3)],
            [(4, 2, i) for i in range(3)],
            [(3, 2, i) for i in range(3)],
        )
        return self


def test_color_letters():
    letters = [color_letter(c) for c in Color]
    assert letters == ["W", "G", "R", "B", "O", "Y"]


def test_move_names_follow_notation():
    assert move_name(Move.L) == "L"
    assert move_name(Move.RPRIME) == "R'"
    assert move_name(Move.B2) == "B2"
    assert len({move_name(m) for m in Move}) == 18


def test_move_values_are_contiguous():
    assert [m.value for m in Move] == list(range(18))
    assert Move(0) is Move.L and Move(17) is Move.B2


def test_abstract_cube_cannot_be_instantiated():
    with pytest.raises(TypeError):
        RubiksCube()


def test_new_cube_is_solved():
    cube = _FaceletCube()
    assert cube.is_solved()
    assert color_letter(cube.get_color(Face.FRONT, 1, 1)) == "R"
    assert RubiksCube.corner_color_string(cube, 1) == "WRG"


@pytest.mark.parametrize("move", list(Move))
def test_move_then_invert_restores(move):
    cube = _FaceletCube()
    RubiksCube.move(cube, move)
    assert not cube.is_solved()
    result = RubiksCube.invert(cube, move)
    assert result is cube
    assert cube.is_solved()


@pytest.mark.parametrize(
    "quarter, prime_move, double_move",
    [
        (Move.F, Move.FPRIME, Move.F2),
        (Move.U, Move.UPRIME, Move.U2),
        (Move.L, Move.LPRIME, Move.L2),
        (Move.R, Move.RPRIME, Move.R2),
        (Move.D, Move.DPRIME, Move.D2),
        (Move.B, Move.BPRIME, Move.B2),
    ],
)
def test_prime_and_double_compose(quarter, prime_move, double_move):
    prime = _FaceletCube()
    RubiksCube.move(prime, prime_move)
    thrice = _FaceletCube()
    for _ in range(3):
        RubiksCube.move(thrice, quarter)
    assert prime == thrice

    double = _FaceletCube()
    RubiksCube.move(double, double_move)
    twice = _FaceletCube()
    RubiksCube.move(twice, quarter)
    RubiksCube.move(twice, quarter)
    assert double == twice
    RubiksCube.move(double, double_move)
    assert double.is_solved()


def test_random_shuffle_is_reproducible_and_undoable():
    first = _FaceletCube()
    moves = RubiksCube.random_shuffle(first, 12, random.Random(5))
    second = _FaceletCube()
    assert RubiksCube.random_shuffle(second, 12, random.Random(5)) == moves
    assert first == second
    assert len(moves) == 12
    for move in reversed(moves):
        RubiksCube.invert(first, move)
    assert first.is_solved()


def test_random_shuffle_zero_times_leaves_cube():
    cube = _FaceletCube()
    assert RubiksCube.random_shuffle(cube, 0) == []
    assert cube.is_solved()


def test_copy_is_independent():
    cube = _FaceletCube()
    clone = RubiksCube.copy(cube)
    RubiksCube.move(clone, Move.R)
    assert cube.is_solved()
    assert not clone.is_solved()


def test_corner_strings_of_solved_cube():
    cube = _FaceletCube()
    assert RubiksCube.corner_color_string(cube, 0) == "WRB"
    assert RubiksCube.corner_color_string(cube, 7) == "YOG"


def test_solved_corners_are_distinct_and_oriented():
    cube = _FaceletCube()
    indices = [RubiksCube.corner_index(cube, i) for i in range(8)]
    assert sorted(indices) == list(range(8))
    assert all(RubiksCube.corner_orientation(cube, i) == 0 for i in range(8))


def test_up_turn_keeps_orientation_and_permutes_corners():
    cube = _FaceletCube()
    before = [RubiksCube.corner_index(cube, i) for i in range(4, 8)]
    RubiksCube.move(cube, Move.U)
    assert all(RubiksCube.corner_orientation(cube, i) == 0 for i in range(8))
    assert [RubiksCube.corner_index(cube, i) for i in range(4, 8)] == before
    indices = [RubiksCube.corner_index(cube, i) for i in range(8)]
    assert sorted(indices) == list(range(8))


@pytest.mark.parametrize("index", [-1, 8])
def test_corner_index_out_of_range(index):
    cube = _FaceletCube()
    with pytest.raises(ValueError):
        RubiksCube.corner_color_string(cube, index)