"""Cube representation holding the stickers as a face x row x column grid."""

from __future__ import annotations

from .cube import Color, Face, RubiksCube, color_letter

_LETTER_COLORS = {color_letter(color): color for color in Color}

# For each clockwise quarter turn: the face that rotates and four strips of
# three stickers (face, row, col). Strip k receives the stickers of strip k+1,
# and the last strip receives the original stickers of the first.
_TURNS = {
    "u": (0, (
        tuple((4, 0, 2 - i) for i in range(3)),
        tuple((1, 0, 2 - i) for i in range(3)),
        tuple((2, 0, 2 - i) for i in range(3)),
        tuple((3, 0, 2 - i) for i in range(3)),
    )),
    "l": (1, (
        tuple((0, i, 0) for i in range(3)),
        tuple((4, 2 - i, 2) for i in range(3)),
        tuple((5, i, 0) for i in range(3)),
        tuple((2, i, 0) for i in range(3)),
    )),
    "f": (2, (
        tuple((0, 2, i) for i in range(3)),
        tuple((1, 2 - i, 2) for i in range(3)),
        tuple((5, 0, 2 - i) for i in range(3)),
        tuple((3, i, 0) for i in range(3)),
    )),
    "r": (3, (
        tuple((0, 2 - i, 2) for i in range(3)),
        tuple((2, 2 - i, 2) for i in range(3)),
        tuple((5, 2 - i, 2) for i in range(3)),
        tuple((4, i, 0) for i in range(3)),
    )),
    "b": (4, (
        tuple((0, 0, 2 - i) for i in range(3)),
        tuple((3, 2 - i, 2) for i in range(3)),
        tuple((5, 2, i) for i in range(3)),
        tuple((1, i, 0) for i in range(3)),
    )),
    "d": (5, (
        tuple((2, 2, i) for i in range(3)),
        tuple((1, 2, i) for i in range(3)),
        tuple((4, 2, i) for i in range(3)),
        tuple((3, 2, i) for i in range(3)),
    )),
}


class RubiksCube3dArray(RubiksCube):
    """A cube whose stickers are colour letters in a 6 x 3 x 3 nested list."""

    def __init__(self) -> None:
        self.cube = [
            [[color_letter(Color(face))] * 3 for _ in range(3)] for face in range(6)
        ]

    def get_color(self, face: Face, row: int, col: int) -> Color:
        letter = self.cube[Face(face).value][row][col]
        return _LETTER_COLORS.get(letter, Color.WHITE)

    def is_solved(self) -> bool:
        return all(
            sticker == color_letter(Color(index))
            for index, face in enumerate(self.cube)
            for row in face
            for sticker in row
        )

    def copy(self) -> "RubiksCube3dArray":
        clone = RubiksCube3dArray()
        clone.cube = [[list(row) for row in face] for face in self.cube]
        return clone

    def _rotate_face(self, index: int) -> None:
        self.cube[index] = [list(row) for row in zip(*reversed(self.cube[index]))]

    def _turn(self, name: str) -> "RubiksCube3dArray":
        face, strips = _TURNS[name]
        self._rotate_face(face)
        values = [[self.cube[f][r][c] for f, r, c in strip] for strip in strips]
        for k, strip in enumerate(strips):
            source = values[(k + 1) % len(strips)]
            for (f, r, c), letter in zip(strip, source):
                self.cube[f][r][c] = letter
        return self

    def u(self) -> "RubiksCube3dArray":
        return self._turn("u")

    def l(self) -> "RubiksCube3dArray":  # noqa: E743
        return self._turn("l")

    def f(self) -> "RubiksCube3dArray":
        return self._turn("f")

    def r(self) -> "RubiksCube3dArray":
        return self._turn("r")

    def b(self) -> "RubiksCube3dArray":
        return self._turn("b")

    def d(self) -> "RubiksCube3dArray":
        return self._turn("d")

    def _key(self) -> str:
        return "".join(sticker for face in self.cube for row in face for sticker in row)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RubiksCube3dArray):
            return NotImplemented
        return self.cube == other.cube

    def __hash__(self) -> int:
        return hash(self._key())