"""Cube representation holding the 54 stickers in one flat list."""

from __future__ import annotations

from .cube import Color, Face, RubiksCube, color_letter

_LETTER_COLORS = {color_letter(color): color for color in Color}


def _index(face: int, row: int, col: int) -> int:
    return face * 9 + row * 3 + col


def _strip(cells) -> tuple[int, ...]:
    return tuple(_index(*cell) for cell in cells)


# For each clockwise quarter turn: the face that rotates and four strips of
# flat indices. Strip k receives the stickers of strip k+1, and the last strip
# receives the original stickers of the first.
_TURNS = {
    "u": (0, (
        _strip((4, 0, 2 - i) for i in range(3)),
        _strip((1, 0, 2 - i) for i in range(3)),
        _strip((2, 0, 2 - i) for i in range(3)),
        _strip((3, 0, 2 - i) for i in range(3)),
    )),
    "l": (1, (
        _strip((0, i, 0) for i in range(3)),
        _strip((4, 2 - i, 2) for i in range(3)),
        _strip((5, i, 0) for i in range(3)),
        _strip((2, i, 0) for i in range(3)),
    )),
    "f": (2, (
        _strip((0, 2, i) for i in range(3)),
        _strip((1, 2 - i, 2) for i in range(3)),
        _strip((5, 0, 2 - i) for i in range(3)),
        _strip((3, i, 0) for i in range(3)),
    )),
    "r": (3, (
        _strip((0, 2 - i, 2) for i in range(3)),
        _strip((2, 2 - i, 2) for i in range(3)),
        _strip((5, 2 - i, 2) for i in range(3)),
        _strip((4, i, 0) for i in range(3)),
    )),
    "b": (4, (
        _strip((0, 0, 2 - i) for i in range(3)),
        _strip((3, 2 - i, 2) for i in range(3)),
        _strip((5, 2, i) for i in range(3)),
        _strip((1, i, 0) for i in range(3)),
    )),
    "d": (5, (
        _strip((2, 2, i) for i in range(3)),
        _strip((1, 2, i) for i in range(3)),
        _strip((4, 2, i) for i in range(3)),
        _strip((3, 2, i) for i in range(3)),
    )),
}


class RubiksCube1dArray(RubiksCube):
    """A cube whose stickers are colour letters in a list of 54, face by face."""

    def __init__(self) -> None:
        self.cube = [color_letter(Color(face)) for face in range(6) for _ in range(9)]

    def get_color(self, face: Face, row: int, col: int) -> Color:
        letter = self.cube[_index(Face(face).value, row, col)]
        return _LETTER_COLORS.get(letter, Color.WHITE)

    def is_solved(self) -> bool:
        return all(
            sticker == color_letter(Color(position // 9))
            for position, sticker in enumerate(self.cube)
        )

    def copy(self) -> "RubiksCube1dArray":
        clone = RubiksCube1dArray()
        clone.cube = list(self.cube)
        return clone

    def _rotate_face(self, face: int) -> None:
        old = self.cube[face * 9:face * 9 + 9]
        for row in range(3):
            for col in range(3):
                self.cube[_index(face, row, col)] = old[(2 - col) * 3 + row]

    def _turn(self, name: str) -> "RubiksCube1dArray":
        face, strips = _TURNS[name]
        self._rotate_face(face)
        values = [[self.cube[i] for i in strip] for strip in strips]
        for k, strip in enumerate(strips):
            source = values[(k + 1) % len(strips)]
            for position, letter in zip(strip, source):
                self.cube[position] = letter
        return self

    def u(self) -> "RubiksCube1dArray":
        return self._turn("u")

    def l(self) -> "RubiksCube1dArray":  # noqa: E743
        return self._turn("l")

    def f(self) -> "RubiksCube1dArray":
        return self._turn("f")

    def r(self) -> "RubiksCube1dArray":
        return self._turn("r")

    def b(self) -> "RubiksCube1dArray":
        return self._turn("b")

    def d(self) -> "RubiksCube1dArray":
        return self._turn("d")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RubiksCube1dArray):
            return NotImplemented
        return self.cube == other.cube

    def __hash__(self) -> int:
        return hash("".join(self.cube))