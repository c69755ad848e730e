"""Cube representation packing each face into a 64-bit word, one byte per sticker."""

from __future__ import annotations

from functools import reduce
from operator import xor

from .cube import Color, Face, RubiksCube

_ONE_8 = 0xFF
_MASK_64 = (1 << 64) - 1

# Byte index of each (row, col) on a face. The outer stickers run clockwise
# from the top-left corner; the centre is never stored.
_POSITIONS = (
    (0, 1, 2),
    (7, 8, 3),
    (6, 5, 4),
)
_CENTRE = 8


def _solved_side(side: int) -> int:
    colour_bit = 1 << side
    return sum(colour_bit << (8 * byte) for byte in range(8))


_SOLVED = tuple(_solved_side(side) for side in range(6))

# For each clockwise quarter turn: the face that rotates and four strips of
# (face, byte positions). Strip k receives the stickers of strip k+1, and the
# last strip receives the original stickers of the first.
_TURNS = {
    "u": (0, ((2, (0, 1, 2)), (3, (0, 1, 2)), (4, (0, 1, 2)), (1, (0, 1, 2)))),
    "l": (1, ((2, (0, 7, 6)), (0, (0, 7, 6)), (4, (4, 3, 2)), (5, (0, 7, 6)))),
    "f": (2, ((0, (4, 5, 6)), (1, (2, 3, 4)), (5, (0, 1, 2)), (3, (6, 7, 0)))),
    "r": (3, ((0, (2, 3, 4)), (2, (2, 3, 4)), (5, (2, 3, 4)), (4, (7, 6, 0)))),
    "b": (4, ((0, (0, 1, 2)), (3, (2, 3, 4)), (5, (4, 5, 6)), (1, (6, 7, 0)))),
    "d": (5, ((2, (4, 5, 6)), (1, (4, 5, 6)), (4, (4, 5, 6)), (3, (4, 5, 6)))),
}

# Corner order used by get_corners: UFR, UFL, UBR, UBL, DFR, DFL, DBR, DBL.
_CORNER_ORDER = (0, 1, 3, 2, 4, 5, 6, 7)


class RubiksCubeBitboard(RubiksCube):
    """A cube whose six faces are 64-bit words; each byte holds one colour bit."""

    def __init__(self) -> None:
        self.bitboard = list(_SOLVED)

    def get_color(self, face: Face, row: int, col: int) -> Color:
        face = Face(face)
        position = _POSITIONS[row][col]
        if position == _CENTRE:
            return Color(face.value)
        byte = (self.bitboard[face.value] >> (8 * position)) & _ONE_8
        return Color(byte.bit_length() - 1)

    def is_solved(self) -> bool:
        return tuple(self.bitboard) == _SOLVED

    def copy(self) -> "RubiksCubeBitboard":
        clone = RubiksCubeBitboard()
        clone.bitboard = list(self.bitboard)
        return clone

    def _byte(self, face: int, position: int) -> int:
        return (self.bitboard[face] >> (8 * position)) & _ONE_8

    def _set_byte(self, face: int, position: int, value: int) -> None:
        shift = 8 * position
        self.bitboard[face] = (self.bitboard[face] & ~(_ONE_8 << shift)) | (value << shift)

    def _rotate_face(self, face: int) -> None:
        word = self.bitboard[face]
        self.bitboard[face] = ((word << 16) | (word >> 48)) & _MASK_64

    def _turn(self, name: str) -> "RubiksCubeBitboard":
        face, strips = _TURNS[name]
        self._rotate_face(face)
        values = [[self._byte(f, p) for p in positions] for f, positions in strips]
        for k, (f, positions) in enumerate(strips):
            source = values[(k + 1) % len(strips)]
            for position, value in zip(positions, source):
                self._set_byte(f, position, value)
        return self

    def u(self) -> "RubiksCubeBitboard":
        return self._turn("u")

    def l(self) -> "RubiksCubeBitboard":  # noqa: E743
        return self._turn("l")

    def f(self) -> "RubiksCubeBitboard":
        return self._turn("f")

    def r(self) -> "RubiksCubeBitboard":
        return self._turn("r")

    def b(self) -> "RubiksCubeBitboard":
        return self._turn("b")

    def d(self) -> "RubiksCubeBitboard":
        return self._turn("d")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RubiksCubeBitboard):
            return NotImplemented
        return self.bitboard == other.bitboard

    def __hash__(self) -> int:
        return reduce(xor, self.bitboard)

    def _corner_code(self, index: int) -> int:
        corner = self.corner_color_string(index)
        code = self.corner_index(index)
        top = next((c for c in corner if c in "WY"), None)
        if top is not None:
            if corner[1] == top:
                code |= 1 << 3
            elif corner[2] == top:
                code |= 1 << 4
        return code

    def get_corners(self) -> int:
        """Pack the eight corners as 5-bit codes (identity and twist), followed by 5 zero bits."""
        result = 0
        for index in _CORNER_ORDER:
            result = (result | self._corner_code(index)) << 5
        return result