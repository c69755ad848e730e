"""Shared model of a 3x3 Rubik's Cube: faces, colours, moves and the abstract cube."""

from __future__ import annotations

import abc
import copy as _copy
import random
from enum import Enum


class Face(Enum):
    """The six faces, in the order used throughout the package."""

    UP = 0
    LEFT = 1
    FRONT = 2
    RIGHT = 3
    BACK = 4
    DOWN = 5


class Color(Enum):
    """Sticker colours; a solved face `n` carries `Color(n)`."""

    WHITE = 0
    GREEN = 1
    RED = 2
    BLUE = 3
    ORANGE = 4
    YELLOW = 5


class Move(Enum):
    """The eighteen face turns in quarter, counter and half form."""

    L = 0
    LPRIME = 1
    L2 = 2
    R = 3
    RPRIME = 4
    R2 = 5
    U = 6
    UPRIME = 7
    U2 = 8
    D = 9
    DPRIME = 10
    D2 = 11
    F = 12
    FPRIME = 13
    F2 = 14
    B = 15
    BPRIME = 16
    B2 = 17


_COLOR_LETTERS = {
    Color.WHITE: "W",
    Color.GREEN: "G",
    Color.RED: "R",
    Color.BLUE: "B",
    Color.ORANGE: "O",
    Color.YELLOW: "Y",
}

_MOVE_NAMES = {
    Move.L: "L", Move.LPRIME: "L'", Move.L2: "L2",
    Move.R: "R", Move.RPRIME: "R'", Move.R2: "R2",
    Move.U: "U", Move.UPRIME: "U'", Move.U2: "U2",
    Move.D: "D", Move.DPRIME: "D'", Move.D2: "D2",
    Move.F: "F", Move.FPRIME: "F'", Move.F2: "F2",
    Move.B: "B", Move.BPRIME: "B'", Move.B2: "B2",
}

_MOVE_METHODS = {
    Move.L: "l", Move.LPRIME: "l_prime", Move.L2: "l2",
    Move.R: "r", Move.RPRIME: "r_prime", Move.R2: "r2",
    Move.U: "u", Move.UPRIME: "u_prime", Move.U2: "u2",
    Move.D: "d", Move.DPRIME: "d_prime", Move.D2: "d2",
    Move.F: "f", Move.FPRIME: "f_prime", Move.F2: "f2",
    Move.B: "b", Move.BPRIME: "b_prime", Move.B2: "b2",
}

_INVERSE_METHODS = {
    Move.L: "l_prime", Move.LPRIME: "l", Move.L2: "l2",
    Move.R: "r_prime", Move.RPRIME: "r", Move.R2: "r2",
    Move.U: "u_prime", Move.UPRIME: "u", Move.U2: "u2",
    Move.D: "d_prime", Move.DPRIME: "d", Move.D2: "d2",
    Move.F: "f_prime", Move.FPRIME: "f", Move.F2: "f2",
    Move.B: "b_prime", Move.BPRIME: "b", Move.B2: "b2",
}

# Stickers of each corner cubie: UFR, UFL, UBL, UBR, DFR, DFL, DBR, DBL.
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


def color_letter(color: Color) -> str:
    """Return the first letter of a colour's name."""
    return _COLOR_LETTERS[Color(color)]


def move_name(move: Move) -> str:
    """Return the standard notation of a move, such as ``"R'"``."""
    return _MOVE_NAMES[Move(move)]


class RubiksCube(abc.ABC):
    """Behaviour shared by every cube representation.

    Subclasses supply sticker access, the solved test and the six clockwise
    quarter turns; every other move is built from those.
    """

    @abc.abstractmethod
    def get_color(self, face: Face, row: int, col: int) -> Color:
        """Colour at (row, col) of a face, rows top to bottom, columns left to right."""

    @abc.abstractmethod
    def is_solved(self) -> bool:
        """True when every face shows a single colour in its home position."""

    def copy(self) -> "RubiksCube":
        """Return an independent copy of this cube."""
        return _copy.deepcopy(self)

    def render(self) -> str:
        """Return the cube laid out flat: U above L F R B, D below."""
        def row_text(face: Face, row: int) -> str:
            return "".join(
                color_letter(self.get_color(face, row, col)) + " " for col in range(3)
            )

        lines = ["Rubik's Cube:", ""]
        lines.extend(" " * 7 + row_text(Face.UP, row) for row in range(3))
        lines.append("")
        middle = (Face.LEFT, Face.FRONT, Face.RIGHT, Face.BACK)
        lines.extend(
            " ".join(row_text(face, row) for face in middle) for row in range(3)
        )
        lines.append("")
        lines.extend(" " * 7 + row_text(Face.DOWN, row) for row in range(3))
        lines.append("")
        return "\n".join(lines) + "\n"

    def random_shuffle(self, times: int, rng: random.Random | None = None) -> list[Move]:
        """Apply `times` random moves and return them in the order performed."""
        rng = rng if rng is not None else random.Random()
        performed = []
        for _ in range(times):
            chosen = Move(rng.randrange(len(Move)))
            performed.append(chosen)
            self.move(chosen)
        return performed

    def move(self, move: Move) -> "RubiksCube":
        """Perform a move and return the cube."""
        return getattr(self, _MOVE_METHODS[Move(move)])()

    def invert(self, move: Move) -> "RubiksCube":
        """Undo a move and return the cube."""
        return getattr(self, _INVERSE_METHODS[Move(move)])()

    @abc.abstractmethod
    def f(self) -> "RubiksCube":
        """Turn the front face clockwise."""

    def f_prime(self) -> "RubiksCube":
        for _ in range(3):
            self.f()
        return self

    def f2(self) -> "RubiksCube":
        self.f()
        return self.f()

    @abc.abstractmethod
    def u(self) -> "RubiksCube":
        """Turn the up face clockwise."""

    def u_prime(self) -> "RubiksCube":
        for _ in range(3):
            self.u()
        return self

    def u2(self) -> "RubiksCube":
        self.u()
        return self.u()

    @abc.abstractmethod
    def l(self) -> "RubiksCube":  # noqa: E743
        """Turn the left face clockwise."""

    def l_prime(self) -> "RubiksCube":
        for _ in range(3):
            self.l()
        return self

    def l2(self) -> "RubiksCube":
        self.l()
        return self.l()

    @abc.abstractmethod
    def r(self) -> "RubiksCube":
        """Turn the right face clockwise."""

    def r_prime(self) -> "RubiksCube":
        for _ in range(3):
            self.r()
        return self

    def r2(self) -> "RubiksCube":
        self.r()
        return self.r()

    @abc.abstractmethod
    def d(self) -> "RubiksCube":
        """Turn the down face clockwise."""

    def d_prime(self) -> "RubiksCube":
        for _ in range(3):
            self.d()
        return self

    def d2(self) -> "RubiksCube":
        self.d()
        return self.d()

    @abc.abstractmethod
    def b(self) -> "RubiksCube":
        """Turn the back face clockwise."""

    def b_prime(self) -> "RubiksCube":
        for _ in range(3):
            self.b()
        return self

    def b2(self) -> "RubiksCube":
        self.b()
        return self.b()

    def corner_color_string(self, index: int) -> str:
        """Letters of the three stickers of corner `index` (0-7)."""
        if not 0 <= index < len(_CORNERS):
            raise ValueError(f"corner index out of range: {index}")
        return "".join(
            color_letter(self.get_color(face, row, col))
            for face, row, col in _CORNERS[index]
        )

    def corner_index(self, index: int) -> int:
        """Identify the cubie at a corner slot as a 3-bit number (Y, O, G bits)."""
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
        """Which sticker (0, 1 or 2) of a corner shows its white or yellow colour."""
        corner = self.corner_color_string(index)
        top = next((c for c in corner if c in "WY"), None)
        if top is None:
            raise ValueError(f"corner {index} has no white or yellow sticker")
        if corner[1] == top:
            return 1
        if corner[2] == top:
            return 2
        return 0