"""Command line: shuffle a cube, show it, solve it and show the result."""

from __future__ import annotations

import argparse
import random

from .array1d import RubiksCube1dArray
from .array3d import RubiksCube3dArray
from .bitboard import RubiksCubeBitboard
from .cube import move_name
from .solvers import BFSSolver, DFSSolver, IDDFSSolver

_CUBES = {
    "bitboard": RubiksCubeBitboard,
    "3d": RubiksCube3dArray,
    "1d": RubiksCube1dArray,
}

_SOLVERS = {
    "bfs": BFSSolver,
    "dfs": DFSSolver,
    "iddfs": IDDFSSolver,
}


def _parse(argv):
    parser = argparse.ArgumentParser(
        prog="cubesolve", description="Shuffle a Rubik's Cube and solve it."
    )
    parser.add_argument("--shuffle", type=int, default=6, help="number of random moves")
    parser.add_argument("--seed", type=int, default=None, help="seed for the shuffle")
    parser.add_argument("--cube", choices=sorted(_CUBES), default="bitboard")
    parser.add_argument("--solver", choices=sorted(_SOLVERS), default="bfs")
    args = parser.parse_args(argv)
    if args.shuffle < 0:
        parser.error("--shuffle must not be negative")
    return args


def _format_moves(moves) -> str:
    return "".join(move_name(move) + " " for move in moves)


def main(argv=None) -> int:
    args = _parse(argv)
    cube = _CUBES[args.cube]()
    print(cube.render())

    shuffle_moves = cube.random_shuffle(args.shuffle, random.Random(args.seed))
    print(_format_moves(shuffle_moves))
    print(cube.render())

    solver = _SOLVERS[args.solver](cube)
    solve_moves = solver.solve()
    print(_format_moves(solve_moves))
    print(solver.cube.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())