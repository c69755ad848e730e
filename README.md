# cubesolve

Models of a 3×3 Rubik's Cube in three representations, plus simple
search-based solvers that find move sequences back to the solved state.

## Cube models

All models share the abstract `RubiksCube` interface from `cubesolve.cube`:

- `RubiksCube3dArray` (`cubesolve.array3d`): stickers kept as 6 faces of 3×3 colour letters.
- `RubiksCube1dArray` (`cubesolve.array1d`): the same 54 stickers in one flat list.
- `RubiksCubeBitboard` (`cubesolve.bitboard`): each face packed into a 64-bit integer,
  one byte per outer sticker; the centre is implied by the face.

A new model starts solved. Every model supports:

- the 18 face turns `u`, `u_prime`, `u2`, `l`, `l_prime`, `l2`, `f`, …, `b2`
  (each turns the cube in place and returns it);
- `move(Move.X)` and `invert(Move.X)`;
- `is_solved()`, `copy()`, `==` and hashing, so cubes can be put in sets and dicts;
- `get_color(face, row, col)`, rows counted top to bottom and columns left to right;
- `random_shuffle(times, rng=None)`, which applies `times` random moves (drawn from
  the given `random.Random`, or a fresh one) and returns them in order;
- `render()`, which returns the planar net of the cube as text:

```
    U
  L F R B
    D
```

Faces are `Face.UP, LEFT, FRONT, RIGHT, BACK, DOWN`; colours are
`Color.WHITE, GREEN, RED, BLUE, ORANGE, YELLOW`, and a solved face `n` shows
`Color(n)`. The 18 moves are the members of `Move` (`Move.L`, `Move.LPRIME`,
`Move.L2`, …). `color_letter(color)` and `move_name(move)` give the single letters
and the usual notation (`"R'"`, `"U2"`).

Corner helpers describe the eight corners, numbered 0–7 as UFR, UFL, UBL, UBR,
DFR, DFL, DBR, DBL:

- `corner_color_string(i)`: the letters of the corner's three stickers;
  raises `ValueError` for an index outside 0–7.
- `corner_index(i)`: which cubie sits there, as a 3-bit number (bit 2 yellow,
  bit 1 orange, bit 0 green).
- `corner_orientation(i)`: 0, 1 or 2, the sticker showing white or yellow;
  raises `ValueError` if the corner has neither.

The bitboard model also has `get_corners()`, which packs a 5-bit code (identity
and twist) for each corner, in the order UFR, UFL, UBR, UBL, DFR, DFL, DBR, DBL,
followed by five zero bits, into one integer.

## Solvers

`cubesolve.solvers` holds three solvers. Each takes a copy of the cube it is given;
`solve()` returns a list of `Move`.

- `BFSSolver(cube)` explores states breadth-first and returns a shortest solution.
  Afterwards its `cube` attribute holds the solved cube.
- `DFSSolver(cube, max_search_depth=8)` searches depth-first, trying moves in
  `Move` order, and returns the first solution within the depth limit, or an empty
  list if there is none.
- `IDDFSSolver(cube, max_search_depth=7)` runs depth-first searches with limits
  1, 2, … up to `max_search_depth` and returns the first solution found.

When a solution is found, the solver's `cube` attribute is the solved cube.
Search cost grows very quickly with scramble length; keep scrambles short.

```python
import random
from cubesolve.bitboard import RubiksCubeBitboard
from cubesolve.cube import move_name
from cubesolve.solvers import BFSSolver

cube = RubiksCubeBitboard()
scramble = cube.random_shuffle(4, random.Random(1))
print(" ".join(move_name(m) for m in scramble))

solver = BFSSolver(cube)
solution = solver.solve()
print(" ".join(move_name(m) for m in solution))
print(solver.cube.is_solved())
```

## Command line

```
cubesolve [--shuffle N] [--seed SEED] [--cube {1d,3d,bitboard}] [--solver {bfs,dfs,iddfs}]
```

Prints a solved cube, scrambles it with `--shuffle` random moves (default 6),
prints the scramble and the scrambled cube, then solves it and prints the solution
and the resulting cube. `--seed` makes the scramble repeatable; `--cube` picks the
model (default `bitboard`) and `--solver` the search (default `bfs`).

## What it does not do

The command line only solves cubes it has scrambled itself; there is no way to
enter the state of a physical cube. The solvers are plain uninformed searches with
no pruning tables or heuristics, so they are practical only for short scrambles.