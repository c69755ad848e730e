"""Search strategies that find a move sequence solving a cube."""

from __future__ import annotations

from collections import deque

from .cube import Move, RubiksCube


class BFSSolver:
    """Breadth-first search over cube states; finds a shortest solution."""

    def __init__(self, cube: RubiksCube) -> None:
        self.cube = cube.copy()

    def _search(self) -> tuple[RubiksCube, dict]:
        came_by: dict = {}
        visited = {self.cube}
        queue = deque([self.cube])
        while queue:
            node = queue.popleft()
            if node.is_solved():
                return node, came_by
            for move in Move:
                child = node.copy().move(move)
                if child not in visited:
                    visited.add(child)
                    came_by[child] = move
                    queue.append(child)
        return self.cube, came_by

    def solve(self) -> list[Move]:
        """Return the moves that solve the cube; the solver's cube ends solved."""
        solved, came_by = self._search()
        if not solved.is_solved():
            raise RuntimeError("search space exhausted without reaching a solved cube")
        moves = []
        current = solved.copy()
        while current != self.cube:
            move = came_by[current]
            moves.append(move)
            current.invert(move)
        self.cube = solved
        moves.reverse()
        return moves


class DFSSolver:
    """Depth-limited depth-first search, trying moves in their enumeration order."""

    def __init__(self, cube: RubiksCube, max_search_depth: int = 8) -> None:
        self.cube = cube.copy()
        self.max_search_depth = max_search_depth
        self._moves: list[Move] = []

    def _dfs(self, depth: int) -> bool:
        if self.cube.is_solved():
            return True
        if depth > self.max_search_depth:
            return False
        for move in Move:
            self.cube.move(move)
            self._moves.append(move)
            if self._dfs(depth + 1):
                return True
            self._moves.pop()
            self.cube.invert(move)
        return False

    def solve(self) -> list[Move]:
        """Return a solution of at most max_search_depth moves, or [] if none is found."""
        self._dfs(1)
        return list(self._moves)


class IDDFSSolver:
    """Iterative deepening: depth-first searches with limits 1, 2, ... max_search_depth."""

    def __init__(self, cube: RubiksCube, max_search_depth: int = 7) -> None:
        self.cube = cube.copy()
        self.max_search_depth = max_search_depth

    def solve(self) -> list[Move]:
        """Return the first solution found; the last attempt's moves if none is."""
        moves: list[Move] = []
        for depth in range(1, self.max_search_depth + 1):
            searcher = DFSSolver(self.cube, depth)
            moves = searcher.solve()
            if searcher.cube.is_solved():
                self.cube = searcher.cube
                break
        return moves