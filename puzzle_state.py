# puzzle_state.py
from collections import deque
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Tuple

# Define the Grid type: 8 nodes, index = node, value = tile (0 = blank)
Grid = Tuple[int, ...]

GOAL: Grid = (1, 2, 3, 4, 0, 5, 6, 7)
SIZE = len(GOAL)

# Fixed eight-node graph (not a grid)
ADJACENCY: Tuple[Tuple[int, ...], ...] = (
    (1, 2),
    (0, 2, 3),
    (0, 1, 5),
    (1, 4, 6),
    (3, 5),
    (2, 4, 7),
    (3, 7),
    (5, 6),
)


class IllegalMoveError(ValueError):
    """A tile was asked to slide into the blank from a non-adjacent node."""


def is_arrangement(tiles: Optional[Sequence[int]]) -> bool:
    """True if `tiles` holds each of 0..7 exactly once, as plain ints."""
    if tiles is None or len(tiles) != SIZE:
        return False
    # bool is an int subclass and True == 1, so compare types exactly
    if any(type(tile) is not int for tile in tiles):
        return False
    for value in range(SIZE):
        count = 0
        for tile in tiles:
            if tile == value:
                count += 1
        if count != 1:
            return False
    return True


class PuzzleState:
    """One arrangement of the tiles; immutable once built."""

    __slots__ = ("tiles", "blank_index", "heuristic")

    def __init__(self, tiles: Iterable[int]):
        tiles = tuple(tiles)
        blank_index = 0
        heuristic = 0
        # misplaced tiles (blank excluded) and blank position in one pass
        for i, tile in enumerate(tiles):
            if tile == 0:
                blank_index = i
            elif tile != GOAL[i]:
                heuristic += 1
        object.__setattr__(self, "tiles", tiles)
        object.__setattr__(self, "blank_index", blank_index)
        object.__setattr__(self, "heuristic", heuristic)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def is_goal(self) -> bool:
        return self.heuristic == 0

    def swap(self, node: int) -> "PuzzleState":
        arr = list(self.tiles)
        z = self.blank_index
        arr[z], arr[node] = arr[node], arr[z]
        return PuzzleState(arr)

    def neighbors(self) -> FrozenSet["PuzzleState"]:
        """States reachable by sliding one adjacent tile into the blank."""
        return frozenset(self.swap(node) for node in ADJACENCY[self.blank_index])

    def move(self, tile: int) -> "PuzzleState":
        """Slide `tile` into the blank."""
        for node in ADJACENCY[self.blank_index]:
            if self.tiles[node] == tile:
                return self.swap(node)
        raise IllegalMoveError(
            f"tile {tile} is not adjacent to the blank at node {self.blank_index}"
        )

    def movable_tiles(self) -> List[int]:
        return sorted(self.tiles[node] for node in ADJACENCY[self.blank_index])

    def __eq__(self, other):
        if not isinstance(other, PuzzleState):
            return NotImplemented
        return self.tiles == other.tiles

    def __hash__(self):
        return hash(self.tiles)

    def __repr__(self):
        return f"PuzzleState({list(self.tiles)})"


def apply_moves(tiles: Sequence[int], moves: Iterable[int]) -> List[PuzzleState]:
    """Replay `moves` from `tiles`; returns every state, start included."""
    state = PuzzleState(tiles)
    path = [state]
    for tile in moves:
        state = state.move(tile)
        path.append(state)
    return path


@lru_cache(maxsize=None)
def goal_distances() -> Mapping[Grid, int]:
    """Exact move count to the goal for every arrangement that can reach it.

    Breadth-first search outward from the goal. Moves are reversible, so the
    keys are exactly the goal's connected component of the state graph.
    The table is shared for the whole process and returned read-only.
    """
    distances: Dict[Grid, int] = {GOAL: 0}
    queue = deque([GOAL])
    while queue:
        current = queue.popleft()
        z = current.index(0)
        for node in ADJACENCY[z]:
            arr = list(current)
            arr[z], arr[node] = arr[node], arr[z]
            nxt = tuple(arr)
            if nxt not in distances:
                distances[nxt] = distances[current] + 1
                queue.append(nxt)
    return MappingProxyType(distances)


def is_solvable(tiles: Sequence[int]) -> bool:
    return tuple(tiles) in goal_distances()
