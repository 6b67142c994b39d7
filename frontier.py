# frontier.py
import heapq
from itertools import count
from typing import List, Tuple

from search_path import PathArena


def evaluate(arena: PathArena, index: int) -> int:
    """f(x) = g(x) + h(x): depth plus misplaced tiles."""
    return arena.depth(index) + arena[index].state.heuristic


class Frontier:
    """Pending search paths, lowest f first; equal f pops in insertion order."""

    def __init__(self):
        self._heap: List[Tuple[int, int, int]] = []
        self._counter = count()

    def push(self, index: int, f: int) -> None:
        heapq.heappush(self._heap, (f, next(self._counter), index))

    def pop(self) -> int:
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        _, _, index = heapq.heappop(self._heap)
        return index

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
