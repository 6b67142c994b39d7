# search_path.py
from dataclasses import dataclass
from typing import List, Optional

from puzzle_state import PuzzleState


@dataclass(frozen=True)
class SearchPath:
    """Node in the search tree; `parent` indexes the owning arena."""
    state: PuzzleState
    parent: Optional[int] = None


class PathArena:
    """Growable store of SearchPath records linked by parent index."""

    def __init__(self):
        self._paths: List[SearchPath] = []

    def add(self, state: PuzzleState, parent: Optional[int] = None) -> int:
        if parent is not None and not 0 <= parent < len(self._paths):
            raise IndexError(f"no search path at index {parent}")
        self._paths.append(SearchPath(state, parent))
        return len(self._paths) - 1

    def __getitem__(self, index: int) -> SearchPath:
        return self._paths[index]

    def __len__(self) -> int:
        return len(self._paths)

    def _chain(self, index: Optional[int]):
        while index is not None:
            path = self._paths[index]
            yield path
            index = path.parent

    def depth(self, index: int) -> int:
        """Number of moves from the root to `index` (root is 0)."""
        return sum(1 for _ in self._chain(index)) - 1

    def contains_state(self, index: int, state: PuzzleState) -> bool:
        """True if `state` is on the chain from `index` back to the root."""
        return any(path.state == state for path in self._chain(index))

    def states(self, index: int) -> List[PuzzleState]:
        """Arrangements from the root to `index`."""
        states = [path.state for path in self._chain(index)]
        states.reverse()
        return states

    def reconstruct_moves(self, index: int) -> List[int]:
        """Tiles slid into the blank, in play order, from the root to `index`."""
        if not self._paths[index].state.is_goal():
            raise ValueError(f"search path {index} does not end at the goal")
        moves: List[int] = []
        for path in self._chain(index):
            if path.parent is None:
                break
            previous = self._paths[path.parent].state
            # the tile that sat where the blank is now
            moves.append(previous.tiles[path.state.blank_index])
        moves.reverse()
        return moves
