# solver_impl.py
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Set

from frontier import Frontier, evaluate
from puzzle_state import Grid, PuzzleState, is_arrangement, is_solvable
from search_path import PathArena

logger = logging.getLogger(__name__)


class ConundrumError(Exception):
    """Base class for solver errors."""


class InvalidArrangementError(ConundrumError, ValueError):
    """Input is missing, the wrong length, or not a permutation of 0..7."""


class UnsolvableError(ConundrumError):
    """The arrangement cannot reach the goal."""


class SearchExhaustedError(ConundrumError):
    """The search ran out of candidates or hit its expansion budget."""

    def __init__(self, message: str, expanded: int, budget: Optional[int] = None):
        super().__init__(message)
        self.expanded = expanded
        self.budget = budget


@dataclass(frozen=True)
class SolverConfig:
    # None: no budget. Solvable inputs always terminate; ancestor-only search
    # just takes much longer on the deepest arrangements.
    max_expansions: Optional[int] = None
    use_closed_set: bool = True
    check_solvable: bool = True


@dataclass
class SolveResult:
    moves: List[int]
    path: List[Grid] = field(default_factory=list)
    expanded: int = 0
    generated: int = 0


class Solver:
    """A* over the eight-node graph with the misplaced-tiles heuristic.

    Holds configuration only; all search state lives inside one `solve` call.
    """

    def __init__(self, config: Optional[SolverConfig] = None):
        self.config = config or SolverConfig()

    def resolve(self, initial: Optional[Sequence[int]]) -> List[int]:
        """Moves from `initial` to the goal; empty if solved or invalid."""
        try:
            return self.solve(initial).moves
        except InvalidArrangementError:
            return []

    def solve(self, initial: Optional[Sequence[int]]) -> SolveResult:
        if not is_arrangement(initial):
            logger.warning("Rejected arrangement %r: expected each of 0..7 exactly once", initial)
            raise InvalidArrangementError(f"not an arrangement of 0..7: {initial!r}")

        if self.config.check_solvable and not is_solvable(initial):
            raise UnsolvableError(f"{list(initial)} cannot reach the goal")

        # Search state for this call only
        arena = PathArena()
        frontier = Frontier()
        closed: Set[PuzzleState] = set()
        expanded = 0

        root = arena.add(PuzzleState(initial))
        frontier.push(root, evaluate(arena, root))
        generated = 1
        logger.debug("Searching from %s (h=%d)", list(initial), arena[root].state.heuristic)

        while frontier:
            # Pop the path with the lowest f
            current = frontier.pop()
            state = arena[current].state

            # If we've reached the goal, walk back to the root
            if state.is_goal():
                moves = arena.reconstruct_moves(current)
                logger.info("Solved in %d moves (%d expanded, %d generated)",
                            len(moves), expanded, generated)
                return SolveResult(
                    moves=moves,
                    path=[s.tiles for s in arena.states(current)],
                    expanded=expanded,
                    generated=generated,
                )

            if self.config.use_closed_set:
                if state in closed:
                    continue
                closed.add(state)

            limit = self.config.max_expansions
            if limit is not None and expanded >= limit:
                raise SearchExhaustedError(
                    f"expansion budget of {limit} exceeded before reaching the goal", expanded, limit)
            expanded += 1

            # Explore neighbors not already on this path
            for neighbor in state.neighbors():
                if neighbor in closed or arena.contains_state(current, neighbor):
                    continue
                child = arena.add(neighbor, current)
                frontier.push(child, evaluate(arena, child))
                generated += 1

        raise SearchExhaustedError("frontier emptied without reaching the goal", expanded)


def resolve(initial: Optional[Sequence[int]]) -> List[int]:
    """Solve with the default configuration."""
    return Solver().resolve(initial)


def solve_puzzle(start: Sequence[int], config: Optional[SolverConfig] = None) -> List[Grid]:
    """Arrangements from `start` to the goal, both included."""
    return Solver(config).solve(start).path
