import random

import pytest

import solver_impl
from puzzle_state import GOAL, PuzzleState, apply_moves, goal_distances
from solver_impl import (
    InvalidArrangementError, SearchExhaustedError, Solver, SolverConfig,
    UnsolvableError, resolve, solve_puzzle,
)


def _sample(max_distance=None, k=12, seed=2024):
    distances = goal_distances()
    pool = sorted(t for t, d in distances.items()
                  if max_distance is None or d <= max_distance)
    return random.Random(seed).sample(pool, k)


@pytest.mark.parametrize("tiles", [
    None,
    [1, 2, 3, 4, 0, 5, 6],
    [1, 2, 3, 4, 0, 5, 6, 7, 0],
    [1, 2, 3, 4, 0, 5, 6, 6],
    [1, 2, 3, 4, 0, 5, 6, 8],
    [9, 2, 3, 4, 0, 5, 6, 7],
    [True, 2, 3, 0, 4, 5, 6, 7],
])
def test_invalid_input_resolves_to_empty(tiles):
    assert resolve(tiles) == []


def test_invalid_input_raises_from_solve(caplog):
    with pytest.raises(InvalidArrangementError):
        Solver().solve([0, 0, 0, 0, 0, 0, 0, 0])
    assert "Rejected arrangement" in caplog.text


def test_already_solved():
    assert resolve(list(GOAL)) == []
    assert solve_puzzle(GOAL) == [GOAL]


@pytest.mark.parametrize("neighbor", sorted(PuzzleState(GOAL).neighbors(), key=lambda s: s.tiles))
def test_one_move_away(neighbor):
    swapped = neighbor.tiles[PuzzleState(GOAL).blank_index]
    assert resolve(neighbor.tiles) == [swapped]


def test_replay_reaches_goal_with_optimal_length():
    distances = goal_distances()
    solver = Solver()
    for tiles in _sample():
        moves = solver.resolve(tiles)
        assert apply_moves(tiles, moves)[-1].tiles == GOAL
        assert len(moves) == distances[tiles]


def test_hardest_arrangement_is_solved_optimally():
    distances = goal_distances()
    tiles = max(sorted(distances), key=distances.get)
    result = Solver().solve(tiles)
    assert len(result.moves) == distances[tiles]
    assert result.path[0] == tiles
    assert result.path[-1] == GOAL


def test_ancestor_only_search_is_still_optimal():
    distances = goal_distances()
    solver = Solver(SolverConfig(use_closed_set=False))
    for tiles in _sample(max_distance=8, k=6, seed=5):
        moves = solver.resolve(tiles)
        assert apply_moves(tiles, moves)[-1].tiles == GOAL
        assert len(moves) == distances[tiles]


def test_ancestor_only_search_has_no_default_budget():
    distances = goal_distances()
    assert SolverConfig().max_expansions is None
    # ancestor-only search on a deep arrangement runs to the optimum unbudgeted
    tiles = min(t for t, d in distances.items() if d == 24)
    moves = Solver(SolverConfig(use_closed_set=False)).resolve(tiles)
    assert apply_moves(tiles, moves)[-1].tiles == GOAL
    assert len(moves) == 24


def test_solve_result_path_matches_moves():
    tiles = _sample(k=1, seed=11)[0]
    result = Solver().solve(tiles)
    assert [s.tiles for s in apply_moves(tiles, result.moves)] == result.path
    assert result.generated >= result.expanded >= 1


def test_solver_keeps_no_state_between_calls():
    solver = Solver()
    first, second = _sample(max_distance=10, k=2, seed=3)
    a = solver.resolve(first)
    b = solver.resolve(second)
    assert solver.resolve(first) == a
    assert apply_moves(second, b)[-1].tiles == GOAL


def test_unsolvable_input_is_rejected_before_search(monkeypatch):
    monkeypatch.setattr(solver_impl, "is_solvable", lambda tiles: False)
    with pytest.raises(UnsolvableError):
        Solver().solve([7, 6, 5, 4, 3, 2, 1, 0])


def test_expansion_budget_stops_search():
    distances = goal_distances()
    tiles = max(sorted(distances), key=distances.get)
    with pytest.raises(SearchExhaustedError) as info:
        Solver(SolverConfig(max_expansions=3)).solve(tiles)
    assert info.value.expanded == 3
    assert info.value.budget == 3
    assert "budget of 3 exceeded" in str(info.value)


def test_empty_frontier_is_reported(monkeypatch):
    # with the precheck off and the goal cut off, the search runs dry
    monkeypatch.setattr(PuzzleState, "is_goal", lambda self: False)
    config = SolverConfig(max_expansions=None, check_solvable=False)
    with pytest.raises(SearchExhaustedError) as info:
        Solver(config).solve(GOAL)
    assert info.value.expanded == len(goal_distances())
    assert info.value.budget is None
