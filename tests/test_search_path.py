import pytest

from puzzle_state import GOAL, PuzzleState
from search_path import PathArena


@pytest.fixture
def chain():
    """Root two moves from the goal, then the two moves that solve it."""
    arena = PathArena()
    start = PuzzleState((1, 2, 3, 4, 5, 7, 6, 0))
    middle = start.move(7)
    root = arena.add(start)
    mid = arena.add(middle, root)
    leaf = arena.add(middle.move(5), mid)
    return arena, root, mid, leaf


def test_root_has_no_parent(chain):
    arena, root, _, _ = chain
    assert arena[root].parent is None
    assert arena.depth(root) == 0


def test_depth_counts_hops(chain):
    arena, _, mid, leaf = chain
    assert arena.depth(mid) == 1
    assert arena.depth(leaf) == 2
    assert len(arena) == 3


def test_contains_state_walks_ancestors_inclusive(chain):
    arena, root, mid, leaf = chain
    assert arena.contains_state(leaf, arena[root].state)
    assert arena.contains_state(leaf, arena[leaf].state)
    assert not arena.contains_state(mid, arena[leaf].state)
    assert not arena.contains_state(root, arena[mid].state)


def test_reconstruct_moves_in_play_order(chain):
    arena, _, _, leaf = chain
    assert arena[leaf].state == PuzzleState(GOAL)
    assert arena.reconstruct_moves(leaf) == [7, 5]


def test_reconstruct_moves_for_solved_root():
    arena = PathArena()
    root = arena.add(PuzzleState(GOAL))
    assert arena.reconstruct_moves(root) == []


def test_reconstruct_moves_requires_goal(chain):
    arena, _, mid, _ = chain
    with pytest.raises(ValueError):
        arena.reconstruct_moves(mid)


def test_states_root_first(chain):
    arena, root, mid, leaf = chain
    assert arena.states(leaf) == [arena[root].state, arena[mid].state, arena[leaf].state]


def test_add_rejects_unknown_parent():
    arena = PathArena()
    with pytest.raises(IndexError):
        arena.add(PuzzleState(GOAL), 3)


def test_siblings_share_a_parent():
    arena = PathArena()
    root = arena.add(PuzzleState(GOAL))
    children = [arena.add(n, root) for n in PuzzleState(GOAL).neighbors()]
    assert all(arena[c].parent == root for c in children)
    assert not arena.contains_state(children[0], arena[children[1]].state)
