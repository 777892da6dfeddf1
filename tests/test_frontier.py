import pytest

from eightpuzzle.domains.board import GOAL, Board, scramble
from eightpuzzle.search.frontier import Frontier
from eightpuzzle.search.node import Node, NodeArena
from eightpuzzle.search.visited import VisitedSet


def _boards(n):
    out = []
    seed = 0
    while len(out) < n:
        b = scramble(8, seed)
        if b not in out:
            out.append(b)
        seed += 1
    return out


def test_pop_order_f_then_h_then_insertion():
    arena = NodeArena()
    fr = Frontier(arena)
    b = _boards(5)
    a = arena.add(Node(b[0], g=2, h=3))
    bb = arena.add(Node(b[1], g=1, h=4))
    c = arena.add(Node(b[2], g=0, h=4))
    d = arena.add(Node(b[3], g=3, h=2))
    e = arena.add(Node(b[4], g=2, h=3))
    for i in (a, bb, c, d, e):
        fr.push(i)
    assert len(fr) == 5
    assert [fr.pop_min() for _ in range(5)] == [c, d, a, e, bb]
    assert not fr


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Frontier(NodeArena()).pop_min()


def test_iteration_covers_every_held_node():
    arena = NodeArena()
    fr = Frontier(arena)
    boards = _boards(7)
    for i, b in enumerate(boards):
        fr.push(arena.add(Node(b, g=i, h=b.heuristic())))
    assert {n.board for n in fr} == set(boards)
    fr.pop_min()
    assert len(list(fr)) == 6
    assert fr.peak == 7


def test_find_uses_board_and_predicate():
    arena = NodeArena()
    fr = Frontier(arena)
    idx = arena.add(Node(GOAL, g=1, h=0))
    fr.push(idx)
    assert fr.find(GOAL, lambda n: n.g <= 3) is arena[idx]
    assert fr.find(GOAL, lambda n: n.g <= 0) is None
    other = Board.from_flat((1, 0, 2, 3, 4, 5, 6, 7, 8))
    assert fr.find(other, lambda n: True) is None
    fr.pop_min()
    assert fr.find(GOAL, lambda n: True) is None


def test_find_scans_duplicate_copies():
    arena = NodeArena()
    fr = Frontier(arena)
    fr.push(arena.add(Node(GOAL, g=5, h=0)))
    low = arena.add(Node(GOAL, g=2, h=0))
    fr.push(low)
    assert fr.find(GOAL, lambda n: n.g <= 3) is arena[low]


def test_visited_set_is_append_only_lookup():
    arena = NodeArena()
    vs = VisitedSet(arena)
    b = _boards(2)
    vs.add(arena.add(Node(b[0], g=4, h=b[0].heuristic())))
    vs.add(arena.add(Node(b[1], g=1, h=b[1].heuristic())))
    assert len(vs) == 2
    assert [n.board for n in vs] == b
    f0 = 4 + b[0].heuristic()
    assert vs.find(b[0], lambda n: n.f <= f0) is not None
    assert vs.find(b[0], lambda n: n.f <= f0 - 1) is None
