import pytest

from tictactoe import MIN_SCORE, Position, cell_mask
from tictactoe.solver import NegamaxSolver, threat_score


def brute_force(position: Position) -> int:
    """Plain minimax without pruning or caching."""
    if position.opponent_winning():
        return -position.score()
    if position.full():
        return 0
    best = MIN_SCORE
    for move in list(position.moves()):
        position.play(move)
        best = max(best, -brute_force(position))
        position.undo(move)
    return best


OPENINGS = [
    [4],
    [0],
    [1],
    [0, 1],
    [0, 4],
    [4, 1],
    [0, 8, 4],
    [1, 3, 4],
    [0, 4, 8, 2],
]


def test_empty_board_is_a_draw() -> None:
    solver = NegamaxSolver()
    assert solver.evaluate(Position()) == 0


def test_best_first_move_is_center() -> None:
    solver = NegamaxSolver()
    assert solver.get_best_move(Position()) == cell_mask(4)


def test_center_opening_is_a_draw_for_o() -> None:
    solver = NegamaxSolver()
    position = Position.from_moves([4])
    assert solver.evaluate(position) == 0


def test_edge_reply_to_corner_loses() -> None:
    solver = NegamaxSolver()
    position = Position.from_moves([0, 1])
    assert solver.evaluate(position) > 0


def test_takes_immediate_win() -> None:
    # X: 0, 1 and O: 3, 4 with X to move
    position = Position.from_moves([0, 3, 1, 4])
    solver = NegamaxSolver()
    assert solver.get_best_move(position) == cell_mask(2)
    assert solver.evaluate(position) == 3


def test_blocks_immediate_threat() -> None:
    # X: 0, 1 and O: 4 with O to move
    position = Position.from_moves([0, 4, 1])
    solver = NegamaxSolver()
    assert solver.get_best_move(position) == cell_mask(2)


@pytest.mark.parametrize("opening", OPENINGS)
def test_matches_brute_force(opening: list[int]) -> None:
    position = Position.from_moves(opening)
    expected = brute_force(position.copy())
    assert NegamaxSolver().evaluate(position) == expected
    assert NegamaxSolver(use_tt=False).evaluate(position) == expected
    assert NegamaxSolver(move_scorer=threat_score).evaluate(position) == expected


def test_shared_table_across_searches() -> None:
    solver = NegamaxSolver()
    for opening in OPENINGS:
        position = Position.from_moves(opening)
        assert solver.evaluate(position) == brute_force(position.copy())


def test_search_restores_position() -> None:
    position = Position.from_moves([0, 4])
    before = position.copy()
    solver = NegamaxSolver()
    solver.get_best_move(position)
    solver.evaluate(position)
    assert position == before


def test_returns_none_on_finished_game() -> None:
    solver = NegamaxSolver()
    won = Position.from_moves([0, 3, 1, 4, 2])
    drawn = Position.from_moves([0, 1, 2, 4, 3, 5, 7, 6, 8])
    assert solver.get_best_move(won) is None
    assert solver.get_best_move(drawn) is None


def test_terminal_scores() -> None:
    solver = NegamaxSolver()
    # O to move after X completed the top row at ply 5
    assert solver.evaluate(Position.from_moves([0, 3, 1, 4, 2])) == -3
    assert solver.evaluate(Position.from_moves([0, 1, 2, 4, 3, 5, 7, 6, 8])) == 0


def test_root_value_is_cached_with_depth() -> None:
    solver = NegamaxSolver()
    solver.evaluate(Position())
    assert solver.tt is not None
    # draw normalized to 0 - MIN_SCORE + 1, searched at ply 0
    assert solver.tt.lookup(Position().key()) == (4, 0)


def test_deterministic_after_reset() -> None:
    solver = NegamaxSolver()
    values, nodes = set(), set()
    for _ in range(3):
        values.add(solver.evaluate(Position()))
        nodes.add(solver.nodes_searched)
        solver.reset()
    assert values == {0}
    assert len(nodes) == 1


def test_transposition_table_reduces_nodes() -> None:
    with_tt = NegamaxSolver(use_tt=True)
    without_tt = NegamaxSolver(use_tt=False)
    with_tt.evaluate(Position())
    without_tt.evaluate(Position())
    assert with_tt.nodes_searched < without_tt.nodes_searched


def test_second_search_uses_table() -> None:
    solver = NegamaxSolver()
    move1 = solver.get_best_move(Position())
    nodes1 = solver.nodes_searched

    solver.nodes_searched = 0
    move2 = solver.get_best_move(Position())
    nodes2 = solver.nodes_searched

    assert move1 == move2
    assert nodes2 < nodes1


def test_no_table_stores_nothing() -> None:
    solver = NegamaxSolver(use_tt=False)
    solver.evaluate(Position.from_moves([4]))
    assert solver.tt is None
    solver.clear_tt()


def test_cutoff_result_is_not_cached() -> None:
    # X: 0, 1 and O: 3, 4 with X to move; the first child wins and cuts off
    position = Position.from_moves([0, 3, 1, 4])
    solver = NegamaxSolver()
    assert solver.negamax(position, MIN_SCORE, 1) >= 1
    assert solver.tt is not None
    assert solver.tt.lookup(position.key()) is None


def test_corner_center_opening_is_a_draw() -> None:
    solver = NegamaxSolver()
    assert solver.evaluate(Position.from_moves([0, 4])) == 0
