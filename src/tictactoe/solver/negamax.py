import logging

from tictactoe.position import MAX_SCORE, MIN_SCORE, Position
from tictactoe.solver.ordering import MoveScorer, MoveSorter, static_score
from tictactoe.solver.transposition import TABLE_SIZE, TranspositionTable

logger = logging.getLogger(__name__)


class NegamaxSolver:
    """Exhaustive negamax solver with alpha-beta pruning and a transposition table.

    Scores are relative to the player to move: +3 for a win at ply 5 down to +1
    for a win at ply 9, 0 for a draw, negative for losses.
    """

    def __init__(
        self,
        use_tt: bool = True,
        move_scorer: MoveScorer | None = None,
        table_size: int = TABLE_SIZE,
    ):
        self.move_scorer = move_scorer or static_score
        self.tt = TranspositionTable(table_size) if use_tt else None
        self.nodes_searched = 0

    def get_best_move(self, position: Position) -> int | None:
        """Find the best move for the player to move, or None if the game is over.

        The root keeps raising alpha across siblings so later children are
        searched with a narrower window. Ties keep the earlier move.
        """
        if position.winning() or position.opponent_winning() or position.full():
            return None

        nodes_before = self.nodes_searched
        best_move: int | None = None
        alpha = MIN_SCORE
        sorter = self._sort_moves(position)
        while (move := sorter.pop()) is not None:
            position.play(move)
            score = -self.negamax(position, -MAX_SCORE, -alpha)
            position.undo(move)
            if best_move is None or score > alpha:
                alpha = score
                best_move = move

        logger.debug(
            "best move %#011b value %d after %d nodes",
            best_move,
            alpha,
            self.nodes_searched - nodes_before,
        )
        return best_move

    def evaluate(self, position: Position) -> int:
        """Game-theoretic value of ``position`` for the player to move."""
        return self.negamax(position, MIN_SCORE, MAX_SCORE)

    def negamax(self, position: Position, alpha: int, beta: int) -> int:
        """Alpha-beta negamax search.

        From the root, alpha and beta should be MIN_SCORE and MAX_SCORE. The
        position is restored before returning.
        """
        self.nodes_searched += 1
        key = position.key()

        # the table holds upper bounds on the value
        if self.tt is not None:
            cached = self.tt.lookup(key)
            if cached is not None:
                value, depth = cached
                if depth >= position.ply:
                    upper = value + MIN_SCORE - 1
                    beta = min(beta, upper)
                    if alpha >= beta:
                        return upper

        # terminal check
        if position.winning():
            return position.score()
        if position.opponent_winning():
            return -position.score()
        if position.full():
            return 0

        sorter = self._sort_moves(position)
        while (move := sorter.pop()) is not None:
            position.play(move)
            value = -self.negamax(position, -beta, -alpha)
            position.undo(move)
            alpha = max(alpha, value)
            if alpha >= beta:
                # only a lower bound, so it is not stored
                return alpha

        if self.tt is not None:
            self.tt.store(key, alpha - MIN_SCORE + 1, position.ply)
        return alpha

    def _sort_moves(self, position: Position) -> MoveSorter:
        sorter = MoveSorter()
        for move in position.moves():
            sorter.add(move, self.move_scorer(position, move))
        return sorter

    def clear_tt(self) -> None:
        """Clear the transposition table."""
        if self.tt is not None:
            self.tt.clear()

    def reset(self) -> None:
        self.nodes_searched = 0
        self.clear_tt()
