from collections.abc import Callable

from tictactoe.position import BOARD_CELLS, WINNING_LINES, Position

MoveScorer = Callable[[Position, int], int]


class MoveSorter:
    """Fixed-capacity list of moves kept sorted by score.

    ``pop`` returns the best remaining move. Among equal scores the move added
    first comes out first, so a constant score keeps the insertion order.
    """

    CAPACITY = BOARD_CELLS

    def __init__(self) -> None:
        # ascending by score, best move at the end
        self.entries: list[tuple[int, int]] = []

    def clear(self) -> None:
        self.entries.clear()

    def add(self, move: int, score: int) -> None:
        if len(self.entries) >= self.CAPACITY:
            raise IndexError(f"move sorter holds at most {self.CAPACITY} moves")
        i = len(self.entries)
        while i and self.entries[i - 1][1] >= score:
            i -= 1
        self.entries.insert(i, (move, score))

    def pop(self) -> int | None:
        """Remove and return the highest-scoring move, or None when empty."""
        if not self.entries:
            return None
        return self.entries.pop()[0]

    def __len__(self) -> int:
        return len(self.entries)


def static_score(position: Position, move: int) -> int:
    """Constant score: moves are searched in the static center/corner/edge order."""
    return 0


def threat_score(position: Position, move: int) -> int:
    """Score a move by the lines through its cell.

    Completing one of our lines is worth 100, blocking an opponent's two-in-a-row
    is worth 10, and every line the opponent has not touched adds 1.
    """
    own = position.mover
    opponent = position.mover ^ position.mask
    score = 0
    for line in WINNING_LINES:
        if not line & move:
            continue
        if (own | move) & line == line:
            score += 100
        elif (opponent | move) & line == line:
            score += 10
        elif not opponent & line:
            score += 1
    return score
