"""Bitboard representation of a 3x3 tic-tac-toe position.

Cells are numbered row by row and mapped to bits with cell 0 as the most
significant of the nine relevant bits:

    0 1 2        bit 8 7 6
    3 4 5   ->       5 4 3
    6 7 8            2 1 0

A position keeps two masks: ``mover`` holds the cells of the player whose turn
it is and ``mask`` holds every occupied cell. The other player's cells are
``mover ^ mask``, so playing a move only has to flip the perspective.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

BOARD_CELLS = 9
FULL_MASK = 0b111111111

# fastest win is at ply 5: (11 - 5) // 2
MAX_SCORE = 3
MIN_SCORE = -3

WINNING_LINES = (
    0b111000000,
    0b000111000,
    0b000000111,
    0b100100100,
    0b010010010,
    0b001001001,
    0b100010001,
    0b001010100,
)

# center, corners, edges
MOVE_ORDER = (4, 0, 2, 6, 8, 1, 3, 5, 7)


def cell_mask(cell: int) -> int:
    """Return the one-hot bitmask for a cell index in 0..8."""
    assert 0 <= cell < BOARD_CELLS, f"cell out of range: {cell}"
    return 1 << (BOARD_CELLS - 1 - cell)


def check_winning(bits: int) -> bool:
    """True if ``bits`` covers any of the 8 winning lines."""
    return any(bits & line == line for line in WINNING_LINES)


@dataclass(slots=True)
class Position:
    """A mutable board, changed in place by ``play``/``undo`` pairs."""

    mover: int = 0
    mask: int = 0
    ply: int = 0

    @classmethod
    def from_moves(cls, cells: Iterable[int]) -> "Position":
        """Build a position by playing cells alternately, X first."""
        position = cls()
        for cell in cells:
            position.play_cell(cell)
        return position

    def key(self) -> int:
        """Collision-free key of the position, used by the transposition table.

        The occupancy mask sits above the mover bits, so both masks can be read
        back from the key.
        """
        return (self.mask << BOARD_CELLS) | self.mover

    def winning(self) -> bool:
        """True if the player to move already holds a complete line."""
        return check_winning(self.mover)

    def opponent_winning(self) -> bool:
        """True if the player who just moved holds a complete line."""
        return check_winning(self.mover ^ self.mask)

    def full(self) -> bool:
        return self.ply == BOARD_CELLS

    def score(self) -> int:
        """Magnitude of a win reached at the current ply: 3 at ply 5 down to 1 at ply 9.

        Only meaningful at terminal positions; the caller applies the sign.
        """
        return (11 - self.ply) // 2

    def legal_moves(self) -> int:
        """Bitmask of the empty cells."""
        return ~self.mask & FULL_MASK

    def moves(self) -> Iterator[int]:
        """Yield the legal one-hot moves in static priority order."""
        legal = self.legal_moves()
        for cell in MOVE_ORDER:
            move = legal & cell_mask(cell)
            if move:
                yield move

    def play(self, move: int) -> None:
        """Play a one-hot move for the player to move."""
        assert move and move & (move - 1) == 0, f"not a single cell: {move:#011b}"
        assert not move & self.mask, f"cell already occupied: {move:#011b}"
        # the previous opponent becomes the mover
        self.mover ^= self.mask
        self.mask |= move
        self.ply += 1

    def undo(self, move: int) -> None:
        """Take back ``move``.

        Must be the most recent move played and not yet undone; moves are
        undone in strict LIFO order and this is not checked.
        """
        self.mask ^= move
        self.mover ^= self.mask
        self.ply -= 1

    def play_cell(self, cell: int) -> None:
        self.play(cell_mask(cell))

    def current_player(self) -> int:
        """0 when X is to move, 1 when O is to move."""
        return self.ply & 1

    def player_bits(self) -> tuple[int, int]:
        """Return ``(x_bits, o_bits)`` independent of whose turn it is."""
        other = self.mover ^ self.mask
        if self.ply & 1:
            return other, self.mover
        return self.mover, other

    def cell(self, cell: int) -> str | None:
        x_bits, o_bits = self.player_bits()
        bit = cell_mask(cell)
        if x_bits & bit:
            return "X"
        if o_bits & bit:
            return "O"
        return None

    def render(self) -> str:
        rows = []
        for row in range(3):
            marks = (self.cell(row * 3 + col) or "." for col in range(3))
            rows.append(" ".join(marks))
        return "\n".join(rows)

    def copy(self) -> "Position":
        return Position(self.mover, self.mask, self.ply)

    def __str__(self) -> str:
        return self.render()
