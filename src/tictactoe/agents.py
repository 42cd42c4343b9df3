"""Move sources that drive a game: search-based, random and human players."""

import logging
import random
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Literal

from tictactoe.position import BOARD_CELLS, Position, cell_mask
from tictactoe.solver.negamax import NegamaxSolver
from tictactoe.solver.ordering import threat_score

logger = logging.getLogger(__name__)

AgentKind = Literal["perfect", "search", "random", "human"]


class Agent(ABC):
    """Something that picks a move for the player to move."""

    name = "agent"

    @abstractmethod
    def select_move(self, position: Position) -> int:
        """Return a one-hot move for ``position``.

        The position is left unchanged. Raises ValueError if the game is over.
        """

    def node_visit_count(self) -> int:
        return 0

    def reset(self) -> None:
        pass

    def _check_playable(self, position: Position) -> None:
        if position.full() or position.opponent_winning() or position.winning():
            raise ValueError(f"no move to select, game is over:\n{position}")


class SolverAgent(Agent):
    """Delegates move selection to a NegamaxSolver."""

    def __init__(self, solver: NegamaxSolver):
        self.solver = solver

    def select_move(self, position: Position) -> int:
        self._check_playable(position)
        move = self.solver.get_best_move(position)
        assert move is not None
        logger.debug("%s agent visited %d nodes so far", self.name, self.solver.nodes_searched)
        return move

    def node_visit_count(self) -> int:
        return self.solver.nodes_searched

    def reset(self) -> None:
        self.solver.reset()


class PerfectAgent(SolverAgent):
    """Plays perfectly using negamax with a transposition table."""

    name = "perfect"

    def __init__(self, solver: NegamaxSolver | None = None):
        super().__init__(solver or NegamaxSolver())


class SearchAgent(SolverAgent):
    """Plain alpha-beta without the transposition table, ordering moves by threats."""

    name = "search"

    def __init__(self) -> None:
        super().__init__(NegamaxSolver(use_tt=False, move_scorer=threat_score))


class RandomAgent(Agent):
    """Picks a uniformly random legal move."""

    name = "random"

    def __init__(self, rng: random.Random | None = None, seed: int | None = None):
        self.rng = rng or random.Random(seed)

    def select_move(self, position: Position) -> int:
        self._check_playable(position)
        return self.rng.choice(list(position.moves()))


class HumanAgent(Agent):
    """Reads moves from a person. Cells are numbered 1-9, row by row."""

    name = "human"

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self.input_fn = input_fn
        self.output_fn = output_fn

    def select_move(self, position: Position) -> int:
        self._check_playable(position)
        legal = position.legal_moves()
        choices = [cell + 1 for cell in range(BOARD_CELLS) if legal & cell_mask(cell)]
        player = "XO"[position.current_player()]

        while True:
            try:
                choice = int(self.input_fn(f"Player {player}, choose cell {choices}: "))
                if choice in choices:
                    return cell_mask(choice - 1)
                self.output_fn(f"Invalid choice. Pick from {choices}")
            except ValueError:
                self.output_fn("Enter a number.")
            except EOFError:
                raise SystemExit from None


def make_agent(kind: AgentKind, rng: random.Random | None = None) -> Agent:
    """Build an agent from its CLI name."""
    match kind:
        case "perfect":
            return PerfectAgent()
        case "search":
            return SearchAgent()
        case "random":
            return RandomAgent(rng)
        case "human":
            return HumanAgent()
        case _:
            raise ValueError(f"Unknown agent kind: {kind}")
