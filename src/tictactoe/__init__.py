from tictactoe.agents import (
    Agent,
    HumanAgent,
    PerfectAgent,
    RandomAgent,
    SearchAgent,
    SolverAgent,
    make_agent,
)
from tictactoe.position import (
    MAX_SCORE,
    MIN_SCORE,
    MOVE_ORDER,
    WINNING_LINES,
    Position,
    cell_mask,
    check_winning,
)

__all__ = [
    "Position",
    "cell_mask",
    "check_winning",
    "MAX_SCORE",
    "MIN_SCORE",
    "MOVE_ORDER",
    "WINNING_LINES",
    "Agent",
    "PerfectAgent",
    "SearchAgent",
    "SolverAgent",
    "RandomAgent",
    "HumanAgent",
    "make_agent",
]
