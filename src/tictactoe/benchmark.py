import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from tictactoe.agents import Agent
from tictactoe.position import Position

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    trials: int
    average_us: float
    moves: list[int]
    node_counts: list[int]


@dataclass
class MatchResult:
    winner: int  # 0 draw, 1 X, 2 O
    moves: list[int]
    final: Position
    elapsed_us: float


def benchmark(agent: Agent, trials: int) -> BenchmarkResult:
    """Time move selection on the empty board.

    The agent is reset after every trial, so each trial starts from an empty
    transposition table and a zero node counter.
    """
    if trials <= 0:
        raise ValueError(f"trials must be positive, got {trials}")

    position = Position()
    total_ns = 0
    moves: list[int] = []
    node_counts: list[int] = []

    for _ in range(trials):
        start = time.perf_counter_ns()
        move = agent.select_move(position)
        total_ns += time.perf_counter_ns() - start

        moves.append(move)
        node_counts.append(agent.node_visit_count())
        agent.reset()

    average_us = total_ns / trials / 1000
    logger.info("%s agent: %d trials, average %.1f us", agent.name, trials, average_us)
    return BenchmarkResult(trials, average_us, moves, node_counts)


def match(
    x_agent: Agent,
    o_agent: Agent,
    on_move: Callable[[Position, int], None] | None = None,
) -> MatchResult:
    """Play one game between two agents, X first."""
    agents = (x_agent, o_agent)
    position = Position()
    moves: list[int] = []
    winner = 0

    start = time.perf_counter_ns()
    while not position.full():
        player = position.current_player()
        move = agents[player].select_move(position)
        position.play(move)
        moves.append(move)
        if on_move is not None:
            on_move(position, move)

        if position.opponent_winning():
            winner = player + 1
            break
    elapsed_us = (time.perf_counter_ns() - start) / 1000

    logger.info(
        "%s vs %s: winner %d after %d moves", x_agent.name, o_agent.name, winner, len(moves)
    )
    return MatchResult(winner, moves, position, elapsed_us)
