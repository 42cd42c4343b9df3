import logging
import random
from dataclasses import dataclass
from typing import Literal

import tyro

from tictactoe.agents import AgentKind, make_agent
from tictactoe.benchmark import benchmark, match
from tictactoe.position import BOARD_CELLS, Position


@dataclass
class Config:
    """Tic-tac-toe solver configuration."""

    mode: Literal["play", "match", "benchmark"] = "play"
    """play: one game, match: agents play and report timing, benchmark: time the first move."""

    # players
    x: AgentKind = "human"
    """Player X type."""

    o: AgentKind = "perfect"
    """Player O type."""

    seed: int | None = None
    """Seed for random players."""

    # benchmark
    trials: int = 1000
    """Number of benchmark trials on the empty board."""

    agent: AgentKind = "perfect"
    """Agent to benchmark."""

    # display
    gui: bool = False
    """Use pygame GUI instead of terminal."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    """Logging level for search and harness diagnostics."""

    # initial state
    moves: str | None = None
    """Opening cells (1-9) as comma-separated values, played alternately from X. Example: '5,1'"""


def print_board(position: Position) -> None:
    """Print the board to terminal."""
    print()
    print(position.render())
    print()


def parse_initial_state(config: Config) -> Position:
    """Parse the opening from config, returning an empty or custom position."""
    if not config.moves:
        return Position()

    cells = [int(x.strip()) - 1 for x in config.moves.split(",")]
    assert all(0 <= c < BOARD_CELLS for c in cells), "Cells must be between 1 and 9"
    assert len(set(cells)) == len(cells), "Cells must not repeat"

    position = Position()
    for cell in cells:
        assert not position.opponent_winning(), "Opening continues after a win"
        position.play_cell(cell)
    return position


def run_terminal_game(config: Config) -> None:
    """Run a single game in terminal mode."""
    rng = random.Random(config.seed)
    position = parse_initial_state(config)
    agents = [make_agent(config.x, rng), make_agent(config.o, rng)]

    print("Tic-tac-toe - Terminal Mode")
    print("=" * 40)
    print(f"Players: X={config.x}, O={config.o}")

    while not position.full() and not position.opponent_winning():
        print_board(position)
        player = position.current_player()
        agent = agents[player]
        print(f"Player {'XO'[player]}'s turn ({agent.name})")

        move = agent.select_move(position)
        if agent.name != "human":
            cell = BOARD_CELLS - move.bit_length()
            print(f"{agent.name.capitalize()} plays cell {cell + 1}")
        position.play(move)

    # game over
    print_board(position)
    print("=" * 40)
    print("GAME OVER")

    if position.opponent_winning():
        print(f"Player {'XO'[1 - position.current_player()]} wins!")
    else:
        print("Draw!")


def run_match(config: Config) -> None:
    """Let two agents play, printing every move and the game time."""
    rng = random.Random(config.seed)
    x_agent = make_agent(config.x, rng)
    o_agent = make_agent(config.o, rng)

    print_board(Position())
    result = match(x_agent, o_agent, on_move=lambda position, _: print_board(position))

    winner = {0: "none (draw)", 1: "X", 2: "O"}[result.winner]
    print(f"Winner: {winner}")
    print(f"Time: {result.elapsed_us:.0f} us")


def run_benchmark(config: Config) -> None:
    """Time the first move on the empty board."""
    agent = make_agent(config.agent, random.Random(config.seed))
    result = benchmark(agent, config.trials)

    print(f"Agent: {agent.name}")
    print(f"Trials: {result.trials}")
    print(f"Average time: {result.average_us:.1f} microseconds")
    print(f"Nodes per trial: {max(result.node_counts)}")


def main(config: Config | None = None) -> None:
    """Main entry point."""
    if config is None:
        config = tyro.cli(Config)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if config.mode == "benchmark":
        run_benchmark(config)
    elif config.mode == "match":
        run_match(config)
    elif config.gui:
        from tictactoe.gui.app import run_gui

        run_gui(
            x_type=config.x,
            o_type=config.o,
            seed=config.seed,
            initial_state=parse_initial_state(config),
        )
    else:
        run_terminal_game(config)


if __name__ == "__main__":
    main()
