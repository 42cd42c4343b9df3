import pytest

from tictactoe import Position
from tictactoe.cli import Config, main, parse_initial_state, run_terminal_game


def test_parse_initial_state() -> None:
    assert parse_initial_state(Config()) == Position()
    assert parse_initial_state(Config(moves="5, 1")) == Position.from_moves([4, 0])


def test_parse_initial_state_rejects_bad_cells() -> None:
    with pytest.raises(AssertionError):
        parse_initial_state(Config(moves="5,5"))
    with pytest.raises(AssertionError):
        parse_initial_state(Config(moves="0"))


def test_terminal_game_between_agents(capsys: pytest.CaptureFixture[str]) -> None:
    run_terminal_game(Config(x="perfect", o="search"))
    out = capsys.readouterr().out
    assert "Perfect plays cell 5" in out
    assert "GAME OVER" in out
    assert "Draw!" in out


def test_terminal_game_from_opening(capsys: pytest.CaptureFixture[str]) -> None:
    # X threatens the top row and O ignores it
    run_terminal_game(Config(x="perfect", o="perfect", moves="1,5,2,9"))
    out = capsys.readouterr().out
    assert "Perfect plays cell 3" in out
    assert "Player X wins!" in out


def test_main_match(capsys: pytest.CaptureFixture[str]) -> None:
    main(Config(mode="match", x="perfect", o="perfect"))
    out = capsys.readouterr().out
    assert "Winner: none (draw)" in out


def test_main_benchmark(capsys: pytest.CaptureFixture[str]) -> None:
    main(Config(mode="benchmark", agent="perfect", trials=2))
    out = capsys.readouterr().out
    assert "Trials: 2" in out
    assert "Nodes per trial:" in out
