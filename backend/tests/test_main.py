"""
Tests for main.py - the game session and command line entry point.
"""

import logging
import os
import random
import sys
from unittest.mock import Mock, patch

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from main import SnakeGame, configure_logging, main, run_curses
from domain.constants import UP, DOWN, LEFT, RIGHT, GameStatus
from domain.game_config import GameConfig
from domain.game_state import GameState
from domain.snake import Snake
from players.base import Player


BOARD_SIZE = 10


def make_game(positions, direction, food=(9, 9), tick_ms=1, player=None):
    config = GameConfig(width=BOARD_SIZE, height=BOARD_SIZE, tick_ms=tick_ms)
    game = SnakeGame(
        config=config,
        player=player,
        rng=random.Random(0)
    )
    game.state = GameState(Snake(positions), food, config.width, config.height, direction=direction)
    return game


def serpentine_path(width, height):
    """Every board cell, row by row, alternating direction."""
    path = []
    for y in range(height):
        xs = range(width) if y % 2 == 0 else reversed(range(width))
        path.extend((x, y) for x in xs)
    return path


class ScriptedPlayer(Player):
    """Presses the given keys once, in order."""

    def __init__(self, keys, quit_after=False):
        self.keys = list(keys)
        self.quit_after = quit_after

    def get_key(self, game_state):
        if self.keys:
            return self.keys.pop(0)
        return None

    def wants_quit(self):
        return self.quit_after


class TestSnakeGame:
    """Tests for the SnakeGame session."""

    def test_game_initialization(self):
        game = SnakeGame(rng=random.Random(0))

        assert game.config == GameConfig()
        assert list(game.state.snake) == [(9, 9), (9, 10), (9, 11)]
        assert game.state.status == GameStatus.IN_GAME
        assert game.listeners == []
        assert game.scheduler.active is False
        assert game.game_result is None

    def test_start_acquires_timer_and_renders(self):
        game = SnakeGame(rng=random.Random(0))
        listener = Mock()
        game.add_listener(listener)

        game.start()

        assert game.state.timer_handle is not None
        assert game.scheduler.active is True
        listener.assert_called_once_with(game.state)

    def test_start_twice_raises(self):
        game = SnakeGame(rng=random.Random(0))
        game.start()
        with pytest.raises(RuntimeError):
            game.start()

    def test_handle_key(self):
        game = make_game([(5, 5), (5, 6), (5, 7)], UP)

        game.handle_key("ArrowDown")
        assert game.state.direction == UP

        game.handle_key("ArrowLeft")
        assert game.state.direction == LEFT

        game.handle_key("x")
        assert game.state.direction == LEFT

    def test_direction_applies_on_next_tick(self):
        game = make_game([(5, 5), (5, 6), (5, 7)], UP)
        game.start()

        game.handle_key("ArrowRight")
        assert game.state.snake.head == (5, 5)

        game.run_tick()
        assert game.state.snake.head == (6, 5)

    def test_feeding_tick(self):
        game = make_game([(2, 2), (2, 3), (2, 4)], UP, food=(2, 1))
        game.start()

        game.run_tick()

        assert len(game.state.snake) == 4
        assert game.state.status == GameStatus.IN_GAME
        assert game.state.food not in {(2, 1), (2, 2), (2, 3), (2, 4)}
        assert game.scheduler.active is True

    def test_losing_tick_cancels_timer_once_and_renders_final_frame(self):
        game = make_game([(0, 2), (1, 2), (2, 2)], LEFT, food=(4, 4))
        listener = Mock()
        game.add_listener(listener)
        game.start()

        with patch.object(game.scheduler.scheduler, 'cancel_job',
                          wraps=game.scheduler.scheduler.cancel_job) as cancel_job:
            game.run_tick()
            game.stop()

        cancel_job.assert_called_once()
        assert game.state.status == GameStatus.LOST
        assert game.state.snake.head == (-1, 2)
        assert game.state.timer_handle is None
        assert game.scheduler.active is False
        assert game.scheduler.scheduler.jobs == []
        assert game.game_result == "Snake hit the wall"
        # Initial frame plus the losing frame
        assert listener.call_count == 2

    def test_tick_after_loss_is_ignored(self):
        game = make_game([(0, 2), (1, 2), (2, 2)], LEFT, food=(4, 4))
        game.start()
        game.run_tick()

        game.run_tick()

        assert game.state.tick_count == 1

    def test_key_after_loss_is_ignored(self):
        game = make_game([(0, 2), (1, 2), (2, 2)], LEFT, food=(4, 4))
        game.start()
        game.run_tick()

        game.handle_key("ArrowUp")

        assert game.state.direction == LEFT

    def test_winning_tick(self):
        """The snake covers every cell but the food, then eats it."""
        path = serpentine_path(BOARD_SIZE, BOARD_SIZE)
        game = make_game(path[1:], LEFT, food=path[0])
        game.start()

        game.run_tick()

        assert game.state.status == GameStatus.WON
        assert game.game_result == "Snake filled the board"
        assert len(game.state.snake) == game.config.width * game.config.height
        assert game.scheduler.active is False

    def test_stop_releases_timer(self):
        game = SnakeGame(rng=random.Random(0))
        game.start()

        game.stop()
        game.stop()

        assert game.state.timer_handle is None
        assert game.scheduler.active is False


class TestRunLoop:
    """Tests for SnakeGame.run()."""

    def test_runs_until_the_wall(self):
        game = make_game([(1, 5), (2, 5), (3, 5)], LEFT)

        state = game.run()

        assert state.status == GameStatus.LOST
        assert state.tick_count == 2
        assert game.scheduler.active is False

    def test_stops_at_max_ticks(self):
        game = make_game([(5, 7), (5, 8), (5, 9)], UP)

        state = game.run(max_ticks=3)

        assert state.tick_count == 3
        assert state.status == GameStatus.IN_GAME
        assert state.snake.head == (5, 4)
        assert game.scheduler.active is False

    def test_player_keys_are_applied_in_order(self):
        """Left then Down is accepted key by key, as with a real keyboard."""
        player = ScriptedPlayer(["ArrowLeft", "ArrowDown"])
        game = make_game([(5, 5), (5, 6), (5, 7)], UP, player=player)

        state = game.run(max_ticks=1)

        assert state.direction == DOWN
        # Down from (5, 5) lands on the neck
        assert state.status == GameStatus.LOST

    def test_player_quit(self):
        game = make_game([(5, 5), (5, 6), (5, 7)], UP, player=ScriptedPlayer([], quit_after=True))

        state = game.run()

        assert state.tick_count == 0
        assert game.scheduler.active is False


@patch('config.load_dotenv')
class TestMain:
    """Tests for the command line entry point."""

    def test_headless_run(self, mock_load_dotenv, capsys):
        state = main([
            "--headless", "--width", "10", "--height", "10",
            "--tick-ms", "1", "--max-ticks", "3", "--seed", "7"
        ])

        assert state.tick_count == 3
        out = capsys.readouterr().out
        assert "Final status: IN_GAME after 3 ticks" in out
        assert "@" in out

    def test_snapshot_and_record(self, mock_load_dotenv, tmp_path, capsys):
        snapshot = tmp_path / "final.png"
        record = tmp_path / "game.gif"

        main([
            "--headless", "--width", "10", "--height", "10",
            "--tick-ms", "1", "--max-ticks", "2", "--seed", "3",
            "--snapshot", str(snapshot), "--record", str(record)
        ])

        assert snapshot.exists()
        assert record.exists()
        out = capsys.readouterr().out
        assert "Saved 3 frames" in out

    def test_invalid_board_exits(self, mock_load_dotenv):
        with pytest.raises(SystemExit):
            main(["--headless", "--width", "0"])

    def test_invalid_max_ticks_exits(self, mock_load_dotenv):
        with pytest.raises(SystemExit):
            main(["--headless", "--max-ticks", "0"])

    @patch('main.curses.wrapper')
    def test_interactive_uses_curses(self, mock_wrapper, mock_load_dotenv):
        final_state = GameState(Snake([(5, 5), (5, 6), (5, 7)]), (0, 0), 10, 10)
        mock_wrapper.return_value = final_state

        state = main(["--width", "10", "--height", "10"])

        assert state is final_state
        args = mock_wrapper.call_args[0]
        assert args[0] is run_curses
        assert isinstance(args[1], SnakeGame)


class TestConfigureLogging:
    """Log output must stay off the screen while curses draws the board."""

    @patch('main.logging.basicConfig')
    def test_curses_mode_discards_logs(self, mock_basic_config, monkeypatch):
        monkeypatch.delenv("SNAKE_LOG_FILE", raising=False)

        configure_logging(headless=False)

        handlers = mock_basic_config.call_args.kwargs["handlers"]
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.NullHandler)

    @patch('main.logging.basicConfig')
    def test_headless_mode_logs_to_stderr(self, mock_basic_config, monkeypatch):
        monkeypatch.delenv("SNAKE_LOG_FILE", raising=False)

        configure_logging(headless=True)

        handler = mock_basic_config.call_args.kwargs["handlers"][0]
        assert type(handler) is logging.StreamHandler

    @patch('main.logging.basicConfig')
    def test_log_file_in_either_mode(self, mock_basic_config, monkeypatch, tmp_path):
        log_file = tmp_path / "snake.log"
        monkeypatch.setenv("SNAKE_LOG_FILE", str(log_file))

        configure_logging(headless=False)

        handler = mock_basic_config.call_args.kwargs["handlers"][0]
        assert isinstance(handler, logging.FileHandler)
        assert handler.baseFilename == str(log_file)
        handler.close()

    @patch('main.curses.wrapper')
    @patch('main.configure_logging')
    @patch('config.load_dotenv')
    def test_main_configures_for_curses(self, mock_load_dotenv, mock_configure, mock_wrapper):
        mock_wrapper.return_value = GameState(Snake([(5, 5), (5, 6), (5, 7)]), (0, 0), 10, 10)

        main(["--width", "10", "--height", "10"])

        mock_configure.assert_called_once_with(headless=False)


class TestRunCurses:
    """Tests for the curses front end with a fake window."""

    @patch('main.curses.curs_set')
    def test_draws_frames(self, mock_curs_set):
        window = Mock()
        window.getmaxyx.return_value = (40, 80)
        window.getch.return_value = -1
        game = make_game([(5, 5), (5, 6), (5, 7)], UP)

        state = run_curses(window, game, max_ticks=2)

        assert state.tick_count == 2
        assert window.addstr.called
        window.refresh.assert_called()

    @patch('main.curses.curs_set')
    def test_small_terminal_raises(self, mock_curs_set):
        window = Mock()
        window.getmaxyx.return_value = (5, 10)
        game = make_game([(5, 5), (5, 6), (5, 7)], UP)

        with pytest.raises(RuntimeError):
            run_curses(window, game)
