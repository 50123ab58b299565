import argparse
import curses
import logging
import random
from typing import Callable, List, Optional

from config import get_log_file, get_log_level, load_config
from domain.constants import GameStatus
from domain.engine import advance
from domain.game_config import GameConfig
from domain.game_state import GameState, create_base_state
from domain.input_mapper import resolve_direction
from players.base import Player
from players.keyboard_player import KeyboardPlayer
from players.random_player import RandomPlayer
from services.frame_renderer import FrameRecorder, SnakeFrameRenderer
from services.text_renderer import render_rows, render_text, status_line
from services.tick_scheduler import TickScheduler

logger = logging.getLogger(__name__)

Listener = Callable[[GameState], None]

HEADLESS_MAX_TICKS = 1000


class SnakeGame:
    """
    Manages:
      - The single game state
      - The tick timer (acquired on start, released once when the game ends)
      - Input polling
      - Render listeners, notified after every tick
    """
    def __init__(
        self,
        config: Optional[GameConfig] = None,
        player: Optional[Player] = None,
        rng: Optional[random.Random] = None,
        scheduler: Optional[TickScheduler] = None
    ):
        self.config = config or GameConfig()
        self.player = player
        self.rng = rng
        self.scheduler = scheduler or TickScheduler()
        self.state = create_base_state(self.config, rng=rng)
        self.listeners: List[Listener] = []
        self.game_result: Optional[str] = None

    def add_listener(self, listener: Listener):
        self.listeners.append(listener)

    def notify(self):
        for listener in self.listeners:
            listener(self.state)

    def start(self):
        """Acquire the tick timer and render the initial frame."""
        if self.state.timer_handle is not None:
            raise RuntimeError("Game already started.")
        if self.state.is_over:
            raise RuntimeError("Game is already over.")

        self.state.timer_handle = self.scheduler.start(self.config.tick_seconds, self.run_tick)
        logger.info(
            f"Started {self.config.width}x{self.config.height} game, "
            f"snake at {list(self.state.snake)}, food at {self.state.food}"
        )
        self.notify()

    def handle_key(self, key: str):
        """Apply a key press; it takes effect on the next tick."""
        if self.state.is_over:
            return
        self.state.direction = resolve_direction(key, self.state.direction)

    def poll_input(self):
        if self.player is None:
            return
        while True:
            key = self.player.get_key(self.state)
            if key is None:
                return
            self.handle_key(key)

    def run_tick(self):
        """Advance one tick; on a terminal status release the timer, then render."""
        if self.state.is_over:
            logger.warning("Tick fired after the game ended; ignoring.")
            return

        advance(self.state, rng=self.rng)

        if self.state.is_over:
            self._release_timer()
            self.end_game()

        self.notify()

    def _release_timer(self):
        if self.scheduler.cancel():
            logger.debug(f"Released timer after tick {self.state.tick_count}")
        self.state.timer_handle = None

    def stop(self):
        """Tear the game down, cancelling the timer if it is still running."""
        if self.state.timer_handle is not None:
            self._release_timer()

    def end_game(self):
        if self.state.status == GameStatus.LOST:
            self.game_result = f"Snake hit the {self.state.death_reason}"
        else:
            self.game_result = "Snake filled the board"
        logger.info(f"Game Over: {self.game_result}.")

    def run(self, max_ticks: Optional[int] = None) -> GameState:
        """
        Run the cooperative loop until the game ends, the player quits or
        `max_ticks` ticks have been processed.
        """
        if self.state.timer_handle is None:
            self.start()

        try:
            while self.scheduler.active:
                self.poll_input()
                if self.player is not None and self.player.wants_quit():
                    logger.info("Player quit.")
                    break

                self.scheduler.run_pending()

                if max_ticks is not None and self.state.tick_count >= max_ticks:
                    logger.info(f"Reached max ticks ({max_ticks}).")
                    break

                if self.scheduler.active:
                    self.scheduler.sleep_until_next()
        finally:
            self.stop()

        return self.state


# -------------------------------
# Terminal front ends
# -------------------------------

def _check_terminal_size(window, config: GameConfig):
    max_y, max_x = window.getmaxyx()
    needed_y = config.height + 2
    needed_x = config.width * 2
    if max_y < needed_y or max_x < needed_x:
        raise RuntimeError(
            f"Terminal is {max_x}x{max_y}; the board needs at least {needed_x}x{needed_y}."
        )


def _curses_listener(window) -> Listener:
    def draw(state: GameState):
        window.erase()
        for y, row in enumerate(render_rows(state)):
            window.addstr(y, 0, row)
        _, max_x = window.getmaxyx()
        window.addstr(state.height, 0, status_line(state)[:max_x - 1])
        window.refresh()
    return draw


def run_curses(window, game: SnakeGame, max_ticks: Optional[int] = None) -> GameState:
    """Play with the arrow keys inside a curses window (q quits)."""
    curses.curs_set(0)
    _check_terminal_size(window, game.config)

    game.player = KeyboardPlayer(window)
    game.add_listener(_curses_listener(window))
    state = game.run(max_ticks=max_ticks)

    if state.is_over:
        _, max_x = window.getmaxyx()
        window.addstr(state.height + 1, 0, "Game over - press any key"[:max_x - 1])
        window.nodelay(False)
        window.getch()
    return state


def configure_logging(headless: bool):
    """
    Log to SNAKE_LOG_FILE when set. Otherwise headless runs log to stderr and
    the curses UI drops log records, since stderr shares the screen with the board.
    """
    log_file = get_log_file()
    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file)
    elif headless:
        handler = logging.StreamHandler()
    else:
        handler = logging.NullHandler()

    logging.basicConfig(
        level=get_log_level(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[handler]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play snake in the terminal with the arrow keys."
    )
    parser.add_argument("--width", type=int, required=False, default=None,
                        help="Board width in cells (env SNAKE_BOARD_WIDTH, default 17)")
    parser.add_argument("--height", type=int, required=False, default=None,
                        help="Board height in cells (env SNAKE_BOARD_HEIGHT, default 17)")
    parser.add_argument("--tick-ms", type=int, required=False, default=None,
                        help="Tick interval in milliseconds (env SNAKE_TICK_MS, default 180)")
    parser.add_argument("--seed", type=int, required=False, default=None,
                        help="Seed for food placement and the autopilot")
    parser.add_argument("--headless", action="store_true",
                        help="Let the random autopilot play and print each frame as text")
    parser.add_argument("--max-ticks", type=int, required=False, default=None,
                        help=f"Stop after this many ticks (headless default {HEADLESS_MAX_TICKS})")
    parser.add_argument("--snapshot", type=str, required=False, default=None,
                        help="Save the final frame as an image (e.g. final.png)")
    parser.add_argument("--record", type=str, required=False, default=None,
                        help="Record every frame to an animated GIF")
    return parser


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(headless=args.headless)

    try:
        config = load_config(width=args.width, height=args.height, tick_ms=args.tick_ms)
    except ValueError as e:
        parser.error(str(e))

    if args.max_ticks is not None and args.max_ticks <= 0:
        parser.error("--max-ticks must be positive")

    rng = random.Random(args.seed)
    game = SnakeGame(config=config, rng=rng)

    renderer = SnakeFrameRenderer()
    recorder = None
    if args.record:
        recorder = FrameRecorder(renderer, frame_duration_ms=config.tick_ms)
        game.add_listener(recorder)

    if args.headless:
        game.player = RandomPlayer(rng=random.Random(args.seed))
        game.add_listener(lambda state: print("\n" + render_text(state) + "\n"))
        max_ticks = args.max_ticks if args.max_ticks is not None else HEADLESS_MAX_TICKS
        state = game.run(max_ticks=max_ticks)
    else:
        state = curses.wrapper(run_curses, game, args.max_ticks)

    if game.game_result:
        print(f"\nGame Over: {game.game_result}.")
    print(f"Final status: {state.status.value} after {state.tick_count} ticks, "
          f"length {len(state.snake)}")

    if args.snapshot:
        renderer.save_frame(state, args.snapshot)
        print(f"Saved final frame to {args.snapshot}")
    if recorder is not None:
        recorder.save_gif(args.record)
        print(f"Saved {len(recorder.frames)} frames to {args.record}")

    return state


if __name__ == "__main__":
    main()
