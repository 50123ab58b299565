"""
Image rendering for snake game states

This service draws each game state as a Pillow image:
- Board with grid lines
- Food cell
- Snake body, with a darker head and eyes facing the current direction
- Status bar with tick count, length and game status

Single frames can be saved as PNG; a FrameRecorder collects one frame per
tick and writes them out as an animated GIF.
"""

import logging
import os
from typing import List, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from domain.board import get_field
from domain.constants import CellKind, Direction, GameStatus
from domain.game_state import GameState

logger = logging.getLogger(__name__)

CELL_SIZE = 24  # Size of each grid cell in pixels
STATUS_BAR_HEIGHT = 32
DEFAULT_FRAME_DURATION_MS = 180


class ColorScheme:
    """Color configuration for rendered frames"""

    SNAKE = "#4F7022"
    FOOD = "#EA2014"

    # Game board
    BACKGROUND = "#FFFFFF"
    GRID_LINE = "#E5E7EB"
    BORDER = "#646464"

    # Status bar
    STATUS_BG = "#1a1f2e"
    STATUS_TEXT = "#FFFFFF"
    LOST_TEXT = "#C86464"
    WON_TEXT = "#64C864"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def darken_color(hex_color: str, amount: float = 0.3) -> Tuple[int, int, int]:
    """Darken a hex color by a given amount"""
    r, g, b = hex_to_rgb(hex_color)
    r = max(0, int(r * (1 - amount)))
    g = max(0, int(g * (1 - amount)))
    b = max(0, int(b * (1 - amount)))
    return (r, g, b)


class SnakeFrameRenderer:
    """Render game states to Pillow images"""

    def __init__(self, cell_size: int = CELL_SIZE):
        if cell_size < 4:
            raise ValueError(f"cell_size must be at least 4 pixels, got {cell_size}")
        self.cell_size = cell_size

        try:
            self.font = ImageFont.truetype("DejaVuSans.ttf", 14)
        except OSError:
            self.font = ImageFont.load_default()

    def frame_size(self, state: GameState) -> Tuple[int, int]:
        return (
            state.width * self.cell_size,
            state.height * self.cell_size + STATUS_BAR_HEIGHT,
        )

    def render_frame(self, state: GameState) -> Image.Image:
        """Render a single frame of the game"""
        img = Image.new('RGB', self.frame_size(state), hex_to_rgb(ColorScheme.BACKGROUND))
        draw = ImageDraw.Draw(img)

        self._draw_grid(draw, state)

        field = get_field(state)
        for y, row in enumerate(field):
            for x, cell in enumerate(row):
                if cell == CellKind.FOOD:
                    self._draw_cell(draw, x, y, hex_to_rgb(ColorScheme.FOOD), padding=3)
                elif cell == CellKind.SNAKE:
                    self._draw_cell(draw, x, y, hex_to_rgb(ColorScheme.SNAKE), padding=1)

        self._draw_head(draw, state)
        self._draw_status_bar(draw, state)
        return img

    def _draw_grid(self, draw: ImageDraw.ImageDraw, state: GameState):
        board_width = state.width * self.cell_size
        board_height = state.height * self.cell_size

        for i in range(state.width + 1):
            draw.line(
                [i * self.cell_size, 0, i * self.cell_size, board_height],
                fill=hex_to_rgb(ColorScheme.GRID_LINE),
                width=1
            )

        for i in range(state.height + 1):
            draw.line(
                [0, i * self.cell_size, board_width, i * self.cell_size],
                fill=hex_to_rgb(ColorScheme.GRID_LINE),
                width=1
            )

        draw.rectangle(
            [0, 0, board_width - 1, board_height - 1],
            outline=hex_to_rgb(ColorScheme.BORDER),
            width=2
        )

    def _draw_cell(
        self,
        draw: ImageDraw.ImageDraw,
        x: int,
        y: int,
        color: Tuple[int, int, int],
        padding: int = 1
    ):
        """Draw a single board cell (snake body or food)"""
        left = x * self.cell_size
        top = y * self.cell_size
        draw.rectangle(
            [left + padding, top + padding, left + self.cell_size - padding, top + self.cell_size - padding],
            fill=color
        )

    def _draw_head(self, draw: ImageDraw.ImageDraw, state: GameState):
        head_x, head_y = state.snake.head
        # A crash into the wall leaves the head off the board
        if not (0 <= head_x < state.width and 0 <= head_y < state.height):
            return

        self._draw_cell(draw, head_x, head_y, darken_color(ColorScheme.SNAKE, 0.3), padding=0)

        size = self.cell_size
        eye_size = max(2, size // 5)
        left = head_x * size
        top = head_y * size

        # Eyes sit on the side of the head facing the direction of travel
        if state.direction in (Direction.UP, Direction.DOWN):
            eye_y = top + size // 4 if state.direction == Direction.UP else top + 3 * size // 4 - eye_size
            eyes = [(left + size // 4, eye_y), (left + 3 * size // 4 - eye_size, eye_y)]
        else:
            eye_x = left + size // 4 if state.direction == Direction.LEFT else left + 3 * size // 4 - eye_size
            eyes = [(eye_x, top + size // 4), (eye_x, top + 3 * size // 4 - eye_size)]

        for ex, ey in eyes:
            draw.ellipse([ex, ey, ex + eye_size, ey + eye_size], fill=(255, 255, 255))

    def _draw_status_bar(self, draw: ImageDraw.ImageDraw, state: GameState):
        board_height = state.height * self.cell_size
        width = state.width * self.cell_size
        draw.rectangle(
            [0, board_height, width, board_height + STATUS_BAR_HEIGHT],
            fill=hex_to_rgb(ColorScheme.STATUS_BG)
        )

        if state.status == GameStatus.LOST:
            text, color = "Game over", ColorScheme.LOST_TEXT
        elif state.status == GameStatus.WON:
            text, color = "Board filled", ColorScheme.WON_TEXT
        else:
            text, color = f"Tick {state.tick_count}", ColorScheme.STATUS_TEXT
        text += f" | Length {len(state.snake)}"

        draw.text((8, board_height + 8), text, fill=hex_to_rgb(color), font=self.font)

    def save_frame(self, state: GameState, output_path: str) -> str:
        """Render the state and write it to `output_path` (format from extension)"""
        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        self.render_frame(state).save(output_path)
        logger.info(f"Frame saved to {output_path}")
        return output_path


class FrameRecorder:
    """
    Collects one rendered frame per notification and writes an animated GIF.

    Instances are callables so they can be registered directly as game
    listeners.
    """

    def __init__(
        self,
        renderer: Optional[SnakeFrameRenderer] = None,
        frame_duration_ms: int = DEFAULT_FRAME_DURATION_MS
    ):
        self.renderer = renderer or SnakeFrameRenderer()
        self.frame_duration_ms = frame_duration_ms
        self.frames: List[Image.Image] = []

    def __call__(self, state: GameState) -> None:
        self.frames.append(self.renderer.render_frame(state))

    def save_gif(self, output_path: str) -> str:
        """
        Write the collected frames to `output_path`.

        Raises:
            ValueError: if no frames have been recorded
        """
        if not self.frames:
            raise ValueError("No frames recorded")

        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        logger.info(f"Writing {len(self.frames)} frames to {output_path}")
        first, *rest = self.frames
        first.save(
            output_path,
            format="GIF",
            save_all=True,
            append_images=rest,
            duration=self.frame_duration_ms,
            loop=0
        )
        return output_path
