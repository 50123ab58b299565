"""
Plain-text rendering of the board.

Used by the headless CLI and by the curses front end.
"""

from typing import List

from domain.board import get_field
from domain.constants import CellKind, GameStatus
from domain.game_state import GameState

GLYPHS = {
    CellKind.EMPTY: ".",
    CellKind.FOOD: "*",
    CellKind.SNAKE: "#",
}
HEAD_GLYPH = "@"

STATUS_LABELS = {
    GameStatus.IN_GAME: "In game",
    GameStatus.WON: "Won",
    GameStatus.LOST: "Lost",
}


def render_rows(state: GameState) -> List[str]:
    """
    Returns one string per board row, top row first:
    . = empty space
    * = food
    # = snake body
    @ = snake head
    """
    field = get_field(state)
    board = [[GLYPHS[cell] for cell in row] for row in field]

    head_x, head_y = state.snake.head
    if 0 <= head_x < state.width and 0 <= head_y < state.height:
        board[head_y][head_x] = HEAD_GLYPH

    return [" ".join(row) for row in board]


def status_line(state: GameState) -> str:
    line = (
        f"{STATUS_LABELS[state.status]} | tick {state.tick_count} | "
        f"length {len(state.snake)} | heading {state.direction.value}"
    )
    if state.death_reason:
        line += f" | hit {state.death_reason}"
    return line


def render_text(state: GameState) -> str:
    return "\n".join(render_rows(state) + [status_line(state)])
