"""
記分板
"""

from ..config.constants import (
    CANVAS_HEIGHT, CANVAS_WIDTH, GAME_OVER_FONT_SIZE, GAME_OVER_TEXT_OFFSET,
    SCORE_FONT_SIZE, SCORE_TEXT_POSITION,
)
from .renderer import Renderer


class Scoreboard:
    """接收模擬每個 tick 寫入的文字，渲染時原樣畫出"""

    def __init__(self):
        self.score_text = ""
        self.lives_text = ""
        self.game_over_text = ""

    def set_score_text(self, value: str) -> None:
        self.score_text = value

    def set_lives_text(self, value: str) -> None:
        self.lives_text = value

    def set_game_over_text(self, value: str) -> None:
        self.game_over_text = value

    @property
    def status_line(self) -> str:
        return f"Score:{self.score_text} Lives:{self.lives_text}"

    def render(self, renderer: Renderer):
        x, y = SCORE_TEXT_POSITION
        renderer.draw_text(self.status_line, x, y, size=SCORE_FONT_SIZE)

        if self.game_over_text:
            renderer.draw_text(self.game_over_text,
                               int(CANVAS_WIDTH / 2 - GAME_OVER_TEXT_OFFSET[0]),
                               int(CANVAS_HEIGHT / 2 - GAME_OVER_TEXT_OFFSET[1]),
                               size=GAME_OVER_FONT_SIZE)
