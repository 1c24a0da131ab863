"""
輸入轉換為遊戲意圖
"""

from dataclasses import dataclass
from typing import Optional

from ..config.constants import CANVAS_WIDTH
from .interfaces import InputSource, KEY_LAUNCH, KEY_LEFT, KEY_RIGHT, MOUSE_LEFT


@dataclass(frozen=True)
class Intents:
    """單一 tick 的意圖"""
    move_direction: float = 0.0          # -1 左、0 不動、+1 右
    cursor_x: Optional[float] = None     # 以場地中心為原點
    launch: bool = False
    aim_left: bool = False


IDLE = Intents()


class IntentTranslator:
    """把鍵盤 / 滑鼠狀態轉成 Intents"""

    def __init__(self, canvas_width: float = CANVAS_WIDTH, mouse_control: bool = True):
        self.canvas_width = canvas_width
        self.mouse_control = mouse_control

    def translate(self, source: InputSource) -> Intents:
        direction = 0.0
        if source.is_key_down(KEY_LEFT):
            direction -= 1.0
        if source.is_key_down(KEY_RIGHT):
            direction += 1.0

        cursor_x = None
        if self.mouse_control:
            cursor = source.cursor_position()
            if cursor is not None:
                cursor_x = cursor[0] - self.canvas_width / 2.0

        launch = (source.is_key_down(KEY_LAUNCH)
                  or source.is_mouse_button_just_pressed(MOUSE_LEFT))

        return Intents(
            move_direction=direction,
            cursor_x=cursor_x,
            launch=launch,
            aim_left=source.is_key_down(KEY_LEFT),
        )
