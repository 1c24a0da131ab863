"""
核心與外部協作者之間的窄介面
"""

from typing import Optional, Protocol, Tuple

KEY_LEFT = "left"
KEY_RIGHT = "right"
KEY_LAUNCH = "space"
MOUSE_LEFT = "left"


class InputSource(Protocol):
    """輸入來源 (鍵盤 / 滑鼠)"""

    def is_key_down(self, key: str) -> bool:
        ...

    def is_mouse_button_just_pressed(self, button: str) -> bool:
        ...

    def cursor_position(self) -> Optional[Tuple[float, float]]:
        """視窗像素座標，游標不在視窗內時為 None"""
        ...


class TextSink(Protocol):
    """記分板文字"""

    def set_score_text(self, value: str) -> None:
        ...

    def set_lives_text(self, value: str) -> None:
        ...

    def set_game_over_text(self, value: str) -> None:
        ...


class NullTextSink:
    """不顯示任何文字 (無頭模式)"""

    def set_score_text(self, value: str) -> None:
        pass

    def set_lives_text(self, value: str) -> None:
        pass

    def set_game_over_text(self, value: str) -> None:
        pass
