"""
抽象渲染器接口
"""

from abc import ABC, abstractmethod
from typing import Tuple

from ..core.interfaces import InputSource


class Renderer(ABC):
    """渲染器抽象基類

    座標皆為場地座標 (原點在中心、y 軸朝上)，由實作自行轉換為螢幕座標
    """

    @abstractmethod
    def init(self, width: int, height: int, title: str = ""):
        """初始化渲染器"""
        pass

    @abstractmethod
    def draw_background(self):
        """繪製背景"""
        pass

    @abstractmethod
    def draw_rect(self, x: float, y: float, width: float, height: float,
                  color: Tuple[int, int, int]):
        """以中心點繪製矩形"""
        pass

    @abstractmethod
    def draw_text(self, text: str, x: int, y: int,
                  size: int = 32, color: Tuple[int, int, int] = (255, 255, 255)):
        """在螢幕座標繪製文字"""
        pass

    @abstractmethod
    def present(self):
        """呈現畫面"""
        pass

    @abstractmethod
    def cleanup(self):
        """清理資源"""
        pass

    @abstractmethod
    def handle_events(self) -> Tuple[bool, InputSource]:
        """處理事件，回傳 (是否結束, 本幀輸入)"""
        pass
