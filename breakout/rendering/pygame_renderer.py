"""
Pygame渲染器實現
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Tuple

import pygame

from ..config.constants import BACKGROUND_COLOR, TEXT_COLOR
from ..core.entities import World
from ..core.interfaces import KEY_LAUNCH, KEY_LEFT, KEY_RIGHT, MOUSE_LEFT
from .renderer import Renderer


KEY_BINDINGS = {
    KEY_LEFT: pygame.K_LEFT,
    KEY_RIGHT: pygame.K_RIGHT,
    KEY_LAUNCH: pygame.K_SPACE,
}

MOUSE_BUTTONS = {
    1: MOUSE_LEFT,
}


@dataclass(frozen=True)
class FrameInput:
    """單幀的輸入快照"""
    keys_down: FrozenSet[str] = frozenset()
    buttons_pressed: FrozenSet[str] = frozenset()
    cursor: Optional[Tuple[float, float]] = None

    def is_key_down(self, key: str) -> bool:
        return key in self.keys_down

    def is_mouse_button_just_pressed(self, button: str) -> bool:
        return button in self.buttons_pressed

    def cursor_position(self) -> Optional[Tuple[float, float]]:
        return self.cursor

    def with_buttons(self, buttons: FrozenSet[str]) -> "FrameInput":
        """合併上一幀尚未被模擬消化的滑鼠點擊"""
        if not buttons:
            return self
        return FrameInput(self.keys_down, self.buttons_pressed | buttons, self.cursor)


class PygameRenderer(Renderer):
    """Pygame渲染器"""

    def __init__(self, font_family: Optional[str] = None):
        self.screen = None
        self.clock = None
        self.fonts: Dict[int, pygame.font.Font] = {}
        self.font_family = font_family
        self.width = 0
        self.height = 0

    def init(self, width: int, height: int, title: str = ""):
        """初始化Pygame"""
        pygame.init()
        self.width = width
        self.height = height
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self.fonts:
            if self.font_family:
                self.fonts[size] = pygame.font.SysFont(self.font_family, size)
            else:
                self.fonts[size] = pygame.font.Font(None, size)
        return self.fonts[size]

    def to_screen(self, x: float, y: float) -> Tuple[float, float]:
        """場地座標 -> 螢幕座標"""
        return x + self.width / 2.0, self.height / 2.0 - y

    def draw_background(self):
        """繪製背景"""
        self.screen.fill(BACKGROUND_COLOR)

    def draw_rect(self, x: float, y: float, width: float, height: float,
                  color: Tuple[int, int, int]):
        sx, sy = self.to_screen(x - width / 2.0, y + height / 2.0)
        pygame.draw.rect(self.screen, color,
                         pygame.Rect(round(sx), round(sy), round(width), round(height)))

    def draw_world(self, world: World):
        """依生成順序繪製所有實體"""
        for entity in world:
            self.draw_rect(entity.position.x, entity.position.y,
                           entity.size.x, entity.size.y, entity.color)

    def draw_effects(self, render_data: List[Dict]):
        """繪製碰撞光環與粒子"""
        for data in render_data:
            if data['alpha'] <= 0:
                continue
            radius = max(1, int(data['radius']))
            surface = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
            color = (*data['color'], data['alpha'])
            if data.get('ring'):
                pygame.draw.circle(surface, color, (radius, radius), radius, 2)
            else:
                pygame.draw.circle(surface, color, (radius, radius), radius)
            sx, sy = self.to_screen(data['x'], data['y'])
            self.screen.blit(surface, (int(sx) - radius, int(sy) - radius))

    def draw_text(self, text: str, x: int, y: int,
                  size: int = 32, color: Tuple[int, int, int] = TEXT_COLOR):
        """繪製文字"""
        if not text:
            return
        surface = self._font(size).render(text, True, color)
        self.screen.blit(surface, (x, y))

    def present(self):
        """呈現畫面"""
        pygame.display.flip()

    def cleanup(self):
        """清理資源"""
        pygame.quit()

    def handle_events(self) -> Tuple[bool, FrameInput]:
        """處理事件"""
        quit_requested = False
        buttons = set()

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_requested = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                quit_requested = True
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button in MOUSE_BUTTONS:
                buttons.add(MOUSE_BUTTONS[event.button])

        pressed = pygame.key.get_pressed()
        keys_down = frozenset(name for name, code in KEY_BINDINGS.items() if pressed[code])

        cursor = None
        if pygame.mouse.get_focused():
            cursor = tuple(float(v) for v in pygame.mouse.get_pos())

        return quit_requested, FrameInput(keys_down, frozenset(buttons), cursor)

    def tick(self, fps: float) -> float:
        """控制幀率，回傳本幀經過的秒數"""
        if self.clock:
            return self.clock.tick(fps) / 1000.0
        return 0.0
