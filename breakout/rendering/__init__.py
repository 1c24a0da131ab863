"""渲染系統模組"""

from .renderer import Renderer
from .pygame_renderer import FrameInput, PygameRenderer
from .effects import EffectManager, CollisionEffect, ParticleEffect
from .hud import Scoreboard

__all__ = ['Renderer', 'FrameInput', 'PygameRenderer', 'EffectManager',
           'CollisionEffect', 'ParticleEffect', 'Scoreboard']
