"""
效果管理系統
"""

import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from ..config.constants import (
    COLLISION_EFFECT_ALPHA_DECAY, COLLISION_EFFECT_RADIUS_GROW,
    COLLISION_EFFECT_RADIUS_INIT, PARTICLE_COUNT, PARTICLE_LIFETIME,
    PARTICLE_SIZE, PARTICLE_SPEED,
)
from ..core.entities import EntityKind
from ..core.simulation import CollisionEvent


@dataclass
class Effect:
    """效果基類，座標為場地座標"""
    x: float
    y: float
    active: bool = True

    def update(self, dt: float = 1.0):
        pass

    def is_alive(self) -> bool:
        return self.active


@dataclass
class CollisionEffect(Effect):
    """擴散淡出的光環"""
    radius: float = COLLISION_EFFECT_RADIUS_INIT
    alpha: float = 255
    color: Tuple[int, int, int] = (255, 255, 255)

    def update(self, dt: float = 1.0):
        self.radius += COLLISION_EFFECT_RADIUS_GROW * dt
        self.alpha -= COLLISION_EFFECT_ALPHA_DECAY * dt

        if self.alpha <= 0:
            self.alpha = 0
            self.active = False

    def render_data(self) -> Dict:
        return {
            'x': self.x,
            'y': self.y,
            'radius': self.radius,
            'alpha': int(self.alpha),
            'color': self.color,
            'ring': True,
        }


@dataclass
class ParticleEffect(Effect):
    """磚塊碎片"""
    velocity_x: float = 0.0
    velocity_y: float = 0.0
    lifetime: float = PARTICLE_LIFETIME
    size: float = PARTICLE_SIZE
    color: Tuple[int, int, int] = (255, 255, 255)

    def update(self, dt: float = 1.0):
        self.x += self.velocity_x * dt
        self.y += self.velocity_y * dt
        self.lifetime -= dt

        if self.lifetime <= 0:
            self.active = False

    def render_data(self) -> Dict:
        return {
            'x': self.x,
            'y': self.y,
            'radius': self.size,
            'alpha': int(255 * max(0.0, self.lifetime) / PARTICLE_LIFETIME),
            'color': self.color,
            'ring': False,
        }


class EffectManager:
    """效果管理器"""

    def __init__(self):
        self.collision_effects: List[CollisionEffect] = []
        self.particle_effects: List[ParticleEffect] = []

    @property
    def effects(self) -> List[Effect]:
        return [*self.collision_effects, *self.particle_effects]

    def add_collision(self, x: float, y: float, color: Tuple[int, int, int] = (255, 255, 255)):
        """添加碰撞光環"""
        self.collision_effects.append(CollisionEffect(x=x, y=y, color=color))

    def add_burst(self, x: float, y: float, color: Tuple[int, int, int],
                  count: int = PARTICLE_COUNT):
        """添加向外散開的碎片"""
        for i in range(count):
            angle = 2 * math.pi * i / count
            self.particle_effects.append(ParticleEffect(
                x=x, y=y,
                velocity_x=PARTICLE_SPEED * math.cos(angle),
                velocity_y=PARTICLE_SPEED * math.sin(angle),
                color=color,
            ))

    def on_collisions(self, events: Iterable[CollisionEvent]):
        """只有打掉磚塊才產生效果"""
        for event in events:
            if event.collider_kind is not EntityKind.BRICK:
                continue
            x, y = event.position
            self.add_collision(x, y, event.color)
            self.add_burst(x, y, event.color)

    def update(self, dt: float = 1.0):
        """更新所有效果並清理死亡的效果"""
        for effect in self.effects:
            effect.update(dt)

        self.collision_effects = [e for e in self.collision_effects if e.is_alive()]
        self.particle_effects = [e for e in self.particle_effects if e.is_alive()]

    def render_data(self) -> List[Dict]:
        return [effect.render_data() for effect in self.effects]

    def clear(self):
        self.collision_effects.clear()
        self.particle_effects.clear()

    def active_count(self) -> Dict[str, int]:
        return {
            'total': len(self.collision_effects) + len(self.particle_effects),
            'collisions': len(self.collision_effects),
            'particles': len(self.particle_effects),
        }
