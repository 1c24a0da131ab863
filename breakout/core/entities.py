"""
遊戲實體與世界容器
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from ..config.constants import (
    BALL_COLOR, BALL_SIZE, BALL_STARTING_POSITION,
    BOTTOM_WALL, BRICK_COLORS, BRICK_COLUMNS, BRICK_OFFSET, BRICK_ROWS,
    BRICK_SIZE, BRICK_SPACING, CANVAS_HEIGHT, CANVAS_WIDTH, LEFT_WALL,
    PADDLE_COLOR, PADDLE_SIZE, PADDLE_Y, RIGHT_WALL, TOP_WALL,
    WALL_COLOR, WALL_THICKNESS,
)

Color = Tuple[int, int, int]


class WorldInvariantError(RuntimeError):
    """世界中球或擋板不是恰好一個：屬於初始化錯誤，不可恢復"""


class EntityKind(Enum):
    BALL = "ball"
    PADDLE = "paddle"
    WALL = "wall"
    BRICK = "brick"


class WallLocation(Enum):
    LEFT = "left"
    RIGHT = "right"
    BOTTOM = "bottom"
    TOP = "top"


@dataclass
class Vec2:
    x: float = 0.0
    y: float = 0.0

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0


@dataclass
class Entity:
    """
    單一實體

    kind 決定哪些欄位有意義：
      - BALL: velocity
      - WALL: wall
      - BRICK: brick_slot (磚塊在網格中的編號，列優先)
    """
    id: int
    kind: EntityKind
    position: Vec2
    size: Vec2
    color: Color
    velocity: Optional[Vec2] = None
    wall: Optional[WallLocation] = None
    brick_slot: Optional[int] = None

    @property
    def is_bottom_wall(self) -> bool:
        return self.wall is WallLocation.BOTTOM

    def bounds(self) -> Tuple[float, float, float, float]:
        """回傳 (left, bottom, right, top)"""
        half_w = self.size.x / 2.0
        half_h = self.size.y / 2.0
        return (self.position.x - half_w, self.position.y - half_h,
                self.position.x + half_w, self.position.y + half_h)


def wall_geometry(location: WallLocation) -> Tuple[Vec2, Vec2]:
    """回傳牆的 (中心, 尺寸)"""
    if location is WallLocation.LEFT:
        return Vec2(LEFT_WALL, 0.0), Vec2(WALL_THICKNESS, CANVAS_HEIGHT + WALL_THICKNESS)
    if location is WallLocation.RIGHT:
        return Vec2(RIGHT_WALL, 0.0), Vec2(WALL_THICKNESS, CANVAS_HEIGHT + WALL_THICKNESS)
    if location is WallLocation.BOTTOM:
        return Vec2(0.0, BOTTOM_WALL), Vec2(CANVAS_WIDTH + WALL_THICKNESS, WALL_THICKNESS)
    return Vec2(0.0, TOP_WALL), Vec2(CANVAS_WIDTH + WALL_THICKNESS, WALL_THICKNESS)


def brick_position(column: int, row: int) -> Vec2:
    return Vec2(LEFT_WALL + BRICK_OFFSET[0] + column * BRICK_SPACING[0],
                TOP_WALL - (BRICK_OFFSET[1] + row * BRICK_SPACING[1]))


@dataclass
class World:
    """
    以穩定整數 id 為鍵的實體容器

    迭代順序即生成順序；刪除實體不會影響其他實體的 id
    """
    entities: Dict[int, Entity] = field(default_factory=dict)
    _next_id: int = 0

    def spawn(self, kind: EntityKind, position: Vec2, size: Vec2, color: Color,
              **extra) -> Entity:
        entity = Entity(id=self._next_id, kind=kind, position=position,
                        size=size, color=color, **extra)
        self.entities[entity.id] = entity
        self._next_id += 1
        return entity

    def despawn(self, entity_id: int) -> Entity:
        return self.entities.pop(entity_id)

    def get(self, entity_id: int) -> Optional[Entity]:
        return self.entities.get(entity_id)

    def __contains__(self, entity_id: int) -> bool:
        return entity_id in self.entities

    def __len__(self) -> int:
        return len(self.entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(list(self.entities.values()))

    def of_kind(self, kind: EntityKind) -> List[Entity]:
        return [e for e in self.entities.values() if e.kind is kind]

    def _single(self, kind: EntityKind) -> Entity:
        found = self.of_kind(kind)
        if len(found) != 1:
            raise WorldInvariantError(
                f"world must contain exactly one {kind.value}, found {len(found)}")
        return found[0]

    @property
    def ball(self) -> Entity:
        return self._single(EntityKind.BALL)

    @property
    def paddle(self) -> Entity:
        return self._single(EntityKind.PADDLE)

    def bricks(self) -> List[Entity]:
        return self.of_kind(EntityKind.BRICK)

    def walls(self) -> List[Entity]:
        return self.of_kind(EntityKind.WALL)

    def collider_ids(self) -> List[int]:
        """除了球之外的所有實體 id (快照)"""
        return [e.id for e in self.entities.values() if e.kind is not EntityKind.BALL]

    def moving_entities(self) -> List[Entity]:
        return [e for e in self.entities.values() if e.velocity is not None]


def build_world() -> World:
    """建立初始場地：擋板、四面牆、球與 12x6 磚塊"""
    world = World()

    world.spawn(EntityKind.PADDLE, Vec2(0.0, PADDLE_Y), Vec2(*PADDLE_SIZE), PADDLE_COLOR)

    for location in (WallLocation.LEFT, WallLocation.RIGHT,
                     WallLocation.BOTTOM, WallLocation.TOP):
        position, size = wall_geometry(location)
        world.spawn(EntityKind.WALL, position, size, WALL_COLOR, wall=location)

    world.spawn(EntityKind.BALL, Vec2(*BALL_STARTING_POSITION), Vec2(*BALL_SIZE),
                BALL_COLOR, velocity=Vec2(0.0, 0.0))

    for column in range(BRICK_COLUMNS):
        for row in range(BRICK_ROWS):
            world.spawn(EntityKind.BRICK, brick_position(column, row),
                        Vec2(*BRICK_SIZE), BRICK_COLORS[row],
                        brick_slot=column * BRICK_ROWS + row)

    return world
