"""
固定時間步長模擬

每個 tick 依序執行：
  1. 鍵盤移動擋板
  2. 滑鼠移動擋板 (覆蓋鍵盤結果)
  3. 等待中的球黏在擋板上
  4. 發球
  5. 依速度積分位置
  6. 碰撞檢測與反應
  7. 更新記分板文字
順序不可調換，否則擋板與球會差一個 tick
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..config.constants import (
    BALL_PADDLE_OFFSET, BALL_SPEED, COLLISION_SPEED_INCREASE, GAME_OVER_TEXT,
    LEFT_WALL, PADDLE_PADDING, PADDLE_SIZE, PADDLE_SPEED, PADDLE_STEER_DIVISOR,
    PADDLE_STEER_LIMIT, RIGHT_WALL, TIME_STEP, WALL_THICKNESS,
)
from .collision import Side, collide, reflection_axes
from .entities import Entity, EntityKind, WallLocation, World, build_world
from .game_state import GameState
from .intents import Intents
from .interfaces import NullTextSink, TextSink

logger = logging.getLogger(__name__)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def paddle_bounds() -> Tuple[float, float]:
    """擋板中心 x 的可移動範圍"""
    left = LEFT_WALL + WALL_THICKNESS / 2.0 + PADDLE_SIZE[0] / 2.0 + PADDLE_PADDING
    right = RIGHT_WALL - WALL_THICKNESS / 2.0 - PADDLE_SIZE[0] / 2.0 - PADDLE_PADDING
    return left, right


@dataclass(frozen=True)
class CollisionEvent:
    """一次球與碰撞體的接觸"""
    tick: int
    collider_id: int
    collider_kind: EntityKind
    side: Side
    position: Tuple[float, float]
    color: Tuple[int, int, int]
    wall: Optional[WallLocation] = None


@dataclass
class StepResult:
    tick: int
    events: List[CollisionEvent] = field(default_factory=list)
    bricks_destroyed: int = 0
    life_lost: bool = False
    launched: bool = False


class Simulation:
    """
    模擬上下文：擁有世界與遊戲狀態，只能透過 step() 改變
    """

    def __init__(self, world: Optional[World] = None,
                 state: Optional[GameState] = None,
                 text: Optional[TextSink] = None):
        self.world = world if world is not None else build_world()
        self.state = state if state is not None else GameState()
        self.text = text if text is not None else NullTextSink()
        self.tick_count = 0

        self._check_world()

    def _check_world(self):
        """缺球或缺擋板時立即失敗"""
        _ = self.world.ball
        _ = self.world.paddle

    def step(self, intents: Intents) -> StepResult:
        """執行一個固定時間步長"""
        self.tick_count += 1
        result = StepResult(tick=self.tick_count)

        self._move_paddle(intents)
        self._move_paddle_by_cursor(intents)
        self._stick_ball_to_paddle()
        result.launched = self._handle_launch(intents)
        self._apply_velocity()
        self._check_for_collisions(result)
        self._update_scoreboard()

        return result

    # -- 擋板 ----------------------------------------------------------------

    def _move_paddle(self, intents: Intents):
        paddle = self.world.paddle
        left, right = paddle_bounds()
        new_x = paddle.position.x + intents.move_direction * PADDLE_SPEED * TIME_STEP
        paddle.position.x = clamp(new_x, left, right)

    def _move_paddle_by_cursor(self, intents: Intents):
        if intents.cursor_x is None:
            return
        paddle = self.world.paddle
        left, right = paddle_bounds()
        paddle.position.x = clamp(intents.cursor_x, left, right)

    # -- 球 ------------------------------------------------------------------

    def _stick_ball_to_paddle(self):
        if not self.state.ball_waiting:
            return
        paddle = self.world.paddle
        ball = self.world.ball
        ball.position.x = paddle.position.x
        ball.position.y = paddle.position.y + BALL_PADDLE_OFFSET

    def _handle_launch(self, intents: Intents) -> bool:
        if not intents.launch:
            return False
        return self.state.launch(self.world.ball, aim_left=intents.aim_left)

    def _apply_velocity(self):
        for entity in self.world.moving_entities():
            entity.position.x += entity.velocity.x * TIME_STEP
            entity.position.y += entity.velocity.y * TIME_STEP

    # -- 碰撞 ----------------------------------------------------------------

    def _check_for_collisions(self, result: StepResult):
        ball = self.world.ball
        velocity = ball.velocity

        for collider_id in self.world.collider_ids():
            collider = self.world.get(collider_id)
            if collider is None:
                continue

            side = collide(ball.position.as_tuple(), ball.size.as_tuple(),
                           collider.position.as_tuple(), collider.size.as_tuple())
            if side is None:
                continue

            result.events.append(CollisionEvent(
                tick=self.tick_count,
                collider_id=collider.id,
                collider_kind=collider.kind,
                side=side,
                position=ball.position.as_tuple(),
                color=collider.color,
                wall=collider.wall,
            ))

            if collider.kind is EntityKind.BRICK:
                self._destroy_brick(collider, ball)
                result.bricks_destroyed += 1

            if collider.is_bottom_wall:
                if self.state.lose_life(ball):
                    result.life_lost = True

            # 用目前 (可能已被上面修改過) 的速度決定是否反彈
            reflect_x, reflect_y = reflection_axes(side, velocity.x, velocity.y)

            if collider.kind is EntityKind.PADDLE and (reflect_x or reflect_y):
                self._bounce_off_paddle(ball, collider)
            else:
                if reflect_x:
                    velocity.x = -velocity.x
                if reflect_y:
                    velocity.y = -velocity.y

    def _destroy_brick(self, brick: Entity, ball: Entity):
        self.world.despawn(brick.id)
        self.state.record_brick_destroyed()

        if ball.velocity.y >= 0.0:
            ball.velocity.y += COLLISION_SPEED_INCREASE
        else:
            ball.velocity.y -= COLLISION_SPEED_INCREASE
        logger.debug("brick %d destroyed, score %d", brick.id, self.state.score)

    def _bounce_off_paddle(self, ball: Entity, paddle: Entity):
        """擋板反彈：y 反向，x 由擊中點相對擋板中心的偏移決定"""
        ball.velocity.y = -ball.velocity.y
        x_diff = ball.position.x - paddle.position.x
        ball.velocity.x = clamp(x_diff / PADDLE_STEER_DIVISOR,
                                -PADDLE_STEER_LIMIT, PADDLE_STEER_LIMIT) * BALL_SPEED

    # -- 記分板 --------------------------------------------------------------

    def _update_scoreboard(self):
        self.text.set_score_text(str(self.state.score))
        self.text.set_lives_text(str(self.state.lives))
        self.text.set_game_over_text(GAME_OVER_TEXT if self.state.is_game_over else "")


class FixedStepClock:
    """
    把不固定的幀時間換算成固定步長的步數

    每幀最多執行 max_steps 步，超出的累積時間直接丟棄
    """

    def __init__(self, step: float = TIME_STEP, max_steps: int = 5):
        self.step = step
        self.max_steps = max_steps
        self.accumulator = 0.0

    def advance(self, frame_seconds: float) -> int:
        self.accumulator += max(0.0, frame_seconds)
        steps = int(self.accumulator // self.step)
        if steps > self.max_steps:
            logger.debug("dropping %d simulation steps", steps - self.max_steps)
            self.accumulator = 0.0
            return self.max_steps
        self.accumulator -= steps * self.step
        return steps
