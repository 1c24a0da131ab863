"""
遊戲狀態管理
"""

import logging
from dataclasses import dataclass
from enum import Enum

from ..config.constants import BALL_SPEED, STARTING_LIVES
from .entities import Entity

logger = logging.getLogger(__name__)


class Phase(Enum):
    WAITING = "waiting"      # 球黏在擋板上
    LAUNCHED = "launched"    # 球自由移動
    GAME_OVER = "game_over"  # 生命歸零，不再接受發球


@dataclass
class GameState:
    """遊戲狀態"""

    score: int = 0
    lives: int = STARTING_LIVES
    ball_waiting: bool = True

    @property
    def is_game_over(self) -> bool:
        return self.lives == 0

    @property
    def phase(self) -> Phase:
        if self.is_game_over:
            return Phase.GAME_OVER
        if self.ball_waiting:
            return Phase.WAITING
        return Phase.LAUNCHED

    def can_launch(self) -> bool:
        return self.lives > 0 and self.ball_waiting

    def launch(self, ball: Entity, aim_left: bool = False) -> bool:
        """
        發球：WAITING -> LAUNCHED

        Args:
            ball: 球實體
            aim_left: 是否往左發球

        Returns:
            是否真的發球
        """
        if not self.can_launch():
            return False

        self.ball_waiting = False
        direction = -1.0 if aim_left else 1.0
        ball.velocity.x = direction * 0.5 * BALL_SPEED
        ball.velocity.y = 0.5 * BALL_SPEED
        logger.debug("ball launched with velocity (%.1f, %.1f)", ball.velocity.x, ball.velocity.y)
        return True

    def record_brick_destroyed(self):
        """磚塊被打掉"""
        self.score += 1

    def lose_life(self, ball: Entity) -> bool:
        """
        球碰到底牆：LAUNCHED -> WAITING

        生命已歸零時只停住球，不再扣命

        Returns:
            是否扣了一條命
        """
        ball.velocity.x = 0.0
        ball.velocity.y = 0.0
        self.ball_waiting = True

        if self.is_game_over:
            return False

        self.lives -= 1
        logger.debug("life lost, %d remaining", self.lives)
        if self.is_game_over:
            logger.info("game over with score %d", self.score)
        return True
