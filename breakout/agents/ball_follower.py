"""
硬編碼的跟球代理
"""

import numpy as np

from envs.breakout_env import OBS_BALL_X, OBS_PADDLE_X

MOVE_LEFT, STAY, MOVE_RIGHT = 0, 1, 2


class BallFollowerAgent:
    """擋板跟著球的 x 座標走，並且一直要求發球"""

    def __init__(self, tolerance: float = 0.02, aim_left: bool = False):
        """
        Args:
            tolerance: 正規化座標下不移動的容許範圍
            aim_left: 發球時是否往左
        """
        self.tolerance = tolerance
        self.aim_left = aim_left

    def select_action(self, observation: np.ndarray) -> np.ndarray:
        ball_x, paddle_x = observation[OBS_BALL_X], observation[OBS_PADDLE_X]

        if ball_x < paddle_x - self.tolerance:
            move = MOVE_LEFT
        elif ball_x > paddle_x + self.tolerance:
            move = MOVE_RIGHT
        else:
            move = STAY

        return np.array([move, 1, int(self.aim_left)], dtype=np.int64)
