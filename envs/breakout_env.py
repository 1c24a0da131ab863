import gymnasium as gym
from gymnasium import spaces
import numpy as np

from breakout.config.constants import (
    BALL_SPEED, BRICK_COUNT, CANVAS_HEIGHT, CANVAS_WIDTH, STARTING_LIVES,
)
from breakout.core import Simulation
from breakout.core.intents import Intents

OBS_BALL_X, OBS_BALL_Y, OBS_BALL_VX, OBS_BALL_VY = 0, 1, 2, 3
OBS_PADDLE_X, OBS_LIVES, OBS_WAITING = 4, 5, 6
OBS_BRICKS = 7


class BreakoutEnv(gym.Env):
    """
    單人 Breakout：
      - 動作 (move, launch, aim_left): move {0=左,1=不動,2=右}，launch / aim_left ∈ {0,1}
      - 觀測 7 + 72 維: (ball_x, ball_y, ball_vx, ball_vy, paddle_x, lives, waiting, 每格磚塊是否存在)
      - 每打掉一塊磚 +1，每失去一條命 -1
      - 生命歸零或磚塊清空 => terminated；超過 max_steps => truncated
    """

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(self, render_mode=None, max_steps=20_000):
        super().__init__()
        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"不支援的 render_mode: {render_mode}")
        self.render_mode = render_mode
        self.max_steps = max_steps

        self.action_space = spaces.MultiDiscrete([3, 2, 2])

        # 位置以半個畫布正規化，速度以 BALL_SPEED 正規化
        low = np.array([-1.5, -1.5, -3, -3, -1, 0, 0] + [0] * BRICK_COUNT, dtype=np.float32)
        high = np.array([1.5, 1.5, 3, 3, 1, 1, 1] + [1] * BRICK_COUNT, dtype=np.float32)
        self.observation_space = spaces.Box(low, high, dtype=np.float32)

        self.simulation = None
        self.steps = 0
        self.renderer = None
        self.scoreboard = None

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)
        self.scoreboard = None
        text = None
        if self.render_mode == "human":
            from breakout.rendering import Scoreboard
            self.scoreboard = Scoreboard()
            text = self.scoreboard
        self.simulation = Simulation(text=text)
        self.steps = 0
        return self._get_obs(), self._get_info()

    @staticmethod
    def action_to_intents(action):
        action = np.asarray(action)
        if action.shape != (3,):
            raise ValueError(f"動作必須為 3 維，收到形狀 {action.shape}")
        move, launch, aim_left = (int(a) for a in action)
        return Intents(
            move_direction=float(move - 1),
            launch=bool(launch),
            aim_left=bool(aim_left),
        )

    def step(self, action):
        result = self.simulation.step(self.action_to_intents(action))
        self.steps += 1

        reward = float(result.bricks_destroyed)
        if result.life_lost:
            reward -= 1.0

        state = self.simulation.state
        terminated = state.is_game_over or not self.simulation.world.bricks()
        truncated = not terminated and self.steps >= self.max_steps

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def _get_obs(self):
        world = self.simulation.world
        ball = world.ball
        paddle = world.paddle
        state = self.simulation.state

        obs = np.zeros(OBS_BRICKS + BRICK_COUNT, dtype=np.float32)
        obs[OBS_BALL_X] = ball.position.x / (CANVAS_WIDTH / 2)
        obs[OBS_BALL_Y] = ball.position.y / (CANVAS_HEIGHT / 2)
        obs[OBS_BALL_VX] = ball.velocity.x / BALL_SPEED
        obs[OBS_BALL_VY] = ball.velocity.y / BALL_SPEED
        obs[OBS_PADDLE_X] = paddle.position.x / (CANVAS_WIDTH / 2)
        obs[OBS_LIVES] = state.lives / STARTING_LIVES
        obs[OBS_WAITING] = 1.0 if state.ball_waiting else 0.0
        for brick in world.bricks():
            obs[OBS_BRICKS + brick.brick_slot] = 1.0
        return obs

    def _get_info(self):
        state = self.simulation.state
        return {
            "score": state.score,
            "lives": state.lives,
            "bricks_remaining": len(self.simulation.world.bricks()),
            "tick": self.simulation.tick_count,
        }

    def render(self):
        if self.render_mode != "human":
            return
        from breakout.rendering import PygameRenderer

        if self.renderer is None:
            self.renderer = PygameRenderer()
            self.renderer.init(int(CANVAS_WIDTH), int(CANVAS_HEIGHT), "Breakout Env")

        quit_requested, _ = self.renderer.handle_events()
        if quit_requested:
            self.close()
            return

        self.renderer.draw_background()
        self.renderer.draw_world(self.simulation.world)
        self.scoreboard.render(self.renderer)
        self.renderer.present()
        self.renderer.tick(self.metadata["render_fps"])

    def close(self):
        if self.renderer is not None:
            self.renderer.cleanup()
            self.renderer = None
