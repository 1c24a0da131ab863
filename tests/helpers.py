"""Test doubles and small setup helpers shared across test modules."""

from __future__ import annotations

from breakout.core import Simulation, Vec2
from breakout.core.intents import Intents

LAUNCH = Intents(launch=True)
IDLE = Intents()


class FakeInput:
    """InputSource stub driven by plain sets."""

    def __init__(self, keys=(), buttons=(), cursor=None):
        self.keys = set(keys)
        self.buttons = set(buttons)
        self.cursor = cursor

    def is_key_down(self, key: str) -> bool:
        return key in self.keys

    def is_mouse_button_just_pressed(self, button: str) -> bool:
        return button in self.buttons

    def cursor_position(self):
        return self.cursor


class RecordingText:
    """TextSink that keeps every value written to it."""

    def __init__(self):
        self.score: list[str] = []
        self.lives: list[str] = []
        self.game_over: list[str] = []

    def set_score_text(self, value: str) -> None:
        self.score.append(value)

    def set_lives_text(self, value: str) -> None:
        self.lives.append(value)

    def set_game_over_text(self, value: str) -> None:
        self.game_over.append(value)


def launched(sim: Simulation, velocity: tuple[float, float]) -> None:
    """Put the ball in flight with an explicit velocity."""
    sim.state.ball_waiting = False
    ball = sim.world.ball
    ball.velocity.x, ball.velocity.y = velocity


def place_ball(sim: Simulation, x: float, y: float) -> None:
    sim.world.ball.position = Vec2(x, y)


def clear_bricks(sim: Simulation) -> None:
    for brick in sim.world.bricks():
        sim.world.despawn(brick.id)
