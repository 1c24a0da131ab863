"""Tests for breakout.core.simulation -- per-tick ordering and collision response."""

from __future__ import annotations

import pytest

from breakout.config.constants import (
    BALL_SPEED, GAME_OVER_TEXT, PADDLE_SPEED, STARTING_LIVES, TIME_STEP,
)
from breakout.core.collision import Side
from breakout.core.entities import EntityKind, Vec2, WallLocation, World
from breakout.core.intents import Intents
from breakout.core.simulation import FixedStepClock, Simulation, paddle_bounds
from helpers import IDLE, LAUNCH, launched, place_ball

DT = TIME_STEP


def brick_at_slot(sim: Simulation, slot: int):
    return next(b for b in sim.world.bricks() if b.brick_slot == slot)


def flat_wall_world() -> World:
    """Paddle, ball and a single plain wall segment around the origin."""
    world = World()
    world.spawn(EntityKind.PADDLE, Vec2(0.0, -370.0), Vec2(120.0, 20.0), (0, 0, 0))
    world.spawn(EntityKind.WALL, Vec2(0.0, 0.0), Vec2(200.0, 20.0), (0, 0, 0),
                wall=WallLocation.TOP)
    world.spawn(EntityKind.BALL, Vec2(0.0, 200.0), Vec2(30.0, 30.0), (0, 0, 0),
                velocity=Vec2())
    return world


class TestPaddleMotion:
    """Steps 1 and 2: keyboard then cursor."""

    def test_bounds(self) -> None:
        assert paddle_bounds() == (-410.0, 410.0)

    def test_keyboard_moves_by_speed_times_dt(self, sim) -> None:
        sim.step(Intents(move_direction=1.0))
        assert sim.world.paddle.position.x == pytest.approx(PADDLE_SPEED * DT)

    def test_keyboard_clamped(self, sim) -> None:
        sim.world.paddle.position.x = 405.0
        sim.step(Intents(move_direction=1.0))
        assert sim.world.paddle.position.x == 410.0

    def test_cursor_overrides_keyboard(self, sim) -> None:
        sim.step(Intents(move_direction=1.0, cursor_x=-100.0))
        assert sim.world.paddle.position.x == -100.0

    def test_cursor_clamped(self, sim) -> None:
        sim.step(Intents(cursor_x=-2000.0))
        assert sim.world.paddle.position.x == -410.0

    def test_paddle_y_never_changes(self, sim) -> None:
        y = sim.world.paddle.position.y
        sim.step(Intents(move_direction=-1.0, cursor_x=300.0))
        assert sim.world.paddle.position.y == y


class TestWaitingBall:
    """Step 3: the waiting ball follows the paddle within the same tick."""

    def test_ball_snapped_above_paddle(self, sim) -> None:
        sim.step(IDLE)
        assert sim.world.ball.position.as_tuple() == (0.0, -345.0)

    def test_snap_uses_this_ticks_paddle_position(self, sim) -> None:
        sim.step(Intents(cursor_x=250.0))
        assert sim.world.ball.position.x == 250.0

    def test_launched_ball_not_snapped(self, sim) -> None:
        launched(sim, (0.0, 100.0))
        place_ball(sim, 100.0, 0.0)
        sim.step(Intents(cursor_x=-250.0))
        assert sim.world.ball.position.x == 100.0


class TestLaunch:
    """Step 4 with the integration that follows it."""

    def test_scenario_launch_and_integrate(self, sim) -> None:
        """Launch sets (250, 250) and the ball moves in the same tick."""
        result = sim.step(LAUNCH)
        ball = sim.world.ball
        assert result.launched
        assert ball.velocity.as_tuple() == (250.0, 250.0)
        assert ball.position.x == pytest.approx(0.0 + 250.0 / 60.0)
        assert ball.position.y == pytest.approx(-345.0 + 250.0 / 60.0)
        assert sim.state.ball_waiting is False

    def test_aim_left(self, sim) -> None:
        sim.step(Intents(launch=True, aim_left=True))
        assert sim.world.ball.velocity.as_tuple() == (-250.0, 250.0)

    def test_second_launch_ignored(self, sim) -> None:
        sim.step(LAUNCH)
        sim.step(Intents(launch=True, aim_left=True))
        assert sim.world.ball.velocity.x == 250.0

    def test_no_launch_at_game_over(self, sim) -> None:
        sim.state.lives = 0
        for _ in range(5):
            result = sim.step(LAUNCH)
            assert not result.launched
        assert sim.world.ball.velocity.is_zero()
        assert sim.state.ball_waiting


class TestReflection:
    """Step 6: walls reflect only the axis moving into them."""

    def test_top_face_reflects_y(self) -> None:
        sim = Simulation(world=flat_wall_world())
        launched(sim, (100.0, -200.0))
        place_ball(sim, -100.0 * DT, 24.0 + 200.0 * DT)
        result = sim.step(IDLE)
        assert [e.side for e in result.events] == [Side.TOP]
        assert sim.world.ball.velocity.as_tuple() == (100.0, 200.0)

    def test_moving_away_is_not_reflected(self) -> None:
        sim = Simulation(world=flat_wall_world())
        launched(sim, (100.0, 200.0))
        place_ball(sim, 0.0, 24.0 - 200.0 * DT)
        sim.step(IDLE)
        assert sim.world.ball.velocity.as_tuple() == (100.0, 200.0)

    def test_left_wall_reflects_x(self, sim) -> None:
        launched(sim, (-300.0, 120.0))
        place_ball(sim, -472.0, 0.0)
        result = sim.step(IDLE)
        assert result.events[0].wall is WallLocation.LEFT
        assert sim.world.ball.velocity.as_tuple() == (300.0, 120.0)

    def test_top_right_corner_reflects_both(self, sim) -> None:
        launched(sim, (300.0, 300.0))
        place_ball(sim, 478.0 - 5.0, 378.0 - 5.0)
        sim.step(IDLE)
        assert sim.world.ball.velocity.as_tuple() == (-300.0, -300.0)


class TestPaddleBounce:
    """Paddle hits steer the ball by contact offset."""

    def _drop_on_paddle(self, sim, offset: float, vy: float = -300.0):
        launched(sim, (0.0, vy))
        place_ball(sim, offset, -346.0 - vy * DT)
        return sim.step(IDLE)

    def test_half_width_offset(self, sim) -> None:
        result = self._drop_on_paddle(sim, 35.0)
        assert result.events[0].collider_kind is EntityKind.PADDLE
        assert sim.world.ball.velocity.x == pytest.approx(0.5 * BALL_SPEED)
        assert sim.world.ball.velocity.y == 300.0

    def test_negative_offset(self, sim) -> None:
        self._drop_on_paddle(sim, -35.0)
        assert sim.world.ball.velocity.x == pytest.approx(-0.5 * BALL_SPEED)

    def test_center_hit_goes_straight_up(self, sim) -> None:
        self._drop_on_paddle(sim, 0.0)
        assert sim.world.ball.velocity.as_tuple() == (0.0, 300.0)

    def test_steering_clamped(self, sim) -> None:
        self._drop_on_paddle(sim, 70.0)
        assert sim.world.ball.velocity.x == pytest.approx(0.8 * BALL_SPEED)

    def test_steering_ignores_incoming_vx(self, sim) -> None:
        launched(sim, (-400.0, -300.0))
        place_ball(sim, 35.0 + 400.0 * DT, -346.0 + 300.0 * DT)
        sim.step(IDLE)
        assert sim.world.ball.velocity.x == pytest.approx(250.0)

    def test_side_hit_negates_incoming_vy(self, sim) -> None:
        """A rising ball clipping the paddle's side is sent back down."""
        launched(sim, (-100.0, 50.0))
        place_ball(sim, 74.0 + 100.0 * DT, -370.0 - 50.0 * DT)
        result = sim.step(IDLE)
        assert result.events[0].side is Side.RIGHT
        assert sim.world.ball.velocity.y == -50.0
        assert sim.world.ball.velocity.x == pytest.approx(0.8 * BALL_SPEED)


class TestBricks:
    """Brick destruction, scoring and speed-up."""

    def _hit_bottom_row_brick(self, sim, vy: float = 300.0):
        launched(sim, (0.0, vy))
        place_ball(sim, -420.0, 144.0 - vy * DT)
        return sim.step(IDLE)

    def test_brick_removed_and_scored(self, sim) -> None:
        brick = brick_at_slot(sim, 5)
        result = self._hit_bottom_row_brick(sim)
        assert brick.id not in sim.world
        assert sim.state.score == 1
        assert result.bricks_destroyed == 1
        assert len(sim.world.bricks()) == 71

    def test_speed_increase_then_reflect(self, sim) -> None:
        self._hit_bottom_row_brick(sim)
        assert sim.world.ball.velocity.y == -310.0

    def test_downward_speed_increase_keeps_sign(self) -> None:
        world = World()
        world.spawn(EntityKind.PADDLE, Vec2(0.0, -370.0), Vec2(120.0, 20.0), (0, 0, 0))
        world.spawn(EntityKind.BRICK, Vec2(0.0, 0.0), Vec2(70.0, 25.0), (1, 2, 3), brick_slot=0)
        world.spawn(EntityKind.BALL, Vec2(), Vec2(30.0, 30.0), (0, 0, 0), velocity=Vec2())
        sim = Simulation(world=world)
        launched(sim, (0.0, -300.0))
        place_ball(sim, 0.0, 26.0 + 300.0 * DT)
        sim.step(IDLE)
        # -300 -> -310 by the speed-up, then reflected off the top face
        assert sim.world.ball.velocity.y == 310.0

    def test_brick_scored_once(self, sim) -> None:
        self._hit_bottom_row_brick(sim)
        for _ in range(10):
            sim.step(IDLE)
        assert sim.state.score == 1

    def test_collision_event_carries_brick_color(self, sim) -> None:
        brick = brick_at_slot(sim, 5)
        result = self._hit_bottom_row_brick(sim)
        event = result.events[0]
        assert event.collider_id == brick.id
        assert event.color == brick.color
        assert event.side is Side.BOTTOM

    def test_two_bricks_in_one_tick(self, sim) -> None:
        """Every overlapping brick is processed; the second sees the reflected velocity."""
        launched(sim, (0.0, 300.0))
        place_ball(sim, -382.5, 144.0 - 300.0 * DT)
        result = sim.step(IDLE)
        assert result.bricks_destroyed == 2
        assert sim.state.score == 2
        # 300 -> 310 -> reflected to -310 -> -320 (no second reflection)
        assert sim.world.ball.velocity.y == -320.0

    def test_side_hit_on_two_stacked_bricks(self, sim) -> None:
        """Known multi-collider case: both speed-ups apply, x reflects once."""
        launched(sim, (300.0, 50.0))
        place_ball(sim, -467.0 - 300.0 * DT, 185.0 - 50.0 * DT)
        result = sim.step(IDLE)
        assert [e.side for e in result.events] == [Side.LEFT, Side.LEFT]
        assert sim.world.ball.velocity.x == -300.0
        assert sim.world.ball.velocity.y == pytest.approx(70.0)


class TestBottomWall:
    """Life loss on the bottom boundary."""

    def _drop_on_bottom(self, sim):
        launched(sim, (100.0, -300.0))
        place_ball(sim, 300.0 - 100.0 * DT, -385.0 + 300.0 * DT)
        return sim.step(IDLE)

    def test_scenario_life_lost(self, sim) -> None:
        result = self._drop_on_bottom(sim)
        assert result.life_lost
        assert sim.state.lives == STARTING_LIVES - 1
        assert sim.world.ball.velocity.is_zero()
        assert sim.state.ball_waiting

    def test_next_tick_returns_ball_to_paddle(self, sim) -> None:
        self._drop_on_bottom(sim)
        sim.step(Intents(cursor_x=-200.0))
        ball = sim.world.ball
        assert ball.position.x == sim.world.paddle.position.x == -200.0
        assert ball.position.y == -345.0

    def test_game_over_after_last_life(self, sim, text) -> None:
        sim.state.lives = 1
        self._drop_on_bottom(sim)
        assert sim.state.is_game_over
        assert text.game_over[-1] == GAME_OVER_TEXT
        sim.step(LAUNCH)
        assert sim.world.ball.velocity.is_zero()

    def test_no_decrement_after_game_over(self, sim) -> None:
        sim.state.lives = 0
        result = self._drop_on_bottom(sim)
        assert not result.life_lost
        assert sim.state.lives == 0


class TestScoreboard:
    """Step 7: text refreshed once per tick."""

    def test_written_every_tick(self, sim, text) -> None:
        for _ in range(3):
            sim.step(IDLE)
        assert text.score == ["0", "0", "0"]
        assert text.lives == ["3", "3", "3"]
        assert text.game_over == ["", "", ""]

    def test_reflects_score(self, sim, text) -> None:
        launched(sim, (0.0, 300.0))
        place_ball(sim, -420.0, 144.0 - 300.0 * DT)
        sim.step(IDLE)
        assert text.score[-1] == "1"


def test_scenario_clear_all_bricks(sim) -> None:
    """Destroying all 72 bricks leaves an empty grid and no crash."""
    launched(sim, (0.0, 0.0))
    for brick in list(sim.world.bricks()):
        ball = sim.world.ball
        ball.velocity.x = ball.velocity.y = 0.0
        place_ball(sim, brick.position.x, brick.position.y)
        assert sim.step(IDLE).bricks_destroyed == 1
    assert sim.world.bricks() == []
    assert sim.state.score == 72
    sim.step(IDLE)
    assert sim.state.score == 72


def test_missing_paddle_fails_fast() -> None:
    world = World()
    world.spawn(EntityKind.BALL, Vec2(), Vec2(30.0, 30.0), (0, 0, 0), velocity=Vec2())
    with pytest.raises(RuntimeError):
        Simulation(world=world)


class TestFixedStepClock:
    """Variable frame time to a whole number of fixed steps."""

    def test_one_step_per_step_length(self) -> None:
        assert FixedStepClock().advance(TIME_STEP) == 1

    def test_remainder_carried(self) -> None:
        clock = FixedStepClock()
        assert clock.advance(TIME_STEP / 2) == 0
        assert clock.advance(TIME_STEP / 2) == 1

    def test_multiple_steps(self) -> None:
        assert FixedStepClock().advance(TIME_STEP * 3.5) == 3

    def test_backlog_capped(self) -> None:
        clock = FixedStepClock(max_steps=5)
        assert clock.advance(1.0) == 5
        assert clock.accumulator == 0.0
        assert clock.advance(0.0) == 0

    def test_negative_time_ignored(self) -> None:
        assert FixedStepClock().advance(-1.0) == 0
