"""代理模組"""

from .ball_follower import BallFollowerAgent

__all__ = ['BallFollowerAgent']
