"""核心遊戲系統"""

from .collision import Side, collide
from .entities import Entity, EntityKind, Vec2, WallLocation, World, WorldInvariantError, build_world
from .game_state import GameState, Phase
from .intents import Intents, IntentTranslator
from .simulation import CollisionEvent, FixedStepClock, Simulation, StepResult, paddle_bounds

__all__ = [
    'Side', 'collide',
    'Entity', 'EntityKind', 'Vec2', 'WallLocation', 'World', 'WorldInvariantError', 'build_world',
    'GameState', 'Phase',
    'Intents', 'IntentTranslator',
    'CollisionEvent', 'FixedStepClock', 'Simulation', 'StepResult', 'paddle_bounds',
]
