"""Asteroid shooter - game session, Arcade front end and Gymnasium env"""

from .entities import Asteroid, Bullet, Craft, Round
from .session import GameSession, Snapshot
from .asteroid_env import AsteroidEnv, run_random_episode

__all__ = [
    'Asteroid', 'Bullet', 'Craft', 'Round',
    'GameSession', 'Snapshot',
    'AsteroidEnv', 'run_random_episode',
]
