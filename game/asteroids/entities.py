"""
Game entity dataclasses
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple


class Round(IntEnum):
    """Difficulty phase; only ever advances during a session"""
    ROUND_1 = 1
    ROUND_2 = 2
    ROUND_3 = 3


@dataclass
class Asteroid:
    """Falling asteroid entity"""
    x: float
    y: float
    radius: float
    speed: float  # px/s, downward
    color: Tuple[float, float, float] = (1.0, 1.0, 1.0)  # display only, [0,1)
    alive: bool = True

    @property
    def top(self) -> float:
        return self.y + self.radius

    @property
    def bottom(self) -> float:
        return self.y - self.radius


@dataclass
class Bullet:
    """Projectile fired straight up from the craft nose"""
    x: float
    y: float
    active: bool = True


@dataclass
class Craft:
    """Player craft ("gun"), moves only along x"""
    x: float
    y: float
    half_width: float = 35.0
    nose_offset: float = 25.0

    @property
    def nose_y(self) -> float:
        return self.y + self.nose_offset
