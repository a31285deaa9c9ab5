"""
Motion integration and out-of-field cleanup
"""

from typing import List, Tuple

from .config import PROJECTILE_SPEED
from .entities import Asteroid, Bullet


def integrate(asteroids: List[Asteroid], bullets: List[Bullet], dt: float,
              field_height: float,
              bullet_speed: float = PROJECTILE_SPEED) -> Tuple[List[Asteroid], List[Bullet]]:
    """
    Move asteroids down and active bullets up by ``dt`` seconds.

    Returns the surviving lists: asteroids whose top edge fell below the
    field bottom and bullets that left the top are dropped.
    """
    dt = max(0.0, dt)

    for a in asteroids:
        a.y -= a.speed * dt
        if a.top < 0:
            a.alive = False

    for b in bullets:
        if not b.active:
            continue
        b.y += bullet_speed * dt
        if b.y > field_height:
            b.active = False

    asteroids = [a for a in asteroids if a.alive]
    bullets = [b for b in bullets if b.active]
    return asteroids, bullets
