"""
Collision detection and resolution

Two passes per tick, always in this order:
1. craft vs asteroids  -> lose a life, asteroid removed
2. bullets vs asteroids -> asteroid destroyed, bullet spent

An asteroid removed by the craft pass can no longer be hit by a bullet in
the same tick.
"""

from dataclasses import dataclass, field
from typing import List

from .entities import Asteroid, Bullet, Craft
from .utils import point_in_circle


@dataclass
class CollisionResult:
    """Outcome of one collision pass"""
    asteroids: List[Asteroid]
    bullets: List[Bullet]
    lives: int
    craft_hits: int = 0
    kills: int = 0
    game_over: bool = False
    destroyed: List[Asteroid] = field(default_factory=list)


def craft_hit(craft: Craft, asteroid: Asteroid) -> bool:
    """Asteroid is inside the craft's wingspan band and below its nose"""
    return (craft.x - craft.half_width < asteroid.x < craft.x + craft.half_width
            and asteroid.bottom < craft.nose_y)


def bullet_hit(bullet: Bullet, asteroid: Asteroid) -> bool:
    """Bullets are points; hit when strictly inside the asteroid"""
    return point_in_circle(bullet.x, bullet.y, asteroid.x, asteroid.y, asteroid.radius)


def resolve_collisions(craft: Craft, asteroids: List[Asteroid],
                       bullets: List[Bullet], lives: int) -> CollisionResult:
    result = CollisionResult(asteroids=asteroids, bullets=bullets, lives=lives)

    # Craft vs asteroids
    for a in asteroids:
        if not a.alive:
            continue
        if craft_hit(craft, a):
            a.alive = False
            result.lives -= 1
            result.craft_hits += 1
            if result.lives <= 0:
                result.lives = 0
                result.game_over = True
                break

    if not result.game_over:
        # Bullets vs asteroids
        for b in bullets:
            if not b.active:
                continue
            for a in asteroids:
                if not a.alive:
                    continue
                if bullet_hit(b, a):
                    a.alive = False
                    b.active = False
                    result.kills += 1
                    result.destroyed.append(a)
                    break

    result.asteroids = [a for a in asteroids if a.alive]
    result.bullets = [b for b in bullets if b.active]
    return result
