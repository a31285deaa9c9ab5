"""
GameSession - owns the whole simulation state of one play session
-----------------------------------------------------------------
- Round / difficulty progression (RoundController)
- Asteroid spawning (Spawner)
- Motion integration (physics.integrate)
- Collision resolution (collisions.resolve_collisions)
- Player commands: fire, move, pause, restart, end

The session keeps its own clock in milliseconds which only advances on
unpaused ticks, so pausing never eats into a round's duration.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union

from .collisions import resolve_collisions
from .config import (
    CRAFT_HALF_WIDTH,
    CRAFT_NOSE_OFFSET,
    CRAFT_STEP,
    CRAFT_Y,
    FIELD_HEIGHT,
    FIELD_WIDTH,
    MAX_LIVES,
    SCORE_PER_ASTEROID,
)
from .entities import Asteroid, Bullet, Craft, Round
from .layout import SIDEBAR_BUTTONS, Button
from .physics import integrate
from .rounds import RoundController
from .spawner import Spawner
from .utils import clamp

_DIRECTIONS = {"left": -1, "right": 1, -1: -1, 1: 1}


@dataclass(frozen=True)
class AsteroidView:
    x: float
    y: float
    radius: float
    color: Tuple[float, float, float]


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the session handed to the renderer each frame"""
    asteroids: Tuple[AsteroidView, ...]
    projectiles: Tuple[Tuple[float, float], ...]
    craft: Tuple[float, float]
    score: int
    lives: int
    round: int
    round_title_remaining_ms: float
    paused: bool
    game_over: bool
    buttons: Tuple[Button, ...]

    @property
    def show_round_title(self) -> bool:
        return self.round_title_remaining_ms > 0


class GameSession:
    """Single play session of the asteroid shooter"""

    def __init__(
        self,
        field_width: float = FIELD_WIDTH,
        field_height: float = FIELD_HEIGHT,
        max_lives: int = MAX_LIVES,
        seed: Optional[int] = None,
        verbose: int = 0,
    ):
        self.field_width = field_width
        self.field_height = field_height
        self.max_lives = max_lives
        self.verbose = verbose

        self.rng = random.Random(seed)
        self.rounds = RoundController()
        self.spawner = Spawner(field_width, field_height, rng=self.rng)

        # Per-tick events, read by the agent harness
        self.events: Dict[str, int] = {}

        self.restart()

    # ----------------------------
    # State accessors
    # ----------------------------

    @property
    def round(self) -> Round:
        return self.rounds.round

    @property
    def running(self) -> bool:
        """True while ticks still advance the simulation"""
        return not (self.paused or self.game_over or self.ended)

    # ----------------------------
    # Commands
    # ----------------------------

    def restart(self):
        """Reset everything to the state of a fresh start"""
        self.score = 0
        self.lives = self.max_lives
        self.paused = False
        self.game_over = False
        self.ended = False
        self.clock_ms = 0.0
        # Cosmetic clock for the round banner, runs even when paused or over
        self.banner_clock_ms = 0.0
        self.rounds.reset(self.clock_ms)
        self.spawner.reset(self.clock_ms)
        self.asteroids: List[Asteroid] = []
        self.bullets: List[Bullet] = []
        self.craft = Craft(
            x=self.field_width / 2.0,
            y=CRAFT_Y,
            half_width=CRAFT_HALF_WIDTH,
            nose_offset=CRAFT_NOSE_OFFSET,
        )
        self.events = self._empty_events()
        if self.verbose > 0:
            print("[GameSession] New game - Round 1")

    def tick(self, dt: float) -> Dict[str, int]:
        """Advance the simulation by ``dt`` seconds and return this tick's events"""
        self.events = self._empty_events()
        dt = max(0.0, dt)
        self.banner_clock_ms += dt * 1000.0
        if not self.running:
            return self.events

        self.clock_ms += dt * 1000.0

        # Round / difficulty
        new_round = self.rounds.update(self.clock_ms)
        if new_round is not None:
            self.rounds.show_title(self.banner_clock_ms)
            self.events["round_changed"] = int(new_round)
            if self.verbose > 0:
                print(f"[GameSession] Round {int(new_round)} "
                      f"(speed {self.rounds.asteroid_speed:.0f}, "
                      f"interval {self.rounds.spawn_interval_ms}ms)")

        # Spawning
        spawned = self.spawner.update(
            self.clock_ms,
            self.rounds.spawn_interval_ms,
            self.rounds.spawn_count,
            self.rounds.asteroid_speed,
        )
        self.asteroids.extend(spawned)
        self.events["spawned"] = len(spawned)

        # Motion + out-of-field cleanup
        before = len(self.asteroids)
        self.asteroids, self.bullets = integrate(
            self.asteroids, self.bullets, dt, self.field_height
        )
        self.events["escaped"] = before - len(self.asteroids)

        # Collisions
        result = resolve_collisions(self.craft, self.asteroids, self.bullets, self.lives)
        self.asteroids = result.asteroids
        self.bullets = result.bullets
        self.lives = result.lives
        self.score += result.kills * SCORE_PER_ASTEROID
        self.events["kill"] = result.kills
        self.events["hit"] = result.craft_hits

        if result.game_over:
            self.game_over = True
            if self.verbose > 0:
                print(f"[GameSession] Game over - score {self.score}, round {int(self.round)}")

        return self.events

    def fire_projectile(self) -> Optional[Bullet]:
        if self.game_over:
            return None
        bullet = Bullet(x=self.craft.x, y=self.craft.nose_y)
        self.bullets.append(bullet)
        return bullet

    def move_craft(self, direction: Union[int, str]):
        if direction not in _DIRECTIONS:
            raise ValueError(f"Unknown direction: {direction!r}")
        if self.game_over:
            return
        step = _DIRECTIONS[direction] * CRAFT_STEP
        hw = self.craft.half_width
        self.craft.x = clamp(self.craft.x + step, hw, self.field_width - hw)

    def toggle_pause(self):
        self.paused = not self.paused
        if self.verbose > 1:
            print(f"[GameSession] {'Paused' if self.paused else 'Resumed'}")

    def end_game(self):
        """Stop the session for good; the front end exits on seeing ``ended``"""
        self.ended = True
        if self.verbose > 0:
            print(f"[GameSession] Ended - final score {self.score}")

    # ----------------------------
    # Rendering
    # ----------------------------

    def snapshot(self) -> Snapshot:
        return Snapshot(
            asteroids=tuple(
                AsteroidView(a.x, a.y, a.radius, a.color) for a in self.asteroids
            ),
            projectiles=tuple((b.x, b.y) for b in self.bullets if b.active),
            craft=(self.craft.x, self.craft.y),
            score=self.score,
            lives=self.lives,
            round=int(self.round),
            round_title_remaining_ms=self.rounds.title_remaining_ms(self.banner_clock_ms),
            paused=self.paused,
            game_over=self.game_over,
            buttons=SIDEBAR_BUTTONS,
        )

    @staticmethod
    def _empty_events() -> Dict[str, int]:
        return {"kill": 0, "hit": 0, "spawned": 0, "escaped": 0, "round_changed": 0}
