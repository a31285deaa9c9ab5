"""
Round / difficulty controller

Rounds are driven purely by the session clock (milliseconds of unpaused play):
round 1 lasts 15s, round 2 lasts 20s, round 3 never ends but its fall speed
grows by a fixed step every 5s.
"""

from typing import Optional

from .config import (
    BASE_ASTEROID_SPEED,
    ROUND3_SPEEDUP_INTERVAL_MS,
    ROUND3_SPEEDUP_STEP,
    ROUND_SETTINGS,
    ROUND_TITLE_DURATION_MS,
)
from .entities import Round


class RoundController:
    """Tracks the current round and derives speed / spawn cadence from it"""

    def __init__(self, base_speed: float = BASE_ASTEROID_SPEED,
                 title_duration_ms: float = ROUND_TITLE_DURATION_MS):
        self.base_speed = base_speed
        self.title_duration_ms = title_duration_ms
        self.reset(0.0)

    def reset(self, now_ms: float):
        self.round = Round.ROUND_1
        self.round_start_ms = now_ms
        self.title_start_ms = now_ms
        self.asteroid_speed = self.base_speed
        self.spawn_interval_ms = ROUND_SETTINGS[Round.ROUND_1]["spawn_interval_ms"]
        self.spawn_count = ROUND_SETTINGS[Round.ROUND_1]["spawn_count"]

    def update(self, now_ms: float) -> Optional[Round]:
        """
        Advance the round if its duration has elapsed and refresh the
        difficulty parameters.

        A new round starts at the instant the previous one expired, so the
        schedule does not depend on tick granularity. Returns the new round
        when a transition happened, else None.
        """
        changed = None
        duration = ROUND_SETTINGS[self.round]["duration_ms"]
        while duration is not None and now_ms - self.round_start_ms > duration:
            self.round = Round(self.round + 1)
            self.round_start_ms += duration
            changed = self.round
            duration = ROUND_SETTINGS[self.round]["duration_ms"]

        settings = ROUND_SETTINGS[self.round]
        speed = self.base_speed * settings["speed_multiplier"]
        if self.round == Round.ROUND_3:
            increments = int((now_ms - self.round_start_ms) // ROUND3_SPEEDUP_INTERVAL_MS)
            speed += increments * ROUND3_SPEEDUP_STEP
        self.asteroid_speed = speed
        self.spawn_interval_ms = settings["spawn_interval_ms"]
        self.spawn_count = settings["spawn_count"]
        return changed

    def show_title(self, banner_now_ms: float):
        """Restart the round-title banner.

        The banner runs on its own clock, which keeps going while the game
        is paused or over.
        """
        self.title_start_ms = banner_now_ms

    def title_remaining_ms(self, banner_now_ms: float) -> float:
        """Time left on the round-title banner, 0 once it has expired"""
        remaining = self.title_duration_ms - (banner_now_ms - self.title_start_ms)
        return max(0.0, remaining)
