"""
AsteroidEnv - Gymnasium wrapper around a GameSession
----------------------------------------------------
- Same rules as the playable game (the env drives a GameSession)
- Fixed simulation step (dt) instead of wall-clock time
- Discrete MultiDiscrete action space: [move(3), fire(2)]
- Vector observation: craft state + top-K nearest asteroids
- Reward from per-step events (kills, hits taken, shots, death)

Quick test:
    python -m game.asteroids.asteroid_env
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import ASTEROID_RADIUS_RANGE, FIELD_HEIGHT, FIELD_WIDTH, MAX_LIVES
from .session import GameSession
from .utils import clamp, seed_everything

DEFAULT_REWARD_CONFIG = {
    "R_KILL": 1.0,     # asteroid destroyed
    "R_HIT": 1.0,      # penalty per life lost
    "R_SHOT": 0.01,    # penalty per projectile fired
    "R_ALIVE": 0.001,  # per-step survival bonus
    "R_DEATH": 5.0,    # game over penalty
}

# Speed used to normalise asteroid fall speed in observations
OBS_MAX_SPEED = 600.0


class AsteroidEnv(gym.Env):
    """Asteroid shooter environment for RL agents"""

    metadata = {"render_modes": ["human"], "render_fps": 30}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        field_width: float = FIELD_WIDTH,
        field_height: float = FIELD_HEIGHT,
        max_lives: int = MAX_LIVES,
        dt: float = 1 / 30,
        max_steps: int = 5400,  # 3 minutes at 30 FPS
        k_asteroids: int = 5,
        shoot_cooldown_steps: int = 6,
        reward_config: Optional[Dict[str, Any]] = None,
        verbose: int = 0,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unsupported render_mode: {render_mode}"
        self.render_mode = render_mode

        self.field_width = field_width
        self.field_height = field_height
        self.max_lives = max_lives
        self.dt = dt
        self.max_steps = max_steps
        self.k_asteroids = k_asteroids
        self.shoot_cooldown_steps = shoot_cooldown_steps
        self.reward_config = dict(DEFAULT_REWARD_CONFIG, **(reward_config or {}))
        self.verbose = verbose

        # move: 0 stay, 1 left, 2 right
        # fire: 0/1
        self.action_space = spaces.MultiDiscrete([3, 2])

        # Craft: x(1) lives(1) round(1) cooldown(1)
        # Each asteroid: rel pos(2) radius(1) speed(1)
        obs_dim = 4 + self.k_asteroids * 4
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None

        self.session: GameSession = None  # type: ignore
        self._cooldown = 0
        self._step_count = 0
        self._events: Dict[str, float] = {}
        self._totals: Dict[str, float] = {}

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)

        session_seed = int(self.np_random.integers(0, 2**31 - 1))
        if self.session is None:
            self.session = GameSession(
                field_width=self.field_width,
                field_height=self.field_height,
                max_lives=self.max_lives,
                seed=session_seed,
                verbose=self.verbose,
            )
        else:
            self.session.rng.seed(session_seed)
            self.session.restart()

        self._cooldown = 0
        self._step_count = 0
        self._totals = {"kill": 0.0, "hit": 0.0, "shot": 0.0}

        return self._get_obs(), self._get_info()

    def step(self, action):
        move, fire = int(action[0]), int(action[1])
        self._events = {"kill": 0.0, "hit": 0.0, "shot": 0.0}

        if move == 1:
            self.session.move_craft("left")
        elif move == 2:
            self.session.move_craft("right")

        if fire == 1 and self._cooldown == 0:
            if self.session.fire_projectile() is not None:
                self._events["shot"] += 1.0
                self._cooldown = self.shoot_cooldown_steps

        events = self.session.tick(self.dt)
        self._events["kill"] += events["kill"]
        self._events["hit"] += events["hit"]
        for key, value in self._events.items():
            self._totals[key] += value

        if self._cooldown > 0:
            self._cooldown -= 1

        reward = self._compute_reward()

        terminated = self.session.game_over
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        s = self.session
        craft = s.craft

        obs_parts = [
            (craft.x / self.field_width) * 2 - 1,
            (s.lives / max(1, self.max_lives)) * 2 - 1,
            (int(s.round) - 1) - 1.0,  # rounds 1..3 -> [-1, 1]
            (self._cooldown / max(1, self.shoot_cooldown_steps)) * 2 - 1,
        ]

        nearest = sorted(
            s.asteroids,
            key=lambda a: (a.x - craft.x) ** 2 + (a.y - craft.y) ** 2,
        )
        r_lo, r_hi = ASTEROID_RADIUS_RANGE
        for i in range(self.k_asteroids):
            if i < len(nearest):
                a = nearest[i]
                dx = (a.x - craft.x) / self.field_width
                dy = (a.y - craft.y) / self.field_height
                radius = (a.radius - r_lo) / (r_hi - r_lo) * 2 - 1
                speed = a.speed / OBS_MAX_SPEED * 2 - 1
                obs_parts += [
                    clamp(dx, -1, 1),
                    clamp(dy, -1, 1),
                    clamp(radius, -1, 1),
                    clamp(speed, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        obs = np.array([clamp(v, -1.0, 1.0) for v in obs_parts], dtype=np.float32)
        return obs

    def _compute_reward(self) -> float:
        rc = self.reward_config
        reward = 0.0

        reward += rc["R_KILL"] * self._events.get("kill", 0.0)
        reward -= rc["R_HIT"] * self._events.get("hit", 0.0)
        reward -= rc["R_SHOT"] * self._events.get("shot", 0.0)
        reward += rc["R_ALIVE"]

        if self.session.game_over:
            reward -= rc["R_DEATH"]

        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        s = self.session
        return {
            "score": s.score,
            "lives": s.lives,
            "round": int(s.round),
            "num_asteroids": len(s.asteroids),
            "num_bullets": len(s.bullets),
            "asteroids_destroyed": self._totals.get("kill", 0.0),
            "lives_lost": self._totals.get("hit", 0.0),
            "shots_fired": self._totals.get("shot", 0.0),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            # Imported lazily so headless training never needs a display
            from .window import AsteroidWindow
            self._window = AsteroidWindow(self.session, drive=False,
                                          title="AsteroidEnv - Arcade")

        self._window.on_draw()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, seed: Optional[int] = 42):
    """Run a random episode for testing"""
    env = AsteroidEnv(render_mode="human" if render else None, verbose=1)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    import time
    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

        if render and env._window:
            env._window.dispatch_events()
            env._window.flip()
            time.sleep(env.dt)

    print(f"Random episode return: {total:.2f} "
          f"(score {info['score']}, round {info['round']}, steps {info['step']})")
    env.close()
    return total, info


if __name__ == "__main__":
    run_random_episode(render=True)
