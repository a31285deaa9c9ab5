"""
Tests for the Gymnasium environment wrapper.
"""

import unittest

import numpy as np

from game.asteroids import AsteroidEnv
from game.asteroids.entities import Asteroid


class TestAsteroidEnv(unittest.TestCase):

    def setUp(self):
        self.env = AsteroidEnv()
        self.obs, self.info = self.env.reset(seed=0)

    def tearDown(self):
        self.env.close()

    def test_reset_observation(self):
        self.assertEqual(self.obs.shape, (4 + 5 * 4,))
        self.assertEqual(self.obs.dtype, np.float32)
        self.assertTrue(self.env.observation_space.contains(self.obs))
        self.assertEqual(self.info["lives"], 3)
        self.assertEqual(self.info["round"], 1)
        self.assertEqual(self.info["score"], 0)

    def test_move_actions(self):
        self.env.step(np.array([1, 0]))
        self.assertEqual(self.env.session.craft.x, 340)
        self.env.step(np.array([2, 0]))
        self.env.step(np.array([2, 0]))
        self.assertEqual(self.env.session.craft.x, 360)

    def test_fire_respects_cooldown(self):
        _, _, _, _, info = self.env.step(np.array([0, 1]))
        self.assertEqual(info["shots_fired"], 1)
        self.assertEqual(info["num_bullets"], 1)
        _, _, _, _, info = self.env.step(np.array([0, 1]))
        self.assertEqual(info["shots_fired"], 1)

    def test_game_over_terminates(self):
        session = self.env.session
        session.lives = 1
        session.asteroids = [Asteroid(x=350, y=60, radius=12, speed=50)]
        _, reward, terminated, truncated, info = self.env.step(np.array([0, 0]))
        self.assertTrue(terminated)
        self.assertFalse(truncated)
        self.assertEqual(info["lives"], 0)
        self.assertEqual(info["lives_lost"], 1)
        # -R_HIT - R_DEATH + R_ALIVE
        self.assertAlmostEqual(reward, -1.0 - 5.0 + 0.001)

    def test_kill_is_rewarded(self):
        session = self.env.session
        session.asteroids = [Asteroid(x=350, y=100, radius=20, speed=1)]
        _, reward, _, _, info = self.env.step(np.array([0, 1]))
        self.assertEqual(info["score"], 10)
        self.assertEqual(info["asteroids_destroyed"], 1)
        # +R_KILL - R_SHOT + R_ALIVE
        self.assertAlmostEqual(reward, 1.0 - 0.01 + 0.001)

    def test_truncation(self):
        env = AsteroidEnv(max_steps=3)
        env.reset(seed=1)
        for _ in range(2):
            _, _, terminated, truncated, _ = env.step(np.array([0, 0]))
            self.assertFalse(truncated)
        _, _, terminated, truncated, _ = env.step(np.array([0, 0]))
        self.assertTrue(truncated)
        self.assertFalse(terminated)

    def test_reset_restarts_session(self):
        session = self.env.session
        session.score = 70
        session.lives = 1
        self.env.reset(seed=3)
        self.assertIs(self.env.session, session)
        self.assertEqual((session.score, session.lives), (0, 3))

    def test_custom_reward_config(self):
        env = AsteroidEnv(reward_config={"R_ALIVE": 0.5})
        env.reset(seed=0)
        _, reward, _, _, _ = env.step(np.array([0, 0]))
        self.assertAlmostEqual(reward, 0.5)

    def test_random_actions_stay_in_bounds(self):
        for _ in range(200):
            obs, _, terminated, truncated, _ = self.env.step(self.env.action_space.sample())
            self.assertTrue(self.env.observation_space.contains(obs))
            if terminated or truncated:
                break


if __name__ == '__main__':
    unittest.main(verbosity=2)
