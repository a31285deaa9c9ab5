"""
Tests for the asteroid spawner.
"""

import random
import unittest

from game.asteroids.spawner import Spawner


class TestSpawnCadence(unittest.TestCase):

    def setUp(self):
        self.spawner = Spawner(700, 600, rng=random.Random(1))

    def test_no_spawn_before_interval_elapsed(self):
        self.assertEqual(self.spawner.update(1000, 1000, 1, 50.0), [])

    def test_spawn_after_interval(self):
        batch = self.spawner.update(1001, 1000, 1, 50.0)
        self.assertEqual(len(batch), 1)
        self.assertEqual(self.spawner.last_spawn_ms, 1001)

    def test_batch_size_follows_count(self):
        batch = self.spawner.update(400, 300, 3, 300.0)
        self.assertEqual(len(batch), 3)

    def test_interval_measured_from_last_spawn(self):
        self.spawner.update(1001, 1000, 1, 50.0)
        self.assertEqual(self.spawner.update(1500, 1000, 1, 50.0), [])
        self.assertEqual(len(self.spawner.update(2002, 1000, 1, 50.0)), 1)

    def test_no_catch_up_after_lag(self):
        """Several missed intervals still produce a single batch."""
        batch = self.spawner.update(5000, 1000, 2, 100.0)
        self.assertEqual(len(batch), 2)
        self.assertEqual(self.spawner.update(5001, 1000, 2, 100.0), [])


class TestSpawnedAsteroids(unittest.TestCase):

    def test_spawn_ranges(self):
        spawner = Spawner(700, 600, rng=random.Random(7))
        for _ in range(200):
            a = spawner.spawn(75.0)
            self.assertGreaterEqual(a.x, 10)
            self.assertLessEqual(a.x, 690)
            self.assertEqual(a.y, 620)
            self.assertGreaterEqual(a.radius, 10)
            self.assertLessEqual(a.radius, 24)
            self.assertEqual(a.speed, 75.0)
            for c in a.color:
                self.assertGreaterEqual(c, 0.0)
                self.assertLess(c, 1.0)
            self.assertTrue(a.alive)

    def test_seeded_rng_is_reproducible(self):
        a = Spawner(700, 600, rng=random.Random(3)).spawn(50.0)
        b = Spawner(700, 600, rng=random.Random(3)).spawn(50.0)
        self.assertEqual((a.x, a.radius, a.color), (b.x, b.radius, b.color))


if __name__ == '__main__':
    unittest.main(verbosity=2)
