"""
Tests for round progression and the difficulty curve.
"""

import unittest

from game.asteroids.entities import Round
from game.asteroids.rounds import RoundController


class TestRoundTransitions(unittest.TestCase):
    """Round 1 -> 2 -> 3 driven by the session clock."""

    def setUp(self):
        self.rounds = RoundController()

    def test_initial_round(self):
        self.assertEqual(self.rounds.round, Round.ROUND_1)
        self.assertEqual(self.rounds.asteroid_speed, 50.0)
        self.assertEqual(self.rounds.spawn_interval_ms, 1000)
        self.assertEqual(self.rounds.spawn_count, 1)

    def test_round1_lasts_exactly_15_seconds(self):
        self.assertIsNone(self.rounds.update(15000))
        self.assertEqual(self.rounds.round, Round.ROUND_1,
                         "Round 1 should still be running at exactly 15000ms")

        self.assertEqual(self.rounds.update(15001), Round.ROUND_2)
        self.assertEqual(self.rounds.round, Round.ROUND_2)

    def test_round2_parameters(self):
        self.rounds.update(15001)
        self.assertEqual(self.rounds.asteroid_speed, 100.0)
        self.assertEqual(self.rounds.spawn_interval_ms, 500)
        self.assertEqual(self.rounds.spawn_count, 2)

    def test_round3_after_another_20_seconds(self):
        self.rounds.update(15001)
        self.rounds.update(35000)
        self.assertEqual(self.rounds.round, Round.ROUND_2)

        self.assertEqual(self.rounds.update(35001), Round.ROUND_3)
        self.assertEqual(self.rounds.asteroid_speed, 300.0)
        self.assertEqual(self.rounds.spawn_interval_ms, 300)
        self.assertEqual(self.rounds.spawn_count, 3)

    def test_transition_reported_once(self):
        self.assertEqual(self.rounds.update(15001), Round.ROUND_2)
        self.assertIsNone(self.rounds.update(15002))

    def test_large_jump_advances_through_both_rounds(self):
        self.rounds.update(100000)
        self.assertEqual(self.rounds.round, Round.ROUND_3)
        self.assertEqual(self.rounds.round_start_ms, 35000)

    def test_round3_never_ends(self):
        self.rounds.update(35001)
        self.rounds.update(10_000_000)
        self.assertEqual(self.rounds.round, Round.ROUND_3)

    def test_reset_returns_to_round1(self):
        self.rounds.update(50000)
        self.rounds.reset(0.0)
        self.assertEqual(self.rounds.round, Round.ROUND_1)
        self.assertEqual(self.rounds.asteroid_speed, 50.0)


class TestRound3Speedup(unittest.TestCase):
    """Round 3 speed grows by 50 every 5 seconds on top of 6x base."""

    def setUp(self):
        self.rounds = RoundController()
        self.rounds.update(35001)  # round 3 started at 35000

    def test_speed_before_first_increment(self):
        self.rounds.update(39999)
        self.assertEqual(self.rounds.asteroid_speed, 300.0)

    def test_speed_after_one_increment(self):
        self.rounds.update(40001)
        self.assertEqual(self.rounds.asteroid_speed, 350.0)

    def test_speed_compounds_without_bound(self):
        self.rounds.update(100000)
        # 65s into round 3 -> 13 increments
        self.assertEqual(self.rounds.asteroid_speed, 300.0 + 13 * 50.0)


class TestRoundTitle(unittest.TestCase):
    """The round banner is shown for 3 seconds after each transition."""

    def test_banner_at_start(self):
        rounds = RoundController()
        self.assertEqual(rounds.title_remaining_ms(0), 3000)
        self.assertEqual(rounds.title_remaining_ms(1000), 2000)
        self.assertEqual(rounds.title_remaining_ms(3000), 0)
        self.assertEqual(rounds.title_remaining_ms(9000), 0)

    def test_banner_restarts_when_shown(self):
        rounds = RoundController()
        rounds.update(15001)
        rounds.show_title(15001)
        self.assertEqual(rounds.title_remaining_ms(15001), 3000)
        self.assertEqual(rounds.title_remaining_ms(17001), 1000)
        self.assertEqual(rounds.title_remaining_ms(18001), 0)

    def test_update_leaves_banner_alone(self):
        rounds = RoundController()
        rounds.update(15001)
        self.assertEqual(rounds.title_remaining_ms(15001), 0)


if __name__ == '__main__':
    unittest.main(verbosity=2)
