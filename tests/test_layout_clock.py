"""
Tests for sidebar hit-testing and the real-time tick clock.
"""

import unittest

from game.asteroids.clock import TickClock
from game.asteroids.layout import END, PAUSE, RESTART, SIDEBAR_BUTTONS, button_at


class TestSidebarButtons(unittest.TestCase):

    def test_three_fixed_buttons(self):
        self.assertEqual([b.label for b in SIDEBAR_BUTTONS],
                         ["Pause/Resume", "Restart Game", "End Game"])
        for b in SIDEBAR_BUTTONS:
            self.assertEqual((b.x, b.width, b.height), (710, 90, 50))

    def test_hits(self):
        self.assertEqual(button_at(715, 510), PAUSE)
        self.assertEqual(button_at(750, 450), RESTART)
        self.assertEqual(button_at(720, 370), END)

    def test_edges_are_inclusive(self):
        self.assertEqual(button_at(710, 500), PAUSE)
        self.assertEqual(button_at(800, 550), PAUSE)

    def test_misses(self):
        self.assertIsNone(button_at(100, 100), "Clicks in the field are not buttons")
        self.assertIsNone(button_at(750, 300))
        self.assertIsNone(button_at(705, 510))
        self.assertIsNone(button_at(750, 415))


class TestTickClock(unittest.TestCase):

    def test_dt_between_samples(self):
        times = iter([10.0, 10.5, 10.75])
        clock = TickClock(time_fn=lambda: next(times))
        self.assertEqual(clock.sample(), 0.0)
        self.assertAlmostEqual(clock.sample(), 0.5)
        self.assertAlmostEqual(clock.sample(), 0.25)

    def test_backwards_time_is_clamped(self):
        times = iter([5.0, 4.0, 4.5])
        clock = TickClock(time_fn=lambda: next(times))
        clock.sample()
        self.assertEqual(clock.sample(), 0.0)
        self.assertAlmostEqual(clock.sample(), 0.5)


if __name__ == '__main__':
    unittest.main(verbosity=2)
