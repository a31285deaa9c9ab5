"""
Arcade front end for the asteroid shooter
-----------------------------------------
Draws a GameSession snapshot and turns keyboard / mouse input into session
commands. All game rules live in the session; this module only presents.

Controls:
    Space        fire
    Left/Right   move (hold to repeat)
    P            pause / resume
    R            restart
    Esc          end game
    Sidebar buttons: Pause/Resume, Restart Game, End Game

Run:
    python -m game.asteroids [--seed 42] [--verbose 1]
"""

from __future__ import annotations

import argparse
from typing import Optional, Set

import arcade

from .clock import TickClock
from .config import (
    CRAFT_NOSE_OFFSET,
    FIELD_WIDTH,
    GAME_CONFIG,
    TICK_INTERVAL,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from .layout import END, PAUSE, RESTART, button_at
from .session import GameSession, Snapshot

MOVE_REPEAT_INTERVAL = 0.03  # seconds between repeated steps while a key is held


def to_rgb(color) -> tuple:
    """Convert a [0,1) float color to 0-255 ints"""
    return tuple(int(c * 255) for c in color)


class AsteroidWindow(arcade.Window):
    """Arcade window rendering a GameSession"""

    def __init__(self, session: GameSession, drive: bool = True,
                 title: str = "Asteroid Shooting Game"):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, title, update_rate=TICK_INTERVAL)
        self.session = session
        # When False an outside loop (e.g. the gym env) ticks the session
        self.drive = drive
        self.clock = TickClock()
        self._held: Set[int] = set()
        self._repeat_timer = 0.0

        # Colors
        self.BG = arcade.color.BLACK
        self.SIDEBAR_C = (26, 26, 26)
        self.BUTTON_C = (51, 51, 51)
        self.TEXT_C = (255, 255, 255)
        self.CRAFT_C = (0, 255, 0)
        self.WING_C = (0, 204, 0)
        self.BULLET_C = (255, 0, 0)
        self.TITLE_C = (255, 255, 0)
        self.GAME_OVER_C = (255, 0, 0)

        self.background_color = self.BG

    # ----------------------------
    # Loop
    # ----------------------------

    def on_update(self, delta_time: float):
        # Real time is sampled once per tick; arcade's delta is not used
        dt = self.clock.sample()
        if not self.drive:
            return
        self._apply_held_keys(dt)
        self.session.tick(dt)

    def _apply_held_keys(self, dt: float):
        if not self._held or self.session.game_over:
            return
        self._repeat_timer += dt
        while self._repeat_timer >= MOVE_REPEAT_INTERVAL:
            self._repeat_timer -= MOVE_REPEAT_INTERVAL
            self._step_held()

    def _step_held(self):
        if arcade.key.LEFT in self._held:
            self.session.move_craft("left")
        if arcade.key.RIGHT in self._held:
            self.session.move_craft("right")

    # ----------------------------
    # Input
    # ----------------------------

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == arcade.key.SPACE:
            self.session.fire_projectile()
        elif symbol in (arcade.key.LEFT, arcade.key.RIGHT):
            self._held.add(symbol)
            self._repeat_timer = 0.0
            if not self.session.game_over:
                self._step_held()
        elif symbol == arcade.key.P:
            self.session.toggle_pause()
        elif symbol == arcade.key.R:
            self.restart()
        elif symbol == arcade.key.ESCAPE:
            self.end_game()

    def on_key_release(self, symbol: int, modifiers: int):
        self._held.discard(symbol)

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int):
        if button != arcade.MOUSE_BUTTON_LEFT:
            return
        action = button_at(x, y)
        if action == PAUSE:
            self.session.toggle_pause()
        elif action == RESTART:
            self.restart()
        elif action == END:
            self.end_game()

    def restart(self):
        self.session.restart()
        self._held.clear()

    def end_game(self):
        self.session.end_game()
        self.close()

    # ----------------------------
    # Drawing
    # ----------------------------

    def on_draw(self):
        """Draw the current session snapshot"""
        self.clear()
        snap = self.session.snapshot()

        for a in snap.asteroids:
            arcade.draw_circle_filled(a.x, a.y, a.radius, to_rgb(a.color))

        for x, y in snap.projectiles:
            arcade.draw_lrbt_rectangle_filled(x - 2, x + 2, y, y + 10, self.BULLET_C)

        self._draw_craft(*snap.craft)
        self._draw_hud(snap)
        self._draw_overlays(snap)
        self._draw_sidebar(snap)

    def _draw_craft(self, x: float, y: float):
        nose = y + CRAFT_NOSE_OFFSET
        # Fuselage (diamond)
        arcade.draw_polygon_filled(
            [(x, nose), (x - 15, y), (x, y - 10), (x + 15, y)], self.CRAFT_C
        )
        # Wings
        arcade.draw_polygon_filled(
            [(x - 15, y + 5), (x - 35, y), (x - 15, y - 5)], self.WING_C
        )
        arcade.draw_polygon_filled(
            [(x + 15, y + 5), (x + 35, y), (x + 15, y - 5)], self.WING_C
        )

    def _draw_hud(self, snap: Snapshot):
        arcade.draw_text(f"Score: {snap.score}", 10, WINDOW_HEIGHT - 20, self.TEXT_C, 14)

        box_w, box_h = 90, 40
        box_x = FIELD_WIDTH - box_w - 10
        box_y = WINDOW_HEIGHT - box_h - 10
        arcade.draw_lrbt_rectangle_outline(
            box_x, box_x + box_w, box_y, box_y + box_h, self.TEXT_C, 1
        )
        arcade.draw_text(f"Lives: {snap.lives}", box_x + 10, box_y + 15, self.TEXT_C, 14)

    def _draw_overlays(self, snap: Snapshot):
        cx, cy = FIELD_WIDTH / 2, WINDOW_HEIGHT / 2
        if snap.show_round_title:
            arcade.draw_text(f"Round {snap.round}", cx, cy + 40, self.TITLE_C, 24,
                             anchor_x="center")
        if snap.paused and not snap.game_over:
            arcade.draw_text("Paused", cx, cy, self.TEXT_C, 24, anchor_x="center")
        if snap.game_over:
            arcade.draw_text("Game Over", cx, cy, self.GAME_OVER_C, 24, anchor_x="center")

    def _draw_sidebar(self, snap: Snapshot):
        arcade.draw_lrbt_rectangle_filled(
            FIELD_WIDTH, WINDOW_WIDTH, 0, WINDOW_HEIGHT, self.SIDEBAR_C
        )
        for b in snap.buttons:
            arcade.draw_lrbt_rectangle_filled(
                b.x, b.x + b.width, b.y, b.y + b.height, self.BUTTON_C
            )
            arcade.draw_lrbt_rectangle_outline(
                b.x, b.x + b.width, b.y, b.y + b.height, self.TEXT_C, 1
            )
            arcade.draw_text(b.label, b.x + b.width / 2, b.y + b.height / 2,
                             self.TEXT_C, 9, anchor_x="center", anchor_y="center")


def main(argv: Optional[list] = None):
    parser = argparse.ArgumentParser(description="Play the asteroid shooter")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for spawning")
    parser.add_argument("--verbose", type=int, default=GAME_CONFIG["verbose"],
                        help="Console verbosity (0 silent, 1 rounds/game over, 2 all)")
    args = parser.parse_args(argv)

    config = dict(GAME_CONFIG, verbose=args.verbose)
    session = GameSession(seed=args.seed, **config)
    AsteroidWindow(session)
    arcade.run()

    print(f"Final score: {session.score} (round {int(session.round)})")


if __name__ == "__main__":
    main()
