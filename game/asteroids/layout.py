"""
Sidebar button layout and pointer hit-testing
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .config import FIELD_WIDTH

BUTTON_X = FIELD_WIDTH + 10
BUTTON_WIDTH = 90
BUTTON_HEIGHT = 50
PAUSE_BUTTON_Y = 500
RESTART_BUTTON_Y = 430
END_BUTTON_Y = 360

# Button actions
PAUSE = "pause"
RESTART = "restart"
END = "end"


@dataclass(frozen=True)
class Button:
    """Fixed sidebar button; x, y is the bottom-left corner"""
    action: str
    label: str
    x: float
    y: float
    width: float = BUTTON_WIDTH
    height: float = BUTTON_HEIGHT

    def contains(self, px: float, py: float) -> bool:
        return (self.x <= px <= self.x + self.width
                and self.y <= py <= self.y + self.height)


SIDEBAR_BUTTONS: Tuple[Button, ...] = (
    Button(PAUSE, "Pause/Resume", BUTTON_X, PAUSE_BUTTON_Y),
    Button(RESTART, "Restart Game", BUTTON_X, RESTART_BUTTON_Y),
    Button(END, "End Game", BUTTON_X, END_BUTTON_Y),
)


def button_at(x: float, y: float) -> Optional[str]:
    """Return the action of the sidebar button under (x, y), if any"""
    if x < FIELD_WIDTH:
        return None
    for button in SIDEBAR_BUTTONS:
        if button.contains(x, y):
            return button.action
    return None
