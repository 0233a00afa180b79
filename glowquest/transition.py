"""Screen scroll and fade transitions."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from glowquest.config import FADE_DURATION, TRANSITION_DURATION
from glowquest.screen import Screen


class TransitionType(IntEnum):
    SCROLL = 0
    FADE = 1


@dataclass
class Transition:
    active: bool = False
    kind: TransitionType = TransitionType.SCROLL
    timer: float = 0.0
    duration: float = 0.0
    dir_x: int = 0
    dir_y: int = 0
    old_screen: Optional[Screen] = None

    def progress(self) -> float:
        """How far through the transition, from 0 to 1."""
        if self.duration <= 0:
            return 1.0
        return min(self.timer / self.duration, 1.0)

    def done(self) -> bool:
        return self.timer >= self.duration

    def start(self, dir_x: int, dir_y: int, old_screen: Optional[Screen]) -> None:
        """Begin scrolling from the old screen in the given direction."""
        self.active = True
        self.kind = TransitionType.SCROLL
        self.timer = 0.0
        self.duration = TRANSITION_DURATION
        self.dir_x = dir_x
        self.dir_y = dir_y
        self.old_screen = old_screen

    def start_fade(self) -> None:
        """Begin a fade to black and back."""
        self.active = True
        self.kind = TransitionType.FADE
        self.timer = 0.0
        self.duration = FADE_DURATION
        self.dir_x = 0
        self.dir_y = 0
        self.old_screen = None

    def fade_progress(self) -> float:
        """Darkness of the fade: rises 0 to 1 over the first half, then falls."""
        p = self.progress()
        if p < 0.5:
            return p * 2
        return (1 - p) * 2


def ease_in_out(t: float) -> float:
    """Quadratic ease-in-out on [0, 1]."""
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) * (-2 * t + 2) / 2