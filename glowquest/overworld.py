"""The overworld: a grid of screens and the player's position on it."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from glowquest import config
from glowquest.loader import load_overworld_meta, load_overworld_screens
from glowquest.screen import Screen


@dataclass
class Overworld:
    screens: dict[tuple[int, int], Screen] = field(default_factory=dict)
    width: int = 16
    height: int = 16
    current_x: int = 0
    current_y: int = 0

    def current_screen(self) -> Screen:
        """The screen the player is on; an empty grass screen if unmapped."""
        screen = self.screens.get((self.current_x, self.current_y))
        return screen if screen is not None else Screen()

    def screen_at(self, x: int, y: int) -> Optional[Screen]:
        """Screen at a grid position, or None outside the grid or if unmapped."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return None
        return self.screens.get((x, y))

    def can_move(self, dx: int, dy: int) -> bool:
        """Whether the neighbouring screen in that direction exists."""
        nx = self.current_x + dx
        ny = self.current_y + dy
        if not (0 <= nx < self.width and 0 <= ny < self.height):
            return False
        return (nx, ny) in self.screens

    def move(self, dx: int, dy: int) -> None:
        self.current_x += dx
        self.current_y += dy


def load_overworld(maps_dir: Union[str, Path]) -> Overworld:
    """Build the overworld from map files and record its size in the config."""
    meta = load_overworld_meta(maps_dir)
    overworld = Overworld(
        screens=load_overworld_screens(maps_dir),
        width=meta.width,
        height=meta.height,
        current_x=meta.start_screen[0],
        current_y=meta.start_screen[1],
    )
    config.OVERWORLD_W = meta.width
    config.OVERWORLD_H = meta.height
    return overworld