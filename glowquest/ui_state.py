"""Top-level game states, the title menu and the dialogue box state."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from glowquest.entities import NPC

LINES_PER_PAGE = 3


class GameState(IntEnum):
    MENU = 0
    PLAYING = 1
    PAUSED = 2
    GAME_OVER = 3
    DIALOGUE = 4
    VICTORY = 5
    INVENTORY = 6


@dataclass
class MenuOption:
    label: str
    disabled: bool = False


@dataclass
class MenuState:
    options: list[MenuOption] = field(default_factory=list)
    selected_index: int = 0

    def _step(self, delta: int) -> None:
        for _ in range(len(self.options)):
            self.selected_index = (self.selected_index + delta) % len(self.options)
            if not self.options[self.selected_index].disabled:
                return

    def move_up(self) -> None:
        """Select the previous enabled option, wrapping around."""
        self._step(-1)

    def move_down(self) -> None:
        """Select the next enabled option, wrapping around."""
        self._step(1)


def main_menu(has_save: bool) -> MenuState:
    """The title menu; Continue is disabled without a save."""
    return MenuState(
        options=[MenuOption("NEW GAME"), MenuOption("CONTINUE", disabled=not has_save)],
        selected_index=0,
    )


@dataclass
class DialogueState:
    active: bool = False
    npc: Optional[NPC] = None
    lines: list[str] = field(default_factory=list)
    current_line: int = 0

    def start(self, npc: NPC) -> None:
        """Begin talking to an NPC using its default dialogue."""
        self.start_with_lines(npc, npc.dialogue)

    def start_with_lines(self, npc: NPC, lines: list[str]) -> None:
        self.active = True
        self.npc = npc
        self.lines = lines
        self.current_line = 0

    def advance(self) -> bool:
        """Move to the next page; returns True when the dialogue has ended."""
        self.current_line += LINES_PER_PAGE
        if self.current_line >= len(self.lines):
            self.active = False
            self.npc = None
            self.lines = []
            self.current_line = 0
            return True
        return False

    def has_more(self) -> bool:
        """Whether another page follows the current one."""
        return self.current_line + LINES_PER_PAGE < len(self.lines)