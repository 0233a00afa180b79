"""Sound-effect playback with mute and volume control."""

import struct
from functools import lru_cache
from typing import Callable, Optional

from glowquest import synth

Sink = Callable[[bytes], None]


@lru_cache(maxsize=1)
def _sound_bank() -> dict:
    return {
        "sword_swing": synth.generate_sword_swing(),
        "enemy_hit": synth.generate_enemy_hit(),
        "enemy_die": synth.generate_enemy_die(),
        "player_hit": synth.generate_player_hit(),
        "item_pickup": synth.generate_item_pickup(),
        "door_open": synth.generate_door_open(),
        "menu_select": synth.generate_menu_select(),
        "game_over": synth.generate_game_over(),
    }


class Engine:
    """Plays generated effects by handing PCM buffers to a sink.

    Without a sink there is no audio output and every play call is silent.
    """

    def __init__(self, sink: Optional[Sink] = None) -> None:
        self._sink = sink
        self._sounds = _sound_bank() if sink is not None else {}
        self.muted = False
        self.volume = 1.0

    def toggle_mute(self) -> None:
        self.muted = not self.muted

    def volume_up(self) -> None:
        self.volume = min(self.volume + 0.1, 1.0)

    def volume_down(self) -> None:
        self.volume = max(self.volume - 0.1, 0.0)

    def scaled(self, buf: bytes) -> bytes:
        """The buffer with every int16 sample scaled by the current volume."""
        if self.volume >= 1.0:
            return buf
        out = bytearray(len(buf))
        whole = len(buf) // 2
        for i, (sample,) in enumerate(struct.iter_unpack("<h", buf[: whole * 2])):
            struct.pack_into("<h", out, i * 2, int(sample * self.volume))
        return bytes(out)

    def _play(self, name: str) -> None:
        buf = self._sounds.get(name, b"")
        if self._sink is None or not buf or self.muted:
            return
        self._sink(self.scaled(buf))

    def play_sword_swing(self) -> None:
        self._play("sword_swing")

    def play_enemy_hit(self) -> None:
        self._play("enemy_hit")

    def play_enemy_die(self) -> None:
        self._play("enemy_die")

    def play_player_hit(self) -> None:
        self._play("player_hit")

    def play_item_pickup(self) -> None:
        self._play("item_pickup")

    def play_door_open(self) -> None:
        self._play("door_open")

    def play_menu_select(self) -> None:
        self._play("menu_select")

    def play_game_over(self) -> None:
        self._play("game_over")