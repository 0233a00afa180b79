"""Procedurally generated sound effects as 16-bit mono little-endian PCM."""

import math
import struct
from typing import Callable, Iterable

SAMPLE_RATE = 44100

_TAU = 2 * math.pi


def _sample_count(duration: float) -> int:
    return int(float(SAMPLE_RATE) * duration)


def _pack(samples: Iterable[float]) -> bytes:
    """Truncate each value towards zero and pack as little-endian int16."""
    values = [int(v) for v in samples]
    return struct.pack(f"<{len(values)}h", *values)


def _noise(seed: int) -> Callable[[], float]:
    """A 16-bit Fibonacci LFSR producing noise in roughly [-1, 1)."""
    state = seed & 0xFFFF

    def step() -> float:
        nonlocal state
        bit = (state ^ (state >> 2) ^ (state >> 3) ^ (state >> 5)) & 1
        state = ((state >> 1) | (bit << 15)) & 0xFFFF
        signed = state - 0x10000 if state & 0x8000 else state
        return signed / 32768.0

    return step


def generate_sword_swing() -> bytes:
    """A short descending sweep."""
    samples = _sample_count(0.1)

    def sample(i: int) -> float:
        t = i / SAMPLE_RATE
        progress = i / samples
        freq = 600.0 - 300.0 * progress
        env = (1.0 - progress) ** 2
        return math.sin(_TAU * freq * t) * env * 6000

    return _pack(sample(i) for i in range(samples))


def _noisy_burst(duration, seed, tone, tone_gain, noise_gain, env_power, amplitude) -> bytes:
    samples = _sample_count(duration)
    noise = _noise(seed)

    def sample(i: int) -> float:
        t = i / SAMPLE_RATE
        progress = i / samples
        value = math.sin(_TAU * tone(progress) * t) * tone_gain + noise() * noise_gain
        env = (1.0 - progress) ** env_power
        return value * env * amplitude

    return _pack(sample(i) for i in range(samples))


def generate_enemy_hit() -> bytes:
    """A short impact burst of tone and noise."""
    return _noisy_burst(0.08, 0xBEEF, lambda p: 500.0, 0.6, 0.4, 2, 7000)


def generate_enemy_die() -> bytes:
    """A noisy crunch with a descending pitch."""
    return _noisy_burst(0.3, 0xACE1, lambda p: 400.0 - 200.0 * p, 0.4, 0.6, 3, 8000)


def generate_player_hit() -> bytes:
    """A low thud with noise."""
    return _noisy_burst(0.15, 0xDEAD, lambda p: 200.0, 0.7, 0.3, 2, 8000)


def generate_item_pickup() -> bytes:
    """An ascending three-note chime (E5, G5, A5)."""
    samples = _sample_count(0.25)
    notes = (659.25, 783.99, 880.0)
    note_len = samples // len(notes)

    def sample(i: int) -> float:
        freq = notes[min(i // note_len, len(notes) - 1)]
        t = i / SAMPLE_RATE
        progress = i / samples
        value = math.sin(_TAU * freq * t) * 0.7 + math.sin(_TAU * freq * 2 * t) * 0.2
        env = 1.0 - progress * 0.5
        return value * env * 5000

    return _pack(sample(i) for i in range(samples))


def generate_door_open() -> bytes:
    """An ascending three-note sequence (C4, E4, G4)."""
    samples = _sample_count(0.3)
    notes = (261.63, 329.63, 392.0)
    note_len = samples // len(notes)

    def sample(i: int) -> float:
        freq = notes[min(i // note_len, len(notes) - 1)]
        t = i / SAMPLE_RATE
        local_t = (i % note_len) / note_len
        env = (1.0 - local_t) * 5.0 if local_t > 0.8 else 1.0
        return math.sin(_TAU * freq * t) * env * 5000

    return _pack(sample(i) for i in range(samples))


def generate_menu_select() -> bytes:
    """A short blip."""
    samples = _sample_count(0.05)

    def sample(i: int) -> float:
        t = i / SAMPLE_RATE
        env = 1.0 - i / samples
        return math.sin(_TAU * 1000 * t) * env * 5000

    return _pack(sample(i) for i in range(samples))


def generate_game_over() -> bytes:
    """A long descending sad tone."""
    samples = _sample_count(1.0)

    def sample(i: int) -> float:
        t = i / SAMPLE_RATE
        progress = i / samples
        freq = 400.0 - 200.0 * progress
        value = math.sin(_TAU * freq * t) * 0.6 + math.sin(_TAU * freq * 0.5 * t) * 0.3
        return value * (1.0 - progress) * 8000

    return _pack(sample(i) for i in range(samples))