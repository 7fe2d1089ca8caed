"""Keyboard state tracked frame by frame."""

from __future__ import annotations

from collections.abc import Iterable

KEY_COUNT = 255

KEY_ESCAPE = 0x01
KEY_K = 0x25
KEY_SPACE = 0x39
KEY_LEFT = 0xCB
KEY_RIGHT = 0xCD


def _wrap_byte(value: int) -> int:
    # Hold counters are signed bytes and roll over after 127.
    return (value + 128) % 256 - 128


def _check(key: int) -> int:
    if not 0 <= key < KEY_COUNT:
        raise ValueError(f"key code {key} is outside 0..{KEY_COUNT - 1}")
    return key


class Keyboard:
    """Tells which keys went down, came up or are being held this frame."""

    def __init__(self) -> None:
        self._current: frozenset[int] = frozenset()
        self._previous: frozenset[int] = frozenset()
        self._held = [0] * KEY_COUNT

    def update(self, pressed: Iterable[int]) -> None:
        """Start a new frame with ``pressed`` as the keys now down."""
        current = frozenset(_check(key) for key in pressed)
        previous = self._current
        for key in current & previous:
            self._held[key] = _wrap_byte(self._held[key] + 1)
        for key in current ^ previous:
            self._held[key] = 0
        self._previous = previous
        self._current = current

    def is_key_up(self, key: int) -> bool:
        """True on the frame ``key`` was released."""
        _check(key)
        return key in self._previous and key not in self._current

    def is_key_down(self, key: int) -> bool:
        """True on the frame ``key`` was pressed."""
        _check(key)
        return key in self._current and key not in self._previous

    def held_frames(self, key: int) -> int:
        """Frames ``key`` has stayed down since the frame it was pressed."""
        return self._held[_check(key)]