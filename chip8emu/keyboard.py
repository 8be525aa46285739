"""The sixteen-key hexadecimal keypad."""

from __future__ import annotations

from dataclasses import dataclass, field

KEY_COUNT = 16

# Physical key name (as reported by the windowing layer) -> keypad value.
KEY_MAP: dict[str, int] = {
    "1": 0x1,
    "2": 0x2,
    "3": 0x3,
    "4": 0xC,
    "q": 0x4,
    "w": 0x5,
    "e": 0x6,
    "r": 0xD,
    "a": 0x7,
    "s": 0x8,
    "d": 0x9,
    "f": 0xE,
    "z": 0xA,
    "x": 0x0,
    "c": 0xB,
    "v": 0xF,
}


def map_key(name: str) -> int | None:
    """Return the keypad value bound to a physical key name, or None."""
    return KEY_MAP.get(name.lower())


@dataclass
class Keyboard:
    """State of the keypad, plus the register waiting for a key press, if any."""

    keys: list[bool] = field(default_factory=lambda: [False] * KEY_COUNT)
    awaiting_key: int | None = None

    def set_key(self, key: int, pressed: bool) -> None:
        """Mark a key as pressed or released; keys outside the pad are ignored."""
        if 0 <= key < KEY_COUNT:
            self.keys[key] = pressed

    def is_pressed(self, key: int) -> bool:
        """Tell whether a key is held; keys outside the pad never are."""
        return 0 <= key < KEY_COUNT and self.keys[key]

    def first_pressed(self) -> int | None:
        """Return the lowest key currently held, or None."""
        return next((key for key, pressed in enumerate(self.keys) if pressed), None)