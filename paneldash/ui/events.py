"""
Key events as seen by panels.

Textual names keys with strings such as "up", "enter", "j" or "ctrl+b".
KeyEvent splits such a name into the base key and a modifier set so panels
can match on the key alone and the host can match modifier shortcuts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Modifier(Enum):
    """Modifier keys that can accompany a key press."""

    CTRL = "ctrl"
    ALT = "alt"
    SHIFT = "shift"


# Navigation key names shared by the list panels
KEY_UP = "up"
KEY_DOWN = "down"
KEY_ENTER = "enter"
KEY_RIGHT = "right"

_MODIFIER_ORDER = (Modifier.CTRL, Modifier.ALT, Modifier.SHIFT)


@dataclass(frozen=True)
class KeyEvent:
    """A single key press with an optional modifier set."""

    key: str
    modifiers: frozenset[Modifier] = field(default_factory=frozenset)

    @classmethod
    def parse(cls, name: str) -> KeyEvent:
        """Parse a textual-style key name.

        Examples:
            KeyEvent.parse("ctrl+b")  # key "b", modifiers {CTRL}
            KeyEvent.parse("down")    # key "down", no modifiers

        Raises:
            ValueError: If the name is empty or uses an unknown modifier
        """
        name = name.strip().lower()
        if not name:
            raise ValueError("Empty key name")
        # Textual spells the "+" key as "plus", so "+" only ever separates
        *parts, key = name.split("+")
        if not key:
            raise ValueError(f"Missing key in '{name}'")
        modifiers = set()
        for part in parts:
            try:
                modifiers.add(Modifier(part))
            except ValueError:
                raise ValueError(f"Unknown modifier '{part}' in key '{name}'") from None
        return cls(key=key, modifiers=frozenset(modifiers))

    @property
    def ctrl(self) -> bool:
        return Modifier.CTRL in self.modifiers

    @property
    def plain(self) -> bool:
        """True when no modifier accompanies the key."""
        return not self.modifiers

    def __str__(self) -> str:
        names = [m.value for m in _MODIFIER_ORDER if m in self.modifiers]
        return "+".join([*names, self.key])
