"""Keyboard keys, modifier keys and single key bindings."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable


class _NamedKey(Enum):
    def __str__(self) -> str:
        return self.value


def _key_members() -> list[tuple[str, str]]:
    members = [
        ("NONE", "None"),
        ("TAB", "Tab"),
        ("LEFT_ARROW", "LeftArrow"),
        ("RIGHT_ARROW", "RightArrow"),
        ("UP_ARROW", "UpArrow"),
        ("DOWN_ARROW", "DownArrow"),
        ("PAGE_UP", "PageUp"),
        ("PAGE_DOWN", "PageDown"),
        ("HOME", "Home"),
        ("END", "End"),
        ("INSERT", "Insert"),
        ("DELETE", "Delete"),
        ("BACKSPACE", "Backspace"),
        ("SPACE", "Space"),
        ("ENTER", "Enter"),
        ("ESCAPE", "Escape"),
        ("LEFT_CTRL", "LeftCtrl"),
        ("LEFT_SHIFT", "LeftShift"),
        ("LEFT_ALT", "LeftAlt"),
        ("LEFT_SUPER", "LeftSuper"),
        ("RIGHT_CTRL", "RightCtrl"),
        ("RIGHT_SHIFT", "RightShift"),
        ("RIGHT_ALT", "RightAlt"),
        ("RIGHT_SUPER", "RightSuper"),
        ("MENU", "Menu"),
    ]
    members += [(f"N{digit}", digit) for digit in string.digits]
    members += [(letter, letter) for letter in string.ascii_uppercase]
    members += [(f"F{n}", f"F{n}") for n in range(1, 13)]
    members += [
        ("APOSTROPHE", "'"),
        ("COMMA", ","),
        ("MINUS", "-"),
        ("PERIOD", "."),
        ("SLASH", "/"),
        ("SEMICOLON", ";"),
        ("EQUAL", "="),
        ("LEFT_BRACKET", "["),
        ("BACKSLASH", "\\"),
        ("RIGHT_BRACKET", "]"),
        ("GRAVE_ACCENT", "`"),
        ("CAPS_LOCK", "CapsLock"),
        ("SCROLL_LOCK", "ScrollLock"),
        ("NUM_LOCK", "NumLock"),
        ("PRINT_SCREEN", "PrintScreen"),
        ("PAUSE", "Pause"),
    ]
    members += [(f"KEYPAD{digit}", f"Keypad{digit}") for digit in string.digits]
    members += [
        ("KEYPAD_DECIMAL", "KeypadDecimal"),
        ("KEYPAD_DIVIDE", "KeypadDivide"),
        ("KEYPAD_MULTIPLY", "KeypadMultiply"),
        ("KEYPAD_SUBTRACT", "KeypadSubtract"),
        ("KEYPAD_ADD", "KeypadAdd"),
        ("KEYPAD_ENTER", "KeypadEnter"),
        ("KEYPAD_EQUAL", "KeypadEqual"),
        ("MOD_CTRL", "ModCtrl"),
        ("MOD_SHIFT", "ModShift"),
        ("MOD_ALT", "ModAlt"),
        ("MOD_SUPER", "ModSuper"),
    ]
    return members


Key = _NamedKey("Key", _key_members(), module=__name__, qualname="Key")
Key.__doc__ = "A keyboard key; its value is the key's display name."

_KEYS_BY_NAME = {key.value: key for key in Key if key is not Key.NONE}

MODIFIERS = frozenset(
    {
        Key.MOD_CTRL,
        Key.MOD_SHIFT,
        Key.MOD_ALT,
        Key.MOD_SUPER,
        Key.LEFT_CTRL,
        Key.LEFT_SHIFT,
        Key.LEFT_ALT,
        Key.LEFT_SUPER,
        Key.RIGHT_CTRL,
        Key.RIGHT_SHIFT,
        Key.RIGHT_ALT,
        Key.RIGHT_SUPER,
    }
)

# Only the side-independent modifiers are reported as held.
HANDLED_MODIFIERS = (Key.MOD_CTRL, Key.MOD_SHIFT, Key.MOD_ALT, Key.MOD_SUPER)

KeyPredicate = Callable[[Key], bool]


def key_from_name(name: str) -> Key:
    """Return the named key; raise KeyError for an unknown name."""
    try:
        return _KEYS_BY_NAME[name]
    except KeyError:
        raise KeyError(f"unknown key name: {name!r}") from None


def is_modifier(key: Key) -> bool:
    """Tell whether ``key`` is a modifier and cannot end a binding."""
    return key in MODIFIERS


def pressed_modifiers(is_down: KeyPredicate) -> list[Key]:
    """The handled modifiers currently held down, in canonical order."""
    return [key for key in HANDLED_MODIFIERS if is_down(key)]


@dataclass(frozen=True)
class KeyBinding:
    """A final key together with the modifiers held while pressing it."""

    key: Key = Key.NONE
    modifiers: tuple[Key, ...] = ()

    def __init__(self, key: Key = Key.NONE, modifiers: Iterable[Key] = ()) -> None:
        object.__setattr__(self, "key", key)
        object.__setattr__(self, "modifiers", tuple(modifiers))

    def is_pressed(self, is_down: KeyPredicate, was_pressed: KeyPredicate) -> bool:
        """Modifiers held down while the final key is pressed once."""
        modifiers_held = all(m is not Key.NONE and is_down(m) for m in self.modifiers)
        return modifiers_held and self.key is not Key.NONE and was_pressed(self.key)

    def __str__(self) -> str:
        return "+".join(str(key) for key in (*self.modifiers, self.key))