"""Named groups of key bindings and their configuration form."""

from __future__ import annotations

import logging
import sys
from typing import Any

from boardview.keys import Key, KeyBinding, KeyPredicate, key_from_name

log = logging.getLogger(__name__)

BINDING_SEPARATOR = "|"
MODIFIER_SEPARATOR = "~"
CONFIG_PREFIX = "KeyBinding"

# Key names that clash with the separators get a stand-in name.
_SERIALIZE_NAME = {"|": "Pipe", "~": "Tilde", "=": "Equals"}
_DESERIALIZE_NAME = {value: key for key, value in _SERIALIZE_NAME.items()}


def _parse_key(name: str) -> Key:
    name = _DESERIALIZE_NAME.get(name, name)
    try:
        return key_from_name(name)
    except KeyError:
        log.error("Unknown key name: %s", name)
        return Key.NONE


def _serialize_key(key: Key) -> str:
    name = str(key)
    return _SERIALIZE_NAME.get(name, name)


class KeyBindings:
    """All the application's named actions and the keys bound to them.

    The configuration is any mapping of strings with ``get`` and item
    assignment; each action is stored under ``KeyBinding<Name>``.
    """

    def __init__(self, apple: bool | None = None) -> None:
        self.apple = sys.platform == "darwin" if apple is None else apple
        self.bindings: dict[str, list[KeyBinding]] = {}
        self.reset()

    def is_pressed(self, name: str, is_down: KeyPredicate, was_pressed: KeyPredicate) -> bool:
        """Tell whether any binding of the named action was pressed."""
        return any(b.is_pressed(is_down, was_pressed) for b in self.bindings.get(name, ()))

    def reset(self) -> None:
        """Restore the default bindings."""
        command = Key.MOD_SUPER if self.apple else Key.MOD_CTRL
        kb = KeyBinding
        self.bindings.update(
            {
                "Quit": [kb(Key.Q, [command])],
                "Open": [kb(Key.O, [command])],
                "Search": [kb(Key.F, [command]), kb(Key.SLASH)],
                "CloseDialog": [kb(Key.ESCAPE)],
                "Validate": [kb(Key.ENTER, [Key.MOD_SHIFT])],
                "Accept": [kb(Key.ENTER)],
                "Flip": [kb(Key.SPACE)],
                "Mirror": [kb(Key.M)],
                "RotateCW": [kb(Key.R), kb(Key.PERIOD), kb(Key.KEYPAD_DECIMAL)],
                "RotateCCW": [kb(Key.COMMA), kb(Key.KEYPAD0)],
                "ZoomIn": [kb(Key.KEYPAD_ADD), kb(Key.EQUAL)],
                "ZoomOut": [kb(Key.MINUS), kb(Key.KEYPAD_SUBTRACT)],
                "PanDown": [kb(Key.S), kb(Key.KEYPAD2)],
                "PanUp": [kb(Key.W), kb(Key.KEYPAD8)],
                "PanLeft": [kb(Key.A), kb(Key.KEYPAD4)],
                "PanRight": [kb(Key.D), kb(Key.KEYPAD6)],
                "Center": [kb(Key.X), kb(Key.KEYPAD5)],
                "InfoPanel": [kb(Key.I)],
                "NetList": [kb(Key.L)],
                "PartList": [kb(Key.K)],
                "TogglePins": [kb(Key.P)],
                "Clear": [kb(Key.ESCAPE)],
            }
        )

    def read_from_config(self, config: Any) -> None:
        """Load bindings present in ``config``, then write all back to it."""
        for name in self.bindings:
            line = config.get(CONFIG_PREFIX + name)
            if line is None:
                continue
            bindings = []
            for text in filter(None, line.split(BINDING_SEPARATOR)):
                keys = [_parse_key(part) for part in text.split(MODIFIER_SEPARATOR) if part]
                if keys:
                    bindings.append(KeyBinding(keys[-1], keys[:-1]))
            self.bindings[name] = bindings
        self.write_to_config(config)

    def write_to_config(self, config: Any) -> None:
        """Store every action's bindings in ``config``."""
        for name, bindings in self.bindings.items():
            config[CONFIG_PREFIX + name] = BINDING_SEPARATOR.join(
                MODIFIER_SEPARATOR.join(_serialize_key(k) for k in (*b.modifiers, b.key))
                for b in bindings
            )

    def key_names(self, name: str) -> str:
        """Human-readable list of the keys bound to the named action."""
        return " ".join(f"<{binding}>" for binding in self.bindings.get(name, ()))