"""Plain ``key = value`` configuration files attached to boards."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

_TRUE = {"true", "yes", "on", "1"}
_FALSE = {"false", "no", "off", "0"}


def _parse_line(line: str) -> tuple[str, str] | None:
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None
    key, sep, value = stripped.partition("=")
    if not sep:
        return None
    key = key.strip()
    return (key, value.strip()) if key else None


def _format(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return repr(value)
    return str(value)


class ConfigFile:
    """A configuration file of ``key = value`` lines.

    Comments and unknown lines are kept; every ``set`` writes the file.
    A missing file reads as empty and is created on the first ``set``.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            text = ""
        self._lines = text.splitlines()
        self._values: dict[str, str] = {}
        for line in self._lines:
            parsed = _parse_line(line)
            if parsed:
                self._values[parsed[0]] = parsed[1]

    def get(self, key: str, default: str | None = None) -> str | None:
        """The raw value of ``key``, or ``default``."""
        return self._values.get(key, default)

    def get_int(self, key: str, default: int = 0) -> int:
        """The value of ``key`` as an integer, or ``default``."""
        try:
            return int(self._values[key])
        except (KeyError, ValueError):
            return default

    def get_float(self, key: str, default: float = 0.0) -> float:
        """The value of ``key`` as a float, or ``default``."""
        try:
            return float(self._values[key])
        except (KeyError, ValueError):
            return default

    def get_bool(self, key: str, default: bool = False) -> bool:
        """The value of ``key`` as a boolean, or ``default``."""
        value = self._values.get(key)
        if value is None:
            return default
        lowered = value.lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        return default

    def set(self, key: str, value: object) -> None:
        """Store ``value`` under ``key`` and save the file."""
        if not key or "=" in key or any(c in key for c in "\r\n#") or key != key.strip():
            raise ValueError(f"invalid configuration key: {key!r}")
        text = _format(value)
        if "\n" in text or "\r" in text:
            raise ValueError(f"configuration value for {key!r} spans several lines")
        line = f"{key} = {text}"
        replaced = False
        for index, existing in enumerate(self._lines):
            parsed = _parse_line(existing)
            if parsed and parsed[0] == key:
                self._lines[index] = line
                replaced = True
        if not replaced:
            self._lines.append(line)
        self._values[key] = text
        self.path.write_text("\n".join(self._lines) + "\n", encoding="utf-8")

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __setitem__(self, key: str, value: object) -> None:
        self.set(key, value)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)