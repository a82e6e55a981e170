"""Managing the ordered list of preferred microphones."""

from __future__ import annotations

import re
from typing import Sequence

__all__ = ["PreferenceError", "add_preference", "remove_preference", "format_preferences"]

_INTEGER = re.compile(r"[+-]?[0-9]+")

_ADD_USAGE = '  openscribe config --add-preference "<microphone name>"'


class PreferenceError(Exception):
    """Raised when a preference list cannot be changed as requested."""


def add_preference(preferences: Sequence[str], name: str) -> list[str]:
    """Return a new preference list with `name` appended at the lowest priority."""
    if not name:
        raise PreferenceError("Microphone name cannot be empty")
    for priority, existing in enumerate(preferences, start=1):
        if existing == name:
            raise PreferenceError(
                f'"{name}" is already in your preferences (priority {priority})'
            )
    return [*preferences, name]


def remove_preference(preferences: Sequence[str], name_or_index: str) -> tuple[list[str], str]:
    """Remove a preference by 1-based position or exact name.

    Returns the new list and the name that was removed. Removing by name drops
    every entry equal to it.
    """
    if not name_or_index:
        raise PreferenceError("Must provide microphone name or index")
    if not preferences:
        raise PreferenceError("No preferred microphones configured")

    if _INTEGER.fullmatch(name_or_index):
        index = int(name_or_index)
        if not 1 <= index <= len(preferences):
            raise PreferenceError(
                f"Invalid index: {index} (valid range: 1-{len(preferences)})"
            )
        removed = preferences[index - 1]
        remaining = [mic for position, mic in enumerate(preferences, start=1) if position != index]
        return remaining, removed

    if name_or_index not in preferences:
        raise PreferenceError(f'"{name_or_index}" not found in preferences')
    remaining = [mic for mic in preferences if mic != name_or_index]
    return remaining, name_or_index


def format_preferences(preferences: Sequence[str]) -> str:
    """Describe the preference list as shown by `config --show-preferences`."""
    if not preferences:
        return "\n".join(
            [
                "No preferred microphones configured.",
                "",
                "Using: System default microphone",
                "",
                "To add preferences:",
                _ADD_USAGE,
                "",
            ]
        )
    lines = ["Preferred Microphones (in priority order):"]
    lines += [f"  {position}. {mic}" for position, mic in enumerate(preferences, start=1)]
    lines += ["", "Fallback: System default microphone", ""]
    return "\n".join(lines)