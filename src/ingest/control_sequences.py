"""Terminal control sequence stripping.

inxi colors its output with ANSI escapes when attached to a terminal
and with IRC-style color codes otherwise. This module removes both
while keeping newline, carriage return, and tab characters intact.
"""

from __future__ import annotations

from core.constants import (
    BELL_CHARACTER,
    ESCAPE_CHARACTER,
    LEGACY_COLOR_MAX_DIGITS,
    LEGACY_COLOR_START,
    LEGACY_FORMAT_TOGGLES,
    PRESERVED_CONTROL_CHARACTERS,
)


def strip_control_sequences(text: str) -> str:
    """Remove escape sequences and control characters from captured text.

    Args:
        text: Raw captured text, possibly with truncated sequences.

    Returns:
        Text free of control characters other than newline,
        carriage return, and tab, with no characters reordered.
    """
    output: list[str] = []
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        index += 1
        if char == ESCAPE_CHARACTER:
            index = _skip_escape_sequence(text, index)
            continue
        if char == LEGACY_COLOR_START:
            index = _skip_legacy_color(text, index)
            continue
        if char in LEGACY_FORMAT_TOGGLES:
            continue
        if _is_control(char) and char not in PRESERVED_CONTROL_CHARACTERS:
            continue
        output.append(char)
    return "".join(output)


def _skip_escape_sequence(text: str, index: int) -> int:
    """Return the index just past an escape sequence body.

    Args:
        text: Full input text.
        index: Position right after the escape character.

    Returns:
        Position of the first character to keep scanning from.
    """
    if index >= len(text):
        return index
    introducer = text[index]
    if introducer == "[":
        return _skip_csi_body(text, index + 1)
    if introducer == "]":
        return _skip_osc_body(text, index + 1)
    return index + 1


def _skip_csi_body(text: str, index: int) -> int:
    while index < len(text):
        char = text[index]
        index += 1
        if "@" <= char <= "~":
            break
    return index


def _skip_osc_body(text: str, index: int) -> int:
    while index < len(text):
        char = text[index]
        index += 1
        if char == BELL_CHARACTER:
            break
        if char == ESCAPE_CHARACTER and text.startswith("\\", index):
            index += 1
            break
    return index


def _skip_legacy_color(text: str, index: int) -> int:
    """Skip ``fg[,bg]`` digits that follow an IRC color start byte."""
    index = _skip_digits(text, index, LEGACY_COLOR_MAX_DIGITS)
    if text.startswith(",", index):
        index = _skip_digits(text, index + 1, LEGACY_COLOR_MAX_DIGITS)
    return index


def _skip_digits(text: str, index: int, max_digits: int) -> int:
    seen = 0
    while seen < max_digits and index < len(text) and "0" <= text[index] <= "9":
        index += 1
        seen += 1
    return index


def _is_control(char: str) -> bool:
    """Return whether a character is in Unicode category Cc."""
    code_point = ord(char)
    return code_point < 0x20 or 0x7F <= code_point <= 0x9F
