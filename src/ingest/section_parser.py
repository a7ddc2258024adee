"""Section and entry parsing for cleaned inxi output.

inxi prints short titled blocks (``System:``, ``CPU:``) followed by
loosely formatted key/value lines, wrapping long values onto indented
lines. This module recovers that structure with line heuristics; it
never fails on unexpected input and drops lines it cannot place.
"""

from __future__ import annotations

from dataclasses import replace

from core.constants import CONTINUATION_MIN_INDENT, TITLE_EXTRA_CHARACTERS, TITLE_MAX_TOKENS
from core.types import ReportEntry, ReportSection


def parse_sections(clean_text: str) -> list[ReportSection]:
    """Parse clean text into ordered report sections.

    Args:
        clean_text: Text already stripped of control sequences.

    Returns:
        Sections in first-appearance order. Lines before the first
        title are discarded and blank lines never close a section.
    """
    sections: list[ReportSection] = []
    current_title: str | None = None
    current_entries: list[ReportEntry] = []
    for raw_line in clean_text.split("\n"):
        line = raw_line.strip()
        if not line:
            continue
        title = parse_section_title(line)
        if title is not None:
            _push_section(sections, current_title, current_entries)
            current_title = title
            current_entries = []
            continue
        if current_title is None:
            continue
        if is_continuation_line(raw_line, line):
            if current_entries:
                last_entry = current_entries[-1]
                current_entries[-1] = replace(last_entry, value=f"{last_entry.value} {line}")
            continue
        entry = parse_entry(line)
        if entry is not None:
            current_entries.append(entry)
    _push_section(sections, current_title, current_entries)
    return sections


def parse_section_title(line: str) -> str | None:
    """Return the section title for a title-shaped line.

    Args:
        line: Trimmed, non-empty line.

    Returns:
        Title without trailing colons, or None when the line is data.
    """
    if not line.endswith(":"):
        return None
    if len(line.split()) > TITLE_MAX_TOKENS:
        return None
    title = line.rstrip(":").strip()
    if not title or not title[0].isupper():
        return None
    if not all(_is_title_character(char) for char in title):
        return None
    return title


def is_continuation_line(raw_line: str, trimmed_line: str) -> bool:
    """Return whether a line extends the previous entry's value.

    Args:
        raw_line: Untrimmed line, used for its indentation width.
        trimmed_line: Same line with surrounding whitespace removed.

    Returns:
        True for deeply indented lines that start with a parenthesis,
        a bare number, or an ``name=value`` token.
    """
    indent = len(raw_line) - len(raw_line.lstrip())
    if indent < CONTINUATION_MIN_INDENT:
        return False
    tokens = trimmed_line.split()
    if not tokens:
        return False
    first_token = tokens[0]
    return first_token.startswith("(") or _is_ascii_number(first_token) or "=" in first_token


def parse_entry(line: str) -> ReportEntry | None:
    """Extract one key/value entry from a data line.

    Args:
        line: Trimmed, non-empty line that is neither title nor continuation.

    Returns:
        Parsed entry, or None when the line holds no tokens.
    """
    key_text, separator, value_text = line.partition(":")
    if separator:
        key = key_text.strip()
        value = value_text.strip()
        if key and value:
            return ReportEntry(key=key, value=value)
    tokens = line.split()
    if not tokens:
        return None
    key = tokens[0]
    value_start = 1
    if len(tokens) > 1 and tokens[1].startswith("(") and tokens[1].endswith(")"):
        key = f"{key} {tokens[1]}"
        value_start = 2
    value = " ".join(tokens[value_start:]) or line
    return ReportEntry(key=key, value=value)


def _push_section(
    sections: list[ReportSection],
    title: str | None,
    entries: list[ReportEntry],
) -> None:
    if title is not None:
        sections.append(ReportSection(title=title, entries=tuple(entries)))


def _is_title_character(char: str) -> bool:
    return (char.isascii() and char.isalnum()) or char in TITLE_EXTRA_CHARACTERS


def _is_ascii_number(token: str) -> bool:
    return token.isascii() and token.isdigit()
