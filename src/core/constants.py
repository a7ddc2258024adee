"""Core constants used across inxi-dash modules.

This module centralizes parser thresholds, category keywords, and
service defaults. Changing a parser threshold silently moves section
boundaries, so these values mirror observed inxi output.
"""

from __future__ import annotations

TITLE_MAX_TOKENS = 3
TITLE_EXTRA_CHARACTERS = frozenset(" -/()+")
CONTINUATION_MIN_INDENT = 4

ESCAPE_CHARACTER = "\x1b"
BELL_CHARACTER = "\x07"
LEGACY_COLOR_START = "\x03"
LEGACY_COLOR_MAX_DIGITS = 2
LEGACY_FORMAT_TOGGLES = frozenset("\x02\x0f\x16\x1d\x1f")
PRESERVED_CONTROL_CHARACTERS = frozenset("\n\r\t")

TITLE_KEYWORD_SCORE = 6
KEY_KEYWORD_SCORE = 2
VALUE_KEYWORD_SCORE = 1
CATEGORY_SCORE_THRESHOLD = 2
GENERAL_CATEGORY_LABEL = "General"
CATEGORY_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("CPU", ("cpu", "processor", "core", "thread", "cache", "mhz", "ghz")),
    ("GPU", ("gpu", "graphics", "video", "vram", "display", "vulkan", "opengl")),
    ("Memory", ("memory", "ram", "swap", "slot", "dimm", "channel")),
    (
        "Motherboard",
        ("machine", "mobo", "motherboard", "board", "bios", "chipset", "firmware"),
    ),
    (
        "Storage",
        ("drives", "drive", "disk", "storage", "ssd", "hdd", "nvme", "partition"),
    ),
    ("Network", ("network", "ethernet", "wifi", "lan", "wireless", "wlan", "if")),
    ("Power", ("power", "volt", "battery", "charging")),
    (GENERAL_CATEGORY_LABEL, ()),
)

DEFAULT_INXI_MODE = "basic"
INXI_MODE_ARGS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("basic", ("-F",)),
    ("full", ("-F", "-z")),
    ("verbose", ("-a", "-F", "-z")),
    ("maximum", ("-a", "-F", "-x", "-x", "-x", "-z")),
)
INXI_MODE_LABELS: tuple[tuple[str, str], ...] = (
    ("basic", "Basic"),
    ("full", "Full"),
    ("verbose", "Verbose"),
    ("maximum", "Maximum"),
)
THEME_OPTIONS: tuple[tuple[str, str], ...] = (
    ("default", "Balanced"),
    ("dark", "Night"),
    ("royal", "Royal"),
    ("glass", "Glass"),
)

DEFAULT_BIND_HOST = "127.0.0.1"
DEFAULT_BIND_PORT = 3050
DEFAULT_INXI_BINARY = "inxi"
DEFAULT_COMMAND_TIMEOUT_SECONDS = 60.0
DOWNLOAD_FILENAME_PREFIX = "inxi-dashboard"
DOWNLOAD_MODE = "maximum"
STATIC_ROUTE_PREFIX = "/static"
