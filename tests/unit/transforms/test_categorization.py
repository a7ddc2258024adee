"""Unit tests for keyword-based section categorization."""

from __future__ import annotations

from core.types import CategoryConfig, ReportEntry, ReportSection
from transforms.categorization import (
    CATEGORY_CONFIG,
    categorize_sections,
    score_section,
    select_category,
    supported_category_labels,
)


def _section(title: str, *entries: tuple[str, str]) -> ReportSection:
    return ReportSection(
        title=title,
        entries=tuple(ReportEntry(key=key, value=value) for key, value in entries),
    )


def test_categorize_places_graphics_section_into_gpu() -> None:
    """A Graphics title should score into the GPU category."""
    graphics = _section("Graphics", ("Device-1", "AMD Navi 23 amdgpu driver"))

    categories = categorize_sections([graphics])

    assert [(category.label, category.sections) for category in categories] == [
        ("GPU", (graphics,))
    ]


def test_categorize_falls_back_to_general_without_keyword_hits() -> None:
    """Sections with no keyword hits should land in General."""
    categories = categorize_sections([_section("Sensors", ("Fan", "1200 rpm"))])

    assert [category.label for category in categories] == ["General"]


def test_categorize_applies_minimum_score_threshold() -> None:
    """A single value hit scores 1, below the threshold of 2."""
    audio = _section("Audio", ("Device-1", "HDMI Audio driver snd_hda_intel"))

    assert select_category(audio, CATEGORY_CONFIG) == "General"


def test_categorize_accepts_key_hit_at_threshold() -> None:
    """A single key hit scores 2 and is enough to leave General."""
    info = _section("Info", ("Memory", "total 16 GiB"))

    assert select_category(info, CATEGORY_CONFIG) == "Memory"


def test_categorize_breaks_ties_by_category_order() -> None:
    """Equal scores should keep the earlier category in the table."""
    combo = _section("CPU/GPU")

    assert select_category(combo, CATEGORY_CONFIG) == "CPU"


def test_categorize_orders_categories_by_table_not_population() -> None:
    """Output order follows the category table and omits empty buckets."""
    sections = [
        _section("Drives", ("ID-1", "/dev/nvme0n1")),
        _section("Partition", ("ID-1", "/ fs ext4")),
        _section("Sensors", ("Fan", "1200 rpm")),
        _section("CPU", ("Info", "6-core")),
    ]

    categories = categorize_sections(sections)

    assert [(category.label, len(category.sections)) for category in categories] == [
        ("CPU", 1),
        ("Storage", 2),
        ("General", 1),
    ]


def test_categorize_keeps_section_identity_and_input_order() -> None:
    """Categories should reference the caller's sections in report order."""
    first = _section("Drives", ("ID-1", "/dev/sda"))
    second = _section("Partition", ("ID-1", "/boot"))
    sections = [first, second]

    storage = categorize_sections(sections)[0]

    assert storage.sections[0] is first and storage.sections[1] is second
    assert sections == [first, second]


def test_categorize_is_deterministic() -> None:
    """Repeated calls should produce identical groupings."""
    sections = [
        _section("Machine", ("Mobo", "ASUS")),
        _section("Network", ("IF", "eth0")),
        _section("Battery", ("ID-1", "charging")),
    ]

    assert categorize_sections(sections) == categorize_sections(sections)


def test_score_section_counts_every_keyword_hit() -> None:
    """Each matching keyword in keys and values should add to the score."""
    config = CategoryConfig(label="CPU", keywords=("cpu", "core", "mhz"))
    section = _section("CPU", ("Speed (MHz)", "core cpu boost"), ("Flags", "none"))

    assert score_section(section, config) == 6 + 2 + 1 + 1


def test_score_section_title_bonus_applies_once() -> None:
    """Multiple title keywords still add the title bonus only once."""
    config = CategoryConfig(label="Storage", keywords=("drives", "drive"))

    assert score_section(_section("Drives"), config) == 6


def test_supported_category_labels_end_with_general() -> None:
    """The category table should end in the General catch-all."""
    assert supported_category_labels() == (
        "CPU",
        "GPU",
        "Memory",
        "Motherboard",
        "Storage",
        "Network",
        "Power",
        "General",
    )
