"""Keyword-based grouping of report sections into display categories.

Each section is scored against every category's keywords and placed
in the highest-scoring one. Ties keep the earlier category and weak
matches fall through to ``General``. The report itself is never
modified; categories hold references to its sections.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from core.constants import (
    CATEGORY_KEYWORDS,
    CATEGORY_SCORE_THRESHOLD,
    GENERAL_CATEGORY_LABEL,
    KEY_KEYWORD_SCORE,
    TITLE_KEYWORD_SCORE,
    VALUE_KEYWORD_SCORE,
)
from core.types import CategoryConfig, ReportCategory, ReportSection

CATEGORY_CONFIG: tuple[CategoryConfig, ...] = tuple(
    CategoryConfig(label=label, keywords=keywords) for label, keywords in CATEGORY_KEYWORDS
)


def supported_category_labels() -> tuple[str, ...]:
    """Return category labels in display priority order."""
    return tuple(config.label for config in CATEGORY_CONFIG)


def categorize_sections(sections: Iterable[ReportSection]) -> list[ReportCategory]:
    """Group sections into non-empty categories in fixed priority order.

    Args:
        sections: Report sections in report order.

    Returns:
        Categories with at least one section, ordered by the category
        table rather than by population.
    """
    buckets: dict[str, list[ReportSection]] = {config.label: [] for config in CATEGORY_CONFIG}
    for section in sections:
        buckets[select_category(section, CATEGORY_CONFIG)].append(section)
    return [
        ReportCategory(label=config.label, sections=tuple(buckets[config.label]))
        for config in CATEGORY_CONFIG
        if buckets[config.label]
    ]


def select_category(section: ReportSection, configs: Sequence[CategoryConfig]) -> str:
    """Return the label of the best-scoring category for a section.

    Args:
        section: Section to classify.
        configs: Category table in priority order.

    Returns:
        Winning category label, or ``General`` below the score threshold.
    """
    best_label: str | None = None
    best_score = 0
    for config in configs:
        if config.label == GENERAL_CATEGORY_LABEL:
            continue
        score = score_section(section, config)
        if score > best_score:
            best_score = score
            best_label = config.label
    if best_label is None or best_score < CATEGORY_SCORE_THRESHOLD:
        return GENERAL_CATEGORY_LABEL
    return best_label


def score_section(section: ReportSection, config: CategoryConfig) -> int:
    """Score how strongly a section matches one category.

    Args:
        section: Section to score.
        config: Category keywords.

    Returns:
        Title bonus plus per-keyword hits across entry keys and values.
    """
    score = 0
    normalized_title = section.title.lower()
    if any(keyword in normalized_title for keyword in config.keywords):
        score += TITLE_KEYWORD_SCORE
    for entry in section.entries:
        key = entry.key.lower()
        value = entry.value.lower()
        for keyword in config.keywords:
            if keyword in key:
                score += KEY_KEYWORD_SCORE
            if keyword in value:
                score += VALUE_KEYWORD_SCORE
    return score
