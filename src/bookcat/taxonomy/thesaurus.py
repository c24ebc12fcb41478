"""Static keyword taxonomy loaded from the bundled JSON thesaurus.

The thesaurus is read once per process and exposed as an immutable
:class:`Thesaurus`.  Loading validates completeness: every :class:`Category`
must have exactly one keyword set and one recommendation entry, and every
table may only reference known categories.  A broken thesaurus is a
configuration error and raises :class:`TaxonomyError` at load time.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

from bookcat.taxonomy.categories import Category

_THESAURUS_PATH = Path(__file__).parent / "thesaurus.json"
_KEYWORD_TIERS = ("primary", "secondary", "negative")


class TaxonomyError(ValueError):
    """Raised when the static thesaurus is incomplete or malformed."""


@dataclass(frozen=True, slots=True)
class KeywordSet:
    primary: tuple[str, ...]
    secondary: tuple[str, ...]
    negative: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Thesaurus:
    """Read-only view over the keyword taxonomy and its companion tables."""

    version: str
    keywords: Mapping[Category, KeywordSet]
    strong_indicators: Mapping[Category, tuple[str, ...]]
    high_confidence_patterns: Mapping[Category, tuple[str, ...]]
    recommendations: Mapping[Category, tuple[Category, ...]]

    def keyword_set(self, category: Category) -> KeywordSet:
        return self.keywords[category]

    def strong_indicators_for(self, category: Category) -> tuple[str, ...]:
        return self.strong_indicators.get(category, ())

    def high_confidence_patterns_for(self, category: Category) -> tuple[str, ...]:
        return self.high_confidence_patterns.get(category, ())

    def related_categories(self, category: Category) -> tuple[Category, ...]:
        return self.recommendations.get(category, ())


def _category(name: object, *, section: str) -> Category:
    if not isinstance(name, str):
        raise TaxonomyError(f"{section}: category name must be a string, got {name!r}")
    try:
        return Category(name)
    except ValueError:
        raise TaxonomyError(f"{section}: unknown category {name!r}") from None


def _phrases(raw: object, *, section: str) -> tuple[str, ...]:
    if not isinstance(raw, list):
        raise TaxonomyError(f"{section}: expected a list of phrases")

    phrases: list[str] = []
    for phrase in raw:
        if not isinstance(phrase, str) or not phrase.strip():
            raise TaxonomyError(f"{section}: phrases must be non-empty strings")
        if phrase != phrase.strip():
            raise TaxonomyError(f"{section}: phrase {phrase!r} has surrounding whitespace")
        phrases.append(phrase.lower())
    return tuple(phrases)


def _require_complete(found: Mapping[Category, object], *, section: str) -> None:
    missing = [category.value for category in Category if category not in found]
    if missing:
        raise TaxonomyError(f"{section}: missing entries for {', '.join(missing)}")


def _parse_keywords(raw: object) -> dict[Category, KeywordSet]:
    if not isinstance(raw, dict):
        raise TaxonomyError("keywords: expected an object keyed by category")

    keywords: dict[Category, KeywordSet] = {}
    for name, tiers in raw.items():
        category = _category(name, section="keywords")
        if not isinstance(tiers, dict):
            raise TaxonomyError(f"keywords.{name}: expected an object with keyword tiers")
        unknown = set(tiers) - set(_KEYWORD_TIERS)
        if unknown:
            raise TaxonomyError(f"keywords.{name}: unknown tiers {sorted(unknown)}")
        keywords[category] = KeywordSet(
            **{
                tier: _phrases(tiers.get(tier, []), section=f"keywords.{name}.{tier}")
                for tier in _KEYWORD_TIERS
            }
        )

    _require_complete(keywords, section="keywords")
    # Rebuild in enum order so iteration order never depends on the JSON layout.
    return {category: keywords[category] for category in Category}


def _parse_phrase_table(raw: object, *, section: str) -> dict[Category, tuple[str, ...]]:
    if not isinstance(raw, dict):
        raise TaxonomyError(f"{section}: expected an object keyed by category")
    return {
        _category(name, section=section): _phrases(phrases, section=f"{section}.{name}")
        for name, phrases in raw.items()
    }


def _parse_recommendations(raw: object) -> dict[Category, tuple[Category, ...]]:
    if not isinstance(raw, dict):
        raise TaxonomyError("recommendations: expected an object keyed by category")

    graph: dict[Category, tuple[Category, ...]] = {}
    for name, related in raw.items():
        category = _category(name, section="recommendations")
        if not isinstance(related, list):
            raise TaxonomyError(f"recommendations.{name}: expected a list of categories")
        graph[category] = tuple(
            _category(item, section=f"recommendations.{name}") for item in related
        )

    _require_complete(graph, section="recommendations")
    return {category: graph[category] for category in Category}


def parse_thesaurus(data: Mapping[str, Any]) -> Thesaurus:
    """Validate raw thesaurus data and freeze it into a :class:`Thesaurus`."""

    if not isinstance(data, Mapping):
        raise TaxonomyError("thesaurus root must be an object")

    return Thesaurus(
        version=str(data.get("version", "0")),
        keywords=MappingProxyType(_parse_keywords(data.get("keywords"))),
        strong_indicators=MappingProxyType(
            _parse_phrase_table(data.get("strong_indicators", {}), section="strong_indicators")
        ),
        high_confidence_patterns=MappingProxyType(
            _parse_phrase_table(
                data.get("high_confidence_patterns", {}),
                section="high_confidence_patterns",
            )
        ),
        recommendations=MappingProxyType(_parse_recommendations(data.get("recommendations"))),
    )


@lru_cache(maxsize=1)
def load_thesaurus(path: Path = _THESAURUS_PATH) -> Thesaurus:
    """Load and validate the thesaurus file, caching the result."""

    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise TaxonomyError(f"cannot read thesaurus {path}: {exc}") from exc
    return parse_thesaurus(raw)
