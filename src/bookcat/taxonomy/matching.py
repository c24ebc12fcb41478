"""Case-insensitive phrase matching primitives shared by the classifier stages."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from functools import lru_cache

TextPredicate = Callable[[str], bool]


@lru_cache(maxsize=None)
def whole_word_pattern(phrase: str) -> re.Pattern[str]:
    """Compile *phrase* so it only matches between non-word characters."""

    return re.compile(rf"(?<!\w){re.escape(phrase.lower())}(?!\w)", re.IGNORECASE)


def count_whole_word(text: str, phrase: str) -> int:
    """Number of non-overlapping whole-word occurrences of *phrase* in *text*."""

    if not text:
        return 0
    return len(whole_word_pattern(phrase).findall(text))


def compile_vocabulary(*terms: str) -> re.Pattern[str]:
    """Build one alternation of regex *terms* anchored on word edges.

    Terms are regex fragments (``r"databases?"``, ``r"c\\+\\+"``), so plural
    and suffix variants can be spelled explicitly.
    """

    if not terms:
        raise ValueError("vocabulary needs at least one term")
    alternation = "|".join(terms)
    return re.compile(rf"(?<!\w)(?:{alternation})(?!\w)", re.IGNORECASE)


def contains_any(text: str, phrases: Iterable[str]) -> bool:
    return any(phrase in text for phrase in phrases)


# Predicate combinators for the ordered fallback cascade.  All of them work on
# already lower-cased text and use plain substring containment.


def mentions(*phrases: str) -> TextPredicate:
    lowered = tuple(phrase.lower() for phrase in phrases)
    return lambda text: contains_any(text, lowered)


def mentions_all(*phrases: str) -> TextPredicate:
    lowered = tuple(phrase.lower() for phrase in phrases)
    return lambda text: all(phrase in text for phrase in lowered)


def excluding(predicate: TextPredicate, *phrases: str) -> TextPredicate:
    """Match *predicate* only when none of *phrases* occur."""

    blocked = mentions(*phrases)
    return lambda text: predicate(text) and not blocked(text)


def both(first: TextPredicate, second: TextPredicate) -> TextPredicate:
    return lambda text: first(text) and second(text)


def either(*predicates: TextPredicate) -> TextPredicate:
    return lambda text: any(predicate(text) for predicate in predicates)
