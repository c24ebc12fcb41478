"""Tests for the end-to-end book category classifier."""

from __future__ import annotations

import pytest

from bookcat.taxonomy import classifier as classifier_module
from bookcat.taxonomy.categories import AnalysisMethod, Category
from bookcat.taxonomy.classifier import (
    CategoryClassifier,
    ClassificationResult,
    detect_category,
    get_category_recommendations,
    get_popular_categories,
    manual_classification,
)
from bookcat.taxonomy.config import ClassifierSettings
from bookcat.taxonomy.thesaurus import TaxonomyError


# ---------------------------------------------------------------------------
# Reference scenarios
# ---------------------------------------------------------------------------

def test_sql_book_is_technology_via_override() -> None:
    result = detect_category("SQL and Databases: A Practical Guide", "Learn queries, joins, and indexes")

    assert result.category is Category.TECHNOLOGY
    assert result.confidence >= 0.85
    assert result.analysis_method is AnalysisMethod.KEYWORD_OVERRIDE
    assert dict(result.all_scores) == {Category.TECHNOLOGY: 180}


def test_wealth_book_is_business_via_override() -> None:
    result = detect_category("The Millionaire Fastlane", "wealth and financial freedom")

    assert result.category is Category.BUSINESS
    assert result.confidence >= 0.85
    assert result.analysis_method is AnalysisMethod.KEYWORD_OVERRIDE


def test_title_without_any_match_defaults_to_fiction() -> None:
    result = detect_category("Untitled Notes", "")

    assert result.category is Category.FICTION
    assert result.confidence == pytest.approx(0.1)
    assert result.analysis_method is AnalysisMethod.TITLE_DESCRIPTION
    assert all(score == 0 for score in result.all_scores.values())


def test_cookbook_is_cooking() -> None:
    result = detect_category("How to Cook Italian Food", "recipes for pasta and risotto")

    assert result.category is Category.COOKING
    assert result.confidence == pytest.approx(0.675)
    assert result.analysis_method is AnalysisMethod.TITLE_DESCRIPTION
    assert result.all_scores[Category.COOKING] == 75
    assert result.all_scores[Category.SELF_HELP] == 30


# ---------------------------------------------------------------------------
# Fallback cascade
# ---------------------------------------------------------------------------

def test_low_confidence_scores_defer_to_pattern_fallback() -> None:
    # Psychology 45 vs Self-Help 30 is a near tie, so the cascade decides.
    result = detect_category("The Laws of Human Nature", "")

    assert result.category is Category.PSYCHOLOGY
    assert result.analysis_method is AnalysisMethod.ADVANCED_PATTERN
    assert result.confidence == pytest.approx(0.8)
    assert result.all_scores[Category.PSYCHOLOGY] == 45
    assert result.all_scores[Category.SELF_HELP] == 30


def test_fallback_threshold_comes_from_settings() -> None:
    strict = CategoryClassifier(settings=ClassifierSettings(fallback_threshold=0.0))

    result = strict.detect("The Laws of Human Nature", "")

    assert result.category is Category.PSYCHOLOGY
    assert result.analysis_method is AnalysisMethod.TITLE_DESCRIPTION
    assert result.confidence == pytest.approx(0.1)


# ---------------------------------------------------------------------------
# Document reinforcement
# ---------------------------------------------------------------------------

def test_document_text_reinforces_scores() -> None:
    result = detect_category("Untitled Notes", "", document_text="detective murder investigation clue")

    assert result.category is Category.MYSTERY
    assert result.analysis_method is AnalysisMethod.PDF_ANALYSIS
    assert result.all_scores[Category.MYSTERY] == 54
    assert result.confidence == pytest.approx(0.57)


def test_blank_document_text_is_ignored() -> None:
    with_blank = detect_category("Untitled Notes", "", document_text="   \n ")
    without = detect_category("Untitled Notes", "")

    assert with_blank == without
    assert with_blank.analysis_method is AnalysisMethod.TITLE_DESCRIPTION


def test_document_weight_zero_disables_reinforcement_scores() -> None:
    unweighted = CategoryClassifier(settings=ClassifierSettings(document_weight=0))

    result = unweighted.detect("Untitled Notes", "", "detective murder investigation clue")

    assert result.all_scores[Category.MYSTERY] == 0
    assert result.category is Category.FICTION


def test_override_ignores_document_text() -> None:
    result = detect_category("Learning SQL", "", document_text="a long romance novel about love")

    assert result.category is Category.TECHNOLOGY
    assert result.analysis_method is AnalysisMethod.KEYWORD_OVERRIDE


# ---------------------------------------------------------------------------
# Invariants
# ---------------------------------------------------------------------------

_SAMPLES = [
    ("Murder on the Orient Express", "A detective investigates a crime aboard a train"),
    ("A Brief History of Time", "From the big bang to black holes"),
    ("The Lean Startup", "validated learning for every company"),
    ("Dune", "A desert planet, a galaxy-spanning empire and a future messiah"),
    ("Leaves of Grass", "poems and verse"),
    ("", ""),
    ("The Art of War", "ancient military strategy"),
    ("Goodnight Moon", "a bedtime picture book for toddlers"),
]


@pytest.mark.parametrize(("title", "description"), _SAMPLES)
def test_confidence_and_category_stay_in_bounds(title: str, description: str) -> None:
    result = detect_category(title, description)

    assert result.category in set(Category)
    assert 0.1 <= result.confidence <= 0.98


@pytest.mark.parametrize(("title", "description"), _SAMPLES)
def test_detection_is_deterministic(title: str, description: str) -> None:
    first = detect_category(title, description)
    second = detect_category(title, description)

    assert first == second
    assert first.to_dict() == second.to_dict()


def test_none_inputs_are_treated_as_empty() -> None:
    result = detect_category(None, None)

    assert result.category is Category.FICTION
    assert result.confidence == pytest.approx(0.1)


def test_result_scores_are_read_only() -> None:
    result = detect_category("Murder most foul", "")

    with pytest.raises(TypeError):
        result.all_scores[Category.MYSTERY] = 0  # type: ignore[index]


def test_to_dict_uses_plain_labels() -> None:
    payload = detect_category("SQL for beginners", "").to_dict()

    assert payload == {
        "category": "Technology",
        "confidence": 0.9,
        "all_scores": {"Technology": 180},
        "analysis_method": "keyword_override",
    }


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

def test_internal_failure_degrades_to_error_result(monkeypatch: pytest.MonkeyPatch) -> None:
    def _boom(*_args: object, **_kwargs: object) -> dict:
        raise RuntimeError("scorer exploded")

    monkeypatch.setattr(classifier_module, "score_categories", _boom)

    result = CategoryClassifier().detect("Plain title", "plain description")

    assert result.category is Category.FICTION
    assert result.confidence == pytest.approx(0.1)
    assert result.analysis_method is AnalysisMethod.ERROR
    assert dict(result.all_scores) == {}


def test_confidence_outside_unit_interval_is_rejected() -> None:
    with pytest.raises(ValueError, match="confidence"):
        ClassificationResult(category=Category.ART, confidence=1.5)


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

def test_manual_classification_is_fully_confident() -> None:
    result = manual_classification(Category.POETRY)

    assert result.category is Category.POETRY
    assert result.confidence == 1.0
    assert result.analysis_method is AnalysisMethod.MANUAL


def test_popular_categories_are_the_curated_fifteen() -> None:
    popular = get_popular_categories()

    assert len(popular) == 15
    assert popular[0] is Category.FICTION
    assert popular[-1] is Category.RELIGION
    assert Category.COOKING not in popular


def test_recommendations_entry_point_uses_default_limit() -> None:
    suggested = get_category_recommendations([Category.SELF_HELP, Category.ART])

    assert len(suggested) == 8


def test_result_defaults_to_an_empty_read_only_board() -> None:
    result = ClassificationResult(category=Category.ART, confidence=0.5)

    assert dict(result.all_scores) == {}
    assert result.analysis_method is AnalysisMethod.TITLE_DESCRIPTION
    with pytest.raises(TypeError):
        result.all_scores[Category.ART] = 1  # type: ignore[index]


def test_broken_thesaurus_degrades_module_entry_point(monkeypatch: pytest.MonkeyPatch) -> None:
    def _broken() -> CategoryClassifier:
        raise TaxonomyError("keywords: missing entries for Horror")

    monkeypatch.setattr(classifier_module, "default_classifier", _broken)

    result = detect_category("Murder on the Orient Express", "")

    assert result.category is Category.FICTION
    assert result.confidence == pytest.approx(0.1)
    assert result.analysis_method is AnalysisMethod.ERROR


def test_recommendations_never_exceed_eight_entries() -> None:
    generous = CategoryClassifier(settings=ClassifierSettings(recommendation_limit=30))

    assert len(generous.recommendations_for(list(Category))) == 8
