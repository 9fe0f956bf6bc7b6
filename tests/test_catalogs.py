"""Tests for catalog tables and label resolution."""

import pytest

from socrates.widgets.catalogs import (
    ASSESSOR_SUBJECTS,
    GRADES,
    GRADES_WITH_ADULT_EDUCATION,
    SUBJECTS,
    CatalogEntry,
    _catalog,
    resolve_label,
)


@pytest.mark.parametrize("catalog", [SUBJECTS, ASSESSOR_SUBJECTS, GRADES, GRADES_WITH_ADULT_EDUCATION])
def test_catalogs_are_non_empty_with_unique_codes(catalog):
    codes = [entry.code for entry in catalog]
    assert codes
    assert len(codes) == len(set(codes))


def test_resolve_label_returns_label_for_known_code():
    assert resolve_label(SUBJECTS, "matematik") == "Matematik"
    assert resolve_label(GRADES, "5") == "Årskurs 5"
    assert resolve_label(ASSESSOR_SUBJECTS, "svenska-sva") == "Svenska som andraspråk"


def test_resolve_label_falls_back_to_raw_code():
    assert resolve_label(SUBJECTS, "teknik") == "teknik"
    assert resolve_label(GRADES, "vux") == "vux"
    assert resolve_label(GRADES_WITH_ADULT_EDUCATION, "vux") == "Vuxenutbildning"


def test_resolve_label_is_idempotent_on_labels():
    label = resolve_label(SUBJECTS, "no")
    assert resolve_label(SUBJECTS, label) == label


def test_assessor_subjects_keep_display_order():
    codes = [entry.code for entry in ASSESSOR_SUBJECTS]
    assert codes[:3] == ["matematik", "svenska", "svenska-sva"]
    assert codes[-1] == "moderna-sprak"
    assert len(codes) == 12


def test_catalog_rejects_duplicate_codes():
    with pytest.raises(ValueError):
        _catalog(("a", "A"), ("a", "B"))


def test_catalog_entries_are_frozen():
    entry = CatalogEntry("bild", "Bild")
    with pytest.raises(AttributeError):
        entry.label = "Konst"  # type: ignore[misc]
