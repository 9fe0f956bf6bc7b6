"""Static subject and grade catalogs offered by the widget selectors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class CatalogEntry:
    code: str
    label: str


Catalog = tuple[CatalogEntry, ...]


def _catalog(*pairs: tuple[str, str]) -> Catalog:
    entries = tuple(CatalogEntry(code, label) for code, label in pairs)
    codes = [entry.code for entry in entries]
    if not entries or len(set(codes)) != len(codes):
        raise ValueError(f"Catalog codes must be unique and non-empty: {codes}")
    return entries


_CORE_SUBJECTS = (
    ("matematik", "Matematik"),
    ("svenska", "Svenska"),
    ("engelska", "Engelska"),
    ("no", "NO (Naturorienterande ämnen)"),
    ("so", "SO (Samhällsorienterande ämnen)"),
    ("idrott", "Idrott och hälsa"),
    ("bild", "Bild"),
    ("musik", "Musik"),
    ("slojd", "Slöjd"),
    ("hem", "Hem- och konsumentkunskap"),
)

_SCHOOL_GRADES = tuple((str(year), f"Årskurs {year}") for year in range(1, 10)) + (
    ("gymnasiet", "Gymnasiet"),
)

SUBJECTS: Catalog = _catalog(*_CORE_SUBJECTS)

# The assessor also covers second-language Swedish and modern languages.
ASSESSOR_SUBJECTS: Catalog = _catalog(
    *_CORE_SUBJECTS[:2],
    ("svenska-sva", "Svenska som andraspråk"),
    *_CORE_SUBJECTS[2:],
    ("moderna-sprak", "Moderna språk"),
)

GRADES: Catalog = _catalog(*_SCHOOL_GRADES)
GRADES_WITH_ADULT_EDUCATION: Catalog = _catalog(*_SCHOOL_GRADES, ("vux", "Vuxenutbildning"))


def resolve_label(catalog: Iterable[CatalogEntry], code: str) -> str:
    """Return the display label for ``code``, or ``code`` itself when unknown."""
    for entry in catalog:
        if entry.code == code:
            return entry.label
    return code
