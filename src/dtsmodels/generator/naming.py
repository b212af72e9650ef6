# Copyright 2026 dtsmodels Contributors
# SPDX-License-Identifier: Apache-2.0

"""Derivation of interface names from plural collection names.

A collection such as ``user_accounts`` becomes ``UserAccount``: the last
underscore-separated segment is singularized and every segment is converted
to PascalCase. The result is the join key between generated units, so the
derivation is a pure function of the collection name.
"""

from __future__ import annotations

# ###############
# Public Interface
# ###############


def singularize(word: str) -> str:
    """Return the English singular form of *word*.

    Words in the uncountable table are returned unchanged, irregular plurals are
    looked up, and the remaining words go through ordered suffix rules. Case of
    the leading character is preserved for irregular forms.

    Note that ``news`` is not uncountable here and becomes ``new``.
    """
    if not word:
        return word
    lower = word.lower()

    if lower in _UNCOUNTABLE:
        return word

    if lower in _IRREGULAR:
        singular = _IRREGULAR[lower]
        return singular[0].upper() + singular[1:] if word[0].isupper() else singular

    for suffix, replacement in _SUFFIX_RULES:
        if lower.endswith(suffix) and len(lower) > len(suffix):
            return word[: len(word) - len(suffix)] + replacement

    if lower.endswith("s") and not lower.endswith(_KEEP_S_SUFFIXES):
        return word[:-1]
    return word


def pascal_case(value: str) -> str:
    """Convert an underscore-separated name to PascalCase (``user_account`` -> ``UserAccount``)."""
    return "".join(part[0].upper() + part[1:].lower() for part in value.split("_") if part)


def class_name(collection: str) -> str:
    """Return the interface name generated for *collection*."""
    head, sep, last = collection.rpartition("_")
    return pascal_case(head + sep + singularize(last))


# ################
# Implementation
# ################

_UNCOUNTABLE = frozenset(
    {
        "equipment",
        "information",
        "rice",
        "money",
        "species",
        "series",
        "fish",
        "sheep",
        "deer",
        "metadata",
        "media",
        "feedback",
        "analytics",
    }
)

_IRREGULAR: dict[str, str] = {
    "people": "person",
    "men": "man",
    "women": "woman",
    "children": "child",
    "mice": "mouse",
    "geese": "goose",
    "teeth": "tooth",
    "feet": "foot",
    "oxen": "ox",
    "data": "datum",
    "criteria": "criterion",
    "phenomena": "phenomenon",
    "indices": "index",
    "matrices": "matrix",
    "vertices": "vertex",
    "analyses": "analysis",
    "theses": "thesis",
    "crises": "crisis",
    "leaves": "leaf",
    "lives": "life",
    "knives": "knife",
    "wives": "wife",
    "wolves": "wolf",
    "halves": "half",
    "shelves": "shelf",
    "movies": "movie",
    "cookies": "cookie",
    "quizzes": "quiz",
    "heroes": "hero",
    "potatoes": "potato",
    "statuses": "status",
    "buses": "bus",
    "viruses": "virus",
    "campuses": "campus",
    "aliases": "alias",
}

# Checked in order; the first matching suffix wins.
_SUFFIX_RULES: tuple[tuple[str, str], ...] = (
    ("ies", "y"),
    ("sses", "ss"),
    ("shes", "sh"),
    ("ches", "ch"),
    ("xes", "x"),
    ("zzes", "zz"),
)

_KEEP_S_SUFFIXES = ("ss", "us", "is")
