"""
Ingredient text utilities
=========================

Helpers for the free-text ingredient lists found on packaging and in
Open Food Facts records:
- splitting a list on top-level separators
- cleaning taxonomy tags such as 'en:tree-nuts'
- classifying E-numbers / INS numbers by range
"""

import re
from typing import Optional

OPENERS = "([{"
CLOSERS = ")]}"

ADDITIVE_RE = re.compile(r"\b(?:e|ins)\s*-?\s*(\d{3,4})[a-z]?\b", re.IGNORECASE)
TAG_PREFIX_RE = re.compile(r"^[a-z]{2,3}:")

ADDITIVE_RANGES = [
    (100, 199, "Colours"),
    (200, 299, "Preservatives"),
    (300, 399, "Antioxidants & Acidity Regulators"),
    (400, 499, "Stabilizers, Thickeners & Emulsifiers"),
    (500, 599, "Acidity Regulators & Anti-caking Agents"),
    (600, 699, "Flavor Enhancers"),
    (700, 799, "Antibiotics & Preservatives"),
    (900, 949, "Glazing Agents"),
    (950, 969, "Sweeteners"),
    (970, 999, "Foaming Agents & Other Additives"),
]


def clean_ingredient(token: str) -> str:
    token = token.replace("_", "")
    token = re.sub(r"\s+", " ", token).strip()
    token = token.rstrip(".").strip()
    # unmatched brackets left over from sloppy labels
    if token.count("(") < token.count(")") and token.endswith(")"):
        token = token[:-1].strip()
    return token


def split_ingredients(text: Optional[str]) -> list[str]:
    """
    Split an ingredient list on commas/semicolons outside brackets.
    'Water, Stabilizers (INS 412, INS 415), Salt.' -> ['Water', 'Stabilizers (INS 412, INS 415)', 'Salt']
    """
    if not text:
        return []
    parts = []
    depth = 0
    current = []
    for ch in text:
        if ch in OPENERS:
            depth += 1
        elif ch in CLOSERS:
            depth = max(depth - 1, 0)
        if ch in ",;" and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(ch)
    parts.append("".join(current))
    return [t for t in (clean_ingredient(p) for p in parts) if t]


def strip_tag_prefix(tag: str) -> str:
    return TAG_PREFIX_RE.sub("", tag.strip().lower())


def pretty_tags(tags) -> list[str]:
    """'en:tree-nuts' -> 'Tree Nuts', keeping first-seen order and dropping duplicates."""
    seen = []
    for tag in tags or []:
        if not isinstance(tag, str) or not tag.strip():
            continue
        pretty = strip_tag_prefix(tag).replace("-", " ").replace("_", " ").title()
        if pretty and pretty not in seen:
            seen.append(pretty)
    return seen


def additive_numbers(ingredient: str) -> list[int]:
    return [int(n) for n in ADDITIVE_RE.findall(ingredient)]


def additive_category(ingredient: str) -> Optional[str]:
    """Determine the type of food additive from the first E-number/INS number in the text."""
    numbers = additive_numbers(ingredient)
    if not numbers:
        return None
    number = numbers[0]
    for low, high, category in ADDITIVE_RANGES:
        if low <= number <= high:
            return category
    return "Food Additive"
