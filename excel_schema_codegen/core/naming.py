"""Name transformations applied to sheet text before it becomes code."""

from __future__ import annotations

import re

_WORD_BOUNDARY = re.compile(r"(?:^|_| +)(.)")

_IRREGULAR_PLURALS = {
    "person": "people",
    "child": "children",
    "man": "men",
    "woman": "women",
    "foot": "feet",
    "tooth": "teeth",
    "mouse": "mice",
    "datum": "data",
    "status": "statuses",
}
_UNCOUNTABLE = {"equipment", "information", "rice", "money", "series", "species", "news"}


def to_variable_case(value: str) -> str:
    """Lower-case exactly the first character and leave the rest unchanged."""
    if not value:
        return value
    return value[0].lower() + value[1:]


def pascalize(value: str) -> str:
    """Upper-case the first letter of every space or underscore separated word."""
    return _WORD_BOUNDARY.sub(lambda m: m.group(1).upper(), value.strip())


def camelize(value: str) -> str:
    return to_variable_case(pascalize(value))


def slash_to_space(value: str) -> str:
    return " ".join(part.strip() for part in value.split("/"))


def field_identifier(raw_name: str) -> str:
    """'contact/email' -> 'ContactEmail'."""
    return pascalize(slash_to_space(raw_name))


def enum_identifier(raw_name: str) -> str:
    """'Order/Status' -> 'OrderStatus' (the text is lower-cased first)."""
    return pascalize(slash_to_space(raw_name).lower())


def enum_value_identifier(description: str) -> str:
    """'In Progress' -> 'inProgress'."""
    return camelize(description.lower())


def entity_origin_name(cell_text: str) -> str:
    """Join the words of the entity-name cell without whitespace.

    Every word after the first has its first character lower-cased:
    'Purchase Order' -> 'Purchaseorder', 'Customer' -> 'Customer'.
    """
    words = cell_text.split()
    return "".join(
        word if idx == 0 else to_variable_case(word) for idx, word in enumerate(words)
    )


def pluralize(word: str) -> str:
    """Pluralize the last word of an identifier using English suffix rules."""
    if not word:
        return word

    match = re.search(r"([A-Z]?[a-z0-9]*)$", word)
    head, tail = word[: match.start()], match.group(1)
    if not tail:
        return word + "s"

    lower = tail.lower()
    if lower in _UNCOUNTABLE:
        return word
    if lower in _IRREGULAR_PLURALS:
        plural = _IRREGULAR_PLURALS[lower]
        return head + (plural.capitalize() if tail[0].isupper() else plural)

    if re.search(r"(s|x|z|ch|sh)$", lower):
        return word + "es"
    if re.search(r"[^aeiou]y$", lower):
        return word[:-1] + "ies"
    if lower.endswith("fe"):
        return word[:-2] + "ves"
    if re.search(r"[^f]f$", lower) and not lower.endswith(("of", "ief")):
        return word[:-1] + "ves"
    return word + "s"
