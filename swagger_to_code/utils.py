"""
Utility functions for the Swagger to Code generator.
"""

import re

# Regex pattern to split text into words, handling camelCase boundaries
_WORD_PATTERN = re.compile(r"[a-z]+|[A-Z][a-z]*|[0-9]+")

# Keeps runs of capitals together ("HTTPCode" -> "HTTP", "Code")
_ACRONYM_WORD_PATTERN = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens, dots, slashes) to spaces."""
    for separator in ("_", "-", ".", "/"):
        text = text.replace(separator, " ")
    return text


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries."""
    return _WORD_PATTERN.findall(text)


def _capitalize_and_join(words: list[str]) -> str:
    """Capitalize each word and join them together."""
    return "".join(word.capitalize() for word in words if word)


def snake_to_pascal_case(text: str) -> str:
    """Convert snake_case, camelCase, or space-separated text to PascalCase.

    Examples:
        "first_name" -> "FirstName"
        "actionTemplate" -> "ActionTemplate"
        "listPets200Response" -> "ListPets200Response"
        "first 3 rows" -> "First3Rows"

    Args:
        text: The text to convert

    Returns:
        PascalCase string
    """
    if not text:
        return ""
    normalized = _normalize_separators(text)
    words = _split_into_words(normalized)
    return _capitalize_and_join(words)


def to_snake_case(text: str) -> str:
    """Convert camelCase, PascalCase, kebab-case or dotted text to snake_case.

    Examples:
        "petId" -> "pet_id"
        "HTTPCode" -> "http_code"
        "x-rate-limit" -> "x_rate_limit"
    """
    if not text:
        return ""
    words = _ACRONYM_WORD_PATTERN.findall(_normalize_separators(text))
    return "_".join(word.lower() for word in words)


def to_upper_snake_case(text: str) -> str:
    """Convert text to UPPER_SNAKE_CASE ("in-progress" -> "IN_PROGRESS")."""
    return to_snake_case(text).upper()


def escape_keyword(name: str, keywords: frozenset[str] | set[str]) -> str:
    """Append an underscore to names that collide with a reserved keyword."""
    if name in keywords:
        return f"{name}_"
    return name
