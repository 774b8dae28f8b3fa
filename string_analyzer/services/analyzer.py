import hashlib
import re
from datetime import datetime, timezone
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from string_analyzer.errors import InvalidInput

_WHITESPACE_RUN = re.compile(r"\s+")


class AnalysisRecord(BaseModel):
    """Properties computed for one submitted string. Never mutated."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    value: str
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def properties(self) -> Dict[str, Any]:
        """Derived fields only, in the order clients expect them."""
        return self.model_dump(exclude={"value", "created_at"})


def clean(text: str) -> str:
    """Collapse whitespace runs to a single space and trim the ends."""
    return _WHITESPACE_RUN.sub(" ", text).strip()


def normalize(cleaned: str) -> str:
    """Lowercase and drop every whitespace character."""
    return _WHITESPACE_RUN.sub("", cleaned.lower())


def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of a string"""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def count_words(cleaned: str) -> int:
    return len(cleaned.split(" ")) if cleaned else 0


def get_character_frequency(normalized: str) -> Dict[str, int]:
    """Frequency of each character, keyed in order of first occurrence."""
    frequency: Dict[str, int] = {}
    for char in normalized:
        frequency[char] = frequency.get(char, 0) + 1
    return frequency


def validate_input(value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidInput("Invalid data type for 'value' (must be string)")
    if not value:
        raise InvalidInput("Missing required field 'value'")
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise InvalidInput("Invalid value: contains unpaired surrogate characters")
    return value


def count_code_units(value: str) -> int:
    """Length in UTF-16 code units, so astral characters count twice."""
    return len(value.encode("utf-16-le")) // 2


def analyze_string(value: Any) -> AnalysisRecord:
    """
    Analyze a string and return all computed properties.

    Hashing and word counting use the cleaned form, so case and single
    inner spaces are part of the content identity. Palindrome and
    character statistics use the normalized form and ignore both.
    """
    validate_input(value)

    cleaned = clean(value)
    normalized = normalize(cleaned)
    reversed_text = normalized[::-1]

    return AnalysisRecord(
        value=value,
        length=count_code_units(value),
        is_palindrome=normalized == reversed_text,
        unique_characters=len(set(normalized)),
        word_count=count_words(cleaned),
        sha256_hash=compute_sha256(cleaned),
        character_frequency_map=get_character_frequency(normalized),
    )
