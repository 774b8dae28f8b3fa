import re
from typing import Any, Dict, Iterable, List, NamedTuple

from string_analyzer.errors import NoMatch, UnparsableQuery
from string_analyzer.services.analyzer import AnalysisRecord
from string_analyzer.services.filters import FilterSpec, filter_records, parse_filters

WORD_COUNT_PATTERN = re.compile(r"(\d+)\s*word")
LONGER_THAN_PATTERN = re.compile(r"longer than\s*(\d+)")
SHORTER_THAN_PATTERN = re.compile(r"shorter than\s*(\d+)")
CONTAINS_PATTERN = re.compile(r"containing (?:letter |character )?([a-z])")


class InterpretedResult(NamedTuple):
    records: List[AnalysisRecord]
    filters: FilterSpec
    original: str

    def interpreted_query(self) -> Dict[str, Any]:
        return {"original": self.original, "parsed_filters": self.filters.applied()}


def _number(match: "re.Match[str]", query: str) -> int:
    try:
        return int(match.group(1))
    except ValueError:
        # Past the interpreter's integer-string digit limit
        raise UnparsableQuery(query)


def interpret(query: str) -> FilterSpec:
    """
    Parse natural language query into filter parameters.

    Rules run in a fixed order and later rules overwrite earlier ones:
    - "palindrome" / "palindromic" -> is_palindrome = True
    - "not palindrome" / "not palindromic" -> is_palindrome = False
    - "<n> words" -> word_count = n, else "single word" -> word_count = 1
    - "longer than <n>" -> min_length = n
    - "shorter than <n>" -> max_length = n
    - "containing [letter |character ]<x>" -> contains_character = x

    Examples:
    - "all single word palindromic strings" -> {is_palindrome: true, word_count: 1}
    - "strings longer than 10 containing letter a" -> {min_length: 10, contains_character: "a"}
    """
    text = (query or "").lower().strip()
    filters: Dict[str, Any] = {}

    if "palindrome" in text or "palindromic" in text:
        filters["is_palindrome"] = True
    # "not palindromic" also contains "palindromic", so this always wins
    if "not palindrome" in text or "not palindromic" in text:
        filters["is_palindrome"] = False

    word_match = WORD_COUNT_PATTERN.search(text)
    if word_match:
        filters["word_count"] = _number(word_match, query)
    elif "single word" in text:
        filters["word_count"] = 1

    longer_match = LONGER_THAN_PATTERN.search(text)
    if longer_match:
        filters["min_length"] = _number(longer_match, query)

    shorter_match = SHORTER_THAN_PATTERN.search(text)
    if shorter_match:
        filters["max_length"] = _number(shorter_match, query)

    contains_match = CONTAINS_PATTERN.search(text)
    if contains_match:
        filters["contains_character"] = contains_match.group(1)

    if not filters:
        raise UnparsableQuery(query)

    return parse_filters(filters)


def interpret_and_filter(query: str, records: Iterable[AnalysisRecord]) -> InterpretedResult:
    """Interpret ``query`` and run it against a snapshot of the store."""
    spec = interpret(query)
    matched = filter_records(spec, records)
    if not matched:
        raise NoMatch(query, spec.applied())
    return InterpretedResult(records=matched, filters=spec, original=query)
