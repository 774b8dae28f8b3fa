import pytest

from string_analyzer.errors import InvalidFilter
from string_analyzer.services.analyzer import analyze_string
from string_analyzer.services.filters import FilterSpec, filter_records, matches, parse_filters


@pytest.fixture
def records():
    return [analyze_string(v) for v in ["abc", "madam", "Hello World", "xyz", "racecar", "a b"]]


def values(records):
    return [r.value for r in records]


def test_empty_spec_matches_everything(records):
    assert filter_records(FilterSpec(), records) == records


def test_exact_length_window_keeps_insertion_order(records):
    spec = FilterSpec(min_length=3, max_length=3)
    assert values(filter_records(spec, records)) == ["abc", "xyz", "a b"]


def test_palindrome_and_word_count(records):
    spec = FilterSpec(is_palindrome=True, word_count=1)
    assert values(filter_records(spec, records)) == ["madam", "racecar"]

    spec = FilterSpec(is_palindrome=False)
    assert values(filter_records(spec, records)) == ["abc", "Hello World", "xyz", "a b"]


def test_word_count_is_exact(records):
    assert values(filter_records(FilterSpec(word_count=2), records)) == ["Hello World", "a b"]


def test_contains_character_is_case_insensitive(records):
    assert values(filter_records(FilterSpec(contains_character="H"), records)) == ["Hello World"]
    assert values(filter_records(FilterSpec(contains_character="a"), records)) == [
        "abc",
        "madam",
        "racecar",
        "a b",
    ]


def test_contains_character_checks_raw_value():
    record = analyze_string("a b")
    assert matches(FilterSpec(contains_character=" "), record) is True


def test_duplicates_in_input_are_kept():
    record = analyze_string("noon")
    assert filter_records(FilterSpec(is_palindrome=True), [record, record]) == [record, record]


def test_parse_filters_from_query_strings():
    spec = parse_filters({
        "is_palindrome": "TRUE",
        "min_length": "2",
        "max_length": " 10 ",
        "word_count": "1",
        "contains_character": "z",
        "unknown": "ignored",
    })
    assert spec == FilterSpec(
        is_palindrome=True, min_length=2, max_length=10, word_count=1, contains_character="z"
    )


def test_parse_filters_treats_none_as_absent():
    spec = parse_filters({"is_palindrome": None, "min_length": None})
    assert spec.is_empty()
    assert spec.applied() == {}


def test_parse_filters_accepts_typed_values():
    spec = parse_filters({"is_palindrome": False, "word_count": 3})
    assert spec.applied() == {"is_palindrome": False, "word_count": 3}


@pytest.mark.parametrize(
    "raw, field",
    [
        ({"is_palindrome": "yes"}, "is_palindrome"),
        ({"min_length": "abc"}, "min_length"),
        ({"max_length": "1.5"}, "max_length"),
        ({"word_count": True}, "word_count"),
        ({"contains_character": "ab"}, "contains_character"),
        ({"contains_character": ""}, "contains_character"),
        ({"min_length": "9" * 5000}, "min_length"),
        ({"max_length": "-1"}, "max_length"),
        ({"word_count": -2}, "word_count"),
    ],
)
def test_parse_filters_names_invalid_field(raw, field):
    with pytest.raises(InvalidFilter) as exc_info:
        parse_filters(raw)
    assert exc_info.value.field == field


def test_parse_filters_reports_first_invalid_field_in_order():
    with pytest.raises(InvalidFilter) as exc_info:
        parse_filters({"contains_character": "ab", "word_count": "x", "min_length": "y"})
    assert exc_info.value.field == "min_length"


def test_applied_keeps_field_order():
    spec = FilterSpec(contains_character="a", is_palindrome=True, min_length=1)
    assert list(spec.applied()) == ["is_palindrome", "min_length", "contains_character"]


def test_parse_filters_accepts_zero_and_signed_positive():
    spec = parse_filters({"min_length": "0", "max_length": "+7", "word_count": 0})
    assert spec.applied() == {"min_length": 0, "max_length": 7, "word_count": 0}
