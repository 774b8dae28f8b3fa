import pytest

from string_analyzer.errors import NoMatch, UnparsableQuery
from string_analyzer.services.analyzer import analyze_string
from string_analyzer.services.filters import filter_records
from string_analyzer.services.nl_query import interpret, interpret_and_filter


@pytest.mark.parametrize(
    "query, expected",
    [
        ("all single word palindromic strings", {"is_palindrome": True, "word_count": 1}),
        ("strings longer than 10 containing letter a", {"min_length": 10, "contains_character": "a"}),
        ("strings that are not palindromes", {"is_palindrome": False}),
        ("not palindromic strings", {"is_palindrome": False}),
        ("palindrome strings that are not palindromic", {"is_palindrome": False}),
        ("strings with 3 words", {"word_count": 3}),
        ("2words shorter than 20", {"word_count": 2, "max_length": 20}),
        ("strings longer than 2 and shorter than 9", {"min_length": 2, "max_length": 9}),
        ("strings containing character z", {"contains_character": "z"}),
        ("strings containing q", {"contains_character": "q"}),
        ("  ALL PALINDROMES  ", {"is_palindrome": True}),
    ],
)
def test_interpret(query, expected):
    assert interpret(query).applied() == expected


def test_numeric_word_count_wins_over_single_word():
    assert interpret("single word or 4 words").word_count == 4


@pytest.mark.parametrize(
    "query",
    [
        "banana",
        "",
        "   ",
        "strings longer than many",
        "strings longer than " + "9" * 5000,
        "shorter than " + "9" * 5000,
        "9" * 5000 + " words",
    ],
)
def test_unparsable_queries(query):
    with pytest.raises(UnparsableQuery):
        interpret(query)


@pytest.fixture
def records():
    return [analyze_string(v) for v in ["madam", "hello there", "level", "kayak boat", "noon"]]


def test_interpret_and_filter_matches_direct_filtering(records):
    query = "all single word palindromic strings"
    result = interpret_and_filter(query, records)

    assert [r.value for r in result.records] == ["madam", "level", "noon"]
    assert result.records == filter_records(interpret(query), records)
    assert result.interpreted_query() == {
        "original": query,
        "parsed_filters": {"is_palindrome": True, "word_count": 1},
    }


def test_interpret_and_filter_raises_no_match_with_filters(records):
    with pytest.raises(NoMatch) as exc_info:
        interpret_and_filter("strings longer than 50", records)

    body = exc_info.value.to_dict()
    assert body["error"] == "no_match"
    assert body["interpreted_query"] == {
        "original": "strings longer than 50",
        "parsed_filters": {"min_length": 50},
    }


def test_interpret_and_filter_on_empty_store():
    with pytest.raises(NoMatch):
        interpret_and_filter("palindromes", [])
