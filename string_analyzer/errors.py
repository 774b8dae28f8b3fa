"""
Error kinds raised by the string analyzer core.

Every failure the core can signal is a subclass of ``StringAnalyzerError``
carrying an ``ErrorKind`` and the HTTP status it maps to. The API layer
renders them with a single exception handler; the core never catches them.
"""
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    DUPLICATE_INPUT = "duplicate_input"
    INVALID_FILTER = "invalid_filter"
    UNPARSABLE_QUERY = "unparsable_query"
    NOT_FOUND = "not_found"
    NO_MATCH = "no_match"


class StringAnalyzerError(Exception):
    kind: ErrorKind
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.kind.value, "message": self.message}


class InvalidInput(StringAnalyzerError):
    kind = ErrorKind.INVALID_INPUT
    status_code = 400


class DuplicateInput(StringAnalyzerError):
    kind = ErrorKind.DUPLICATE_INPUT
    status_code = 409

    def __init__(self, value: str):
        super().__init__("String already exists in the system")
        self.value = value


class InvalidFilter(StringAnalyzerError):
    kind = ErrorKind.INVALID_FILTER
    status_code = 400

    def __init__(self, field: str, message: str):
        super().__init__(f"Invalid value for '{field}'. {message}")
        self.field = field

    def to_dict(self) -> Dict[str, Any]:
        body = super().to_dict()
        body["field"] = self.field
        return body


class UnparsableQuery(StringAnalyzerError):
    kind = ErrorKind.UNPARSABLE_QUERY
    status_code = 400

    def __init__(self, query: str):
        super().__init__(
            "Unable to parse natural language query. Include words like "
            "\"palindrome\", \"longer than\", or \"single word\"."
        )
        self.query = query


class NotFound(StringAnalyzerError):
    kind = ErrorKind.NOT_FOUND
    status_code = 404

    def __init__(self, value: str):
        super().__init__("String does not exist in the system")
        self.value = value


class NoMatch(StringAnalyzerError):
    kind = ErrorKind.NO_MATCH
    status_code = 404

    def __init__(self, query: str, filters: Optional[Dict[str, Any]] = None):
        super().__init__("No matching records found for your query")
        self.query = query
        self.filters = filters or {}

    def to_dict(self) -> Dict[str, Any]:
        body = super().to_dict()
        body["interpreted_query"] = {
            "original": self.query,
            "parsed_filters": self.filters,
        }
        return body
