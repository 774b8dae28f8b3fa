import re
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict

from string_analyzer.errors import InvalidFilter
from string_analyzer.services.analyzer import AnalysisRecord

_INTEGER = re.compile(r"[+-]?\d+")


class FilterSpec(BaseModel):
    """Optional constraints over stored records. ``None`` means unconstrained."""

    model_config = ConfigDict(frozen=True)

    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = None

    def applied(self) -> Dict[str, Any]:
        """Only the constraints that are set, in field order."""
        return self.model_dump(exclude_none=True)

    def is_empty(self) -> bool:
        return not self.applied()


def _parse_bool(field: str, raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str) and raw.strip().lower() in ("true", "false"):
        return raw.strip().lower() == "true"
    raise InvalidFilter(field, "Must be true or false.")


def _parse_int(field: str, raw: Any) -> int:
    if isinstance(raw, int) and not isinstance(raw, bool):
        number = raw
    elif isinstance(raw, str) and _INTEGER.fullmatch(raw.strip()):
        try:
            number = int(raw.strip())
        except ValueError:
            # Past the interpreter's integer-string digit limit
            raise InvalidFilter(field, "Must be a number.")
    else:
        raise InvalidFilter(field, "Must be a number.")
    if number < 0:
        raise InvalidFilter(field, "Must not be negative.")
    return number


def _parse_char(field: str, raw: Any) -> str:
    if isinstance(raw, str) and len(raw) == 1:
        return raw
    raise InvalidFilter(field, "Must be a single character.")


# Validation order is fixed: the first invalid field is the one reported
_PARSERS = (
    ("is_palindrome", _parse_bool),
    ("min_length", _parse_int),
    ("max_length", _parse_int),
    ("word_count", _parse_int),
    ("contains_character", _parse_char),
)


def parse_filters(raw: Mapping[str, Any]) -> FilterSpec:
    """
    Build a FilterSpec from untyped values such as querystring parameters.

    Missing keys and ``None`` values leave a dimension unconstrained;
    unknown keys are ignored. Raises InvalidFilter naming the first field
    that does not parse.
    """
    values = {}
    for field, parser in _PARSERS:
        candidate = raw.get(field)
        if candidate is None:
            continue
        values[field] = parser(field, candidate)
    return FilterSpec(**values)


def matches(spec: FilterSpec, record: AnalysisRecord) -> bool:
    """True when the record satisfies every constraint present in ``spec``."""
    if spec.is_palindrome is not None and record.is_palindrome != spec.is_palindrome:
        return False
    if spec.min_length is not None and record.length < spec.min_length:
        return False
    if spec.max_length is not None and record.length > spec.max_length:
        return False
    if spec.word_count is not None and record.word_count != spec.word_count:
        return False
    if spec.contains_character is not None:
        # Checked against the raw value, not the normalized form
        if spec.contains_character.lower() not in record.value.lower():
            return False
    return True


def filter_records(spec: FilterSpec, records: Iterable[AnalysisRecord]) -> List[AnalysisRecord]:
    """Matching records in their original order."""
    return [record for record in records if matches(spec, record)]
