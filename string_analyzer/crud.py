from datetime import timezone
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List, Optional

from string_analyzer.errors import DuplicateInput, NotFound
from string_analyzer.models import StringAnalysis
from string_analyzer.services.analyzer import AnalysisRecord, analyze_string, validate_input
from string_analyzer.services.filters import FilterSpec, filter_records
from string_analyzer.services.nl_query import InterpretedResult, interpret_and_filter


def _to_record(db_string: StringAnalysis) -> AnalysisRecord:
    record = AnalysisRecord.model_validate(db_string)
    # SQLite hands back naive datetimes; everything is stored in UTC
    if record.created_at.tzinfo is None:
        record = record.model_copy(update={"created_at": record.created_at.replace(tzinfo=timezone.utc)})
    return record


def get_string_by_value(db: Session, value: str) -> Optional[StringAnalysis]:
    """Get string analysis row by value"""
    return db.query(StringAnalysis).filter(StringAnalysis.value == value).first()


def create_string_analysis(db: Session, value: str) -> AnalysisRecord:
    """Analyze a new string and append it to the store"""
    validate_input(value)
    if get_string_by_value(db, value) is not None:
        raise DuplicateInput(value)

    record = analyze_string(value)

    db.add(StringAnalysis(**record.model_dump()))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateInput(value)
    return record


def get_string(db: Session, value: str) -> AnalysisRecord:
    """Get string analysis by value"""
    db_string = get_string_by_value(db, value)
    if db_string is None:
        raise NotFound(value)
    return _to_record(db_string)


def list_records(db: Session) -> List[AnalysisRecord]:
    """Every stored record in insertion order"""
    rows = db.query(StringAnalysis).order_by(StringAnalysis.seq).all()
    return [_to_record(row) for row in rows]


def get_all_strings(db: Session, spec: Optional[FilterSpec] = None) -> List[AnalysisRecord]:
    """Get all strings, optionally restricted by a filter spec"""
    records = list_records(db)
    if spec is None or spec.is_empty():
        return records
    return filter_records(spec, records)


def filter_by_natural_language(db: Session, query: str) -> InterpretedResult:
    """Interpret a natural language query and apply it to the store"""
    return interpret_and_filter(query, list_records(db))


def delete_string(db: Session, value: str) -> None:
    """Delete string analysis by value"""
    deleted = db.query(StringAnalysis).filter(StringAnalysis.value == value).delete()
    if not deleted:
        db.rollback()
        raise NotFound(value)
    db.commit()
