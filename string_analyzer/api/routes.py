from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from typing import Optional
import logging

from string_analyzer import crud
from string_analyzer.database import get_db
from string_analyzer.schemas import (
    InterpretedQuery,
    NaturalLanguageResponse,
    StringCreate,
    StringListResponse,
    StringResponse,
)
from string_analyzer.services.filters import parse_filters

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/strings", response_model=StringResponse, status_code=status.HTTP_201_CREATED)
async def create_string(string_data: StringCreate, db: Session = Depends(get_db)):
    """
    Analyze and store a string.
    Returns 409 if string already exists.
    """
    record = crud.create_string_analysis(db, string_data.value)
    logger.info(f"Stored analysis {record.sha256_hash[:12]} (length={record.length})")
    return StringResponse.from_record(record)


@router.get("/strings", response_model=StringListResponse)
async def get_all_strings(
    is_palindrome: Optional[str] = Query(None, description="Filter by palindrome status (true/false)"),
    min_length: Optional[str] = Query(None, description="Minimum string length"),
    max_length: Optional[str] = Query(None, description="Maximum string length"),
    word_count: Optional[str] = Query(None, description="Exact word count"),
    contains_character: Optional[str] = Query(None, description="String must contain this character"),
    db: Session = Depends(get_db),
):
    """
    Get all strings with optional filtering.
    Returns 400 for invalid query parameter values or types.
    """
    spec = parse_filters({
        "is_palindrome": is_palindrome,
        "min_length": min_length,
        "max_length": max_length,
        "word_count": word_count,
        "contains_character": contains_character,
    })
    records = crud.get_all_strings(db, spec)
    filters_applied = spec.applied()

    return StringListResponse(
        data=[StringResponse.from_record(r) for r in records],
        count=len(records),
        filters_applied=filters_applied if filters_applied else None,
    )


@router.get("/strings/filter-by-natural-language", response_model=NaturalLanguageResponse)
async def filter_by_natural_language(
    query: str = Query(..., description="Natural language query"),
    db: Session = Depends(get_db),
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    result = crud.filter_by_natural_language(db, query)
    logger.info(f"Query {query!r} parsed to {result.filters.applied()} ({len(result.records)} matches)")

    return NaturalLanguageResponse(
        data=[StringResponse.from_record(r) for r in result.records],
        count=len(result.records),
        interpreted_query=InterpretedQuery(**result.interpreted_query()),
    )


@router.get("/strings/{string_value:path}", response_model=StringResponse)
async def get_string(string_value: str, db: Session = Depends(get_db)):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    return StringResponse.from_record(crud.get_string(db, string_value))


@router.delete("/strings/{string_value:path}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_string(string_value: str, db: Session = Depends(get_db)):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    crud.delete_string(db, string_value)
    logger.info(f"Deleted string of length {len(string_value)}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
