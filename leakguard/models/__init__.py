"""Pydantic data models for the leakguard search demo."""

from leakguard.models.errors import DatabaseError, ErrorKind, GenericError
from leakguard.models.search import LookupResult, SearchSuccess

__all__ = [
    "DatabaseError",
    "ErrorKind",
    "GenericError",
    "LookupResult",
    "SearchSuccess",
]
