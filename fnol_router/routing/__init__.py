"""Completeness check and routing decision."""
from .completeness import get_missing_mandatory_fields
from .engine import compute_route

__all__ = ["compute_route", "get_missing_mandatory_fields"]
