"""FNOL field extraction from text."""
from .parser import extract_from_text
from .rules import FIELD_RULES, FieldRule

__all__ = ["FIELD_RULES", "FieldRule", "extract_from_text"]
