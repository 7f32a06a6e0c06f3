"""Mandatory-field check: which required claim fields are empty."""
from fnol_router.schemas import MANDATORY_FIELDS, ClaimRecord


def get_missing_mandatory_fields(extracted: ClaimRecord) -> list[str]:
    """Return labels of missing mandatory fields, in MANDATORY_FIELDS order."""
    missing: list[str] = []
    for field_name, label in MANDATORY_FIELDS:
        value = getattr(extracted, field_name) or ""
        if not value.strip():
            missing.append(label)
    return missing
