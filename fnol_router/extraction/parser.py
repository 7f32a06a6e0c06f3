"""Extract structured FNOL fields from plain text (ACORD-aware)."""
import logging

from fnol_router.extraction.rules import FIELD_RULES, FieldRule, capture_all
from fnol_router.schemas import ClaimRecord

logger = logging.getLogger(__name__)


def _join_location(street: str, city: str) -> str:
    if street and city:
        return f"{street}, {city}"
    return street or city


def _join_asset_type(make: str, model: str) -> str:
    # Make and model are only meaningful together
    if make and model:
        return f"{make} {model}"
    return ""


def _extract_from_raw_text(text: str, rules: tuple[FieldRule, ...] = FIELD_RULES) -> ClaimRecord:
    """Parse raw FNOL text into a ClaimRecord; unmatched fields stay empty."""
    found = capture_all(text, rules)

    record = ClaimRecord(
        policy_number=found.get("policy_number", ""),
        policyholder_name=found.get("policyholder_name", ""),
        effective_dates=found.get("effective_dates", ""),
        incident_date=found.get("incident_date", ""),
        incident_time=found.get("incident_time", ""),
        incident_location=_join_location(
            found.get("location_street", ""), found.get("location_city", "")
        ),
        incident_description=found.get("incident_description", ""),
        claimant=found.get("claimant", ""),
        contact_details=found.get("contact_details", ""),
        asset_type=_join_asset_type(found.get("make", ""), found.get("model", "")),
        asset_id=found.get("asset_id", ""),
        estimated_damage=found.get("estimate", ""),
        initial_estimate=found.get("estimate", ""),
    )

    unmatched = [name for name, value in found.items() if not value]
    if unmatched:
        logger.debug("FNOL labels not located: %s", ", ".join(unmatched))
    return record


def extract_from_text(content: str) -> ClaimRecord:
    """Extract FNOL fields from plain text content."""
    return _extract_from_raw_text(content)
