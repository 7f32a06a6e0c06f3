"""Pydantic schemas for FNOL extraction, routing and API output."""
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ClaimRecord(BaseModel):
    """Flat claim record extracted from one FNOL document.

    Text fields are never None: absence is the empty string, presence is a
    trimmed non-empty string.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    policy_number: str = ""
    policyholder_name: str = ""
    effective_dates: str = ""
    incident_date: str = ""
    incident_time: str = ""
    incident_location: str = ""
    incident_description: str = ""
    claimant: str = ""
    third_parties: list[str] = Field(default_factory=list)
    contact_details: str = ""
    asset_type: str = ""
    asset_id: str = Field(default="", alias="assetID")
    estimated_damage: str = ""
    claim_type: str = "Auto"
    attachments: list[str] = Field(default_factory=list)
    initial_estimate: str = ""

    @field_validator(
        "policy_number",
        "policyholder_name",
        "effective_dates",
        "incident_date",
        "incident_time",
        "incident_location",
        "incident_description",
        "claimant",
        "contact_details",
        "asset_type",
        "asset_id",
        "estimated_damage",
        "claim_type",
        "initial_estimate",
        mode="before",
    )
    @classmethod
    def _strip_text(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    def to_flat_dict(self) -> dict[str, Any]:
        """Serialize with wire names, as rendered in extractedFields."""
        return self.model_dump(by_alias=True)


# --- Mandatory fields for routing (missing -> manual review), in report order ---

MANDATORY_FIELDS: tuple[tuple[str, str], ...] = (
    ("policy_number", "Policy Number"),
    ("policyholder_name", "Policyholder Name"),
    ("incident_date", "Incident Date"),
    ("incident_location", "Incident Location"),
    ("incident_description", "Incident Description"),
    ("claimant", "Claimant Name"),
    ("asset_type", "Asset Type"),
    ("asset_id", "Asset ID (VIN)"),
    ("estimated_damage", "Estimated Damage"),
)


class Route(str, Enum):
    """Queues a claim can be routed to."""

    MANUAL_REVIEW = "Manual Review"
    INVESTIGATION = "Investigation Queue"
    SPECIALIST = "Specialist Queue"
    FAST_TRACK = "Fast-track"
    STANDARD = "Standard Processing"


class RoutingDecision(BaseModel):
    """Route plus the reasoning shown to the adjuster."""

    model_config = ConfigDict(frozen=True)

    route: Route
    reasoning: str = Field(min_length=1)


# --- API output ---


class ClaimsProcessingResponse(BaseModel):
    """Success shape: extractedFields, missingFields, recommendedRoute, reasoning."""

    extractedFields: dict[str, Any]
    missingFields: list[str]
    recommendedRoute: str
    reasoning: str


class ErrorResponse(BaseModel):
    """Failure shape returned when a document cannot be processed at all."""

    error: str
