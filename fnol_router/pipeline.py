"""FNOL processing pipeline: extract -> completeness check -> route."""
import logging

from fnol_router.config import Settings, settings as default_settings
from fnol_router.extraction import extract_from_text
from fnol_router.routing import compute_route, get_missing_mandatory_fields
from fnol_router.schemas import ClaimsProcessingResponse, ErrorResponse

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Failed to process file. Please ensure it is a valid FNOL document."


class DocumentReadError(Exception):
    """Raised when uploaded bytes cannot be read as document text."""


def process_text(text: str, settings: Settings | None = None) -> ClaimsProcessingResponse:
    """Run the full pipeline on already-decoded document text."""
    settings = settings or default_settings
    extracted = extract_from_text(text)
    missing = get_missing_mandatory_fields(extracted)
    decision = compute_route(
        extracted,
        missing,
        fraud_keywords=settings.fraud_keywords,
        injury_keywords=settings.injury_keywords,
        threshold=settings.fast_track_damage_threshold,
    )
    return ClaimsProcessingResponse(
        extractedFields=extracted.to_flat_dict(),
        missingFields=missing,
        recommendedRoute=decision.route.value,
        reasoning=decision.reasoning,
    )


def decode_document(content: bytes) -> str:
    """Decode uploaded bytes as UTF-8 text; binary content is rejected."""
    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise DocumentReadError("Document is not valid UTF-8 text") from e
    if "\x00" in text:
        raise DocumentReadError("Document contains binary data")
    return text


def process_document(
    content: bytes, settings: Settings | None = None
) -> ClaimsProcessingResponse | ErrorResponse:
    """
    Boundary entry point for raw uploads. Any failure is logged and reported
    as a single generic error so internal details never reach the caller.
    """
    try:
        text = decode_document(content)
        return process_text(text, settings)
    except Exception:
        logger.exception("FNOL document processing failed")
        return ErrorResponse(error=GENERIC_ERROR_MESSAGE)
