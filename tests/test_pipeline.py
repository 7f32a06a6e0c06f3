"""Tests for the end-to-end pipeline and its error boundary."""
from pathlib import Path

import pytest

from fnol_router.config import Settings
from fnol_router.pipeline import (
    GENERIC_ERROR_MESSAGE,
    DocumentReadError,
    decode_document,
    process_document,
    process_text,
)
from fnol_router.schemas import ClaimsProcessingResponse, ErrorResponse

SAMPLES = Path(__file__).parent.parent / "samples"


@pytest.fixture
def complete_text():
    return (SAMPLES / "fnol_sample_complete.txt").read_text(encoding="utf-8")


def test_complete_low_damage_claim_is_fast_tracked(complete_text):
    result = process_text(complete_text)
    assert result.missingFields == []
    assert result.recommendedRoute == "Fast-track"
    assert "$5,000" in result.reasoning


@pytest.mark.parametrize(
    "estimate, stored, amount",
    [("$5,000, parts only", "5000,", "$5,000"), ("$1,250,000", "1250,000", "$1,250")],
)
def test_estimate_with_trailing_separator_reads_leading_amount(complete_text, estimate, stored, amount):
    result = process_text(complete_text.replace("$5,000", estimate))
    assert result.extractedFields["estimatedDamage"] == stored
    assert result.recommendedRoute == "Fast-track"
    assert amount in result.reasoning


def test_missing_vin_goes_to_manual_review(complete_text):
    result = process_text(complete_text.replace("V.I.N.: 1HGBH41JXMN109186\n", ""))
    assert result.missingFields == ["Asset ID (VIN)"]
    assert result.recommendedRoute == "Manual Review"
    assert "Asset ID (VIN)" in result.reasoning
    assert "Missing 1 mandatory field(s)" in result.reasoning


def test_injury_claim_goes_to_specialist():
    text = (SAMPLES / "fnol_sample_injury.txt").read_text(encoding="utf-8")
    result = process_text(text)
    assert result.missingFields == []
    assert result.extractedFields["estimatedDamage"] == "30000"
    assert result.recommendedRoute == "Specialist Queue"


def test_fraud_claim_goes_to_investigation():
    text = (SAMPLES / "fnol_sample_fraud_flag.txt").read_text(encoding="utf-8")
    result = process_text(text)
    assert result.recommendedRoute == "Investigation Queue"


@pytest.mark.parametrize("text", ["", "garbage ~~~ 12345 %%%"])
def test_empty_or_garbage_text(text):
    result = process_text(text)
    assert len(result.missingFields) == 9
    assert result.recommendedRoute == "Manual Review"
    assert all(result.extractedFields[key] == "" for key in ("policyNumber", "assetID", "estimatedDamage"))


def test_pipeline_is_deterministic(complete_text):
    assert process_text(complete_text) == process_text(complete_text)


def test_settings_drive_threshold_and_keywords(complete_text):
    custom = Settings(fast_track_damage_threshold=1000.0, fraud_keywords=["stoplight"])
    result = process_text(complete_text, custom)
    assert result.recommendedRoute == "Investigation Queue"

    custom = Settings(fast_track_damage_threshold=1000.0)
    assert process_text(complete_text, custom).recommendedRoute == "Standard Processing"


def test_success_shape_is_complete(complete_text):
    payload = process_text(complete_text).model_dump()
    assert set(payload) == {"extractedFields", "missingFields", "recommendedRoute", "reasoning"}


def test_decode_document_accepts_utf8_bom():
    assert decode_document("\ufeffPOLICY NUMBER: P-1".encode("utf-8")) == "POLICY NUMBER: P-1"


@pytest.mark.parametrize("content", [b"\xff\xfe\x00\x00binary", b"POLICY\x00NUMBER"])
def test_decode_document_rejects_binary(content):
    with pytest.raises(DocumentReadError):
        decode_document(content)


def test_process_document_success(complete_text):
    result = process_document(complete_text.encode("utf-8"))
    assert isinstance(result, ClaimsProcessingResponse)
    assert result.recommendedRoute == "Fast-track"


def test_process_document_unreadable_returns_generic_error():
    result = process_document(b"\x89PNG\r\n\x1a\n\x00\x00")
    assert isinstance(result, ErrorResponse)
    assert result.error == GENERIC_ERROR_MESSAGE
    assert result.model_dump() == {"error": GENERIC_ERROR_MESSAGE}


def test_process_document_hides_internal_failures(monkeypatch):
    def boom(text, settings=None):
        raise RuntimeError("internal detail")

    monkeypatch.setattr("fnol_router.pipeline.process_text", boom)
    result = process_document(b"POLICY NUMBER: P-1")
    assert isinstance(result, ErrorResponse)
    assert "internal detail" not in result.error
