"""Label-anchored capture rules for ACORD-style FNOL text.

Each rule is evaluated on its own against the full document: a label anchor,
a bounded capture shape right after it, and a post-processing step. There is
no shared cursor and no document grammar, so one malformed section never
prevents the others from being captured.
"""
import re
from dataclasses import dataclass
from typing import Callable

DESCRIPTION_MAX_LENGTH = 200

_FLAGS = re.IGNORECASE


def _first_line(value: str) -> str:
    return value.strip().split("\n")[0].strip()


def _truncate_description(value: str) -> str:
    return value.strip()[:DESCRIPTION_MAX_LENGTH].strip()


def _strip_thousands_separator(value: str) -> str:
    # Only the first separator is removed: "1,250,000" -> "1250,000"
    return value.strip().replace(",", "", 1)


@dataclass(frozen=True)
class FieldRule:
    """One capture: regex whose group 1 is the value, then post-processing."""

    name: str
    pattern: re.Pattern
    post: Callable[[str], str] = str.strip

    def capture(self, text: str) -> str:
        m = self.pattern.search(text)
        if not m:
            return ""
        return self.post(m.group(1))


FIELD_RULES: tuple[FieldRule, ...] = (
    FieldRule("policy_number", re.compile(r"POLICY NUMBER[:\s]+([A-Z0-9-]+)", _FLAGS)),
    FieldRule(
        "policyholder_name",
        re.compile(r"NAME OF INSURED[^)]+\)\s+([A-Z\s,]+)", _FLAGS),
        _first_line,
    ),
    FieldRule(
        "effective_dates",
        re.compile(
            r"EFFECTIVE DATES?[:\s]+(\d{1,2}/\d{1,2}/\d{4}\s*(?:-|TO)\s*\d{1,2}/\d{1,2}/\d{4})",
            _FLAGS,
        ),
    ),
    FieldRule(
        "incident_date",
        re.compile(r"DATE OF LOSS[^)]+\)\s*(\d{1,2}/\d{1,2}/\d{4})", _FLAGS),
    ),
    FieldRule("incident_time", re.compile(r"TIME[:\s]+(AM|PM)", _FLAGS), str.upper),
    FieldRule(
        "location_street",
        re.compile(r"LOCATION OF LOSS.+?STREET[:\s]+([^\n]+)", _FLAGS | re.DOTALL),
    ),
    FieldRule("location_city", re.compile(r"CITY, STATE, ZIP[:\s]+([^\n]+)", _FLAGS)),
    FieldRule(
        "incident_description",
        re.compile(
            r"DESCRIPTION OF ACCIDENT[^)]+\)(.+?)(?=LOSS|DRIVER'S NAME|\Z)",
            _FLAGS | re.DOTALL,
        ),
        _truncate_description,
    ),
    FieldRule(
        "claimant",
        re.compile(r"DRIVER'S NAME AND ADDRESS[^)]+\)([A-Z\s,]+)", _FLAGS),
        _first_line,
    ),
    FieldRule(
        "contact_details",
        re.compile(r"PRIMARY PHONE #[: \t]*(\+?[\d()\-. ]{7,}\d)", _FLAGS),
    ),
    FieldRule("asset_id", re.compile(r"V\.I\.N\.[:\s]+([A-Z0-9]+)", _FLAGS)),
    FieldRule("make", re.compile(r"MAKE[:\s]+([A-Z0-9 \t]+)", _FLAGS)),
    FieldRule("model", re.compile(r"MODEL[:\s]+([A-Z0-9 \t]+)", _FLAGS)),
    FieldRule(
        "estimate",
        re.compile(r"ESTIMATE AMOUNT[:\s]+\$?([\d,]+)", _FLAGS),
        _strip_thousands_separator,
    ),
)


def capture_all(text: str, rules: tuple[FieldRule, ...] = FIELD_RULES) -> dict[str, str]:
    """Run every rule independently; missing captures map to ''."""
    return {rule.name: rule.capture(text) for rule in rules}
