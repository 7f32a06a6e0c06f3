"""Routing rules: Manual Review, Investigation Queue, Specialist Queue, Fast-track, Standard Processing."""
import logging
import math
import re
from typing import Iterable

from fnol_router.config import FRAUD_KEYWORDS, INJURY_KEYWORDS, settings
from fnol_router.schemas import ClaimRecord, Route, RoutingDecision

logger = logging.getLogger(__name__)


def _matched_keywords(text: str, keywords: Iterable[str]) -> list[str]:
    # Plain substring containment: "hurtle" matches "hurt"
    return [kw for kw in keywords if kw.lower() in text]


_LEADING_NUMBER = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)")


def _parse_damage(value: str) -> float:
    """Read the leading number of the damage figure ("1250,000" -> 1250); none counts as 0."""
    m = _LEADING_NUMBER.match(value or "")
    if not m:
        return 0.0
    damage = float(m.group(0))
    return damage if math.isfinite(damage) else 0.0


def _format_amount(amount: float) -> str:
    # 5000 -> "5,000", 24999.999 -> "24,999.999"
    return f"{amount:,.3f}".rstrip("0").rstrip(".")


def compute_route(
    extracted: ClaimRecord,
    missing: list[str],
    fraud_keywords: Iterable[str] = FRAUD_KEYWORDS,
    injury_keywords: Iterable[str] = INJURY_KEYWORDS,
    threshold: float | None = None,
) -> RoutingDecision:
    """
    Apply routing rules and return the decision with its reasoning.
    Rules (order matters, first match wins):
    1. Any mandatory field missing -> Manual Review
    2. Description mentions a fraud indicator -> Investigation Queue
    3. Description mentions an injury indicator -> Specialist Queue
    4. 0 < damage < threshold (default 25,000) -> Fast-track
    5. damage >= threshold -> Standard Processing
    6. Damage unknown or zero -> Manual Review
    """
    if threshold is None:
        threshold = settings.fast_track_damage_threshold

    decision = _decide(extracted, missing, fraud_keywords, injury_keywords, threshold)
    logger.info("Claim %s routed to %s", extracted.policy_number or "<unknown>", decision.route.value)
    return decision


def _decide(
    extracted: ClaimRecord,
    missing: list[str],
    fraud_keywords: Iterable[str],
    injury_keywords: Iterable[str],
    threshold: float,
) -> RoutingDecision:
    if missing:
        return RoutingDecision(
            route=Route.MANUAL_REVIEW,
            reasoning=(
                f"Missing {len(missing)} mandatory field(s): {', '.join(missing)}. "
                "Requires manual verification before processing."
            ),
        )

    desc = (extracted.incident_description or "").lower()

    fraud_hits = _matched_keywords(desc, fraud_keywords)
    if fraud_hits:
        return RoutingDecision(
            route=Route.INVESTIGATION,
            reasoning=(
                f"Description contains potential fraud indicators ({', '.join(fraud_hits)}). "
                "Flagged for special investigation unit review."
            ),
        )

    injury_hits = _matched_keywords(desc, injury_keywords)
    if injury_hits:
        return RoutingDecision(
            route=Route.SPECIALIST,
            reasoning=(
                f"Claim involves personal injury ({', '.join(injury_hits)}). "
                "Routed to bodily injury specialist for assessment."
            ),
        )

    damage = _parse_damage(extracted.estimated_damage)
    if 0 < damage < threshold:
        return RoutingDecision(
            route=Route.FAST_TRACK,
            reasoning=(
                f"Estimated damage of ${_format_amount(damage)} is below "
                f"${_format_amount(threshold)} threshold. Eligible for expedited processing."
            ),
        )
    if damage >= threshold:
        return RoutingDecision(
            route=Route.STANDARD,
            reasoning=(
                f"Estimated damage of ${_format_amount(damage)} exceeds fast-track threshold. "
                "Requires standard adjuster review."
            ),
        )
    return RoutingDecision(
        route=Route.MANUAL_REVIEW,
        reasoning="Unable to determine damage amount. Requires manual assessment.",
    )
