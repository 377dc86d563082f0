"""Keyword-scored endpoint inference for cable ID occurrences.

Each whitespace token of an occurrence's context window is scored against a
fixed equipment lexicon (RACK, SWITCH, ECDIS, ...). The highest scoring token
becomes the endpoint label; its score drives the confidence value.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from cablegraph.extraction.lexicon import (
    ENDPOINT_KEYWORDS,
    ENDPOINT_PREFIX_PATTERN,
    UNKNOWN_ENDPOINT,
)
from cablegraph.extraction.models import EndpointInference, EnrichedOccurrence, Occurrence
from cablegraph.extraction.occurrence_scanner import detect_ethernet_hint

_TRAILING_PUNCTUATION = ",;:."

KEYWORD_WEIGHT = 2.0
PREFIX_BONUS = 1.0
LENGTH_BONUS = 0.5
MIN_LABEL_LENGTH = 3
MAX_LABEL_LENGTH = 30

BASE_CONFIDENCE = 0.3
SCORE_WEIGHT = 0.2
NO_SCORE_CONFIDENCE = 0.2
ETHERNET_HINT_BONUS = 0.15
UNCONFIRMED_ETHERNET_FACTOR = 0.9
UNKNOWN_CONFIDENCE = 0.1


def clean_token(token: str) -> str:
    return token.rstrip(_TRAILING_PUNCTUATION)


def score_token(token: str) -> float:
    """Score a single (already cleaned) token as a potential endpoint label."""
    upper = token.upper()
    if len(upper) < 2 or upper.isdigit():
        return 0.0

    score = 0.0
    for keyword in ENDPOINT_KEYWORDS:
        if keyword in upper:
            score += KEYWORD_WEIGHT
    if ENDPOINT_PREFIX_PATTERN.match(upper):
        score += PREFIX_BONUS
    if MIN_LABEL_LENGTH <= len(upper) <= MAX_LABEL_LENGTH:
        score += LENGTH_BONUS
    return score


def best_endpoint_token(context: str) -> Tuple[str, float]:
    """Return the first token with the strictly highest positive score.

    Falls back to ``(UNKNOWN, 0.0)`` when nothing scores above zero.
    """
    best_label = UNKNOWN_ENDPOINT
    best_score = 0.0
    for raw_token in context.split():
        token = clean_token(raw_token)
        score = score_token(token)
        if score > best_score:
            best_label = token
            best_score = score
    return best_label, best_score


def infer_endpoint(
    context: Optional[str],
    *,
    has_ethernet_hint: Optional[bool] = None,
    strict_ethernet: bool = False,
) -> EndpointInference:
    """Pick the most likely endpoint label for a context window.

    Args:
        context: Context text around the cable ID sighting
        has_ethernet_hint: Precomputed hint flag; derived from ``context`` if None
        strict_ethernet: Caller runs in strict-ethernet mode (no unconfirmed penalty)

    Returns:
        EndpointInference with endpoint label, confidence in [0, 1] and evidence
    """
    context = context or ""
    if has_ethernet_hint is None:
        has_ethernet_hint = detect_ethernet_hint(context)

    label, score = best_endpoint_token(context)

    if score > 0:
        confidence = min(1.0, BASE_CONFIDENCE + score * SCORE_WEIGHT)
    else:
        confidence = NO_SCORE_CONFIDENCE
    # Hint bonus is applied before the unconfirmed-ethernet penalty.
    if has_ethernet_hint:
        confidence = min(1.0, confidence + ETHERNET_HINT_BONUS)
    if not strict_ethernet and not has_ethernet_hint:
        confidence *= UNCONFIRMED_ETHERNET_FACTOR

    evidence: List[str] = []
    if label == UNKNOWN_ENDPOINT:
        confidence = UNKNOWN_CONFIDENCE
    else:
        evidence.append(label)

    return EndpointInference(endpoint=label, confidence=confidence, evidence=evidence)


def enrich(occurrence: Occurrence, strict_ethernet: bool = False) -> EnrichedOccurrence:
    inference = infer_endpoint(
        occurrence.context,
        has_ethernet_hint=occurrence.has_ethernet_hint,
        strict_ethernet=strict_ethernet,
    )
    return EnrichedOccurrence(occurrence=occurrence, inference=inference)


class EndpointInferencer:
    """Applies :func:`infer_endpoint` with a fixed strict-ethernet setting."""

    def __init__(self, strict_ethernet: bool = False) -> None:
        self.strict_ethernet = strict_ethernet

    def infer(self, occurrence: Occurrence) -> EndpointInference:
        return enrich(occurrence, self.strict_ethernet).inference

    def enrich_all(self, occurrences: List[Occurrence]) -> List[EnrichedOccurrence]:
        return [enrich(occurrence, self.strict_ethernet) for occurrence in occurrences]
