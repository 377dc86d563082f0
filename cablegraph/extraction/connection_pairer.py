"""Group cable ID occurrences and resolve them into edges or review items."""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple, Union

from loguru import logger

from cablegraph.extraction.endpoint_inferencer import enrich
from cablegraph.extraction.lexicon import AMBIGUITY_GAP, UNKNOWN_ENDPOINT, UNKNOWN_MEDIA
from cablegraph.extraction.models import (
    Edge,
    EdgeTag,
    EnrichedOccurrence,
    Occurrence,
    ReviewItem,
    ReviewType,
)

# Inclusive 0.3 boundary under float subtraction.
_GAP_TOLERANCE = 1e-9


def infer_edge_tag(from_endpoint: str, to_endpoint: str) -> EdgeTag:
    """Classify an edge as unknown, internal (same component) or system-level."""
    from_norm = from_endpoint.upper()
    to_norm = to_endpoint.upper()
    if UNKNOWN_ENDPOINT in (from_norm, to_norm):
        return EdgeTag.UNKNOWN
    if from_norm == to_norm:
        return EdgeTag.INTERNAL
    return EdgeTag.SYSTEM_LEVEL


def group_by_cable_id(
    occurrences: Sequence[EnrichedOccurrence],
) -> Dict[str, List[EnrichedOccurrence]]:
    """Group occurrences by normalized cable ID, ordered by first sighting."""
    groups: Dict[str, List[EnrichedOccurrence]] = {}
    for item in occurrences:
        groups.setdefault(item.cable_id.upper(), []).append(item)
    return groups


def rank_group(group: Sequence[EnrichedOccurrence]) -> List[EnrichedOccurrence]:
    """Sort by descending confidence; sighting order is kept among ties."""
    return sorted(group, key=lambda item: -item.confidence)


def _unique_pages(items: Sequence[EnrichedOccurrence]) -> List[int]:
    return sorted({item.page_number for item in items})


def _build_edge(
    cable_id: str,
    first: EnrichedOccurrence,
    second: EnrichedOccurrence,
    page_refs: List[int],
) -> Edge:
    media = first.media if first.media != UNKNOWN_MEDIA else second.media
    return Edge(
        from_endpoint=first.endpoint,
        to_endpoint=second.endpoint,
        cable_id=cable_id,
        media=media,
        page_refs=page_refs,
        confidence=min(first.confidence, second.confidence),
        evidence=[*first.evidence, *second.evidence],
        tag=infer_edge_tag(first.endpoint, second.endpoint),
    )


def resolve_group(
    cable_id: str, group: Sequence[EnrichedOccurrence]
) -> Tuple[List[Edge], List[ReviewItem]]:
    """Decide the edge and/or review items for one cable ID group."""
    ranked = rank_group(group)

    if len(ranked) == 1:
        lone = ranked[0]
        return [], [
            ReviewItem(
                type=ReviewType.UNPAIRED,
                cable_id=cable_id,
                endpoint=lone.endpoint,
                confidence=lone.confidence,
                page_refs=[lone.page_number],
                evidence=list(lone.evidence),
                media=lone.media,
            )
        ]

    if len(ranked) == 2:
        return [_build_edge(cable_id, ranked[0], ranked[1], _unique_pages(ranked))], []

    gap = ranked[0].confidence - ranked[1].confidence
    if gap >= AMBIGUITY_GAP - _GAP_TOLERANCE:
        edge = _build_edge(cable_id, ranked[0], ranked[1], _unique_pages(ranked))
        extras = [
            ReviewItem(
                type=ReviewType.EXTRA,
                cable_id=cable_id,
                endpoint=item.endpoint,
                confidence=item.confidence,
                page_refs=[item.page_number],
                evidence=list(item.evidence),
            )
            for item in ranked[2:]
        ]
        logger.debug(
            f"{cable_id}: dominant pair (gap={gap:.2f}) with {len(extras)} extra sightings"
        )
        return [edge], extras

    logger.debug(f"{cable_id}: {len(ranked)} sightings without a dominant pair (gap={gap:.2f})")
    return [], [
        ReviewItem(
            type=ReviewType.AMBIGUOUS,
            cable_id=cable_id,
            occurrences=len(ranked),
            page_refs=_unique_pages(ranked),
            candidates=[item.endpoint for item in ranked],
        )
    ]


def pair_connections(
    occurrences: Sequence[Union[Occurrence, EnrichedOccurrence]],
    *,
    strict_ethernet: bool = False,
) -> Tuple[List[Edge], List[ReviewItem]]:
    """Pair all occurrences of the request into edges and review items.

    Plain occurrences are enriched with an endpoint inference first, using
    ``strict_ethernet``; already enriched occurrences are used as they are.

    Args:
        occurrences: Every occurrence of the extraction request, across documents
        strict_ethernet: Strict-ethernet mode passed to the endpoint inferencer

    Returns:
        Tuple of (edges, review items)
    """
    enriched = [
        item if isinstance(item, EnrichedOccurrence) else enrich(item, strict_ethernet)
        for item in occurrences
    ]

    edges: List[Edge] = []
    review: List[ReviewItem] = []
    for cable_id, group in group_by_cable_id(enriched).items():
        group_edges, group_review = resolve_group(cable_id, group)
        edges.extend(group_edges)
        review.extend(group_review)

    logger.info(
        f"Paired {len(enriched)} occurrences: {len(edges)} edges, {len(review)} review items"
    )
    return edges, review
