from __future__ import annotations

import pytest

from cablegraph.extraction.connection_pairer import (
    group_by_cable_id,
    infer_edge_tag,
    pair_connections,
    rank_group,
)
from cablegraph.extraction.models import (
    EdgeTag,
    EndpointInference,
    EnrichedOccurrence,
    Occurrence,
    ReviewType,
)


def _enriched(
    cable_id: str,
    page: int,
    endpoint: str,
    confidence: float,
    media: str = "Unknown",
) -> EnrichedOccurrence:
    return EnrichedOccurrence(
        occurrence=Occurrence(cable_id=cable_id, page_number=page, media=media),
        inference=EndpointInference(
            endpoint=endpoint,
            confidence=confidence,
            evidence=[] if endpoint == "UNKNOWN" else [endpoint],
        ),
    )


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        ("UNKNOWN", "RACK-1", EdgeTag.UNKNOWN),
        ("RACK-1", "unknown", EdgeTag.UNKNOWN),
        ("RACK-1", "rack-1", EdgeTag.INTERNAL),
        ("RACK-1", "SWITCH-3", EdgeTag.SYSTEM_LEVEL),
    ],
)
def test_infer_edge_tag(a, b, expected):
    assert infer_edge_tag(a, b) == expected


def test_single_sighting_is_unpaired():
    edges, review = pair_connections([_enriched("A01-001-15-02", 4, "RACK-1", 0.8, "CAT6")])

    assert edges == []
    assert len(review) == 1
    item = review[0]
    assert item.type == ReviewType.UNPAIRED
    assert item.cable_id == "A01-001-15-02"
    assert item.endpoint == "RACK-1"
    assert item.confidence == pytest.approx(0.8)
    assert item.page_refs == [4]
    assert item.evidence == ["RACK-1"]
    assert item.media == "CAT6"


def test_two_sightings_make_an_edge():
    edges, review = pair_connections(
        [
            _enriched("N50-001-03-07", 5, "SWITCH-5", 0.6),
            _enriched("N50-001-03-07", 2, "RACK-2", 0.9, "CAT6"),
        ]
    )

    assert review == []
    assert len(edges) == 1
    edge = edges[0]
    assert edge.from_endpoint == "RACK-2"
    assert edge.to_endpoint == "SWITCH-5"
    assert edge.confidence == pytest.approx(0.6)
    assert edge.media == "CAT6"
    assert edge.page_refs == [2, 5]
    assert edge.evidence == ["RACK-2", "SWITCH-5"]
    assert edge.tag == EdgeTag.SYSTEM_LEVEL


def test_edge_media_falls_back_to_second_sighting():
    edges, _ = pair_connections(
        [
            _enriched("N50-001-03-07", 1, "RACK-2", 0.9),
            _enriched("N50-001-03-07", 1, "SWITCH-5", 0.6, "UTP"),
        ]
    )
    assert edges[0].media == "UTP"
    assert edges[0].page_refs == [1]


def test_equal_confidence_keeps_sighting_order():
    group = [
        _enriched("N50-001-03-07", 1, "RACK-2", 0.7),
        _enriched("N50-001-03-07", 2, "SWITCH-5", 0.7),
    ]
    assert [item.endpoint for item in rank_group(group)] == ["RACK-2", "SWITCH-5"]


@pytest.mark.parametrize("confidences", [(0.9, 0.6, 0.1), (0.7, 0.4, 0.1)])
def test_gap_threshold_is_inclusive(confidences):
    occurrences = [
        _enriched("N61-002-14-01", page, f"RACK-{page}", confidence)
        for page, confidence in enumerate(confidences, start=1)
    ]
    edges, review = pair_connections(occurrences)

    assert len(edges) == 1
    assert [item.type for item in review] == [ReviewType.EXTRA]


def test_dominant_pair_with_extras():
    edges, review = pair_connections(
        [
            _enriched("N61-002-14-01", 7, "PLC-1", 0.2),
            _enriched("N61-002-14-01", 1, "RACK-1", 0.95),
            _enriched("N61-002-14-01", 3, "SWITCH-2", 0.6),
            _enriched("N61-002-14-01", 3, "HUB", 0.4),
        ]
    )

    assert len(edges) == 1
    edge = edges[0]
    assert (edge.from_endpoint, edge.to_endpoint) == ("RACK-1", "SWITCH-2")
    assert edge.page_refs == [1, 3, 7]
    assert edge.confidence == pytest.approx(0.6)

    assert [item.type for item in review] == [ReviewType.EXTRA, ReviewType.EXTRA]
    assert [item.endpoint for item in review] == ["HUB", "PLC-1"]
    assert [item.page_refs for item in review] == [[3], [7]]
    assert review[1].evidence == ["PLC-1"]


def test_close_confidences_are_ambiguous():
    edges, review = pair_connections(
        [
            _enriched("N50-001-03-07", 2, "SWITCH-1", 0.85),
            _enriched("N50-001-03-07", 1, "RACK-1", 0.9),
            _enriched("N50-001-03-07", 2, "UNKNOWN", 0.3),
        ]
    )

    assert edges == []
    assert len(review) == 1
    item = review[0]
    assert item.type == ReviewType.AMBIGUOUS
    assert item.occurrences == 3
    assert item.page_refs == [1, 2]
    assert item.candidates == ["RACK-1", "SWITCH-1", "UNKNOWN"]
    assert item.endpoint is None


def test_groups_ordered_by_first_sighting():
    occurrences = [
        _enriched("B", 1, "RACK-1", 0.5),
        _enriched("A", 1, "RACK-1", 0.5),
        _enriched("B", 2, "RACK-1", 0.5),
    ]
    assert list(group_by_cable_id(occurrences)) == ["B", "A"]


def test_plain_occurrences_are_enriched_with_strict_flag():
    occurrences = [
        Occurrence(cable_id="N50-001-03-07", page_number=1, context="N50-001-03-07 RACK-2"),
        Occurrence(cable_id="N50-001-03-07", page_number=2, context="N50-001-03-07 via"),
    ]

    relaxed, _ = pair_connections(occurrences)
    strict, _ = pair_connections(occurrences, strict_ethernet=True)

    # Weaker sighting is the cable ID token itself (0.5 score -> 0.4 confidence).
    assert relaxed[0].confidence == pytest.approx(0.36)
    assert strict[0].confidence == pytest.approx(0.4)
    assert strict[0].from_endpoint == "RACK-2"


def test_every_occurrence_is_accounted_for():
    occurrences = [
        _enriched("ONE", 1, "RACK-1", 0.5),
        _enriched("TWO", 1, "RACK-1", 0.5),
        _enriched("TWO", 2, "RACK-2", 0.5),
        _enriched("DOM", 1, "RACK-1", 0.9),
        _enriched("DOM", 2, "RACK-2", 0.5),
        _enriched("DOM", 3, "RACK-3", 0.4),
        _enriched("AMB", 1, "RACK-1", 0.5),
        _enriched("AMB", 2, "RACK-2", 0.5),
        _enriched("AMB", 3, "RACK-3", 0.5),
    ]
    edges, review = pair_connections(occurrences)

    represented = 2 * len(edges)
    for item in review:
        represented += item.occurrences if item.type == ReviewType.AMBIGUOUS else 1
    assert represented == len(occurrences)
