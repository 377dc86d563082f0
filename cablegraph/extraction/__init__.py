"""Extraction package exports."""

from cablegraph.extraction.cable_id_recognizer import find_cable_ids, iter_cable_ids
from cablegraph.extraction.connection_pairer import infer_edge_tag, pair_connections
from cablegraph.extraction.context_windower import extract_context
from cablegraph.extraction.endpoint_inferencer import EndpointInferencer, infer_endpoint
from cablegraph.extraction.models import (
    Edge,
    EdgeTag,
    EndpointInference,
    EnrichedOccurrence,
    ExtractionReport,
    ExtractionResult,
    ExtractionSummary,
    Occurrence,
    Page,
    ReviewItem,
    ReviewType,
    SourceDocument,
)
from cablegraph.extraction.occurrence_scanner import find_cable_occurrences

__all__ = [
    "Edge",
    "EdgeTag",
    "EndpointInference",
    "EndpointInferencer",
    "EnrichedOccurrence",
    "ExtractionReport",
    "ExtractionResult",
    "ExtractionSummary",
    "Occurrence",
    "Page",
    "ReviewItem",
    "ReviewType",
    "SourceDocument",
    "extract_context",
    "find_cable_ids",
    "find_cable_occurrences",
    "infer_edge_tag",
    "infer_endpoint",
    "iter_cable_ids",
    "pair_connections",
]
