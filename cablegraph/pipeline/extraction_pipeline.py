"""End-to-end cable connection extraction.

This module sequences the extraction workflow:
1. Per-page text from every document (PDF via pypdf; text exports directly)
2. Cable ID recognition with a line-window context per sighting
3. Endpoint inference per occurrence
4. One pairing pass across all documents of the request
5. Summary counts by edge tag
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

from loguru import logger

from cablegraph.extraction.connection_pairer import pair_connections
from cablegraph.extraction.models import (
    Edge,
    EdgeTag,
    ExtractionReport,
    ExtractionResult,
    ExtractionSummary,
    Occurrence,
    Page,
    ReviewItem,
    SourceDocument,
)
from cablegraph.extraction.occurrence_scanner import find_cable_occurrences
from cablegraph.ingestion.pdf_text_extractor import PDFTextExtractor
from cablegraph.ingestion.text_file_parser import TextFileParser
from cablegraph.utils.config import Config, ExtractionOptions

DocumentInput = Union[SourceDocument, Sequence[Page]]


def _resolve_options(options: Union[ExtractionOptions, Mapping[str, Any], None]) -> ExtractionOptions:
    if options is None:
        return ExtractionOptions()
    if isinstance(options, ExtractionOptions):
        return options
    if isinstance(options, Mapping):
        return ExtractionOptions(**options)
    raise TypeError(f"options must be ExtractionOptions or a mapping, got {type(options).__name__}")


def summarize(edges: Sequence[Edge], review: Sequence[ReviewItem]) -> ExtractionSummary:
    """Count edges and review items, and edges per tag."""
    return ExtractionSummary(
        total_edges=len(edges),
        total_review=len(review),
        system_level=sum(1 for edge in edges if edge.tag == EdgeTag.SYSTEM_LEVEL),
        internal=sum(1 for edge in edges if edge.tag == EdgeTag.INTERNAL),
        unknown=sum(1 for edge in edges if edge.tag == EdgeTag.UNKNOWN),
    )


def collect_occurrences(documents: Iterable[DocumentInput]) -> List[Occurrence]:
    """Scan every page of every document, in order."""
    occurrences: List[Occurrence] = []
    for index, document in enumerate(documents, start=1):
        if isinstance(document, SourceDocument):
            occurrences.extend(find_cable_occurrences(document.pages, document.name))
        else:
            pages = [page if isinstance(page, Page) else Page.model_validate(page) for page in document]
            occurrences.extend(find_cable_occurrences(pages, f"document-{index}"))
    return occurrences


def extract_connections(
    documents: Iterable[DocumentInput],
    options: Union[ExtractionOptions, Mapping[str, Any], None] = None,
) -> ExtractionResult:
    """Extract paired connections and a review list from already-extracted text.

    Pairing runs once over the combined occurrences, so a cable whose two ends
    appear in different diagrams of the same vessel still pairs.

    Args:
        documents: SourceDocuments or plain page lists, one per uploaded diagram
        options: ExtractionOptions or a mapping such as ``{"strict_ethernet": True}``
            (``strictEthernet`` is accepted too)

    Returns:
        ExtractionResult with edges, review items and summary counts

    Raises:
        pydantic.ValidationError: If the options are malformed
    """
    resolved = _resolve_options(options)
    occurrences = collect_occurrences(documents)
    edges, review = pair_connections(occurrences, strict_ethernet=resolved.strict_ethernet)
    return ExtractionResult(edges=edges, review=review, summary=summarize(edges, review))


class ExtractionPipeline:
    """File-level driver around :func:`extract_connections`.

    Example:
        >>> pipeline = ExtractionPipeline(config)
        >>> report = pipeline.run(["deck_a.pdf", "deck_b.pdf"], vessel_id="MV-1")
        >>> print(report.result.summary.total_edges)
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        *,
        pdf_extractor: Optional[PDFTextExtractor] = None,
        text_parser: Optional[TextFileParser] = None,
    ) -> None:
        self.config = config or Config()
        self.pdf_extractor = pdf_extractor or PDFTextExtractor()
        self.text_parser = text_parser or TextFileParser()

    def load_document(self, path: Path | str) -> SourceDocument:
        """Convert one input file to per-page text.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the suffix is not supported
        """
        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Input file not found: {file_path}")

        suffix = file_path.suffix.lower()
        if suffix not in self.config.extraction.supported_suffixes:
            raise ValueError(f"Unsupported input type: {suffix}")

        if suffix == ".pdf":
            return self.pdf_extractor.extract_pages(file_path)
        return self.text_parser.parse_file(file_path)

    def run(
        self,
        paths: Sequence[Path | str],
        *,
        vessel_id: Optional[str] = None,
        strict_ethernet: Optional[bool] = None,
    ) -> ExtractionReport:
        """Extract connections from a set of diagram files of one vessel."""
        if strict_ethernet is None:
            options = self.config.extraction.options()
        else:
            options = ExtractionOptions(strict_ethernet=strict_ethernet)

        start_time = time.time()
        documents = [self.load_document(path) for path in paths]
        result = extract_connections(documents, options)

        logger.success(
            f"Extracted {result.summary.total_edges} edges and "
            f"{result.summary.total_review} review items from {len(documents)} documents "
            f"in {time.time() - start_time:.2f}s"
        )
        return ExtractionReport(
            vessel_id=vessel_id or self.config.vessel_id,
            file_names=[document.name for document in documents],
            result=result,
        )
