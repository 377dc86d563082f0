"""Shared data models for cable-connection extraction.

All records are immutable once built. Field aliases keep the JSON shape used by
downstream consumers (camelCase keys such as ``cableId`` and ``pageRefs``).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Record(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """Dump using wire aliases, dropping unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Page(_Record):
    """Plain text of one physical page."""

    page_number: int = Field(alias="pageNumber", ge=1)
    text: Optional[str] = None

    @field_validator("text", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        # Malformed page text degrades to "no occurrences" instead of failing.
        return value if isinstance(value, str) else None


class SourceDocument(_Record):
    """One uploaded diagram, already converted to per-page text."""

    name: str = "document"
    pages: List[Page] = Field(default_factory=list)


class CableIdMatch(_Record):
    cable_id: str = Field(alias="cableId")
    offset: int


class ContextWindow(_Record):
    line_number: int = Field(alias="lineNumber")
    lines: List[str] = Field(default_factory=list)
    text: str = ""


class Occurrence(_Record):
    """A single sighting of a cable ID on one page."""

    cable_id: str = Field(alias="cableId")
    page_number: int = Field(alias="pageNumber", ge=1)
    context: str = ""
    has_ethernet_hint: bool = Field(default=False, alias="hasEthernetHint")
    media: str = "Unknown"
    line_number: int = Field(default=0, alias="lineNumber")
    document_name: Optional[str] = Field(default=None, alias="documentName")


class EndpointInference(_Record):
    endpoint: str
    confidence: float = Field(ge=0.0, le=1.0)
    evidence: List[str] = Field(default_factory=list)


class EnrichedOccurrence(_Record):
    """Occurrence with its inferred endpoint attached."""

    occurrence: Occurrence
    inference: EndpointInference

    @property
    def cable_id(self) -> str:
        return self.occurrence.cable_id

    @property
    def page_number(self) -> int:
        return self.occurrence.page_number

    @property
    def media(self) -> str:
        return self.occurrence.media

    @property
    def endpoint(self) -> str:
        return self.inference.endpoint

    @property
    def confidence(self) -> float:
        return self.inference.confidence

    @property
    def evidence(self) -> List[str]:
        return self.inference.evidence


class EdgeTag(str, Enum):
    INTERNAL = "internal"
    SYSTEM_LEVEL = "system_level"
    UNKNOWN = "unknown"


class ReviewType(str, Enum):
    UNPAIRED = "unpaired"
    AMBIGUOUS = "ambiguous"
    EXTRA = "extra"


class Edge(_Record):
    """A resolved point-to-point connection for one cable ID."""

    from_endpoint: str = Field(alias="from")
    to_endpoint: str = Field(alias="to")
    cable_id: str = Field(alias="cableId")
    media: str = "Unknown"
    page_refs: List[int] = Field(default_factory=list, alias="pageRefs")
    confidence: float = Field(ge=0.0, le=1.0)
    evidence: List[str] = Field(default_factory=list)
    tag: EdgeTag


class ReviewItem(_Record):
    """A sighting or group that could not be resolved into an edge.

    ``unpaired`` and ``extra`` items carry endpoint/confidence/evidence;
    ``ambiguous`` items carry the occurrence count and ranked candidates.
    """

    type: ReviewType
    cable_id: str = Field(alias="cableId")
    page_refs: List[int] = Field(default_factory=list, alias="pageRefs")
    endpoint: Optional[str] = None
    confidence: Optional[float] = None
    evidence: Optional[List[str]] = None
    media: Optional[str] = None
    occurrences: Optional[int] = None
    candidates: Optional[List[str]] = None


class ExtractionSummary(_Record):
    total_edges: int = Field(default=0, alias="totalEdges")
    total_review: int = Field(default=0, alias="totalReview")
    system_level: int = Field(default=0, alias="systemLevel")
    internal: int = 0
    unknown: int = 0


class ExtractionResult(_Record):
    edges: List[Edge] = Field(default_factory=list)
    review: List[ReviewItem] = Field(default_factory=list)
    summary: ExtractionSummary = Field(default_factory=ExtractionSummary)


class ExtractionReport(_Record):
    """Extraction result together with the request it answered."""

    vessel_id: str = Field(default="default", alias="vesselId")
    file_names: List[str] = Field(default_factory=list, alias="fileNames")
    result: ExtractionResult = Field(default_factory=ExtractionResult)
