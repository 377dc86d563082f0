"""Export helpers for extraction results."""

from __future__ import annotations

import csv
import io
import json
from pathlib import Path
from typing import Iterable, List, Sequence

from loguru import logger

from cablegraph.extraction.models import Edge, EdgeTag, ExtractionReport, ReviewItem

CSV_HEADERS = ["From", "To", "Cable ID", "Media", "Pages", "Confidence", "Tag"]

_VIEW_TAGS = {
    "all": {EdgeTag.SYSTEM_LEVEL, EdgeTag.INTERNAL, EdgeTag.UNKNOWN},
    "system": {EdgeTag.SYSTEM_LEVEL, EdgeTag.UNKNOWN},
    "internal": {EdgeTag.INTERNAL},
}


def filter_edges(edges: Iterable[Edge], view: str = "all") -> List[Edge]:
    """Select edges for a view: all, system (system-level + unknown) or internal."""
    if view not in _VIEW_TAGS:
        raise ValueError(f"Unknown edge view: {view!r} (expected one of {sorted(_VIEW_TAGS)})")
    tags = _VIEW_TAGS[view]
    return [edge for edge in edges if edge.tag in tags]


def edges_to_csv(edges: Sequence[Edge]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for edge in edges:
        writer.writerow(
            [
                edge.from_endpoint,
                edge.to_endpoint,
                edge.cable_id,
                edge.media,
                ";".join(str(page) for page in edge.page_refs),
                edge.confidence,
                edge.tag.value,
            ]
        )
    return buffer.getvalue()


def review_to_markdown(review: Sequence[ReviewItem]) -> str:
    """Render the review list as a Markdown checklist for manual follow-up."""
    lines = ["# Ethernet Connections - Review List", "", "## Unpaired / Ambiguous", ""]
    for item in review:
        line = f"- **{item.cable_id}** ({item.type.value})"
        if item.endpoint:
            line += f" -> {item.endpoint}"
        if item.page_refs:
            line += f" | Pages: {', '.join(str(page) for page in item.page_refs)}"
        if item.candidates:
            line += f" | Candidates: {', '.join(item.candidates)}"
        lines.append(line)
    if not review:
        lines.append("No items for review.")
    return "\n".join(lines) + "\n"


def export_csv(edges: Sequence[Edge], path: str | Path) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(edges_to_csv(edges), encoding="utf-8")
    logger.info("Exported {} edges to CSV at {}", len(edges), target)
    return target


def export_review_markdown(review: Sequence[ReviewItem], path: str | Path) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(review_to_markdown(review), encoding="utf-8")
    logger.info("Exported {} review items to {}", len(review), target)
    return target


def export_json(report: ExtractionReport, path: str | Path) -> Path:
    """Write the report flattened into its wire shape (camelCase keys)."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "vesselId": report.vessel_id,
        "fileNames": list(report.file_names),
        **report.result.to_dict(),
    }
    target.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    logger.info("Exported extraction report for vessel {} to {}", report.vessel_id, target)
    return target
