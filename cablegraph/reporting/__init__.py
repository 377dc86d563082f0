"""Derived exports (CSV, Markdown review list, JSON) of extraction results."""

from cablegraph.reporting.exporters import (
    edges_to_csv,
    export_csv,
    export_json,
    export_review_markdown,
    filter_edges,
    review_to_markdown,
)

__all__ = [
    "edges_to_csv",
    "export_csv",
    "export_json",
    "export_review_markdown",
    "filter_edges",
    "review_to_markdown",
]
