"""Pipeline orchestrators for end-to-end workflows."""

from cablegraph.pipeline.extraction_pipeline import (
    ExtractionPipeline,
    extract_connections,
    summarize,
)

__all__ = ["ExtractionPipeline", "extract_connections", "summarize"]
