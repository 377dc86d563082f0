"""Ingestion collaborators: convert diagram files into per-page text.

NOTE: Keep this module lightweight. pypdf is only imported when the PDF
extractor is actually requested.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING, Any

__all__ = [
    "PDFTextExtractor",
    "TextFileParser",
]


_LAZY_EXPORTS = {
    "PDFTextExtractor": ("cablegraph.ingestion.pdf_text_extractor", "PDFTextExtractor"),
    "TextFileParser": ("cablegraph.ingestion.text_file_parser", "TextFileParser"),
}


def __getattr__(name: str) -> Any:
    if name not in _LAZY_EXPORTS:
        raise AttributeError(name)
    module_name, attr_name = _LAZY_EXPORTS[name]
    module = importlib.import_module(module_name)
    return getattr(module, attr_name)


if TYPE_CHECKING:
    from cablegraph.ingestion.pdf_text_extractor import PDFTextExtractor
    from cablegraph.ingestion.text_file_parser import TextFileParser
