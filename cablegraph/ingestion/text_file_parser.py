"""Plain-text diagram exports without a PDF library.

Pages are separated by form-feed characters, the way most PDF-to-text tools
mark page breaks. A file without form feeds is a single page.
"""

from __future__ import annotations

import re
from pathlib import Path

from loguru import logger

from cablegraph.extraction.models import Page, SourceDocument

_PAGE_BREAK = re.compile(r"\f+")


class TextFileParser:
    """Parse text-based diagram exports into a `SourceDocument`."""

    SUPPORTED_SUFFIXES = {".txt", ".text"}

    def parse_file(self, path: Path | str) -> SourceDocument:
        file_path = Path(path)
        suffix = file_path.suffix.lower()

        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        if suffix not in self.SUPPORTED_SUFFIXES:
            raise ValueError(f"Unsupported text document type: {suffix}")

        try:
            raw_text = file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            raw_text = file_path.read_text(encoding="utf-8", errors="replace")

        document = self.parse_text(raw_text, name=file_path.name)
        logger.debug("Parsed {} into {} pages", file_path.name, len(document.pages))
        return document

    def parse_text(self, raw_text: str, name: str = "document") -> SourceDocument:
        chunks = _PAGE_BREAK.split(raw_text) if raw_text else [""]
        # A trailing form feed closes the last page rather than opening a new one.
        if len(chunks) > 1 and not chunks[-1].strip():
            chunks = chunks[:-1]
        pages = [Page(page_number=index, text=chunk) for index, chunk in enumerate(chunks, start=1)]
        return SourceDocument(name=name, pages=pages)
