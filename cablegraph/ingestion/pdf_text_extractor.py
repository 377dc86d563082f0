"""PDF to per-page plain text using pypdf.

This is the collaborator that feeds the extraction core. Read errors are not
caught here; the caller decides how to report a broken upload.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import List, Optional

from loguru import logger
from pypdf import PdfReader

from cablegraph.extraction.models import Page, SourceDocument


class PDFTextExtractor:
    """Extract the text of every PDF page, one ``Page`` per physical page.

    Example:
        >>> extractor = PDFTextExtractor()
        >>> document = extractor.extract_pages("deck_a_network.pdf")
        >>> print(len(document.pages))
    """

    def extract_pages(self, source: Path | str | bytes, name: Optional[str] = None) -> SourceDocument:
        """Read a PDF from a path or raw bytes.

        Args:
            source: Path to the PDF file, or its raw bytes
            name: Document name; defaults to the file name

        Returns:
            SourceDocument with pages numbered from 1

        Raises:
            FileNotFoundError: If a path is given and doesn't exist
        """
        if isinstance(source, (bytes, bytearray)):
            reader = PdfReader(io.BytesIO(source))
            doc_name = name or "upload.pdf"
        else:
            pdf_path = Path(source)
            if not pdf_path.exists():
                raise FileNotFoundError(f"PDF file not found: {pdf_path}")
            reader = PdfReader(pdf_path)
            doc_name = name or pdf_path.name

        pages: List[Page] = []
        for index, pdf_page in enumerate(reader.pages, start=1):
            pages.append(Page(page_number=index, text=pdf_page.extract_text() or ""))

        logger.info(f"Extracted text from {doc_name}: {len(pages)} pages")
        return SourceDocument(name=doc_name, pages=pages)
