# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Description: PilaExtractionService.py
# -----------------------------------------------------------------------------
from __future__ import annotations

import logging
import time

from document.DocumentText import PilaDocument
from extractor.PDFTextLayerReader import TextLayerReader, TextLayerReadError
from extractor.PilaNumberExtractor import ExtractionResult, PilaNumberExtractor
from utility.logging_utils import get_class_logger

UNKNOWN_PDF_ERROR = "Error desconocido al procesar el PDF"


class PilaExtractionService:
    """
    Owns the extraction flow for a PILA upload:
      - read the PDF text layer (via the injected TextLayerReader)
      - join pages into one document text
      - filter candidate identifier numbers (PilaNumberExtractor)

    Reader failures are reported as an unsuccessful ExtractionResult.
    """

    def __init__(
        self,
        *,
        reader: TextLayerReader,
        extractor: PilaNumberExtractor,
        logger: logging.Logger | None = None,
    ) -> None:
        self.reader = reader
        self.extractor = extractor
        self.logger = logger or get_class_logger(self.__class__)

    def extract_from_text(self, text: str) -> ExtractionResult:
        return self.extractor.extract(text)

    def read_document(self, pdf_bytes: bytes, file_name: str = "documento.pdf") -> PilaDocument:
        page_texts = self.reader.get_page_texts(pdf_bytes)
        return PilaDocument(file_name=file_name, pdf_bytes=pdf_bytes, page_texts=page_texts)

    def extract_from_pdf_bytes(self, pdf_bytes: bytes, file_name: str = "documento.pdf") -> ExtractionResult:
        start = time.time()
        try:
            doc = self.read_document(pdf_bytes, file_name=file_name)
        except TextLayerReadError as e:
            self.logger.warning("Could not read '%s': %s", file_name, e)
            return ExtractionResult.failed(str(e) or UNKNOWN_PDF_ERROR)

        result = self.extractor.extract(doc.text)

        elapsed = (time.time() - start) * 1000.0
        self.logger.info(
            "Extraction for '%s' done: pages=%d success=%s numbers=%d (%.1f ms)",
            file_name,
            doc.page_count,
            result.success,
            len(result.numbers),
            elapsed,
        )
        return result
