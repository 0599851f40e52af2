# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Description: PDFTextLayerReader
# -----------------------------------------------------------------------------
from __future__ import annotations

import logging
import re
import time
from io import BytesIO
from typing import List, Protocol

import fitz
from pypdf import PasswordType, PdfReader

from utility.logging_utils import get_class_logger

_RE_WHITESPACE = re.compile(r"\s+")


class TextLayerReadError(RuntimeError):
    """The PDF could not be opened or its text layer could not be read."""


class TextLayerReader(Protocol):
    def get_page_texts(self, pdf_bytes: bytes) -> List[str]:
        ...


def _require_bytes(pdf_bytes: bytes) -> None:
    if not pdf_bytes:
        raise TextLayerReadError("El archivo PDF está vacío")


class PyMuPDFTextLayerReader:
    """
    Reads the text layer with PyMuPDF (fitz).
    Returns: list of page texts (page 1 = index 0), words joined by single spaces.
    """

    name = "pymupdf"

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or get_class_logger(self.__class__)

    def get_page_texts(self, pdf_bytes: bytes) -> List[str]:
        _require_bytes(pdf_bytes)
        start = time.time()
        page_texts: List[str] = []
        try:
            with fitz.open(stream=pdf_bytes, filetype="pdf") as doc:
                if doc.needs_pass:
                    raise TextLayerReadError("El PDF está protegido con contraseña")

                for page in doc:
                    words = page.get_text("words") or []
                    page_texts.append(" ".join(w[4] for w in words))

                elapsed = (time.time() - start) * 1000.0
                self.logger.info("Read PDF text layer (%d pages, %.1f ms)", len(doc), elapsed)

            return page_texts

        except TextLayerReadError:
            raise
        except Exception as e:
            self.logger.error("Failed to read PDF text layer: %s", e)
            raise TextLayerReadError(f"No se pudo leer el PDF: {e}") from e


class PyPDFTextLayerReader:
    """
    Reads the text layer with pypdf; slower, but pure Python.
    """

    name = "pypdf"

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or get_class_logger(self.__class__)

    def get_page_texts(self, pdf_bytes: bytes) -> List[str]:
        _require_bytes(pdf_bytes)
        start = time.time()
        try:
            reader = PdfReader(BytesIO(pdf_bytes))
            # Owner-password-only files open with an empty user password
            if reader.is_encrypted and reader.decrypt("") == PasswordType.NOT_DECRYPTED:
                raise TextLayerReadError("El PDF está protegido con contraseña")

            page_texts = [
                _RE_WHITESPACE.sub(" ", page.extract_text() or "").strip()
                for page in reader.pages
            ]
        except TextLayerReadError:
            raise
        except Exception as e:
            self.logger.error("Failed to read PDF text layer: %s", e)
            raise TextLayerReadError(f"No se pudo leer el PDF: {e}") from e

        elapsed = (time.time() - start) * 1000.0
        self.logger.info("Read PDF text layer (%d pages, %.1f ms)", len(page_texts), elapsed)
        return page_texts


_READERS = {
    PyMuPDFTextLayerReader.name: PyMuPDFTextLayerReader,
    PyPDFTextLayerReader.name: PyPDFTextLayerReader,
}


def build_text_layer_reader(name: str = "pymupdf") -> TextLayerReader:
    key = (name or "").strip().lower()
    try:
        return _READERS[key]()
    except KeyError:
        raise ValueError(f"Unknown text layer reader {name!r}; expected one of {sorted(_READERS)}")
