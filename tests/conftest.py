# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-06
# Description: conftest.py
# -----------------------------------------------------------------------------

import sys
from pathlib import Path
from typing import List

import fitz
import pytest

# add project root to sys.path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))


def make_pdf(pages: List[str]) -> bytes:
    """In-memory PDF, one page per entry; empty strings give blank pages."""
    with fitz.open() as doc:
        for text in pages:
            page = doc.new_page()
            if text:
                page.insert_text((72, 72), text)
        return doc.tobytes()


@pytest.fixture
def pila_pdf() -> bytes:
    return make_pdf(
        [
            "Planilla 9876543210 Periodo 202601 Total 1,234,567.89",
            "",
            "Pagina 2 de 2 Aportante 900123456",
        ]
    )


@pytest.fixture
def pdf_factory():
    return make_pdf
