# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Description: DocumentText
# -----------------------------------------------------------------------------
from dataclasses import dataclass, field
from typing import Iterable, List


def join_pages(pages: Iterable[str]) -> str:
    """
    Join page texts in page order with one newline between pages.
    Pages with no text are skipped.
    """
    return "\n".join(p for p in pages if p and p.strip())


@dataclass
class PilaDocument:
    file_name: str
    pdf_bytes: bytes
    page_texts: List[str] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.page_texts)

    @property
    def text(self) -> str:
        return join_pages(self.page_texts)
