# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-02
# Updated: 2026-02-09
# Description: PilaNumberExtractor
# -----------------------------------------------------------------------------
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from utility.logging_utils import get_class_logger

NO_NUMBERS_FOUND_MESSAGE = (
    "No se encontraron números válidos en el PDF según los criterios de filtrado."
)

# Anything outside digits, . , - + * / = % ( ) and whitespace
_RE_DISALLOWED = re.compile(r"[^0-9.,\-+*/=%()\s]")
_RE_PARENS = re.compile(r"([()])")
_RE_WHITESPACE = re.compile(r"\s+")

# Money figures: 1,234 / 12,345,678 / 1,234,567.89
# A bare separator comma next to the figure does not protect it; "12,3456" is kept
_RE_THOUSANDS_GROUPED = re.compile(r"(?<!\d)(?<!\d,)\d{1,3}(?:,\d{3})+(?:\.\d+)?(?!\d|,\d)")

_RE_INTERNAL_PUNCTUATION = re.compile(r"[.,\-]")
_DISCARDED_TOKENS = frozenset({"(", ")", ".", ",", "-", "0"})

# Legacy cleanup
_RE_LETTERS = re.compile(r"[a-zA-Z]")
_RE_DOT_COMMA = re.compile(r"[.,]")
_RE_OPERATORS = re.compile(r"[+\-*/=%()\[\]{}]")
_RE_DIGITS_ONLY = re.compile(r"^[0-9]+$")


class ExtractionVariant(str, Enum):
    GROUPED = "grouped"
    LEGACY = "legacy"

    @property
    def default_min_digits(self) -> int:
        return 5 if self is ExtractionVariant.GROUPED else 6


@dataclass(frozen=True)
class ExtractionResult:
    success: bool
    text: str
    error: Optional[str] = None

    @classmethod
    def found(cls, tokens: List[str]) -> "ExtractionResult":
        return cls(success=True, text=" ".join(tokens))

    @classmethod
    def failed(cls, error: str) -> "ExtractionResult":
        return cls(success=False, text="", error=error)

    @property
    def numbers(self) -> List[str]:
        return self.text.split() if self.text else []

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"success": self.success, "text": self.text}
        if self.error is not None:
            out["error"] = self.error
        return out


def _collapse(text: str) -> str:
    return _RE_WHITESPACE.sub(" ", text).strip()


def _digit_count(token: str) -> int:
    return sum(1 for c in _RE_INTERNAL_PUNCTUATION.sub("", token) if c.isdigit())


class PilaNumberExtractor:
    """
    Pulls candidate identifier numbers (contribution period codes, document
    numbers) out of the text layer of a PILA document.

    Stateless apart from its settings; one instance can serve concurrent
    requests.
    """

    def __init__(
        self,
        variant: ExtractionVariant | str = ExtractionVariant.GROUPED,
        min_digits: Optional[int] = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.variant = ExtractionVariant(variant)
        self.min_digits = min_digits if min_digits is not None else self.variant.default_min_digits
        if self.min_digits < 1:
            raise ValueError(f"min_digits must be >= 1, got {self.min_digits}")
        self.logger = logger or get_class_logger(self.__class__)

    def extract(self, document_text: str) -> ExtractionResult:
        if self.variant is ExtractionVariant.LEGACY:
            tokens = self._legacy_tokens(document_text or "")
            error = f"No se encontraron números con {self.min_digits} o más dígitos en el PDF."
        else:
            tokens = self._grouped_tokens(document_text or "")
            error = NO_NUMBERS_FOUND_MESSAGE

        if not tokens:
            self.logger.info("No numbers survived filtering (variant=%s)", self.variant.value)
            return ExtractionResult.failed(error)

        self.logger.info(
            "Extracted %d number(s) (variant=%s, min_digits=%d)",
            len(tokens),
            self.variant.value,
            self.min_digits,
        )
        return ExtractionResult.found(tokens)

    def clean(self, document_text: str) -> str:
        """Steps 1-2: character allow-list, then drop thousands-grouped amounts."""
        t = _RE_DISALLOWED.sub("", document_text or "")
        t = _RE_PARENS.sub(r" \1 ", t)
        t = _collapse(t)

        # Must run before the length filter, or "1,234,567" would pass as 7 digits
        t = _RE_THOUSANDS_GROUPED.sub("", t)
        return _collapse(t)

    def keep_token(self, token: str) -> bool:
        if token in _DISCARDED_TOKENS:
            return False
        return _digit_count(token) >= self.min_digits

    def _grouped_tokens(self, document_text: str) -> List[str]:
        cleaned = self.clean(document_text)
        if not cleaned:
            return []
        return [tok for tok in cleaned.split(" ") if self.keep_token(tok)]

    def _legacy_tokens(self, document_text: str) -> List[str]:
        t = _RE_LETTERS.sub(" ", document_text)
        t = _RE_DOT_COMMA.sub(" ", t)
        t = _RE_OPERATORS.sub(" ", t)
        t = _collapse(t)
        if not t:
            return []
        return [
            tok
            for tok in t.split(" ")
            if _RE_DIGITS_ONLY.match(tok) and len(tok) >= self.min_digits
        ]


def extract_numbers(document_text: str) -> ExtractionResult:
    """Module-level shortcut using the default (grouped, 5-digit) rules."""
    return PilaNumberExtractor().extract(document_text)
