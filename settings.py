# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-02
# Updated: 2026-02-09
# Description: settings.py
# -----------------------------------------------------------------------------
import os
from typing import Optional


def _env(name: str, default: str = "") -> str:
    """Read env var safely and strip whitespace."""
    return (os.getenv(name) or default).strip()


def _env_int(name: str, default: int) -> int:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return int(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be an int, got {v!r}") from e


def _env_optional_int(name: str) -> Optional[int]:
    v = _env(name, "")
    if v == "":
        return None
    return _env_int(name, 0)


def _env_choice(name: str, default: str, choices: tuple) -> str:
    v = _env(name, default).lower()
    if v not in choices:
        raise RuntimeError(f"Env var {name} must be one of {choices}, got {v!r}")
    return v


# -----------------------------------------------------------------------------
# Number extraction
# -----------------------------------------------------------------------------
# "grouped": >= 5 digits, thousands-grouped amounts removed (current behaviour)
# "legacy":  digit-only tokens, >= 6 digits, no thousands-group removal
EXTRACTION_VARIANT = _env_choice("PILA_EXTRACTION_VARIANT", "grouped", ("grouped", "legacy"))

# Blank means "use the variant's own default"
MIN_DIGITS: Optional[int] = _env_optional_int("PILA_MIN_DIGITS")


# -----------------------------------------------------------------------------
# PDF text layer
# -----------------------------------------------------------------------------
TEXT_READER = _env_choice("PILA_TEXT_READER", "pymupdf", ("pymupdf", "pypdf"))

MAX_UPLOAD_BYTES = _env_int("PILA_MAX_UPLOAD_BYTES", 10 * 1024 * 1024)


# -----------------------------------------------------------------------------
# External document API
# -----------------------------------------------------------------------------
UPLOAD_TIMEOUT_SECONDS = _env_int("PILA_UPLOAD_TIMEOUT_SECONDS", 30)


# -----------------------------------------------------------------------------
# Sanity checks
# -----------------------------------------------------------------------------
if MIN_DIGITS is not None and MIN_DIGITS < 1:
    raise RuntimeError(f"PILA_MIN_DIGITS must be >= 1, got {MIN_DIGITS}")

if MAX_UPLOAD_BYTES <= 0:
    raise RuntimeError("PILA_MAX_UPLOAD_BYTES must be positive")

if UPLOAD_TIMEOUT_SECONDS <= 0:
    raise RuntimeError("PILA_UPLOAD_TIMEOUT_SECONDS must be positive")
