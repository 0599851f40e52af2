# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-05
# Description: health.py
# -----------------------------------------------------------------------------
from typing import Dict, List

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    message: str
    upload_configured: bool
    extraction_variant: str
    min_digits: int
    text_reader: str


class SmokeTestSummary(BaseModel):
    total: int
    passed: int
    failed: int


class DeepHealthResponse(BaseModel):
    status: str
    results: Dict[str, bool]
    summary: SmokeTestSummary
    # Names of the UPLOAD_DOCUMENTO env vars that are unset; empty when upload is usable
    missing_env_vars: List[str] = []
