# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-05
# Description: TestRunner
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import Dict, Optional

import fitz
import requests

from config.Config import Config
from extractor.PDFTextLayerReader import TextLayerReader
from extractor.PilaNumberExtractor import PilaNumberExtractor
from utility.logging_utils import get_class_logger

SMOKE_NUMBER = "2026010512345"


def build_smoke_pdf(text: str) -> bytes:
    """One-page PDF with *text* in its text layer."""
    with fitz.open() as doc:
        page = doc.new_page()
        page.insert_text((72, 72), text)
        return doc.tobytes()


class TestRunner:
    """
    Orchestrates the smoke tests and reports a consolidated result.

    Tests included:
      - upload_config   (UPLOAD_DOCUMENTO credentials present)
      - text_layer      (reader + extractor round-trip on an in-memory PDF)
      - upload_upstream (optional; the upload URL answers at all)
    """

    __test__ = False  # not a pytest class

    def __init__(
        self,
        cfg: Config,
        reader: TextLayerReader,
        extractor: PilaNumberExtractor,
        logger: Optional[logging.Logger] = None,
    ):
        self.cfg = cfg
        self.reader = reader
        self.extractor = extractor
        self.logger = logger or get_class_logger(self.__class__)

    # -------------------------------------------------------------------------
    def run_all(self, run_upstream: bool = False) -> Dict[str, bool]:
        """
        Run all configured smoke tests.

        :param run_upstream: If True, also contacts the UPLOAD_DOCUMENTO URL.
        :return: Dict mapping test names to True/False.
        """
        self.logger.info("Starting smoke test suite (run_upstream=%s)", run_upstream)

        results: Dict[str, bool] = {}

        ok_config = self.cfg.upload_configured
        results["upload_config"] = ok_config
        self._log_result("upload_config", ok_config)

        try:
            ok_text = self.check_text_layer()
        except Exception as e:
            self.logger.exception("check_text_layer() raised an exception: %s", e)
            ok_text = False
        results["text_layer"] = ok_text
        self._log_result("text_layer", ok_text)

        if run_upstream:
            ok_upstream = ok_config and self.check_upstream()
            results["upload_upstream"] = ok_upstream
            self._log_result("upload_upstream", ok_upstream)

        return results

    def check_text_layer(self) -> bool:
        pdf_bytes = build_smoke_pdf(f"Planilla {SMOKE_NUMBER} valor 1,234,567")
        pages = self.reader.get_page_texts(pdf_bytes)
        result = self.extractor.extract("\n".join(pages))
        return result.success and SMOKE_NUMBER in result.numbers

    def check_upstream(self) -> bool:
        try:
            r = requests.head(self.cfg.upload_documento_url, timeout=10)
            return r.status_code < 500
        except requests.exceptions.RequestException as e:
            self.logger.warning("UPLOAD_DOCUMENTO unreachable: %s", e)
            return False

    def _log_result(self, name: str, ok: bool) -> None:
        if ok:
            self.logger.info("%s: PASSED", name)
        else:
            self.logger.error("%s: FAILED", name)
