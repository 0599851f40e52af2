# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: AppContainer.py
# -----------------------------------------------------------------------------
import settings
from config.Config import Config
from extractor.PDFTextLayerReader import build_text_layer_reader
from extractor.PilaNumberExtractor import PilaNumberExtractor
from health.TestRunner import TestRunner
from services.PilaExtractionService import PilaExtractionService
from services.PilaHealthService import PilaHealthService
from services.PilaUploadService import PilaUploadService
from utility.logging_utils import get_logger


class AppContainer:
    """
    Owns object instantiation and application wiring.
    Singleton instances are provided via FastAPI dependencies.
    """

    def __init__(self) -> None:
        self.logger = get_logger("AppContainer")

        # Configuration
        self.cfg = Config.from_env()
        self.logger.info("Config: %s", self.cfg.summary())

        # Core components
        self.reader = build_text_layer_reader(settings.TEXT_READER)
        self.extractor = PilaNumberExtractor(
            variant=settings.EXTRACTION_VARIANT,
            min_digits=settings.MIN_DIGITS,
        )
        self.logger.info(
            "Extractor: variant=%s min_digits=%d reader=%s",
            self.extractor.variant.value,
            self.extractor.min_digits,
            settings.TEXT_READER,
        )

        # Return a singleton PilaExtractionService instance
        self.extraction_service = PilaExtractionService(
            reader=self.reader,
            extractor=self.extractor,
        )

        # Return a singleton PilaUploadService instance
        self.upload_service = PilaUploadService(
            cfg=self.cfg,
            extraction_service=self.extraction_service,
            timeout_seconds=settings.UPLOAD_TIMEOUT_SECONDS,
        )

        # Smoke tests / health
        self.test_runner = TestRunner(cfg=self.cfg, reader=self.reader, extractor=self.extractor)
        self.health_service = PilaHealthService(test_runner=self.test_runner)

# Singleton container instance
app_container = AppContainer()
