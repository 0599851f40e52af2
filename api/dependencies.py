# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: dependencies.py
# -----------------------------------------------------------------------------
from api.AppContainer import app_container
from services.PilaExtractionService import PilaExtractionService
from services.PilaHealthService import PilaHealthService
from services.PilaUploadService import PilaUploadService


def get_extraction_service() -> PilaExtractionService:
    # use the singleton service from the container
    return app_container.extraction_service

def get_upload_service() -> PilaUploadService:
    # use the singleton service from the container
    return app_container.upload_service

def get_health_service() -> PilaHealthService:
    # use the singleton service from the container
    return app_container.health_service
