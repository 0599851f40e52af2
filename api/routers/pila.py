# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Updated: 2026-02-09
# Description: api/routers/pila.py
# -----------------------------------------------------------------------------
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

import settings
from api.dependencies import get_extraction_service, get_upload_service
from api.schemas.pila import (
    ExtractNumbersResponse,
    ExtractTextRequest,
    PilaUploadRequest,
    PilaUploadResponse,
)
from extractor.PilaNumberExtractor import ExtractionResult
from services.PilaExtractionService import PilaExtractionService
from services.PilaUploadService import PilaUpload, PilaUploadError, PilaUploadService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pila", tags=["pila"])

PDF_CONTENT_TYPES = ("application/pdf", "application/x-pdf")


def _to_response(result: ExtractionResult, file_name: str | None = None) -> ExtractNumbersResponse:
    return ExtractNumbersResponse(**result.to_dict(), numbers=result.numbers, file_name=file_name)


async def _read_pdf_upload(file: UploadFile) -> bytes:
    name = (file.filename or "").strip()
    content_type = (file.content_type or "").strip().lower()

    if not (name.lower().endswith(".pdf") or content_type in PDF_CONTENT_TYPES):
        raise HTTPException(status_code=400, detail="El archivo debe ser un PDF")

    data = await file.read()
    if not data:
        raise HTTPException(status_code=400, detail="El archivo PDF está vacío")
    if len(data) > settings.MAX_UPLOAD_BYTES:
        raise HTTPException(
            status_code=413,
            detail=f"El archivo supera el tamaño máximo de {settings.MAX_UPLOAD_BYTES} bytes",
        )
    return data


@router.post("/extract-text", response_model=ExtractNumbersResponse)
def post_extract_text(
    req: ExtractTextRequest,
    svc: PilaExtractionService = Depends(get_extraction_service),
) -> ExtractNumbersResponse:
    logger.info("POST /pila/extract-text (start) chars=%d", len(req.text))
    result = svc.extract_from_text(req.text)
    logger.info("POST /pila/extract-text (done) success=%s", result.success)
    return _to_response(result)


@router.post("/extract", response_model=ExtractNumbersResponse)
async def post_extract(
    file: UploadFile = File(...),
    svc: PilaExtractionService = Depends(get_extraction_service),
) -> ExtractNumbersResponse:
    file_name = (file.filename or "").strip() or "documento.pdf"
    logger.info("POST /pila/extract (start) file='%s'", file_name)

    data = await _read_pdf_upload(file)
    try:
        result = svc.extract_from_pdf_bytes(data, file_name=file_name)
    except Exception as e:
        logger.exception("POST /pila/extract -> 500 file='%s': %s", file_name, e)
        raise HTTPException(status_code=500, detail=f"extract failed: {e}")

    logger.info("POST /pila/extract (done) file='%s' success=%s", file_name, result.success)
    return _to_response(result, file_name=file_name)


@router.post("/upload", response_model=PilaUploadResponse)
def post_upload(
    req: PilaUploadRequest,
    svc: PilaUploadService = Depends(get_upload_service),
) -> Dict[str, Any]:
    logger.info("POST /pila/upload (start) id_solicitud='%s'", req.id_solicitud)
    upload = PilaUpload(
        id_solicitud=req.id_solicitud,
        id_persona=req.id_persona,
        tipo_documento=req.tipo_documento,
        archivoNombre=req.archivoNombre,
        archivoBase64=req.archivoBase64,
        info_pila=req.info_pila,
    )
    try:
        out = svc.upload(upload)
    except PilaUploadError as e:
        logger.warning("POST /pila/upload -> %d: %s", e.status_code, e.message)
        raise HTTPException(status_code=e.status_code, detail=e.message)

    logger.info("POST /pila/upload (done) id_solicitud='%s'", req.id_solicitud)
    return out


@router.post("/upload-pdf", response_model=PilaUploadResponse)
async def post_upload_pdf(
    id_solicitud: str = Form(...),
    id_persona: str = Form(..., description="Fecha de corte"),
    file: UploadFile = File(...),
    svc: PilaUploadService = Depends(get_upload_service),
) -> Dict[str, Any]:
    file_name = (file.filename or "").strip() or "documento.pdf"
    logger.info(
        "POST /pila/upload-pdf (start) id_solicitud='%s' fecha_corte='%s' file='%s'",
        id_solicitud,
        id_persona,
        file_name,
    )

    data = await _read_pdf_upload(file)
    try:
        out = svc.extract_and_upload(
            pdf_bytes=data,
            file_name=file_name,
            id_solicitud=id_solicitud.strip(),
            id_persona=id_persona.strip(),
        )
    except PilaUploadError as e:
        logger.warning("POST /pila/upload-pdf -> %d: %s", e.status_code, e.message)
        raise HTTPException(status_code=e.status_code, detail=e.message)

    logger.info("POST /pila/upload-pdf (done) id_solicitud='%s'", id_solicitud)
    return out
