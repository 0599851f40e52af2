# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Updated: 2026-02-09
# Description: services/PilaUploadService.py
# -----------------------------------------------------------------------------
from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import requests

from config.Config import Config
from services.PilaExtractionService import PilaExtractionService
from utility.logging_utils import get_class_logger

PILA_DOCUMENT_TYPE = "PILA"

MSG_REQUIRED_FIELDS = "Todos los campos son requeridos"
MSG_WRONG_TYPE = "El tipo de documento debe ser PILA"
MSG_INFO_PILA_REQUIRED = "La información extraída del PDF es requerida"
MSG_SERVER_CONFIG = "Error de configuración del servidor"
MSG_BAD_RESPONSE = "Error al procesar la respuesta del servicio"
MSG_UPLOAD_FAILED = "Error al subir documento PILA"
MSG_CONNECTION = "Error interno del servidor, por favor revise su conexión"
MSG_UPLOADED = "Documento PILA cargado correctamente"

FieldValue = Optional[Union[int, str]]


class PilaUploadError(Exception):
    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


@dataclass
class PilaUpload:
    id_solicitud: FieldValue = None
    # The cut-off date (fecha de corte) travels in id_persona
    id_persona: FieldValue = None
    tipo_documento: Optional[str] = None
    archivoNombre: Optional[str] = None
    archivoBase64: Optional[str] = None
    info_pila: Optional[str] = None


@dataclass
class PilaUploadService:
    """
    Proxies PILA document uploads to the external UPLOAD_DOCUMENTO API.
    Raises PilaUploadError carrying the HTTP status the caller should return.
    """
    cfg: Config
    extraction_service: PilaExtractionService
    timeout_seconds: int = 30
    logger: Any = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

    def validate(self, upload: PilaUpload) -> None:
        required = (
            upload.id_solicitud,
            upload.id_persona,
            upload.tipo_documento,
            upload.archivoNombre,
            upload.archivoBase64,
        )
        if not all(required):
            raise PilaUploadError(400, MSG_REQUIRED_FIELDS)
        if upload.tipo_documento != PILA_DOCUMENT_TYPE:
            raise PilaUploadError(400, MSG_WRONG_TYPE)
        if not upload.info_pila:
            raise PilaUploadError(400, MSG_INFO_PILA_REQUIRED)

    @staticmethod
    def build_payload(upload: PilaUpload) -> Dict[str, Any]:
        return {
            "id_solicitud": upload.id_solicitud,
            "id_persona": upload.id_persona,
            "id_vehiculo": "",
            "tipo_documento": upload.tipo_documento,
            "archivoNombre": upload.archivoNombre,
            "archivoBase64": upload.archivoBase64,
            "info_pila": upload.info_pila,
        }

    def upload(self, upload: PilaUpload) -> Dict[str, Any]:
        self.validate(upload)

        missing = self.cfg.missing_upload_env_vars()
        if missing:
            self.logger.error("UPLOAD_DOCUMENTO credentials not configured: %s", missing)
            raise PilaUploadError(500, MSG_SERVER_CONFIG)

        self.logger.info(
            "upload: id_solicitud='%s' fecha_corte='%s' file='%s' (start)",
            upload.id_solicitud,
            upload.id_persona,
            upload.archivoNombre,
        )

        try:
            r = requests.post(
                self.cfg.upload_documento_url,
                json=self.build_payload(upload),
                headers={
                    "Content-Type": "application/json",
                    "x-auth-token": self.cfg.upload_documento_token,
                },
                timeout=self.timeout_seconds,
            )
        except requests.exceptions.RequestException as e:
            self.logger.exception("upload: request to UPLOAD_DOCUMENTO failed: %s", e)
            raise PilaUploadError(500, MSG_CONNECTION) from e

        try:
            data = r.json()
        except ValueError as e:
            self.logger.error("upload: non-JSON response (HTTP %s): %s", r.status_code, e)
            raise PilaUploadError(500, MSG_BAD_RESPONSE) from e

        if not r.ok:
            message = data.get("mensaje") if isinstance(data, dict) else None
            self.logger.warning("upload: HTTP %s from UPLOAD_DOCUMENTO: %s", r.status_code, message)
            raise PilaUploadError(r.status_code, message or MSG_UPLOAD_FAILED)

        out: Dict[str, Any] = {
            "success": True,
            "mensaje": MSG_UPLOADED,
            "fecha_corte": upload.id_persona,
            "info_pila_length": len(upload.info_pila),
        }
        if isinstance(data, dict):
            out.update(data)

        self.logger.info("upload: id_solicitud='%s' (done)", upload.id_solicitud)
        return out

    def extract_and_upload(
        self,
        *,
        pdf_bytes: bytes,
        file_name: str,
        id_solicitud: FieldValue,
        id_persona: FieldValue,
    ) -> Dict[str, Any]:
        """
        Read the PDF, extract its numbers and upload it with them as info_pila.
        Nothing is sent when no number survives filtering.
        """
        result = self.extraction_service.extract_from_pdf_bytes(pdf_bytes, file_name=file_name)
        if not result.success:
            raise PilaUploadError(400, result.error or MSG_INFO_PILA_REQUIRED)

        upload = PilaUpload(
            id_solicitud=id_solicitud,
            id_persona=id_persona,
            tipo_documento=PILA_DOCUMENT_TYPE,
            archivoNombre=file_name,
            archivoBase64=base64.b64encode(pdf_bytes).decode("ascii"),
            info_pila=result.text,
        )
        return self.upload(upload)
