# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: pila.py
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ExtractTextRequest(BaseModel):
    text: str = Field("", description="Document text layer, pages joined with newlines")


class ExtractNumbersResponse(BaseModel):
    success: bool
    text: str
    error: Optional[str] = None
    numbers: List[str] = Field(default_factory=list)
    file_name: Optional[str] = None


class PilaUploadRequest(BaseModel):
    # Field names are the external API's wire contract
    id_solicitud: Optional[Union[int, str]] = None
    id_persona: Optional[Union[int, str]] = Field(None, description="Fecha de corte")
    id_vehiculo: Optional[str] = None  # always sent as ""
    tipo_documento: Optional[str] = None
    archivoNombre: Optional[str] = None
    archivoBase64: Optional[str] = None
    info_pila: Optional[str] = None


class PilaUploadResponse(BaseModel):
    # Upstream JSON is merged over these keys as-is, so nothing here is strictly typed
    model_config = ConfigDict(extra="allow")

    success: Any = True
    mensaje: Any = None
    fecha_corte: Any = None
    info_pila_length: Any = None
