# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-07
# Description: test_pila_upload_service.py
# -----------------------------------------------------------------------------
import base64
import os
from typing import Any, Dict

import pytest
import requests

from config.Config import Config
from extractor.PDFTextLayerReader import PyMuPDFTextLayerReader
from extractor.PilaNumberExtractor import NO_NUMBERS_FOUND_MESSAGE, PilaNumberExtractor
from services.PilaExtractionService import PilaExtractionService
from services.PilaUploadService import (
    MSG_BAD_RESPONSE,
    MSG_CONNECTION,
    MSG_INFO_PILA_REQUIRED,
    MSG_REQUIRED_FIELDS,
    MSG_SERVER_CONFIG,
    MSG_UPLOAD_FAILED,
    MSG_WRONG_TYPE,
    PilaUpload,
    PilaUploadError,
    PilaUploadService,
)

UPLOAD_URL = "https://docs.example.test/api/upload"


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, json_error: bool = False):
        self.status_code = status_code
        self.ok = 200 <= status_code < 300
        self._payload = payload if payload is not None else {}
        self._json_error = json_error

    def json(self):
        if self._json_error:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


@pytest.fixture
def captured(monkeypatch) -> Dict[str, Any]:
    """Replace requests.post; the test sets captured['response'] before calling."""
    box: Dict[str, Any] = {"response": FakeResponse(200, {"id_documento": 77})}

    def fake_post(url, json=None, headers=None, timeout=None):
        box["url"] = url
        box["json"] = json
        box["headers"] = headers
        box["timeout"] = timeout
        if isinstance(box["response"], Exception):
            raise box["response"]
        return box["response"]

    monkeypatch.setattr("services.PilaUploadService.requests.post", fake_post)
    return box


def _service(url: str = UPLOAD_URL, token: str = "tok-123") -> PilaUploadService:
    extraction = PilaExtractionService(reader=PyMuPDFTextLayerReader(), extractor=PilaNumberExtractor())
    cfg = Config(upload_documento_url=url, upload_documento_token=token)
    return PilaUploadService(cfg=cfg, extraction_service=extraction, timeout_seconds=5)


def _upload(**overrides) -> PilaUpload:
    fields = dict(
        id_solicitud=42,
        id_persona="2026-01-31",
        tipo_documento="PILA",
        archivoNombre="pila.pdf",
        archivoBase64="JVBERi0xLjc=",
        info_pila="123456789 900123456",
    )
    fields.update(overrides)
    return PilaUpload(**fields)


# ---------- validation ----------

@pytest.mark.parametrize(
    "missing", ["id_solicitud", "id_persona", "tipo_documento", "archivoNombre", "archivoBase64"]
)
def test_required_fields(captured, missing):
    with pytest.raises(PilaUploadError) as exc:
        _service().upload(_upload(**{missing: None}))
    assert exc.value.status_code == 400
    assert exc.value.message == MSG_REQUIRED_FIELDS
    assert "url" not in captured


def test_document_type_must_be_pila(captured):
    with pytest.raises(PilaUploadError) as exc:
        _service().upload(_upload(tipo_documento="CEDULA"))
    assert (exc.value.status_code, exc.value.message) == (400, MSG_WRONG_TYPE)


def test_info_pila_required(captured):
    with pytest.raises(PilaUploadError) as exc:
        _service().upload(_upload(info_pila=""))
    assert (exc.value.status_code, exc.value.message) == (400, MSG_INFO_PILA_REQUIRED)


def test_missing_credentials_is_server_error(captured):
    with pytest.raises(PilaUploadError) as exc:
        _service(token="").upload(_upload())
    assert (exc.value.status_code, exc.value.message) == (500, MSG_SERVER_CONFIG)
    assert "url" not in captured


# ---------- proxying ----------

def test_upload_posts_payload_with_token(captured):
    out = _service().upload(_upload())

    assert captured["url"] == UPLOAD_URL
    assert captured["headers"]["x-auth-token"] == "tok-123"
    assert captured["timeout"] == 5
    assert captured["json"] == {
        "id_solicitud": 42,
        "id_persona": "2026-01-31",
        "id_vehiculo": "",
        "tipo_documento": "PILA",
        "archivoNombre": "pila.pdf",
        "archivoBase64": "JVBERi0xLjc=",
        "info_pila": "123456789 900123456",
    }

    assert out["success"] is True
    assert out["fecha_corte"] == "2026-01-31"
    assert out["info_pila_length"] == len("123456789 900123456")
    assert out["id_documento"] == 77


def test_upstream_error_message_forwarded(captured):
    captured["response"] = FakeResponse(409, {"mensaje": "Documento duplicado"})
    with pytest.raises(PilaUploadError) as exc:
        _service().upload(_upload())
    assert (exc.value.status_code, exc.value.message) == (409, "Documento duplicado")


def test_upstream_error_without_message(captured):
    captured["response"] = FakeResponse(502, {})
    with pytest.raises(PilaUploadError) as exc:
        _service().upload(_upload())
    assert (exc.value.status_code, exc.value.message) == (502, MSG_UPLOAD_FAILED)


def test_non_json_response(captured):
    captured["response"] = FakeResponse(200, json_error=True)
    with pytest.raises(PilaUploadError) as exc:
        _service().upload(_upload())
    assert (exc.value.status_code, exc.value.message) == (500, MSG_BAD_RESPONSE)


def test_connection_error(captured):
    captured["response"] = requests.exceptions.ConnectionError("connection refused")
    with pytest.raises(PilaUploadError) as exc:
        _service().upload(_upload())
    assert (exc.value.status_code, exc.value.message) == (500, MSG_CONNECTION)


# ---------- extract + upload ----------

def test_extract_and_upload(captured, pila_pdf):
    out = _service().extract_and_upload(
        pdf_bytes=pila_pdf,
        file_name="pila_enero.pdf",
        id_solicitud="42",
        id_persona="2026-01-31",
    )

    sent = captured["json"]
    assert sent["tipo_documento"] == "PILA"
    assert sent["archivoNombre"] == "pila_enero.pdf"
    assert base64.b64decode(sent["archivoBase64"]) == pila_pdf
    assert sent["info_pila"] == "9876543210 202601 900123456"
    assert out["info_pila_length"] == len(sent["info_pila"])


def test_extract_and_upload_refuses_when_nothing_found(captured, pdf_factory):
    pdf_bytes = pdf_factory(["Total 1,234,567.89 Pagina 1"])

    with pytest.raises(PilaUploadError) as exc:
        _service().extract_and_upload(
            pdf_bytes=pdf_bytes,
            file_name="vacia.pdf",
            id_solicitud="42",
            id_persona="2026-01-31",
        )

    assert (exc.value.status_code, exc.value.message) == (400, NO_NUMBERS_FOUND_MESSAGE)
    assert "url" not in captured


# ---------- integration ----------

@pytest.mark.integration
def test_upload_against_real_api(pila_pdf):
    cfg = Config.from_env()
    if not cfg.upload_configured:
        pytest.skip(f"Missing env vars for UPLOAD_DOCUMENTO: {', '.join(cfg.missing_upload_env_vars())}")

    id_solicitud = os.getenv("PILA_TEST_ID_SOLICITUD")
    if not id_solicitud:
        pytest.skip("PILA_TEST_ID_SOLICITUD not set")

    extraction = PilaExtractionService(reader=PyMuPDFTextLayerReader(), extractor=PilaNumberExtractor())
    svc = PilaUploadService(cfg=cfg, extraction_service=extraction)

    out = svc.extract_and_upload(
        pdf_bytes=pila_pdf,
        file_name="pila_integration_test.pdf",
        id_solicitud=id_solicitud,
        id_persona=os.getenv("PILA_TEST_FECHA_CORTE", "2026-01-31"),
    )
    print("\nRESPONSE:", out)
    assert out["success"] is True
