# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: main.py
# -----------------------------------------------------------------------------
import logging

from fastapi import FastAPI

from api.routers import health, pila

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",)
# Served with: uvicorn api.main:app (pip install -e ".[server]")
app = FastAPI(title="PILA Extractor API")
app.include_router(health.router)
app.include_router(pila.router)
