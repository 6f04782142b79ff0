from __future__ import annotations

import logging
import math
import os
import pathlib
from dataclasses import asdict
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from app.services.calculo_neto import CONSTANTES, DTO_277, calcular_neto, resumen
from app.services.historico import anio_historico, load_historico, serie_grafico
from app.services.parse import build_input

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Calculadora Sueldo Neto TDF", version="2025")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -----------------------------
# Models
# -----------------------------
class NetoIn(BaseModel):
    # Mismos nombres que los campos del formulario; se normalizan en build_input
    sueldoBasico: Any = None
    antiguedad: Any = None
    haberComisario: Any = None
    dto277: Any = None
    seguroVida: Any = None
    porcentajeAumento: Any = None


def _calcular(raw: dict) -> dict:
    inp = build_input(raw)
    b = calcular_neto(inp)
    # montos enormes desbordan a inf/nan y no se pueden serializar a JSON
    if not all(math.isfinite(v) for v in asdict(b).values()):
        logger.warning("Resultado fuera de rango para %s", asdict(inp))
        raise HTTPException(status_code=422, detail="Resultado fuera de rango")
    return resumen(inp, b)


# -----------------------------
# Endpoints
# -----------------------------
@app.get("/health")
def health():
    return {"ok": True}


@app.get("/api/constantes")
def api_constantes():
    out = asdict(CONSTANTES)
    out["DTO_277"] = DTO_277
    return out


@app.post("/api/calc/neto")
def api_calc_neto(inp: NetoIn):
    return _calcular(inp.model_dump())


@app.get("/api/calc/neto")
def api_calc_neto_get(
    sueldoBasico: Optional[str] = Query(None),
    antiguedad: Optional[str] = Query(None),
    haberComisario: Optional[str] = Query(None),
    dto277: Optional[str] = Query(None),
    seguroVida: Optional[str] = Query(None),
    porcentajeAumento: Optional[str] = Query(None),
):
    return _calcular({
        "sueldoBasico": sueldoBasico,
        "antiguedad": antiguedad,
        "haberComisario": haberComisario,
        "dto277": dto277,
        "seguroVida": seguroVida,
        "porcentajeAumento": porcentajeAumento,
    })


@app.get("/api/historico")
def api_historico():
    try:
        records = load_historico()
        return {
            "ok": True,
            "anio": anio_historico(),
            "meses": [r._asdict() for r in records],
            "serie": serie_grafico(records),
        }
    except (OSError, ValueError) as e:
        logger.exception("No se pudo cargar el histórico")
        return JSONResponse(status_code=500, content={"ok": False, "error": str(e)})


# Static frontend (optional)
FRONTEND_DIR = pathlib.Path(
    os.getenv("FRONTEND_DIR", str(pathlib.Path(__file__).resolve().parents[1] / "frontend" / "public"))
)
if FRONTEND_DIR.exists():
    app.mount("/", StaticFiles(directory=str(FRONTEND_DIR), html=True), name="frontend")
