from __future__ import annotations

import json
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, NamedTuple, Optional, Tuple

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parents[2] / "data"
HISTORICO_JSON = Path(os.getenv("HISTORICO_JSON", str(DATA_DIR / "historico_2025.json")))

MESES = ("Ene", "Feb", "Mar", "Abr", "May", "Jun", "Jul", "Ago", "Sep", "Oct", "Nov", "Dic")


class MonthlyRecord(NamedTuple):
    mes: str
    basico: float
    neto: float


def _record(r: Any) -> MonthlyRecord:
    if not isinstance(r, dict):
        raise ValueError(f"Registro mensual inválido: {r!r}")
    missing = [k for k in ("mes", "basico", "neto") if k not in r]
    if missing:
        raise ValueError(f"Faltan campos {missing} en {r!r}")
    try:
        return MonthlyRecord(mes=str(r["mes"]).strip(), basico=float(r["basico"]), neto=float(r["neto"]))
    except (TypeError, ValueError) as e:
        raise ValueError(f"Importe no numérico en {r!r}") from e


@lru_cache(maxsize=4)
def _load(path: Path) -> Tuple[int, Tuple[MonthlyRecord, ...]]:
    if not path.exists():
        raise FileNotFoundError(f"Missing historico at {path}")
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path}: se esperaba un objeto con 'anio' y 'meses'")
    meses = data.get("meses")
    if not isinstance(meses, list) or len(meses) != 12:
        raise ValueError(f"{path}: 'meses' debe tener 12 registros")
    records = tuple(_record(r) for r in meses)
    try:
        anio = int(data.get("anio") or 0)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{path}: 'anio' inválido") from e
    logger.info("Histórico %s cargado desde %s", anio, path)
    return anio, records


def load_historico(path: Optional[Path] = None) -> Tuple[MonthlyRecord, ...]:
    """Los doce meses del año, en orden calendario."""
    return _load(Path(path or HISTORICO_JSON))[1]


def anio_historico(path: Optional[Path] = None) -> int:
    return _load(Path(path or HISTORICO_JSON))[0]


def serie_grafico(records: Tuple[MonthlyRecord, ...]) -> Dict[str, List[Any]]:
    """Series para el gráfico de evolución (solo datos)."""
    return {
        "labels": [r.mes for r in records],
        "neto": [r.neto for r in records],
        "basico": [r.basico for r in records],
    }
