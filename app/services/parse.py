from __future__ import annotations

import logging
import math
import re
from typing import Any, Mapping, Optional

from .calculo_neto import SalaryInput

logger = logging.getLogger(__name__)

_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")

# nombre del campo en el formulario -> campo de SalaryInput
CAMPOS_FLOAT = {
    "sueldoBasico": "basico_base",
    "haberComisario": "haber_comisario_base",
    "dto277": "dto277",
    "seguroVida": "seguro_vida",
    "porcentajeAumento": "porcentaje_aumento",
}
CAMPOS_INT = {
    "antiguedad": "anios_antiguedad",
}


def _parse_float(v: Any) -> Optional[float]:
    if v is None or isinstance(v, bool):
        return None
    try:
        if isinstance(v, (int, float)):
            x = float(v)
        else:
            m = _FLOAT_PREFIX.match(str(v))
            if not m:
                return None
            x = float(m.group(1))
    except (OverflowError, ValueError):
        return None
    if not math.isfinite(x):
        return None
    return x


def _parse_int(v: Any) -> Optional[int]:
    if v is None or isinstance(v, bool):
        return None
    try:
        if isinstance(v, (int, float)):
            x = float(v)
        else:
            m = _INT_PREFIX.match(str(v))
            if not m:
                return None
            x = float(m.group(1))
    except (OverflowError, ValueError):
        return None
    # 400 dígitos ya no entran en un float
    if not math.isfinite(x):
        return None
    return int(x)  # trunca hacia cero


def to_float(v: Any) -> float:
    """Igual que parseFloat(v) || 0 en el navegador."""
    x = _parse_float(v)
    return x if x else 0.0


def to_int(v: Any) -> int:
    """Igual que parseInt(v) || 0: prefijo entero, sin redondear."""
    x = _parse_int(v)
    return x if x else 0


def _vacio(v: Any) -> bool:
    return v is None or (isinstance(v, str) and not v.strip())


def build_input(raw: Mapping[str, Any]) -> SalaryInput:
    """Arma el SalaryInput desde los valores crudos del formulario.

    Faltantes o no numéricos quedan en 0.
    """
    values = {}
    for campo, attr in CAMPOS_FLOAT.items():
        v = raw.get(campo)
        if not _vacio(v) and _parse_float(v) is None:
            logger.warning("Valor no numérico en %s: %r, se toma 0", campo, v)
        values[attr] = to_float(v)
    for campo, attr in CAMPOS_INT.items():
        v = raw.get(campo)
        if not _vacio(v) and _parse_int(v) is None:
            logger.warning("Valor no numérico en %s: %r, se toma 0", campo, v)
        values[attr] = to_int(v)
    return SalaryInput(**values)
