from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List

logger = logging.getLogger(__name__)


# Porcentajes según recibo de la Administración Pública de Tierra del Fuego (2025)
@dataclass(frozen=True)
class CalcConstants:
    ANTIGUEDAD_PER_YEAR: float = 0.02      # 2% por año
    TITULO_ED_SUPERIOR: float = 0.35       # 35% del básico
    SUPLEMENTO_ZONA: float = 1.00          # 100% de (básico + antigüedad + título)
    MAYOR_DEDICACION: float = 0.4442       # 44.42% del básico
    SUPLEMENTO_APOYO: float = 0.4997       # 49.97% del básico
    BLOQUEO_TITULO_FACTOR: float = 0.70    # 35% x 2 del Haber Comisario
    JUBILACION: float = 0.14               # 14% del subtotal remunerativo
    OBRA_SOCIAL: float = 0.03              # 3% del subtotal remunerativo


CONSTANTES = CalcConstants()

# Monto de referencia del Dto. 277; el cálculo usa siempre el valor ingresado
DTO_277 = 80000.0


@dataclass(frozen=True)
class SalaryInput:
    basico_base: float = 0.0
    anios_antiguedad: int = 0
    haber_comisario_base: float = 0.0
    dto277: float = 0.0
    seguro_vida: float = 0.0
    porcentaje_aumento: float = 0.0


@dataclass(frozen=True)
class SalaryBreakdown:
    # remunerativos
    basico: float
    antiguedad: float
    titulo: float
    zona: float
    dedicacion: float
    dto277: float
    apoyo: float
    # no remunerativos
    haber_comisario: float
    bloqueo_titulo: float
    # descuentos
    jubilacion: float
    obra_social: float
    seguro_vida: float
    # totales
    subtotal_remunerativo: float
    subtotal_no_remunerativo: float
    total_descuentos: float
    sueldo_neto: float


def calcular_neto(inp: SalaryInput, c: CalcConstants = CONSTANTES) -> SalaryBreakdown:
    """Liquidación completa a partir de los valores ya normalizados.

    El aumento porcentual afecta solo al básico y al haber comisario;
    Dto. 277 y seguro de vida se toman tal cual. No se redondea nada acá.
    """
    multiplier = 1 + (inp.porcentaje_aumento / 100)
    basico = inp.basico_base * multiplier
    haber_comisario = inp.haber_comisario_base * multiplier

    antiguedad = basico * c.ANTIGUEDAD_PER_YEAR * inp.anios_antiguedad
    titulo = basico * c.TITULO_ED_SUPERIOR
    zona = (basico + antiguedad + titulo) * c.SUPLEMENTO_ZONA
    dedicacion = basico * c.MAYOR_DEDICACION
    apoyo = basico * c.SUPLEMENTO_APOYO

    subtotal_rem = basico + antiguedad + titulo + zona + dedicacion + inp.dto277 + apoyo

    bloqueo_titulo = haber_comisario * c.BLOQUEO_TITULO_FACTOR
    subtotal_nr = bloqueo_titulo

    # Aportes solo sobre lo remunerativo
    jubilacion = subtotal_rem * c.JUBILACION
    obra_social = subtotal_rem * c.OBRA_SOCIAL
    total_descuentos = jubilacion + obra_social + inp.seguro_vida

    neto = subtotal_rem + subtotal_nr - total_descuentos

    logger.debug("neto=%s (rem=%s nr=%s desc=%s)", neto, subtotal_rem, subtotal_nr, total_descuentos)

    return SalaryBreakdown(
        basico=basico,
        antiguedad=antiguedad,
        titulo=titulo,
        zona=zona,
        dedicacion=dedicacion,
        dto277=inp.dto277,
        apoyo=apoyo,
        haber_comisario=haber_comisario,
        bloqueo_titulo=bloqueo_titulo,
        jubilacion=jubilacion,
        obra_social=obra_social,
        seguro_vida=inp.seguro_vida,
        subtotal_remunerativo=subtotal_rem,
        subtotal_no_remunerativo=subtotal_nr,
        total_descuentos=total_descuentos,
        sueldo_neto=neto,
    )


def items_recibo(b: SalaryBreakdown) -> List[Dict[str, Any]]:
    """Renglones del recibo, en el orden en que se muestran."""
    items: List[Dict[str, Any]] = []

    def add(concepto: str, rem: float = 0.0, nr: float = 0.0, ded: float = 0.0):
        items.append({"concepto": concepto, "remunerativo": rem, "no_remunerativo": nr, "deduccion": ded})

    add("Básico", rem=b.basico)
    add("Antigüedad", rem=b.antiguedad)
    add("Título Ed. Superior", rem=b.titulo)
    add("Suplemento Zona", rem=b.zona)
    add("Mayor Dedicación", rem=b.dedicacion)
    add("Decreto 277", rem=b.dto277)
    add("Suplemento Apoyo", rem=b.apoyo)
    add("Bloqueo de Título", nr=b.bloqueo_titulo)
    add("Jubilación 14%", ded=b.jubilacion)
    add("Obra Social 3%", ded=b.obra_social)
    add("Seguro de Vida", ded=b.seguro_vida)
    return items


def resumen(inp: SalaryInput, b: SalaryBreakdown) -> Dict[str, Any]:
    return {
        "inputs_normalizados": asdict(inp),
        "remunerativos": {
            "basico": b.basico,
            "antiguedad": b.antiguedad,
            "titulo": b.titulo,
            "zona": b.zona,
            "dedicacion": b.dedicacion,
            "dto277": b.dto277,
            "apoyo": b.apoyo,
        },
        "no_remunerativos": {
            "haber_comisario": b.haber_comisario,
            "bloqueo_titulo": b.bloqueo_titulo,
        },
        "descuentos": {
            "jubilacion": b.jubilacion,
            "obra_social": b.obra_social,
            "seguro_vida": b.seguro_vida,
        },
        "totales": {
            "subtotal_remunerativo": b.subtotal_remunerativo,
            "subtotal_no_remunerativo": b.subtotal_no_remunerativo,
            "total_descuentos": b.total_descuentos,
            "sueldo_neto": b.sueldo_neto,
        },
        "items": items_recibo(b),
    }
