"""Genera data/historico_2025.json a partir de la planilla de recibos.

Uso: python build_historico_json.py [historico.xlsx] [salida.json]
"""
import datetime as dt
import json
import sys
from pathlib import Path

import openpyxl

from app.services.historico import MESES

SRC = Path(__file__).resolve().parent / "historico.xlsx"
OUT = Path(__file__).resolve().parent / "data" / "historico_2025.json"
SHEET = "Historico"
COLUMNAS = ("mes", "basico", "neto")


def header_key(h):
    return " ".join(str(h or "").split()).lower()


def mes_label(v):
    # celdas tipo fecha -> "Ene", "Feb", ...
    if isinstance(v, (dt.datetime, dt.date)):
        return MESES[v.month - 1]
    return " ".join(str(v).split())


def leer_meses(ws):
    rows = ws.iter_rows(values_only=True)
    header = next(rows, ())
    col = {header_key(h): i for i, h in enumerate(header) if header_key(h)}
    faltan = [c for c in COLUMNAS if c not in col]
    if faltan:
        raise SystemExit(f"Faltan columnas {faltan} en la hoja {ws.title}")

    meses = []
    for r in rows:
        mes, basico, neto = (r[col[c]] if col[c] < len(r) else None for c in COLUMNAS)
        if all(v in (None, "") for v in (mes, basico, neto)):
            continue
        meses.append({"mes": mes_label(mes), "basico": float(basico or 0), "neto": float(neto or 0)})
    return meses


def build(src, out, anio=2025):
    src, out = Path(src), Path(out)
    if not src.exists():
        raise SystemExit(f"No existe {src}")

    wb = openpyxl.load_workbook(src, data_only=True)
    ws = wb[SHEET] if SHEET in wb.sheetnames else wb[wb.sheetnames[0]]
    meses = leer_meses(ws)
    if len(meses) != len(MESES):
        raise SystemExit(f"{src}: se esperaban {len(MESES)} meses, hay {len(meses)}")

    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps({"anio": anio, "meses": meses}, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK -> {out} (meses={len(meses)})")
    return meses


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    src = argv[0] if len(argv) > 0 else SRC
    out = argv[1] if len(argv) > 1 else OUT
    build(src, out)


if __name__ == "__main__":
    main()
