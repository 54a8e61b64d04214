"""Diagnose the custom GPS fields on ``hr.attendance``.

Reads a few recent attendances asking for the ``x_latitude``... fields. If
Odoo rejects the read, the fields have not been created yet (Settings >
Technical > Fields). Exit code 1 when the fields are missing.
"""

from __future__ import annotations

import importlib
import re

from dotenv import load_dotenv

from config import get_settings_module

from src.qr_attendance.qr_attendance.core.constants import (
    ATTENDANCE_MODEL,
    CHECKIN_GEO_FIELDS,
    CHECKOUT_GEO_FIELDS,
)
from src.qr_attendance.qr_attendance.core.exceptions import StoreOperationError
from src.qr_attendance.qr_attendance.odoo.client import OdooClient, OdooConfig

SAMPLE_SIZE = 5


def inspect_gps_fields(client: OdooClient, sample_size: int = SAMPLE_SIZE) -> dict:
    gps_fields = list(CHECKIN_GEO_FIELDS) + list(CHECKOUT_GEO_FIELDS)
    try:
        rows = client.search_read(
            ATTENDANCE_MODEL,
            [["check_in", "!=", False]],
            ["id", "check_in", *gps_fields],
            limit=sample_size,
            order="check_in desc",
        )
    except StoreOperationError as e:
        missing = [f for f in gps_fields if re.search(rf"\b{f}\b", e.message)]
        return {"fields_exist": False, "missing": missing or gps_fields, "error": e.message}

    with_data = {f: [r["id"] for r in rows if r.get(f) not in (None, False)] for f in gps_fields}
    return {
        "fields_exist": True,
        "sample_records": len(rows),
        "fields_with_data": {f: ids for f, ids in with_data.items() if ids},
    }


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    client = OdooClient(OdooConfig.from_mapping(settings.ODOO_CONFIG))

    result = inspect_gps_fields(client)
    if not result["fields_exist"]:
        print("ERROR: campos GPS faltantes en hr.attendance:", ", ".join(result["missing"]))
        print(result["error"])
        raise SystemExit(1)

    print(f"OK: campos GPS presentes ({result['sample_records']} registros revisados)")
    if not result["sample_records"]:
        print("No hay registros de asistencia; haz un check-in de prueba desde la app.")
    for field_name, ids in result["fields_with_data"].items():
        print(f"  {field_name}: datos en {ids}")


if __name__ == "__main__":
    main()
