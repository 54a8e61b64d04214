"""Ejemplo: usar la capa de servicios sin Flask.

Los controllers son una capa delgada; la lógica vive en los services.
"""

import importlib

from dotenv import load_dotenv

from config import get_settings_module

from src.qr_attendance.qr_attendance.container import build_container


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        odoo_config=settings.ODOO_CONFIG,
        public_url=settings.PUBLIC_URL,
        qr_token=settings.QR_TOKEN,
        version=settings.APP_VERSION,
    )
    history = container.attendance_service.get_history(1, all_history=True, limit=5)
    print(history.to_dict())


if __name__ == "__main__":
    main()
