import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

ODOO_CONFIG = {
    "url": os.getenv("ODOO_URL", ""),
    "database": os.getenv("ODOO_DATABASE", ""),
    "user_id": int(os.getenv("ODOO_USER_ID", "0")),
    "api_key": os.getenv("ODOO_API_KEY", ""),
    "timeout": float(os.getenv("ODOO_TIMEOUT_SECONDS", "10")),
}

# QR Code token for attendance check-in
QR_TOKEN = os.getenv("QR_TOKEN", "OFFICE_CHECKIN_SYSTEM")
PUBLIC_URL = os.getenv("PUBLIC_URL", "")

APP_VERSION = os.getenv("APP_VERSION", "2.0.0")

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "json")
