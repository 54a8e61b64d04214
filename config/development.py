import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

ODOO_CONFIG = {
    "url": os.getenv("ODOO_URL", "http://localhost:8069/jsonrpc"),
    "database": os.getenv("ODOO_DATABASE", "odoo"),
    "user_id": int(os.getenv("ODOO_USER_ID", "2")),
    "api_key": os.getenv("ODOO_API_KEY", ""),
    "timeout": float(os.getenv("ODOO_TIMEOUT_SECONDS", "10")),
}

# Token encoded in the office QR that employees scan to check in
QR_TOKEN = os.getenv("QR_TOKEN", "OFFICE_CHECKIN_SYSTEM")
PUBLIC_URL = os.getenv("PUBLIC_URL", "http://localhost:5000")

APP_VERSION = os.getenv("APP_VERSION", "2.0.0")

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")
