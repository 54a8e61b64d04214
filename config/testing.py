import os

SECRET_KEY = "test-secret"

ODOO_CONFIG = {
    "url": os.getenv("ODOO_URL", "http://odoo.test/jsonrpc"),
    "database": os.getenv("ODOO_DATABASE", "test"),
    "user_id": int(os.getenv("ODOO_USER_ID", "2")),
    "api_key": os.getenv("ODOO_API_KEY", "test-key"),
    "timeout": 2.0,
}

QR_TOKEN = "TEST_QR_TOKEN"
PUBLIC_URL = "http://app.test"

APP_VERSION = "test"

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
LOG_FORMAT = "text"
