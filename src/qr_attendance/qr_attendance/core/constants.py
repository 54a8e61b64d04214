"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import timedelta, timezone

# America/Lima: UTC-5 all year round.
CIVIL_TZ = timezone(timedelta(hours=-5), "America/Lima")

STORE_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
STORE_DATE_FORMAT = "%Y-%m-%d"

AUTO_CLOSE_HOURS = 24

DEFAULT_HISTORY_LIMIT = 1000
DEFAULT_EMPLOYEE_LIMIT = 100
DEFAULT_TIMESHEET_LIMIT = 100
DEFAULT_ODOO_TIMEOUT_SECONDS = 10

ATTENDANCE_MODEL = "hr.attendance"
EMPLOYEE_MODEL = "hr.employee"
TIMESHEET_MODEL = "account.analytic.line"

CHECKIN_GEO_FIELDS = ("x_latitude", "x_longitude", "x_accuracy")
CHECKOUT_GEO_FIELDS = ("x_latitude_out", "x_longitude_out", "x_accuracy_out")
