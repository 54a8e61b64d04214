import json
import logging

from src.qr_attendance.qr_attendance.common.logging import JsonFormatter, configure_logging


def test_json_formatter_emits_one_object_per_line():
    record = logging.LogRecord("qr_attendance.test", logging.WARNING, __file__, 1, "Asistencia #%s", (7,), None)

    data = json.loads(JsonFormatter().format(record))

    assert data["level"] == "WARNING"
    assert data["name"] == "qr_attendance.test"
    assert data["message"] == "Asistencia #7"


def test_configure_logging_replaces_root_handlers():
    configure_logging("debug", "json")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JsonFormatter)
    assert logging.getLogger("urllib3").level == logging.WARNING
