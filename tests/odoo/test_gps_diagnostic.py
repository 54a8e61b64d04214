from scripts.check_gps_fields import inspect_gps_fields
from src.qr_attendance.qr_attendance.core.exceptions import StoreOperationError


class FakeClient:
    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error
        self.calls = []

    def search_read(self, model, domain, fields, **kwargs):
        self.calls.append((model, fields))
        if self.error:
            raise self.error
        return self.rows


def test_fields_present_with_data():
    client = FakeClient(rows=[{"id": 4, "check_in": "2026-02-24 08:00:00", "x_latitude": -12.0, "x_latitude_out": False}])

    result = inspect_gps_fields(client)

    assert result["fields_exist"] is True
    assert result["sample_records"] == 1
    assert result["fields_with_data"] == {"x_latitude": [4]}
    assert "x_accuracy_out" in client.calls[0][1]


def test_missing_fields_are_reported():
    client = FakeClient(error=StoreOperationError("Invalid field 'x_latitude_out' on model 'hr.attendance'"))

    result = inspect_gps_fields(client)

    assert result["fields_exist"] is False
    assert result["missing"] == ["x_latitude_out"]
