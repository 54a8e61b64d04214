from __future__ import annotations

from flask import Flask

from ..common.api_response import read_json_body, success_response
from ..container import Container
from ..core.constants import DEFAULT_TIMESHEET_LIMIT


def register(app: Flask, container: Container) -> None:
    service = container.timesheet_service

    @app.route("/api/task", methods=["POST"], endpoint="task_list")
    def task_list():
        data = read_json_body()
        lines = service.list_for_employee(data.get("userId"), limit=data.get("limit", DEFAULT_TIMESHEET_LIMIT))
        return success_response({"result": [line.to_dict() for line in lines], "count": len(lines)})

    @app.route("/api/task/log", methods=["POST"], endpoint="task_log")
    def task_log():
        data = read_json_body()
        line_id = service.log_work(
            employee_id=data.get("userId"),
            project_id=data.get("projectId"),
            task_id=data.get("taskId"),
            description=data.get("description"),
            hours=data.get("hours"),
            start=data.get("start"),
            end=data.get("end"),
        )
        return success_response({"result": line_id}, "Tarea registrada exitosamente", status=201)
