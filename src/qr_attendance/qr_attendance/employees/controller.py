from __future__ import annotations

from flask import Flask, request

from ..common.api_response import read_json_body, success_response
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/users/login", methods=["POST"], endpoint="users_login")
    def users_login():
        """Active employees for the login screen, or a single match by email/DNI."""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        if data.get("email"):
            return success_response({"result": service.find_by_email(data["email"]).to_dict()})
        if data.get("dni"):
            return success_response({"result": service.find_by_dni(data["dni"]).to_dict()})

        employees = service.list_active()
        return success_response({"result": [e.to_dict() for e in employees], "count": len(employees)})

    @app.route("/api/users/register", methods=["POST"], endpoint="users_register")
    def users_register():
        data = read_json_body()
        employee_id = service.register(
            name=data.get("name"),
            email=data.get("email"),
            phone=data.get("phone"),
            dni=data.get("dni"),
        )
        return success_response({"result": employee_id}, "Usuario registrado exitosamente", status=201)
