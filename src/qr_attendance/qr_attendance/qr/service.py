from __future__ import annotations

import hmac
import io
from urllib.parse import urlencode

import qrcode
from qrcode.image.pil import PilImage

from ..common.validators import require_non_empty, require_positive_id


class QRService:
    """Builds QR payloads and PNG images.

    The attendance QR carries a shared office token that every employee scans;
    task QRs carry a link back into the app with the project and task ids.
    """

    def __init__(self, public_url: str, token: str):
        self._public_url = (public_url or "").rstrip("/")
        self._token = require_non_empty(token, "QR_TOKEN")

    def attendance_payload(self) -> str:
        return self._token

    def task_payload(self, project_id, task_id) -> str:
        project_id = require_positive_id(project_id, "projectId")
        task_id = require_positive_id(task_id, "taskId")
        query = urlencode({"proyectoID": project_id, "tareaID": task_id})
        return f"{self._public_url}/?{query}"

    def verify_token(self, code: str) -> bool:
        if not code:
            return False
        return hmac.compare_digest(code.strip().encode("utf-8"), self._token.encode("utf-8"))

    def render_png(self, data: str) -> bytes:
        qr = qrcode.QRCode(
            version=1,
            error_correction=qrcode.constants.ERROR_CORRECT_M,
            box_size=10,
            border=2,
            image_factory=PilImage,
        )
        qr.add_data(data)
        qr.make(fit=True)

        img = qr.make_image(fill_color="black", back_color="white")
        buf = io.BytesIO()
        img.save(buf, format="PNG")
        return buf.getvalue()
