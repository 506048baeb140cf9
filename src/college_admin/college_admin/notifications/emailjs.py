"""Parent notifications through the EmailJS REST API."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import httpx

from .base import AbsenteeNotice, AbsenteeNotifier, NotificationResult

logger = logging.getLogger(__name__)

EMAILJS_SEND_URL = "https://api.emailjs.com/api/v1.0/email/send"


@dataclass(frozen=True)
class EmailJSConfig:
    service_id: str = ""
    template_id: str = ""
    public_key: str = ""
    private_key: str = ""
    from_email: str = ""
    from_name: str = "College Admin"
    timeout_seconds: float = 10.0

    @property
    def is_configured(self) -> bool:
        return bool(self.service_id and self.template_id and self.public_key)

    @classmethod
    def from_settings(cls, values: dict | None) -> "EmailJSConfig":
        values = values or {}
        return cls(
            service_id=str(values.get("service_id", "")),
            template_id=str(values.get("template_id", "")),
            public_key=str(values.get("public_key", "")),
            private_key=str(values.get("private_key", "")),
            from_email=str(values.get("from_email", "")),
            from_name=str(values.get("from_name", "College Admin")),
            timeout_seconds=float(values.get("timeout_seconds", 10.0)),
        )


class EmailJSNotifier(AbsenteeNotifier):
    def __init__(self, config: EmailJSConfig, *, client: Optional[httpx.Client] = None):
        self._config = config
        self._client = client

    def _template_params(self, notice: AbsenteeNotice) -> dict:
        return {
            "to_email": notice.parent_email,
            "to_name": f"Parent of {notice.student_name}",
            "student_name": notice.student_name,
            "subject": notice.subject,
            "date": notice.date,
            "faculty_name": notice.faculty_name,
            "from_email": self._config.from_email,
            "from_name": self._config.from_name,
            "reason": notice.reason or "No reason provided",
        }

    def _payload(self, notice: AbsenteeNotice) -> dict:
        payload = {
            "service_id": self._config.service_id,
            "template_id": self._config.template_id,
            "user_id": self._config.public_key,
            "template_params": self._template_params(notice),
        }
        if self._config.private_key:
            payload["accessToken"] = self._config.private_key
        return payload

    def _post(self, payload: dict) -> httpx.Response:
        if self._client is not None:
            return self._client.post(EMAILJS_SEND_URL, json=payload)
        with httpx.Client(timeout=self._config.timeout_seconds) as client:
            return client.post(EMAILJS_SEND_URL, json=payload)

    def notify_absentee(self, notice: AbsenteeNotice) -> NotificationResult:
        if not self._config.is_configured:
            logger.warning(
                "EmailJS not configured; absentee email for %s (%s, %s) logged only",
                notice.parent_email,
                notice.student_name,
                notice.date,
            )
            return NotificationResult(email=notice.parent_email, success=True, detail="logged")

        try:
            response = self._post(self._payload(notice))
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "EmailJS rejected notification to %s: %s %s",
                notice.parent_email,
                e.response.status_code,
                e.response.text,
            )
            return NotificationResult(email=notice.parent_email, success=False, detail=f"HTTP {e.response.status_code}")
        except httpx.HTTPError as e:
            logger.error("Failed to send notification to %s: %s", notice.parent_email, e)
            return NotificationResult(email=notice.parent_email, success=False, detail=str(e))

        logger.info("Parent notification sent to %s", notice.parent_email)
        return NotificationResult(email=notice.parent_email, success=True, detail="sent")

    def send_bulk(self, notices: Sequence[AbsenteeNotice]) -> list[NotificationResult]:
        return [self.notify_absentee(n) for n in notices]
