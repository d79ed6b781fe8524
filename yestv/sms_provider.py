from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

import httpx

from .config import Settings
from .utils.phone import mask_code, mask_phone

logger = logging.getLogger("yestv.sms")


class SmsBackend(Protocol):
    def send(self, phone: str, message: str) -> None:
        ...


@dataclass
class LogBackend:
    """Dev delivery: the code ends up in the service log."""

    def send(self, phone: str, message: str) -> None:
        logger.info("SMS to %s: %s", phone, message)


@dataclass
class HttpBackend:
    url: str
    auth_token: Optional[str] = None
    sender_name: Optional[str] = None
    timeout: float = 10.0
    client: Optional[httpx.Client] = None

    def send(self, phone: str, message: str) -> None:
        if not self.url:
            raise RuntimeError("OTP_SMS_HTTP_URL must be configured for http SMS provider")
        payload = {
            "to": phone,
            "message": message,
        }
        if self.sender_name:
            payload["sender"] = self.sender_name
        headers: dict[str, str] = {}
        if self.auth_token:
            headers["Authorization"] = f"Bearer {self.auth_token}"
        if self.client is not None:
            res = self.client.post(self.url, json=payload, headers=headers)
        else:
            with httpx.Client(timeout=self.timeout) as client:
                res = client.post(self.url, json=payload, headers=headers)
        if res.status_code >= 400:
            raise RuntimeError(f"SMS HTTP send failed ({res.status_code}): {res.text}")


class SmsProvider:
    def __init__(self, backend: SmsBackend, template: str):
        self.backend = backend
        self.template = template

    def __repr__(self) -> str:
        return f"SmsProvider({self.backend.__class__.__name__})"

    def _build_message(self, code: str) -> str:
        try:
            return self.template.format(code=code)
        except (KeyError, IndexError, ValueError):
            return f"Your verification code is {code}"

    def send_code(self, phone: str, code: str) -> None:
        self.backend.send(phone, self._build_message(code))
        logger.debug(
            "OTP dispatched via %s to=%s code=%s",
            self.backend.__class__.__name__,
            mask_phone(phone),
            mask_code(code),
        )


def build_sms_provider(cfg: Settings) -> SmsProvider:
    mode = (cfg.OTP_SMS_PROVIDER or "log").lower()
    if mode == "http":
        backend: SmsBackend = HttpBackend(
            url=cfg.OTP_SMS_HTTP_URL,
            auth_token=cfg.OTP_SMS_HTTP_AUTH_TOKEN or None,
            sender_name=cfg.OTP_SMS_SENDER_NAME or None,
            timeout=cfg.OTP_SMS_TIMEOUT_SECS,
        )
    else:
        backend = LogBackend()
    return SmsProvider(backend, cfg.OTP_SMS_TEMPLATE)
