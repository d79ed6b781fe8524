import logging
from typing import Any

from .clients import ClientDirectory
from .errors import DeliveryError, ValidationError
from .otp import OTPStore
from .sms_provider import SmsProvider
from .utils.phone import mask_phone

logger = logging.getLogger("yestv.otp")


def clean_phone(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


class AuthService:
    """Phone verification: codes out through SMS, client lookup gated on them."""

    def __init__(self, otp_store: OTPStore, clients: ClientDirectory, sms: SmsProvider):
        self.otp_store = otp_store
        self.clients = clients
        self.sms = sms

    def request_code(self, phone: Any, *, resend: bool = False) -> None:
        phone = clean_phone(phone)
        if not phone:
            raise ValidationError("Phone is required.")
        self.clients.ensure_by_phone(phone)
        code = self.otp_store.issue(phone)
        logger.info("OTP %s for %s", "resent" if resend else "generated", mask_phone(phone))
        try:
            self.sms.send_code(phone, code)
        except Exception as exc:
            logger.exception("Failed to send OTP via %s", self.sms, exc_info=exc)
            raise DeliveryError("Could not deliver the verification code.") from exc

    def lookup(self, phone: Any, otp: Any) -> list[dict]:
        phone = clean_phone(phone)
        otp = clean_phone(otp)
        if not phone or not otp:
            return []
        if not self.otp_store.validate(phone, otp):
            return []
        client = self.clients.find_by_phone(phone) or self.clients.ensure_by_phone(phone)
        return [
            {
                "id": client.get("id"),
                "name": client.get("name"),
                "phone": client.get("phone"),
                "status": client["status"] if client.get("status") is not None else "pending",
            }
        ]
