import logging
import re
from dataclasses import dataclass

import requests
from django.conf import settings

logger = logging.getLogger(__name__)


@dataclass
class SMSResult:
    success: bool
    message: str
    message_id: str | None = None

    def as_dict(self):
        data = {"success": self.success, "message": self.message}
        if self.message_id:
            data["messageId"] = self.message_id
        return data


def format_sender_name(school_name):
    """
    Turn a school name into an SMS sender id: alphanumeric only and at most
    11 characters, falling back to "School".
    """
    return re.sub(r"[^a-zA-Z0-9]", "", school_name or "")[:11] or "School"


def normalize_phone_number(phone):
    return re.sub(r"\D", "", phone or "")


class SMSService:
    BASE_URL = "https://smsc.hubtel.com/v1/messages/send"

    @classmethod
    def send_sms(cls, to, content, sender=None):
        params = {
            "clientid": settings.HUBTEL_CLIENT_ID,
            "clientsecret": settings.HUBTEL_CLIENT_SECRET,
            "from": sender or settings.HUBTEL_SMS_FROM,
            "to": normalize_phone_number(to),
            "content": content,
        }

        try:
            response = requests.get(
                cls.BASE_URL,
                params=params,
                headers={"Content-Type": "application/json"},
                timeout=settings.SMS_TIMEOUT,
            )
        except requests.RequestException:
            logger.exception("SMS sending error")
            return SMSResult(False, "Network error occurred while sending SMS")

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if response.ok:
            return SMSResult(True, "SMS sent successfully", body.get("messageId"))

        logger.warning("Hubtel rejected SMS to %s: HTTP %s", params["to"], response.status_code)
        return SMSResult(False, body.get("message") or "Failed to send SMS")
