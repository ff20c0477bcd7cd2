import logging
from dataclasses import dataclass

import requests

from errors import ConfigurationError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_SUCCESS_MESSAGE = "Questions generated and email sent successfully!"
FAILURE_MESSAGE = "Failed to generate questions"
FALSE_STRINGS = {"", "false", "0", "no", "off"}
MISSING_URL_MESSAGE = (
    "N8N webhook URL not configured. Please set N8N_WEBHOOK_URL in your .env file"
)


def is_success_flag(value: object) -> bool:
    """Read the reply's ``success`` field; absent or null means success."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip().lower() not in FALSE_STRINGS
    return bool(value)


@dataclass(frozen=True)
class SubmissionResult:
    success: bool
    message: str


class WebhookClient:
    """POSTs one question request to the configured workflow webhook."""

    def __init__(self, url: str | None, timeout: float | None = None):
        self.url = (url or "").strip()
        self.timeout = timeout

    def send(self, payload: dict) -> SubmissionResult:
        """Send ``payload`` once and interpret the reply.

        Raises ``ConfigurationError`` before touching the network when no URL
        is set, and ``TransportError`` for non-2xx replies or a false-like
        ``success`` field in the body. Transport and decoding failures from
        ``requests`` propagate unchanged.
        """
        if not self.url:
            raise ConfigurationError(MISSING_URL_MESSAGE)

        response = requests.post(
            self.url,
            json=payload,
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )
        logger.info("Webhook responded with HTTP %s", response.status_code)
        if not 200 <= response.status_code < 300:
            raise TransportError(FAILURE_MESSAGE)

        data = response.json() if response.content.strip() else {}
        if not isinstance(data, dict):
            data = {}

        message = data.get("message")
        if not isinstance(message, str) or not message.strip():
            message = None

        if not is_success_flag(data.get("success")):
            raise TransportError(message or FAILURE_MESSAGE)
        return SubmissionResult(success=True, message=message or DEFAULT_SUCCESS_MESSAGE)
