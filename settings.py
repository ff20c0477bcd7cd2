"""Runtime configuration for the question request page.

Values come from Streamlit secrets first, then the process environment.
A local ``.env`` file is loaded on import and never overrides variables that
are already set.
"""
import logging
import os

import streamlit as st
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

WEBHOOK_URL_KEY = "N8N_WEBHOOK_URL"
WEBHOOK_TIMEOUT_KEY = "WEBHOOK_TIMEOUT"
LOG_LEVEL_KEY = "LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _lookup(key: str) -> str:
    value = None
    if st.secrets.load_if_toml_exists():
        value = st.secrets.get(key)
    if value is None:
        value = os.getenv(key, "")
    return str(value).strip()


def get_webhook_url() -> str | None:
    """Return the configured webhook URL, or None when it is blank or unset."""
    return _lookup(WEBHOOK_URL_KEY) or None


def get_webhook_timeout() -> float | None:
    raw = _lookup(WEBHOOK_TIMEOUT_KEY)
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r", WEBHOOK_TIMEOUT_KEY, raw)
        return None
    if timeout <= 0:
        logger.warning("Ignoring non-positive %s=%r", WEBHOOK_TIMEOUT_KEY, raw)
        return None
    return timeout


def configure_logging() -> None:
    root = logging.getLogger()
    if root.handlers:
        return
    level = os.getenv(LOG_LEVEL_KEY, "INFO").upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
