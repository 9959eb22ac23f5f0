"""
security/auth.py
-----------------
Shared-secret checks for the HTTP endpoints.
Used as FastAPI dependencies on the webhook and broadcast routes.

Behavior:
    - If the secret is not configured, the endpoint is open (as deployed
      on platforms that already restrict access).
    - If it is set, requests without the matching header get 401.
    - Rejected attempts are logged.
"""

import hmac
from typing import Optional

from fastapi import HTTPException, Request, status

from config import Settings
from utils.logger import get_logger

logger = get_logger(__name__)

TELEGRAM_SECRET_HEADER = "X-Telegram-Bot-Api-Secret-Token"


def _matches(expected: str, received: Optional[str]) -> bool:
    if received is None:
        return False
    return hmac.compare_digest(expected.encode(), received.encode())


def _settings(request: Request) -> Settings:
    return request.app.state.settings


def verify_telegram_secret(request: Request) -> None:
    """Reject webhook calls that do not carry the secret given to setWebhook."""
    secret = _settings(request).webhook_secret
    if not secret:
        return
    if not _matches(secret, request.headers.get(TELEGRAM_SECRET_HEADER)):
        client = request.client.host if request.client else "unknown"
        logger.warning(f"🚫 Webhook call with invalid secret token from {client}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")


def verify_cron_secret(request: Request) -> None:
    """Reject broadcast triggers without ``Authorization: Bearer <CRON_SECRET>``."""
    secret = _settings(request).cron_secret
    if not secret:
        return
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not _matches(secret, token.strip()):
        client = request.client.host if request.client else "unknown"
        logger.warning(f"🚫 Broadcast trigger with invalid credentials from {client}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
