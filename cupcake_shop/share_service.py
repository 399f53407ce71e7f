"""
Share service for order summaries.

Hands a finished order's subject and summary to whoever should receive it.
Sends a real email via SMTP when configured, falls back to logging in mock
mode.

Environment variables:
- SMTP_HOST: SMTP server hostname (e.g., smtp.gmail.com)
- SMTP_PORT: SMTP server port (default: 587 for TLS)
- SMTP_USERNAME: SMTP authentication username
- SMTP_PASSWORD: SMTP authentication password
- SMTP_FROM_EMAIL: Sender email address
- ORDER_SHARE_EMAIL: Recipient address (see config.py)
"""

import logging
import os
import smtplib
import ssl
from email.mime.text import MIMEText
from typing import Optional, Protocol

from .config import ORDER_SHARE_EMAIL

logger = logging.getLogger(__name__)

# SMTP configuration from environment
SMTP_HOST = os.getenv("SMTP_HOST")
SMTP_PORT = int(os.getenv("SMTP_PORT", "587"))
SMTP_USERNAME = os.getenv("SMTP_USERNAME")
SMTP_PASSWORD = os.getenv("SMTP_PASSWORD")
SMTP_FROM_EMAIL = os.getenv("SMTP_FROM_EMAIL")


class ShareTarget(Protocol):
    """Anything that can receive a shared order."""

    def share(self, subject: str, body: str) -> dict:
        ...


def is_email_configured() -> bool:
    """Check if SMTP is properly configured."""
    return all([SMTP_HOST, SMTP_USERNAME, SMTP_PASSWORD, SMTP_FROM_EMAIL])


class EmailShareTarget:
    """
    Shares orders by email.

    Args:
        to_email: Recipient address. Without one, or without SMTP settings,
                  shares are logged instead of sent.
    """

    def __init__(self, to_email: Optional[str] = ORDER_SHARE_EMAIL):
        self.to_email = to_email

    def share(self, subject: str, body: str) -> dict:
        """
        Send the order summary.

        Returns:
            dict with status and details; failures are reported, not raised
        """
        if not self.to_email or not is_email_configured():
            logger.info("MOCK SHARE: Subject: %s", subject)
            logger.debug("MOCK SHARE body:\n%s", body)
            return {
                "status": "sent",
                "to_email": self.to_email,
                "subject": subject,
                "mock": True,
            }

        try:
            msg = MIMEText(body, "plain")
            msg["Subject"] = subject
            msg["From"] = SMTP_FROM_EMAIL
            msg["To"] = self.to_email

            context = ssl.create_default_context()
            with smtplib.SMTP(SMTP_HOST, SMTP_PORT) as server:
                server.starttls(context=context)
                server.login(SMTP_USERNAME, SMTP_PASSWORD)
                server.sendmail(SMTP_FROM_EMAIL, self.to_email, msg.as_string())

            logger.info("Order summary sent to %s", self.to_email)

            return {
                "status": "sent",
                "to_email": self.to_email,
                "subject": subject,
                "mock": False,
            }

        except (smtplib.SMTPException, OSError) as e:
            logger.error("Failed to share order with %s: %s", self.to_email, str(e))
            return {
                "status": "error",
                "to_email": self.to_email,
                "error": str(e),
                "mock": False,
            }
