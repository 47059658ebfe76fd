import logging
import smtplib
from email.message import EmailMessage
from typing import Callable

from cleaning_checklist.config.settings import settings

logger = logging.getLogger(__name__)

Mailer = Callable[[str, str, str, str], None]


class EmailDispatchError(Exception):
    """Raised when the mail server refuses or cannot take the message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def send_email(recipient: str, subject: str, html_body: str, text_body: str) -> None:
    """SMTP sender; with no SMTP_HOST configured the message is only logged."""
    if not settings.SMTP_HOST:
        logger.info("SMTP_HOST not set, skipping delivery to %s: %s\n%s", recipient, subject, text_body)
        return

    message = EmailMessage()
    message["Subject"] = subject
    message["From"] = str(settings.MAIL_FROM)
    message["To"] = recipient
    message.set_content(text_body)
    message.add_alternative(html_body, subtype="html")

    try:
        with smtplib.SMTP(settings.SMTP_HOST, settings.SMTP_PORT) as server:
            if settings.SMTP_USERNAME:
                server.starttls()
                server.login(settings.SMTP_USERNAME, settings.SMTP_PASSWORD or "")
            server.send_message(message)
    except (smtplib.SMTPException, OSError) as exc:
        raise EmailDispatchError(str(exc) or exc.__class__.__name__) from exc

    logger.info("Sent '%s' to %s", subject, recipient)


def get_mailer() -> Mailer:
    return send_email
