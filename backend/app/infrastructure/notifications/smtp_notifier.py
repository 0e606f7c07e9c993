"""
SMTP Notifier
=============

Notifier implementation that delivers HTML email over SMTP.
"""
import logging
import smtplib
from email.message import EmailMessage as MimeMessage
from typing import Optional

from app.core.config import Settings, get_settings
from app.domain.ports.notifier import EmailMessage, Notifier

logger = logging.getLogger(__name__)


class SmtpNotifier(Notifier):
    """Opens one SMTP connection per message."""

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()

    def _build(self, message: EmailMessage) -> MimeMessage:
        mime = MimeMessage()
        mime["From"] = self._settings.mail_from
        mime["To"] = message.to
        mime["Subject"] = message.subject
        mime.set_content("This message requires an HTML capable email client.")
        mime.add_alternative(message.html, subtype="html")
        return mime

    def send(self, message: EmailMessage) -> bool:
        """Deliver one email; returns False instead of raising on delivery errors."""
        settings = self._settings
        try:
            with smtplib.SMTP(
                settings.smtp_host,
                settings.smtp_port,
                timeout=settings.smtp_timeout_seconds,
            ) as smtp:
                if settings.smtp_use_tls:
                    smtp.starttls()
                if settings.smtp_username and settings.smtp_password:
                    smtp.login(settings.smtp_username, settings.smtp_password)
                smtp.send_message(self._build(message))
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Failed to send '{message.subject}' to {message.to}: {e}")
            return False

        logger.info(f"Sent '{message.subject}' to {message.to}")
        return True
