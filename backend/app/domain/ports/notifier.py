"""
Notification Port
=================
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class EmailMessage:
    to: str
    subject: str
    html: str


class Notifier(ABC):
    """Outbound email delivery."""

    @abstractmethod
    def send(self, message: EmailMessage) -> bool:
        """
        Deliver one email.

        Returns:
            True on success, False if delivery failed
        """
        pass
