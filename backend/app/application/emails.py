"""
Email Templates
===============

HTML bodies for workflow notifications.
"""
from html import escape

from app.domain.models.driver_application import DriverApplication
from app.domain.ports.notifier import EmailMessage

_ACCENTS = {
    "success": "#16a34a",
    "info": "#2563eb",
    "warning": "#d97706",
}


def render_template(kind: str, email: str, subject: str, message: str) -> str:
    """Wrap a message in the shared email layout."""
    accent = _ACCENTS.get(kind, _ACCENTS["info"])
    return (
        "<div style=\"font-family:Arial,sans-serif;max-width:560px;margin:auto\">"
        f"<h2 style=\"color:{accent}\">{escape(subject)}</h2>"
        f"<p>{escape(message)}</p>"
        f"<p style=\"color:#6b7280;font-size:12px\">This email was sent to {escape(email)}.</p>"
        "</div>"
    )


def driver_approved_email(application: DriverApplication) -> EmailMessage:
    profile = application.profile
    return EmailMessage(
        to=profile.email,
        subject="Congratulations! Your Driver Application is Approved",
        html=render_template(
            "success",
            profile.email,
            "Application Approved",
            f"Hello {profile.first_name}, your application has been approved. "
            "You can now log in and access the Driver Dashboard.",
        ),
    )


def driver_rejected_email(application: DriverApplication) -> EmailMessage:
    profile = application.profile
    return EmailMessage(
        to=profile.email,
        subject="Update on your Driver Application",
        html=render_template(
            "warning",
            profile.email,
            "Application Update",
            "Sorry, your application was not approved at this time.",
        ),
    )
