"""
Driver Application Model
========================

Domain model for a request to become a driver.
This is a pure domain object with no infrastructure dependencies.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional

from app.utils.datetime_utils import now, days_from_now


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


# Statuses that block a new application for the same user
OPEN_STATUSES = (ApplicationStatus.PENDING, ApplicationStatus.APPROVED)


@dataclass(frozen=True)
class StoredFile:
    """Reference to a file held in blob storage."""
    public_id: str
    url: str


@dataclass(frozen=True)
class UploadedDocument:
    """A document file received from the client, not yet stored."""
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


@dataclass(frozen=True)
class ApplicantProfile:
    """Personal details submitted with a driver application."""
    first_name: str
    last_name: str
    email: str
    phone: str
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    license_expiry_date: str = ""
    years_of_experience: int = 0


@dataclass
class DriverApplication:
    """
    DriverApplication domain model.

    At most one application per user may be pending or approved at a time.
    """
    user_id: str
    profile: ApplicantProfile
    document_url: List[StoredFile] = field(default_factory=list)
    status: ApplicationStatus = ApplicationStatus.PENDING
    is_suspended: bool = False
    suspended_until: Optional[datetime] = None
    id: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())

    def is_open(self) -> bool:
        """Check if the application still blocks a new submission."""
        return self.status in OPEN_STATUSES

    def change_status(self, status: ApplicationStatus) -> None:
        """Move to a new review status."""
        if status == self.status:
            raise ValueError(f"Application is already {status.value}")
        self.status = status
        self.updated_at = now()

    def toggle_suspension(self, days: Optional[int] = None) -> None:
        """
        Flip the suspension flag.

        Entering suspension with ``days`` sets an end date; lifting a
        suspension, or suspending without a duration, clears it.
        """
        entering = not self.is_suspended
        self.is_suspended = entering
        self.suspended_until = days_from_now(days) if entering and days else None
        self.updated_at = now()
