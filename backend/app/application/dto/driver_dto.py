"""
Driver DTO
==========

Pydantic models for driver application API requests and responses.
Submissions arrive as multipart forms; see driver_controller for the form
fields.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, Field

from app.domain.models.driver_application import ApplicationStatus, StoredFile
from app.domain.models.user import User
from app.application.dto.common_dto import ApiModel, PageMetaResponse
from app.application.use_cases.driver.views import DriverApplicationView
from app.utils.pagination import Page


class StoredFileResponse(ApiModel):
    public_id: str = Field(..., alias="public_id")
    url: str

    @classmethod
    def from_entity(cls, stored: StoredFile) -> "StoredFileResponse":
        return cls(public_id=stored.public_id, url=stored.url)


class DriverOwnerResponse(ApiModel):
    """Public fields of the account owning an application."""
    id: str
    first_name: str
    last_name: str
    email: str
    image: Optional[str] = None

    @classmethod
    def from_entity(cls, user: User) -> "DriverOwnerResponse":
        return cls(**user.public_profile())


class DriverApplicationResponse(ApiModel):
    id: str
    user_id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    address: str
    city: str
    state: str
    zip_code: str
    license_expiry_date: str
    years_of_experience: int
    document_url: List[StoredFileResponse]
    status: ApplicationStatus
    is_suspended: bool
    suspended_until: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    user: Optional[DriverOwnerResponse] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "66f1c0a2e4b0a1b2c3d4e5f6",
                "userId": "66f1c09be4b0a1b2c3d4e5f5",
                "firstName": "Jane",
                "lastName": "Doe",
                "email": "jane@example.com",
                "phone": "+15550100",
                "address": "1 Main St",
                "city": "Springfield",
                "state": "IL",
                "zipCode": "62701",
                "licenseExpiryDate": "2028-05-31",
                "yearsOfExperience": 4,
                "documentUrl": [
                    {"public_id": "drivers/documents/4f2a.jpg", "url": "https://cdn.example.com/drivers/documents/4f2a.jpg"}
                ],
                "status": "pending",
                "isSuspended": False,
                "suspendedUntil": None,
                "createdAt": "2026-01-12T09:11:50.840Z",
                "updatedAt": "2026-01-12T09:11:50.840Z",
            }
        }
    )

    @classmethod
    def from_view(cls, view: DriverApplicationView) -> "DriverApplicationResponse":
        application = view.application
        profile = application.profile
        return cls(
            id=application.id,
            user_id=application.user_id,
            first_name=profile.first_name,
            last_name=profile.last_name,
            email=profile.email,
            phone=profile.phone,
            address=profile.address,
            city=profile.city,
            state=profile.state,
            zip_code=profile.zip_code,
            license_expiry_date=profile.license_expiry_date,
            years_of_experience=profile.years_of_experience,
            document_url=[StoredFileResponse.from_entity(stored) for stored in application.document_url],
            status=application.status,
            is_suspended=application.is_suspended,
            suspended_until=application.suspended_until,
            created_at=application.created_at,
            updated_at=application.updated_at,
            user=DriverOwnerResponse.from_entity(view.owner) if view.owner else None,
        )


class DriverApplicationPageResponse(ApiModel):
    data: List[DriverApplicationResponse]
    meta: PageMetaResponse

    @classmethod
    def from_page(cls, page: Page[DriverApplicationView]) -> "DriverApplicationPageResponse":
        return cls(
            data=[DriverApplicationResponse.from_view(view) for view in page.data],
            meta=PageMetaResponse.from_meta(page.meta),
        )


class DriverRegistrationResponse(ApiModel):
    user_id: str
    driver_id: str


class UpdateStatusRequest(ApiModel):
    status: ApplicationStatus = Field(..., description="approved or rejected")

    model_config = ConfigDict(json_schema_extra={"example": {"status": "approved"}})


class SuspendRequest(ApiModel):
    days: Optional[int] = Field(None, ge=1, description="Suspension length; omit for an open-ended suspension")
