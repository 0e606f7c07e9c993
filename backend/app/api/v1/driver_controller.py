"""
Driver Controller
=================

FastAPI controller for driver onboarding and administration endpoints.
Submissions are multipart forms carrying the applicant profile and one or
more document images.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from app.domain.models.driver_application import ApplicantProfile, ApplicationStatus, UploadedDocument
from app.domain.models.identity import Guest, Identity, LoggedIn
from app.domain.models.user import UserRole
from app.application.dto.common_dto import MessageResponse
from app.application.dto.driver_dto import (
    DriverApplicationPageResponse,
    DriverApplicationResponse,
    DriverRegistrationResponse,
    SuspendRequest,
    UpdateStatusRequest,
)
from app.application.services.driver_application_service import DriverApplicationService
from app.application.use_cases.driver.views import DriverApplicationView
from app.api.v1.dependencies import (
    get_current_identity,
    get_driver_service,
    get_optional_identity,
    require_roles,
)

router = APIRouter(tags=["drivers"])

admin_only = require_roles(UserRole.ADMIN)


def applicant_profile_form(
    first_name: str = Form(..., alias="firstName"),
    last_name: str = Form(..., alias="lastName"),
    email: str = Form(...),
    phone: str = Form(...),
    address: str = Form(""),
    city: str = Form(""),
    state: str = Form(""),
    zip_code: str = Form("", alias="zipCode"),
    license_expiry_date: str = Form("", alias="licenseExpiryDate"),
    years_of_experience: int = Form(0, alias="yearsOfExperience", ge=0),
) -> ApplicantProfile:
    return ApplicantProfile(
        first_name=first_name,
        last_name=last_name,
        email=email,
        phone=phone,
        address=address,
        city=city,
        state=state,
        zip_code=zip_code,
        license_expiry_date=license_expiry_date,
        years_of_experience=years_of_experience,
    )


def read_documents(files: Optional[List[UploadFile]]) -> List[UploadedDocument]:
    """Buffer uploaded files so services never touch the request stream."""
    return [
        UploadedDocument(
            filename=upload.filename or "document",
            content=upload.file.read(),
            content_type=upload.content_type or "application/octet-stream",
        )
        for upload in files or []
        if upload.filename
    ]


@router.post(
    "/join",
    response_model=DriverApplicationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Apply to become a driver",
    description="""
    Submit a driver application for the authenticated account.

    Rejected when the account is already a driver, is a supplier, or
    already has a pending or approved application.
    """,
)
def join_as_driver(
    profile: ApplicantProfile = Depends(applicant_profile_form),
    documents: Optional[List[UploadFile]] = File(None, alias="documents"),
    identity: Identity = Depends(get_current_identity),
    service: DriverApplicationService = Depends(get_driver_service),
) -> DriverApplicationResponse:
    application = service.submit(identity, profile, read_documents(documents))
    return DriverApplicationResponse.from_view(DriverApplicationView(application=application))


@router.post(
    "/register",
    response_model=DriverRegistrationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register as a driver, with or without an account",
    description="""
    Authenticated callers apply with their account. Guests must send a
    password and get a new customer account created together with the
    application. Nothing is stored unless every step succeeds.
    """,
)
def register_driver(
    profile: ApplicantProfile = Depends(applicant_profile_form),
    password: Optional[str] = Form(None),
    documents: Optional[List[UploadFile]] = File(None, alias="documents"),
    identity: Optional[Identity] = Depends(get_optional_identity),
    service: DriverApplicationService = Depends(get_driver_service),
) -> DriverRegistrationResponse:
    if identity:
        submission = LoggedIn(identity=identity, profile=profile)
    else:
        submission = Guest(profile=profile, password=password)

    result = service.register(submission, read_documents(documents))
    return DriverRegistrationResponse(user_id=result.user_id, driver_id=result.driver_id)


@router.get(
    "/me",
    response_model=Optional[DriverApplicationResponse],
    summary="Get my latest driver application",
)
def get_my_application(
    identity: Identity = Depends(get_current_identity),
    service: DriverApplicationService = Depends(get_driver_service),
) -> Optional[DriverApplicationResponse]:
    view = service.get_mine(identity)
    return DriverApplicationResponse.from_view(view) if view else None


@router.get(
    "",
    response_model=DriverApplicationPageResponse,
    summary="List driver applications",
)
def list_applications(
    status_filter: Optional[ApplicationStatus] = Query(None, alias="status"),
    search: Optional[str] = Query(None, description="Substring of first name or email"),
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    _: Identity = Depends(admin_only),
    service: DriverApplicationService = Depends(get_driver_service),
) -> DriverApplicationPageResponse:
    result = service.list_applications(status=status_filter, search=search, page=page, limit=limit)
    return DriverApplicationPageResponse.from_page(result)


@router.get(
    "/{application_id}",
    response_model=DriverApplicationResponse,
    summary="Get a driver application",
)
def get_application(
    application_id: str,
    _: Identity = Depends(admin_only),
    service: DriverApplicationService = Depends(get_driver_service),
) -> DriverApplicationResponse:
    return DriverApplicationResponse.from_view(service.get_single(application_id))


@router.patch(
    "/{application_id}/status",
    response_model=DriverApplicationResponse,
    summary="Approve or reject a driver application",
    description="""
    Approval promotes the applicant to the driver role in the same
    transaction. The applicant is emailed after the change is committed.
    """,
)
def update_application_status(
    application_id: str,
    request: UpdateStatusRequest,
    _: Identity = Depends(admin_only),
    service: DriverApplicationService = Depends(get_driver_service),
) -> DriverApplicationResponse:
    application = service.update_status(application_id, request.status)
    return DriverApplicationResponse.from_view(DriverApplicationView(application=application))


@router.patch(
    "/{application_id}/suspend",
    response_model=DriverApplicationResponse,
    summary="Suspend or unsuspend a driver",
)
def toggle_suspension(
    application_id: str,
    request: Optional[SuspendRequest] = None,
    _: Identity = Depends(admin_only),
    service: DriverApplicationService = Depends(get_driver_service),
) -> DriverApplicationResponse:
    days = request.days if request else None
    application = service.toggle_suspension(application_id, days)
    return DriverApplicationResponse.from_view(DriverApplicationView(application=application))


@router.delete(
    "/{application_id}",
    response_model=MessageResponse,
    summary="Delete a driver application and its account",
)
def delete_application(
    application_id: str,
    _: Identity = Depends(admin_only),
    service: DriverApplicationService = Depends(get_driver_service),
) -> MessageResponse:
    result = service.delete(application_id)
    return MessageResponse(success=result.success, message=result.message)
