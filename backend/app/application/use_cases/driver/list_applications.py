from typing import List, Optional

from app.domain.models.driver_application import ApplicationStatus, DriverApplication
from app.domain.repositories.driver_application_repository import DriverApplicationRepository
from app.domain.repositories.user_repository import UserRepository
from app.application.use_cases.driver.views import DriverApplicationView
from app.utils.pagination import Page, build_meta, normalize_page, skip_for


class ListDriverApplicationsUseCase:
    """Paginated, filterable listing of driver applications with their owners."""

    def __init__(
        self,
        user_repository: UserRepository,
        application_repository: DriverApplicationRepository,
        default_page_size: int = 10,
    ):
        self._users = user_repository
        self._applications = application_repository
        self._default_page_size = default_page_size

    def execute(
        self,
        status: Optional[ApplicationStatus] = None,
        search: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Page[DriverApplicationView]:
        page, limit = normalize_page(page, limit, self._default_page_size)
        search = search.strip() if search else None

        applications, total = self._applications.find_page(
            status=status,
            search=search or None,
            skip=skip_for(page, limit),
            limit=limit,
        )
        return Page(data=self._with_owners(applications), meta=build_meta(page, limit, total))

    def _with_owners(self, applications: List[DriverApplication]) -> List[DriverApplicationView]:
        owners = self._users.find_many_by_ids(app.user_id for app in applications)
        return [DriverApplicationView(application=app, owner=owners.get(app.user_id)) for app in applications]
