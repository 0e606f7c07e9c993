from app.application.use_cases.driver.delete_application import DeleteDriverApplicationUseCase
from app.application.use_cases.driver.list_applications import ListDriverApplicationsUseCase
from app.application.use_cases.driver.register_driver import RegisterDriverUseCase
from app.application.use_cases.driver.submit_application import SubmitDriverApplicationUseCase
from app.application.use_cases.driver.toggle_suspension import ToggleSuspensionUseCase
from app.application.use_cases.driver.update_application_status import UpdateApplicationStatusUseCase

__all__ = [
    "DeleteDriverApplicationUseCase",
    "ListDriverApplicationsUseCase",
    "RegisterDriverUseCase",
    "SubmitDriverApplicationUseCase",
    "ToggleSuspensionUseCase",
    "UpdateApplicationStatusUseCase",
]
