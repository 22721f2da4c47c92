"""Rental application model."""

from dataclasses import dataclass
from datetime import datetime

from rental_space.models.base import PersonalInfo
from rental_space.models.enums import ApplicationStatus


@dataclass
class Application:
    """A tenant's application to rent a property."""

    personal: PersonalInfo
    saving: float
    property_id: int
    date_submitted: datetime
    application_status: ApplicationStatus

    @property
    def email(self) -> str:
        return self.personal.email
