"""Application history generator."""

from __future__ import annotations

import random
from datetime import datetime, timedelta

from rental_space.generators.base import BaseGenerator
from rental_space.models import (
    Application,
    ApplicationStatus,
    PersonalInfo,
    Property,
    Tenant,
)


class ApplicationGenerator(BaseGenerator):
    """Generate past applications, including rejected ones."""

    STATUSES = list(ApplicationStatus)
    STATUS_WEIGHTS = [0.60, 0.20, 0.20]

    def generate(self, tenant: Tenant, prop: Property) -> Application:
        """Generate an application by ``tenant`` for ``prop``."""
        status = random.choices(self.STATUSES, weights=self.STATUS_WEIGHTS, k=1)[0]
        submitted = prop.date_added + timedelta(days=random.randint(0, 7))

        return Application(
            personal=PersonalInfo(
                tenant.personal.first_name,
                tenant.personal.last_name,
                tenant.email,
                tenant.personal.phone_no,
            ),
            saving=float(random.randrange(0, 20000, 100)),
            property_id=prop.property_id,
            date_submitted=self._to_minute(min(submitted, datetime.now())),
            application_status=status,
        )
