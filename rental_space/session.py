"""Session state: the store, its files and the logged-in tenant."""

import logging
from datetime import datetime

from rental_space.exceptions import ApplicationRejectedError, NotAuthenticatedError
from rental_space.models import (
    Application,
    ApplicationStatus,
    PersonalInfo,
    Property,
    Tenant,
)
from rental_space.store.csv_store import RecordRepository
from rental_space.store.rental import RentalDataStore
from rental_space.validation import parse_savings

logger = logging.getLogger(__name__)


class Session:
    """Owns every in-memory collection and the current tenant.

    Every mutating operation is followed by a flush that rewrites all four
    record files. Without a repository the session is purely in-memory.

    Parameters
    ----------
    store : RentalDataStore
        Loaded records.
    repository : RecordRepository | None
        Where to flush mutations.
    """

    def __init__(
        self,
        store: RentalDataStore,
        repository: RecordRepository | None = None,
    ) -> None:
        self.store = store
        self.repository = repository
        self.current_tenant: Tenant | None = None

    @classmethod
    def open(cls, repository: RecordRepository) -> "Session":
        """Load all records from ``repository`` into a new session."""
        return cls(repository.load_all(), repository)

    @property
    def is_authenticated(self) -> bool:
        return self.current_tenant is not None

    def require_tenant(self) -> Tenant:
        """Return the current tenant or raise NotAuthenticatedError."""
        if self.current_tenant is None:
            raise NotAuthenticatedError("No tenant is logged in")
        return self.current_tenant

    def login(self, email: str, password: str) -> bool:
        """Log in with exact, case-sensitive email and password.

        Returns
        -------
        bool
            True on success. On failure the current tenant is left unchanged.
        """
        tenant = self.store.authenticate(email, password)
        if tenant is None:
            logger.info("Failed login for %s", email)
            return False

        self.current_tenant = tenant
        logger.info("Tenant %s logged in", email)
        return True

    def logout(self) -> None:
        if self.current_tenant is not None:
            logger.info("Tenant %s logged out", self.current_tenant.email)
        self.current_tenant = None

    def wishlist_properties(self) -> list[Property]:
        """Properties on the current tenant's wishlist."""
        return self.store.get_tenant_wishlist(self.require_tenant().email)

    def is_wishlisted(self, prop: Property) -> bool:
        return self.store.is_wishlisted(prop.property_id, self.require_tenant().email)

    def toggle_wishlist(self, prop: Property) -> bool:
        """Toggle ``prop`` on the current tenant's wishlist and flush.

        Returns
        -------
        bool
            True if the property was added, False if removed.
        """
        tenant = self.require_tenant()
        added = self.store.toggle_wishlist(prop, tenant)
        logger.info(
            "%s property %d %s wishlist of %s",
            "Added" if added else "Removed",
            prop.property_id,
            "to" if added else "from",
            tenant.email,
        )
        self.flush()
        return added

    def can_apply(self, prop: Property) -> bool:
        """Whether the current tenant has not been rejected for ``prop``."""
        tenant = self.require_tenant()
        return not self.store.has_rejected_application(tenant.email, prop.property_id)

    def submit_application(
        self,
        first_name: str,
        last_name: str,
        email: str,
        phone_no: str,
        savings: str,
        prop: Property,
    ) -> Application:
        """Submit a rental application for ``prop`` and flush.

        Parameters
        ----------
        first_name, last_name, email, phone_no : str
            Applicant details as entered on the form.
        savings : str
            Raw savings input; blank means 0.0.
        prop : Property
            Property applied for.

        Returns
        -------
        Application
            The new application, with status SUBMITTED.

        Raises
        ------
        ApplicationRejectedError
            If the current tenant already has a rejected application for
            this property. Nothing is added.
        """
        if not self.can_apply(prop):
            raise ApplicationRejectedError(
                f"{self.require_tenant().email} was rejected for property {prop.property_id}"
            )

        application = Application(
            personal=PersonalInfo(first_name, last_name, email, phone_no),
            saving=parse_savings(savings),
            property_id=prop.property_id,
            date_submitted=datetime.now(),
            application_status=ApplicationStatus.SUBMITTED,
        )
        self.store.add_application(application)
        logger.info("Application submitted by %s for property %d", email, prop.property_id)
        self.flush()
        return application

    def flush(self) -> None:
        """Rewrite every record file from memory."""
        if self.repository is not None:
            self.repository.flush(self.store)
