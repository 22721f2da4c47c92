"""In-memory rental record store with linear-scan lookups."""

from dataclasses import dataclass, field
from datetime import datetime

from rental_space.exceptions import DuplicateEntityError, ReferentialIntegrityError
from rental_space.models import (
    Application,
    ApplicationStatus,
    Property,
    Tenant,
    Wishlist,
)


@dataclass
class RentalDataStore:
    """In-memory collections of every record type.

    Collections are plain lists in file order; every lookup is a linear scan.
    Records loaded from disk are assigned directly, while the ``add_*``
    methods enforce keys and foreign keys for records created at runtime.
    """

    tenants: list[Tenant] = field(default_factory=list)
    properties: list[Property] = field(default_factory=list)
    applications: list[Application] = field(default_factory=list)
    wishlists: list[Wishlist] = field(default_factory=list)

    def add_tenant(self, tenant: Tenant) -> None:
        """Add a tenant to the store."""
        if self.find_tenant(tenant.email) is not None:
            raise DuplicateEntityError(f"Tenant {tenant.email} already exists")
        self.tenants.append(tenant)

    def add_property(self, prop: Property) -> None:
        """Add a property to the store."""
        if self.find_property(prop.property_id) is not None:
            raise DuplicateEntityError(f"Property {prop.property_id} already exists")
        self.properties.append(prop)

    def add_application(self, application: Application) -> None:
        """Add an application to the store."""
        if self.find_property(application.property_id) is None:
            raise ReferentialIntegrityError(f"Property {application.property_id} not found")
        self.applications.append(application)

    def add_wishlist(self, entry: Wishlist) -> None:
        """Add a wishlist entry to the store."""
        if self.find_property(entry.property_id) is None:
            raise ReferentialIntegrityError(f"Property {entry.property_id} not found")
        if self.find_tenant(entry.tenant_email) is None:
            raise ReferentialIntegrityError(f"Tenant {entry.tenant_email} not found")
        if self.find_wishlist_entry(entry.property_id, entry.tenant_email) is not None:
            raise DuplicateEntityError(
                f"Property {entry.property_id} already wishlisted by {entry.tenant_email}"
            )
        self.wishlists.append(entry)

    # Query methods
    def find_tenant(self, email: str) -> Tenant | None:
        """Return the first tenant with this email."""
        for tenant in self.tenants:
            if tenant.email == email:
                return tenant
        return None

    def authenticate(self, email: str, password: str) -> Tenant | None:
        """Return the first tenant matching both email and password exactly."""
        for tenant in self.tenants:
            if tenant.email == email and tenant.password == password:
                return tenant
        return None

    def find_property(self, property_id: int) -> Property | None:
        """Return the property with this ID."""
        for prop in self.properties:
            if prop.property_id == property_id:
                return prop
        return None

    def find_wishlist_entry(self, property_id: int, tenant_email: str) -> Wishlist | None:
        """Return the wishlist entry for a (property, tenant) pair."""
        for entry in self.wishlists:
            if entry.property_id == property_id and entry.tenant_email == tenant_email:
                return entry
        return None

    def is_wishlisted(self, property_id: int, tenant_email: str) -> bool:
        return self.find_wishlist_entry(property_id, tenant_email) is not None

    def get_tenant_wishlist(self, tenant_email: str) -> list[Property]:
        """Get the wishlisted properties of a tenant, in wishlist order.

        Entries pointing at unknown properties are left out.
        """
        result = []
        for entry in self.wishlists:
            if entry.tenant_email != tenant_email:
                continue
            prop = self.find_property(entry.property_id)
            if prop is not None:
                result.append(prop)
        return result

    def get_tenant_applications(self, tenant_email: str) -> list[Application]:
        """Get all applications submitted under a tenant email."""
        return [a for a in self.applications if a.email == tenant_email]

    def has_rejected_application(self, tenant_email: str, property_id: int) -> bool:
        """Whether the tenant was already rejected for this property."""
        return any(
            a.property_id == property_id and a.application_status == ApplicationStatus.REJECTED
            for a in self.get_tenant_applications(tenant_email)
        )

    # Mutations
    def toggle_wishlist(
        self,
        prop: Property,
        tenant: Tenant,
        now: datetime | None = None,
    ) -> bool:
        """Add the property to the tenant's wishlist, or remove it if present.

        Parameters
        ----------
        prop : Property
            Property to toggle.
        tenant : Tenant
            Owner of the wishlist.
        now : datetime | None
            Timestamp for a new entry (defaults to the current time).

        Returns
        -------
        bool
            True if the property was added, False if it was removed.
        """
        existing = self.find_wishlist_entry(prop.property_id, tenant.email)
        if existing is not None:
            self.wishlists.remove(existing)
            return False

        self.wishlists.append(Wishlist(prop.property_id, tenant.email, now or datetime.now()))
        return True

    def summary(self) -> dict[str, int]:
        """Return summary counts of all record types."""
        return {
            "tenants": len(self.tenants),
            "properties": len(self.properties),
            "applications": len(self.applications),
            "wishlists": len(self.wishlists),
        }
