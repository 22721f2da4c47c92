"""Wishlist entry model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Wishlist:
    """A property saved by a tenant, keyed by (property_id, tenant_email)."""

    property_id: int
    tenant_email: str
    date_added: datetime
