"""Record types for rental-space."""

from rental_space.models.application import Application
from rental_space.models.base import DATE_FORMAT, TIMESTAMP_FORMAT, PersonalInfo
from rental_space.models.enums import ApplicationStatus, Gender, PropertyType
from rental_space.models.property import Property
from rental_space.models.tenant import Tenant
from rental_space.models.wishlist import Wishlist

__all__ = [
    "Application",
    "ApplicationStatus",
    "DATE_FORMAT",
    "Gender",
    "PersonalInfo",
    "Property",
    "PropertyType",
    "TIMESTAMP_FORMAT",
    "Tenant",
    "Wishlist",
]
