"""Enumeration types for rental records."""

from enum import Enum


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class PropertyType(str, Enum):
    HOUSE = "HOUSE"
    UNIT = "UNIT"
    TOWNHOUSE = "TOWNHOUSE"
    APARTMENT = "APARTMENT"

    @property
    def label(self) -> str:
        """Display form, e.g. ``Townhouse``."""
        return self.value.capitalize()


class ApplicationStatus(str, Enum):
    SUBMITTED = "SUBMITTED"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
