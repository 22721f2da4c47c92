"""Tenant model."""

from dataclasses import dataclass

from rental_space.models.base import PersonalInfo
from rental_space.models.enums import Gender


@dataclass
class Tenant:
    """A registered tenant who can log in, wishlist and apply."""

    personal: PersonalInfo
    password: str  # Plain text
    gender: Gender
    preferred_price: float  # Weekly, AUD
    preferred_suburb: str

    @property
    def email(self) -> str:
        return self.personal.email
