"""Rental property model."""

from dataclasses import dataclass
from datetime import datetime

from rental_space.models.enums import PropertyType


@dataclass
class Property:
    """A property listed for rent."""

    property_id: int
    address: str
    suburb: str
    state: str
    zip_code: str
    is_furnished: bool
    property_type: PropertyType
    price: float  # Weekly rent, AUD
    app_form_url: str
    inspection_time: datetime
    description: str
    is_off_market: bool
    date_added: datetime

    @property
    def full_address(self) -> str:
        return f"{self.address}, {self.suburb}, {self.state} {self.zip_code}"
