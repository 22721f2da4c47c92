"""Rental property generator."""

from __future__ import annotations

import random
from datetime import datetime, timedelta
from typing import Iterator

from rental_space.generators.base import BaseGenerator
from rental_space.models import Property, PropertyType

# Suburbs around the Clayton campus, with postcodes
SUBURBS: list[tuple[str, str]] = [
    ("Clayton", "3168"),
    ("Notting Hill", "3168"),
    ("Mount Waverley", "3149"),
    ("Glen Waverley", "3150"),
    ("Oakleigh", "3166"),
    ("Mulgrave", "3170"),
    ("Huntingdale", "3166"),
    ("Caulfield East", "3145"),
]

APP_FORM_URL = "https://www.mproperty.com.au/apply/{property_id}"


class PropertyGenerator(BaseGenerator):
    """Generate rental listings with sequential property IDs.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    start_id : int
        First property ID to hand out.
    """

    PROPERTY_TYPES = list(PropertyType)
    PROPERTY_TYPE_WEIGHTS = [0.30, 0.25, 0.15, 0.30]

    # Weekly rent ranges by property type (AUD)
    PRICE_RANGES = {
        PropertyType.HOUSE: (450, 900),
        PropertyType.UNIT: (280, 500),
        PropertyType.TOWNHOUSE: (400, 750),
        PropertyType.APARTMENT: (300, 650),
    }

    OFF_MARKET_RATE = 0.15
    FURNISHED_RATE = 0.35

    def __init__(self, seed: int | None = None, start_id: int = 1) -> None:
        super().__init__(seed)
        self._next_id = start_id

    def generate(self) -> Property:
        """Generate a single property."""
        return self._generate_one()

    def generate_batch(self, count: int) -> Iterator[Property]:
        """Generate multiple properties with consecutive IDs."""
        for _ in range(count):
            yield self._generate_one()

    def _generate_one(self) -> Property:
        property_id = self._next_id
        self._next_id += 1

        property_type = random.choices(
            self.PROPERTY_TYPES, weights=self.PROPERTY_TYPE_WEIGHTS, k=1
        )[0]
        low, high = self.PRICE_RANGES[property_type]
        suburb, zip_code = random.choice(SUBURBS)
        now = datetime.now()

        return Property(
            property_id=property_id,
            address=f"{self.fake.building_number()} {self.fake.street_name()}",
            suburb=suburb,
            state="VIC",
            zip_code=zip_code,
            is_furnished=random.random() < self.FURNISHED_RATE,
            property_type=property_type,
            price=float(random.randrange(low, high, 5)),
            app_form_url=APP_FORM_URL.format(property_id=property_id),
            inspection_time=self._to_minute(
                now + timedelta(days=random.randint(1, 14), hours=random.randint(0, 8))
            ),
            description=self.fake.sentence(nb_words=12),
            is_off_market=random.random() < self.OFF_MARKET_RATE,
            date_added=self._to_minute(now - timedelta(days=random.randint(0, 60))),
        )
