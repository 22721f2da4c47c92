"""Tenant generator."""

from __future__ import annotations

import random
import re
from typing import Iterator

from rental_space.generators.base import BaseGenerator
from rental_space.generators.property import SUBURBS
from rental_space.models import Gender, PersonalInfo, Tenant

EMAIL_DOMAIN = "student.monash.edu"


class TenantGenerator(BaseGenerator):
    """Generate tenants with Monash student emails and mobile numbers."""

    GENDERS = list(Gender)
    GENDER_WEIGHTS = [0.48, 0.48, 0.04]

    PRICE_RANGE = (200, 900)  # Weekly, AUD

    def __init__(self, seed: int | None = None) -> None:
        super().__init__(seed)
        self._used_emails: set[str] = set()

    def generate(self) -> Tenant:
        """Generate a single tenant.

        Returns
        -------
        Tenant
            Generated tenant with a unique email.
        """
        return self._generate_one()

    def generate_batch(self, count: int) -> Iterator[Tenant]:
        """Generate multiple tenants.

        Parameters
        ----------
        count : int
            Number of tenants to generate.

        Yields
        ------
        Tenant
            Generated tenants.
        """
        for _ in range(count):
            yield self._generate_one()

    def _generate_one(self) -> Tenant:
        first_name = self.fake.first_name()
        last_name = self.fake.last_name()
        gender = random.choices(self.GENDERS, weights=self.GENDER_WEIGHTS, k=1)[0]
        low, high = self.PRICE_RANGE

        return Tenant(
            personal=PersonalInfo(
                first_name=first_name,
                last_name=last_name,
                email=self._unique_email(first_name, last_name),
                phone_no=self.fake.numerify("04########"),
            ),
            password=self.fake.password(length=10, special_chars=False),
            gender=gender,
            preferred_price=float(random.randrange(low, high, 10)),
            preferred_suburb=random.choice(SUBURBS)[0],
        )

    def _unique_email(self, first_name: str, last_name: str) -> str:
        """Monash style address: initial, surname and a number."""
        stem = re.sub(r"[^a-z0-9]", "", (first_name[:1] + last_name).lower()) or "student"
        while True:
            email = f"{stem}{random.randint(1, 9999)}@{EMAIL_DOMAIN}"
            if email not in self._used_emails:
                self._used_emails.add(email)
                return email
