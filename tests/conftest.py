"""Pytest configuration and fixtures."""

from datetime import datetime
from pathlib import Path
from typing import Callable

import pytest

from rental_space.models import (
    Application,
    ApplicationStatus,
    Gender,
    PersonalInfo,
    Property,
    PropertyType,
    Tenant,
    Wishlist,
)
from rental_space.store.csv_store import RecordRepository
from rental_space.store.rental import RentalDataStore


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_tenant() -> Tenant:
    """Tenant with email a@student.monash.edu and password pw1."""
    return Tenant(
        personal=PersonalInfo(
            first_name="Alice",
            last_name="Nguyen",
            email="a@student.monash.edu",
            phone_no="0412345678",
        ),
        password="pw1",
        gender=Gender.FEMALE,
        preferred_price=450.0,
        preferred_suburb="Clayton",
    )


@pytest.fixture
def other_tenant() -> Tenant:
    return Tenant(
        personal=PersonalInfo("Bob", "Smith", "bsmi2@student.monash.edu", "+61498765432"),
        password="secret",
        gender=Gender.MALE,
        preferred_price=380.0,
        preferred_suburb="Oakleigh",
    )


@pytest.fixture
def sample_property() -> Property:
    return Property(
        property_id=1,
        address="12 Wellington Road",
        suburb="Clayton",
        state="VIC",
        zip_code="3168",
        is_furnished=True,
        property_type=PropertyType.TOWNHOUSE,
        price=520.0,
        app_form_url="https://www.mproperty.com.au/apply/1",
        inspection_time=datetime(2024, 6, 15, 10, 30),
        description="Three bedroom townhouse close to campus.",
        is_off_market=False,
        date_added=datetime(2024, 5, 1, 9, 0),
    )


@pytest.fixture
def second_property() -> Property:
    return Property(
        property_id=2,
        address="3/88 Clayton Road",
        suburb="Oakleigh",
        state="VIC",
        zip_code="3166",
        is_furnished=False,
        property_type=PropertyType.UNIT,
        price=1350.5,
        app_form_url="https://www.mproperty.com.au/apply/2",
        inspection_time=datetime(2024, 6, 20, 17, 0),
        description="Two bedroom unit.",
        is_off_market=True,
        date_added=datetime(2024, 4, 2, 14, 45),
    )


@pytest.fixture
def sample_application(sample_tenant: Tenant, sample_property: Property) -> Application:
    return Application(
        personal=PersonalInfo(
            sample_tenant.personal.first_name,
            sample_tenant.personal.last_name,
            sample_tenant.email,
            sample_tenant.personal.phone_no,
        ),
        saving=2500.0,
        property_id=sample_property.property_id,
        date_submitted=datetime(2024, 5, 3, 12, 0),
        application_status=ApplicationStatus.SUBMITTED,
    )


@pytest.fixture
def sample_wishlist(sample_tenant: Tenant, sample_property: Property) -> Wishlist:
    return Wishlist(
        property_id=sample_property.property_id,
        tenant_email=sample_tenant.email,
        date_added=datetime(2024, 5, 2, 8, 15),
    )


@pytest.fixture
def store(
    sample_tenant: Tenant,
    other_tenant: Tenant,
    sample_property: Property,
    second_property: Property,
) -> RentalDataStore:
    """Store with two tenants and two properties."""
    store = RentalDataStore()
    store.add_tenant(sample_tenant)
    store.add_tenant(other_tenant)
    store.add_property(sample_property)
    store.add_property(second_property)
    return store


@pytest.fixture
def db_dir(tmp_path: Path) -> Path:
    return tmp_path / "db"


@pytest.fixture
def repository(db_dir: Path) -> RecordRepository:
    return RecordRepository.at(db_dir)


@pytest.fixture
def scripted_input() -> Callable[..., Callable[[], str]]:
    """Build an input function that replays lines, then raises EOFError."""

    def _build(*lines: str) -> Callable[[], str]:
        remaining = iter(lines)

        def _input() -> str:
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        return _input

    return _build
