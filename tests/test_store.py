"""Tests for RentalDataStore."""

from datetime import datetime

import pytest

from rental_space.exceptions import DuplicateEntityError, ReferentialIntegrityError
from rental_space.models import (
    Application,
    ApplicationStatus,
    PersonalInfo,
    Property,
    Tenant,
    Wishlist,
)
from rental_space.store.rental import RentalDataStore


class TestAddRecords:
    """Tests for add_* methods."""

    def test_add_tenant(self, sample_tenant: Tenant) -> None:
        store = RentalDataStore()
        store.add_tenant(sample_tenant)

        assert store.tenants == [sample_tenant]

    def test_duplicate_tenant_email(self, store: RentalDataStore, sample_tenant: Tenant) -> None:
        with pytest.raises(DuplicateEntityError):
            store.add_tenant(sample_tenant)

    def test_duplicate_property_id(self, store: RentalDataStore, sample_property: Property) -> None:
        with pytest.raises(DuplicateEntityError, match="Property 1"):
            store.add_property(sample_property)

    def test_application_requires_property(
        self, store: RentalDataStore, sample_application: Application
    ) -> None:
        sample_application.property_id = 99

        with pytest.raises(ReferentialIntegrityError, match="Property 99 not found"):
            store.add_application(sample_application)

    def test_wishlist_requires_tenant(self, store: RentalDataStore) -> None:
        entry = Wishlist(1, "nobody@student.monash.edu", datetime(2024, 5, 1, 9, 0))

        with pytest.raises(ReferentialIntegrityError, match="Tenant"):
            store.add_wishlist(entry)

    def test_duplicate_wishlist_pair(self, store: RentalDataStore, sample_wishlist: Wishlist) -> None:
        store.add_wishlist(sample_wishlist)

        with pytest.raises(DuplicateEntityError):
            store.add_wishlist(sample_wishlist)


class TestQueries:
    """Tests for lookup methods."""

    def test_find_tenant(self, store: RentalDataStore, sample_tenant: Tenant) -> None:
        assert store.find_tenant("a@student.monash.edu") is sample_tenant
        assert store.find_tenant("A@student.monash.edu") is None

    def test_authenticate(self, store: RentalDataStore, sample_tenant: Tenant) -> None:
        assert store.authenticate("a@student.monash.edu", "pw1") is sample_tenant
        assert store.authenticate("a@student.monash.edu", "PW1") is None
        assert store.authenticate("a@student.monash.edu", "wrong") is None

    def test_authenticate_first_match_wins(self, sample_tenant: Tenant) -> None:
        duplicate = Tenant(
            personal=PersonalInfo("Alicia", "N", sample_tenant.email, "0400000000"),
            password=sample_tenant.password,
            gender=sample_tenant.gender,
            preferred_price=100.0,
            preferred_suburb="Mulgrave",
        )
        store = RentalDataStore(tenants=[sample_tenant, duplicate])

        assert store.authenticate(sample_tenant.email, "pw1") is sample_tenant

    def test_find_property(self, store: RentalDataStore, second_property: Property) -> None:
        assert store.find_property(2) is second_property
        assert store.find_property(3) is None

    def test_tenant_wishlist_in_wishlist_order(
        self, store: RentalDataStore, sample_tenant: Tenant, other_tenant: Tenant
    ) -> None:
        added = datetime(2024, 5, 1, 9, 0)
        store.add_wishlist(Wishlist(2, sample_tenant.email, added))
        store.add_wishlist(Wishlist(1, other_tenant.email, added))
        store.add_wishlist(Wishlist(1, sample_tenant.email, added))

        wishlist = store.get_tenant_wishlist(sample_tenant.email)

        assert [p.property_id for p in wishlist] == [2, 1]

    def test_tenant_wishlist_skips_unknown_property(
        self, store: RentalDataStore, sample_tenant: Tenant
    ) -> None:
        store.wishlists.append(Wishlist(42, sample_tenant.email, datetime(2024, 5, 1, 9, 0)))

        assert store.get_tenant_wishlist(sample_tenant.email) == []

    def test_has_rejected_application(
        self, store: RentalDataStore, sample_application: Application, sample_tenant: Tenant
    ) -> None:
        store.add_application(sample_application)
        assert not store.has_rejected_application(sample_tenant.email, 1)

        sample_application.application_status = ApplicationStatus.REJECTED
        assert store.has_rejected_application(sample_tenant.email, 1)
        assert not store.has_rejected_application(sample_tenant.email, 2)
        assert not store.has_rejected_application("bsmi2@student.monash.edu", 1)

    def test_get_tenant_applications(
        self, store: RentalDataStore, sample_application: Application, sample_tenant: Tenant
    ) -> None:
        store.add_application(sample_application)

        assert store.get_tenant_applications(sample_tenant.email) == [sample_application]
        assert store.get_tenant_applications("bsmi2@student.monash.edu") == []


class TestToggleWishlist:
    """Tests for toggle_wishlist."""

    def test_adds_when_absent(
        self, store: RentalDataStore, sample_property: Property, sample_tenant: Tenant
    ) -> None:
        stamp = datetime(2024, 6, 1, 12, 0)

        added = store.toggle_wishlist(sample_property, sample_tenant, now=stamp)

        assert added is True
        assert store.wishlists == [Wishlist(1, sample_tenant.email, stamp)]

    def test_removes_when_present(
        self,
        store: RentalDataStore,
        sample_property: Property,
        sample_tenant: Tenant,
        sample_wishlist: Wishlist,
    ) -> None:
        store.add_wishlist(sample_wishlist)

        added = store.toggle_wishlist(sample_property, sample_tenant)

        assert added is False
        assert store.wishlists == []

    def test_toggle_twice_restores_membership(
        self,
        store: RentalDataStore,
        sample_property: Property,
        second_property: Property,
        sample_tenant: Tenant,
        sample_wishlist: Wishlist,
    ) -> None:
        store.add_wishlist(sample_wishlist)
        before = {(w.property_id, w.tenant_email) for w in store.wishlists}

        for prop in (sample_property, second_property):
            store.toggle_wishlist(prop, sample_tenant)
            store.toggle_wishlist(prop, sample_tenant)

        assert {(w.property_id, w.tenant_email) for w in store.wishlists} == before

    def test_only_affects_own_tenant(
        self,
        store: RentalDataStore,
        sample_property: Property,
        sample_tenant: Tenant,
        other_tenant: Tenant,
    ) -> None:
        store.toggle_wishlist(sample_property, other_tenant)
        store.toggle_wishlist(sample_property, sample_tenant)

        assert store.is_wishlisted(1, other_tenant.email)
        assert store.is_wishlisted(1, sample_tenant.email)

    def test_new_entry_defaults_to_now(
        self, store: RentalDataStore, sample_property: Property, sample_tenant: Tenant
    ) -> None:
        before = datetime.now()
        store.toggle_wishlist(sample_property, sample_tenant)

        assert before <= store.wishlists[0].date_added <= datetime.now()


class TestSummary:
    """Tests for summary."""

    def test_summary(self, store: RentalDataStore) -> None:
        assert store.summary() == {
            "tenants": 2,
            "properties": 2,
            "applications": 0,
            "wishlists": 0,
        }
