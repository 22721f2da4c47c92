"""Faker-based sample data generators."""

from rental_space.generators.application import ApplicationGenerator
from rental_space.generators.property import PropertyGenerator
from rental_space.generators.sample import populate_store
from rental_space.generators.tenant import TenantGenerator

__all__ = [
    "ApplicationGenerator",
    "PropertyGenerator",
    "TenantGenerator",
    "populate_store",
]
