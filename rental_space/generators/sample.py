"""Populate a record store with sample data."""

import logging
import random
from datetime import datetime

from rental_space.generators.application import ApplicationGenerator
from rental_space.generators.property import PropertyGenerator
from rental_space.generators.tenant import TenantGenerator
from rental_space.models import Wishlist
from rental_space.store.rental import RentalDataStore

logger = logging.getLogger(__name__)


def populate_store(
    store: RentalDataStore,
    num_tenants: int = 10,
    num_properties: int = 20,
    num_applications: int = 10,
    num_wishlists: int = 10,
    seed: int | None = None,
) -> RentalDataStore:
    """Add generated tenants, properties, applications and wishlists.

    Property IDs continue after the highest ID already in ``store``.
    Applications and wishlist entries use distinct (tenant, property) pairs
    and are capped by the number of pairs available.

    Parameters
    ----------
    store : RentalDataStore
        Store to add records to.
    num_tenants, num_properties, num_applications, num_wishlists : int
        How many records of each type to generate.
    seed : int | None
        Random seed for reproducibility.

    Returns
    -------
    RentalDataStore
        The same store, for chaining.
    """
    start_id = max((p.property_id for p in store.properties), default=0) + 1
    tenant_gen = TenantGenerator(seed=seed)
    property_gen = PropertyGenerator(seed=seed, start_id=start_id)
    application_gen = ApplicationGenerator(seed=seed)

    tenants = []
    for tenant in tenant_gen.generate_batch(num_tenants):
        if store.find_tenant(tenant.email) is not None:
            continue
        store.add_tenant(tenant)
        tenants.append(tenant)

    properties = list(property_gen.generate_batch(num_properties))
    for prop in properties:
        store.add_property(prop)

    pairs = [(t, p) for t in tenants for p in properties]
    random.shuffle(pairs)

    for tenant, prop in pairs[:num_applications]:
        store.add_application(application_gen.generate(tenant, prop))

    now = datetime.now().replace(second=0, microsecond=0)
    for tenant, prop in pairs[num_applications : num_applications + num_wishlists]:
        store.add_wishlist(Wishlist(prop.property_id, tenant.email, now))

    logger.info(
        "Generated %d tenants, %d properties, %d applications, %d wishlist entries",
        len(tenants),
        len(properties),
        min(num_applications, len(pairs)),
        len(pairs[num_applications : num_applications + num_wishlists]),
    )
    return store
