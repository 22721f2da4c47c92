"""Base generator class for sample data generators."""

from __future__ import annotations

import random
from abc import ABC
from datetime import datetime

from faker import Faker


class BaseGenerator(ABC):
    """Base class for all sample data generators.

    Provides Faker instance creation and seed-based reproducibility.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_AU``).
    """

    def __init__(self, seed: int | None = None, locale: str = "en_AU") -> None:
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)
            random.seed(seed)

    @staticmethod
    def _to_minute(value: datetime) -> datetime:
        """Drop seconds; record files store minutes only."""
        return value.replace(second=0, microsecond=0)
