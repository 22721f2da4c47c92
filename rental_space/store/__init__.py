"""Record storage: in-memory collections and their CSV files."""

from rental_space.store.csv_store import RecordRepository, load, save
from rental_space.store.rental import RentalDataStore

__all__ = ["RecordRepository", "RentalDataStore", "load", "save"]
