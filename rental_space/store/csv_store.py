"""Flat CSV persistence for record collections.

Each record file holds one comma-joined row per record, with no header and
no quoting. Collections are always read and written whole.
"""

import logging
from pathlib import Path
from typing import Iterable, TypeVar

from rental_space.config import StorageConfig
from rental_space.exceptions import RecordDecodeError, StoreError
from rental_space.store.rental import RentalDataStore
from rental_space.store.serialization import (
    APPLICATION_CODEC,
    PROPERTY_CODEC,
    TENANT_CODEC,
    WISHLIST_CODEC,
    RecordCodec,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

DELIMITER = ","


def load(path: str | Path, codec: RecordCodec[T]) -> list[T]:
    """Load every decodable record from ``path``.

    Rows that fail to decode, including rows that are not valid UTF-8, are
    skipped with a warning. If the file cannot be read at all the error is
    logged and an empty list is returned.

    Parameters
    ----------
    path : str | Path
        CSV file to read.
    codec : RecordCodec
        Codec for the record type stored in the file.

    Returns
    -------
    list
        Decoded records in file order.
    """
    path = Path(path)
    try:
        raw_lines = path.read_bytes().splitlines()
    except OSError:
        logger.exception("Could not read %s records from %s", codec.name, path)
        return []

    records: list[T] = []
    for lineno, raw in enumerate(raw_lines, start=1):
        if not raw.strip():
            continue
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.warning("%s:%d: not valid UTF-8 (%s). Skipping this record.", path, lineno, e)
            continue
        try:
            records.append(codec.decode(line.split(DELIMITER)))
        except RecordDecodeError as e:
            logger.warning("%s:%d: %s. Skipping this record.", path, lineno, e)

    logger.debug("Loaded %d %s records from %s", len(records), codec.name, path)
    return records


def save(path: str | Path, records: Iterable[T], codec: RecordCodec[T]) -> None:
    """Overwrite ``path`` with one row per record.

    Raises
    ------
    StoreError
        If the file cannot be written.
    """
    path = Path(path)
    rows = []
    for record in records:
        fields = codec.encode(record)
        if any(DELIMITER in f or "\n" in f for f in fields):
            # No escaping: this row will not decode on the next load
            logger.warning("%s record contains a delimiter or newline: %s", codec.name, fields)
        rows.append(DELIMITER.join(fields) + "\n")

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.writelines(rows)
    except OSError as e:
        logger.exception("Could not write %s records to %s", codec.name, path)
        raise StoreError(f"Could not write {path}: {e}") from e

    logger.debug("Saved %d %s records to %s", len(rows), codec.name, path)


class RecordRepository:
    """The four record files of one database directory."""

    def __init__(self, storage: StorageConfig | None = None) -> None:
        self.storage = storage or StorageConfig()

    @classmethod
    def at(cls, db_dir: str | Path) -> "RecordRepository":
        """Repository for ``db_dir`` using the default file names."""
        return cls(StorageConfig(db_dir=Path(db_dir)))

    def load_all(self) -> RentalDataStore:
        """Load every collection into a fresh store."""
        store = RentalDataStore(
            tenants=load(self.storage.tenant_path, TENANT_CODEC),
            properties=load(self.storage.property_path, PROPERTY_CODEC),
            applications=load(self.storage.application_path, APPLICATION_CODEC),
            wishlists=load(self.storage.wishlist_path, WISHLIST_CODEC),
        )
        logger.info("Loaded records from %s: %s", self.storage.db_dir, store.summary())
        return store

    def flush(self, store: RentalDataStore) -> None:
        """Rewrite all four files from the in-memory collections."""
        save(self.storage.tenant_path, store.tenants, TENANT_CODEC)
        save(self.storage.property_path, store.properties, PROPERTY_CODEC)
        save(self.storage.application_path, store.applications, APPLICATION_CODEC)
        save(self.storage.wishlist_path, store.wishlists, WISHLIST_CODEC)
