"""Configuration management for rental-space."""

from dataclasses import dataclass, field
from pathlib import Path

from rental_space.exceptions import ConfigurationError

LOG_FORMATS = ("standard", "json")


@dataclass
class StorageConfig:
    """Location of the CSV record files."""

    db_dir: Path = field(default_factory=lambda: Path("db"))
    tenant_file: str = "tenant.csv"
    property_file: str = "property.csv"
    application_file: str = "application.csv"
    wishlist_file: str = "wishlist.csv"

    @property
    def tenant_path(self) -> Path:
        return self.db_dir / self.tenant_file

    @property
    def property_path(self) -> Path:
        return self.db_dir / self.property_file

    @property
    def application_path(self) -> Path:
        return self.db_dir / self.application_file

    @property
    def wishlist_path(self) -> Path:
        return self.db_dir / self.wishlist_file


@dataclass
class RentalSpaceConfig:
    """Main configuration for rental-space."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    log_level: str = "INFO"
    log_format: str = "standard"
    log_file: Path | None = None

    def __post_init__(self) -> None:
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format {self.log_format!r}, expected one of {', '.join(LOG_FORMATS)}"
            )

    @classmethod
    def from_env(cls) -> "RentalSpaceConfig":
        """Create config from environment variables."""
        import os

        storage = StorageConfig(db_dir=Path(os.getenv("RENTAL_DB_DIR", "db")))
        log_file = os.getenv("LOG_FILE")

        return cls(
            storage=storage,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            log_file=Path(log_file) if log_file else None,
        )
