"""Base models shared across record types."""

from dataclasses import dataclass

# Timestamp layout used on disk and on screen.
TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M"
DATE_FORMAT = "%d/%m/%Y"


@dataclass
class PersonalInfo:
    """Contact details embedded in tenants and applications."""

    first_name: str
    last_name: str
    email: str
    phone_no: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
