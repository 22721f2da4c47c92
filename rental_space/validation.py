"""Input validators for the login and application forms."""

import re

from rental_space.exceptions import InvalidInputError

MAX_NAME_LENGTH = 255

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@student\.monash\.edu$")
# Australian mobile numbers
PHONE_PATTERN = re.compile(r"^((\+61|0)4\d{8})$", re.ASCII)


def validate_name(name: str | None) -> bool:
    return name is not None and len(name) <= MAX_NAME_LENGTH


def validate_email(email: str) -> bool:
    """Whether ``email`` is a Monash student address."""
    return EMAIL_PATTERN.fullmatch(email) is not None


def validate_phone_number(phone_no: str) -> bool:
    return PHONE_PATTERN.fullmatch(phone_no) is not None


def validate_savings(savings: str) -> bool:
    try:
        float(savings)
    except ValueError:
        return False
    return True


def parse_savings(savings: str) -> float:
    """Parse optional savings input; blank means 0.0.

    Raises
    ------
    InvalidInputError
        If non-blank input is not a number.
    """
    if not savings.strip():
        return 0.0
    try:
        return float(savings)
    except ValueError:
        raise InvalidInputError(f"Invalid savings amount {savings!r}") from None
