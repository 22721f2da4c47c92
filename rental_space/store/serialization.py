"""Field-level CSV codecs for rental records.

Every record is stored as a fixed-arity list of strings. Encoders turn a
record into that list; decoders validate arity, parse every field and raise
:class:`RecordDecodeError` on the first problem so the caller can skip the
whole row.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Generic, Sequence, TypeVar

from rental_space.exceptions import RecordDecodeError
from rental_space.models import (
    TIMESTAMP_FORMAT,
    Application,
    ApplicationStatus,
    Gender,
    PersonalInfo,
    Property,
    PropertyType,
    Tenant,
    Wishlist,
)

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

PERSONAL_INFO_ARITY = 4
TENANT_ARITY = 8
PROPERTY_ARITY = 13
APPLICATION_ARITY = 8
WISHLIST_ARITY = 3


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful parse."""

    value: T


@dataclass(frozen=True)
class Err:
    """Failed parse with a human readable reason."""

    reason: str


def parse_enum(enum_cls: type[E], raw: str) -> Ok[E] | Err:
    """Parse an enum member by name, case-insensitively. Never raises."""
    member = enum_cls.__members__.get(raw.strip().upper())
    if member is None:
        return Err(f"{raw!r} is not a valid {enum_cls.__name__}")
    return Ok(member)


def serialize_value(value: Any) -> str:
    """Serialize a single field value for a CSV row."""
    if isinstance(value, Enum):
        return value.value
    elif isinstance(value, bool):
        return "true" if value else "false"
    elif isinstance(value, datetime):
        return value.strftime(TIMESTAMP_FORMAT)
    elif isinstance(value, float):
        return repr(value)
    return str(value)


# --- Field parsers (raise RecordDecodeError) ---


def _check_arity(fields: Sequence[str], arity: int, record_name: str) -> None:
    if len(fields) != arity:
        raise RecordDecodeError(
            f"Invalid data for creating a {record_name} record: "
            f"expected {arity} fields, got {len(fields)}"
        )


def _parse_enum(enum_cls: type[E], raw: str) -> E:
    result = parse_enum(enum_cls, raw)
    if isinstance(result, Err):
        raise RecordDecodeError(result.reason)
    return result.value


def _parse_int(raw: str, field_name: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise RecordDecodeError(f"Invalid {field_name} {raw!r}: not an integer") from None


def _parse_float(raw: str, field_name: str) -> float:
    try:
        return float(raw)
    except ValueError:
        raise RecordDecodeError(f"Invalid {field_name} {raw!r}: not a number") from None


def _parse_timestamp(raw: str, field_name: str) -> datetime:
    try:
        return datetime.strptime(raw, TIMESTAMP_FORMAT)
    except ValueError:
        raise RecordDecodeError(f"Invalid {field_name} {raw!r}: expected dd/mm/yyyy HH:MM") from None


def _parse_bool(raw: str) -> bool:
    # Anything other than "true" is false
    return raw.strip().lower() == "true"


# --- PersonalInfo (shared by Tenant and Application) ---


def encode_personal_info(info: PersonalInfo) -> list[str]:
    return [info.first_name, info.last_name, info.email, info.phone_no]


def decode_personal_info(fields: Sequence[str]) -> PersonalInfo:
    """Decode the leading four personal-info fields of a row."""
    if len(fields) < PERSONAL_INFO_ARITY:
        raise RecordDecodeError("Invalid data for creating personal info")
    first_name, last_name, email, phone_no = fields[:PERSONAL_INFO_ARITY]
    return PersonalInfo(first_name, last_name, email, phone_no)


# --- Tenant ---


def encode_tenant(tenant: Tenant) -> list[str]:
    return encode_personal_info(tenant.personal) + [
        serialize_value(v)
        for v in (tenant.password, tenant.gender, tenant.preferred_price, tenant.preferred_suburb)
    ]


def decode_tenant(fields: Sequence[str]) -> Tenant:
    _check_arity(fields, TENANT_ARITY, "Tenant")
    return Tenant(
        personal=decode_personal_info(fields),
        password=fields[4],
        gender=_parse_enum(Gender, fields[5]),
        preferred_price=_parse_float(fields[6], "preferred price"),
        preferred_suburb=fields[7],
    )


# --- Property ---


def encode_property(prop: Property) -> list[str]:
    return [
        serialize_value(v)
        for v in (
            prop.property_id,
            prop.address,
            prop.suburb,
            prop.state,
            prop.zip_code,
            prop.is_furnished,
            prop.property_type,
            prop.price,
            prop.app_form_url,
            prop.inspection_time,
            prop.description,
            prop.is_off_market,
            prop.date_added,
        )
    ]


def decode_property(fields: Sequence[str]) -> Property:
    _check_arity(fields, PROPERTY_ARITY, "Property")
    return Property(
        property_id=_parse_int(fields[0], "property ID"),
        address=fields[1],
        suburb=fields[2],
        state=fields[3],
        zip_code=fields[4],
        is_furnished=_parse_bool(fields[5]),
        property_type=_parse_enum(PropertyType, fields[6]),
        price=_parse_float(fields[7], "price"),
        app_form_url=fields[8],
        inspection_time=_parse_timestamp(fields[9], "inspection time"),
        description=fields[10],
        is_off_market=_parse_bool(fields[11]),
        date_added=_parse_timestamp(fields[12], "date added"),
    )


# --- Application ---


def encode_application(application: Application) -> list[str]:
    return encode_personal_info(application.personal) + [
        serialize_value(v)
        for v in (
            application.saving,
            application.property_id,
            application.date_submitted,
            application.application_status,
        )
    ]


def decode_application(fields: Sequence[str]) -> Application:
    _check_arity(fields, APPLICATION_ARITY, "Application")
    return Application(
        personal=decode_personal_info(fields),
        saving=_parse_float(fields[4], "saving"),
        property_id=_parse_int(fields[5], "property ID"),
        date_submitted=_parse_timestamp(fields[6], "date submitted"),
        application_status=_parse_enum(ApplicationStatus, fields[7]),
    )


# --- Wishlist ---


def encode_wishlist(entry: Wishlist) -> list[str]:
    return [serialize_value(v) for v in (entry.property_id, entry.tenant_email, entry.date_added)]


def decode_wishlist(fields: Sequence[str]) -> Wishlist:
    _check_arity(fields, WISHLIST_ARITY, "Wishlist")
    return Wishlist(
        property_id=_parse_int(fields[0], "property ID"),
        tenant_email=fields[1],
        date_added=_parse_timestamp(fields[2], "date added"),
    )


@dataclass(frozen=True)
class RecordCodec(Generic[T]):
    """Encoder/decoder pair for one record type."""

    name: str
    arity: int
    encode: Callable[[T], list[str]]
    decode: Callable[[Sequence[str]], T]


TENANT_CODEC: RecordCodec[Tenant] = RecordCodec("tenant", TENANT_ARITY, encode_tenant, decode_tenant)
PROPERTY_CODEC: RecordCodec[Property] = RecordCodec(
    "property", PROPERTY_ARITY, encode_property, decode_property
)
APPLICATION_CODEC: RecordCodec[Application] = RecordCodec(
    "application", APPLICATION_ARITY, encode_application, decode_application
)
WISHLIST_CODEC: RecordCodec[Wishlist] = RecordCodec(
    "wishlist", WISHLIST_ARITY, encode_wishlist, decode_wishlist
)
