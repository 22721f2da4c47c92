"""Custom exception hierarchy for rental-space."""


class RentalSpaceError(Exception):
    """Base exception for all rental-space errors."""


class RecordDecodeError(RentalSpaceError):
    """Raised when a persisted row cannot be decoded into a record."""


class StoreError(RentalSpaceError):
    """Raised when a record file cannot be written."""


class EntityNotFoundError(RentalSpaceError):
    """Raised when a referenced entity does not exist."""


class ReferentialIntegrityError(EntityNotFoundError):
    """Raised when a foreign key reference is violated."""


class DuplicateEntityError(RentalSpaceError):
    """Raised when adding a record whose key already exists."""


class InvalidEntityStateError(RentalSpaceError):
    """Raised when an entity is in an invalid state for the operation."""


class ApplicationRejectedError(InvalidEntityStateError):
    """Raised when a tenant re-applies for a property that rejected them."""


class NotAuthenticatedError(InvalidEntityStateError):
    """Raised when a tenant-only operation runs without a logged-in tenant."""


class InvalidInputError(RentalSpaceError):
    """Raised when user input fails validation."""


class ConfigurationError(RentalSpaceError):
    """Raised when configuration is invalid or missing."""
