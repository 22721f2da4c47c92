"""Terminal rental-property management over flat CSV records."""

__version__ = "0.1.0"
