"""Rent figures derived from a weekly price."""


def fortnightly_rent(weekly_rent: float) -> float:
    return weekly_rent * 2


def monthly_rent(weekly_rent: float) -> float:
    """Monthly rent on a 30-day month."""
    return weekly_rent / 7 * 30
