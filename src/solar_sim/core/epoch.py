"""
Epoch / time conversion.

Every propagator call takes a continuous "days since J2000" coordinate.
This module maps wall-clock instants onto that axis and back.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from solar_sim.core.constants import J2000_EPOCH, JD_J2000, MS_PER_DAY

_ONE_DAY = timedelta(days=1)
_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# J2000 expressed on the Unix millisecond timeline
J2000_EPOCH_MS: int = (J2000_EPOCH - _UNIX_EPOCH) // timedelta(milliseconds=1)


def _as_utc(instant: datetime) -> datetime:
    # Naive datetimes are taken to be UTC
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant


def days_since_epoch(instant: datetime) -> float:
    """Days (fractional) between J2000 and `instant`."""
    return (_as_utc(instant) - J2000_EPOCH) / _ONE_DAY


def instant_from_days(days: float) -> datetime:
    """Inverse of days_since_epoch; always returns a UTC-aware datetime."""
    return J2000_EPOCH + timedelta(days=days)


def days_since_epoch_from_unix_ms(unix_ms: float) -> float:
    return (unix_ms - J2000_EPOCH_MS) / MS_PER_DAY


def unix_ms_from_days(days: float) -> float:
    return J2000_EPOCH_MS + days * MS_PER_DAY


def days_since_epoch_now() -> float:
    return days_since_epoch(datetime.now(timezone.utc))


def days_from_julian_date(jd: float) -> float:
    """
    Place an absolute Julian Date (e.g. a perihelion passage time) on the
    days-since-J2000 axis.
    """
    return jd - JD_J2000
