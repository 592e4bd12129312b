"""
Day-count helpers for turning calendar dates into year fractions.
"""

from __future__ import annotations
import datetime as _dt

DEFAULT_BASIS = "ACT/365"

_DAYS_PER_YEAR = {
    "ACT/365": 365.0,
    "ACT/252": 252.0,  # trading days approx
}


def yearfrac(start: _dt.date, end: _dt.date, basis: str = DEFAULT_BASIS) -> float:
    """
    Compute year fraction between two dates.
    Supported: ACT/365 (default), ACT/252 (trading days approx).
    Negative when end is before start.
    """
    try:
        denom = _DAYS_PER_YEAR[basis.upper()]
    except KeyError:
        raise ValueError(f"Unsupported day-count basis: {basis!r}") from None
    return (end - start).days / denom
