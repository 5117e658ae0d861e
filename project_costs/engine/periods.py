"""Canonical period keys for cost grouping.

Two input shapes are understood, ``YYYY-MM`` and ``MM/YYYY``. Both become
``YYYY-MM`` (month granularity) or ``YYYY`` (year granularity). Canonical keys
are zero-padded and big-endian, so plain string ordering is chronological.
Anything else is returned untouched and grouped by its literal text.
"""
from __future__ import annotations

import re

from ..data_model import Granularity

_RE_YYYY_MM = re.compile(r"[0-9]{4}-[0-9]{2}")
_RE_MM_SLASH_YYYY = re.compile(r"([0-9]{2})/([0-9]{4})")


def normalize_period(period: str, granularity: Granularity | str = Granularity.MONTH) -> str:
    granularity = Granularity.parse(granularity)
    slash = _RE_MM_SLASH_YYYY.fullmatch(period)
    if slash:
        month, year = slash.groups()
        if granularity is Granularity.YEAR:
            return year
        return f"{year}-{month}"
    if granularity is Granularity.YEAR and _RE_YYYY_MM.fullmatch(period):
        return period[:4]
    return period
