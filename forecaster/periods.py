"""
Period labels for forecast points, continuing the caller's labelling. ISO dates
advance by the spacing of the last two observations, ``YYYY-MM`` labels by
calendar months, and any other label is treated as opaque and suffixed with
the step number.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import re
from datetime import date, timedelta
from typing import List, Optional, Sequence, Tuple

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")


def _parse_date(label: str) -> Optional[date]:
    if not _DATE_RE.match(label):
        return None
    try:
        return date.fromisoformat(label)
    except ValueError:
        return None


def _parse_month(label: str) -> Optional[Tuple[int, int]]:
    m = _MONTH_RE.match(label)
    if not m:
        return None
    year, month = int(m.group(1)), int(m.group(2))
    if not 1 <= month <= 12:
        return None
    return year, month


def _opaque(last: str, horizon: int) -> List[str]:
    return [f"{last}+{i}" for i in range(1, horizon + 1)]


def _daily(periods: Sequence[str], last: date, horizon: int) -> Optional[List[str]]:
    step = 1
    if len(periods) >= 2:
        prev = _parse_date(str(periods[-2]))
        if prev is not None and (last - prev).days > 0:
            step = (last - prev).days
    try:
        return [(last + timedelta(days=step * i)).isoformat() for i in range(1, horizon + 1)]
    except OverflowError:
        return None


def _monthly(year: int, month: int, horizon: int) -> Optional[List[str]]:
    base = year * 12 + (month - 1)
    labels = []
    for i in range(1, horizon + 1):
        y, m = divmod(base + i, 12)
        if y > 9999:
            return None
        labels.append(f"{y:04d}-{m + 1:02d}")
    return labels


def next_periods(periods: Sequence[str], horizon: int) -> List[str]:
    if horizon <= 0:
        return []
    if not periods:
        return [f"+{i}" for i in range(1, horizon + 1)]

    last = str(periods[-1])
    labels: Optional[List[str]] = None

    last_date = _parse_date(last)
    if last_date is not None:
        labels = _daily(periods, last_date, horizon)
    else:
        month = _parse_month(last)
        if month is not None:
            labels = _monthly(month[0], month[1], horizon)

    return labels if labels is not None else _opaque(last, horizon)
