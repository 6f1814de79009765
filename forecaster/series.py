"""
Input series handling: the point type, strict coercion used by the engine and a
tolerant reader for loosely structured payloads (JSON files, API bodies) that
skips malformed entries instead of failing the whole series.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Mapping

from forecaster.exceptions import InvalidSeries

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimeSeriesPoint:
    period: str
    value: float

    def to_dict(self) -> dict:
        return {"period": self.period, "value": self.value}


def _to_value(raw: Any) -> float:
    if isinstance(raw, bool) or raw is None:
        raise InvalidSeries(f"value must be numeric, got {raw!r}")
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise InvalidSeries(f"value must be numeric, got {raw!r}") from None
    if not math.isfinite(value):
        raise InvalidSeries(f"value must be finite, got {raw!r}")
    return value


def to_point(item: Any) -> TimeSeriesPoint:
    if isinstance(item, TimeSeriesPoint):
        return TimeSeriesPoint(period=str(item.period), value=_to_value(item.value))
    if isinstance(item, Mapping):
        if "period" not in item or "value" not in item:
            raise InvalidSeries(f"point needs 'period' and 'value': {dict(item)!r}")
        return TimeSeriesPoint(period=str(item["period"]), value=_to_value(item["value"]))
    if isinstance(item, (tuple, list)) and len(item) == 2:
        return TimeSeriesPoint(period=str(item[0]), value=_to_value(item[1]))
    raise InvalidSeries(f"unsupported point {item!r}")


def coerce_points(series: Iterable[Any]) -> List[TimeSeriesPoint]:
    if series is None:
        return []
    if isinstance(series, (str, bytes, Mapping)):
        raise InvalidSeries(f"series must be a sequence of points, got {type(series).__name__}")
    return [to_point(item) for item in series]


def iter_points(payload: Any) -> Iterator[TimeSeriesPoint]:
    if isinstance(payload, Mapping):
        payload = payload.get("series")
    if not isinstance(payload, list):
        log.warning("iter_points expected a list of points, got %s", type(payload).__name__)
        return

    for idx, item in enumerate(payload):
        try:
            yield to_point(item)
        except InvalidSeries as exc:
            log.warning("iter_points: skipping entry %d: %s", idx, exc)


def values_of(points: Iterable[TimeSeriesPoint]) -> List[float]:
    return [p.value for p in points]
