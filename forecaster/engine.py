"""
Forecast facade: picks the best extrapolation method for a series by holdout
backtest, projects it forward with widening confidence bands, and reports the
recent trend and a backtest-based accuracy score.

The facade is a pure function of its inputs. Series shorter than the minimum
length get a defined "Insufficient Data" result rather than an error.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple

import numpy as np

from config import VALUE_PRECISION, settings
from forecaster.confidence import band, z_score
from forecaster.enums import Method, Trend
from forecaster.exceptions import InvalidParameter
from forecaster.methods import fit
from forecaster.periods import next_periods
from forecaster.projection import project
from forecaster.selection import select_method
from forecaster.series import TimeSeriesPoint, coerce_points, values_of
from forecaster.trend import classify

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ForecastPoint:
    period: str
    value: float
    lower: float
    upper: float
    is_forecast: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "period": self.period,
            "value": self.value,
            "lower": self.lower,
            "upper": self.upper,
            "isForecast": self.is_forecast,
        }


@dataclass(frozen=True)
class ForecastResult:
    historical: Tuple[ForecastPoint, ...]
    forecast: Tuple[ForecastPoint, ...]
    accuracy: int
    method: Method
    trend: Trend
    growth_rate: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "historical": [p.to_dict() for p in self.historical],
            "forecast": [p.to_dict() for p in self.forecast],
            "accuracy": self.accuracy,
            "method": self.method.value,
            "trend": self.trend.value,
            "growthRate": self.growth_rate,
        }


def check_horizon(horizon_days: Any) -> int:
    if isinstance(horizon_days, bool) or not isinstance(horizon_days, (int, np.integer)):
        raise InvalidParameter(f"horizon_days must be an integer, got {horizon_days!r}")
    if horizon_days < 0:
        raise InvalidParameter(f"horizon_days must not be negative, got {horizon_days}")
    return int(horizon_days)


def _insufficient(points: List[TimeSeriesPoint], horizon: int) -> ForecastResult:
    last = points[-1].value if points else 0.0
    periods = next_periods([p.period for p in points], horizon)
    return ForecastResult(
        historical=tuple(
            ForecastPoint(period=p.period, value=p.value, lower=p.value, upper=p.value, is_forecast=False)
            for p in points
        ),
        forecast=tuple(
            ForecastPoint(period=period, value=last, lower=0.0, upper=last * 2, is_forecast=True)
            for period in periods
        ),
        accuracy=0,
        method=Method.insufficient_data,
        trend=Trend.stable,
        growth_rate=0.0,
    )


def _accuracy(mae: float, vals: np.ndarray) -> int:
    mean = float(np.mean(vals))
    if mean <= 0:
        return settings.forecast_accuracy_fallback
    score = 100.0 - (mae / mean) * 100.0
    return int(round(max(0.0, min(100.0, score))))


def generate_forecast(
    series: Iterable[Any],
    horizon_days: int | None = None,
    confidence_level: float | None = None,
) -> ForecastResult:
    if horizon_days is None:
        horizon_days = settings.horizon_days
    if confidence_level is None:
        confidence_level = settings.confidence_level
    horizon = check_horizon(horizon_days)
    points = coerce_points(series)

    if len(points) < settings.forecast_min_length:
        log.debug("generate_forecast: %d points, returning insufficient-data result", len(points))
        return _insufficient(points, horizon)

    vals = np.array(values_of(points), dtype=float)
    n = len(vals)

    selection = select_method(vals)
    projected = np.maximum(project(fit(selection.method, vals), horizon), 0.0)

    std = float(np.std(vals))
    z = z_score(confidence_level)
    periods = next_periods([p.period for p in points], horizon)

    forecast = []
    for step, (period, value) in enumerate(zip(periods, projected), start=1):
        b = band(value, std, z, step, n)
        forecast.append(ForecastPoint(period=period, value=b.value, lower=b.lower, upper=b.upper, is_forecast=True))

    historical = []
    for p in points:
        v = round(p.value, VALUE_PRECISION)
        historical.append(ForecastPoint(period=p.period, value=v, lower=v, upper=v, is_forecast=False))

    signal = classify(vals)
    accuracy = _accuracy(selection.mae, vals)

    log.debug(
        "generate_forecast n=%d horizon=%d method=%s accuracy=%d trend=%s growth=%.2f",
        n, horizon, selection.method.value, accuracy, signal.trend.value, signal.growth_rate,
    )
    return ForecastResult(
        historical=tuple(historical),
        forecast=tuple(forecast),
        accuracy=accuracy,
        method=selection.method,
        trend=signal.trend,
        growth_rate=signal.growth_rate,
    )
