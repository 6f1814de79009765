"""
Enumerations for forecasting methods and trend labels.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum
from typing import List

from config import TREND_DOWN, TREND_STABLE, TREND_UP


class Method(str, Enum):
    # declaration order is the tie-break order used by model selection
    moving_average = "Moving Average"
    exponential_smoothing = "Exponential Smoothing"
    linear_regression = "Linear Regression"
    insufficient_data = "Insufficient Data"

    @classmethod
    def candidates(cls) -> List[Method]:
        return [m for m in cls if m is not cls.insufficient_data]


class Trend(str, Enum):
    up = TREND_UP
    down = TREND_DOWN
    stable = TREND_STABLE

    @classmethod
    def from_growth(cls, growth_rate: float) -> Trend:
        from config import settings

        if growth_rate > settings.trend_threshold_pct:
            return cls.up
        if growth_rate < -settings.trend_threshold_pct:
            return cls.down
        return cls.stable
