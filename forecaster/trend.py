"""
Trend classification over the most recent observations: the mean of the later
half of the window is compared with the earlier half and the relative change is
labelled against fixed percentage thresholds.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from config import settings
from forecaster.enums import Trend


@dataclass(frozen=True)
class TrendSignal:
    trend: Trend
    growth_rate: float


def growth_rate(vals: Sequence[float]) -> float:
    arr = np.asarray(vals, dtype=float)
    if len(arr) < 2:
        return 0.0
    window = arr[-min(settings.trend_window, len(arr)):]
    mid = len(window) // 2
    avg_first = float(np.mean(window[:mid]))
    avg_second = float(np.mean(window[mid:]))
    if avg_first <= 0:
        return 0.0
    return round((avg_second - avg_first) / avg_first * 100.0, 2)


def classify(vals: Sequence[float]) -> TrendSignal:
    rate = growth_rate(vals)
    return TrendSignal(trend=Trend.from_growth(rate), growth_rate=rate)
