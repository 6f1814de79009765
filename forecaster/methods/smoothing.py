"""
Smoothing primitives for the method library: a trailing moving average that
expands over the first points of the series, and simple exponential smoothing
weighting recent observations more heavily.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from config import settings


def default_window(length: int) -> int:
    return max(1, min(settings.forecast_ma_max_window, length // 2))


def moving_average(vals: Sequence[float], window: int) -> np.ndarray:
    window = max(1, int(window))
    arr = np.asarray(vals, dtype=float)
    result = np.zeros(len(arr))
    for i in range(len(arr)):
        start = max(0, i - window + 1)
        result[i] = np.mean(arr[start : i + 1])
    return result


def exponential_smoothing(vals: Sequence[float], alpha: float | None = None) -> np.ndarray:
    if alpha is None:
        alpha = settings.forecast_ema_alpha
    arr = np.asarray(vals, dtype=float)
    result = np.zeros(len(arr))
    if len(arr) == 0:
        return result
    result[0] = arr[0]
    for i in range(1, len(arr)):
        result[i] = alpha * arr[i] + (1 - alpha) * result[i - 1]
    return result
