"""
Projection of a fitted or smoothed series forward by re-linearising its most
recent points, so lagging smoothers extrapolate along their local trend instead
of flatlining at the last value.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from config import settings
from forecaster.methods.regression import ols


def project(fitted: Sequence[float], horizon: int) -> np.ndarray:
    arr = np.asarray(fitted, dtype=float)
    if horizon <= 0:
        return np.zeros(0)
    if len(arr) < 2:
        last = float(arr[-1]) if len(arr) else 0.0
        return np.full(horizon, last)

    tail = arr[-min(settings.forecast_projection_tail, len(arr)):]
    slope, intercept = ols(tail)
    # tail indices run 0..len(tail)-1, so the first step lands on len(tail)
    steps = np.arange(len(tail), len(tail) + horizon, dtype=float)
    return slope * steps + intercept
