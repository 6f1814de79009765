"""
Ordinary least squares of value against index position, solved in closed form
from running sums, and the fitted line it produces over the input domain.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np


def ols(vals: Sequence[float]) -> Tuple[float, float]:
    v = np.asarray(vals, dtype=float)
    n = len(v)
    if n == 0:
        return 0.0, 0.0
    x = np.arange(n, dtype=float)
    sum_x = float(np.sum(x))
    sum_y = float(np.sum(v))
    sum_xy = float(np.sum(x * v))
    sum_x2 = float(np.sum(x * x))
    denom = n * sum_x2 - sum_x * sum_x
    slope = (n * sum_xy - sum_x * sum_y) / denom if denom != 0 else 0.0
    intercept = (sum_y - slope * sum_x) / n
    return slope, intercept


def linear_regression(vals: Sequence[float]) -> np.ndarray:
    slope, intercept = ols(vals)
    return slope * np.arange(len(vals), dtype=float) + intercept
