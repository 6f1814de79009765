"""
Method library: the three extrapolation primitives and dispatch by
:class:`~forecaster.enums.Method`.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Callable, Dict, Sequence

import numpy as np

from forecaster.enums import Method
from forecaster.methods.regression import linear_regression, ols
from forecaster.methods.smoothing import default_window, exponential_smoothing, moving_average


def _fit_moving_average(vals: Sequence[float]) -> np.ndarray:
    return moving_average(vals, default_window(len(vals)))


def _fit_exponential_smoothing(vals: Sequence[float]) -> np.ndarray:
    return exponential_smoothing(vals)


FITTERS: Dict[Method, Callable[[Sequence[float]], np.ndarray]] = {
    Method.moving_average: _fit_moving_average,
    Method.exponential_smoothing: _fit_exponential_smoothing,
    Method.linear_regression: linear_regression,
}


def fit(method: Method, vals: Sequence[float]) -> np.ndarray:
    """Fitted/smoothed representation of ``vals`` under ``method``."""
    try:
        fitter = FITTERS[method]
    except KeyError:
        raise ValueError(f"{method.value!r} has no fitted representation") from None
    return fitter(vals)


__all__ = [
    "FITTERS",
    "fit",
    "default_window",
    "moving_average",
    "exponential_smoothing",
    "linear_regression",
    "ols",
]
