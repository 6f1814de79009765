"""
Model selection by holdout backtest: every candidate method is fitted on the
leading part of the series, projected over the withheld tail and scored by mean
absolute error. The lowest error wins; ties go to the earliest method in
:class:`~forecaster.enums.Method` declaration order.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Sequence

import numpy as np

from config import settings
from forecaster.enums import Method
from forecaster.methods import fit
from forecaster.projection import project

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Selection:
    method: Method
    mae: float
    scores: Dict[Method, float]
    test_size: int


def holdout_size(length: int) -> int:
    size = max(settings.forecast_holdout_min_size, int(length * settings.forecast_holdout_fraction))
    # the training slice keeps at least forecast_min_train_size points
    return max(1, min(size, length - settings.forecast_min_train_size))


def mean_absolute_error(actual: Sequence[float], predicted: Sequence[float]) -> float:
    n = min(len(actual), len(predicted))
    if n == 0:
        return math.inf
    a = np.asarray(actual[:n], dtype=float)
    p = np.asarray(predicted[:n], dtype=float)
    return float(np.mean(np.abs(a - p)))


def select_method(vals: Sequence[float]) -> Selection:
    arr = np.asarray(vals, dtype=float)
    test_size = holdout_size(len(arr))
    train, test = arr[:-test_size], arr[-test_size:]

    candidates = Method.candidates()
    best = candidates[0]
    best_mae = math.inf
    scores: Dict[Method, float] = {}

    for method in candidates:
        predicted = project(fit(method, train), test_size)
        mae = mean_absolute_error(test, predicted)
        scores[method] = mae
        if mae < best_mae:
            best, best_mae = method, mae

    log.debug(
        "select_method n=%d test_size=%d scores=%s selected=%s",
        len(arr), test_size, {m.value: round(s, 4) for m, s in scores.items()}, best.value,
    )
    return Selection(method=best, mae=best_mae, scores=scores, test_size=test_size)
