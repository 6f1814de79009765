"""
Confidence bands for forecast steps. The margin scales the historical standard
deviation by the z-score of the requested confidence level and widens with the
distance from the last observation; the lower bound is floored at zero because
forecast metrics (counts, money) are non-negative.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from config import CONFIDENCE_Z_SCORES, VALUE_PRECISION, settings


@dataclass(frozen=True)
class Band:
    value: float
    lower: float
    upper: float


def z_score(confidence_level: float) -> float:
    tolerance = settings.forecast_confidence_tolerance
    for level in sorted(CONFIDENCE_Z_SCORES, reverse=True):
        if confidence_level >= level - tolerance:
            return CONFIDENCE_Z_SCORES[level]
    return settings.forecast_z_default


def margin(std: float, z: float, step: int, n: int) -> float:
    spread = step / n if n > 0 else 0.0
    return std * z * math.sqrt(1.0 + spread)


def band(value: float, std: float, z: float, step: int, n: int) -> Band:
    v = round(float(value), VALUE_PRECISION)
    # margin rounded on its own so upper - value never shrinks step to step
    m = round(margin(std, z, step, n), VALUE_PRECISION)
    return Band(
        value=v,
        lower=round(max(0.0, v - m), VALUE_PRECISION),
        upper=round(v + m, VALUE_PRECISION),
    )
