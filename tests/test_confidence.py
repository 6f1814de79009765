"""
Test cases for confidence level z-scores, horizon-dependent margins and the
zero-floored forecast band.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import math

import pytest

from config import settings
from forecaster.confidence import Band, band, margin, z_score


def test_z_score_tiers():
    assert z_score(0.99) == 2.576
    assert z_score(0.95) == 1.96
    assert z_score(0.90) == 1.645


@pytest.mark.parametrize("level,expected", [
    (0.999, 2.576),
    (1.5, 2.576),
    (0.97, 1.96),
    (0.9899, 1.96),
    (0.95 - 1e-12, 1.96),
    (0.9499, 1.645),
    (0.8, 1.645),
    (0.0, 1.645),
])
def test_z_score_tiers_are_lower_bounds(level, expected):
    assert z_score(level) == expected


def test_z_score_never_drops_as_confidence_rises():
    levels = [0.5, 0.8, 0.9, 0.93, 0.95, 0.97, 0.99, 0.995, 0.999]
    scores = [z_score(level) for level in levels]
    assert all(b >= a for a, b in zip(scores, scores[1:]))


def test_z_score_below_tiers_uses_default(monkeypatch):
    monkeypatch.setattr(settings, "forecast_z_default", 1.5)
    assert z_score(0.9) == 1.5


def test_margin_formula():
    assert margin(10, 1.96, 1, 10) == pytest.approx(19.6 * math.sqrt(1.1))
    assert margin(0, 1.96, 5, 10) == 0


def test_margin_grows_with_horizon():
    margins = [margin(3.0, 1.96, step, 20) for step in range(1, 31)]
    assert margins[0] > 0
    assert all(b > a for a, b in zip(margins, margins[1:]))


def test_band_floors_lower_at_zero():
    b = band(5, std=10, z=1.96, step=1, n=10)
    assert b == Band(value=5.0, lower=0.0, upper=25.56)
    # the interval is tighter on the low side once the floor applies
    assert b.value - b.lower < b.upper - b.value


def test_band_zero_std():
    assert band(100.123, std=0, z=2.576, step=3, n=10) == Band(value=100.12, lower=100.12, upper=100.12)


def test_band_width_is_rounded_margin():
    widths = []
    for step in range(1, 15):
        b = band(10.004, std=1.237, z=1.96, step=step, n=7)
        m = round(margin(1.237, 1.96, step, 7), 2)
        assert b.upper - b.value == pytest.approx(m, abs=1e-9)
        widths.append(b.upper - b.value)
    assert all(b >= a - 1e-9 for a, b in zip(widths, widths[1:]))
