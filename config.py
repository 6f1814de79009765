"""
Constants and configuration for Forecaster.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import Dict

from pydantic_settings import BaseSettings


FORECASTER_LOG_LEVEL = os.getenv("FORECASTER_LOG_LEVEL", "INFO").upper()

# z-score tiers keyed by the lowest confidence level they cover; levels below
# every tier fall back to settings.forecast_z_default (the 0.90 tier)
CONFIDENCE_Z_SCORES: Dict[float, float] = {
    0.99: 2.576,
    0.95: 1.96,
}

TREND_UP = "up"
TREND_DOWN = "down"
TREND_STABLE = "stable"

# decimal places used when rounding output series
VALUE_PRECISION = 2


class Settings(BaseSettings):
    log_level: str = FORECASTER_LOG_LEVEL

    # request defaults
    horizon_days: int = 30
    confidence_level: float = 0.95
    forecast_max_horizon: int = 365

    # below this many points the degenerate "Insufficient Data" result is returned
    forecast_min_length: int = 3

    # method library; fixed policy, not tuned per series
    forecast_ma_max_window: int = 7
    forecast_ema_alpha: float = 0.3

    # holdout backtest
    forecast_holdout_fraction: float = 0.2
    forecast_holdout_min_size: int = 3
    forecast_min_train_size: int = 2

    # number of trailing points re-linearised when projecting forward
    forecast_projection_tail: int = 7

    # confidence bands
    forecast_z_default: float = 1.645
    forecast_confidence_tolerance: float = 1e-9

    # accuracy reported when the series mean is not positive
    forecast_accuracy_fallback: int = 50

    # trend classification
    trend_window: int = 7
    trend_threshold_pct: float = 3.0

    # cash-flow projection
    cashflow_outflow_ratio: float = 0.85
    cashflow_max_horizon: int = 90

    model_config = {
        "env_prefix": "FORECASTER_",
        "extra": "ignore",
    }


settings = Settings()
