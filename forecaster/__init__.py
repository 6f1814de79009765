"""
Forecaster: adaptive forecasting of a single numeric time series with
automatic method selection and confidence bands.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from forecaster.enums import Method, Trend
from forecaster.engine import ForecastPoint, ForecastResult, generate_forecast
from forecaster.series import TimeSeriesPoint
from forecaster.cashflow import CashFlowProjection, project_cash_flow

__all__ = [
    "Method",
    "Trend",
    "ForecastPoint",
    "ForecastResult",
    "TimeSeriesPoint",
    "generate_forecast",
    "CashFlowProjection",
    "project_cash_flow",
]
