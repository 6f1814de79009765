"""
Cash-flow projection built on the forecast engine: inflow is forecast from the
observed series, outflow from the same series scaled by an estimated outflow
ratio, and the running balance of the two forecasts flags low liquidity.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Tuple

from config import VALUE_PRECISION, settings
from forecaster.engine import ForecastPoint, check_horizon, generate_forecast
from forecaster.exceptions import InvalidParameter
from forecaster.series import TimeSeriesPoint, coerce_points


@dataclass(frozen=True)
class BalancePoint:
    period: str
    balance: float
    inflow: float
    outflow: float

    def to_dict(self) -> Dict[str, Any]:
        return {"period": self.period, "balance": self.balance, "inflow": self.inflow, "outflow": self.outflow}


@dataclass(frozen=True)
class CashFlowProjection:
    historical: Tuple[TimeSeriesPoint, ...]
    inflow_forecast: Tuple[ForecastPoint, ...]
    outflow_forecast: Tuple[ForecastPoint, ...]
    balance_projection: Tuple[BalancePoint, ...]
    low_liquidity_warning: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "historical": [p.to_dict() for p in self.historical],
            "inflowForecast": [p.to_dict() for p in self.inflow_forecast],
            "outflowForecast": [p.to_dict() for p in self.outflow_forecast],
            "balanceProjection": [b.to_dict() for b in self.balance_projection],
            "lowLiquidityWarning": self.low_liquidity_warning,
        }


def project_cash_flow(
    series: Iterable[Any],
    horizon_days: int | None = None,
    outflow_ratio: float | None = None,
) -> CashFlowProjection:
    if horizon_days is None:
        horizon_days = settings.horizon_days
    if outflow_ratio is None:
        outflow_ratio = settings.cashflow_outflow_ratio
    if outflow_ratio < 0:
        raise InvalidParameter(f"outflow_ratio must not be negative, got {outflow_ratio}")
    horizon = min(check_horizon(horizon_days), settings.cashflow_max_horizon)

    inflow = coerce_points(series)
    outflow = [TimeSeriesPoint(period=p.period, value=p.value * outflow_ratio) for p in inflow]

    inflow_result = generate_forecast(inflow, horizon)
    outflow_result = generate_forecast(outflow, horizon)

    balance = 0.0
    projection = []
    for f_in, f_out in zip(inflow_result.forecast, outflow_result.forecast):
        balance += f_in.value - f_out.value
        projection.append(BalancePoint(
            period=f_in.period,
            balance=round(balance, VALUE_PRECISION),
            inflow=f_in.value,
            outflow=f_out.value,
        ))

    return CashFlowProjection(
        historical=tuple(inflow),
        inflow_forecast=inflow_result.forecast,
        outflow_forecast=outflow_result.forecast,
        balance_projection=tuple(projection),
        low_liquidity_warning=any(b.balance < 0 for b in projection),
    )
