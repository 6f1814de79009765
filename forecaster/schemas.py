"""
Request and response models for forecast payloads exchanged with reporting
layers. Responses mirror the JSON contract (camelCase keys) and serialise numpy
scalars transparently.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, List

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer
from pydantic.alias_generators import to_camel

from config import settings
from forecaster.cashflow import CashFlowProjection
from forecaster.engine import ForecastResult
from forecaster.enums import Method, Trend
from forecaster.series import TimeSeriesPoint


def _coerce(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _coerce(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_coerce(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    return obj


class NpModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @model_serializer(mode="wrap")
    def _serialize(self, handler: Any) -> Any:
        return _coerce(handler(self))


class TimeSeriesPointModel(NpModel):

    period: str
    value: float

    def to_point(self) -> TimeSeriesPoint:
        return TimeSeriesPoint(period=self.period, value=self.value)


class ForecastPointModel(NpModel):

    period: str
    value: float
    lower: float
    upper: float
    is_forecast: bool


class ForecastResultModel(NpModel):

    historical: List[ForecastPointModel]
    forecast: List[ForecastPointModel]
    accuracy: int = Field(ge=0, le=100)
    method: Method
    trend: Trend
    growth_rate: float

    @classmethod
    def from_result(cls, result: ForecastResult) -> ForecastResultModel:
        return cls.model_validate(result.to_dict())


class BalancePointModel(NpModel):

    period: str
    balance: float
    inflow: float
    outflow: float


class CashFlowModel(NpModel):

    historical: List[TimeSeriesPointModel]
    inflow_forecast: List[ForecastPointModel]
    outflow_forecast: List[ForecastPointModel]
    balance_projection: List[BalancePointModel]
    low_liquidity_warning: bool

    @classmethod
    def from_projection(cls, projection: CashFlowProjection) -> CashFlowModel:
        return cls.model_validate(projection.to_dict())


def _unique_periods(series: List[TimeSeriesPointModel]) -> List[TimeSeriesPointModel]:
    seen = set()
    for point in series:
        if point.period in seen:
            raise ValueError(f"duplicate period {point.period!r}")
        seen.add(point.period)
    return series


class ForecastRequest(NpModel):

    series: List[TimeSeriesPointModel] = Field(default_factory=list)
    horizon_days: int = Field(default=30, ge=0)
    confidence_level: float = Field(default=0.95, gt=0.0, lt=1.0)

    @field_validator("series")
    @classmethod
    def _check_series(cls, v: List[TimeSeriesPointModel]) -> List[TimeSeriesPointModel]:
        return _unique_periods(v)

    @field_validator("horizon_days")
    @classmethod
    def _check_horizon(cls, v: int) -> int:
        if v > settings.forecast_max_horizon:
            raise ValueError(f"horizon_days must be at most {settings.forecast_max_horizon}")
        return v

    def points(self) -> List[TimeSeriesPoint]:
        return [p.to_point() for p in self.series]


class CashFlowRequest(NpModel):

    series: List[TimeSeriesPointModel] = Field(default_factory=list)
    horizon_days: int = Field(default=30, ge=0)
    outflow_ratio: float = Field(default=0.85, ge=0.0)

    @field_validator("series")
    @classmethod
    def _check_series(cls, v: List[TimeSeriesPointModel]) -> List[TimeSeriesPointModel]:
        return _unique_periods(v)

    def points(self) -> List[TimeSeriesPoint]:
        return [p.to_point() for p in self.series]
