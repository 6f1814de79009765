"""
Test cases for request validation and response serialisation models.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import numpy as np
import pytest
from pydantic import ValidationError

from config import settings
from forecaster import generate_forecast, project_cash_flow
from forecaster.enums import Method
from forecaster.schemas import (
    CashFlowModel,
    CashFlowRequest,
    ForecastPointModel,
    ForecastRequest,
    ForecastResultModel,
)


def test_forecast_request_defaults_and_aliases():
    req = ForecastRequest.model_validate({"series": [{"period": "a", "value": 1}], "horizonDays": 4})
    assert req.horizon_days == 4
    assert req.confidence_level == 0.95
    assert req.points()[0].value == 1.0


def test_forecast_request_rejects_duplicates_and_bounds():
    with pytest.raises(ValidationError):
        ForecastRequest(series=[{"period": "a", "value": 1}, {"period": "a", "value": 2}])
    with pytest.raises(ValidationError):
        ForecastRequest(horizon_days=-1)
    with pytest.raises(ValidationError):
        ForecastRequest(confidence_level=1.0)
    with pytest.raises(ValidationError):
        ForecastRequest(horizon_days=settings.forecast_max_horizon + 1)


def test_cashflow_request_validation():
    assert CashFlowRequest().outflow_ratio == 0.85
    with pytest.raises(ValidationError):
        CashFlowRequest(outflow_ratio=-1)


def test_result_model_round_trip(daily_series):
    res = generate_forecast(daily_series, 3)
    model = ForecastResultModel.from_result(res)
    assert model.method == res.method
    dumped = model.model_dump(by_alias=True, mode="json")
    assert dumped == res.to_dict()


def test_result_model_accuracy_is_integral(daily_series):
    dumped = ForecastResultModel.from_result(generate_forecast(daily_series, 3)).model_dump(by_alias=True)
    assert type(dumped["accuracy"]) is int
    with pytest.raises(ValidationError):
        ForecastResultModel(
            historical=[], forecast=[], accuracy=50.5, method=Method.moving_average,
            trend="up", growth_rate=0.0,
        )


def test_result_model_rejects_out_of_range_accuracy():
    with pytest.raises(ValidationError):
        ForecastResultModel(
            historical=[], forecast=[], accuracy=101, method=Method.moving_average,
            trend="up", growth_rate=0.0,
        )


def test_numpy_values_serialise():
    p = ForecastPointModel(period="x", value=np.float64(1.5), lower=1.0, upper=np.float64(2), is_forecast=True)
    assert p.model_dump(by_alias=True) == {
        "period": "x", "value": 1.5, "lower": 1.0, "upper": 2.0, "isForecast": True,
    }


def test_cashflow_model(daily_series):
    proj = project_cash_flow(daily_series, 2)
    dumped = CashFlowModel.from_projection(proj).model_dump(by_alias=True, mode="json")
    assert dumped == proj.to_dict()
