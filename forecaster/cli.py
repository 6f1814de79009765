#!/usr/bin/env python3

"""
Command line entry point: forecast a series or project cash flow from a JSON
file of ``{"period": ..., "value": ...}`` points and print the JSON result.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from pydantic import ValidationError

from config import settings
from forecaster.cashflow import project_cash_flow
from forecaster.engine import generate_forecast
from forecaster.exceptions import ForecastError
from forecaster.schemas import CashFlowModel, CashFlowRequest, ForecastRequest, ForecastResultModel
from forecaster.series import iter_points

log = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="forecaster", description="Forecast a numeric time series")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    sub = parser.add_subparsers(dest="command", required=True)

    fc = sub.add_parser("forecast", help="Forecast a series with confidence bounds")
    fc.add_argument("file", help="JSON file with the series, '-' for stdin")
    fc.add_argument("--horizon", type=int, default=settings.horizon_days, help="Number of periods to forecast")
    fc.add_argument(
        "--confidence",
        type=float,
        default=settings.confidence_level,
        help="Confidence level (0.90, 0.95 or 0.99)",
    )

    cf = sub.add_parser("cashflow", help="Project inflow, outflow and running balance")
    cf.add_argument("file", help="JSON file with the inflow series, '-' for stdin")
    cf.add_argument("--horizon", type=int, default=settings.horizon_days, help="Number of periods to project")
    cf.add_argument(
        "--outflow-ratio",
        type=float,
        default=settings.cashflow_outflow_ratio,
        help="Outflow estimated as this fraction of inflow",
    )
    return parser.parse_args(argv)


def _load(path: str) -> Any:
    if path == "-":
        return json.load(sys.stdin)
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)


def _run(args: argparse.Namespace) -> dict:
    series = [p.to_dict() for p in iter_points(_load(args.file))]

    if args.command == "forecast":
        req = ForecastRequest(series=series, horizon_days=args.horizon, confidence_level=args.confidence)
        result = generate_forecast(req.points(), req.horizon_days, req.confidence_level)
        log.info("forecast: %d points, method=%s accuracy=%d", len(series), result.method.value, result.accuracy)
        return ForecastResultModel.from_result(result).model_dump(by_alias=True, mode="json")

    req = CashFlowRequest(series=series, horizon_days=args.horizon, outflow_ratio=args.outflow_ratio)
    projection = project_cash_flow(req.points(), req.horizon_days, req.outflow_ratio)
    if projection.low_liquidity_warning:
        log.warning("cashflow: projected balance goes negative within %d periods", len(projection.balance_projection))
    return CashFlowModel.from_projection(projection).model_dump(by_alias=True, mode="json")


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=str(args.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )

    try:
        output = _run(args)
    except (ForecastError, ValidationError, OSError, ValueError) as exc:
        log.error("%s failed: %s", args.command, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    json.dump(output, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
