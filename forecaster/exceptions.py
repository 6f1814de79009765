# forecaster/exceptions.py

class ForecastError(Exception):
    pass


class InvalidSeries(ForecastError):
    pass


class InvalidParameter(ForecastError):
    pass
