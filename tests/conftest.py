import os
import sys
import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture
def daily_series():
    """Fourteen days of gently rising volume."""
    vals = [100, 102, 98, 105, 110, 108, 115, 120, 118, 125, 130, 128, 135, 140]
    return [{"period": f"2024-01-{i + 1:02d}", "value": v} for i, v in enumerate(vals)]


@pytest.fixture
def linear_series():
    return [{"period": f"p{i:02d}", "value": 100 + 10 * i} for i in range(30)]


@pytest.fixture
def flat_series():
    return [{"period": f"p{i:02d}", "value": 50} for i in range(20)]
