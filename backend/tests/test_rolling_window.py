import math
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from rolling_avg.simulation.rolling_window import RollingAverage  # noqa: E402


def test_rejects_empty_window():
    with pytest.raises(ValueError):
        RollingAverage(0)


def test_mean_over_partial_and_full_window():
    window = RollingAverage(3)
    assert window.value is None

    assert window.add(1.0) == 1.0
    assert window.add(2.0) == 1.5
    assert window.add(3.0) == 2.0
    assert len(window) == 3

    # oldest sample (1.0) drops out
    assert window.add(7.0) == 4.0
    assert len(window) == 3
    assert window.value == 4.0


def test_reset_clears_samples():
    window = RollingAverage(2)
    window.add(5.0)
    window.reset()

    assert len(window) == 0
    assert window.value is None
    assert window.add(1.0) == 1.0


def test_non_finite_sample_leaves_with_the_window():
    window = RollingAverage(1)

    assert math.isnan(window.add(float("nan")))
    assert window.add(1.0) == 1.0

    window = RollingAverage(2)
    window.add(float("inf"))
    window.add(2.0)
    assert window.add(4.0) == 3.0


def test_large_sample_leaves_no_rounding_residue():
    window = RollingAverage(2)
    window.add(1e16)
    window.add(1.0)

    assert window.add(1.0) == 1.0
    assert window.value == 1.0
