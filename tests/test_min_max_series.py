import pytest

from chartkit.min_max_series import MaxSeries, MinSeries
from chartkit.providers import ArrayValues

XS = [10, 20, 30, 40, 50]
YS = [3, 1, 4, 1, 5]


def _inner():
    return ArrayValues(XS, YS)


def test_min_series_is_flat_at_minimum():
    series = MinSeries(inner_series=_inner())
    points = [series.get_values(i) for i in range(len(series))]
    assert [x for x, _ in points] == [float(x) for x in XS]
    assert {y for _, y in points} == {float(min(YS))}


def test_max_series_is_flat_at_maximum():
    series = MaxSeries(inner_series=_inner())
    points = [series.get_values(i) for i in range(len(series))]
    assert [x for x, _ in points] == [float(x) for x in XS]
    assert {y for _, y in points} == {float(max(YS))}


def test_min_not_above_max():
    inner = _inner()
    low = MinSeries(inner_series=inner).get_values(0)[1]
    high = MaxSeries(inner_series=inner).get_values(0)[1]
    assert low <= high


def test_length_follows_inner():
    assert len(MinSeries(inner_series=_inner())) == len(XS)
    assert len(MaxSeries(inner_series=_inner())) == len(XS)


def test_value_is_cached():
    inner = _inner()
    series = MaxSeries(inner_series=inner)
    first = series.get_values(0)[1]
    inner.yvalues[0] = 100.0
    assert series.get_values(0)[1] == first


@pytest.mark.parametrize("cls", [MinSeries, MaxSeries])
def test_validate_requires_inner(cls):
    with pytest.raises(ValueError):
        cls().validate()
    with pytest.raises(ValueError):
        cls().get_values(0)