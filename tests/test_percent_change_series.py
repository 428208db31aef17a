import pytest

from chartkit.percent_change_series import PercentChangeSeries
from chartkit.providers import ArrayValues


def _linear():
    values = [float(v) for v in range(1, 11)]
    return ArrayValues(values, list(values))


def test_percentage_difference_series():
    pcs = PercentChangeSeries(name="Test Series", inner_series=_linear())
    assert pcs.name == "Test Series"
    assert len(pcs) == 10

    x0, y0 = pcs.get_values(0)
    assert x0 == 1.0
    assert y0 == 0

    xn, yn = pcs.get_values(9)
    assert xn == 10.0
    assert yn == 9.0

    xn, yn = pcs.get_last_values()
    assert xn == 10.0
    assert yn == 9.0


def test_first_values_come_from_inner():
    pcs = PercentChangeSeries(inner_series=_linear())
    assert pcs.get_first_values() == (1.0, 1.0)


def test_zero_first_value_gives_zero_change():
    pcs = PercentChangeSeries(inner_series=ArrayValues([1, 2, 3], [0, 5, 10]))
    assert [pcs.get_values(i)[1] for i in range(len(pcs))] == [0.0, 0.0, 0.0]


class _FailingInner(ArrayValues):
    def validate(self):
        raise ValueError("inner invalid")


def test_validate_delegates_to_inner():
    pcs = PercentChangeSeries(inner_series=_FailingInner([1], [1]))
    with pytest.raises(ValueError, match="inner invalid"):
        pcs.validate()


def test_validate_requires_inner():
    with pytest.raises(ValueError):
        PercentChangeSeries().validate()