# chartkit

chartkit provides the numbers behind a chart. It does not draw anything. You get value
sequences, derived series, and a few numeric helpers. You then plot the resulting `(x, y)`
pairs with whatever drawing library you prefer.

## What is in the package

- `chartkit.seq`
  - `Seq` wraps either a plain sequence of floats or any object that has `len()` and
    `get_value(index)`.
  - It provides `values`, `each`, `map`, `fold_left`, `fold_right`, `min`, `max`,
    `min_max`, `sort`, `reverse`, `median`, `sum`, `average`, `variance` (population),
    `std_dev`, `percentile` and `normalize`.
  - `value_sequence(*values)` builds a `Seq` from plain numbers.
- `chartkit.random_sequence`
  - `RandomSequence` is a source of random floats. You can give it an optional seed. It
    has `with_len`, `with_min` and `with_max`, and the bounds it was given are readable
    as `minimum` and `maximum`.
  - Without a seed it is seeded from the current time.
  - Without a length it reports a length of 2**31 - 1.
  - `random_values(count)` and `random_values_with_max(count, maximum)` return lists.
- `chartkit.providers`
  - Protocols `ValuesProvider`, `FirstValuesProvider`, `LastValuesProvider` and
    `LinearCoefficientProvider`.
  - `ArrayValues`, a values provider built on a list of x values and a list of y values.
- Derived series. Each is built on any values provider, meaning anything with `len()` and
  a `get_values(index)` that returns an `(x, y)` pair:
  - `chartkit.sma_series.SMASeries`: a simple moving average. Each point is averaged with
    up to `period` earlier points. The default period is 16.
  - `chartkit.min_max_series.MinSeries` and `MaxSeries`: a flat line at the minimum or
    maximum y value of the inner series.
  - `chartkit.linear_series.LinearSeries`: plots `y = m * x + b` over `xvalues`. The
    coefficients come from an `inner_series` that has a `coefficients()` method returning
    `(m, b, stdev, avg)`. The package contains no such provider, so you supply one.
  - `chartkit.polynomial_regression_series.PolynomialRegressionSeries`: a least-squares
    polynomial of a chosen `degree`, fitted over an `offset` / `limit` window.
  - `chartkit.percent_change_series.PercentChangeSeries`: the change of each y value
    relative to the first y value.
- `chartkit.matrix`
  - `Matrix`, a dense row-major matrix. It offers `get` and `set`, rows and columns,
    `transpose`, `times` and `multiply`, `augment`, `lu`, `qr`, `inverse` (for symmetric
    matrices only), `lower`, `upper` and `diagonal`.
  - Constructors `identity`, `zero`, `ones`, `eye` and `from_arrays`.
  - The function `dot_product`.
- `chartkit.regression.poly(xvalues, yvalues, degree)`: polynomial coefficients, lowest
  power first.
- `chartkit.mathutil`
  - Angle helpers: `degrees_to_radians`, `radians_to_degrees`, `radian_add`,
    `degrees_add`, `circle_point`, `rotate_coordinate` and others.
  - Rounding helpers: `round_up`, `round_down`, `round_places`.
  - Value helpers: `min_max`, `mean`, `normalize`, `percent_difference`.
- `chartkit.stringutil.split_csv`: splits text on commas and trims whitespace around
  unquoted parts. Quoted parts, which may contain commas, are kept whole.
- `chartkit.parse`
  - `parse_floats(*values)` ignores thousands separators and skips blank entries.
  - `parse_times(layout, *values)` takes a layout written with the reference date, for
    example `"2006-01-02 15:04:05"`. Times that carry no zone are taken as UTC.
- `chartkit.logger`
  - `StdoutLogger` writes timestamped lines such as `... [INFO] message` to text streams.
    Streams left unset resolve to `sys.stdout` and `sys.stderr`. `fatal_err` exits with
    status 1.
  - The helpers `info`, `infof`, `debug` and `debugf` do nothing when the logger is
    `None`.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Moving average:

```python
from chartkit.providers import ArrayValues
from chartkit.sma_series import SMASeries

data = ArrayValues([1, 2, 3, 4, 5], [10, 9, 8, 7, 6])
sma = SMASeries(inner_series=data, period=2)
points = [sma.get_values(i) for i in range(len(sma))]
last_x, last_y = sma.get_last_values()
```

Statistics over a sequence:

```python
from chartkit.seq import value_sequence

s = value_sequence(1, 2, 3, 4, 5)
s.average()                # 3.0
s.variance()               # 2.0
s.normalize().values()     # [0.0, 0.25, 0.5, 0.75, 1.0]
```

Polynomial fit:

```python
from chartkit.regression import poly

xs = [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
ys = [1, 6, 17, 34, 57, 86, 121, 162, 209, 262, 321]
poly(xs, ys, 2)            # about [1.0, 2.0, 3.0]
```

Splitting comma-separated text that may contain quotes:

```python
from chartkit.stringutil import split_csv

split_csv('foo, bar, "baz,buzz"')   # ['foo', 'bar', 'baz,buzz']
```

Parsing dates:

```python
from chartkit.parse import parse_times

parse_times("2006-01-02", "2024-03-15")   # [datetime(2024, 3, 15, tzinfo=timezone.utc)]
```

## Errors

Invalid input raises an exception:

- `Matrix` operations raise `DimensionMismatchError` or `SingularValueError`.
- Out-of-range matrix indices raise `IndexError`.
- A series' `validate()` raises `ValueError` when its inner series is missing or its
  window is wrong.
- The parsing functions raise `ValueError` on text they cannot read.

## What it does not do

chartkit has no rendering. It does not draw:

- chart canvases
- axes
- legends
- pie or bar charts

It writes no image files and ships no fonts. It also has no command-line tool. It is a
library of values to be plotted by other code.