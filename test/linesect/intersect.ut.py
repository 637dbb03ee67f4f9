# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from math import inf, nan
from os.path import basename
from warnings import catch_warnings, simplefilter

from linesect import (classify, Collinear, CollinearLinesWarning, DegenerateInput, intersect, intersect_lines,
  intersect_lines_tagged, InvalidInputShape, LineWarning, P, Parallel, ParallelLinesWarning, PointSlope, to_point_slope,
  Unique, Vertical)
from utest import utest, utest_exc, utest_float, utest_symmetric, utest_val, utest_warn


simplefilter('ignore', LineWarning) # Advisories are checked explicitly with utest_warn.


# Worked examples.

utest_symmetric(utest_float, (34, 172), intersect_lines, [5, 2], [10, 4, 7])
utest_symmetric(utest_float, (5, 5), intersect_lines, [5], [0, 0, 1])
utest_symmetric(utest_float, (inf, inf), intersect_lines, [3], [7])


# Unique intersections.

utest_symmetric(utest_float, (0, 0), intersect_lines, [1, 0], [-1, 0])
utest_symmetric(utest_float, (2, 0), intersect_lines, [0, 0, 4, 0], [2, -1, 2, 1]) # Horizontal and vertical.
utest_symmetric(utest_float, (1, 1), intersect_lines, [0, 0, 2, 2], [0, 2, 2, 0])
utest_symmetric(utest_float, (-3, -7), intersect_lines, [-3], [2, -1])
utest_symmetric(utest_float, (5, 5), intersect_lines, Vertical(5), PointSlope(0, 0, 1))
utest_symmetric(utest_float, (3, 3), intersect_lines, [3, 8, nan], [0, 0, 1]) # NaN point-slope slope is vertical.

# The same line in every non-vertical form, intersected with y = -x + 4.
for l in [[2, 1], [3, 7, 2], [0, 1, 1, 3], [-1, -1, 2, 5]]:
  utest_symmetric(utest_float, (1, 3), intersect_lines, l, [-1, 4])

# The intersection lies on both lines.
for a, b in [
  ([0.5, -2], [-3.25, 11]),
  ([1e-3, 7], [1e3, -7]),
  ([1.1, 2.2, 3.3], [4.4, 5.5, 6.6, -7.7]),
  ([-9.5, 0.1, 2.5, 0.3], [0.2, -0.3, 100, 41]),
]:
  x, y = intersect_lines(a, b)
  la = to_point_slope(a)
  lb = to_point_slope(b)
  utest_float(y, la.y_at, x, _rel_tol=1e-9, _abs_tol=1e-9)
  utest_float(y, lb.y_at, x, _rel_tol=1e-9, _abs_tol=1e-9)


# Collinear lines.

utest_symmetric(utest_float, (nan, nan), intersect_lines, [0, 0, 1, 1], [2, 2, 5, 5])
utest_symmetric(utest_float, (nan, nan), intersect_lines, [1, 0], [0, 0, 1, 1])
utest_symmetric(utest_float, (nan, nan), intersect_lines, [2, 1], [3, 7, 2])
utest_symmetric(utest_float, (nan, nan), intersect_lines, [3], [3, 1, 3, 9]) # Vertical.
utest_symmetric(utest_float, (nan, nan), intersect_lines, [3], [3])


# Parallel lines.

utest_symmetric(utest_float, (inf, inf), intersect_lines, [1, 0], [1, 3])
utest_symmetric(utest_float, (inf, inf), intersect_lines, [0, 0, 1, 1], [0, 1, 1, 2])
utest_symmetric(utest_float, (inf, inf), intersect_lines, [3], [4, 0, 4, 1]) # Vertical.
utest_symmetric(utest_float, (inf, inf), intersect_lines, [0, 5], [1, 2, 0]) # Horizontal.


# Tagged results.

utest_symmetric(utest, Unique(P(34, 172)), intersect_lines_tagged, [5, 2], [10, 4, 7])
utest_symmetric(utest, Collinear(), intersect_lines_tagged, [3], [3])
utest_symmetric(utest, Parallel(), intersect_lines_tagged, [3], [7])
utest_symmetric(utest, Collinear(), intersect_lines_tagged, [1, 0], [0, 0, 1, 1])
utest_symmetric(utest, Parallel(), intersect_lines_tagged, [1, 0], [1, 3])

utest((34, 172), Unique(P(34, 172)).as_pair)
utest_float((nan, nan), Collinear().as_pair)
utest((inf, inf), Parallel().as_pair)


# Canonical triples.

utest(Unique(P(34, 172)), classify, (0, 2, 5), (10, 4, 7))
utest(Unique(P(5, 5)), classify, (5, 0, nan), (0, 0, 1))
utest(Unique(P(5, 5)), classify, (0, 0, 1), (5, 0, nan))
utest(Collinear(), classify, (5, 0, nan), (5, 0, nan))
utest(Collinear(), classify, (0, 1, 2), (1, 3, 2))
utest(Parallel(), classify, (5, 0, nan), (6, 0, nan))
utest(Parallel(), classify, (0, 1, 2), (0, 3, 2))
utest_float((34, 172), intersect, (0, 2, 5), (10, 4, 7))
utest_float((nan, nan), intersect, (0, 1, 2), (1, 3, 2))
utest_float((inf, inf), intersect, (0, 1, 2), (0, 3, 2))


# Advisories.

utest_warn(None, intersect_lines, [5, 2], [10, 4, 7])
utest_warn(None, intersect_lines, [5], [0, 0, 1])
utest_warn(CollinearLinesWarning, intersect_lines, [0, 0, 1, 1], [2, 2, 5, 5])
utest_warn(CollinearLinesWarning, intersect_lines, [3], [3])
utest_warn(ParallelLinesWarning, intersect_lines, [3], [7])
utest_warn(ParallelLinesWarning, intersect_lines, [1, 0], [1, 3])
utest_warn(CollinearLinesWarning, intersect, (0, 1, 2), (1, 3, 2))
utest_warn(ParallelLinesWarning, intersect, (0, 1, 2), (0, 3, 2))
utest_warn(None, intersect_lines_tagged, [3], [7])
utest_warn(None, classify, (0, 1, 2), (1, 3, 2))

# A nearly parallel pair whose intersection overflows is reported like a parallel pair.
utest_float((-inf, -inf), intersect_lines, [1e-300, 1e10], [0, 0])
utest_warn(ParallelLinesWarning, intersect_lines, [1e-300, 1e10], [0, 0])
utest_warn(ParallelLinesWarning, intersect, (0, 1e10, 1e-300), (0, 0, 0))
utest(Unique(P(-inf, -inf)), intersect_lines_tagged, [1e-300, 1e10], [0, 0])
utest_warn(None, intersect_lines_tagged, [1e-300, 1e10], [0, 0])


def parallel_warning_filename() -> str:
  with catch_warnings(record=True) as caught:
    simplefilter('always')
    intersect_lines([3], [7])
  return basename(caught[0].filename)

utest_val(basename(__file__), parallel_warning_filename(), 'advisory is attributed to the caller')


def parallel_as_error() -> tuple[float,float]:
  with catch_warnings():
    simplefilter('error', LineWarning)
    return intersect_lines([3], [7])

utest_exc(ParallelLinesWarning, parallel_as_error)


# Invalid lines.

utest_exc(InvalidInputShape, intersect_lines, [], [1])
utest_exc(InvalidInputShape, intersect_lines, [1], [1, 2, 3, 4, 5])
utest_exc(DegenerateInput, intersect_lines, [1, 1, 1, 1], [2])
utest_exc(DegenerateInput, intersect_lines_tagged, [2], [nan, 0])
