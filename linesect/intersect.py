# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Intersection of two infinite lines in the plane.

The result is either a unique point, `Collinear` (infinitely many shared points),
or `Parallel` (no shared points; intersection "at infinity").
The float-pair functions `intersect` and `intersect_lines` encode the latter two as (NaN, NaN) and (+Inf, +Inf)
and issue a `LineWarning` advisory for them, or for a unique intersection that overflows to infinity.
'''

from collections.abc import Sequence
from dataclasses import dataclass
from math import inf, isinf, isnan, nan
from typing import Any
from warnings import warn

from .exceptions import CollinearLinesWarning, ParallelLinesWarning
from .form import to_point_slope
from .point import P


@dataclass(frozen=True, slots=True)
class Unique:
  'The lines intersect at exactly one point.'
  point:P

  def as_pair(self) -> tuple[float,float]: return (self.point.x, self.point.y)


@dataclass(frozen=True, slots=True)
class Collinear:
  'The lines coincide.'

  def as_pair(self) -> tuple[float,float]: return (nan, nan)


@dataclass(frozen=True, slots=True)
class Parallel:
  'The lines are parallel and distinct.'

  def as_pair(self) -> tuple[float,float]: return (inf, inf)


Intersection = Unique|Collinear|Parallel


def classify(a:Sequence[float], b:Sequence[float]) -> Intersection:
  '''
  Classify two canonical lines, each a point-slope triple `(x, y, m)` as returned by `to_point_slope`.
  Slopes and intercepts are compared exactly.
  '''
  x1, y1, m1 = a
  x2, y2, m2 = b
  v1 = isnan(m1)
  v2 = isnan(m2)

  # Single intersection point.
  if not v1 and not v2 and m1 != m2:
    x = ((m1*x1 - m2*x2) - (y1 - y2)) / (m1 - m2)
    return Unique(P(x, m1*(x - x1) + y1))
  if v1 and not v2:
    return Unique(P(x1, y2 + m2*(x1 - x2)))
  if not v1 and v2:
    return Unique(P(x2, y1 + m1*(x2 - x1)))

  # Equal slopes: either both vertical, or both defined and equal.
  if v1:
    return Collinear() if x1 == x2 else Parallel()
  return Collinear() if (y1 - m1*x1) == (y2 - m2*x2) else Parallel()


def intersect(a:Sequence[float], b:Sequence[float]) -> tuple[float,float]:
  '''
  Intersect two canonical lines, returning `(x, y)`.
  Collinear lines return (NaN, NaN); parallel lines return (+Inf, +Inf).
  '''
  return _advised_pair(classify(a, b))


def intersect_lines_tagged(line1:Any, line2:Any) -> Intersection:
  'Intersect two lines of any form, returning a `Unique`, `Collinear`, or `Parallel` result.'
  return classify(to_point_slope(line1), to_point_slope(line2))


def intersect_lines(line1:Any, line2:Any) -> tuple[float,float]:
  '''
  Find the intersection `(x, y)` of two lines, each given in any supported form (see `linesect.form`).
  The two lines may use different forms.

  Collinear lines return (NaN, NaN) and issue a `CollinearLinesWarning`.
  Parallel lines return (+Inf, +Inf) and issue a `ParallelLinesWarning`, as does a nearly parallel pair whose intersection overflows.
  Raises `InvalidInputShape` or `DegenerateInput` for an invalid line.
  '''
  return _advised_pair(intersect_lines_tagged(line1, line2))


def _advised_pair(res:Intersection) -> tuple[float,float]:
  # Warnings are attributed to the caller of the public function, two frames up.
  pair = res.as_pair()
  if isinstance(res, Collinear):
    warn('The two lines are collinear.', CollinearLinesWarning, stacklevel=3)
  elif isinf(pair[0]): # Parallel, or nearly parallel lines whose intersection overflowed.
    warn('The two lines are parallel.', ParallelLinesWarning, stacklevel=3)
  return pair
