# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Line representations and normalization to canonical point-slope form.

A line can be given positionally, as a sequence whose length selects the form:
* `[x]`: vertical line, x = x₁.
* `[m, b]`: slope-intercept form, y = mx + b.
* `[x, y, m]`: point-slope form, y - y₁ = m(x - x₁).
* `[x1, y1, x2, y2]`: two-point form, through (x₁,y₁) and (x₂,y₂).

Or explicitly, as one of the tagged types `Vertical`, `SlopeIntercept`, `PointSlope`, `TwoPoint`.
'''

from collections.abc import Sequence
from dataclasses import dataclass, fields
from math import isfinite, isinf, isnan, nan
from numbers import Real
from typing import Any, overload

from .exceptions import DegenerateInput, InvalidInputShape


@dataclass(frozen=True, slots=True)
class Vertical:
  'The vertical line x = `x`.'
  x:float


@dataclass(frozen=True, slots=True)
class SlopeIntercept:
  'The line y = `m`x + `b`.'
  m:float
  b:float


@dataclass(frozen=True, slots=True)
class PointSlope(Sequence[float]):
  '''
  The line through (`x`, `y`) with slope `m`.
  This is also the canonical form returned by `to_point_slope`:
  a canonical vertical line has `m` = NaN and `y` = 0.
  As a sequence it unpacks as the triple `x, y, m = line`.
  '''
  x:float
  y:float
  m:float

  def __len__(self) -> int: return 3

  def __iter__(self):
    yield self.x
    yield self.y
    yield self.m

  @overload
  def __getitem__(self, i:int) -> float: ...

  @overload
  def __getitem__(self, i:slice) -> tuple[float, ...]: ...

  def __getitem__(self, i):
    return (self.x, self.y, self.m)[i]

  @property
  def is_vertical(self) -> bool: return isnan(self.m)

  @property
  def intercept(self) -> float:
    'The y-intercept; NaN for a vertical line.'
    return self.y - self.m*self.x

  def y_at(self, x:float) -> float:
    'The y coordinate of the line at `x`; NaN for a vertical line.'
    return self.m*(x - self.x) + self.y


@dataclass(frozen=True, slots=True)
class TwoPoint:
  'The line through (`x1`, `y1`) and (`x2`, `y2`).'
  x1:float
  y1:float
  x2:float
  y2:float


Line = Vertical|SlopeIntercept|PointSlope|TwoPoint

_line_types = (Vertical, SlopeIntercept, PointSlope, TwoPoint)

# Positional forms, indexed by length.
_arity_types:dict[int,type[Line]] = {1: Vertical, 2: SlopeIntercept, 3: PointSlope, 4: TwoPoint}


def parse_line(line:Any) -> Line:
  '''
  Convert a positional line specification to its tagged form.
  Tagged values are accepted as well; in either case all values are converted to float.
  Raises `InvalidInputShape` if `line` is not a sequence of one to four real numbers,
  and `DegenerateInput` if any value other than a point-slope slope is NaN.
  '''
  if isinstance(line, _line_types):
    return _make_line(type(line), [getattr(line, f.name) for f in fields(line)], line)
  if isinstance(line, (str, bytes)):
    raise InvalidInputShape(f'Line must be a sequence of numbers; received: {line!r}')
  try: vals = tuple(line)
  except TypeError as e:
    raise InvalidInputShape(f'Line must be a sequence of numbers; received: {line!r}') from e
  try: line_type = _arity_types[len(vals)]
  except KeyError:
    raise InvalidInputShape(f'Line must have 1 to 4 values; received {len(vals)}: {line!r}') from None
  return _make_line(line_type, vals, line)


def to_point_slope(line:Any) -> PointSlope:
  '''
  Convert a line of any form to canonical point-slope form.
  A vertical line x = x₁ passes through (x₁,0) and has an undefined slope,
  so its canonical form is `PointSlope(x₁, 0, NaN)`.
  The canonical slope is never infinite, and canonical lines normalize to themselves.
  '''
  l = parse_line(line)
  match l:

    case Vertical(x):
      _req_finite(l, x)
      return PointSlope(x, 0.0, nan)

    case SlopeIntercept(m, b):
      if isinf(m): raise DegenerateInput(f'Slope-intercept line cannot have an infinite slope: {l!r}')
      _req_finite(l, b)
      return PointSlope(0.0, b, m)

    case PointSlope(x, y, m):
      _req_finite(l, x, y)
      if isinf(m) or isnan(m): return PointSlope(x, 0.0, nan) # Vertical through x.
      return PointSlope(x, y, m)

    case TwoPoint(x1, y1, x2, y2):
      _req_finite(l, x1, y1, x2, y2)
      if x1 == x2:
        if y1 == y2: raise DegenerateInput(f'Two-point line requires distinct points: {l!r}')
        return PointSlope(x1, 0.0, nan)
      dx = x2 - x1
      dy = y2 - y1
      if isinf(dx) or isinf(dy): # Halving the coordinates keeps the differences finite.
        dx = x2/2 - x1/2
        dy = y2/2 - y1/2
      m = dy / dx
      if isinf(m): return PointSlope(x1, 0.0, nan) # Overflowed; the points are vertically aligned at this precision.
      return PointSlope(x1, y1, m)

  raise AssertionError(f'unreachable: {l!r}')


def _make_line(line_type:type[Line], vals:Sequence[Any], line:Any) -> Line:
  # NaN in the point-slope slope is the vertical marker of canonical form.
  return line_type(*(_real(v, line, nan_ok=(line_type is PointSlope and i == 2)) for i, v in enumerate(vals)))


def _real(val:Any, line:Any, nan_ok=False) -> float:
  if isinstance(val, bool) or not isinstance(val, Real):
    raise InvalidInputShape(f'Line values must be real numbers; received {val!r} in: {line!r}')
  f = float(val)
  if isnan(f) and not nan_ok: raise DegenerateInput(f'Line values cannot be NaN: {line!r}')
  return f


def _req_finite(line:Line, *coords:float) -> None:
  if not all(isfinite(c) for c in coords):
    raise DegenerateInput(f'Line coordinates must be finite: {line!r}')
