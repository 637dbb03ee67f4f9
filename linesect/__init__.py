# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
linesect finds the intersection of two lines in the plane,
each given in vertical, slope-intercept, point-slope, or two-point form.
'''

from .exceptions import (CollinearLinesWarning, DegenerateInput, InvalidInputShape, LineError, LineWarning,
  ParallelLinesWarning)
from .form import Line, PointSlope, SlopeIntercept, TwoPoint, Vertical, parse_line, to_point_slope
from .intersect import (Collinear, Intersection, Parallel, Unique, classify, intersect, intersect_lines,
  intersect_lines_tagged)
from .point import P


__all__ = [
  'classify',
  'Collinear',
  'CollinearLinesWarning',
  'DegenerateInput',
  'intersect',
  'intersect_lines',
  'intersect_lines_tagged',
  'Intersection',
  'InvalidInputShape',
  'Line',
  'LineError',
  'LineWarning',
  'P',
  'Parallel',
  'ParallelLinesWarning',
  'parse_line',
  'PointSlope',
  'SlopeIntercept',
  'to_point_slope',
  'TwoPoint',
  'Unique',
  'Vertical',
]
