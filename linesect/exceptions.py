# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Error and warning classes for line intersection.
'''


class LineError(ValueError):
  'Base class for invalid line specifications.'


class InvalidInputShape(LineError):
  '''
  Raised when a line specification is not a sequence of one to four real numbers.
  '''


class DegenerateInput(LineError):
  '''
  Raised when a line specification has the right shape but does not define a line:
  coincident points in two-point form, NaN values, or infinite coordinates.
  '''


class LineWarning(UserWarning):
  'Base class for advisories about degenerate intersection results.'

class CollinearLinesWarning(LineWarning):
  'The two lines are collinear; they share infinitely many points.'

class ParallelLinesWarning(LineWarning):
  'The two lines are parallel and distinct; they never intersect.'
