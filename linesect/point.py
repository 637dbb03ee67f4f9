# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from collections.abc import Sequence
from dataclasses import dataclass
from math import isfinite
from typing import overload


def fmt_float(f:float) -> str:
  'Format a float, omitting the fractional part of integral values.'
  if not isfinite(f): return str(f)
  i = int(f)
  return str(i) if f == i else str(f)


@dataclass(frozen=True, slots=True)
class P(Sequence[float]):
  '''
  P is an immutable 2D point.
  It is also a sequence of its two coordinates, so it unpacks as `x, y = p`.
  '''

  x:float = 0
  y:float = 0


  def __str__(self) -> str: return f'({fmt_float(self.x)},{fmt_float(self.y)})'


  def __repr__(self) -> str: return f'P{self}'


  def __len__(self) -> int: return 2


  def __iter__(self):
    yield self.x
    yield self.y


  @overload
  def __getitem__(self, i:int) -> float: ...

  @overload
  def __getitem__(self, i:slice) -> tuple[float, ...]: ...

  def __getitem__(self, i):
    match i:
      case 0: return self.x
      case 1: return self.y
      case _: # Assume that `i` is a slice or a negative index.
        return (self.x, self.y)[i]
