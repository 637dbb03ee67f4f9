# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='linesect',
  version='0.0.1',
  description='Intersection of two lines in the plane, given in vertical, slope-intercept, point-slope, or two-point form.',
  python_requires='>=3.10',
  packages=['linesect', 'utest'],
)
