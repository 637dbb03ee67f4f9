#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import environ, getcwd, makedirs, pathsep
from os.path import relpath
from pathlib import Path
from subprocess import run
from sys import executable


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()
  paths = sorted(walk_ut_files(args.paths))

  env = dict(environ)
  work_dir = env.setdefault('UTEST_WORK_DIR', getcwd())
  # Tests run from the build directory but import the packages in the work directory.
  env['PYTHONPATH'] = pathsep.join(p for p in (work_dir, env.get('PYTHONPATH')) if p)

  utest_cwd = '_build/_utest'
  makedirs(utest_cwd, exist_ok=True)
  ok = True
  for path in paths:
    print(path)
    exe_path = relpath(path, utest_cwd)
    c = run([executable, exe_path], cwd=utest_cwd, env=env).returncode
    if c != 0:
      ok = False
      print()

  exit(0 if ok else 1)


def walk_ut_files(paths:list[str]):
  for path in paths:
    p = Path(path)
    if p.is_dir(): yield from (str(f) for f in p.rglob('*.ut.py'))
    else: yield path


if __name__ == '__main__': main()
