#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import environ, getcwd, walk
from os.path import isfile, join as path_join
from subprocess import run
from sys import executable
from typing import Iterator


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()

  env = dict(environ)
  env.setdefault('UTEST_WORK_DIR', getcwd())
  # Test scripts import the packages from the working directory, not from their own directory.
  env['PYTHONPATH'] = ':'.join(p for p in (getcwd(), environ.get('PYTHONPATH')) if p)

  ok = True
  for path in walk_test_files(args.paths):
    print(path)
    c = run([executable, path], env=env).returncode
    if c != 0:
      ok = False
      print()

  exit(0 if ok else 1)


def walk_test_files(paths:list[str]) -> Iterator[str]:
  'Yield the `.ut.py` files named by or contained in `paths`, in sorted order.'
  for path in paths:
    if isfile(path):
      yield path
      continue
    for dir_path, dir_names, file_names in walk(path):
      dir_names.sort()
      for name in sorted(file_names):
        if name.endswith('.ut.py'): yield path_join(dir_path, name)


if __name__ == '__main__': main()
