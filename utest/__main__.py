#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import environ, getcwd, pathsep
from pathlib import Path
from subprocess import run
from sys import executable


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()

  work_dir = getcwd()
  env = dict(environ)
  env.setdefault('UTEST_WORK_DIR', work_dir)
  env['PYTHONPATH'] = pathsep.join(p for p in (work_dir, environ.get('PYTHONPATH')) if p) # Test the working tree.

  utest_cwd = Path('_build/_utest')
  utest_cwd.mkdir(parents=True, exist_ok=True)
  ok = True
  for path in walk_test_paths(args.paths):
    print(path)
    c = run([executable, str(path.resolve())], cwd=utest_cwd, env=env).returncode
    if c != 0:
      ok = False
      print()

  exit(0 if ok else 1)


def walk_test_paths(paths:list[str]) -> list[Path]:
  'Return the sorted `.ut.py` files in or under `paths`.'
  res:list[Path] = []
  for p in map(Path, paths):
    if p.is_dir(): res.extend(sorted(p.rglob('*.ut.py')))
    elif p.name.endswith('.ut.py'): res.append(p)
    else: exit(f'not a test file or directory: {p}')
  return res


if __name__ == '__main__': main()
