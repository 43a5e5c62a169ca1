# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Diagnostic output. `tagged` reports the few problems it recovers from on stderr.
'''

from sys import stderr
from typing import Any, TextIO


def writeL(file:TextIO, *items:Any, sep='', flush=False) -> None:
  "Write `items` to file; sep='', end='\\n'."
  print(*items, sep=sep, end='\n', file=file, flush=flush)


def errL(*items:Any, sep='', flush=False) -> None:
  "Write items to std err; sep='', end='\\n'."
  writeL(stderr, *items, sep=sep, flush=flush)


def report_exc(context:str, exc:BaseException) -> None:
  'Report a recovered exception on stderr, prefixed with the package name and `context`.'
  errL(f'tagged: {context}: {type(exc).__name__}: {exc}', flush=True)
