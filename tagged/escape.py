# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Conversion of arbitrary values to text, and HTML escaping of that text.
'''

from html import escape as _escape
from typing import Any

from .io import report_exc


def esc(value:Any) -> str|None:
  '''
  Escape `value` for use as HTML text or attribute content; `None` is passed through.
  The five characters `&`, `<`, `>`, `"` and `'` are replaced with character references.

  If `value` cannot be converted to text, the failure is reported on stderr
  and a best-effort string is returned *unescaped*, so that rendering can proceed.
  This fallback must not be relied upon where the output is security sensitive.
  '''
  if value is None: return None
  try: return _escape(_convert(value), quote=True)
  except Exception as exc:
    report_exc(f'esc: could not convert {type(value).__name__} value to text', exc)
    return _fallback_text(value)


def to_text(value:Any) -> str:
  '''
  Convert `value` to text: `str` is returned as is, `bytes` are decoded as UTF-8, and everything else goes through `str()`.
  Failures are reported on stderr and a best-effort string is returned instead.
  '''
  try: return _convert(value)
  except Exception as exc:
    report_exc(f'to_text: could not convert {type(value).__name__} value to text', exc)
    return _fallback_text(value)


def esc_text(text:str) -> str:
  'Escape a text node.'
  return _escape(text, quote=True)


def quote_attr_val(text:str) -> str:
  'Escape and double-quote an attribute value.'
  return f'"{_escape(text, quote=True)}"'


def _convert(value:Any) -> str:
  if isinstance(value, str): return value
  if isinstance(value, (bytes, bytearray)): return value.decode('utf-8')
  return str(value)


def _fallback_text(value:Any) -> str:
  if isinstance(value, (bytes, bytearray)): return value.decode('utf-8', errors='replace')
  return object.__repr__(value)
