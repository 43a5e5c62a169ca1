# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Factory configuration: the locale and timezone used by formatting plugins.
'''

import re
from dataclasses import dataclass
from os import environ
from typing import Mapping


default_locale = 'en_US'
default_timezone = 'UTC'


@dataclass(frozen=True)
class HtmlConfig:
  locale:str = default_locale
  timezone:str = default_timezone


  @classmethod
  def from_env(cls, env:Mapping[str,str]|None=None) -> 'HtmlConfig':
    '''
    Create a config from environment variables.
    The locale is taken from `TAGGED_LOCALE`, else the first of `LC_ALL`, `LC_TIME` and `LANG` that names a real locale.
    The timezone is taken from `TAGGED_TIMEZONE`, else `TZ`.
    '''
    if env is None: env = environ
    locale = env.get('TAGGED_LOCALE') or default_locale
    if 'TAGGED_LOCALE' not in env:
      for key in ('LC_ALL', 'LC_TIME', 'LANG'):
        if posix_locale := locale_from_posix(env.get(key, '')):
          locale = posix_locale
          break
    timezone = env.get('TAGGED_TIMEZONE') or env.get('TZ', '').lstrip(':') or default_timezone
    return cls(locale=locale, timezone=timezone)


def locale_from_posix(value:str) -> str:
  '''
  Convert a POSIX locale string such as `de_DE.UTF-8@euro` to a locale identifier such as `de_DE`.
  Returns the empty string for the `C` and `POSIX` locales and for malformed values.
  '''
  m = posix_locale_re.fullmatch(value)
  if not m or m['ident'] in ('C', 'POSIX'): return ''
  return m['ident']


posix_locale_re = re.compile(r'(?P<ident>[A-Za-z]+(?:_[A-Za-z0-9]+)*)(?:\.[-\w]+)?(?:@\w+)?')
