# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
The `time` plugin formats dates, times and intervals as `<time>` elements.

Locale-aware formatting and interval humanization use Babel, which is imported when first needed;
without it those operations raise `ComponentUnavailableError`.
'''

import re
from datetime import date as Date, datetime as DateTime, timedelta as TimeDelta, tzinfo as TZInfo
from typing import Any, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..exceptions import ComponentUnavailableError, InvalidArgumentError
from ..markup import Element
from . import _plugin, Plugin


DateInput = Union[None,DateTime,Date,TimeDelta,int,float,str]
TimezoneInput = Union[bool,None,str,TZInfo]
LocaleSize = Union[bool,None,str]


@_plugin('time')
class Time(Plugin):

  @property
  def locale_name(self) -> str: return self.html.config.locale

  @property
  def timezone(self) -> TZInfo: return zone_for(self.html.config.timezone)


  def now(self) -> DateTime: return DateTime.now(self.timezone)


  # Custom formats.

  def format(self, date:DateInput, fmt:str, timezone:TimezoneInput=True) -> Element|None:
    'Format `date` with the `strftime` format `fmt`.'
    dt = self.prepare(date, timezone)
    if dt is None: return None
    return self.wrap(dt.strftime('%Y-%m-%d') if timezone is False else w3c(dt), dt.strftime(fmt))


  def format_date(self, date:DateInput, fmt:str) -> Element|None:
    'Format the date portion of `date` with the `strftime` format `fmt`, without timezone conversion.'
    dt = self.prepare(date, False)
    if dt is None: return None
    return self.wrap(dt.strftime('%Y-%m-%d'), dt.strftime(fmt))


  # Locale formats.

  def locale(self, date:DateInput, date_size:LocaleSize=True, time_size:LocaleSize=True,
   timezone:TimezoneInput=True) -> Element|None:
    '''
    Format `date` according to the configured locale.
    `date_size` and `time_size` are each one of 'full', 'long', 'medium', 'short', True (meaning 'long'),
    or False/None to omit that part. The time is also omitted when `timezone` is False.
    Returns None if both parts are omitted or if `date` is None.
    '''
    dsize = normalize_locale_size(date_size)
    tsize = normalize_locale_size(time_size)
    has_date = dsize is not None
    has_time = tsize is not None and timezone is not False
    if not (has_date or has_time): return None

    require_babel()
    from babel.dates import format_date, format_time

    dt = self.prepare(date, timezone)
    if dt is None: return None

    if has_date and has_time:
      assert dsize is not None and tsize is not None
      return self.wrap(w3c(dt), format_date_time(dt, dsize, tsize, locale=self.locale_name))
    if has_date:
      return self.wrap(dt.strftime('%Y-%m-%d'), format_date(dt.date(), format=dsize, locale=self.locale_name))
    return self.wrap(dt.strftime('%H:%M:%S'), format_time(dt, format=tsize, tzinfo=dt.tzinfo, locale=self.locale_name))


  def full_date_time(self, date:DateInput, timezone:TimezoneInput=True) -> Element|None:
    return self.locale(date, 'full', 'full', timezone)

  def full_date(self, date:DateInput, timezone:TimezoneInput=True) -> Element|None:
    return self.locale(date, 'full', False, timezone)

  def full_time(self, date:DateInput, timezone:TimezoneInput=True) -> Element|None:
    return self.locale(date, False, 'full', timezone)

  def long_date_time(self, date:DateInput, timezone:TimezoneInput=True) -> Element|None:
    return self.locale(date, 'long', 'long', timezone)

  def long_date(self, date:DateInput, timezone:TimezoneInput=True) -> Element|None:
    return self.locale(date, 'long', False, timezone)

  def long_time(self, date:DateInput, timezone:TimezoneInput=True) -> Element|None:
    return self.locale(date, False, 'long', timezone)

  def medium_date_time(self, date:DateInput, timezone:TimezoneInput=True) -> Element|None:
    return self.locale(date, 'medium', 'medium', timezone)

  def medium_date(self, date:DateInput, timezone:TimezoneInput=True) -> Element|None:
    return self.locale(date, 'medium', False, timezone)

  def medium_time(self, date:DateInput, timezone:TimezoneInput=True) -> Element|None:
    return self.locale(date, False, 'medium', timezone)

  def short_date_time(self, date:DateInput, timezone:TimezoneInput=True) -> Element|None:
    return self.locale(date, 'short', 'short', timezone)

  def short_date(self, date:DateInput, timezone:TimezoneInput=True) -> Element|None:
    return self.locale(date, 'short', False, timezone)

  def short_time(self, date:DateInput, timezone:TimezoneInput=True) -> Element|None:
    return self.locale(date, False, 'short', timezone)

  def date_time(self, date:DateInput, timezone:TimezoneInput=True) -> Element|None:
    return self.locale(date, 'medium', 'medium', timezone)

  def date(self, date:DateInput, timezone:TimezoneInput=True) -> Element|None:
    return self.locale(date, 'medium', False, timezone)

  def time(self, date:DateInput, timezone:TimezoneInput=True) -> Element|None:
    return self.locale(date, False, 'short', timezone)


  # Intervals relative to now.

  def since(self, date:DateInput, positive:bool|None=None, parts:int|None=1) -> Element|None:
    return self.wrap_interval(date, 'since', parts, positive=positive)

  def since_abs(self, date:DateInput, positive:bool|None=None, parts:int|None=1) -> Element|None:
    return self.wrap_interval(date, 'since', parts, absolute=True, positive=positive)

  def since_abbr(self, date:DateInput, positive:bool|None=None, parts:int|None=1) -> Element|None:
    return self.wrap_interval(date, 'since', parts, short=True, absolute=True, positive=positive)

  def until(self, date:DateInput, positive:bool|None=None, parts:int|None=1) -> Element|None:
    return self.wrap_interval(date, 'until', parts, positive=positive)

  def until_abs(self, date:DateInput, positive:bool|None=None, parts:int|None=1) -> Element|None:
    return self.wrap_interval(date, 'until', parts, absolute=True, positive=positive)

  def until_abbr(self, date:DateInput, positive:bool|None=None, parts:int|None=1) -> Element|None:
    return self.wrap_interval(date, 'until', parts, short=True, absolute=True, positive=positive)


  def wrap_interval(self, date:DateInput, mode:str, parts:int|None, short=False, absolute=False,
   positive:bool|None=None) -> Element|None:
    '''
    Build a `<time>` element describing the interval between `date` and now.
    `mode` is 'since' or 'until'; see `interval_signs` and `interval_polarity_classes` for how it affects the output.
    '''
    require_babel()
    dt = self.normalize_date(date)
    if dt is None: return None
    delta = dt - self.now()
    tense = 'future' if delta > TimeDelta(0) else 'past'

    minus_if_absolute, force_absolute = interval_signs[(mode, tense)]
    absolute = absolute or force_absolute
    text = self.humanize(delta, parts=parts, short=short, relative=not absolute)
    if absolute and minus_if_absolute: text = '-' + text

    output = self.wrap(w3c(dt), text, title=format_date_time(dt, 'long', 'long', locale=self.locale_name))
    output.add_class(tense)
    if positive is not None:
      pos, neg = ('positive', 'negative') if positive else ('negative', 'positive')
      output.add_class([cl.format(P=pos, N=neg) for cl in interval_polarity_classes[(mode, tense)]])
    return output


  # Intervals between two dates.

  def between(self, date1:DateInput, date2:DateInput, parts:int|None=1) -> Element|None:
    return self.between_raw(date1, date2, parts, short=False)

  def between_abbr(self, date1:DateInput, date2:DateInput, parts:int|None=1) -> Element|None:
    return self.between_raw(date1, date2, parts, short=True)

  def between_raw(self, date1:DateInput, date2:DateInput, parts:int|None=1, short=False) -> Element|None:
    require_babel()
    dt1 = self.normalize_date(date1)
    if dt1 is None: return None
    dt2 = self.normalize_date(date2)
    if dt2 is None: return None
    delta = dt2 - dt1
    is_negative = delta < TimeDelta(0)
    text = self.humanize(delta, parts=parts, short=short, relative=False)
    output = self.html.el('span.interval', ('-' if is_negative else '') + text)
    output.add_class('negative' if is_negative else 'positive')
    return output


  def humanize(self, delta:TimeDelta, parts:int|None=1, short=False, relative=True) -> str:
    '''
    Describe `delta` in words, using at most `parts` units (all units if `parts` is None or 0).
    Relative descriptions carry a direction ('in 3 days', '3 days ago'); absolute ones do not ('3 days').
    '''
    require_babel()
    from babel.dates import format_timedelta
    from babel.lists import format_list
    from babel.units import format_unit

    seconds = round(delta.total_seconds())
    magnitude = abs(seconds)
    fmt = 'narrow' if short else 'long'
    if magnitude == 0:
      if relative: return 'just now'
      return format_unit(0, 'duration-second', length=fmt, locale=self.locale_name)
    amounts = split_duration(magnitude, parts)

    if relative and len(amounts) == 1:
      unit, count = amounts[0]
      signed = TimeDelta(seconds=count * duration_unit_secs[unit] * (1 if seconds > 0 else -1))
      return format_timedelta(signed, granularity=unit, threshold=1, add_direction=True, format=fmt, locale=self.locale_name)

    words = [format_timedelta(TimeDelta(seconds=count * duration_unit_secs[unit]), granularity=unit, threshold=1,
      format=fmt, locale=self.locale_name) for unit, count in amounts]
    text = format_list(words, style=('unit-narrow' if short else 'standard'), locale=self.locale_name)
    if not relative: return text
    return f'in {text}' if seconds > 0 else f'{text} ago'


  # Normalization.

  def prepare(self, date:DateInput, timezone:TimezoneInput=True) -> DateTime|None:
    'Normalize `date` and convert it to the requested timezone.'
    dt = self.normalize_date(date)
    if dt is None: return None
    tz = self.normalize_timezone(timezone)
    if tz is not None: dt = dt.astimezone(tz)
    return dt


  def normalize_date(self, date:DateInput) -> DateTime|None:
    '''
    Convert a date input to an aware DateTime; naive values are taken to be in the configured timezone.
    Accepts DateTime, Date, TimeDelta (relative to now), Unix timestamps as numbers or numeric strings,
    'now', 'today', 'tomorrow', 'yesterday', and ISO 8601 strings.
    '''
    if date is None: return None
    tz = self.timezone
    if isinstance(date, DateTime): return date if date.tzinfo is not None else date.replace(tzinfo=tz)
    if isinstance(date, Date): return DateTime(date.year, date.month, date.day, tzinfo=tz)
    if isinstance(date, TimeDelta): return self.now() + date
    if isinstance(date, (int, float)) and not isinstance(date, bool): return from_timestamp(date, tz)
    if not isinstance(date, str): raise InvalidArgumentError(f'invalid date: {date!r}')

    s = date.strip()
    if numeric_re.fullmatch(s): return from_timestamp(float(s), tz)
    word = s.lower()
    if word == 'now': return self.now()
    if word in relative_day_offsets:
      today = self.now().date() + TimeDelta(days=relative_day_offsets[word])
      return DateTime(today.year, today.month, today.day, tzinfo=tz)
    try: dt = DateTime.fromisoformat(s)
    except ValueError: raise InvalidArgumentError(f'invalid date: {date!r}') from None
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=tz)


  def normalize_timezone(self, timezone:TimezoneInput) -> TZInfo|None:
    if timezone is None or timezone is False: return None
    if timezone is True: return self.timezone
    if isinstance(timezone, TZInfo): return timezone
    return zone_for(timezone)


  def wrap(self, w3c:str, formatted:str, title:str|None=None) -> Element:
    'Wrap formatted text in a `<time>` element.'
    output = self.html.el('time', formatted, {'datetime': w3c})
    if title is not None: output.set_title(title)
    return output


def require_babel() -> None:
  try: import babel # noqa: F401.
  except ImportError as exc:
    raise ComponentUnavailableError('Babel is required for locale and interval formatting; install `babel`') from exc


def format_date_time(dt:DateTime, date_size:str, time_size:str, locale:str) -> str:
  'Format a date and time with independent sizes, joined by the locale datetime pattern for `date_size`.'
  from babel.dates import format_date, format_time, get_datetime_format
  pattern = get_datetime_format(date_size, locale=locale)
  return (pattern.replace("'", '')
    .replace('{0}', format_time(dt, format=time_size, tzinfo=dt.tzinfo, locale=locale))
    .replace('{1}', format_date(dt.date(), format=date_size, locale=locale)))


def normalize_locale_size(size:LocaleSize) -> str|None:
  if size is None or size is False: return None
  if size is True: return 'long'
  if size in locale_sizes: return size # type: ignore[return-value]
  raise InvalidArgumentError(f'invalid locale formatter size: {size!r}')


def from_timestamp(ts:float, tz:TZInfo) -> DateTime:
  try: return DateTime.fromtimestamp(ts, tz=tz)
  except (OverflowError, OSError, ValueError): raise InvalidArgumentError(f'timestamp out of range: {ts!r}') from None


def zone_for(name:Any) -> TZInfo:
  try: return ZoneInfo(str(name))
  except (ZoneInfoNotFoundError, ValueError): raise InvalidArgumentError(f'invalid timezone: {name!r}') from None


def w3c(dt:DateTime) -> str:
  'Format `dt` as a W3C datetime, e.g. `2020-01-02T03:04:05+00:00`.'
  return dt.isoformat(timespec='seconds')


def split_duration(seconds:int, parts:int|None) -> list[tuple[str,int]]:
  'Split a non-negative number of seconds into at most `parts` (unit, count) pairs, largest units first.'
  amounts:list[tuple[str,int]] = []
  for unit, unit_secs in duration_unit_secs.items():
    count, seconds = divmod(seconds, unit_secs)
    if count:
      amounts.append((unit, count))
      if parts and len(amounts) >= parts: break
  return amounts


locale_sizes = frozenset({'full', 'long', 'medium', 'short'})

# Units as Babel measures them, so that each count formats exactly.
duration_unit_secs = {
  'year': 3600 * 24 * 365,
  'month': 3600 * 24 * 30,
  'week': 3600 * 24 * 7,
  'day': 3600 * 24,
  'hour': 3600,
  'minute': 60,
  'second': 1,
}

relative_day_offsets = {
  'yesterday': -1,
  'today': 0,
  'tomorrow': 1,
}

numeric_re = re.compile(r'[-+]?\d+(?:\.\d+)?')

# (mode, tense) -> (prefix '-' when the text is absolute, always use absolute text).
interval_signs = {
  ('since', 'past'): (False, False),
  ('since', 'future'): (True, False),
  ('until', 'past'): (True, False),
  ('until', 'future'): (False, True),
}

# (mode, tense) -> classes added when `positive` is given.
# `{P}` is 'positive' if `positive` is True, else 'negative'; `{N}` is the other.
interval_polarity_classes = {
  ('since', 'past'): ('{P}',),
  ('since', 'future'): ('{N}', 'pending'),
  ('until', 'past'): ('{N}',),
  ('until', 'future'): ('{P}',),
}
