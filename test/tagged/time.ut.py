# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import sys
from datetime import date as Date, datetime as DateTime, timedelta as TimeDelta, timezone as TimeZone
from typing import Any

from tagged import Factory, HtmlConfig
from tagged.exceptions import ComponentUnavailableError, InvalidArgumentError
from tagged.markup import Element
from tagged.plugins.time import split_duration, w3c, zone_for
from utest import utest, utest_call, utest_exc, utest_seq, utest_val


html = Factory(HtmlConfig('en_US', 'UTC'))
t = html.time

dt = DateTime(2021, 3, 4, 5, 6, 7, tzinfo=TimeZone.utc)
ts = 1614834367


def text(el:Element|None) -> str|None:
  'The text content of a time element.'
  if el is None: return None
  return ''.join(str(n) for n in el)

def attr(el:Element|None, key:str) -> Any:
  if el is None: return None
  return el.get(key)


# Custom formats.

utest('<time datetime="2021-03-04T05:06:07+00:00">04/03/2021</time>', lambda: t.format(dt, '%d/%m/%Y').render())
utest('<time datetime="2021-03-04T00:06:07-05:00">00:06</time>', lambda: t.format(dt, '%H:%M', 'America/New_York').render())
utest('<time datetime="2021-03-04">2021</time>', lambda: t.format(dt, '%Y', timezone=False).render())
utest('<time datetime="2021-03-04">Thursday</time>', lambda: t.format_date(dt, '%A').render())
utest(None, t.format, None, '%Y')
utest_exc(InvalidArgumentError, t.format, dt, '%Y', 'Nowhere/Nothing')


# Date normalization.

utest(dt, t.normalize_date, dt)
utest(dt, t.normalize_date, ts)
utest(dt, t.normalize_date, float(ts))
utest(dt, t.normalize_date, str(ts))
utest(dt, t.normalize_date, '2021-03-04T05:06:07+00:00')
utest(dt, t.normalize_date, '2021-03-04 05:06:07')
utest(DateTime(2021, 3, 4, tzinfo=TimeZone.utc), t.normalize_date, Date(2021, 3, 4))
utest(None, t.normalize_date, None)
utest_val(True, t.normalize_date(DateTime(2021, 3, 4)).tzinfo is not None, 'naive datetime gets the configured zone')
utest_exc(InvalidArgumentError, t.normalize_date, 'not a date')
utest_exc(InvalidArgumentError, t.normalize_date, True)
utest_exc(InvalidArgumentError, t.normalize_date, [ts])
utest_exc(InvalidArgumentError, t.normalize_date, '99999999999999')
utest_exc(InvalidArgumentError, t.normalize_date, float('inf'))

@utest_call
def test_relative_days() -> None:
  today = t.now().date()
  utest(DateTime(today.year, today.month, today.day, tzinfo=TimeZone.utc), t.normalize_date, 'today')
  utest_val(TimeDelta(days=1), t.normalize_date('tomorrow') - t.normalize_date('today'), 'tomorrow')
  utest_val(TimeDelta(days=-1), t.normalize_date('Yesterday') - t.normalize_date('today'), 'yesterday')
  utest_val(True, abs(t.normalize_date(TimeDelta(hours=1)) - t.now() - TimeDelta(hours=1)) < TimeDelta(seconds=5),
    'timedelta is relative to now')

utest_val(None, t.normalize_timezone(False), 'timezone False')
utest_val(None, t.normalize_timezone(None), 'timezone None')
utest_val(zone_for('UTC'), t.normalize_timezone(True), 'timezone True')
utest_val(TimeZone.utc, t.normalize_timezone(TimeZone.utc), 'timezone tzinfo')
utest_exc(InvalidArgumentError, zone_for, 'Nowhere/Nothing')
utest_exc(InvalidArgumentError, Factory(HtmlConfig('en_US', 'Nowhere/Nothing')).time.now)

utest('2021-03-04T05:06:07+00:00', w3c, dt)
utest_seq([('day', 1), ('hour', 2)], split_duration, 93600, 2)
utest_seq([('day', 1)], split_duration, 93600, 1)
utest_seq([('day', 1), ('hour', 2), ('second', 5)], split_duration, 93605, None)
utest_seq([('week', 2)], split_duration, 3600 * 24 * 14, 3)
utest_seq([], split_duration, 0, 1)


# Locale formats.

utest('Mar 4, 2021', text, t.date(dt))
utest('2021-03-04', attr, t.date(dt), 'datetime')
utest('March 4, 2021', text, t.long_date(dt))
utest('Thursday, March 4, 2021', text, t.full_date(dt))
utest('Mar 4, 2021', text, t.medium_date(dt))
utest('3/4/21', text, t.short_date(dt))
utest('March 4, 2021', text, t.locale(dt, True, True, timezone=False))
utest(None, t.locale, dt, False, False)
utest(None, t.locale, dt, None, 'short', timezone=False)
utest(None, t.date, None)
utest_exc(InvalidArgumentError, t.locale, dt, 'huge')

@utest_call
def test_times() -> None:
  # Recent locale data separates the time from AM/PM with a narrow no-break space; only check the stable parts.
  short = t.time(dt)
  utest_val('05:06:07', attr(short, 'datetime'), 'time datetime')
  utest_val(True, '5:06' in text(short) and 'AM' in text(short), 'short time text')
  medium = t.date_time(dt)
  utest_val('2021-03-04T05:06:07+00:00', attr(medium, 'datetime'), 'date_time datetime')
  utest_val(True, 'Mar 4, 2021' in text(medium) and '5:06:07' in text(medium), 'date_time text')
  ny = t.time(dt, 'America/New_York')
  utest_val('00:06:07', attr(ny, 'datetime'), 'time in another zone')
  utest_val(True, '12:06' in text(ny), 'time text in another zone')

de = Factory(HtmlConfig('de_DE', 'Europe/Berlin')).time
utest('04.03.2021', text, de.date(dt))
utest('2021-03-04T06:06:07+01:00', attr, de.date_time(dt), 'datetime')


# Intervals relative to now.

days_ago = TimeDelta(days=-3)
days_ahead = TimeDelta(days=2)

utest('3 days ago', text, t.since(days_ago))
utest('in 2 days', text, t.since(days_ahead))
utest('3 days', text, t.since_abs(days_ago))
utest('-2 days', text, t.since_abs(days_ahead))
utest('3 days ago', text, t.until(days_ago))
utest('2 days', text, t.until(days_ahead))
utest('-3 days', text, t.until_abs(days_ago))
utest('2 days', text, t.until_abs(days_ahead))
utest('1 day and 2 hours ago', text, t.since(TimeDelta(days=-1, hours=-2), parts=2))
utest('in 1 day and 2 hours', text, t.since(TimeDelta(days=1, hours=2, minutes=3), parts=2))
utest('1d 2h', text, t.since_abbr(TimeDelta(days=-1, hours=-2), parts=2))
utest('-1d 2h', text, t.until_abbr(TimeDelta(days=-1, hours=-2), parts=2))
utest(None, t.since, None)

def classes(el:Element|None) -> list[str]:
  assert el is not None
  return el.tag.classes

utest(['past'], classes, t.since(days_ago))
utest(['future'], classes, t.until(days_ahead))
utest(['past', 'positive'], classes, t.since(days_ago, positive=True))
utest(['past', 'negative'], classes, t.since(days_ago, positive=False))
utest(['future', 'negative', 'pending'], classes, t.since(days_ahead, positive=True))
utest(['past', 'negative'], classes, t.until(days_ago, positive=True))
utest(['future', 'positive'], classes, t.until(days_ahead, positive=True))
utest(['future', 'negative'], classes, t.until(days_ahead, positive=False))

@utest_call
def test_interval_element() -> None:
  el = t.since(days_ago)
  assert el is not None
  utest_val('time', el.name, 'interval element name')
  utest_val(True, el.has_attribute('datetime') and el.has_attribute('title'), 'interval attributes')


# Intervals between two dates.

def between(el:Element|None) -> tuple[str|None,list[str]]:
  assert el is not None
  return (text(el), el.tag.classes)

utest(('3 days', ['interval', 'positive']), between, t.between(dt, dt + TimeDelta(days=3)))
utest(('-1 week', ['interval', 'negative']), between, t.between(dt, dt - TimeDelta(days=7)))
utest(('1 day and 2 hours', ['interval', 'positive']), between, t.between(dt, dt + TimeDelta(days=1, hours=2), parts=2))
utest(('1d 2h', ['interval', 'positive']), between, t.between_abbr(dt, dt + TimeDelta(days=1, hours=2), parts=2))
utest(('0 seconds', ['interval', 'positive']), between, t.between(dt, dt))
utest(None, t.between, None, dt)
utest(None, t.between, dt, None)
utest('<span class="interval positive">1 hour</span>', lambda: t.between(ts, ts + 3600).render())


# Humanization.

utest('just now', t.humanize, TimeDelta(0))
utest('in 5 hours', t.humanize, TimeDelta(hours=5))
utest('5 minutes ago', t.humanize, TimeDelta(minutes=-5))
utest('5 minutes', t.humanize, TimeDelta(minutes=-5), relative=False)
utest('1 year, 2 months, and 3 days', t.humanize, TimeDelta(days=365 + 60 + 3), parts=None, relative=False)


# Missing Babel.

@utest_call
def test_missing_babel() -> None:
  saved = {k: m for k, m in sys.modules.items() if k == 'babel' or k.startswith('babel.')}
  sys.modules['babel'] = None # type: ignore[assignment]
  try:
    utest_exc(ComponentUnavailableError, t.date, dt)
    utest_exc(ComponentUnavailableError, t.since, days_ago)
    utest_exc(ComponentUnavailableError, t.between, dt, dt)
    utest('<time datetime="2021-03-04">2021</time>', lambda: t.format(dt, '%Y', timezone=False).render())
  finally:
    del sys.modules['babel']
    sys.modules.update(saved)
