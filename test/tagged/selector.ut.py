# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from tagged.exceptions import InvalidArgumentError
from tagged.selector import is_tag_name, parse_tag_spec, TagSpec
from utest import utest, utest_exc


utest(TagSpec(name='div'), parse_tag_spec, 'div')
utest(TagSpec(name='span', id='x', classes=('list',)), parse_tag_spec, 'span.list#x')
utest(TagSpec(name='span', id='x', classes=('list',)), parse_tag_spec, 'span#x.list')
utest(TagSpec(name='li', render_empty=False), parse_tag_spec, '?li')
utest(TagSpec(name='em', classes=('more',), render_empty=False), parse_tag_spec, '?em.more')
utest(TagSpec(name='div', classes=('a', 'b')), parse_tag_spec, 'div.a.b.a')
utest(TagSpec(name='my-widget', classes=('x_y',)), parse_tag_spec, 'my-widget.x_y')
utest(TagSpec(name='svg:rect'), parse_tag_spec, 'svg:rect')

utest_exc(InvalidArgumentError, parse_tag_spec, '')
utest_exc(InvalidArgumentError, parse_tag_spec, '?')
utest_exc(InvalidArgumentError, parse_tag_spec, '.x')
utest_exc(InvalidArgumentError, parse_tag_spec, '1h')
utest_exc(InvalidArgumentError, parse_tag_spec, 'div.')
utest_exc(InvalidArgumentError, parse_tag_spec, 'div span')
utest_exc(InvalidArgumentError, parse_tag_spec, 'div#a#b')
utest_exc(InvalidArgumentError, parse_tag_spec, 'div[x=1]')
utest_exc(InvalidArgumentError, parse_tag_spec, None)

utest(True, is_tag_name, 'h1')
utest(True, is_tag_name, 'custom-el')
utest(False, is_tag_name, 'span_list')
utest(False, is_tag_name, '')
