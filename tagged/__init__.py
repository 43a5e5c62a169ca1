# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`tagged` builds HTML fragments programmatically: tag trees, escaping, lazy content, and list helpers.

`html` is a default `Factory` configured from the environment:

  from tagged import html
  html.u_list(['a', 'b']).render() # '<ul><li>a</li><li>b</li></ul>'
'''

from .buffer import Buffer
from .config import HtmlConfig
from .escape import esc
from .exceptions import ComponentUnavailableError, InvalidArgumentError, InvalidContentError
from .factory import Factory
from .markup import ContentCollection, Element, Markup, normalize_content, Tag
from .selector import parse_tag_spec, TagSpec


html = Factory()
