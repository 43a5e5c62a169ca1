# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
The `Factory` facade: constructors for tags, elements and buffers,
and helpers that turn iterables into list markup.
'''

from collections.abc import Mapping
from functools import partial
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from .buffer import Buffer
from .config import HtmlConfig
from .escape import esc
from .exceptions import InvalidArgumentError
from .markup import ContentCollection, Element, Tag, TagAttrs
from .plugins import Plugin, plugin_type_for
from .plugins.time import Time
from .selector import is_tag_name


# Item callbacks are called as `callback(item, el, key, index)`; `el` is None for unwrapped items.
ItemCallback = Callable[[Any,Optional[Element],Any,int],Any]

# Definition list renderers are called as `renderer(item, dt, dd, key, index)`.
DefRenderer = Callable[[Any,Element,Element,Any,int],Any]


class Factory:
  '''
  Facade for building markup.

  `html(name, content, attrs)` is shorthand for `html.el(name, content, attrs)`,
  and any tag name attribute builds that element: `html.strong('!')`.
  Plugins are resolved by name on first use and cached on the factory.
  '''

  def __init__(self, config:HtmlConfig|None=None) -> None:
    self.config = HtmlConfig.from_env() if config is None else config
    self._plugins:Dict[str,Plugin] = {}


  def __call__(self, name:str, content:Any=None, attrs:TagAttrs|None=None) -> Element:
    return Element(name, content, attrs)


  def __getattr__(self, name:str) -> Callable[...,Element]:
    if name.startswith('_') or not is_tag_name(name): raise AttributeError(name)
    return partial(Element, name)


  def __repr__(self) -> str: return f'{type(self).__name__}({self.config!r})'


  # Plugins.

  def plugin(self, name:str) -> Plugin:
    'Return the plugin registered under `name`, creating and caching it on first use.'
    try: return self._plugins[name]
    except KeyError: pass
    plugin = plugin_type_for(name)(self)
    self._plugins[name] = plugin
    return plugin


  @property
  def time(self) -> Time:
    plugin = self.plugin('time')
    assert isinstance(plugin, Time)
    return plugin


  # Basic constructors.

  def tag(self, name:str, attrs:TagAttrs|None=None) -> Tag:
    'Create a standalone tag.'
    return Tag(name, attrs)


  def el(self, name:str, content:Any=None, attrs:TagAttrs|None=None) -> Element:
    'Create an element.'
    return Element(name, content, attrs)


  def raw(self, html:Any) -> Buffer:
    'Wrap a string of markup that must not be escaped.'
    return Buffer(str(html))


  def wrap(self, *content:Any) -> Buffer:
    'Normalize and render arbitrary content now.'
    return ContentCollection.normalize(*content)


  def content(self, *content:Any) -> ContentCollection:
    'Wrap arbitrary content as a lazily normalized collection.'
    return ContentCollection(*content)


  def esc(self, value:Any) -> str|None:
    'Escape a value for HTML; None is passed through.'
    return esc(value)


  # Lists.

  def list(self, items:Iterable|None, container:str, name:str|None, callback:ItemCallback|None=None,
   attrs:TagAttrs|None=None) -> Element:
    '''
    Generate a `container` element with one child per item.
    If `name` is given, each item is wrapped in a `name` element whose content is `callback(item, el, key, index)`,
    or the item itself if there is no callback. Otherwise the callback result (or item) is used directly.
    The container renders as the empty string when it has no content.
    '''
    output = Element(container, partial(_iter_list_content, items, name, callback, None), attrs)
    output.set_render_empty(False)
    return output


  def elements(self, items:Iterable|None, name:str|None, callback:ItemCallback|None=None,
   attrs:TagAttrs|None=None) -> Buffer:
    'Like `list` but without a container; `attrs` apply to each wrapper element. Renders immediately.'
    return ContentCollection.normalize(partial(_iter_list_content, items, name, callback, attrs))


  def loop(self, items:Iterable|None, callback:ItemCallback|None=None) -> Buffer:
    'Render the callback result (or the item) for each item, without any wrapping. Renders immediately.'
    return ContentCollection.normalize(partial(_iter_list_content, items, None, callback, None))


  def u_list(self, items:Iterable|None, renderer:ItemCallback|None=None, attrs:TagAttrs|None=None) -> Element:
    'Create a `ul > li` structure. Items that render empty are omitted.'
    return self.list(items, 'ul', '?li', renderer or _identity_renderer, attrs)


  def o_list(self, items:Iterable|None, renderer:ItemCallback|None=None, attrs:TagAttrs|None=None) -> Element:
    'Create an `ol > li` structure. Items that render empty are omitted.'
    return self.list(items, 'ol', '?li', renderer or _identity_renderer, attrs)


  def d_list(self, items:Iterable|None, renderer:DefRenderer|None=None, attrs:TagAttrs|None=None) -> Element:
    '''
    Create a `dl > dt + dd` structure from a mapping or an iterable of (key, item) pairs.
    `renderer(item, dt, dd, key, index)` returns the `dd` content. The `dd` is rendered before the `dt`,
    so the renderer can add content to the `dt`; a `dt` that is still empty gets the key.
    '''
    output = Element('dl', partial(_iter_def_list_content, items, renderer or _identity_renderer), attrs)
    output.set_render_empty(False)
    return output


  def i_list(self, items:Iterable|None, renderer:ItemCallback|None=None, delimiter:str|None=None,
   final_delimiter:str|None=None, limit:int|None=None) -> Element:
    '''
    Create an inline delimited list, e.g. `a, b and c`.
    None items and items that render empty are skipped.
    If `limit` is given, items beyond it are summarized by a trailing `em.more` element.
    `final_delimiter` precedes the last item shown, and defaults to `delimiter` (which defaults to ', ').
    '''
    if delimiter is None: delimiter = ', '
    if final_delimiter is None: final_delimiter = delimiter
    output = Element('span.list', partial(_iter_inline_list_content, items, renderer, delimiter, final_delimiter, limit))
    output.set_render_empty(False)
    return output


  # Media.

  def image(self, url:Any, alt:str|None=None, width:Any=None, height:Any=None) -> Element:
    'Create an image tag.'
    output = Element('img', None, {'src': url, 'alt': alt})
    if width is not None: output.set_attribute('width', width)
    if height is not None: output.set_attribute('height', height)
    return output


def iter_list_items(items:Iterable|None) -> Iterator[Tuple[Any,Any,int]]:
  '''
  Yield (key, item, index) triples; `index` counts from 1.
  Keys are mapping keys for mappings and 0-based positions otherwise.
  '''
  if not items: return
  pairs = items.items() if isinstance(items, Mapping) else enumerate(items)
  for index, (key, item) in enumerate(pairs, 1):
    yield key, item, index


def iter_def_items(items:Iterable|None) -> Iterator[Tuple[Any,Any,int]]:
  'Yield (key, item, index) triples from a mapping or from an iterable of (key, item) pairs; `index` counts from 1.'
  if not items: return
  pairs = items.items() if isinstance(items, Mapping) else items
  for index, pair in enumerate(pairs, 1):
    if isinstance(pair, (str, bytes, bytearray)):
      raise InvalidArgumentError(f'definition list item is not a (key, item) pair: {pair!r}')
    try: key, item = pair
    except (TypeError, ValueError): raise InvalidArgumentError(f'definition list item is not a (key, item) pair: {pair!r}') from None
    yield key, item, index


def _identity_renderer(item:Any, *args:Any) -> Any: return item


def _iter_list_content(items:Iterable|None, name:str|None, callback:ItemCallback|None, attrs:TagAttrs|None) -> Iterator[Any]:
  for key, item, index in iter_list_items(items):
    if name is None: # Unwrapped.
      yield item if callback is None else callback(item, None, key, index)
    else: # Wrapped.
      yield Element(name, partial(_wrapped_item_content, item, callback, key, index), attrs)


def _wrapped_item_content(item:Any, callback:ItemCallback|None, key:Any, index:int, el:Element) -> Any:
  return item if callback is None else callback(item, el, key, index)


def _iter_def_list_content(items:Iterable|None, renderer:DefRenderer) -> Iterator[Any]:
  for key, item, index in iter_def_items(items):
    dt = Element('dt')
    dd_content = partial(_def_item_content, renderer, item, dt, key, index)
    dd = Buffer(Element('dd', dd_content).render()) # Render the dd first so that the renderer can fill in the dt.
    if dt.is_empty(): dt.append(key)
    yield dt
    yield dd


def _def_item_content(renderer:DefRenderer, item:Any, dt:Element, key:Any, index:int, dd:Element) -> Any:
  return renderer(item, dt, dd, key, index)


def _iter_inline_list_content(items:Iterable|None, renderer:ItemCallback|None, delimiter:str, final_delimiter:str,
 limit:int|None) -> Iterator[Any]:
  cells:List[Buffer] = []
  more = 0
  index = 0
  for key, item, _ in iter_list_items(items):
    if item is None: continue
    index += 1
    cell = Element('?span', partial(_wrapped_item_content, item, renderer, key, index))
    cell_str = cell.render()
    if not cell_str: # Empty cells do not count.
      index -= 1
      continue
    if limit is not None and index > limit:
      more += 1
      continue
    cells.append(Buffer(cell_str))

  last = len(cells) - 1
  for i, cell in enumerate(cells):
    if i: yield final_delimiter if i == last else delimiter
    yield cell

  if more: yield Element('em.more', f'… +{more}')
