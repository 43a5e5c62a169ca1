# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`markup` provides the composition model for HTML fragments:
* `Tag`: the opening and closing markup of a single element, independent of its children;
* `Element`: a `Tag` plus lazily normalized content;
* `ContentCollection`: a sequence of nodes rendered without a wrapping tag;
* `normalize_content`: the function that flattens arbitrary content into a sequence of nodes.

Content can be `None`, text, numbers, any `Markup` value (`Buffer`, `Tag`, `Element`, `ContentCollection`),
iterables and mappings of content (nested to any depth), and callables that produce content.
Callables are invoked once, when the content is first needed;
if a callable accepts a positional parameter, it is passed the `Element` that owns the content.
Text is escaped when it is rendered, never when it is normalized, so each leaf is escaped exactly once.
'''

import re
from collections.abc import Iterable, Mapping
from inspect import Parameter, signature
from numbers import Number
from typing import Any, Callable, Iterator, Optional, Protocol, runtime_checkable, Union

from .buffer import Buffer
from .escape import esc_text, quote_attr_val, to_text
from .exceptions import InvalidArgumentError, InvalidContentError
from .selector import parse_tag_spec
from .semantics import void_tags


@runtime_checkable
class Markup(Protocol):
  'Any value that can be rendered to an HTML fragment.'
  def render(self) -> str: ...


Node = Union[str,Markup] # `str` nodes are text to be escaped at render time.

TagAttrs = Mapping[str,Any]


def normalize_content(content:Any, handle:Optional['Element']=None) -> list[Node]:
  '''
  Flatten `content` into a list of renderable nodes.
  `handle` is passed to content-producing callables that accept a positional parameter.
  Raises `InvalidContentError` for values that cannot be interpreted as content.
  '''
  nodes:list[Node] = []
  _normalize_into(nodes, content, handle)
  return nodes


def _normalize_into(nodes:list[Node], content:Any, handle:Optional['Element']) -> None:
  'Recursive helper to `normalize_content`.'
  if content is None: return
  if isinstance(content, str):
    if content: nodes.append(content) # The empty string contributes nothing.
  elif isinstance(content, Markup) and not isinstance(content, type):
    nodes.append(content)
  elif isinstance(content, _text_convertible_types):
    text = to_text(content)
    if text: nodes.append(text)
  elif isinstance(content, Mapping):
    for v in content.values(): _normalize_into(nodes, v, handle)
  elif isinstance(content, Iterable):
    for c in content: _normalize_into(nodes, c, handle)
  elif callable(content):
    _normalize_into(nodes, call_producer(content, handle), handle)
  else:
    raise InvalidContentError(f'invalid content type: {type(content).__name__}; value: {content!r}')

_text_convertible_types = (bytes, bytearray, Number)


def call_producer(producer:Callable, handle:Optional['Element']) -> Any:
  'Invoke a content producer, passing `handle` if the producer accepts a positional argument.'
  if accepts_positional_arg(producer): return producer(handle)
  return producer()


def accepts_positional_arg(fn:Callable) -> bool:
  try: params = signature(fn).parameters.values()
  except (TypeError, ValueError): return False # Some builtins do not provide signatures.
  return any(p.kind in _positional_kinds for p in params)

_positional_kinds = (Parameter.POSITIONAL_ONLY, Parameter.POSITIONAL_OR_KEYWORD, Parameter.VAR_POSITIONAL)


def render_node(node:Node) -> str:
  if isinstance(node, str): return esc_text(node)
  return node.render()


class ContentCollection:
  '''
  An ordered sequence of nodes that renders as their concatenation, without a wrapping tag.
  The constructor arguments are normalized on first access.
  '''

  __slots__ = ('_content', '_nodes', '_error')

  def __init__(self, *content:Any) -> None:
    self._content:tuple[Any,...] = content
    self._nodes:list[Node]|None = None
    self._error:Exception|None = None


  @classmethod
  def normalize(cls, *content:Any) -> Buffer:
    'Normalize and render `content` immediately.'
    return Buffer(cls(*content).render())


  @property
  def nodes(self) -> list[Node]:
    if self._nodes is None:
      if self._error is not None: raise self._error
      content = self._content
      self._content = ()
      try: self._nodes = normalize_content(content)
      except Exception as exc:
        self._error = exc # Producers run once, so a failure is permanent.
        raise
    return self._nodes


  def __iter__(self) -> Iterator[Node]: return iter(self.nodes)

  def __repr__(self) -> str: return f'{type(self).__name__}({self.render()!r})'

  def __str__(self) -> str: return self.render()

  def is_empty(self) -> bool: return not self.nodes

  def append(self, *content:Any) -> None: self.nodes.extend(normalize_content(content))

  def render(self) -> str: return ''.join(render_node(n) for n in self.nodes)


class Tag:
  '''
  The opening and closing markup of a single element.

  `spec` is a tag name spec as parsed by `parse_tag_spec`, e.g. `'span.list#x'`.
  Explicit `attrs` are merged over the spec: an explicit `id` replaces the spec id, and classes are unioned.

  Attribute values of `None` or `True` render as bare attribute names; `False` values are omitted;
  `Buffer` values are inserted without further escaping; all other values are converted to text and escaped.
  The `class` attribute is kept as an ordered list of unique class names.
  '''

  __slots__ = ('name', 'attrs', 'classes', 'render_empty')

  def __init__(self, spec:str, attrs:TagAttrs|None=None) -> None:
    ts = parse_tag_spec(spec)
    self.name = ts.name
    self.render_empty = ts.render_empty # The default policy for elements wrapping this tag.
    self.classes:list[str] = list(ts.classes)
    self.attrs:dict[str,Any] = {}
    if ts.id is not None: self.attrs['id'] = ts.id
    if attrs: self.set_attributes(attrs, merge_classes=True)


  def __repr__(self) -> str: return f'{type(self).__name__}({self.render()!r})'

  def __str__(self) -> str: return self.render()

  def __getitem__(self, key:str) -> Any:
    if key == 'class':
      if not self.classes: raise KeyError(key)
      return ' '.join(self.classes)
    return self.attrs[key]

  def __setitem__(self, key:str, val:Any) -> None: self.set_attribute(key, val)

  def __delitem__(self, key:str) -> None:
    if key == 'class':
      if not self.classes: raise KeyError(key)
      self.classes.clear()
    else:
      del self.attrs[key]

  def __contains__(self, key:str) -> bool: return self.has_attribute(key)


  @property
  def is_void(self) -> bool:
    'Void elements have no children and only a self-closing form.'
    return self.name.lower() in void_tags


  def get(self, key:str, default:Any=None) -> Any:
    try: return self[key]
    except KeyError: return default

  def get_attribute(self, key:str) -> Any: return self.get(key)

  def has_attribute(self, key:str) -> bool:
    if key == 'class': return bool(self.classes)
    return key in self.attrs


  def set_attribute(self, key:str, val:Any) -> None:
    if not isinstance(key, str) or not attr_name_re.fullmatch(key):
      raise InvalidArgumentError(f'invalid attribute name: {key!r}')
    if key == 'class':
      self.classes.clear()
      self.add_class(val)
    else:
      self.attrs[key] = val


  def set_attributes(self, attrs:TagAttrs, merge_classes=False) -> None:
    for k, v in attrs.items():
      if k == 'class' and merge_classes: self.add_class(v)
      else: self.set_attribute(k, v)


  def remove_attribute(self, *keys:str) -> None:
    for key in keys:
      if key == 'class': self.classes.clear()
      else: self.attrs.pop(key, None)


  def set_data(self, key:str, val:Any) -> None:
    'Set a `data-*` attribute.'
    self.set_attribute(f'data-{key}', val)


  def set_id(self, id:str|None) -> None:
    if id is None: self.attrs.pop('id', None)
    else: self.attrs['id'] = id


  def set_title(self, title:Any) -> None:
    if title is None: self.attrs.pop('title', None)
    else: self.attrs['title'] = title


  def add_class(self, *names:str|Iterable[str]|None) -> None:
    'Add classes. Each argument can be a string of space-separated names, an iterable of names, or None.'
    for cl in iter_class_names(names):
      if cl not in self.classes: self.classes.append(cl)


  def remove_class(self, *names:str|Iterable[str]|None) -> None:
    for cl in iter_class_names(names):
      try: self.classes.remove(cl)
      except ValueError: pass


  def has_class(self, *names:str) -> bool:
    'Return True if all of `names` are present.'
    return all(cl in self.classes for cl in iter_class_names(names))


  def attr_items(self) -> Iterator[tuple[str,Any]]:
    'Yield attribute items in render order: `id`, then `class`, then the rest in insertion order.'
    if 'id' in self.attrs: yield ('id', self.attrs['id'])
    if self.classes: yield ('class', ' '.join(self.classes))
    for k, v in self.attrs.items():
      if k != 'id': yield (k, v)


  def fmt_attrs(self) -> str:
    'Return a string that is either empty or with a leading space, containing all of the formatted attributes.'
    parts:list[str] = []
    for k, v in self.attr_items():
      if v is False: continue
      if v is None or v is True: parts.append(f' {k}')
      elif isinstance(v, Buffer): parts.append(f' {k}="{v.string}"')
      else: parts.append(f' {k}={quote_attr_val(to_text(prefer_int(v)))}')
    return ''.join(parts)


  def render(self) -> str:
    'Render the opening tag, or the self-closing form for void tags.'
    head_slash = '/' if self.is_void else ''
    return f'<{self.name}{self.fmt_attrs()}{head_slash}>'


  def render_close(self) -> str:
    if self.is_void: return ''
    return f'</{self.name}>'


class Element:
  '''
  A `Tag` plus content.

  The content is normalized once, on first render or first structural query (`is_empty`, iteration, `append`).
  Until then it is held as given, so callables that produce content are deferred.
  A producer runs before the opening tag is rendered, so it can modify the element's attributes through its handle.

  If `render_empty` is False, an element whose content renders empty renders as the empty string, tags included.
  The default comes from the tag spec: `'?li'` disables rendering when empty.
  '''

  __slots__ = ('tag', 'render_empty', '_content', '_nodes', '_error')

  def __init__(self, spec:str, content:Any=None, attrs:TagAttrs|None=None) -> None:
    self.tag = Tag(spec, attrs)
    self.render_empty = self.tag.render_empty
    self._content = content
    self._nodes:list[Node]|None = None
    self._error:Exception|None = None


  def __repr__(self) -> str:
    state = '' if self._nodes is None else f' {self._nodes!r}'
    return f'<{type(self).__name__} {self.tag.render()}{state}>'

  def __str__(self) -> str: return self.render()

  def __iter__(self) -> Iterator[Node]: return iter(self.nodes)

  def __getitem__(self, key:str) -> Any: return self.tag[key]

  def __setitem__(self, key:str, val:Any) -> None: self.tag[key] = val

  def __delitem__(self, key:str) -> None: del self.tag[key]

  def __contains__(self, key:str) -> bool: return key in self.tag


  @property
  def name(self) -> str: return self.tag.name


  @property
  def nodes(self) -> list[Node]:
    'The normalized content. Accessing this evaluates any deferred content.'
    if self._nodes is None:
      if self._error is not None: raise self._error
      content = self._content
      self._content = None
      # Install the list before normalizing so that a producer that appends to its handle does not recurse.
      self._nodes = []
      try: self._nodes.extend(normalize_content(content, handle=self))
      except Exception as exc:
        # Producers run once, so a failure is permanent; the partial content is discarded.
        self._nodes = None
        self._error = exc
        raise
    return self._nodes


  def is_empty(self) -> bool: return not self.nodes


  def set_render_empty(self, render_empty:bool) -> None: self.render_empty = render_empty


  def append(self, *content:Any) -> None:
    self.nodes.extend(normalize_content(content, handle=self))


  def prepend(self, *content:Any) -> None:
    self.nodes[0:0] = normalize_content(content, handle=self)


  # Attribute access delegated to the tag.

  def get(self, key:str, default:Any=None) -> Any: return self.tag.get(key, default)

  def get_attribute(self, key:str) -> Any: return self.tag.get_attribute(key)

  def has_attribute(self, key:str) -> bool: return self.tag.has_attribute(key)

  def set_attribute(self, key:str, val:Any) -> None: self.tag.set_attribute(key, val)

  def set_attributes(self, attrs:TagAttrs) -> None: self.tag.set_attributes(attrs)

  def remove_attribute(self, *keys:str) -> None: self.tag.remove_attribute(*keys)

  def set_data(self, key:str, val:Any) -> None: self.tag.set_data(key, val)

  def set_id(self, id:str|None) -> None: self.tag.set_id(id)

  def set_title(self, title:Any) -> None: self.tag.set_title(title)

  def add_class(self, *names:str|Iterable[str]|None) -> None: self.tag.add_class(*names)

  def remove_class(self, *names:str|Iterable[str]|None) -> None: self.tag.remove_class(*names)

  def has_class(self, *names:str) -> bool: return self.tag.has_class(*names)


  def render(self) -> str:
    tag = self.tag
    if tag.is_void: return tag.render() # Content is ignored.
    body = ''.join(render_node(n) for n in self.nodes)
    if not body and not self.render_empty: return ''
    return f'{tag.render()}{body}{tag.render_close()}'


def iter_class_names(names:Iterable[str|Iterable[str]|None]) -> Iterator[str]:
  'Yield individual class names. Strings are split on whitespace; None and False contribute nothing.'
  for name in names:
    if name is None or name is False: continue
    if isinstance(name, str): yield from name.split()
    elif isinstance(name, Iterable): yield from iter_class_names(name)
    else: raise InvalidArgumentError(f'invalid class name: {name!r}')


def prefer_int(v:Any) -> Any:
  'Convert integral floats to int.'
  if isinstance(v, float) and v.is_integer(): return int(v)
  return v


# HTML attribute names: any characters other than controls, whitespace, quotes, `>`, `/` and `=`.
attr_name_re = re.compile(r'''[^\x00-\x20\x7f"'>/=]+''')
