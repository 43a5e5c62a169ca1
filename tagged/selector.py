# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Parsing of tag name specs: a tag name with optional CSS-selector-style class and id suffixes.

`'?span.list#x'` describes a `span` with class `list` and id `x`;
the leading `?` means that elements with this tag render nothing when their content is empty.
'''

import re
from dataclasses import dataclass

from .exceptions import InvalidArgumentError


@dataclass(frozen=True)
class TagSpec:
  name:str
  id:str|None = None
  classes:tuple[str,...] = ()
  render_empty:bool = True


def parse_tag_spec(spec:str) -> TagSpec:
  'Parse `spec` into a `TagSpec`. Raises `InvalidArgumentError` if the spec is malformed.'
  if not isinstance(spec, str): raise InvalidArgumentError(f'tag spec must be `str`; received: {spec!r}')
  m = tag_spec_re.fullmatch(spec)
  if not m: raise InvalidArgumentError(f'invalid tag spec: {spec!r}')
  id:str|None = None
  classes:list[str] = []
  for sm in suffix_re.finditer(m['suffixes']):
    word = sm['word']
    if sm['sigil'] == '#':
      if id is not None: raise InvalidArgumentError(f'tag spec has multiple ids: {spec!r}')
      id = word
    elif word not in classes:
      classes.append(word)
  return TagSpec(name=m['name'], id=id, classes=tuple(classes), render_empty=not m['optional'])


def is_tag_name(name:str) -> bool:
  return bool(tag_name_re.fullmatch(name))


tag_name_re = re.compile(r'[A-Za-z][-A-Za-z0-9:]*')

tag_spec_re = re.compile(r'''(?x)
  (?P<optional> \? )?
  (?P<name> [A-Za-z][-A-Za-z0-9:]* )
  (?P<suffixes> (?: [.\#] [-\w]+ )* )
''')

suffix_re = re.compile(r'(?P<sigil>[.#])(?P<word>[-\w]+)')
