# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Factory plugins: formatters that build elements from external data using a `Factory`.

Each plugin class is registered under a name in `plugin_types`;
`Factory.plugin(name)` instantiates it on first use and caches the instance on that factory.
'''

from typing import Callable, ClassVar, TYPE_CHECKING, TypeVar

from ..exceptions import InvalidArgumentError


if TYPE_CHECKING:
  from ..factory import Factory


class Plugin:
  'Base class for factory plugins.'

  name:ClassVar[str] = ''

  def __init__(self, html:'Factory') -> None:
    self.html = html


_P = TypeVar('_P', bound=type[Plugin])

plugin_types:dict[str,type[Plugin]] = {} # Dispatch table mapping plugin names to plugin classes.


def _plugin(name:str) -> Callable[[_P],_P]:
  'Decorator for registering a plugin class under `name`.'
  def register(Subclass:_P) -> _P:
    assert issubclass(Subclass, Plugin)
    assert name not in plugin_types, name
    Subclass.name = name
    plugin_types[name] = Subclass
    return Subclass
  return register


def plugin_type_for(name:str) -> type[Plugin]:
  'Look up the plugin class registered under `name`. Raises `InvalidArgumentError` for unknown names.'
  try: return plugin_types[name]
  except KeyError: raise InvalidArgumentError(f'{name!r} is not a recognised plugin') from None


# Builtin plugins register themselves on import.
from .time import Time # noqa: E402.
