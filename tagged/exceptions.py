# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes raised by `tagged`.
'''


class InvalidArgumentError(ValueError):
  '''
  Raised when a constructing call receives a malformed argument:
  a bad tag name spec or attribute name, an unknown plugin name, an invalid locale size, or an unparseable date.
  '''


class InvalidContentError(TypeError):
  'Raised when content is of a type that cannot be normalized into markup nodes.'


class ComponentUnavailableError(RuntimeError):
  'Raised when an optional formatting capability is used without its library installed.'
