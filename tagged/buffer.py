# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from dataclasses import dataclass


@dataclass(frozen=True)
class Buffer:
  'A `str` wrapper signifying that the content is already valid markup, and must not be escaped again.'

  string:str

  def __post_init__(self) -> None:
    if not isinstance(self.string, str): raise TypeError(f'Buffer requires `str`; received: {self.string!r}')

  def __str__(self) -> str: return self.string

  def __bool__(self) -> bool: return bool(self.string)

  def render(self) -> str: return self.string
