# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='tagged',
  version='0.0.1',
  description='Tagged builds HTML fragments from Python values: tags, elements, lazy content, and list helpers.',

  packages=['tagged', 'tagged.plugins', 'utest'],
  python_requires='>=3.11',
  install_requires=['babel', 'tzdata'],
)
