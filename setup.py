# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='hashvalue',
  version='2.0.0',
  description='Calculate the hash value of a text or a file and print it in hex, base32, base64 or Z85 encoding.',
  python_requires='>=3.10',
  packages=['hashvalue', 'hashvalue.bin'], # utest is in-tree development tooling and is not installed.
  install_requires=['blake3'],
  entry_points={
    'console_scripts': [
      'hashvalue=hashvalue.bin.hashvalue:main',
    ],
  },
)
