# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Hash algorithm registry and data hashing.
Algorithms are looked up by normalized name: surrounding whitespace removed, lower case.
'''

import hashlib
from functools import partial
from typing import Any, Callable

import blake3


hash_fns:dict[str,Callable[[],Any]] = {
  'blake2b-256'   : partial(hashlib.blake2b, digest_size=32),
  'blake2b-384'   : partial(hashlib.blake2b, digest_size=48),
  'blake2b-512'   : hashlib.blake2b,
  'blake2s-128'   : partial(hashlib.blake2s, digest_size=16),
  'blake2s-256'   : hashlib.blake2s,
  'blake3'        : blake3.blake3,
  'md5'           : hashlib.md5,
  'sha1'          : hashlib.sha1,
  'sha2-224'      : hashlib.sha224,
  'sha2-256'      : hashlib.sha256,
  'sha2-384'      : hashlib.sha384,
  'sha2-512'      : hashlib.sha512,
  'sha2-512_224'  : partial(hashlib.new, 'sha512_224'),
  'sha2-512_256'  : partial(hashlib.new, 'sha512_256'),
  'sha3-224'      : hashlib.sha3_224,
  'sha3-256'      : hashlib.sha3_256,
  'sha3-384'      : hashlib.sha3_384,
  'sha3-512'      : hashlib.sha3_512,
}

default_hash_name = 'sha3-256'

hash_chunk_size = 1 << 16
#^ a quick timing experiment suggested that chunk sizes larger than this are not faster.


class UnknownHashError(KeyError):
  'Raised when a hash name is not in the registry.'

  def __init__(self, name:str) -> None:
    self.name = name
    super().__init__(name)


def normalize_hash_name(name:str) -> str:
  return name.strip().lower()


def known_hash_names() -> list[str]:
  return sorted(hash_fns)


def new_hash(name:str) -> tuple[str,Any]:
  '''
  Return the normalized name and a new hash object for `name`.
  Raises `UnknownHashError` if the name is not registered.
  '''
  norm_name = normalize_hash_name(name)
  try: hash_fn = hash_fns[norm_name]
  except KeyError: raise UnknownHashError(norm_name) from None
  return norm_name, hash_fn()


def digest_bytes(h:Any, data:bytes) -> bytes:
  'Feed `data` to the hash object `h` and return the digest.'
  h.update(data)
  return h.digest()


def digest_path(h:Any, path:str) -> bytes:
  '''
  Feed the contents of the file at `path` to the hash object `h` and return the digest.
  OSError (e.g. for a missing file or a directory) propagates to the caller.
  '''
  with open(path, 'rb') as f:
    while True:
      chunk = f.read(hash_chunk_size)
      if not chunk: break
      h.update(chunk)
  return h.digest()
