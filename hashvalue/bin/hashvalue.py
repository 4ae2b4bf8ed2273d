# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'Print the hash value of a text or a file in hex, base32, base64 and/or Z85 encoding.'

from functools import partial
from os import environ
from platform import python_version
from typing import Callable

from .. import __version__
from ..argparse import ArgParser, exit_processing_error
from ..digest import default_hash_name, digest_bytes, digest_path, known_hash_names, new_hash, UnknownHashError
from ..encodings import enc_b32_unpadded, enc_b64_unpadded, enc_hex, enc_z85, Z85Error
from ..io import outL, outZ


max_hex_param_len = 8

default_hash_env_var = 'HASHVALUE_HASH'


def main(args:list[str]|None=None) -> None:
  hash_names_str = ', '.join(known_hash_names())
  parser = ArgParser(prog='hashvalue', allow_abbrev=False,
    description='Calculate the hash value of a text or a file and print it in one or more encodings.',
    epilog=f'Valid hash names: {hash_names_str}.')

  parser.add_argument('-hash', default=environ.get(default_hash_env_var, default_hash_name),
    help=f'Name of the hash algorithm (default: {default_hash_name}; overridden by ${default_hash_env_var}).')
  parser.add_argument('-source', help="Source text (mutually exclusive with 'file'); use '-source=TEXT' if TEXT starts with '-'.")
  parser.add_argument('-file', help="Source file path (mutually exclusive with 'source').")
  parser.add_argument('-separator', default='', help='Separator text between hex bytes.')
  parser.add_argument('-prefix', default='', help='Prefix text in front of hex bytes.')
  parser.add_argument('-lower', action='store_true', help='Use lower case for hex output.')
  parser.add_argument('-upper', action='store_true', help='Use upper case for hex output (default).')
  parser.add_argument('-hex', action='store_true', help='Encode hash in hex (base16) format (default).')
  parser.add_argument('-base16', action='store_true', help="Same as 'hex'.")
  parser.add_argument('-base32', action='store_true', help='Encode hash in base32 format.')
  parser.add_argument('-base64', action='store_true', help='Encode hash in base64 format.')
  parser.add_argument('-z85', action='store_true', help='Encode hash in Z85 format.')
  parser.add_argument('-noheaders', action='store_true', help='Do not print the type of the output in front of it.')
  parser.add_argument('-version', action='store_true', help='Print the program version and exit.')

  ns = parser.parse_args(args)

  if ns.version:
    outL(f'hashvalue V{__version__} (Python {python_version()})')
    return

  if ns.source is not None and ns.file is not None: parser.error("Do not specify 'source' and 'file'")
  if ns.source is None and ns.file is None: parser.error("Specify either 'source' or 'file'")
  if ns.source == '': parser.error('Source is empty')
  if ns.file == '': parser.error('File name is empty')
  if len(ns.separator) > max_hex_param_len: parser.error('separator is too long')
  if len(ns.prefix) > max_hex_param_len: parser.error('prefix is too long')
  if ns.lower and ns.upper: parser.error("Specify either 'lower' or 'upper'")

  try: hash_name, h = new_hash(ns.hash)
  except UnknownHashError as e: parser.error(f'Invalid hash type: {e.name!r}')

  if ns.source is not None:
    hash_value = digest_bytes(h, ns.source.encode())
  else:
    try: hash_value = digest_path(h, ns.file)
    except OSError as e:
      exit_processing_error(f'Error hashing data: error reading file {ns.file!r}: {e.strerror or e}')

  use_hex = ns.hex or ns.base16 or not (ns.base32 or ns.base64 or ns.z85) # Hex is the default.
  encoders:list[tuple[str,Callable[[bytes],bytes]]] = []
  if use_hex: encoders.append(('Hex', partial(enc_hex, separator=ns.separator, prefix=ns.prefix, lower=ns.lower)))
  if ns.base32: encoders.append(('Base32', enc_b32_unpadded))
  if ns.base64: encoders.append(('Base64', enc_b64_unpadded))
  if ns.z85: encoders.append(('Z85', enc_z85))

  print_line('Hash', hash_name, headers=not ns.noheaders)
  for label, encoder in encoders:
    try: encoded = encoder(hash_value)
    except Z85Error as e: exit_processing_error(f'Error encoding hash value as {label}: {e}')
    print_line(label, encoded.decode(), headers=not ns.noheaders)


def print_line(label:str, text:str, headers:bool) -> None:
  'Print `text`, preceded by `label` padded to a common width if `headers` is set.'
  if headers: outZ(f'{label:6}: ')
  outL(text)


if __name__ == '__main__': main()
