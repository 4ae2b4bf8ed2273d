# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'Binary-to-text encoders for digest output: hex (base16), base32, base64 and Z85.'

from base64 import b32encode, b64encode
from sys import maxsize


BytesLike = bytes|bytearray|memoryview


# The Z85 alphabet as defined by ZeroMQ RFC 32 (https://rfc.zeromq.org/spec/32).
# Index i is the character for base-85 digit i.
z85_alphabet = b'0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ.-:+=^!/*?&<>()[]{}@%$#'
assert len(z85_alphabet) == 85
assert len(set(z85_alphabet)) == 85

z85_chunk_size = 4 # Input bytes per chunk.
z85_encoded_chunk_size = 5 # Output characters per chunk.

_z85_max_len = maxsize // z85_encoded_chunk_size


class Z85Error(ValueError):
  'Base class for Z85 encoding errors.'


class Z85TooLongError(Z85Error):
  'Raised when the input is so long that the output length is not representable.'

  def __init__(self) -> None:
    super().__init__('input is too long')


class Z85InvalidLengthError(Z85Error):
  'Raised when the input length is not a multiple of `chunk_size`.'

  def __init__(self, chunk_size:int) -> None:
    self.chunk_size = chunk_size
    super().__init__(f'input length is not a multiple of {chunk_size}')


def enc_z85(val:BytesLike) -> bytes:
  '''
  Encode a byte string using the Z85 alphabet, returning ASCII bytes.
  Each 4 byte chunk is read as a big endian unsigned 32-bit integer and written as 5 base-85 digits,
  most significant digit first.
  There is no padding: the length of `val` must be a multiple of 4,
  otherwise `Z85InvalidLengthError` is raised.
  '''
  if isinstance(val, memoryview): val = val.cast('B') # Count bytes, not items of a wider format.
  l = len(val)
  if l > _z85_max_len: raise Z85TooLongError()
  if l % z85_chunk_size: raise Z85InvalidLengthError(z85_chunk_size)

  a = z85_alphabet # Local alias for brevity.
  res = bytearray(l + l // z85_chunk_size)
  j = 0
  for i in range(0, l, z85_chunk_size):
    n = int.from_bytes(val[i:i+z85_chunk_size], byteorder='big')
    for k in range(j + z85_encoded_chunk_size - 1, j - 1, -1): # Fill the slots from last to first.
      n, r = divmod(n, 85)
      res[k] = a[r]
    j += z85_encoded_chunk_size
  return bytes(res)


def enc_z85_to_str(val:BytesLike) -> str:
  'Encode a byte string using the Z85 alphabet, returning a string.'
  return enc_z85(val).decode('ascii')


def enc_hex(val:BytesLike, separator='', prefix='', lower=False) -> bytes:
  '''
  Encode a byte string as hex (base16) digits, upper case unless `lower` is set.
  Each byte is preceded by `prefix`; adjacent bytes are joined by `separator`.
  '''
  fmt = '{}{:02x}' if lower else '{}{:02X}'
  if isinstance(val, memoryview): val = val.cast('B')
  return separator.join(fmt.format(prefix, b) for b in val).encode()


def enc_b32_unpadded(val:BytesLike) -> bytes:
  'Encode a byte string using the standard base32 alphabet, with trailing "=" characters removed.'
  return b32encode(val).rstrip(b'=')


def enc_b64_unpadded(val:BytesLike) -> bytes:
  'Encode a byte string using the standard base64 alphabet, with trailing "=" characters removed.'
  return b64encode(val).rstrip(b'=')
