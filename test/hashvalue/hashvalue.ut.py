# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from contextlib import redirect_stderr, redirect_stdout
from io import StringIO
from os import environ
from os.path import join as path_join
from tempfile import TemporaryDirectory

from hashvalue import __version__
from hashvalue.bin.hashvalue import main
from hashvalue.digest import digest_bytes, hash_fns, new_hash
from hashvalue.encodings import enc_z85_to_str
from utest import utest, utest_call, utest_val


def digest_named(name:str, data:bytes) -> bytes:
  _, h = new_hash(name)
  return digest_bytes(h, data)


def run(*args:str) -> tuple[int,str,str]:
  'Run the program with `args`; return the exit status, std out and std err.'
  out = StringIO()
  err = StringIO()
  with redirect_stdout(out), redirect_stderr(err):
    try: main(list(args))
    except SystemExit as e: code = e.code
    else: code = 0
  return code, out.getvalue(), err.getvalue()

def run_out(*args:str) -> tuple[int,str]:
  code, out, _ = run(*args)
  return code, out

def run_code(*args:str) -> int:
  return run(*args)[0]


md5_abc_hex = '900150983CD24FB0D6963F7D28E17F72'


# Default output: hex, upper case, with headers.
utest((0, f'Hash  : md5\nHex   : {md5_abc_hex}\n'), run_out, '-hash', 'md5', '-source', 'abc')
utest((0, f'Hash  : md5\nHex   : {md5_abc_hex}\n'), run_out, '-hash', ' MD5 ', '-source', 'abc', '-upper')
utest((0, f'md5\n{md5_abc_hex.lower()}\n'), run_out, '-hash', 'md5', '-source', 'abc', '-lower', '-noheaders')
utest((0, 'Hash  : sha1\nHex   : 0xA9:0x99:0x3E:0x36:0x47:0x06:0x81:0x6A:0xBA:0x3E:0x25:0x71:0x78:0x50:0xC2:0x6C:0x9C:0xD0:0xD8:0x9D\n'),
  run_out, '-hash', 'sha1', '-source', 'abc', '-separator', ':', '-prefix', '0x')

# Default hash.
sha3_abc = digest_named('sha3-256', b'abc')
utest((0, f'sha3-256\n{sha3_abc.hex().upper()}\n'), run_out, '-source', 'abc', '-noheaders')

# Z85 output.
sha256_abc = digest_named('sha2-256', b'abc')
utest((0, f'sha2-256\n{enc_z85_to_str(sha256_abc)}\n'), run_out, '-hash', 'sha2-256', '-source', 'abc', '-z85', '-noheaders')

# Combined encodings print in a fixed order, regardless of option order.
utest((0, 'Hash  : md5\nHex   : ' + md5_abc_hex + '\nBase32: SAAVBGB42JH3BVUWH56SRYL7OI\nBase64: kAFQmDzST7DWlj99KOF/cg\n'
  + 'Z85   : ' + enc_z85_to_str(bytes.fromhex(md5_abc_hex)) + '\n'),
  run_out, '-z85', '-base64', '-base32', '-base16', '-hash', 'md5', '-source', 'abc')

# Non-ASCII source text is hashed as UTF-8.
utest((0, 'md5\n' + digest_named('md5', 'äöü'.encode()).hex().upper() + '\n'), run_out, '-hash', 'md5', '-source', 'äöü', '-noheaders')

# Source text starting with '-' is passed in the '=' form; the separate form reads as an option.
utest((0, 'md5\n' + digest_named('md5', b'-x').hex().upper() + '\n'), run_out, '-hash', 'md5', '-source=-x', '-noheaders')
utest(1, run_code, '-hash', 'md5', '-source', '-x')


class ShortHash:
  'A hash with a 3 byte digest, which Z85 cannot encode.'
  def update(self, data:bytes) -> None: pass
  def digest(self) -> bytes: return b'\x01\x02\x03'

@utest_call
def test_z85_encoding_error() -> None:
  hash_fns['short-3'] = ShortHash
  try:
    utest((0, 'short-3\n010203\n'), run_out, '-hash', 'short-3', '-source', 'abc', '-noheaders')
    code, out, err = run('-hash', 'short-3', '-source', 'abc', '-z85')
    utest_val(2, code, 'Z85 encoding error exit code')
    utest_val('Hash  : short-3\n', out, 'output before the Z85 encoding error')
    utest_val(True, 'Error encoding hash value as Z85: input length is not a multiple of 4' in err, f'error message: {err!r}')
  finally: del hash_fns['short-3']


@utest_call
def test_env_default_hash() -> None:
  environ['HASHVALUE_HASH'] = 'md5'
  try: utest((0, f'md5\n{md5_abc_hex}\n'), run_out, '-source', 'abc', '-noheaders')
  finally: del environ['HASHVALUE_HASH']


@utest_call
def test_file() -> None:
  with TemporaryDirectory() as dir:
    path = path_join(dir, 'abc.txt')
    with open(path, 'wb') as f: f.write(b'abc')
    utest((0, f'md5\n{md5_abc_hex}\n'), run_out, '-hash', 'md5', '-file', path, '-noheaders')
    # Processing errors.
    utest(2, run_code, '-file', path_join(dir, 'missing.txt'))
    utest(2, run_code, '-file', dir)
    code, out, err = run('-file', path_join(dir, 'missing.txt'))
    utest_val(True, 'missing.txt' in err, 'missing file error names the file')


# Version.
code, out, err = run('-version')
utest_val(0, code, 'version exit code')
utest_val(True, out.startswith(f'hashvalue V{__version__} (Python '), f'version output: {out!r}')


# Parameter errors.
utest(1, run_code)
utest(1, run_code, '-source', 'abc', '-file', 'abc.txt')
utest(1, run_code, '-source', '')
utest(1, run_code, '-file', '')
utest(1, run_code, '-source', 'abc', '-hash', 'sha4')
utest(1, run_code, '-source', 'abc', '-lower', '-upper')
utest(1, run_code, '-source', 'abc', '-separator', '123456789')
utest(1, run_code, '-source', 'abc', '-prefix', '123456789')
utest(0, run_code, '-source', 'abc', '-prefix', '12345678')
utest(1, run_code, '-source', 'abc', 'extra')
utest(1, run_code, '-source', 'abc', '-unknown')

code, out, err = run('-source', 'abc', '-hash', 'sha4')
utest_val('', out, 'no output on parameter error')
utest_val(True, "Invalid hash type: 'sha4'" in err, 'invalid hash message')
utest_val(True, 'Valid hash names: blake2b-256, ' in err, 'usage lists valid hash names')
