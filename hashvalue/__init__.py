# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'hashvalue computes a cryptographic digest of text or a file and prints it in several text encodings.'

__version__ = '2.0.0'
