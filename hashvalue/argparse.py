# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import sys
from argparse import ArgumentParser
from typing import NoReturn

from .io import errL


rc_parameter_error = 1
rc_processing_error = 2


class ArgParser(ArgumentParser):
  '''
  A subclass of the standard ArgumentParser.
  Usage errors print the message followed by the full help text (including the epilog),
  and exit with `rc_parameter_error`.
  '''

  def error(self, message:str) -> NoReturn:
    errL()
    errL(message)
    errL()
    self.print_help(sys.stderr)
    self.exit(rc_parameter_error)


def exit_processing_error(message:str) -> NoReturn:
  'Print `message` to std err and exit with `rc_processing_error`.'
  errL()
  errL(message)
  exit(rc_processing_error)
