# -*- coding: utf-8 -*-
"""Colored console messages of the simulator.

- :py:func:`~planckview.misc.printer.printg`: details of a calculation, shown
  with ``verbose>=2``
- :py:func:`~planckview.misc.printer.printr`: warnings whose status is
  ``"print"`` (see :py:func:`~planckview.misc.warning.warn`)

-------------------------------------------------------------------------------
"""

from termcolor import colored


def _print_colored(message, color):
    print(colored(str(message), color=color))


def printg(message):
    """Print ``message`` in green."""
    _print_colored(message, "green")


def printr(message):
    """Print ``message`` in red."""
    _print_colored(message, "red")
