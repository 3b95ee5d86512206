"""
Stockroom - typed inventory repositories with isolated stock adjustments.

- stockroom.core: repository, manager, errors, result envelope
- stockroom.cli: command-line driver (demo walkthrough)
"""

__version__ = "0.1.0"

from stockroom.core import *  # noqa
