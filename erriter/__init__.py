"""
``erriter``
===========

Iterators which may encounter errors. Lifts push-style generators, which
report failure through a terminal status, and plain iterables into
sequences of entries, each holding either a value or the error which
ended the sequence.
"""
import logging

from ._version import __version__
from . import console, generator, seq
from .entry import Entry, Entry2, ErrorSlot
from .errors import STOP, Stop, is_stop
from .generator import of, of2
from .seq import Seq, Seq2, just, just2

# silent unless the host application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = [
    "__version__",
    "console",
    "generator",
    "seq",
    "Entry",
    "Entry2",
    "ErrorSlot",
    "Seq",
    "Seq2",
    "STOP",
    "Stop",
    "is_stop",
    "just",
    "just2",
    "of",
    "of2",
]
