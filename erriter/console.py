"""
``erriter.console``
===================

Rendering of fallible sequences on a ``rich`` console.
"""
import typing as ty

from rich.console import Console

from erriter.entry import Entry, Entry2

__all__ = ["show"]


def show(
    seq: ty.Iterable[ty.Union[Entry[ty.Any], Entry2[ty.Any, ty.Any]]],
    console: ty.Optional[Console] = None,
) -> None:
    """Prints each entry of a fallible sequence on its own line. Values
    are printed as they are, pairs as ``key value``, and the error, if
    the sequence ends with one, is highlighted.

    :group: Console

    Parameters
    ----------
    seq : Seq or Seq2
        The sequence to drain.
    console : rich.console.Console, optional
        Where to print. Defaults to a new console on stdout.
    """
    if console is None:
        console = Console()
    for entry in seq:
        console.print(entry, highlight=False)
