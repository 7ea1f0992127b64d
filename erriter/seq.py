"""
``erriter.seq``
===============

Fallible sequences: re-iterable sequences of ``Entry`` (or ``Entry2``)
elements, in which an error entry is always the last element produced.
Ordinary iterables are lifted into them with ``just`` and ``just2``.
"""
import typing as ty
from collections.abc import Mapping

from erriter import base
from erriter.entry import Entry, Entry2, ErrorSlot

__all__ = ["Seq", "Seq2", "just", "just2"]


EntrySource = ty.Callable[[], ty.Iterable[base.E]]


class _FallibleSeq(ty.Generic[base.E, base.P]):
    """Sequence over entries of type ``E``, unwrapping to payloads of
    type ``P``.
    """

    def __init__(self, entries: EntrySource[base.E]) -> None:
        self._entries = entries

    def __iter__(self) -> ty.Iterator[base.E]:
        return iter(self._entries())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._entries!r})"

    def unwrap(self, slot: ErrorSlot) -> ty.Iterator[base.P]:
        """Converts the fallible sequence into an ordinary iterator of
        payloads. Iteration stops on the first error, which is stored
        into ``slot``.

        Parameters
        ----------
        slot : ErrorSlot
            Receives the error, if the sequence ends with one. Left
            untouched if the sequence is exhausted cleanly, or if
            iteration is stopped before the error is reached.

        Yields
        ------
        payload
            Successive values, or ``(key, value)`` tuples for ``Seq2``.

        Notes
        -----
        Checking ``slot`` after draining the iterator is similar to
        checking the error status of a database cursor after fetching
        all of its rows.
        """
        entries = iter(self)
        try:
            for entry in entries:
                if entry.err is not None:
                    slot.err = entry.err
                    return
                yield entry._payload()
        finally:
            base.close(entries)


class Seq(_FallibleSeq[Entry[base.T], base.T]):
    """A sequence of values that may report an error.

    :group: Sequences

    Parameters
    ----------
    entries : callable
        Zero-argument callable returning a fresh iterable of ``Entry``
        objects. It is called once per pass, so every ``iter()`` over
        the sequence starts from the beginning.
    """


class Seq2(_FallibleSeq[Entry2[base.K, base.V], ty.Tuple[base.K, base.V]]):
    """A sequence of key/value pairs that may report an error.

    :group: Sequences

    Parameters
    ----------
    entries : callable
        Zero-argument callable returning a fresh iterable of ``Entry2``
        objects.
    """


def _lift(
    iterable: ty.Iterable[ty.Any], wrap: ty.Callable[[ty.Any], base.E]
) -> ty.Iterator[base.E]:
    iterator = iter(iterable)
    try:
        for item in iterator:
            yield wrap(item)
    finally:
        base.close(iterator)


def just(iterable: ty.Iterable[base.T]) -> Seq[base.T]:
    """Wraps an existing iterable, which cannot itself fail.

    :group: Sequences

    Parameters
    ----------
    iterable : iterable
        Source of the values. Pass a re-iterable (eg. a list) if the
        resulting sequence is to be iterated more than once.

    Returns
    -------
    Seq
        Sequence of success entries, one per element, in order. When
        iteration stops early, the underlying iterator is closed.
    """
    return Seq(lambda: _lift(iterable, Entry.success))


def just2(pairs: base.Pairs[base.K, base.V]) -> Seq2[base.K, base.V]:
    """Wraps an existing iterable of key/value pairs.

    :group: Sequences

    Parameters
    ----------
    pairs : iterable of tuples, or mapping
        Source of the pairs, eg. ``enumerate(values)`` or a ``dict``,
        whose items are used.

    Returns
    -------
    Seq2
        Sequence of success entries, one per pair, in order.
    """
    def entries() -> ty.Iterator[Entry2[base.K, base.V]]:
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        return _lift(items, lambda kv: Entry2.success(*kv))

    return Seq2(entries)
