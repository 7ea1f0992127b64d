"""
``erriter.generator``
=====================

Adapts push-style generators, which drive a step callback and report a
terminal status, into fallible pull sequences.

A generator is a callable accepting a ``step`` function. It calls
``step(value)`` (or ``step(key, value)``) once per produced element,
and should return as soon as ``step`` returns ``False``. It finishes
by returning ``None``, or by returning or raising an exception. The
stop sentinel, ``erriter.Stop``, is treated the same as ``None``; any
other exception becomes the final entry of the sequence.

The generator runs on its own greenlet, switching back to the consumer
at every ``step`` call, so nothing is buffered and nothing runs
concurrently.
"""
import logging
import typing as ty
import warnings

import greenlet

from erriter import base
from erriter.entry import Entry, Entry2
from erriter.errors import is_stop, release_stop
from erriter.seq import Seq, Seq2

__all__ = ["of", "of2"]

log = logging.getLogger(__name__)


class _Pass(ty.Generic[base.E]):
    """A single iteration pass over a generator. Runs the generator on
    a child greenlet, handing each produced entry to the consumer.
    """

    def __init__(
        self,
        generator: ty.Callable[..., ty.Any],
        wrap: ty.Callable[..., base.E],
        fail: ty.Callable[[BaseException], base.E],
    ) -> None:
        self._generator = generator
        self._wrap = wrap
        self._fail = fail
        self._glet = greenlet.greenlet(self._run)
        self._stopped = False
        self._warned = False

    def _run(self) -> ty.Optional[BaseException]:
        try:
            status = self._generator(self._step)
        except Exception as exc:
            return exc
        if status is None or isinstance(status, BaseException):
            return status
        return TypeError(
            "Generator must return None or an exception, "
            f"not {type(status).__name__}."
        )

    def _step(self, *item: ty.Any) -> bool:
        if greenlet.getcurrent() is not self._glet:
            raise RuntimeError(
                "step called outside of the generator's iteration pass."
            )
        if self._stopped:
            if not self._warned:
                self._warned = True
                warnings.warn(
                    "Generator ignored stop request and kept producing.",
                    RuntimeWarning,
                    stacklevel=2,
                )
            return False
        return self._glet.parent.switch(self._wrap(*item))

    def _resume(self, *proceed: bool) -> ty.Any:
        self._glet.parent = greenlet.getcurrent()
        return self._glet.switch(*proceed)

    def _halt(self) -> None:
        self._stopped = True
        if not self._glet:
            return
        status = self._resume(False)
        if status is None:
            return
        if is_stop(status):
            release_stop(status)
        else:
            log.debug("Discarding %r, reported after consumer stop.", status)

    def __iter__(self) -> ty.Iterator[base.E]:
        out = self._resume()
        while not self._glet.dead:
            try:
                yield out
            except BaseException:
                self._halt()
                raise
            out = self._resume(True)
        if out is None:
            return
        if is_stop(out):
            log.debug("Generator finished with stop sentinel: %r.", out)
            release_stop(out)
            return
        log.debug("Generator failed: %r.", out)
        yield self._fail(out)


def of(generator: base.Generator[base.T]) -> Seq[base.T]:
    """Constructs a fallible sequence from a generator function that
    may fail.

    :group: Generators

    Parameters
    ----------
    generator : callable
        Called with ``step``, once per pass over the sequence. Produces
        values with ``step(value)``, stopping when it returns
        ``False``. Returns ``None`` or ``erriter.STOP`` on success;
        returns or raises any other exception on failure.

    Returns
    -------
    Seq
        One success entry per produced value. If the generator fails,
        a single error entry follows; nothing follows an error.

    Notes
    -----
    If the consumer stops iterating, ``step`` returns ``False`` and no
    further entry, success or error, is produced. A generator which
    keeps calling ``step`` after that receives ``False`` each time,
    and a ``RuntimeWarning`` is emitted once.

    Examples
    --------
    >>> def count(step):
    ...     for i in range(3):
    ...         if not step(i):
    ...             return None
    ...     return ValueError("Error World!")
    >>> for entry in of(count):
    ...     print(entry)
    0
    1
    2
    Error World!
    """
    return Seq(lambda: _Pass(generator, Entry.success, Entry.failure))


def of2(generator: base.Generator2[base.K, base.V]) -> Seq2[base.K, base.V]:
    """Constructs a fallible sequence of key/value pairs from a
    generator function that may fail.

    :group: Generators

    Parameters
    ----------
    generator : callable
        Called with ``step``, once per pass over the sequence. Produces
        pairs with ``step(key, value)``. Terminal status as for ``of``.

    Returns
    -------
    Seq2
        One success entry per produced pair, followed by a single error
        entry if the generator fails.
    """
    return Seq2(lambda: _Pass(generator, Entry2.success, Entry2.failure))
