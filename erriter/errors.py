"""
``erriter.errors``
==================

The stop sentinel. A generator returns or raises it to finish early
without the early finish being mistaken for a failure.
"""
import typing as ty

__all__ = ["Stop", "STOP", "is_stop"]


class Stop(Exception):
    """Sentinel meaning "terminate successfully".

    :group: Errors

    Generators built over some other callback-based API can raise this
    (or an exception explicitly chained from it, eg.
    ``raise RuntimeError("ctx") from Stop()``) to end production
    without an error entry being appended to the sequence.
    """

    def __init__(self, message: str = "stop") -> None:
        super().__init__(message)


STOP = Stop()


def _walk_causes(exc: BaseException) -> ty.Iterator[BaseException]:
    seen: ty.Set[int] = set()
    stack: ty.List[BaseException] = [exc]
    while stack:
        cur = stack.pop()
        if id(cur) in seen:
            continue
        seen.add(id(cur))
        yield cur
        if isinstance(cur, BaseExceptionGroup):
            stack.extend(reversed(cur.exceptions))
        cause = cur.__cause__
        if isinstance(cause, BaseException):
            stack.append(cause)


def is_stop(exc: ty.Optional[BaseException]) -> bool:
    """Returns ``True`` if ``exc`` is, or wraps, the stop sentinel.

    :group: Errors

    Parameters
    ----------
    exc : BaseException, optional
        Terminal status reported by a generator.

    Notes
    -----
    Only explicit wrapping counts: the ``__cause__`` chain set by
    ``raise ... from ...``, and the members of an exception group. An
    exception raised while *handling* a ``Stop`` (implicit
    ``__context__``) is a genuine failure.
    """
    if exc is None:
        return False
    return any(isinstance(cur, Stop) for cur in _walk_causes(exc))


def release_stop(exc: BaseException) -> None:
    """Drops the per-pass state held by the stop sentinels in ``exc``,
    so a shared sentinel such as ``STOP`` keeps no frames of a finished
    pass alive.
    """
    for cur in _walk_causes(exc):
        if not isinstance(cur, Stop):
            continue
        cur.__traceback__ = None
        if cur is STOP:
            cur.__context__ = None
            cur.__cause__ = None
            cur.__suppress_context__ = False
