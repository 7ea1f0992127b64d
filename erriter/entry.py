"""
``erriter.entry``
=================

Elements of a fallible sequence. Each entry carries either a successfully
produced payload or the terminal error of the sequence, never both.
"""
import typing as ty
from dataclasses import dataclass

from rich.text import Text

from erriter import base

__all__ = ["Entry", "Entry2", "ErrorSlot"]


@dataclass(frozen=True, repr=False)
class _EntryBase(ty.Generic[base.V]):
    _value: ty.Optional[base.V] = None
    _err: ty.Optional[BaseException] = None

    def __post_init__(self) -> None:
        if self._err is not None and self._payload_set():
            raise ValueError("An entry holds either a value or an error.")

    def _payload_set(self) -> bool:
        return self._value is not None

    def _payload(self) -> ty.Any:
        return self._value

    @property
    def err(self) -> ty.Optional[BaseException]:
        """The terminal error, or ``None`` for a success entry."""
        return self._err

    @property
    def value(self) -> ty.Optional[base.V]:
        """The produced value. Always ``None`` when ``err`` is set, so
        check ``err`` first.
        """
        return self._value

    def _fields(self) -> ty.Dict[str, ty.Any]:
        return {"value": self._value}

    def __str__(self) -> str:
        if self._err is not None:
            return str(self._err)
        return str(self._payload())

    def __repr__(self) -> str:
        name = self.__class__.__name__
        if self._err is not None:
            return f"{name}(err={self._err!r})"
        fields = ", ".join(f"{k}={v!r}" for k, v in self._fields().items())
        return f"{name}({fields})"

    def __rich__(self) -> Text:
        if self._err is not None:
            return Text(str(self), style="bold red")
        return Text(str(self))


class Entry(_EntryBase[base.V]):
    """Contains either a value or an error.

    :group: Entries

    Entries are produced by the adapters of this package; use
    ``Entry.success`` and ``Entry.failure`` only to build sequences of
    your own.
    """

    @classmethod
    def success(cls, value: base.V) -> "Entry[base.V]":
        return cls(_value=value)

    @classmethod
    def failure(cls, err: BaseException) -> "Entry[ty.Any]":
        if err is None:
            raise ValueError("A failure entry requires an error.")
        return cls(_err=err)


@dataclass(frozen=True, repr=False)
class Entry2(_EntryBase[base.V], ty.Generic[base.K, base.V]):
    """Contains either a key/value pair or an error.

    :group: Entries
    """

    _key: ty.Optional[base.K] = None

    def _payload_set(self) -> bool:
        return self._key is not None or self._value is not None

    def _payload(self) -> ty.Tuple[ty.Any, ty.Any]:
        return self._key, self._value

    def _fields(self) -> ty.Dict[str, ty.Any]:
        return {"key": self._key, "value": self._value}

    def __str__(self) -> str:
        if self._err is not None:
            return str(self._err)
        return f"{self._key} {self._value}"

    @property
    def key(self) -> ty.Optional[base.K]:
        """The produced key. Always ``None`` when ``err`` is set."""
        return self._key

    @classmethod
    def success(cls, key: base.K, value: base.V) -> "Entry2[base.K, base.V]":
        return cls(_value=value, _key=key)

    @classmethod
    def failure(cls, err: BaseException) -> "Entry2[ty.Any, ty.Any]":
        if err is None:
            raise ValueError("A failure entry requires an error.")
        return cls(_err=err)


class ErrorSlot:
    """Writable single-error slot, filled by ``Seq.unwrap`` and
    ``Seq2.unwrap`` when the unwrapped sequence ends with an error.

    :group: Entries

    Attributes
    ----------
    err : BaseException, optional
        The captured error. ``None`` until an error entry is reached.

    Examples
    --------
    >>> import erriter as eit
    >>> slot = eit.ErrorSlot()
    >>> list(eit.just([1]).unwrap(slot))
    [1]
    >>> slot.raise_for_error()
    """

    __slots__ = ("err",)

    def __init__(self, err: ty.Optional[BaseException] = None) -> None:
        self.err = err

    def __bool__(self) -> bool:
        return self.err is not None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(err={self.err!r})"

    def raise_for_error(self) -> None:
        """Raises the captured error, if there is one."""
        if self.err is not None:
            raise self.err
