import typing as ty


__all__ = [
    "Step",
    "Step2",
    "Generator",
    "Generator2",
    "Pairs",
    "close",
]


T = ty.TypeVar("T")
K = ty.TypeVar("K")
V = ty.TypeVar("V")
E = ty.TypeVar("E")
P = ty.TypeVar("P")

Step = ty.Callable[[T], bool]
Step2 = ty.Callable[[K, V], bool]
Generator = ty.Callable[[Step[T]], ty.Optional[BaseException]]
Generator2 = ty.Callable[[Step2[K, V]], ty.Optional[BaseException]]
Pairs = ty.Union[ty.Iterable[ty.Tuple[K, V]], ty.Mapping[K, V]]


def close(iterator: ty.Iterator[ty.Any]) -> None:
    """Asks ``iterator`` to stop producing, if it supports being closed."""
    close_ = getattr(iterator, "close", None)
    if callable(close_):
        close_()
