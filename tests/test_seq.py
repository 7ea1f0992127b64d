import itertools as it
import typing as ty

from hypothesis import given, settings, strategies as st

import erriter as eit


class CountError(Exception):
    pass


def counter(ct: int) -> eit.Seq[int]:
    """Emits the requested number of values and then an error."""

    def generate(step: ty.Callable[[int], bool]) -> ty.Optional[Exception]:
        for i in range(ct):
            if not step(i):
                return None
        return CountError("Error World!")

    return eit.of(generate)


def counter2(ct: int) -> eit.Seq2[int, str]:
    """Emits the requested number of pairs and then an error."""

    def generate(step: ty.Callable[[int, str], bool]) -> ty.Optional[Exception]:
        for i in range(ct):
            if not step(i, str(i)):
                return None
        return CountError("Error World!")

    return eit.of2(generate)


class Tracked:
    """Iterator which records whether it has been closed."""

    def __init__(self, values: ty.Iterable[ty.Any]) -> None:
        self._it = iter(values)
        self.closed = False
        self.pulled = 0

    def __iter__(self) -> "Tracked":
        return self

    def __next__(self) -> ty.Any:
        value = next(self._it)
        self.pulled += 1
        return value

    def close(self) -> None:
        self.closed = True


@given(st.lists(st.integers()))
@settings(max_examples=50, deadline=None)
def test_just_round_trip(values: ty.List[int]) -> None:
    """Tests that unwrapping ``just(values)`` gives back the values in
    order, without touching the error slot.
    """
    slot = eit.ErrorSlot()
    assert list(eit.just(values).unwrap(slot)) == values
    assert slot.err is None
    assert not slot


@given(st.dictionaries(st.integers(), st.text()))
@settings(max_examples=50, deadline=None)
def test_just2_round_trip(mapping: ty.Dict[int, str]) -> None:
    """Tests the pair variant, with mappings and pair iterables."""
    slot = eit.ErrorSlot()
    assert dict(eit.just2(mapping).unwrap(slot)) == mapping
    pairs = list(mapping.items())
    assert list(eit.just2(iter(pairs)).unwrap(slot)) == pairs
    assert slot.err is None


@given(st.lists(st.integers(), min_size=1), st.data())
@settings(max_examples=30, deadline=None)
def test_just_early_stop_closes(values: ty.List[int], data: st.DataObject) -> None:
    """Tests that stopping a ``just`` sequence stops the underlying
    iterator, and that nothing else is pulled from it.
    """
    k = data.draw(st.integers(1, len(values)))
    source = Tracked(values)
    entries = iter(eit.just(source))
    taken = list(it.islice(entries, k))
    entries.close()
    assert [e.value for e in taken] == values[:k]
    assert source.closed
    assert source.pulled == k


@given(st.dictionaries(st.integers(), st.text(), min_size=1), st.data())
@settings(max_examples=30, deadline=None)
def test_just2_early_stop_closes(
    mapping: ty.Dict[int, str], data: st.DataObject
) -> None:
    """Tests that stopping a ``just2`` sequence stops the underlying
    pair iterator, and that nothing else is pulled from it.
    """
    pairs = list(mapping.items())
    k = data.draw(st.integers(1, len(pairs)))
    source = Tracked(pairs)
    entries = iter(eit.just2(source))
    taken = list(it.islice(entries, k))
    entries.close()
    assert [(e.key, e.value) for e in taken] == pairs[:k]
    assert source.closed
    assert source.pulled == k


def test_just_entries() -> None:
    """Tests the entries, as printed."""
    assert [str(e) for e in eit.just([1, 2, 3])] == ["1", "2", "3"]
    pairs = eit.just2(enumerate([1, 2, 3]))
    assert [str(e) for e in pairs] == ["0 1", "1 2", "2 3"]


def test_unwrap_counter() -> None:
    """Tests that draining ``unwrap`` gives the values, then stores the
    error, as when checking the error of a database cursor.
    """
    slot = eit.ErrorSlot()
    assert list(counter(3).unwrap(slot)) == [0, 1, 2]
    assert str(slot.err) == "Error World!"
    assert isinstance(slot.err, CountError)


def test_unwrap_counter2() -> None:
    """Tests that pair unwrapping collects into a dict."""
    slot = eit.ErrorSlot()
    assert dict(counter2(3).unwrap(slot)) == {0: "0", 1: "1", 2: "2"}
    assert str(slot.err) == "Error World!"


@given(st.integers(1, 20), st.data())
@settings(max_examples=30, deadline=None)
def test_unwrap_early_stop(n: int, data: st.DataObject) -> None:
    """Tests that stopping the unwrapped iterator before the error
    leaves the slot untouched.
    """
    k = data.draw(st.integers(0, n))
    slot = eit.ErrorSlot()
    values = counter(n).unwrap(slot)
    assert list(it.islice(values, k)) == list(range(k))
    values.close()
    assert slot.err is None


def test_unwrap_keeps_prior_slot() -> None:
    """Tests that a clean sequence does not reset an existing error."""
    prior = CountError("prior")
    slot = eit.ErrorSlot(prior)
    assert list(eit.just([1]).unwrap(slot)) == [1]
    assert slot.err is prior


def test_unwrap_stops_generator() -> None:
    """Tests that stopping the unwrapped iterator stops the generator."""
    produced = []

    def generate(step: ty.Callable[[int], bool]) -> None:
        for i in range(10):
            produced.append(i)
            if not step(i):
                return None

    values = eit.of(generate).unwrap(eit.ErrorSlot())
    assert next(values) == 0
    values.close()
    assert produced == [0]


def test_error_is_last_with_own_entries() -> None:
    """Tests that ``unwrap`` ignores anything after an error."""
    entries = [
        eit.Entry.success(1),
        eit.Entry.failure(CountError("boom")),
        eit.Entry.success(2),
    ]
    slot = eit.ErrorSlot()
    assert list(eit.Seq(lambda: entries).unwrap(slot)) == [1]
    assert str(slot.err) == "boom"
