"""Tests for isomertools.partitions."""
import pytest

from isomertools.partitions.partitioner import Partition, Partitioner
from isomertools.partitions.bruteforce import partitions_bruteforce, partition_count


def _bounds_grid(max_total):
    for total in range(0, max_total + 1):
        for max_parts in range(0, total + 2):
            for max_value in range(0, total + 2):
                yield total, max_parts, max_value


def test_order_unbounded_4():
    got = [p.as_tuple() for p in Partitioner(4)]
    assert got == [
        ((4, 1),),
        ((1, 1), (3, 1)),
        ((2, 2),),
        ((1, 2), (2, 1)),
        ((1, 4),),
    ]


def test_bounds_exclude_partitions():
    # at most 2 parts, none larger than 3
    got = [p.parts() for p in Partitioner(6, 2, 3)]
    assert got == [[3, 3]]


def test_complete_and_unique_against_bruteforce():
    for total, max_parts, max_value in _bounds_grid(12):
        got = [tuple(p.parts()) for p in Partitioner(total, max_parts, max_value)]
        expected = list(partitions_bruteforce(total, max_parts, max_value))
        assert len(set(got)) == len(got), (total, max_parts, max_value)
        assert sorted(got) == sorted(expected), (total, max_parts, max_value)
        assert len(got) == partition_count(total, max_parts, max_value)


def test_invariants_hold_for_every_partition():
    for total, max_parts, max_value in _bounds_grid(10):
        for p in Partitioner(total, max_parts, max_value):
            pairs = p.as_tuple()
            assert sum(v * m for v, m in pairs) == total
            assert sum(m for _, m in pairs) == p.size <= max_parts
            assert all(1 <= v <= max_value for v, _ in pairs)
            assert all(m >= 1 for _, m in pairs)
            values = [v for v, _ in pairs]
            assert values == sorted(set(values))


def test_partition_numbers():
    # p(n) for n = 0..15
    expected = [1, 1, 2, 3, 5, 7, 11, 15, 22, 30, 42, 56, 77, 101, 135, 176]
    assert [Partitioner(n).count() for n in range(16)] == expected


def test_bounds_are_clamped():
    pt = Partitioner(5, 9, 7)
    assert pt.max_parts == 5
    assert pt.max_value == 5
    assert Partitioner(5).max_parts == 5


def test_zero_total_yields_empty_partition():
    parts = Partitioner(0).to_list()
    assert len(parts) == 1
    assert parts[0].as_tuple() == ()
    assert parts[0].size == 0


def test_unsatisfiable_bounds_are_empty():
    assert Partitioner(7, 2, 3).to_list() == []
    assert Partitioner(3, 0).to_list() == []


def test_exhausted_cursor_raises_stop_iteration():
    it = iter(Partitioner(3, 1, 1))
    with pytest.raises(StopIteration):
        next(it)

    it = iter(Partitioner(1))
    next(it)
    with pytest.raises(StopIteration):
        next(it)


def test_cursor_reuses_partition_instance():
    it = iter(Partitioner(4))
    first = next(it)
    snapshot = first.copy()
    second = next(it)
    assert second is first
    # the snapshot keeps its value after the cursor moves on
    assert snapshot.as_tuple() == ((4, 1),)
    assert first.as_tuple() == ((1, 1), (3, 1))


def test_to_list_returns_independent_copies():
    parts = Partitioner(6, 3).to_list()
    assert len({id(p) for p in parts}) == len(parts)
    assert len({p.as_tuple() for p in parts}) == len(parts)


def test_to_list_idempotent():
    a = {p.as_tuple() for p in Partitioner(9, 4, 5).to_list()}
    b = {p.as_tuple() for p in Partitioner(9, 4, 5).to_list()}
    assert a == b


def test_iteration_restarts_per_iter_call():
    pt = Partitioner(5, 3)
    assert [p.as_tuple() for p in pt] == [p.as_tuple() for p in pt]


def test_partition_equality_and_str():
    a, b = Partitioner(7, 3, 3).to_list()[:2]
    assert a == a.copy()
    assert a != b
    assert str(a) == "3^2 + 1"
    assert len(a) == 2
    assert isinstance(a, Partition)


@pytest.mark.parametrize("args", [(-1,), (3, -1), (3, 2, -1)])
def test_negative_bounds_rejected(args):
    with pytest.raises(ValueError):
        Partitioner(*args)


def test_partition_count_keeps_no_memo_between_calls():
    from isomertools.partitions import bruteforce

    assert partition_count(12) == 77
    assert partition_count(12, 3, 5) == len(list(partitions_bruteforce(12, 3, 5)))
    assert not any(hasattr(obj, "cache_info") for obj in vars(bruteforce).values())
