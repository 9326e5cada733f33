import operator

import pytest

from supersorter.engine import sort
from supersorter.trace import CountingComparator, TracedList


def test_counts_reads_and_writes():
    seq = TracedList([1, 2, 3])
    seq[0]
    seq[1] = 5
    assert (seq.reads, seq.writes) == (1, 1)
    assert seq.frames == []


def test_records_frames():
    seq = TracedList([3, 1], record=True)
    seq[1]
    seq[0] = 9
    assert seq.frames == [(None, [1]), ([9, 1], [0])]


def test_write_frames_are_snapshots():
    seq = TracedList([1, 2], record=True)
    seq[0] = 5
    seq[0] = 6
    assert seq.frames[0][0] == [5, 2]


def test_slicing_reads_and_rejects_slice_assignment():
    seq = TracedList([4, 5, 6, 7])
    assert seq[1:3] == [5, 6]
    assert seq.reads == 2
    with pytest.raises(TypeError):
        seq[0:2] = [1, 1]


def test_mutable_sequence_mixins():
    seq = TracedList([1, 2])
    seq.append(3)
    seq.insert(0, 0)
    del seq[1]
    assert seq.snapshot() == [0, 2, 3]
    assert seq == TracedList([0, 2, 3])


def test_reset_counts():
    seq = TracedList([2, 1], record=True)
    sort(seq)
    assert seq.writes > 0
    seq.reset_counts()
    assert (seq.reads, seq.writes, seq.frames) == (0, 0, [])


def test_counting_comparator():
    cmp = CountingComparator(operator.gt)
    assert cmp(2, 1) is True
    assert cmp(1, 2) is False
    assert cmp.calls == 2
