# ============================================================
# SuperSorter - instrumented sequences
# ============================================================
#
# The sorting core never yields, so instead of the generator protocol
# (yield arr, [active_indices]) we hand it a list that watches itself.
# Every read and write becomes a frame: (snapshot or None, [indices]).
# ============================================================

from collections.abc import MutableSequence


class TracedList(MutableSequence):
    """
    List wrapper that counts element reads and writes.

    With record=True each write also stores a frame
    (copy of the data, [index]) and each read a frame (None, [index]),
    which is what the visualizer replays.
    """

    def __init__(self, values=(), record=False):
        self._data = list(values)
        self.record = record
        self.reads = 0
        self.writes = 0
        self.frames = []

    def __len__(self):
        return len(self._data)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self._data)))]
        value = self._data[index]
        self.reads += 1
        if self.record:
            self.frames.append((None, [index]))
        return value

    def __setitem__(self, index, value):
        if isinstance(index, slice):
            raise TypeError("TracedList does not support slice assignment")
        self._data[index] = value
        self.writes += 1
        if self.record:
            self.frames.append((list(self._data), [index]))

    def __delitem__(self, index):
        del self._data[index]

    def insert(self, index, value):
        self._data.insert(index, value)

    def __eq__(self, other):
        if isinstance(other, TracedList):
            return self._data == other._data
        return self._data == other

    def __repr__(self):
        return f"TracedList({self._data!r})"

    def snapshot(self) -> list:
        return list(self._data)

    def reset_counts(self):
        self.reads = 0
        self.writes = 0
        self.frames = []


class CountingComparator:
    """Wraps a comparator and counts how many times it is called."""

    def __init__(self, comparator):
        self.comparator = comparator
        self.calls = 0

    def __call__(self, a, b):
        self.calls += 1
        return self.comparator(a, b)
