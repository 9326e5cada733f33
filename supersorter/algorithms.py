# ============================================================
# SuperSorter - in-place sorting strategies
# ============================================================
#
# Every strategy has the same shape:
#     strategy(seq, begin, end, comparator)
#   - sorts seq[begin:end] in place and returns None
#   - comparator(a, b) is True when a must NOT precede b
#     (operator.gt gives ascending order)
#
# Nothing in here does I/O or keeps state between calls.
# ============================================================

# Sub-ranges at or below this size are finished by insertion sort
# in default_sort instead of being partitioned further.
INSERTION_THRESHOLD = 200


# ============================================================
# ===================== SIMPLE STRATEGIES ====================
# ============================================================

def insertion_sort(seq, begin, end, comparator):
    """Insertion Sort - O(n^2), O(n) when already ordered - stable."""
    for pivot in range(begin + 1, end):
        value = seq[pivot]
        current = pivot
        while current > begin and comparator(seq[current - 1], value):
            seq[current] = seq[current - 1]
            current -= 1
        if current != pivot:
            seq[current] = value


def bubble_sort(seq, begin, end, comparator):
    """Bubble Sort - O(n^2), O(n) when already ordered - stable."""
    swapped = True
    while swapped and end - begin > 1:
        swapped = False
        for i in range(begin, end - 1):
            if comparator(seq[i], seq[i + 1]):
                seq[i], seq[i + 1] = seq[i + 1], seq[i]
                swapped = True
        # the largest element of this pass is now in place
        end -= 1


def selection_sort(seq, begin, end, comparator):
    """
    Selection Sort - always O(n^2) comparisons - stable.

    The extremum of each scan is rotated into the pivot slot rather than
    swapped there, so elements it jumps over keep their relative order.
    """
    for pivot in range(begin, end - 1):
        found = pivot
        for i in range(pivot + 1, end):
            if comparator(seq[found], seq[i]):
                found = i
        if found == pivot:
            continue
        value = seq[found]
        for i in range(found, pivot, -1):
            seq[i] = seq[i - 1]
        seq[pivot] = value


# ============================================================
# ======================== PARTITION =========================
# ============================================================

def median_of_three(seq, left, right, comparator):
    """Index of the median of the elements at 1/4, 1/2 and 3/4 of [left, right]."""
    half = (right - left) // 2
    quarter = half // 2
    lq, mid, rq = left + quarter, left + half, right - quarter

    if comparator(seq[lq], seq[mid]):
        if comparator(seq[rq], seq[mid]):
            # mid is the smallest, take the smaller of the quarters
            return rq if comparator(seq[lq], seq[rq]) else lq
    elif comparator(seq[mid], seq[rq]):
        # mid is the largest, take the larger of the quarters
        return rq if comparator(seq[rq], seq[lq]) else lq
    return mid


def partition(seq, left, right, comparator):
    """
    Partition the inclusive range [left, right] around a median-of-three
    pivot and return the pivot's final index.

    Front pass: everything before the pivot that must precede it is packed
    to the front, then the pivot drops in right after. Back pass: everything
    after the pivot that must follow it is packed to the back, then the
    pivot drops in right before. Not stable.
    """
    p = median_of_three(seq, left, right, comparator)
    pivot = seq[p]

    store = left
    for i in range(left, p):
        if comparator(pivot, seq[i]):
            seq[i], seq[store] = seq[store], seq[i]
            store += 1
    seq[store], seq[p] = seq[p], seq[store]
    p = store

    store = right
    for i in range(right, p, -1):
        if comparator(seq[i], pivot):
            seq[i], seq[store] = seq[store], seq[i]
            store -= 1
    seq[store], seq[p] = seq[p], seq[store]
    return store


def _push_sides(stack, left, p, right):
    # larger side goes in first so the smaller one is handled next,
    # which keeps the stack at O(log n) entries
    lo_side, hi_side = (left, p - 1), (p + 1, right)
    if p - left > right - p:
        stack.append(lo_side); stack.append(hi_side)
    else:
        stack.append(hi_side); stack.append(lo_side)


# ============================================================
# ==================== DIVIDE & CONQUER ======================
# ============================================================

def quick_sort(seq, begin, end, comparator):
    """Quick Sort - O(n log n) average, O(n^2) worst - not stable."""
    stack = [(begin, end - 1)]
    while stack:
        left, right = stack.pop()
        if left >= right:
            continue
        p = partition(seq, left, right, comparator)
        _push_sides(stack, left, p, right)


def default_sort(seq, begin, end, comparator, threshold=INSERTION_THRESHOLD):
    """
    Hybrid Quick Sort - ranges of `threshold` elements or fewer are handed
    to insertion sort, both up front and for every partition produced on
    the way down. Same bounds as quick_sort, smaller constant. Not stable.
    """
    stack = [(begin, end - 1)]
    while stack:
        left, right = stack.pop()
        if right - left + 1 <= threshold:
            insertion_sort(seq, left, right + 1, comparator)
            continue
        p = partition(seq, left, right, comparator)
        _push_sides(stack, left, p, right)


def merge_sort(seq, begin, end, comparator):
    """Merge Sort - always O(n log n), O(n) extra space - stable."""
    if end - begin > 1:
        _merge_sort(seq, begin, end - 1, comparator)


def _merge_sort(seq, left, right, comparator):
    if left >= right:
        return
    middle = (left + right - 1) // 2
    _merge_sort(seq, left, middle, comparator)
    _merge_sort(seq, middle + 1, right, comparator)
    merge(seq, left, middle, right, comparator)


def merge(seq, left, middle, right, comparator):
    """Merge the sorted runs [left, middle] and [middle+1, right] in place."""
    # fresh buffers per call; a slice of a numpy array would be a view
    lbuf = [seq[i] for i in range(left, middle + 1)]
    rbuf = [seq[i] for i in range(middle + 1, right + 1)]

    i = j = 0
    k = left
    while i < len(lbuf) and j < len(rbuf):
        # right wins only when the left item must follow it; ties keep left first
        if comparator(lbuf[i], rbuf[j]):
            seq[k] = rbuf[j]; j += 1
        else:
            seq[k] = lbuf[i]; i += 1
        k += 1
    while i < len(lbuf):
        seq[k] = lbuf[i]; i += 1; k += 1
    while j < len(rbuf):
        seq[k] = rbuf[j]; j += 1; k += 1
