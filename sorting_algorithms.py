#Order predicates

def is_sorted(a):
    """
    Return True if a is non-decreasing.
    Sequences with fewer than two elements are trivially sorted.
    """
    return all(a[i] <= a[i + 1] for i in range(len(a) - 1))


def is_reverse_sorted(a):
    """
    Return True if a is non-increasing.
    Like is_sorted, this is vacuously true for empty and single-element
    sequences, so those count as both sorted and reverse-sorted.
    """
    return all(a[i] >= a[i + 1] for i in range(len(a) - 1))


#Quadratic sorts

def bubble_sort(arr):
    """
    Sort by repeated passes of adjacent compare-and-swap.

    After pass i the largest i+1 values sit at the tail, so each pass can stop
    one position earlier. A pass without any swap means the list is already
    in order and we return early; that is what gives the O(n) best case on
    sorted input.
    """
    a = list(arr) #work on a copy so caller isn't mutated
    n = len(a)
    for i in range(n):
        swapped = False
        for j in range(n - i - 1):
            if a[j] > a[j + 1]:
                a[j], a[j + 1] = a[j + 1], a[j]
                swapped = True
        if not swapped:
            break
    return a


def selection_sort(arr):
    """
    Sort by selecting the minimum of the unsorted suffix and swapping it into
    place. Always makes n(n-1)/2 comparisons, whatever the arrangement.
    """
    a = list(arr)
    n = len(a)
    for i in range(n):
        min_idx = i
        for j in range(i + 1, n):
            if a[j] < a[min_idx]:
                min_idx = j
        a[i], a[min_idx] = a[min_idx], a[i]
    return a


def insertion_sort(arr):
    """
    Grow a sorted prefix one element at a time.
    Each key shifts the larger prefix elements one slot right and drops into
    the gap. Very fast when the list is nearly sorted.
    """
    a = list(arr)
    for i in range(1, len(a)):
        key = a[i]
        j = i - 1
        while j >= 0 and a[j] > key:
            a[j + 1] = a[j]
            j -= 1
        a[j + 1] = key
    return a


#Divide and conquer sorts

def merge(left, right):
    """
    Merge two sorted lists into a new sorted list.

    On equal heads the left element is taken first, so equal values keep
    their relative order (this is what makes merge_sort stable).
    Neither input is modified.
    """
    res, i, j = [], 0, 0
    while i < len(left) and j < len(right):
        if right[j] < left[i]:
            res.append(right[j])
            j += 1
        else:
            res.append(left[i])
            i += 1
    return res + left[i:] + right[j:]


def merge_sort(arr):
    """
    Recursively halve down to singleton/empty lists, then merge back up.
    O(n log n) in every case; recursion depth is only log2(n).
    """
    if len(arr) <= 1:
        return list(arr)
    m = len(arr) // 2
    return merge(merge_sort(arr[:m]), merge_sort(arr[m:]))


def quick_sort(arr):
    """
    Quicksort with the last element as pivot.

    Elements strictly less than the pivot form the left partition, everything
    else (ties included) the right one, and the result is
    sorted(left) + [pivot] + sorted(right).

    Sorted and reverse-sorted inputs make the pivot an extremum at every
    level, so the partition depth reaches n. Pending work is therefore kept on
    an explicit stack instead of the call stack:
    - ("sort", part) partitions part and schedules its pieces
    - ("emit", value) appends a pivot to the output
    Pieces are pushed right-to-left so they are processed left-to-right.
    """
    out = []
    stack = [("sort", list(arr))]
    while stack:
        kind, item = stack.pop()
        if kind == "emit":
            out.append(item)
            continue

        if len(item) <= 1:
            out.extend(item)
            continue

        pivot = item[-1]
        left, right = [], []
        for x in item[:-1]:
            if x < pivot:
                left.append(x)
            else:
                right.append(x)

        stack.append(("sort", right))
        stack.append(("emit", pivot))
        stack.append(("sort", left))
    return out


__all__ = [
    'bubble_sort',
    'selection_sort',
    'insertion_sort',
    'merge',
    'merge_sort',
    'quick_sort',
    'is_sorted',
    'is_reverse_sorted',
]
