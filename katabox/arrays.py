"""Array puzzles: merged medians, odd sorting, interval coverage and missing lengths."""

import heapq
from itertools import islice, pairwise


def median_sorted_arrays(nums1, nums2):
    """Median of the merge of two sorted lists; 0.0 when both are empty."""
    if len(nums1) == 1 and len(nums2) == 1:
        return (nums1[0] + nums2[0]) / 2
    total = len(nums1) + len(nums2)
    if total == 0:
        return 0.0
    head = list(islice(heapq.merge(nums1, nums2), total // 2 + 1))
    if total % 2 == 0:
        return (head[-1] + head[-2]) / 2
    return float(head[-1])


def sort_odds(values):
    """Sort the odd numbers among ``values`` while even numbers keep their places."""
    odds = iter(sorted(value for value in values if value % 2))
    return [next(odds) if value % 2 else value for value in values]


def sum_intervals(intervals):
    """Number of integers ``i`` with ``start <= i < end`` for some interval."""
    covered = set()
    for start, end in intervals:
        covered.update(range(start, end))
    return len(covered)


def missing_array_length(arrays):
    """Length missing from a run of array lengths that grow by one, or 0."""
    if not arrays or not arrays[0]:
        return 0
    lengths = sorted(len(array) for array in arrays)
    missing = None
    for previous, current in pairwise(lengths):
        if current == 0:
            return 0
        if current - previous > 1:
            missing = previous + 1
    if missing is not None and len(arrays) != 2:
        return missing
    return 0