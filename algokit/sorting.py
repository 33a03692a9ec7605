"""Classic comparison sorts and a small timing harness for them."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Callable, Iterable, Iterator
from typing import Any

RAND_MAX = 2**31 - 1


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using bubble sort with early exit on a clean pass."""
    items = list(values)
    n = len(items)
    for done in range(n - 1):
        swapped = False
        for j in range(n - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using insertion sort."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and items[j] > current:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using selection sort."""
    items = list(values)
    for i in range(len(items)):
        pos = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[pos] = items[pos], items[i]
    return items


def _sift_down(items: list[Any], size: int, root: int) -> None:
    while True:
        left = 2 * root + 1
        right = left + 1
        largest = root
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using an in-place max-heap."""
    items = list(values)
    n = len(items)
    for root in reversed(range(n // 2)):
        _sift_down(items, n, root)
    for end in reversed(range(1, n)):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using top-down merge sort (stable)."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition_first_pivot(items: list[Any], low: int, high: int) -> int:
    pivot = items[low]
    down, up = low, high
    while down < up:
        while items[down] <= pivot and down < up:
            down += 1
        while items[up] > pivot:
            up -= 1
        if down < up:
            items[down], items[up] = items[up], items[down]
    items[low], items[up] = items[up], items[low]
    return up


def _partition_last_pivot(items: list[Any], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    boundary += 1
    items[boundary], items[high] = items[high], items[boundary]
    return boundary


def _quick_sort(
    values: Iterable[Any], partition: Callable[[list[Any], int, int], int]
) -> list[Any]:
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        split = partition(items, low, high)
        pending.append((low, split - 1))
        pending.append((split + 1, high))
    return items


def quick_sort_hoare(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using quicksort with the first element as pivot."""
    return _quick_sort(values, _partition_first_pivot)


def quick_sort_lomuto(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using quicksort with the last element as pivot."""
    return _quick_sort(values, _partition_last_pivot)


SORTS: dict[str, Callable[[Iterable[Any]], list[Any]]] = {
    "bubble": bubble_sort,
    "insertion": insertion_sort,
    "selection": selection_sort,
    "heap": heap_sort,
    "merge": merge_sort,
    "quick-hoare": quick_sort_hoare,
    "quick-lomuto": quick_sort_lomuto,
}


def benchmark(
    sort: Callable[[list[int]], Any],
    sizes: Iterable[int],
    rng: random.Random | None = None,
) -> Iterator[tuple[int, float]]:
    """Time ``sort`` on random data of each size; yield ``(size, cpu_seconds)``."""
    rng = rng if rng is not None else random.Random()
    for size in sizes:
        data = [rng.randint(0, RAND_MAX) for _ in range(size)]
        start = time.process_time()
        sort(data)
        yield size, time.process_time() - start


def main(argv: list[str] | None = None) -> int:
    """Time a sort on growing random inputs and write a table of results."""
    parser = argparse.ArgumentParser(description="Time a sorting algorithm.")
    parser.add_argument("algorithm", choices=sorted(SORTS))
    parser.add_argument(
        "--max-exponent",
        type=int,
        default=6,
        help="largest input is 10**N elements (default 6)",
    )
    parser.add_argument("--output", help="results file (default <algorithm>_sort.txt)")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    sort = SORTS[args.algorithm]
    output = args.output or f"{args.algorithm}_sort.txt"
    sizes = [10**exponent for exponent in range(1, args.max_exponent + 1)]
    rng = random.Random(args.seed)

    with open(output, "w", encoding="utf-8") as table:
        table.write(f"{'No of data':<12}  {'Time taken (s)':<12}\n")
        for size, elapsed in benchmark(sort, sizes, rng):
            print(f"Time taken to run the algorithm for {size}: {elapsed:f} seconds")
            table.write(f"{size:<12d}  {elapsed:<12.6f}\n")
    return 0