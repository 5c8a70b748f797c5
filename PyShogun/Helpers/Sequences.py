from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar('T')
K = TypeVar('K')

def Chunked(items : Sequence[T], size : int) -> list[list[T]]:
    """
    Split a sequence into lists of the given size. The last chunk may be shorter.
    """
    if size <= 0:
        raise ValueError(f"Chunk size must be positive, got {size}")

    return [ list(items[i:i + size]) for i in range(0, len(items), size) ]

def GroupBy(items : Iterable[T], key : Callable[[T], K]) -> dict[K, list[T]]:
    """
    Group items into a dictionary of lists keyed by the result of key(item), preserving order within each group
    """
    groups : dict[K, list[T]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups

def Distinct(items : Iterable[T]) -> list[T]:
    """
    Remove duplicates, keeping the first occurrence of each item
    """
    seen : set[Any] = set()
    result : list[T] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result
