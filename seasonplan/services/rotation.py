"""Cyclic list arithmetic shared by the affinity and roster stages."""

from __future__ import annotations

from typing import List, Sequence, TypeVar

T = TypeVar("T")


def rotate(items: Sequence[T], start_index: int) -> List[T]:
    """
    Return ``items`` reordered to begin at ``start_index`` and wrap around.

    Args:
        items: Sequence to rotate
        start_index: Index of the new first element (taken modulo the length)

    Returns:
        New list; empty when ``items`` is empty
    """
    if not items:
        return []
    pivot = start_index % len(items)
    return list(items[pivot:]) + list(items[:pivot])


def block_slice(items: Sequence[T], offset: int, length: int) -> List[T]:
    """
    Take ``length`` consecutive elements starting at ``offset``, wrapping as often as needed.

    ``block_slice([a, b, c], 2, 4)`` is ``[c, a, b, c]``.

    Args:
        items: Sequence to read cyclically
        offset: Starting position (taken modulo the length)
        length: Number of elements to take

    Returns:
        New list of ``length`` elements; empty when ``items`` is empty or ``length < 1``
    """
    if not items or length < 1:
        return []
    size = len(items)
    return [items[(offset + j) % size] for j in range(length)]
