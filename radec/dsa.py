"""
Sorted-list utilities
=====================

Small list primitives used by the indices:

- Intersection of two sorted lists (two-pointer technique)
- Union of two sorted lists without duplicates
"""

from __future__ import annotations
from typing import List


def intersect_sorted(a: List[int], b: List[int]) -> List[int]:
    """Two-pointer intersection for sorted integer lists."""
    # i and j are pointers into each sorted list
    i = j = 0
    out: List[int] = []
    while i < len(a) and j < len(b):
        if a[i] == b[j]:
            out.append(a[i]); i += 1; j += 1
        elif a[i] < b[j]:
            i += 1
        else:
            j += 1
    return out


def union_sorted(a: List[int], b: List[int]) -> List[int]:
    """Merge two sorted integer lists, dropping duplicates."""
    i = j = 0
    out: List[int] = []

    def push(x: int) -> None:
        if not out or out[-1] != x:
            out.append(x)

    while i < len(a) and j < len(b):
        if a[i] <= b[j]:
            push(a[i]); i += 1
        else:
            push(b[j]); j += 1
    for x in a[i:]:
        push(x)
    for x in b[j:]:
        push(x)
    return out
