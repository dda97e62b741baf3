"""Cartesian tree (min-heap ordered) built with a monotonic stack."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class CartesianTree:
    """Children and parents by index; ``None`` where there is none."""

    root: int | None
    left: list[int | None]
    right: list[int | None]
    parent: list[int | None]


def build_cartesian_tree(values: Sequence) -> CartesianTree:
    """Build the tree in linear time; among equal values the earlier one is the ancestor."""
    n = len(values)
    left: list[int | None] = [None] * n
    right: list[int | None] = [None] * n
    parent: list[int | None] = [None] * n
    stack: list[int] = []
    for i, value in enumerate(values):
        last = None
        while stack and values[stack[-1]] > value:
            last = stack.pop()
        if stack:
            right[stack[-1]] = i
            parent[i] = stack[-1]
        if last is not None:
            left[i] = last
            parent[last] = i
        stack.append(i)
    return CartesianTree(stack[0] if stack else None, left, right, parent)