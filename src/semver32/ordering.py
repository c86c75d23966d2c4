"""Sortable sequences of version numbers."""

from __future__ import annotations

from typing import SupportsInt

from .number import Number

__all__ = ["Numbers", "sort_key"]


def sort_key(number: SupportsInt) -> int:
    """Key usable with :func:`sorted` over Numbers and packed integers alike."""
    return int(number)


class Numbers(list[Number]):
    """A list of :class:`Number` exposing the length/swap/less sort contract.

    ``sort()`` is inherited from :class:`list`; Numbers order by their packed
    value, which equals ``(major, minor, patch)`` order.
    """

    def swap(self, i: int, j: int) -> None:
        self[i], self[j] = self[j], self[i]

    def less(self, i: int, j: int) -> bool:
        return int(self[i]) < int(self[j])

    def is_sorted(self) -> bool:
        return all(not self.less(i, i - 1) for i in range(1, len(self)))
