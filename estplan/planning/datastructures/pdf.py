# Copyright 2025-2026 Dimensional Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Weighted random selection with logarithmic updates.

The PDF stores items with non-negative weights in a growable Fenwick
(binary indexed) tree of partial sums. Adding an item, updating a weight and
sampling an item proportionally to its weight are all O(log n).
"""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class PDF(Generic[T]):
    """Discrete distribution over items, sampled proportionally to weight.

    ``add`` returns an element handle (the item's insertion index) used by
    ``get_weight`` and ``update``. Items are only removed by ``clear``.
    """

    def __init__(self) -> None:
        self._items: list[T] = []
        self._weights: list[float] = []
        # 1-indexed partial sums, _tree[0] unused
        self._tree: list[float] = [0.0]

    def add(self, item: T, weight: float) -> int:
        if weight < 0.0:
            raise ValueError(f"PDF weights must be non-negative, got {weight}")

        self._items.append(item)
        self._weights.append(float(weight))
        i = len(self._items)
        # _tree[i] covers the range (i - lowbit(i), i]
        self._tree.append(weight + self._prefix(i - 1) - self._prefix(i - (i & -i)))
        return i - 1

    def get_weight(self, element: int) -> float:
        return self._weights[element]

    def update(self, element: int, weight: float) -> None:
        if weight < 0.0:
            raise ValueError(f"PDF weights must be non-negative, got {weight}")

        delta = weight - self._weights[element]
        self._weights[element] = float(weight)
        i = element + 1
        while i < len(self._tree):
            self._tree[i] += delta
            i += i & -i

    def sample(self, r: float) -> T:
        """Select an item given a uniform draw r in [0, 1)."""
        if not self._items:
            raise ValueError("Cannot sample from an empty PDF")
        total = self.total_weight()
        if total <= 0.0:
            raise ValueError("Cannot sample from a PDF with zero total weight")

        n = len(self._items)
        target = r * total
        pos = 0
        step = 1 << (n.bit_length() - 1)
        while step:
            nxt = pos + step
            if nxt <= n and self._tree[nxt] <= target:
                pos = nxt
                target -= self._tree[nxt]
            step >>= 1

        # Round-off can push pos past the last positive-weight item
        index = min(pos, n - 1)
        while index > 0 and self._weights[index] == 0.0:
            index -= 1
        return self._items[index]

    def total_weight(self) -> float:
        return self._prefix(len(self._items))

    def clear(self) -> None:
        self._items.clear()
        self._weights.clear()
        self._tree = [0.0]

    def size(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def _prefix(self, i: int) -> float:
        total = 0.0
        while i > 0:
            total += self._tree[i]
            i -= i & -i
        return total
