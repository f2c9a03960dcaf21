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

"""
Nearest-Neighbor Indexes

Both indexes implement NearestNeighborsSpec and return radius-query results
sorted by distance, ties broken by insertion order.

## Implementations

- NearestNeighborsLinear: brute force over any distance function
- NearestNeighborsKDTree: scipy cKDTree over Euclidean coordinates, rebuilt
  lazily as items accumulate
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

import numpy as np
from scipy.spatial import cKDTree

if TYPE_CHECKING:
    from collections.abc import Callable

    from numpy.typing import NDArray

T = TypeVar("T")


class NearestNeighborsLinear(Generic[T]):
    """Brute-force index; works with any metric."""

    def __init__(self, distance_fn: Callable[[T, T], float]):
        self._distance_fn = distance_fn
        self._items: list[T] = []

    def add(self, item: T) -> None:
        self._items.append(item)

    def nearest(self, item: T) -> T | None:
        if not self._items:
            return None
        return min(self._items, key=lambda other: self._distance_fn(item, other))

    def nearest_r(self, item: T, radius: float) -> list[T]:
        scored = []
        for other in self._items:
            d = self._distance_fn(item, other)
            if d <= radius:
                scored.append((d, other))
        # sort is stable, so equal distances keep insertion order
        scored.sort(key=lambda pair: pair[0])
        return [other for _, other in scored]

    def clear(self) -> None:
        self._items.clear()

    def size(self) -> int:
        return len(self._items)

    def items(self) -> list[T]:
        return list(self._items)


class NearestNeighborsKDTree(Generic[T]):
    """KD-tree index for items embedded in Euclidean space.

    Items are mapped to coordinates with ``key``. The tree is rebuilt once the
    number of items added since the last build exceeds ``rebuild_size``; those
    pending items are scanned linearly in the meantime.
    """

    def __init__(self, key: Callable[[T], NDArray[np.float64]], rebuild_size: int = 64):
        self._key = key
        self._rebuild_size = rebuild_size
        self._items: list[T] = []
        self._points: list[NDArray[np.float64]] = []
        self._tree: cKDTree | None = None
        self._built = 0

    def add(self, item: T) -> None:
        self._items.append(item)
        self._points.append(np.array(self._key(item), dtype=np.float64))
        if len(self._items) - self._built > max(self._rebuild_size, self._built):
            self._rebuild()

    def nearest(self, item: T) -> T | None:
        if not self._items:
            return None
        q = np.asarray(self._key(item), dtype=np.float64)
        dists = np.linalg.norm(np.asarray(self._points) - q, axis=1)
        return self._items[int(np.argmin(dists))]

    def nearest_r(self, item: T, radius: float) -> list[T]:
        if not self._items:
            return []
        q = np.asarray(self._key(item), dtype=np.float64)

        indices: list[NDArray[np.intp]] = []
        dists: list[NDArray[np.float64]] = []
        if self._tree is not None:
            hits = np.asarray(self._tree.query_ball_point(q, radius), dtype=np.intp)
            if hits.size:
                indices.append(hits)
                dists.append(np.linalg.norm(self._tree.data[hits] - q, axis=1))

        if self._built < len(self._points):
            pending = np.linalg.norm(np.asarray(self._points[self._built :]) - q, axis=1)
            hits = np.flatnonzero(pending <= radius)
            indices.append(hits + self._built)
            dists.append(pending[hits])

        if not indices:
            return []
        index = np.concatenate(indices)
        dist = np.concatenate(dists)
        keep = dist <= radius
        index, dist = index[keep], dist[keep]
        # distance first, insertion order on ties
        order = np.lexsort((index, dist))
        return [self._items[i] for i in index[order]]

    def clear(self) -> None:
        self._items.clear()
        self._points.clear()
        self._tree = None
        self._built = 0

    def size(self) -> int:
        return len(self._items)

    def items(self) -> list[T]:
        return list(self._items)

    def _rebuild(self) -> None:
        self._tree = cKDTree(np.asarray(self._points))
        self._built = len(self._points)
