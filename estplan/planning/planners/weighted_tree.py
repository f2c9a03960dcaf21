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

"""Density-weighted tree used by Expansive Space Tree planners."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from estplan.planning.datastructures import PDF

if TYPE_CHECKING:
    from collections.abc import Iterator

    from estplan.planning.spec import NearestNeighborsSpec, State, TreeSide


@dataclass(eq=False)
class Motion:
    """Node in an EST tree.

    ``parent`` and ``root`` are handles into the arena of the tree that owns
    the motion; ``root`` equals ``handle`` for root motions. ``handle`` and
    ``element`` are assigned when the motion is added to a tree.
    """

    state: State
    parent: int | None = None
    root: int | None = None
    handle: int | None = None
    element: int | None = None


class WeightedTree:
    """Arena of motions plus a nearest-neighbor index and a PDF kept in lockstep.

    A motion's selection weight shrinks every time a neighbor is added near it,
    so sparse regions are expanded more often than crowded ones.
    """

    def __init__(self, side: TreeSide, nn: NearestNeighborsSpec[Motion]):
        self.side = side
        self._motions: list[Motion] = []
        self._nn = nn
        self._pdf: PDF[Motion] = PDF()

    def add(self, motion: Motion, neighbors: list[Motion]) -> None:
        """Insert motion. ``neighbors`` must be queried before the insertion."""
        for neighbor in neighbors:
            assert neighbor.element is not None
            w = self._pdf.get_weight(neighbor.element)
            self._pdf.update(neighbor.element, w / (w + 1.0))

        motion.handle = len(self._motions)
        if motion.root is None:
            motion.root = motion.handle
        # +1 counts the motion itself
        motion.element = self._pdf.add(motion, 1.0 / (len(neighbors) + 1.0))
        self._motions.append(motion)
        self._nn.add(motion)

    def sample(self, r: float) -> Motion:
        """Pick a motion with probability proportional to its weight."""
        return self._pdf.sample(r)

    def nearest_r(self, motion: Motion, radius: float) -> list[Motion]:
        return self._nn.nearest_r(motion, radius)

    def weight(self, motion: Motion) -> float:
        assert motion.element is not None
        return self._pdf.get_weight(motion.element)

    def root_state(self, motion: Motion) -> State:
        assert motion.root is not None
        return self._motions[motion.root].state

    def path_to_root(self, motion: Motion) -> list[Motion]:
        """Motions from ``motion`` back to its root, inclusive."""
        chain = [motion]
        while chain[-1].parent is not None:
            chain.append(self._motions[chain[-1].parent])
        return chain

    def clear(self) -> None:
        self._motions.clear()
        self._nn.clear()
        self._pdf.clear()

    def __getitem__(self, handle: int) -> Motion:
        return self._motions[handle]

    def __len__(self) -> int:
        return len(self._motions)

    def __iter__(self) -> Iterator[Motion]:
        return iter(self._motions)
