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

"""Default parameter choices for planners."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from estplan.core.global_config import GlobalConfig, global_config
from estplan.planning.datastructures import NearestNeighborsKDTree, NearestNeighborsLinear

if TYPE_CHECKING:
    from collections.abc import Callable

    from estplan.planning.spec import NearestNeighborsSpec, SpaceInformationSpec


def configure_planner_range(si: SpaceInformationSpec, config: GlobalConfig = global_config) -> float:
    """Default maximum expansion distance: a fraction of the space's maximum extent."""
    return config.range_fraction * si.get_maximum_extent()


def get_default_nearest_neighbors(
    si: SpaceInformationSpec,
    distance_fn: Callable[[Any, Any], float],
    key: Callable[[Any], Any],
    kind: str | None = None,
    config: GlobalConfig = global_config,
) -> NearestNeighborsSpec[Any]:
    """Create a nearest-neighbor index. kind='auto'|'linear'|'kdtree'.

    'auto' picks the KD-tree for Euclidean spaces and the linear index otherwise.
    ``key`` maps an item to its coordinates for the KD-tree.
    """
    kind = kind or config.nearest_neighbors
    if kind == "auto":
        kind = "kdtree" if getattr(si.space, "is_euclidean", False) else "linear"

    if kind == "linear":
        return NearestNeighborsLinear(distance_fn)
    elif kind == "kdtree":
        return NearestNeighborsKDTree(key)
    else:
        raise ValueError(
            f"Unknown nearest neighbors kind: {kind}. Available: ['auto', 'linear', 'kdtree']"
        )
