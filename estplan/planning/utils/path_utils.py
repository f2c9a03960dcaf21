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
Path Utilities

Standalone functions for inspecting planned paths. They are stateless and
work with any planner's output.

## Functions

- compute_path_length(): Total path length under the space metric
- check_path(): Validate every waypoint and every consecutive motion
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from estplan.planning.spec import SpaceInformationSpec, State


def compute_path_length(si: SpaceInformationSpec, path: Sequence[State]) -> float:
    """Compute total path length.

    Args:
        si: Space information providing the distance metric
        path: Waypoints of the path

    Returns:
        Sum of distances between consecutive waypoints (0 for fewer than 2)
    """
    return sum(si.distance(path[i], path[i + 1]) for i in range(len(path) - 1))


def check_path(si: SpaceInformationSpec, path: Sequence[State]) -> bool:
    """Check that every waypoint is valid and every segment is a valid motion.

    Args:
        si: Space information providing the validity oracle
        path: Waypoints of the path

    Returns:
        True if the path is non-empty and entirely valid
    """
    if len(path) == 0:
        return False

    if not all(si.is_valid(state) for state in path):
        return False

    return all(si.check_motion(path[i], path[i + 1]) for i in range(len(path) - 1))
