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

"""Factory functions for planning components."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from estplan.planning.spaces import SpaceInformation
    from estplan.planning.spec import PlannerSpec, SpaceInformationSpec, State


def create_space_information(
    lower: Sequence[float],
    upper: Sequence[float],
    state_validity_checker: Callable[[State], bool] | None = None,
    **kwargs: Any,
) -> SpaceInformation:
    """Create a set-up SpaceInformation over a box-bounded real vector space."""
    from estplan.planning.spaces import RealVectorStateSpace, SpaceInformation

    si = SpaceInformation(RealVectorStateSpace(lower, upper), state_validity_checker, **kwargs)
    si.setup()
    return si


def create_planner(
    si: SpaceInformationSpec,
    name: str = "bi_real_est",
    **kwargs: Any,
) -> PlannerSpec:
    """Create a planner. name='bi_real_est'."""
    if name == "bi_real_est":
        from estplan.planning.planners.bireal_est import BiRealESTPlanner

        return BiRealESTPlanner(si, **kwargs)
    else:
        raise ValueError(f"Unknown planner: {name}. Available: ['bi_real_est']")
