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

"""Planning interfaces: enums, data types and protocols."""

from estplan.planning.spec.enums import PlannerStatus, TreeSide
from estplan.planning.spec.protocols import (
    GoalSpec,
    NearestNeighborsSpec,
    PlannerSpec,
    SampleableGoalSpec,
    SpaceInformationSpec,
    StateSpaceSpec,
    ValidStateSamplerSpec,
)
from estplan.planning.spec.types import (
    PathGeometric,
    PlannerData,
    PlannerDataVertex,
    PlannerSolution,
    PlanningResult,
    State,
    StatePath,
)

__all__ = [
    "GoalSpec",
    "NearestNeighborsSpec",
    "PathGeometric",
    "PlannerData",
    "PlannerDataVertex",
    "PlannerSolution",
    "PlannerSpec",
    "PlannerStatus",
    "PlanningResult",
    "SampleableGoalSpec",
    "SpaceInformationSpec",
    "State",
    "StatePath",
    "StateSpaceSpec",
    "TreeSide",
    "ValidStateSamplerSpec",
]
