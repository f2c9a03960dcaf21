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
Planning Module

Sampling-based motion planning using a Protocol-based architecture.

## Architecture

- StateSpaceSpec: configuration space (RealVectorStateSpace)
- SpaceInformationSpec: state and motion validity oracle (SpaceInformation)
- SampleableGoalSpec: goals that can produce goal states (GoalState, GoalStates)
- PlannerSpec: planners
  - BiRealESTPlanner: Bidirectional Expansive Space Trees

## Factory Functions

```python
from estplan.planning.factory import create_planner, create_space_information

si = create_space_information([0.0, 0.0], [1.0, 1.0], state_validity_checker=is_free)
planner = create_planner(si, name="bi_real_est", rng_seed=7)
result = planner.plan([np.array([0.1, 0.1])], np.array([0.9, 0.9]), timeout=2.0)
```
"""

from estplan.planning.factory import create_planner, create_space_information
from estplan.planning.goals import GoalRegion, GoalState, GoalStates
from estplan.planning.problem_definition import PlannerInputStates, ProblemDefinition
from estplan.planning.spec import (
    GoalSpec,
    NearestNeighborsSpec,
    PathGeometric,
    PlannerData,
    PlannerDataVertex,
    PlannerSpec,
    PlannerStatus,
    PlanningResult,
    SampleableGoalSpec,
    SpaceInformationSpec,
    State,
    StateSpaceSpec,
    TreeSide,
    ValidStateSamplerSpec,
)
from estplan.planning.termination import (
    PlannerTerminationCondition,
    exact_solution_ptc,
    iteration_ptc,
    or_ptc,
    plain_ptc,
    timed_ptc,
)

__all__ = [
    "GoalRegion",
    "GoalSpec",
    "GoalState",
    "GoalStates",
    "NearestNeighborsSpec",
    "PathGeometric",
    "PlannerData",
    "PlannerDataVertex",
    "PlannerInputStates",
    "PlannerSpec",
    "PlannerStatus",
    "PlannerTerminationCondition",
    "PlanningResult",
    "ProblemDefinition",
    "SampleableGoalSpec",
    "SpaceInformationSpec",
    "State",
    "StateSpaceSpec",
    "TreeSide",
    "ValidStateSamplerSpec",
    "create_planner",
    "create_space_information",
    "exact_solution_ptc",
    "iteration_ptc",
    "or_ptc",
    "plain_ptc",
    "timed_ptc",
]
