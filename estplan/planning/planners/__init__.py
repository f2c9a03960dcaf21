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
Motion Planners Module

Contains sampling-based planners that use SpaceInformationSpec.

## Implementations

- BiRealESTPlanner: Bidirectional Expansive Space Trees with density-biased
  node selection and rejection sampling

## Usage

```python
from estplan.planning.factory import create_planner

planner = create_planner(si, name="bi_real_est")  # Returns PlannerSpec
result = planner.plan([q_start], q_goal, timeout=5.0)
```
"""

from estplan.planning.planners.bireal_est import BiRealESTPlanner
from estplan.planning.planners.weighted_tree import Motion, WeightedTree

__all__ = ["BiRealESTPlanner", "Motion", "WeightedTree"]
