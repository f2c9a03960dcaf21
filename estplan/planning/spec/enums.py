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

"""Enumerations for sampling-based planning."""

from enum import Enum, IntEnum, auto


class PlannerStatus(Enum):
    """Status reported by a planner's solve()."""

    EXACT_SOLUTION = auto()
    TIMEOUT = auto()
    INVALID_START = auto()
    INVALID_GOAL = auto()
    UNRECOGNIZED_GOAL_TYPE = auto()


class TreeSide(IntEnum):
    """Which tree a node belongs to. Values double as planner-data vertex tags."""

    START = 1
    GOAL = 2

    def other(self) -> "TreeSide":
        return TreeSide.GOAL if self is TreeSide.START else TreeSide.START
