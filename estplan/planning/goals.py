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
Goal Representations

- GoalRegion: goal defined by a distance function; cannot be sampled
- GoalStates: finite set of goal states, sampled in round-robin order
- GoalState: a single goal state

Only GoalStates and GoalState satisfy SampleableGoalSpec.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    import numpy as np

    from estplan.planning.spec import SpaceInformationSpec, State


class GoalRegion:
    """Goal satisfied by any state whose distance to the region is within threshold."""

    def __init__(self, distance_goal: Callable[[State], float], threshold: float = 0.0):
        self._distance_goal = distance_goal
        self.threshold = threshold

    def distance_goal(self, state: State) -> float:
        return self._distance_goal(state)

    def is_satisfied(self, state: State) -> bool:
        return self.distance_goal(state) <= self.threshold


class GoalStates:
    """Finite set of goal states."""

    def __init__(
        self,
        si: SpaceInformationSpec,
        states: Iterable[State] = (),
        threshold: float = 1e-9,
    ):
        self._si = si
        self._states: list[State] = [si.copy_state(s) for s in states]
        self._next = 0
        self.threshold = threshold

    def add_state(self, state: State) -> None:
        self._states.append(self._si.copy_state(state))

    def clear(self) -> None:
        self._states.clear()
        self._next = 0

    @property
    def states(self) -> list[State]:
        return list(self._states)

    def distance_goal(self, state: State) -> float:
        if not self._states:
            return float("inf")
        return min(self._si.distance(state, goal) for goal in self._states)

    def is_satisfied(self, state: State) -> bool:
        return self.distance_goal(state) <= self.threshold

    def sample_goal(self, rng: np.random.Generator) -> State | None:
        if not self._states:
            return None
        state = self._si.copy_state(self._states[self._next % len(self._states)])
        self._next += 1
        return state

    def max_sample_count(self) -> int:
        return len(self._states)

    def can_sample(self) -> bool:
        return bool(self._states)

    def could_sample(self) -> bool:
        return self.can_sample()

    def is_start_goal_pair_valid(self, start: State, goal: State) -> bool:
        return True


class GoalState(GoalStates):
    """A single goal state."""

    def __init__(self, si: SpaceInformationSpec, state: State, threshold: float = 1e-9):
        super().__init__(si, [state], threshold=threshold)

    @property
    def state(self) -> State:
        return self._states[0]
