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

"""Problem definition and the planner-side view of its input states."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from estplan.planning.goals import GoalState
from estplan.planning.spec import PlannerSolution, SampleableGoalSpec
from estplan.utils.logging_config import setup_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    import numpy as np

    from estplan.planning.spec import GoalSpec, PathGeometric, SpaceInformationSpec, State

logger = setup_logger()


class ProblemDefinition:
    """Start states, a goal, and the solutions found for them."""

    def __init__(self, si: SpaceInformationSpec):
        self._si = si
        self._start_states: list[State] = []
        self._goal: GoalSpec | None = None
        self._solutions: list[PlannerSolution] = []

    @property
    def si(self) -> SpaceInformationSpec:
        return self._si

    @property
    def start_states(self) -> list[State]:
        return list(self._start_states)

    def add_start_state(self, state: State) -> None:
        self._start_states.append(self._si.copy_state(state))

    def clear_start_states(self) -> None:
        self._start_states.clear()

    @property
    def goal(self) -> GoalSpec | None:
        return self._goal

    def set_goal(self, goal: GoalSpec) -> None:
        self._goal = goal

    def set_start_and_goal_states(self, start: State, goal: State, threshold: float = 1e-9) -> None:
        self.clear_start_states()
        self.add_start_state(start)
        self.set_goal(GoalState(self._si, goal, threshold=threshold))

    def add_solution_path(
        self,
        path: PathGeometric,
        planner_name: str,
        approximate: bool = False,
        difference: float = 0.0,
    ) -> None:
        self._solutions.append(PlannerSolution(path, planner_name, approximate, difference))

    def has_solution(self) -> bool:
        return bool(self._solutions)

    def has_exact_solution(self) -> bool:
        return any(not s.approximate for s in self._solutions)

    def get_solution_path(self) -> PathGeometric | None:
        return self._solutions[0].path if self._solutions else None

    @property
    def solutions(self) -> list[PlannerSolution]:
        return list(self._solutions)

    def clear_solution_paths(self) -> None:
        self._solutions.clear()


class PlannerInputStates:
    """Iterates over the valid start states and goal samples of a problem.

    Each start state is handed out once. Goal samples are counted, and
    ``next_goal`` can block (polling a termination condition) until the goal
    produces a valid sample.
    """

    def __init__(
        self,
        pdef: ProblemDefinition,
        rng: np.random.Generator,
        poll_interval: float = 0.001,
    ):
        self._pdef = pdef
        self._rng = rng
        self._poll_interval = poll_interval
        self._start_index = 0
        self._sampled_goals = 0

    @property
    def sampled_goals_count(self) -> int:
        return self._sampled_goals

    def restart(self) -> None:
        self._start_index = 0
        self._sampled_goals = 0

    def have_more_start_states(self) -> bool:
        return self._start_index < len(self._pdef.start_states)

    def next_start(self) -> State | None:
        """Next start state that passes bounds and validity, None when exhausted."""
        si = self._pdef.si
        starts = self._pdef.start_states
        while self._start_index < len(starts):
            state = starts[self._start_index]
            self._start_index += 1
            if si.satisfies_bounds(state) and si.is_valid(state):
                return si.copy_state(state)
            logger.warning("Skipping invalid start state", index=self._start_index - 1)
        return None

    def next_goal(self, ptc: Callable[[], bool] | None = None) -> State | None:
        """Next valid goal sample.

        Without ``ptc`` at most one pass is made over the samples the goal can
        currently produce. With ``ptc`` the call keeps waiting for the goal
        until a valid sample appears or ``ptc()`` returns True.
        """
        goal = self._pdef.goal
        if not isinstance(goal, SampleableGoalSpec):
            return None

        si = self._pdef.si
        while True:
            while goal.can_sample() and self._sampled_goals < goal.max_sample_count():
                state = goal.sample_goal(self._rng)
                self._sampled_goals += 1
                if state is not None and si.satisfies_bounds(state) and si.is_valid(state):
                    return state
                logger.warning("Skipping invalid goal state", sample=self._sampled_goals)
                if ptc is not None and ptc():
                    return None

            if ptc is None or not goal.could_sample() or ptc():
                return None
            time.sleep(self._poll_interval)
