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

"""Bidirectional Expansive Space Trees planner implementing PlannerSpec.

Two trees are grown, one from the start states and one from goal samples.
Each iteration expands one tree (alternating) from a node picked with
probability inversely related to local density, keeps the new sample with
probability 1/k where k is the number of tree nodes in its neighborhood, and
then tries to connect the new node to any node of the other tree within the
expansion range.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

import numpy as np

from estplan.core.global_config import GlobalConfig, global_config
from estplan.planning.goals import GoalState
from estplan.planning.planners.weighted_tree import Motion, WeightedTree
from estplan.planning.problem_definition import PlannerInputStates, ProblemDefinition
from estplan.planning.self_config import configure_planner_range, get_default_nearest_neighbors
from estplan.planning.spec import (
    PathGeometric,
    PlannerData,
    PlannerDataVertex,
    PlannerStatus,
    PlanningResult,
    SampleableGoalSpec,
    TreeSide,
)
from estplan.planning.termination import or_ptc, plain_ptc, timed_ptc
from estplan.planning.utils.path_utils import compute_path_length
from estplan.utils.logging_config import setup_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from estplan.planning.spec import (
        GoalSpec,
        NearestNeighborsSpec,
        SpaceInformationSpec,
        State,
        ValidStateSamplerSpec,
    )

logger = setup_logger()

# Bounds of the declared "range" parameter
RANGE_BOUNDS = (0.0, 10000.0)


def rejection_probability(neighbor_count: int) -> float:
    """Probability of discarding a candidate with neighbor_count tree nodes nearby."""
    if neighbor_count == 0:
        return 0.0
    return 1.0 - 1.0 / neighbor_count


class BiRealESTPlanner:
    """Bidirectional Expansive Space Trees.

    The planner keeps both trees across repeated ``solve`` calls on the same
    problem; ``clear`` resets it to its post-construction state.
    """

    def __init__(
        self,
        si: SpaceInformationSpec,
        range: float | None = None,
        rng_seed: int | None = None,
        nearest_neighbors: str | None = None,
        config: GlobalConfig = global_config,
    ):
        self._si = si
        self._config = config
        self._max_distance = 0.0
        self._nbrhood_radius = 0.0
        self.set_range(config.planner_range if range is None else range)

        seed = config.rng_seed if rng_seed is None else rng_seed
        self._rng = np.random.default_rng(seed)

        self._start_tree = WeightedTree(TreeSide.START, self._make_nn(nearest_neighbors))
        self._goal_tree = WeightedTree(TreeSide.GOAL, self._make_nn(nearest_neighbors))

        self._pdef: ProblemDefinition | None = None
        self._pis: PlannerInputStates | None = None
        self._sampler: ValidStateSamplerSpec | None = None
        self._connection_point: tuple[State, State] | None = None
        self._setup = False
        self._iterations = 0

    def get_name(self) -> str:
        """Get planner name."""
        return "BiRealEST"

    # ============= Parameters =============

    def set_range(self, distance: float) -> None:
        """Set the maximum expansion distance; 0 self-configures at setup()."""
        low, high = RANGE_BOUNDS
        if not low <= distance <= high:
            raise ValueError(f"range must be within [{low}, {high}], got {distance}")
        self._max_distance = float(distance)
        self._nbrhood_radius = self._max_distance * self._config.neighborhood_fraction

    def get_range(self) -> float:
        return self._max_distance

    def get_neighborhood_radius(self) -> float:
        return self._nbrhood_radius

    # ============= Problem & lifecycle =============

    def set_problem_definition(self, pdef: ProblemDefinition) -> None:
        self._pdef = pdef
        self._pis = PlannerInputStates(pdef, self._rng)
        self._setup = False

    def get_problem_definition(self) -> ProblemDefinition | None:
        return self._pdef

    def setup(self) -> None:
        """Self-configure the range if unset."""
        if not self._si.is_setup:
            self._si.setup()

        if self._max_distance < 1e-3:
            self.set_range(configure_planner_range(self._si, self._config))
            logger.debug(
                "Configured planner range",
                planner=self.get_name(),
                range=self._max_distance,
                neighborhood_radius=self._nbrhood_radius,
            )
        self._setup = True

    def check_validity(self) -> None:
        """Raise if solve() cannot run."""
        if self._pdef is None or self._pis is None:
            raise RuntimeError(f"{self.get_name()}: no problem definition set")
        if not self._setup:
            self.setup()

    def clear(self) -> None:
        """Drop both trees, the sampler and the connection record; setup() runs again on the next solve."""
        self._sampler = None
        self._start_tree.clear()
        self._goal_tree.clear()
        self._connection_point = None
        self._setup = False
        self._iterations = 0
        if self._pis is not None:
            self._pis.restart()

    # ============= Planning =============

    def solve(self, ptc: Callable[[], bool]) -> PlannerStatus:
        """Grow both trees until they connect or ptc() returns True."""
        self.check_validity()
        assert self._pdef is not None and self._pis is not None

        goal = self._pdef.goal
        if not isinstance(goal, SampleableGoalSpec):
            logger.error("Unknown type of goal", planner=self.get_name())
            return PlannerStatus.UNRECOGNIZED_GOAL_TYPE

        while (st := self._pis.next_start()) is not None:
            self._add_root(self._start_tree, st)

        if len(self._start_tree) == 0:
            logger.error("There are no valid initial states", planner=self.get_name())
            return PlannerStatus.INVALID_START

        if not goal.could_sample():
            logger.error("Insufficient states in sampleable goal region", planner=self.get_name())
            return PlannerStatus.INVALID_GOAL

        if self._sampler is None:
            self._sampler = self._si.alloc_valid_state_sampler(self._rng)

        logger.info(
            "Starting planning",
            planner=self.get_name(),
            states=len(self._start_tree) + len(self._goal_tree),
        )

        start_side = True
        solved = False

        while not solved and not ptc():
            self._iterations += 1

            # Make sure the goal tree has at least one state
            if (
                len(self._goal_tree) == 0
                or self._pis.sampled_goals_count < len(self._goal_tree) // 2
            ):
                st = self._pis.next_goal(ptc) if len(self._goal_tree) == 0 else self._pis.next_goal()
                if st is not None:
                    self._add_root(self._goal_tree, st)

                if len(self._goal_tree) == 0:
                    logger.error(
                        "Unable to sample any valid states for goal tree", planner=self.get_name()
                    )
                    break

            tree = self._start_tree if start_side else self._goal_tree
            outcome = self._expand(tree, goal)
            if outcome is None:
                # Sampling failed or the candidate was rejected; retry the same side
                continue

            solved = outcome
            start_side = not start_side

        logger.info(
            "Created states",
            planner=self.get_name(),
            total=len(self._start_tree) + len(self._goal_tree),
            start=len(self._start_tree),
            goal=len(self._goal_tree),
        )
        return PlannerStatus.EXACT_SOLUTION if solved else PlannerStatus.TIMEOUT

    def plan(
        self,
        start_states: Iterable[State],
        goal: GoalSpec | State,
        timeout: float = 10.0,
        max_iterations: int | None = None,
    ) -> PlanningResult:
        """Set up a fresh problem, solve it and package the outcome."""
        start_time = time.time()

        pdef = ProblemDefinition(self._si)
        for state in start_states:
            pdef.add_start_state(state)
        if isinstance(goal, np.ndarray):
            goal = GoalState(self._si, goal)
        pdef.set_goal(goal)

        self.clear()
        self.set_problem_definition(pdef)
        self.setup()

        ptc = timed_ptc(timeout)
        if max_iterations is not None:
            limit = max_iterations
            # Counts loop iterations only, not every poll of the condition
            ptc = or_ptc(ptc, plain_ptc(lambda: self._iterations >= limit))

        status = self.solve(ptc)
        planning_time = time.time() - start_time
        solution = pdef.get_solution_path()

        if status == PlannerStatus.EXACT_SOLUTION and solution is not None:
            return _create_success_result(
                self._si, list(solution.states), planning_time, self._iterations
            )
        return _create_failure_result(status, planning_time, self._iterations)

    def get_planner_data(self) -> PlannerData:
        """Export both trees and the connecting edge as a vertex/edge graph."""
        data = PlannerData()

        for motion in self._start_tree:
            if motion.parent is None:
                data.add_start_vertex(PlannerDataVertex(motion.state, int(TreeSide.START)))
            else:
                data.add_edge(
                    PlannerDataVertex(self._start_tree[motion.parent].state, int(TreeSide.START)),
                    PlannerDataVertex(motion.state, int(TreeSide.START)),
                )

        for motion in self._goal_tree:
            if motion.parent is None:
                data.add_goal_vertex(PlannerDataVertex(motion.state, int(TreeSide.GOAL)))
            else:
                # Goal-tree edges are reversed to be consistent with the start tree
                data.add_edge(
                    PlannerDataVertex(motion.state, int(TreeSide.GOAL)),
                    PlannerDataVertex(self._goal_tree[motion.parent].state, int(TreeSide.GOAL)),
                )

        if self._connection_point is not None:
            v1 = data.vertex_index(self._connection_point[0])
            v2 = data.vertex_index(self._connection_point[1])
            if v1 is not None and v2 is not None:
                data.add_edge(v1, v2)

        return data

    @property
    def start_tree(self) -> WeightedTree:
        return self._start_tree

    @property
    def goal_tree(self) -> WeightedTree:
        return self._goal_tree

    @property
    def connection_point(self) -> tuple[State, State] | None:
        """(start-side state, goal-side state) of the bridging motion, if solved."""
        return self._connection_point

    @property
    def iterations(self) -> int:
        return self._iterations

    @property
    def is_setup(self) -> bool:
        return self._setup

    # ============= Internals =============

    def _expand(self, tree: WeightedTree, goal: SampleableGoalSpec) -> bool | None:
        """One expansion of ``tree``.

        Returns None when no candidate was produced or it was rejected, True
        when the new node connected the trees, False otherwise.
        """
        assert self._sampler is not None

        existing = tree.sample(self._rng.random())

        candidate = self._sampler.sample_near(existing.state, self._max_distance)
        if candidate is None:
            return None

        probe = Motion(state=candidate)
        neighbors = tree.nearest_r(probe, self._nbrhood_radius)

        if neighbors and self._rng.random() < rejection_probability(len(neighbors)):
            return None

        if not self._si.check_motion(existing.state, candidate):
            return False

        motion = Motion(
            state=self._si.copy_state(candidate),
            parent=existing.handle,
            root=existing.root,
        )
        tree.add(motion, neighbors)

        return self._connect(tree, motion, goal)

    def _connect(self, tree: WeightedTree, motion: Motion, goal: SampleableGoalSpec) -> bool:
        """Try to bridge ``motion`` to the other tree within the expansion range."""
        other = self._goal_tree if tree is self._start_tree else self._start_tree

        for neighbor in other.nearest_r(motion, self._max_distance):
            if tree.side == TreeSide.START:
                start_motion, goal_motion = motion, neighbor
            else:
                start_motion, goal_motion = neighbor, motion

            if goal.is_start_goal_pair_valid(
                self._start_tree.root_state(start_motion),
                self._goal_tree.root_state(goal_motion),
            ) and self._si.check_motion(motion.state, neighbor.state):
                self._connection_point = (start_motion.state, goal_motion.state)
                self._record_solution(start_motion, goal_motion)
                return True

        return False

    def _record_solution(self, start_motion: Motion, goal_motion: Motion) -> None:
        assert self._pdef is not None

        start_chain = self._start_tree.path_to_root(start_motion)
        goal_chain = self._goal_tree.path_to_root(goal_motion)

        path = PathGeometric()
        for motion in reversed(start_chain):
            path.append(self._si.copy_state(motion.state))
        for motion in goal_chain:
            path.append(self._si.copy_state(motion.state))

        self._pdef.add_solution_path(path, self.get_name())

    def _add_root(self, tree: WeightedTree, state: State) -> None:
        motion = Motion(state=self._si.copy_state(state))
        neighbors = tree.nearest_r(motion, self._nbrhood_radius)
        tree.add(motion, neighbors)

    def _make_nn(self, kind: str | None) -> NearestNeighborsSpec[Motion]:
        return get_default_nearest_neighbors(
            self._si,
            distance_fn=lambda a, b: self._si.distance(a.state, b.state),
            key=lambda m: m.state,
            kind=kind,
            config=self._config,
        )


# ============= Result Helpers =============


def _create_success_result(
    si: SpaceInformationSpec,
    path: list[State],
    planning_time: float,
    iterations: int,
) -> PlanningResult:
    """Create a successful planning result."""
    return PlanningResult(
        status=PlannerStatus.EXACT_SOLUTION,
        path=path,
        planning_time=planning_time,
        path_length=compute_path_length(si, path),
        iterations=iterations,
        message="Path found",
    )


def _create_failure_result(
    status: PlannerStatus,
    planning_time: float = 0.0,
    iterations: int = 0,
) -> PlanningResult:
    """Create a failed planning result."""
    messages = {
        PlannerStatus.TIMEOUT: f"No path found after {iterations} iterations",
        PlannerStatus.INVALID_START: "No valid start state",
        PlannerStatus.INVALID_GOAL: "Goal region cannot be sampled",
        PlannerStatus.UNRECOGNIZED_GOAL_TYPE: "Goal is not sampleable",
    }
    return PlanningResult(
        status=status,
        path=[],
        planning_time=planning_time,
        iterations=iterations,
        message=messages.get(status, status.name),
    )
