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

"""Data types for sampling-based planning."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeAlias

from estplan.planning.spec.enums import PlannerStatus

if TYPE_CHECKING:
    from collections.abc import Iterator

    from estplan.planning.spec.protocols import SpaceInformationSpec

# =============================================================================
# Semantic Types (documentation only, not enforced at runtime)
# =============================================================================

State: TypeAlias = Any
"""Opaque configuration-space state (a numpy array for real vector spaces)"""

StatePath: TypeAlias = "list[State]"
"""Ordered list of states from a start state to a goal state"""


# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class PathGeometric:
    """Geometric path: an ordered sequence of states.

    Attributes:
        states: Waypoints, first is a start state and last a goal state
    """

    states: list[State] = field(default_factory=list)

    def append(self, state: State) -> None:
        self.states.append(state)

    def length(self, si: SpaceInformationSpec) -> float:
        """Sum of distances between consecutive waypoints."""
        return sum(si.distance(a, b) for a, b in zip(self.states, self.states[1:], strict=False))

    def __len__(self) -> int:
        return len(self.states)

    def __iter__(self) -> Iterator[State]:
        return iter(self.states)

    def __getitem__(self, index: int) -> State:
        return self.states[index]


@dataclass
class PlannerSolution:
    """A solution path recorded on a problem definition."""

    path: PathGeometric
    planner_name: str
    approximate: bool = False
    difference: float = 0.0


@dataclass
class PlanningResult:
    """Result of a complete planning request.

    Attributes:
        status: Status returned by the planner
        path: States forming the path (empty if no solution)
        planning_time: Wall-clock time spent planning (seconds)
        path_length: Total path length under the space metric
        iterations: Number of loop iterations run by the planner
        message: Human-readable status message
    """

    status: PlannerStatus
    path: list[State] = field(default_factory=list)
    planning_time: float = 0.0
    path_length: float = 0.0
    iterations: int = 0
    message: str = ""

    def is_success(self) -> bool:
        """Check if planning found an exact solution."""
        return self.status == PlannerStatus.EXACT_SOLUTION


@dataclass(eq=False)
class PlannerDataVertex:
    """Vertex of exported planner data. ``tag`` identifies the tree (1 start, 2 goal)."""

    state: State
    tag: int = 0


class PlannerData:
    """Vertex/edge graph exported by a planner for introspection.

    Vertices are keyed by state identity, so the same state object added twice
    maps to a single vertex.
    """

    def __init__(self) -> None:
        self._vertices: list[PlannerDataVertex] = []
        self._index: dict[int, int] = {}
        self._edges: list[tuple[int, int]] = []
        self.start_vertices: list[int] = []
        self.goal_vertices: list[int] = []

    def add_vertex(self, vertex: PlannerDataVertex) -> int:
        key = id(vertex.state)
        if key not in self._index:
            self._index[key] = len(self._vertices)
            self._vertices.append(vertex)
        return self._index[key]

    def add_start_vertex(self, vertex: PlannerDataVertex) -> int:
        index = self.add_vertex(vertex)
        if index not in self.start_vertices:
            self.start_vertices.append(index)
        return index

    def add_goal_vertex(self, vertex: PlannerDataVertex) -> int:
        index = self.add_vertex(vertex)
        if index not in self.goal_vertices:
            self.goal_vertices.append(index)
        return index

    def add_edge(self, source: PlannerDataVertex | int, target: PlannerDataVertex | int) -> bool:
        """Add a directed edge; vertices are added if needed. Returns False for bad indices."""
        v1 = source if isinstance(source, int) else self.add_vertex(source)
        v2 = target if isinstance(target, int) else self.add_vertex(target)
        if not (0 <= v1 < len(self._vertices) and 0 <= v2 < len(self._vertices)):
            return False
        self._edges.append((v1, v2))
        return True

    def vertex_index(self, state: State) -> int | None:
        return self._index.get(id(state))

    def get_vertex(self, index: int) -> PlannerDataVertex:
        return self._vertices[index]

    def num_vertices(self) -> int:
        return len(self._vertices)

    def num_edges(self) -> int:
        return len(self._edges)

    @property
    def vertices(self) -> list[PlannerDataVertex]:
        return list(self._vertices)

    @property
    def edges(self) -> list[tuple[int, int]]:
        return list(self._edges)
