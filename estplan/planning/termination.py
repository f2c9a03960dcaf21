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

"""Planner termination conditions.

A termination condition is a zero-argument callable polled by the planner;
returning True asks the planner to stop.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from estplan.planning.problem_definition import ProblemDefinition


class PlannerTerminationCondition:
    """Callable predicate with an additional manual ``terminate()`` switch."""

    def __init__(self, fn: Callable[[], bool]):
        self._fn = fn
        self._terminated = False

    def __call__(self) -> bool:
        if self._terminated:
            return True
        if self._fn():
            self._terminated = True
        return self._terminated

    def terminate(self) -> None:
        self._terminated = True


def plain_ptc(fn: Callable[[], bool]) -> PlannerTerminationCondition:
    return PlannerTerminationCondition(fn)


def timed_ptc(seconds: float) -> PlannerTerminationCondition:
    """Trips once ``seconds`` of wall-clock time have passed."""
    deadline = time.monotonic() + seconds
    return PlannerTerminationCondition(lambda: time.monotonic() >= deadline)


def iteration_ptc(max_calls: int) -> PlannerTerminationCondition:
    """Trips on the call after ``max_calls`` evaluations returned False."""
    calls = 0

    def _check() -> bool:
        nonlocal calls
        calls += 1
        return calls > max_calls

    return PlannerTerminationCondition(_check)


def exact_solution_ptc(pdef: ProblemDefinition) -> PlannerTerminationCondition:
    return PlannerTerminationCondition(pdef.has_exact_solution)


def or_ptc(*conditions: Callable[[], bool]) -> PlannerTerminationCondition:
    return PlannerTerminationCondition(lambda: any(c() for c in conditions))
