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

"""Valid-state samplers."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import numpy as np

    from estplan.planning.spec import SpaceInformationSpec, State


class UniformValidStateSampler:
    """Rejection sampler: draws uniform states until one passes the validity check."""

    def __init__(self, si: SpaceInformationSpec, rng: np.random.Generator, attempts: int = 100):
        if attempts < 1:
            raise ValueError(f"attempts must be at least 1, got {attempts}")
        self._si = si
        self._rng = rng
        self._attempts = attempts

    @property
    def attempts(self) -> int:
        return self._attempts

    def sample(self) -> State | None:
        for _ in range(self._attempts):
            state = self._si.space.sample_uniform(self._rng)
            if self._si.is_valid(state):
                return state
        return None

    def sample_near(self, near: State, distance: float) -> State | None:
        for _ in range(self._attempts):
            state = self._si.space.sample_uniform_near(self._rng, near, distance)
            if self._si.is_valid(state):
                return state
        return None
