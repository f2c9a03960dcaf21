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

"""State and motion validity oracle over a state space."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from estplan.core.global_config import GlobalConfig, global_config
from estplan.planning.spaces.samplers import UniformValidStateSampler

if TYPE_CHECKING:
    from collections.abc import Callable

    import numpy as np

    from estplan.planning.spec import State, StateSpaceSpec


class SpaceInformation:
    """Couples a state space with a validity checker and a discrete motion validator.

    Motions are checked by interpolating at a fixed step of
    ``motion_resolution * maximum_extent`` and testing every intermediate
    state, the end state first.
    """

    def __init__(
        self,
        space: StateSpaceSpec,
        state_validity_checker: Callable[[State], bool] | None = None,
        motion_resolution: float | None = None,
        config: GlobalConfig = global_config,
    ):
        self._space = space
        self._checker = state_validity_checker
        self._config = config
        self._motion_resolution = (
            motion_resolution if motion_resolution is not None else config.motion_resolution
        )
        if self._motion_resolution <= 0.0:
            raise ValueError(f"motion_resolution must be positive, got {self._motion_resolution}")
        self._step: float | None = None

    @property
    def space(self) -> StateSpaceSpec:
        return self._space

    @property
    def is_setup(self) -> bool:
        return self._step is not None

    def set_state_validity_checker(self, checker: Callable[[State], bool]) -> None:
        self._checker = checker

    def setup(self) -> None:
        extent = self._space.maximum_extent()
        self._step = max(self._motion_resolution * extent, 1e-9)

    def is_valid(self, state: State) -> bool:
        if not self._space.satisfies_bounds(state):
            return False
        return self._checker is None or bool(self._checker(state))

    def check_motion(self, a: State, b: State) -> bool:
        if self._step is None:
            self.setup()
        assert self._step is not None

        if not self.is_valid(b):
            return False

        n_steps = int(math.ceil(self._space.distance(a, b) / self._step))
        for i in range(1, n_steps):
            if not self.is_valid(self._space.interpolate(a, b, i / n_steps)):
                return False
        return True

    def distance(self, a: State, b: State) -> float:
        return self._space.distance(a, b)

    def copy_state(self, state: State) -> State:
        return self._space.copy_state(state)

    def satisfies_bounds(self, state: State) -> bool:
        return self._space.satisfies_bounds(state)

    def get_maximum_extent(self) -> float:
        return self._space.maximum_extent()

    def alloc_valid_state_sampler(self, rng: np.random.Generator) -> UniformValidStateSampler:
        return UniformValidStateSampler(self, rng, attempts=self._config.sampler_attempts)
