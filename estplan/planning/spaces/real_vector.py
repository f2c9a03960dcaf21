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

"""Box-bounded Euclidean configuration space with numpy array states."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import ArrayLike, NDArray


class RealVectorStateSpace:
    """R^n with per-dimension bounds and the Euclidean metric.

    States are float64 numpy arrays of shape (n,).
    """

    is_euclidean = True

    def __init__(self, lower: Sequence[float] | ArrayLike, upper: Sequence[float] | ArrayLike):
        self._lower = np.array(lower, dtype=np.float64)
        self._upper = np.array(upper, dtype=np.float64)

        if self._lower.shape != self._upper.shape or self._lower.ndim != 1:
            raise ValueError("Bounds must be 1-D sequences of equal length")
        if np.any(self._upper < self._lower):
            raise ValueError("Upper bounds must not be below lower bounds")

    @property
    def dimension(self) -> int:
        return int(self._lower.shape[0])

    @property
    def bounds(self) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        return self._lower.copy(), self._upper.copy()

    def state(self, values: Sequence[float] | ArrayLike) -> NDArray[np.float64]:
        """Build a state from raw coordinates."""
        state = np.array(values, dtype=np.float64)
        if state.shape != (self.dimension,):
            raise ValueError(f"Expected {self.dimension} coordinates, got shape {state.shape}")
        return state

    def distance(self, a: NDArray[np.float64], b: NDArray[np.float64]) -> float:
        return float(np.linalg.norm(a - b))

    def copy_state(self, state: NDArray[np.float64]) -> NDArray[np.float64]:
        return np.array(state, dtype=np.float64)

    def interpolate(
        self, a: NDArray[np.float64], b: NDArray[np.float64], t: float
    ) -> NDArray[np.float64]:
        return a + t * (b - a)

    def satisfies_bounds(self, state: NDArray[np.float64]) -> bool:
        return bool(np.all(state >= self._lower) and np.all(state <= self._upper))

    def enforce_bounds(self, state: NDArray[np.float64]) -> NDArray[np.float64]:
        return np.clip(state, self._lower, self._upper)

    def maximum_extent(self) -> float:
        return float(np.linalg.norm(self._upper - self._lower))

    def sample_uniform(self, rng: np.random.Generator) -> NDArray[np.float64]:
        return rng.uniform(self._lower, self._upper)

    def sample_uniform_near(
        self, rng: np.random.Generator, near: NDArray[np.float64], distance: float
    ) -> NDArray[np.float64]:
        """Sample uniformly from the ball of radius distance around near.

        Clipping to the bounds only moves coordinates toward near (which is in
        bounds), so the sample stays within distance.
        """
        direction = rng.standard_normal(self.dimension)
        norm = float(np.linalg.norm(direction))
        if norm < 1e-12:
            return self.enforce_bounds(self.copy_state(near))
        radius = distance * rng.random() ** (1.0 / self.dimension)
        return self.enforce_bounds(near + (radius / norm) * direction)
