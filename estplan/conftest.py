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

import os

import numpy as np
import pytest

from estplan.core.global_config import GlobalConfig
from estplan.planning.spaces import RealVectorStateSpace, SpaceInformation


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def config(monkeypatch):
    """Config isolated from ESTPLAN_* environment variables and .env files."""
    for key in list(os.environ):
        if key.startswith("ESTPLAN_"):
            monkeypatch.delenv(key)
    return GlobalConfig(_env_file=None, rng_seed=7)


@pytest.fixture
def free_si(config):
    """Obstacle-free unit square."""
    si = SpaceInformation(RealVectorStateSpace([0.0, 0.0], [1.0, 1.0]), config=config)
    si.setup()
    return si


@pytest.fixture
def wall_si(config):
    """Unit square with a vertical wall at x in [0.45, 0.55] leaving a gap above y = 0.8."""

    def is_free(state):
        return not (0.45 <= state[0] <= 0.55 and state[1] <= 0.8)

    si = SpaceInformation(RealVectorStateSpace([0.0, 0.0], [1.0, 1.0]), is_free, config=config)
    si.setup()
    return si
