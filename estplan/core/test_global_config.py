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

import pytest
from pydantic import ValidationError

from estplan.core.global_config import GlobalConfig


def test_defaults():
    config = GlobalConfig(_env_file=None)
    assert config.planner_range == 0.0
    assert config.range_fraction == pytest.approx(0.2)
    assert config.neighborhood_fraction == pytest.approx(1.0 / 3.0)
    assert config.nearest_neighbors == "auto"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ESTPLAN_RNG_SEED", "11")
    monkeypatch.setenv("ESTPLAN_PLANNER_RANGE", "0.5")
    config = GlobalConfig(_env_file=None)
    assert config.rng_seed == 11
    assert config.planner_range == 0.5


@pytest.mark.parametrize(
    "env, value",
    [
        ("ESTPLAN_NEAREST_NEIGHBORS", "octree"),
        ("ESTPLAN_PLANNER_RANGE", "20000"),
        ("ESTPLAN_SAMPLER_ATTEMPTS", "0"),
    ],
)
def test_invalid_environment_values(monkeypatch, env, value):
    monkeypatch.setenv(env, value)
    with pytest.raises(ValidationError):
        GlobalConfig(_env_file=None)


def test_config_is_frozen():
    config = GlobalConfig(_env_file=None)
    with pytest.raises(ValidationError):
        config.rng_seed = 3


def test_config_fixture_ignores_environment(monkeypatch, request):
    monkeypatch.setenv("ESTPLAN_PLANNER_RANGE", "0.5")
    monkeypatch.setenv("ESTPLAN_NEAREST_NEIGHBORS", "linear")

    config = request.getfixturevalue("config")
    assert config.planner_range == 0.0
    assert config.nearest_neighbors == "auto"
    assert config.rng_seed == 7
