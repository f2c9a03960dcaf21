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

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GlobalConfig(BaseSettings):
    # 0.0 means the range is self-configured from the space extent at setup()
    planner_range: float = Field(default=0.0, ge=0.0, le=10000.0)
    range_fraction: float = Field(default=0.2, gt=0.0, le=1.0)
    neighborhood_fraction: float = Field(default=1.0 / 3.0, gt=0.0, le=1.0)
    rng_seed: int | None = None
    nearest_neighbors: Literal["auto", "linear", "kdtree"] = "auto"
    sampler_attempts: int = Field(default=100, ge=1)
    motion_resolution: float = Field(default=0.01, gt=0.0, le=1.0)

    model_config = SettingsConfigDict(
        env_prefix="ESTPLAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )


global_config = GlobalConfig()
