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

from typing import Optional

import numpy as np
import typer

from estplan.core.global_config import GlobalConfig
from estplan.planning.factory import create_planner, create_space_information

main = typer.Typer()


def parse_box(text: str) -> tuple[np.ndarray, np.ndarray]:
    """Parse an axis-aligned box written as ``x0,y0,x1,y1``."""
    try:
        values = [float(v) for v in text.split(",")]
    except ValueError as e:
        raise typer.BadParameter(f"Obstacle '{text}' is not a list of numbers") from e
    if len(values) != 4:
        raise typer.BadParameter(f"Obstacle '{text}' must have 4 values: x0,y0,x1,y1")
    lo = np.array([min(values[0], values[2]), min(values[1], values[3])])
    hi = np.array([max(values[0], values[2]), max(values[1], values[3])])
    return lo, hi


def box_validity_checker(boxes: list[tuple[np.ndarray, np.ndarray]]):
    def is_free(state: np.ndarray) -> bool:
        return not any(np.all(state >= lo) and np.all(state <= hi) for lo, hi in boxes)

    return is_free


@main.callback()
def configure(
    ctx: typer.Context,
    planner_range: Optional[float] = typer.Option(  # noqa: UP045
        None, "--planner-range", help="Override planner_range in GlobalConfig"
    ),
    rng_seed: Optional[int] = typer.Option(  # noqa: UP045
        None, "--rng-seed", help="Override rng_seed in GlobalConfig"
    ),
    nearest_neighbors: Optional[str] = typer.Option(  # noqa: UP045
        None, "--nearest-neighbors", help="Override nearest_neighbors in GlobalConfig"
    ),
) -> None:
    overrides = {
        "planner_range": planner_range,
        "rng_seed": rng_seed,
        "nearest_neighbors": nearest_neighbors,
    }
    ctx.obj = GlobalConfig().model_copy(update={k: v for k, v in overrides.items() if v is not None})


@main.command()
def solve(
    ctx: typer.Context,
    start: tuple[float, float] = typer.Option((0.05, 0.05), "--start", help="Start x y"),
    goal: tuple[float, float] = typer.Option((0.95, 0.95), "--goal", help="Goal x y"),
    obstacle: list[str] = typer.Option(
        [], "--obstacle", help="Axis-aligned box obstacle x0,y0,x1,y1 (repeatable)"
    ),
    size: float = typer.Option(1.0, "--size", help="Side length of the square workspace"),
    timeout: float = typer.Option(5.0, "--timeout", help="Planning time limit in seconds"),
) -> None:
    """Plan a path across a 2-D workspace with box obstacles."""
    config: GlobalConfig = ctx.obj
    boxes = [parse_box(text) for text in obstacle]

    si = create_space_information(
        [0.0, 0.0], [size, size], box_validity_checker(boxes), config=config
    )
    planner = create_planner(si, config=config)
    result = planner.plan([np.array(start)], np.array(goal), timeout=timeout)

    typer.echo(f"status: {result.status.name}")
    typer.echo(f"message: {result.message}")
    typer.echo(f"iterations: {result.iterations}")
    typer.echo(f"planning_time: {result.planning_time:.3f}s")
    data = planner.get_planner_data()
    typer.echo(f"vertices: {data.num_vertices()} edges: {data.num_edges()}")

    if not result.is_success():
        raise typer.Exit(code=1)

    typer.echo(f"path_length: {result.path_length:.4f}")
    for state in result.path:
        typer.echo("  " + " ".join(f"{v:.4f}" for v in state))


@main.command()
def show_config(ctx: typer.Context) -> None:
    """Show current configuration status."""
    config: GlobalConfig = ctx.obj

    for field_name, value in config.model_dump().items():
        typer.echo(f"{field_name}: {value}")


if __name__ == "__main__":
    main()
