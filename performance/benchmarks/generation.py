#!/usr/bin/env python3
"""
Headless benchmark for world creation.

Times each stage separately over a number of seeded worlds:
grid generation, six find_site/commit cycles, the decoration pass, scene
construction and static batching. Optionally profiles the whole pipeline
with cProfile to find hot code paths.
"""
from __future__ import annotations

import argparse
import cProfile
import io
import pstats
from typing import Dict, List

from config import GRID
from performance.benchmarks.utils import Timer, format_stats_line
from render.batching import batch_static
from render.scene import build_scene
from world_state import WorldState

STAGES = ("generate", "allocate", "decorate", "scene", "batch", "total")


def run_pipeline(seed: int, structures: int, times: Dict[str, List[float]]) -> None:
    """Build one world end to end, recording the duration of each stage."""
    with Timer() as total:
        with Timer() as t:
            state = WorldState.create(seed=seed)
        times["generate"].append(t.elapsed)

        with Timer() as t:
            state.place_structures(structures)
        times["allocate"].append(t.elapsed)

        with Timer() as t:
            state.add_decorations()
        times["decorate"].append(t.elapsed)

        with Timer() as t:
            scene = build_scene(state.grid, state.decorations)
        times["scene"].append(t.elapsed)

        with Timer() as t:
            batch_static(scene)
        times["batch"].append(t.elapsed)
    times["total"].append(total.elapsed)


def run_benchmark(worlds: int = 20, structures: int = 6, profile_hotspots: bool = False) -> Dict[str, List[float]]:
    """Generate worlds seeded 0..worlds-1 and print per-stage timings."""
    print(f"\nBenchmark: {worlds} worlds on a {GRID}x{GRID} grid, {structures} structures each")
    times: Dict[str, List[float]] = {stage: [] for stage in STAGES}

    profiler = cProfile.Profile() if profile_hotspots else None
    if profiler:
        profiler.enable()
    for seed in range(worlds):
        run_pipeline(seed, structures, times)
    if profiler:
        profiler.disable()

    print("=" * 80)
    for stage in STAGES:
        print(format_stats_line(stage, times[stage]))

    if profiler:
        print("\nHOT CODE PATHS (Top 20 functions by cumulative time)")
        print("=" * 80)
        s = io.StringIO()
        pstats.Stats(profiler, stream=s).sort_stats("cumulative").print_stats(20)
        for line in s.getvalue().split("\n")[:25]:
            if line.strip():
                print(line)

    return times


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Benchmark world generation and batching.")
    parser.add_argument("--worlds", type=int, default=20)
    parser.add_argument("--structures", type=int, default=6)
    parser.add_argument("--profile", action="store_true", help="Print cProfile hotspots")
    args = parser.parse_args()
    run_benchmark(args.worlds, args.structures, args.profile)
