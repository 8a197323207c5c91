"""Shared helpers for the benchmarks: timing, statistics and report lines."""
from __future__ import annotations

import time
from statistics import mean, median, stdev
from typing import List, Tuple


class Timer:
    """Context manager for timing code blocks."""

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args):
        self.elapsed = time.perf_counter() - self.start


def get_time_stats(times: List[float]) -> Tuple[float, float, float, float]:
    """Returns (mean, median, stdev, max) in seconds."""
    if not times:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        mean(times),
        median(times),
        stdev(times) if len(times) > 1 else 0.0,
        max(times),
    )


def format_time_ms(seconds: float) -> str:
    """Format time in milliseconds: '12.34ms'"""
    return f"{seconds * 1000:.2f}ms"


def format_stats_line(label: str, times: List[float]) -> str:
    avg, med, dev, worst = get_time_stats(times)
    return (f"  {label:<22} mean {format_time_ms(avg):>9}  median {format_time_ms(med):>9}"
            f"  stdev {format_time_ms(dev):>9}  max {format_time_ms(worst):>9}")
