"""
Opt-in timing of the growth hot path.

Decorate functions with `@profile` or wrap blocks in `profile_block(name)`;
nothing is recorded until `profiler.enabled` is switched on (the CLI does this
with --profile).
"""

import time
from collections import defaultdict
from functools import wraps
from typing import Dict


class Profiler:
    def __init__(self):
        self.enabled = False
        self.stats: Dict[str, Dict[str, float]] = defaultdict(
            lambda: {'calls': 0, 'total_time': 0.0, 'max_time': 0.0}
        )

    def record(self, name: str, elapsed: float):
        entry = self.stats[name]
        entry['calls'] += 1
        entry['total_time'] += elapsed
        entry['max_time'] = max(entry['max_time'], elapsed)

    def summary(self) -> Dict[str, Dict[str, float]]:
        return {name: dict(data) for name, data in self.stats.items()}

    def report(self):
        if not self.stats:
            print("No profiling data recorded")
            return

        print("\n" + "=" * 78)
        print("GROWTH PROFILE")
        print("=" * 78)
        print(f"{'Function':<40} {'Calls':>10} {'Total(s)':>10} {'Avg(us)':>8} {'Max(ms)':>7}")
        print("-" * 78)

        ordered = sorted(self.stats.items(), key=lambda x: x[1]['total_time'], reverse=True)
        for name, data in ordered:
            calls = data['calls']
            avg_us = data['total_time'] / calls * 1e6 if calls else 0.0
            print(f"{name:<40} {calls:>10} {data['total_time']:>10.3f} "
                  f"{avg_us:>8.1f} {data['max_time'] * 1000:>7.2f}")
        print("=" * 78)

    def reset(self):
        self.stats.clear()


profiler = Profiler()


def profile(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        if not profiler.enabled:
            return func(*args, **kwargs)
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            profiler.record(func.__qualname__, time.perf_counter() - start)
    return wrapper


class profile_block:
    def __init__(self, name: str):
        self.name = name
        self.start = None

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args):
        if profiler.enabled:
            profiler.record(self.name, time.perf_counter() - self.start)
