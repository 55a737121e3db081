#!/usr/bin/env python3
"""Benchmark suite for pyskip comparing against a bisect-maintained list."""

import argparse
import bisect
import json
import random
import time
from pathlib import Path
from typing import Dict, List

import numpy as np
import plotly.graph_objects as go
from tqdm import tqdm

from pyskip import SkipList

class Metrics:
    def __init__(self):
        self.insert_latencies: List[float] = []
        self.search_latencies: List[float] = []
        self.delete_latencies: List[float] = []
        self.max_levels: List[int] = []

    @staticmethod
    def _percentiles(samples: List[float]) -> Dict[str, float]:
        return {
            "p50": float(np.percentile(samples, 50)),
            "p95": float(np.percentile(samples, 95)),
            "p99": float(np.percentile(samples, 99)),
        }

    def to_dict(self) -> Dict:
        result = {
            "insert_latencies": self._percentiles(self.insert_latencies),
            "search_latencies": self._percentiles(self.search_latencies),
            "delete_latencies": self._percentiles(self.delete_latencies),
        }
        if self.max_levels:
            result["max_level"] = max(self.max_levels)
        return result

    def plot_latencies(self, title: str, output_path: Path):
        fig = go.Figure()

        for name, samples in (
            ("Insert Latency", self.insert_latencies),
            ("Search Latency", self.search_latencies),
            ("Delete Latency", self.delete_latencies),
        ):
            fig.add_trace(go.Box(y=samples, name=name, boxpoints="outliers"))

        fig.update_layout(
            title=title,
            yaxis_title="Latency (µs)",
            boxmode="group"
        )

        fig.write_html(output_path)

class BenchmarkSuite:
    def __init__(self, num_entries: int, seed: int):
        self.num_entries = num_entries
        self.seed = seed
        self.metrics = Metrics()
        rng = random.Random(seed)
        self._keys = rng.sample(range(num_entries * 4), num_entries)

    def run_skiplist_benchmark(self) -> Metrics:
        skiplist: SkipList[int] = SkipList(rng=random.Random(self.seed))

        for key in tqdm(self._keys, desc="SkipList Insert"):
            start = time.perf_counter()
            skiplist.insert(key)
            self.metrics.insert_latencies.append((time.perf_counter() - start) * 1e6)
        self.metrics.max_levels.append(skiplist.max_level)

        for key in tqdm(self._keys, desc="SkipList Search"):
            start = time.perf_counter()
            skiplist.search(key)
            self.metrics.search_latencies.append((time.perf_counter() - start) * 1e6)

        for key in tqdm(self._keys, desc="SkipList Delete"):
            start = time.perf_counter()
            skiplist.delete(key)
            self.metrics.delete_latencies.append((time.perf_counter() - start) * 1e6)

        return self.metrics

    def run_bisect_benchmark(self) -> Metrics:
        items: List[int] = []
        metrics = Metrics()

        for key in tqdm(self._keys, desc="Bisect Insert"):
            start = time.perf_counter()
            i = bisect.bisect_left(items, key)
            if i == len(items) or items[i] != key:
                items.insert(i, key)
            metrics.insert_latencies.append((time.perf_counter() - start) * 1e6)

        for key in tqdm(self._keys, desc="Bisect Search"):
            start = time.perf_counter()
            i = bisect.bisect_left(items, key)
            _ = i < len(items) and items[i] == key
            metrics.search_latencies.append((time.perf_counter() - start) * 1e6)

        for key in tqdm(self._keys, desc="Bisect Delete"):
            start = time.perf_counter()
            i = bisect.bisect_left(items, key)
            if i < len(items) and items[i] == key:
                del items[i]
            metrics.delete_latencies.append((time.perf_counter() - start) * 1e6)

        return metrics

def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--size", type=int, default=100000, help="Number of keys")
    parser.add_argument("--seed", type=int, default=0, help="Seed for key order and tower heights")
    parser.add_argument("--output", type=Path, default=Path("benchmark_results"), help="Output directory")
    args = parser.parse_args()

    args.output.mkdir(parents=True, exist_ok=True)

    suite = BenchmarkSuite(args.size, args.seed)
    skiplist_metrics = suite.run_skiplist_benchmark()
    bisect_metrics = suite.run_bisect_benchmark()

    # Generate reports
    skiplist_metrics.plot_latencies(
        "SkipList Latency Distribution",
        args.output / "skiplist_latencies.html"
    )

    # Save metrics
    with open(args.output / "metrics.json", "w") as f:
        json.dump({
            "skiplist": skiplist_metrics.to_dict(),
            "bisect": bisect_metrics.to_dict(),
        }, f, indent=2)

if __name__ == "__main__":
    main()
