import sys
import os
import time
import json
import logging
import argparse
import random
from dataclasses import dataclass, asdict
from typing import List, Dict, Any

import numpy as np

# Setup Path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from walls_engine.core.grid import WallGrid
from walls_engine.algo.puzzle import PuzzleGenerator
from walls_engine.algo.solver import solve_grid
from walls_engine.algo.base import GenerationStalled
from walls_engine.core.stats import PuzzleStats

# Setup Logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger("Benchmark")

@dataclass
class RunResult:
    size: str
    seed: int
    success: bool
    time_sec: float
    backbite_steps: int
    clues: int
    clue_percent: float
    pinned_cells: int
    solve_sweeps: int
    stalled: bool = False

class GenerationBenchmark:
    def __init__(self, output_dir="benchmarks", runs=10, max_steps=None):
        self.output_dir = output_dir
        self.res_dir = os.path.join(output_dir, "results")
        self.graph_dir = os.path.join(output_dir, "graphs")

        for d in [self.res_dir, self.graph_dir]:
            os.makedirs(d, exist_ok=True)

        self.sizes = [
            (4, 4),
            (5, 4),
            (6, 6),
            (8, 8),
            (10, 10),
        ]
        self.runs = runs
        self.max_steps = max_steps

    def run_generators(self) -> List[Dict[str, Any]]:
        logger.info("Step 1: Generating Puzzles...")
        results = []

        for w, h in self.sizes:
            label = f"{w}x{h}"
            for seed in range(self.runs):
                grid = WallGrid(w, h)
                gen = PuzzleGenerator(grid, rng=random.Random(seed), max_steps=self.max_steps)

                t_start = time.time()
                stalled = False
                try:
                    gen.run_all()
                except GenerationStalled as e:
                    logger.warning(f"    STALLED: {label} seed {seed} ({e})")
                    stalled = True
                total_time = time.time() - t_start

                if stalled:
                    results.append(asdict(RunResult(label, seed, False, total_time, gen.step_count,
                                                    0, 0.0, 0, 0, stalled=True)))
                    continue

                stats = PuzzleStats.calculate_stats(grid, gen.walls)
                check = solve_grid(grid, gen.walls)
                res = RunResult(
                    size=label,
                    seed=seed,
                    success=check.verdict.name == "SOLVABLE",
                    time_sec=total_time,
                    backbite_steps=gen.step_count,
                    clues=stats["clues"],
                    clue_percent=stats["clue_percent"],
                    pinned_cells=stats["pinned_cells"],
                    solve_sweeps=check.sweeps,
                )
                results.append(asdict(res))
            logger.info(f"  > {label}: {self.runs} runs done")

        final_path = os.path.join(self.res_dir, "generation_results.json")
        with open(final_path, "w") as f:
            json.dump(results, f, indent=2)
        logger.info(f"Results saved to {final_path}")
        return results

    def summarize(self, results: List[Dict[str, Any]]):
        logger.info("Step 2: Summary")
        print(f"\n{'SIZE':<8} | {'MEAN (s)':<10} | {'P90 (s)':<10} | {'CLUES':<12} | {'CLUE %':<8}")
        print("-" * 60)
        for w, h in self.sizes:
            label = f"{w}x{h}"
            rows = [r for r in results if r["size"] == label and not r["stalled"]]
            if not rows:
                print(f"{label:<8} | (all runs stalled)")
                continue
            times = np.array([r["time_sec"] for r in rows])
            clues = np.array([r["clues"] for r in rows])
            pct = np.array([r["clue_percent"] for r in rows])
            print(f"{label:<8} | {times.mean():<10.4f} | {np.percentile(times, 90):<10.4f} | "
                  f"{clues.mean():>5.1f} ±{clues.std():<4.1f} | {pct.mean():<8.1f}")

    def generate_graphs(self):
        logger.info("Step 3: Generating Graphs...")
        try:
            import matplotlib.pyplot as plt
            import pandas as pd
            import seaborn as sns
        except ImportError:
            logger.error("Missing matplotlib/pandas/seaborn. Cannot generate graphs.")
            return

        res_path = os.path.join(self.res_dir, "generation_results.json")
        if not os.path.exists(res_path):
            logger.warning("No results found.")
            return

        df = pd.read_json(res_path)
        df = df[~df['stalled']]
        df['cells'] = df['size'].apply(lambda x: int(x.split('x')[0]) * int(x.split('x')[1]))

        graph_definitions = [
            ("Time vs Cells", lambda d: sns.lineplot(data=d, x="cells", y="time_sec")),
            ("Clue % by Size", lambda d: sns.boxplot(data=d, x="size", y="clue_percent")),
            ("Backbite Steps vs Cells", lambda d: sns.scatterplot(data=d, x="cells", y="backbite_steps")),
            ("Solver Sweeps by Size", lambda d: sns.barplot(data=d, x="size", y="solve_sweeps")),
        ]

        fig, axes = plt.subplots(2, 2, figsize=(14, 10))
        fig.suptitle("Puzzle Generation", fontsize=18)
        axes = axes.flatten()

        for i, (title, plot_func) in enumerate(graph_definitions):
            plt.sca(axes[i])
            try:
                plot_func(df)
            except Exception as e:
                logger.error(f"Plot {title} failed: {e}")
            plt.title(title)

        plt.tight_layout(rect=[0, 0.03, 1, 0.95])
        plt.savefig(os.path.join(self.graph_dir, "generation.png"))
        logger.info("Saved generation.png")
        plt.close()

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Puzzle Generation Benchmark")
    parser.add_argument("--runs", type=int, default=10, help="Puzzles per size")
    parser.add_argument("--max-steps", type=int, default=None, help="Backbite step cap per puzzle")
    parser.add_argument("--out", type=str, default="benchmarks", help="Output directory")
    parser.add_argument("--graphs", action="store_true", help="Draw graphs (needs pandas/seaborn)")
    args = parser.parse_args()

    suite = GenerationBenchmark(output_dir=args.out, runs=args.runs, max_steps=args.max_steps)
    results = suite.run_generators()
    suite.summarize(results)
    if args.graphs:
        suite.generate_graphs()
