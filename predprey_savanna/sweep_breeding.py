#!/usr/bin/env python3
"""
Parameter sweep over lion and rabbit breeding probability.

- For each (LION_BP, RABBIT_BP) cell, runs --reps seeds for up to --steps steps
- Records how often all three species are still present at the end and the
  mean step at which the run stopped being viable
- Writes one CSV row per cell and a coexistence heatmap
"""

from __future__ import annotations

import argparse
import os
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import asdict, dataclass
from typing import List, Tuple

import numpy as np
import pandas as pd

from predprey_savanna import config
from predprey_savanna.randomizer import Randomizer
from predprey_savanna.simulator import Simulator
from predprey_savanna.species import Species


def frange(start: float, stop: float, step: float) -> List[float]:
    vals = []
    x = start
    while x <= stop + 1e-9:
        vals.append(round(x, 10))
        x += step
    return vals


@dataclass(frozen=True)
class CellResult:
    i: int
    j: int
    lion_breeding_probability: float
    rabbit_breeding_probability: float
    coexist_prob: float
    mean_survival_step: float
    rabbit_avg: float
    fox_avg: float
    lion_avg: float


def _run_cell(
    i: int,
    j: int,
    lion_bp: float,
    rabbit_bp: float,
    reps: int,
    steps: int,
    depth: int,
    width: int,
    seed_base: int,
) -> CellResult:
    params = config.default_parameters()
    params[Species.LION] = params[Species.LION].replace(breeding_probability=lion_bp)
    params[Species.RABBIT] = params[Species.RABBIT].replace(breeding_probability=rabbit_bp)

    coexist = 0
    survival_steps: List[int] = []
    totals = {species: 0 for species in Species}
    for rep in range(reps):
        sim = Simulator(
            depth=depth,
            width=width,
            parameters=params,
            randomizer=Randomizer(seed_base + rep),
        )
        sim.simulate(steps)
        survival_steps.append(sim.step)
        counts = sim.counts()
        if all(n > 0 for n in counts.values()):
            coexist += 1
        for species, n in counts.items():
            totals[species] += n

    return CellResult(
        i=i,
        j=j,
        lion_breeding_probability=lion_bp,
        rabbit_breeding_probability=rabbit_bp,
        coexist_prob=coexist / reps,
        mean_survival_step=float(np.mean(survival_steps)),
        rabbit_avg=totals[Species.RABBIT] / reps,
        fox_avg=totals[Species.FOX] / reps,
        lion_avg=totals[Species.LION] / reps,
    )


def run_grid(
    lion_vals: List[float],
    rabbit_vals: List[float],
    args: argparse.Namespace,
) -> Tuple[List[CellResult], np.ndarray]:
    heat = np.full((len(lion_vals), len(rabbit_vals)), np.nan, dtype=float)

    worker_args = [
        (i, j, lion_bp, rabbit_bp, args.reps, args.steps, args.depth, args.width, args.seed + i * 1000 + j * 100)
        for i, lion_bp in enumerate(lion_vals)
        for j, rabbit_bp in enumerate(rabbit_vals)
    ]

    results: List[CellResult] = []
    if args.workers == 1:
        for a in worker_args:
            results.append(_run_cell(*a))
    else:
        with ProcessPoolExecutor(max_workers=args.workers) as ex:
            futs = [ex.submit(_run_cell, *a) for a in worker_args]
            for fut in as_completed(futs):
                results.append(fut.result())

    results.sort(key=lambda r: (r.i, r.j))
    for r in results:
        heat[r.i, r.j] = r.coexist_prob
        print(
            f"LION_BP={r.lion_breeding_probability:.3f} RABBIT_BP={r.rabbit_breeding_probability:.3f} "
            f"coexist={r.coexist_prob:.2f} survival={r.mean_survival_step:.1f}"
        )
    return results, heat


def save_heatmap(
    heat: np.ndarray,
    lion_vals: List[float],
    rabbit_vals: List[float],
    title: str,
    outfile: str,
) -> None:
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(figsize=(7.5, 5.2))
    im = ax.imshow(
        heat,
        origin="lower",
        aspect="auto",
        interpolation="nearest",
        extent=[min(rabbit_vals), max(rabbit_vals), min(lion_vals), max(lion_vals)],
        cmap="viridis",
        vmin=0.0,
        vmax=1.0,
    )
    ax.set_xlabel("RABBIT_BREEDING_PROBABILITY")
    ax.set_ylabel("LION_BREEDING_PROBABILITY")
    ax.set_title(title)
    cbar = fig.colorbar(im, ax=ax)
    cbar.set_label("Coexistence probability")
    fig.tight_layout()
    fig.savefig(outfile, dpi=150)
    plt.close(fig)
    print(f"Saved heatmap to {outfile}")


def main(argv: List[str] | None = None) -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--lion-min", type=float, default=0.02)
    ap.add_argument("--lion-max", type=float, default=0.14)
    ap.add_argument("--lion-step", type=float, default=0.04)
    ap.add_argument("--rabbit-min", type=float, default=0.06)
    ap.add_argument("--rabbit-max", type=float, default=0.18)
    ap.add_argument("--rabbit-step", type=float, default=0.04)
    ap.add_argument("--reps", type=int, default=3)
    ap.add_argument("--steps", type=int, default=500)
    ap.add_argument("--depth", type=int, default=60)
    ap.add_argument("--width", type=int, default=80)
    ap.add_argument("--seed", type=int, default=config.SEED)
    ap.add_argument("--workers", type=int, default=max(1, (os.cpu_count() or 2) - 1))
    ap.add_argument("--csv", type=str, default="breeding_sweep.csv")
    ap.add_argument("--outfile", type=str, default="breeding_sweep.png")
    args = ap.parse_args(argv)

    lion_vals = frange(args.lion_min, args.lion_max, args.lion_step)
    rabbit_vals = frange(args.rabbit_min, args.rabbit_max, args.rabbit_step)
    print(
        "\n=== Sweep ===\n"
        f"LION_BP range:   [{args.lion_min:.3f}, {args.lion_max:.3f}] step {args.lion_step:.3f}\n"
        f"RABBIT_BP range: [{args.rabbit_min:.3f}, {args.rabbit_max:.3f}] step {args.rabbit_step:.3f}\n"
    )

    results, heat = run_grid(lion_vals, rabbit_vals, args)

    if args.csv:
        df = pd.DataFrame([asdict(r) for r in results]).drop(columns=["i", "j"])
        df.to_csv(args.csv, index=False)
        print(f"Saved results to {args.csv}")
    if args.outfile:
        title = f"Coexistence after {args.steps} steps ({args.reps} seeds per cell)"
        save_heatmap(heat, lion_vals, rabbit_vals, title, args.outfile)


if __name__ == "__main__":
    main()
