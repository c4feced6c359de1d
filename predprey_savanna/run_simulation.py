#!/usr/bin/env python3
"""
run_simulation.py

Run the rabbit/fox/lion savanna from the command line.

- prints population counts every --report-every steps
- stops when only one species is left (unless --no-stop)
- optionally writes the per-step history to CSV and a population plot to PNG

Run:
  python -m predprey_savanna.run_simulation --steps 500 --seed 42 --plot populations.png
"""

from __future__ import annotations

import argparse
from typing import Dict, List

import pandas as pd

from predprey_savanna import config
from predprey_savanna.field import Field
from predprey_savanna.field_stats import FieldStats
from predprey_savanna.randomizer import Randomizer
from predprey_savanna.simulator import Simulator
from predprey_savanna.species import Species, SpeciesParameters


class HistoryRecorder:
    """Status callback collecting one row of counts per step."""

    def __init__(self, report_every: int = 0):
        self.rows: List[Dict[str, int]] = []
        self.report_every = report_every

    def __call__(self, step: int, field: Field) -> None:
        stats = FieldStats(field)
        row = {"step": step}
        row.update({species.name.lower(): n for species, n in stats.counts.items()})
        if self.rows and self.rows[-1]["step"] >= step:
            # a reset starts a fresh history
            self.rows = []
        self.rows.append(row)
        if self.report_every and step > 0 and step % self.report_every == 0:
            print(
                f"t={step:5d} rabbits={row['rabbit']:5d} "
                f"foxes={row['fox']:5d} lions={row['lion']:5d}"
            )

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.rows, columns=["step"] + [s.name.lower() for s in Species])


def parameters_from_args(args: argparse.Namespace) -> Dict[Species, SpeciesParameters]:
    return {
        Species.RABBIT: SpeciesParameters(
            breeding_age=args.rabbit_breeding_age,
            breeding_probability=args.rabbit_breeding_probability,
            max_litter_size=args.rabbit_max_litter_size,
        ),
        Species.FOX: SpeciesParameters(
            breeding_age=args.fox_breeding_age,
            breeding_probability=args.fox_breeding_probability,
            max_litter_size=args.fox_max_litter_size,
            food_values={Species.RABBIT: args.fox_rabbit_food_value},
        ),
        Species.LION: SpeciesParameters(
            breeding_age=args.lion_breeding_age,
            breeding_probability=args.lion_breeding_probability,
            max_litter_size=args.lion_max_litter_size,
            food_values={
                Species.RABBIT: args.lion_rabbit_food_value,
                Species.FOX: args.lion_fox_food_value,
            },
        ),
    }


def plot_populations(history: pd.DataFrame, outfile: str) -> None:
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(figsize=(9.0, 4.5))
    ax.plot(history["step"], history["rabbit"], label="Rabbits", color="orange")
    ax.plot(history["step"], history["fox"], label="Foxes", color="blue")
    ax.plot(history["step"], history["lion"], label="Lions", color="green")
    ax.set_xlabel("Time step")
    ax.set_ylabel("Count")
    ax.set_title("Rabbit / fox / lion populations")
    ax.legend()
    ax.grid(alpha=0.25)
    fig.tight_layout()
    fig.savefig(outfile, dpi=150)
    plt.close(fig)
    print(f"Saved population plot to {outfile}")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument("--width", type=int, default=config.DEFAULT_WIDTH)
    ap.add_argument("--depth", type=int, default=config.DEFAULT_DEPTH)
    ap.add_argument("--steps", type=int, default=config.STEPS)
    ap.add_argument("--seed", type=int, default=config.SEED)
    ap.add_argument("--report-every", type=int, default=config.REPORT_EVERY)
    ap.add_argument("--quiet", action="store_true", help="no per-step reports")
    ap.add_argument("--no-stop", dest="stop", action="store_false",
                    help="keep stepping after only one species is left")

    ap.add_argument("--rabbit-breeding-age", type=int, default=config.RABBIT_BREEDING_AGE)
    ap.add_argument("--rabbit-breeding-probability", type=float, default=config.RABBIT_BREEDING_PROBABILITY)
    ap.add_argument("--rabbit-max-litter-size", type=int, default=config.RABBIT_MAX_LITTER_SIZE)

    ap.add_argument("--fox-breeding-age", type=int, default=config.FOX_BREEDING_AGE)
    ap.add_argument("--fox-breeding-probability", type=float, default=config.FOX_BREEDING_PROBABILITY)
    ap.add_argument("--fox-max-litter-size", type=int, default=config.FOX_MAX_LITTER_SIZE)
    ap.add_argument("--fox-rabbit-food-value", type=int, default=config.FOX_RABBIT_FOOD_VALUE)

    ap.add_argument("--lion-breeding-age", type=int, default=config.LION_BREEDING_AGE)
    ap.add_argument("--lion-breeding-probability", type=float, default=config.LION_BREEDING_PROBABILITY)
    ap.add_argument("--lion-max-litter-size", type=int, default=config.LION_MAX_LITTER_SIZE)
    ap.add_argument("--lion-rabbit-food-value", type=int, default=config.LION_RABBIT_FOOD_VALUE)
    ap.add_argument("--lion-fox-food-value", type=int, default=config.LION_FOX_FOOD_VALUE)

    ap.add_argument("--history-csv", type=str, default=None, help="write per-step counts to this CSV")
    ap.add_argument("--plot", type=str, default=None, help="save a population plot to this PNG")
    return ap


def main(argv: List[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    recorder = HistoryRecorder(report_every=0 if args.quiet else args.report_every)
    sim = Simulator(
        depth=args.depth,
        width=args.width,
        parameters=parameters_from_args(args),
        randomizer=Randomizer(args.seed),
        on_status=recorder,
    )
    print(f"Step {sim.step}: {sim.stats().population_details()}")

    taken = sim.simulate(args.steps, stop_when_not_viable=args.stop)
    stats = sim.stats()
    if taken < args.steps:
        print(f"Only one species left at step {sim.step}: {stats.population_details() or 'none'}")
    print(f"Final populations after {sim.step} steps: {stats.population_details() or 'none'}")

    history = recorder.to_frame()
    if args.history_csv:
        history.to_csv(args.history_csv, index=False)
        print(f"Saved history to {args.history_csv}")
    if args.plot:
        plot_populations(history, args.plot)


if __name__ == "__main__":
    main()
