# simulations/sweep.py

from __future__ import annotations

import argparse
import sys

import matplotlib.pyplot as plt

from balanced_allocations import InvalidConfiguration, PyRandomSource

from . import config
from .common import BatchedSweepResult, BatchedSweepSpec, NoiseSweepSpec
from .log import get_logger
from .plotting import plot_batched, plot_noise
from .report import format_batched_report, format_noise_report
from .runner import run_batched_sweep, run_noise_sweep


def _settings(mode: str) -> dict:
    """
    Resolve the sweep constants for full or quick mode.
    """
    if mode == "quick":
        return {
            "num_trials": config.NUM_TRIALS_QUICK,
            "batched_bins": [config.BATCHED_NUM_BINS_QUICK],
            "batch_sizes": config.BATCH_SIZES_QUICK,
            "noise_bins": config.NOISE_NUM_BINS_QUICK,
            "multiplier": config.NOISE_BALLS_MULTIPLIER_QUICK,
            "param_values": config.NOISE_PARAM_VALUES_QUICK,
        }
    return {
        "num_trials": config.NUM_TRIALS,
        "batched_bins": [config.BATCHED_NUM_BINS],
        "batch_sizes": config.BATCH_SIZES,
        "noise_bins": config.NOISE_NUM_BINS,
        "multiplier": config.NOISE_BALLS_MULTIPLIER,
        "param_values": config.NOISE_PARAM_VALUES,
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Measure the gap of Two-Choice variants (batched, noisy, bounded, myopic) via Monte Carlo."
    )
    parser.add_argument(
        "--experiment",
        choices=config.EXPERIMENTS + ["all"],
        default="all",
        help="which sweep to run (default: all, in order batched, sigma_noisy, g_bounded, g_myopic)",
    )
    parser.add_argument(
        "--mode",
        choices=["full", "quick"],
        default="full",
        help="full: published sweep sizes; quick: small dev run",
    )
    parser.add_argument("--bins", type=int, action="append", help="number of bins (repeatable; overrides the mode default)")
    parser.add_argument("--trials", type=int, help="trials per sweep point (overrides the mode default)")
    parser.add_argument("--multiplier", type=int, help="balls per bin for noise sweeps (overrides the mode default)")
    parser.add_argument("--seed", type=int, default=config.DEFAULT_SEED, help="seed for the shared random source")
    parser.add_argument("--latex", action="store_true", help="print histogram lines as LaTeX table cells")
    parser.add_argument("--plot", action="store_true", help="show mean gap plots with matplotlib")
    parser.add_argument("--no-progress", action="store_true", help="disable progress bars")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: list[str]) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logger = get_logger(verbose=args.verbose)
    settings = _settings(args.mode)
    if args.trials is not None:
        settings["num_trials"] = args.trials
    if args.multiplier is not None:
        settings["multiplier"] = args.multiplier
    if args.bins:
        settings["batched_bins"] = args.bins
        settings["noise_bins"] = args.bins

    experiments = config.EXPERIMENTS if args.experiment == "all" else [args.experiment]
    progress = not args.no_progress

    # One stream for the whole run; trials and sweep points never re-seed.
    rng = PyRandomSource(args.seed)
    logger.info(f"RUN START mode={args.mode} experiments={experiments} seed={args.seed}")

    results = []
    try:
        for experiment in experiments:
            if experiment == "batched":
                for n in settings["batched_bins"]:
                    spec = BatchedSweepSpec(
                        num_bins=n,
                        batch_sizes=tuple(settings["batch_sizes"]),
                        num_trials=settings["num_trials"],
                    )
                    result = run_batched_sweep(spec, rng, progress=progress)
                    print(format_batched_report(result, latex=args.latex))
                    print()
                    results.append(result)
            else:
                for n in settings["noise_bins"]:
                    spec = NoiseSweepSpec(
                        num_bins=n,
                        decider=experiment,
                        param_values=tuple(settings["param_values"]),
                        balls_multiplier=settings["multiplier"],
                        num_trials=settings["num_trials"],
                    )
                    result = run_noise_sweep(spec, rng, progress=progress)
                    print(format_noise_report(result, latex=args.latex))
                    print()
                    results.append(result)
    except InvalidConfiguration as e:
        parser.error(str(e))

    logger.info("RUN END")

    if args.plot:
        for result in results:
            if isinstance(result, BatchedSweepResult):
                plot_batched(result)
            else:
                plot_noise(result)
        plt.show()

    return 0


def cli() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(cli())
