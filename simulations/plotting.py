# simulations/plotting.py

from __future__ import annotations

from typing import Dict, List, Tuple

import matplotlib.pyplot as plt

from .common import BatchedSweepResult, NoiseSweepResult, coordinates
from .report import DECIDER_TITLES


def plot_series(
    series: Dict[str, List[Tuple[float, float]]],
    title: str,
    xlabel: str,
    ylabel: str = "Mean gap",
    log_x: bool = False,
):
    """
    Draw one line per named (x, y) series on a fresh figure and return it.
    """
    fig = plt.figure(figsize=(8, 4))
    for label, pts in series.items():
        xs = [x for x, _ in pts]
        ys = [y for _, y in pts]
        plt.plot(xs, ys, marker="o", label=label)

    if log_x:
        plt.xscale("log")
    plt.title(title)
    plt.xlabel(xlabel)
    plt.ylabel(ylabel)
    plt.legend()
    plt.tight_layout()
    return fig


def plot_batched(result: BatchedSweepResult):
    return plot_series(
        {
            "One-Choice": coordinates(result.one_choice),
            "Two-Choice": coordinates(result.two_choice),
        },
        title=f"b-Batched setting (n={result.spec.num_bins}, trials={result.spec.num_trials})",
        xlabel="Batch size b",
        log_x=True,
    )


def plot_noise(result: NoiseSweepResult):
    spec = result.spec
    title = DECIDER_TITLES.get(spec.decider, spec.decider)
    xlabel = "sigma" if spec.decider == "sigma_noisy" else "g"
    return plot_series(
        {title: coordinates(result.points)},
        title=f"{title} (n={spec.num_bins}, m={spec.num_balls}, trials={spec.num_trials})",
        xlabel=xlabel,
    )
