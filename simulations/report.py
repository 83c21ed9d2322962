# simulations/report.py

from __future__ import annotations

from typing import Dict, List, Sequence

from .common import BatchedSweepResult, NoiseSweepResult, SweepPoint, coordinates


# Headings used for each noise-sweep decider.
DECIDER_TITLES: Dict[str, str] = {
    "sigma_noisy": "Sigma-noise",
    "g_bounded": "g-Bounded",
    "g_myopic": "g-Myopic",
    "two_choice": "Two-Choice",
}


def format_number(x: float) -> str:
    """
    Integers print as integers, everything else in %g style (3.0 -> "3",
    2.53 -> "2.53").
    """
    if isinstance(x, int):
        return str(x)
    return f"{x:g}"


def format_histogram(point: SweepPoint, latex: bool = False) -> List[str]:
    """
    One "<gap> : <percentage>%" line per observed gap, smallest gap first.
    """
    lines = []
    for gap, pct in point.percentages().items():
        if latex:
            lines.append(f"\\textbf{{{gap}}} : {pct}\\%")
        else:
            lines.append(f"{gap} : {pct}%")
    return lines


def format_coordinates(points: Sequence[SweepPoint]) -> List[str]:
    return [f"({format_number(x)}, {format_number(y)})" for x, y in coordinates(points)]


def format_batched_report(result: BatchedSweepResult, latex: bool = False) -> str:
    lines = [f"=== b-Batched setting (n = {result.spec.num_bins}) ==="]

    for one, two in zip(result.one_choice, result.two_choice):
        lines.append(f"Batch-size (b) : {format_number(two.param)}")
        lines.append("Two-Choice:")
        lines.extend(format_histogram(two, latex=latex))
        lines.append("One-Choice:")
        lines.extend(format_histogram(one, latex=latex))
        lines.append("")

    lines.append("=== Mean gap vs batch size ===")
    lines.append("One-Choice:")
    lines.extend(format_coordinates(result.one_choice))
    lines.append("Two-Choice:")
    lines.extend(format_coordinates(result.two_choice))
    return "\n".join(lines)


def format_noise_report(result: NoiseSweepResult, latex: bool = False) -> str:
    spec = result.spec
    title = DECIDER_TITLES.get(spec.decider, spec.decider)
    lines = [f"{title}:", f"n : {spec.num_bins}", ""]

    for point in result.points:
        lines.append(f"Value : {format_number(point.param)}")
        lines.extend(format_histogram(point, latex=latex))

    lines.append("")
    lines.append(f"=== Mean gap vs value ({title}, n = {spec.num_bins}) ===")
    lines.extend(format_coordinates(result.points))
    return "\n".join(lines)
