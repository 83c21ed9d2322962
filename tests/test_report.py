from simulations.common import (
    BatchedSweepResult,
    BatchedSweepSpec,
    NoiseSweepResult,
    NoiseSweepSpec,
    SweepPoint,
)
from simulations.plotting import plot_batched, plot_noise
from simulations.report import (
    format_batched_report,
    format_coordinates,
    format_histogram,
    format_noise_report,
)


def _noise_result():
    spec = NoiseSweepSpec(
        num_bins=10, decider="sigma_noisy", param_values=(1, 2), balls_multiplier=2, num_trials=4
    )
    return NoiseSweepResult(
        spec=spec,
        points=[
            SweepPoint(param=1, num_trials=4, gaps=[1, 1, 2, 2]),
            SweepPoint(param=2, num_trials=4, gaps=[3, 3, 3, 4]),
        ],
    )


def _batched_result():
    spec = BatchedSweepSpec(num_bins=10, batch_sizes=(5,), num_trials=2)
    return BatchedSweepResult(
        spec=spec,
        one_choice=[SweepPoint(param=5, num_trials=2, gaps=[1, 1])],
        two_choice=[SweepPoint(param=5, num_trials=2, gaps=[2, 3])],
    )


def test_format_histogram():
    p = SweepPoint(param=1, num_trials=4, gaps=[2, 1, 1, 2])
    assert format_histogram(p) == ["1 : 50%", "2 : 50%"]
    assert format_histogram(p, latex=True) == ["\\textbf{1} : 50\\%", "\\textbf{2} : 50\\%"]


def test_format_coordinates():
    points = _noise_result().points
    assert format_coordinates(points) == ["(1, 1.5)", "(2, 3.25)"]


def test_noise_report():
    text = format_noise_report(_noise_result())
    lines = text.splitlines()
    assert lines[0] == "Sigma-noise:"
    assert "n : 10" in lines
    assert lines[lines.index("Value : 1") + 1] == "1 : 50%"
    assert lines[-2:] == ["(1, 1.5)", "(2, 3.25)"]


def test_batched_report():
    lines = format_batched_report(_batched_result()).splitlines()
    assert "Batch-size (b) : 5" in lines
    two = lines.index("Two-Choice:")
    assert lines[two + 1 : two + 3] == ["2 : 50%", "3 : 50%"]
    one = lines.index("One-Choice:")
    assert lines[one + 1] == "1 : 100%"
    assert lines[-4:] == ["One-Choice:", "(5, 1)", "Two-Choice:", "(5, 2.5)"]


def test_plots():
    fig = plot_noise(_noise_result())
    ax = fig.axes[0]
    assert len(ax.lines) == 1
    assert list(ax.lines[0].get_ydata()) == [1.5, 3.25]

    fig = plot_batched(_batched_result())
    ax = fig.axes[0]
    assert [l.get_label() for l in ax.lines] == ["One-Choice", "Two-Choice"]
    assert ax.get_xscale() == "log"
