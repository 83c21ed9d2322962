import pytest

from balanced_allocations import (
    BatchedTwoChoiceSetting,
    GBounded,
    GMyopic,
    InvalidConfiguration,
    PyRandomSource,
    SigmaNoisy,
    TwoChoice,
    TwoSampleProcess,
)


def test_two_choice_scripted_pairs(scripted):
    rng = scripted(indices=[0, 1, 2, 3, 1, 3, 0, 3])
    p = TwoSampleProcess(4, TwoChoice())
    for _ in range(4):
        p.step(rng)
    assert p.snapshot_loads() == [1, 1, 1, 1]
    assert p.max_load() == 1
    assert p.total_balls() == 4
    assert p.gap() == 0
    assert rng.exhausted()


def test_two_choice_tie_on_loaded_pair(scripted):
    # (0, 2) arrives when both bins hold one ball; the tie goes to bin 0.
    rng = scripted(indices=[0, 1, 2, 3, 0, 2, 1, 3])
    p = TwoSampleProcess(4, TwoChoice())
    p.run(4, rng)
    assert p.snapshot_loads() == [2, 1, 1, 0]
    assert p.max_load() == 2
    assert p.gap() == 1


def test_same_bin_sampled_twice(scripted):
    rng = scripted(indices=[2, 2])
    p = TwoSampleProcess(3, TwoChoice())
    assert p.step(rng) == 2
    assert p.snapshot_loads() == [0, 0, 1]


def test_step_returns_chosen_bin(scripted):
    rng = scripted(indices=[0, 1, 0, 1])
    p = TwoSampleProcess(2, TwoChoice())
    assert p.step(rng) == 0
    assert p.step(rng) == 1


def test_snapshot_cannot_mutate_process(scripted):
    p = TwoSampleProcess(2, TwoChoice())
    p.step(scripted(indices=[0, 0]))
    snap = p.snapshot_loads()
    snap[0] = 100
    assert p.snapshot_loads() == [1, 0]
    assert p.max_load() == 1


@pytest.mark.parametrize("decider", [TwoChoice(), GBounded(2), GMyopic(2), SigmaNoisy(1.5)])
def test_invariants_hold_after_every_step(decider):
    rng = PyRandomSource(123)
    p = TwoSampleProcess(10, decider)
    for _ in range(300):
        p.step(rng)
        loads = p.snapshot_loads()
        assert sum(loads) == p.total_balls()
        assert max(loads) == p.max_load()
    assert p.total_balls() == 300


@pytest.mark.parametrize("decider", [TwoChoice(), GBounded(3), GMyopic(3), SigmaNoisy(4)])
def test_single_bin_gap_always_zero(decider):
    rng = PyRandomSource(1)
    p = TwoSampleProcess(1, decider)
    for _ in range(50):
        p.step(rng)
        assert p.gap() == 0


def test_two_sample_rejects_zero_bins():
    with pytest.raises(InvalidConfiguration):
        TwoSampleProcess(0, TwoChoice())


def test_two_choice_beats_bounded_adversary():
    # Reversing every close decision should not balance better than TwoChoice.
    n, m = 50, 5_000
    rng = PyRandomSource(99)
    good = TwoSampleProcess(n, TwoChoice())
    bad = TwoSampleProcess(n, GBounded(5))
    good.run(m, rng)
    bad.run(m, rng)
    assert good.gap() <= bad.gap()


# --- b-Batched setting -------------------------------------------------------

def test_batched_forced_choices(scripted):
    rng = scripted(indices=[0, 0, 1, 1])
    p = BatchedTwoChoiceSetting(2, batch_size=2)
    p.step(rng)
    assert p.snapshot_loads() == [1, 1]
    assert p.total_balls() == 2
    assert p.max_load() == 1
    assert p.gap() == 0
    assert rng.exhausted()


def test_batched_decisions_use_round_start_loads(scripted):
    # Both allocations sample (0, 1) while both bins are empty. With live
    # loads the second ball would go to bin 1; with the frozen snapshot both
    # ties go to the first sample.
    rng = scripted(indices=[0, 1, 0, 1])
    p = BatchedTwoChoiceSetting(2, batch_size=2)
    p.step(rng)
    assert p.snapshot_loads() == [2, 0]
    assert p.max_load() == 2
    assert p.gap() == 1


def test_batched_next_round_sees_previous_round(scripted):
    rng = scripted(indices=[0, 1, 0, 1, 0, 1, 0, 1])
    p = BatchedTwoChoiceSetting(2, batch_size=2)
    p.step(rng)
    p.step(rng)
    assert p.snapshot_loads() == [2, 2]
    assert p.rounds == 2


def test_batched_buffer_reset_between_rounds():
    rng = PyRandomSource(5)
    p = BatchedTwoChoiceSetting(8, batch_size=20)
    for r in range(1, 11):
        p.step(rng)
        loads = p.snapshot_loads()
        assert sum(loads) == p.total_balls() == 20 * r
        assert max(loads) == p.max_load()
        assert p._buffer == [0] * 8


def test_batched_buffer_reset_on_failure(scripted):
    p = BatchedTwoChoiceSetting(3, batch_size=3)
    # Runs out of draws halfway through the batch.
    rng = scripted(indices=[0, 1, 2])
    with pytest.raises(AssertionError):
        p.step(rng)
    assert p._buffer == [0, 0, 0]
    assert p.total_balls() == 0
    assert p.snapshot_loads() == [0, 0, 0]


def test_batched_max_load_never_decreases():
    rng = PyRandomSource(11)
    p = BatchedTwoChoiceSetting(16, batch_size=7)
    last = 0
    for _ in range(40):
        p.step(rng)
        assert p.max_load() >= last
        last = p.max_load()


def test_batched_validation():
    with pytest.raises(InvalidConfiguration):
        BatchedTwoChoiceSetting(0, 4)
    with pytest.raises(InvalidConfiguration):
        BatchedTwoChoiceSetting(4, -1)


def test_batched_zero_batch_places_nothing(scripted):
    p = BatchedTwoChoiceSetting(3, batch_size=0)
    p.step(scripted())
    assert p.total_balls() == 0
    assert p.gap() == 0
