"""
Sweep parameters for the balanced-allocations experiments.

Full mode reproduces the published tables; quick mode is a small dev /
smoke-test run of the same pipeline.
"""

# Trials per sweep point
NUM_TRIALS = 100
NUM_TRIALS_QUICK = 10

# Randomness
DEFAULT_SEED = 42

# b-Batched setting
BATCHED_NUM_BINS = 10_000
BATCHED_NUM_BINS_QUICK = 100
BATCH_SIZES = [
    5,
    10,
    50,
    100,
    500,
    1_000,
    5_000,
    10_000,
    50_000,
    100_000,
    500_000,
]
BATCH_SIZES_QUICK = [5, 10, 50, 100, 500]

# Rounds per trial are factor * n / b, with a longer horizon once a single
# batch covers all bins.
ROUNDS_FACTOR_SMALL_BATCH = 50
ROUNDS_FACTOR_LARGE_BATCH = 1_000

# Noisy / adversarial Two-Choice (m = multiplier * n balls)
NOISE_NUM_BINS = [10_000, 50_000, 100_000]
NOISE_NUM_BINS_QUICK = [100]
NOISE_BALLS_MULTIPLIER = 1_000
NOISE_BALLS_MULTIPLIER_QUICK = 10
NOISE_PARAM_VALUES = list(range(1, 21))  # 1 → 20
NOISE_PARAM_VALUES_QUICK = [1, 2, 4, 8]

# Experiments run by --experiment all, in order.
NOISE_EXPERIMENTS = ["sigma_noisy", "g_bounded", "g_myopic"]
EXPERIMENTS = ["batched"] + NOISE_EXPERIMENTS
