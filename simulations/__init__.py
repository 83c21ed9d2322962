"""
Monte Carlo experiments for the balanced-allocations processes.

Run sweeps via:
    python -m simulations.sweep --experiment batched|sigma_noisy|g_bounded|g_myopic|all [--mode quick]
"""
