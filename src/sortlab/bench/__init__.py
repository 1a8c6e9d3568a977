"""
Runner and timing for verification sweeps.

    python -m sortlab.bench.runner [configs/verify_default.yaml]
"""
