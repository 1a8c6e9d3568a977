"""
Random test-vector generators for the verification harness.

Primary generators:
- generate_random_int(lo, hi, rng=None):
    One integer drawn uniformly from the inclusive range [lo, hi].
- generate_random_sequence(use_unsigned_range=False, max_length=1000, rng=None):
    A list whose length is uniform in [1, max_length] and whose elements are
    uniform over the signed short domain [-32768, 32767], or the unsigned
    short domain [0, 65535] when `use_unsigned_range` is true.

Shaped datasets (make_dataset):
- dist == "random":
    Uniform over an inclusive range (default: the signed short domain).
- dist == "nearly_sorted":
    Start from [0, 1, ..., n-1] then perform ceil(swap_frac * n) random swaps.
- dist == "few_uniques":
    Choose up to k distinct values from an inclusive range, then fill the
    list by sampling those values uniformly.
- dist == "reversed":
    Deterministic [n-1, n-2, ..., 0].

Randomness:
- When `rng` is None, a fresh numpy Generator seeded from OS entropy is
  created for that single call, so repeated runs see uncorrelated data.
- Pass an explicit Generator (see make_rng) for reproducible sequences.
- All generators return plain Python `list[int]`; algorithms stay
  NumPy-agnostic.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import numpy as np

SHORT_MIN = -32768
SHORT_MAX = 32767
USHORT_MIN = 0
USHORT_MAX = 65535
DEFAULT_MAX_LENGTH = 1000

SUPPORTED_DISTS = {
    "random",
    "nearly_sorted",
    "few_uniques",
    "reversed",
}

__all__ = [
    "SHORT_MIN",
    "SHORT_MAX",
    "USHORT_MIN",
    "USHORT_MAX",
    "DEFAULT_MAX_LENGTH",
    "SUPPORTED_DISTS",
    "make_rng",
    "generate_random_int",
    "generate_random_sequence",
    "make_dataset",
]


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Return a numpy Generator; `seed=None` draws its seed from OS entropy."""
    return np.random.default_rng(seed)


def generate_random_int(lo: int, hi: int, rng: Optional[np.random.Generator] = None) -> int:
    """
    Return an integer drawn uniformly from the closed range [lo, hi].

    Raises
    ------
    ValueError
        If the bounds are not integers or lo > hi.
    """
    if not _is_int_like(lo) or not _is_int_like(hi):
        raise ValueError("generate_random_int bounds must be integers")
    if lo > hi:
        raise ValueError(f"generate_random_int invalid range: min > max ({lo} > {hi})")
    if rng is None:
        rng = make_rng()
    # Generator.integers is half-open by default; endpoint=True closes it.
    return int(rng.integers(lo, hi, endpoint=True))


def generate_random_sequence(
    use_unsigned_range: bool = False,
    max_length: int = DEFAULT_MAX_LENGTH,
    rng: Optional[np.random.Generator] = None,
) -> List[int]:
    """
    Produce a random integer list for differential testing.

    Parameters
    ----------
    use_unsigned_range : bool
        Draw from [0, 65535] instead of [-32768, 32767].
    max_length : int
        Upper bound (inclusive) on the length; the length itself is uniform
        in [1, max_length].
    rng : numpy.random.Generator | None
        Source of randomness. None means fresh OS entropy for every draw.

    Returns
    -------
    list[int]
    """
    if not _is_int_like(max_length) or max_length < 1:
        raise ValueError(f"max_length must be an integer >= 1; got {max_length!r}")

    if use_unsigned_range:
        lo, hi = USHORT_MIN, USHORT_MAX
    else:
        lo, hi = SHORT_MIN, SHORT_MAX

    n = generate_random_int(1, int(max_length), rng)
    return [generate_random_int(lo, hi, rng) for _ in range(n)]


def make_dataset(n: int, spec: Dict[str, Any], rng: Optional[np.random.Generator] = None) -> List[int]:
    """
    Generate a shaped integer dataset according to `spec`.

    Parameters
    ----------
    n : int
        Number of elements to generate. Must be >= 0.
    spec : dict
        {"dist": <one of SUPPORTED_DISTS>, "params": {...}}

        Random:        {"range": [min_int, max_int]}   # optional, inclusive
        Nearly-sorted: {"swap_frac": 0.05}             # in [0.0, 1.0]
        Few-uniques:   {"k": 10, "range": [min, max]}  # range optional
        Reversed:      {}                              # params unused
    rng : numpy.random.Generator | None
        None means a fresh entropy-seeded Generator for this call.

    Raises
    ------
    ValueError
        If inputs are invalid or if the distribution is unsupported.
    """
    _validate_n(n)

    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist", None)
    if dist not in SUPPORTED_DISTS:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )

    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{dist}.params must be a dict")

    if dist == "reversed":
        return list(range(n - 1, -1, -1))

    if rng is None:
        rng = make_rng()

    if dist == "random":
        lo, hi = _parse_range(params, dist, default=(SHORT_MIN, SHORT_MAX))
        if n == 0:
            return []
        return rng.integers(lo, hi, size=n, endpoint=True, dtype=np.int64).tolist()

    if dist == "nearly_sorted":
        swap_frac = _parse_swap_frac(params)
        arr = list(range(n))
        num_swaps = int(np.ceil(swap_frac * n))
        if num_swaps <= 0:
            return arr
        idxs = rng.integers(0, n, size=2 * num_swaps)
        for k in range(num_swaps):
            i = int(idxs[2 * k])
            j = int(idxs[2 * k + 1])
            arr[i], arr[j] = arr[j], arr[i]
        return arr

    # few_uniques
    k = _parse_k(params)
    lo, hi = _parse_range(params, dist, default=(SHORT_MIN, SHORT_MAX))
    if n == 0:
        return []
    actual_k = int(min(k, n, hi - lo + 1))
    values = rng.choice(hi - lo + 1, size=actual_k, replace=False) + lo
    picks = rng.integers(0, actual_k, size=n)
    return [int(values[int(t)]) for t in picks]


# ------------------------- helpers ------------------------- #


def _validate_n(n: int) -> None:
    if not _is_int_like(n):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")


def _parse_range(params: Dict[str, Any], dist: str, default: Tuple[int, int]) -> Tuple[int, int]:
    """
    Parse an optional inclusive integer range from params["range"].
    If not present, return `default`.
    """
    if "range" not in params:
        return default
    spec = params["range"]
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError(f"{dist}.params.range must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ValueError(f"{dist}.params.range values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"{dist}.params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _parse_swap_frac(params: Dict[str, Any]) -> float:
    val = params.get("swap_frac", 0.05)
    try:
        x = float(val)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {val!r}"
        ) from e
    if not (0.0 <= x <= 1.0):
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {x}"
        )
    return x


def _parse_k(params: Dict[str, Any]) -> int:
    if "k" not in params:
        raise ValueError("few_uniques.params.k must be provided (int >= 1)")
    k = params["k"]
    if not _is_int_like(k) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    return int(k)


def _is_int_like(x: Any) -> bool:
    # Accept Python ints and NumPy integer types, but not bools
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)
