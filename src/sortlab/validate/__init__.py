"""
Validation utilities public API.

Re-exports:
    - Oracle:
        ORACLE_NAME
        oracle_sort
        equals_oracle

    - Property checks:
        is_ordered
        first_order_violation_index
        first_difference_index
        is_permutation
        permutation_counter_diff

    - Differential harness:
        Strategy
        TrialResult
        VerificationMismatch
        VerificationReport
        resolve_strategies
        run_verification
"""

from .harness import (
    Strategy,
    TrialResult,
    VerificationMismatch,
    VerificationReport,
    resolve_strategies,
    run_verification,
)
from .oracle import ORACLE_NAME, equals_oracle, oracle_sort
from .properties import (
    first_difference_index,
    first_order_violation_index,
    is_ordered,
    is_permutation,
    permutation_counter_diff,
)

__all__ = [
    "ORACLE_NAME",
    "oracle_sort",
    "equals_oracle",
    "is_ordered",
    "first_order_violation_index",
    "first_difference_index",
    "is_permutation",
    "permutation_counter_diff",
    "Strategy",
    "TrialResult",
    "VerificationMismatch",
    "VerificationReport",
    "resolve_strategies",
    "run_verification",
]
