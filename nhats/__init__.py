"""Brute-force verifier for the n-hats puzzle."""

from .verifier import (
    SENTINEL,
    advance,
    check_row,
    find_failure,
    format_row,
    guesses_for,
    iter_assignments,
    positive_mod,
    prune,
    verify,
)

from .strategies import (
    SAMPLES,
    STRATEGIES,
    alternate_strategy_3,
    build_strategy,
    constant_strategy,
    generate_strategy,
    paper_strategy_2,
    paper_strategy_3,
)

__all__ = [
    'SENTINEL',
    'advance',
    'check_row',
    'find_failure',
    'format_row',
    'guesses_for',
    'iter_assignments',
    'positive_mod',
    'prune',
    'verify',
    'SAMPLES',
    'STRATEGIES',
    'alternate_strategy_3',
    'build_strategy',
    'constant_strategy',
    'generate_strategy',
    'paper_strategy_2',
    'paper_strategy_3',
]
