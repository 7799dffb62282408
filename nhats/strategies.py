"""
Sample strategies for the n-hats puzzle.

The hand-written ones were worked out on paper for n=2 and n=3.
generate_strategy scales the n=3 strategy up to any n:

    g_0 = v_1 + v_2 + ... + v_(n-1)
    g_i = v_0 - (v_1 + ... + v_(n-1), skipping v_i) + i

all mod n. Let S = v_1 + ... + v_(n-1) over the true colors. Participant 0
is right exactly when v_0 = S, and participant i >= 1 exactly when
S - v_0 = i. S - v_0 is always some residue in 0..n-1, so one of them wins.
"""

from typing import Callable, Dict, List, Optional, Tuple

from nhats.verifier import Guess, positive_mod


def generate_strategy(n: int) -> List[Guess]:
    """Build the closed-form strategy for n participants."""
    if n <= 0:
        raise ValueError(f"n must be at least 1, got {n}")

    def first(v: List[int]) -> int:
        return positive_mod(sum(v[j] for j in range(1, n)), n)

    # bind i per guess
    def make_guess(i: int) -> Guess:
        def guess(v: List[int]) -> int:
            res = v[0]
            for j in range(1, n):
                if j == i:
                    continue
                res -= v[j]
            res += i
            return positive_mod(res, n)
        return guess

    return [first] + [make_guess(i) for i in range(1, n)]


def paper_strategy_2() -> List[Guess]:
    """n=2: the first copies the second, the second guesses the opposite of the first."""
    return [
        lambda v: v[1],
        lambda v: (v[0] + 1) % 2,
    ]


def paper_strategy_3() -> List[Guess]:
    return [
        lambda v: positive_mod(v[2] - v[1] + 1, 3),  # g_A = C - B + 1
        lambda v: positive_mod(v[2] - v[0] + 2, 3),  # g_B = C - A + 2
        lambda v: positive_mod(v[0] + v[1], 3),      # g_C = A + B
    ]


def alternate_strategy_3() -> List[Guess]:
    """paper_strategy_3 with the symbols moved around."""
    return [
        lambda v: positive_mod(v[1] + v[2], 3),      # g_A = B + C
        lambda v: positive_mod(v[0] - v[2] + 1, 3),  # g_B = A - C + 1
        lambda v: positive_mod(v[0] - v[1] + 2, 3),  # g_C = A - B + 2
    ]


def constant_strategy(n: int, color: int = 0) -> List[Guess]:
    """Everyone guesses the same color. Loses for any n >= 2."""
    if n <= 0:
        raise ValueError(f"n must be at least 1, got {n}")
    return [lambda v: color for _ in range(n)]


# name -> (factory taking n, sizes it supports; None means any n >= 1)
STRATEGIES: Dict[str, Tuple[Callable[[int], List[Guess]], Optional[Tuple[int, ...]]]] = {
    'generated': (generate_strategy, None),
    'paper-2': (lambda n: paper_strategy_2(), (2,)),
    'paper-3': (lambda n: paper_strategy_3(), (3,)),
    'alternate-3': (lambda n: alternate_strategy_3(), (3,)),
    'constant': (constant_strategy, None),
}


def build_strategy(name: str, n: int) -> List[Guess]:
    """Look up a strategy by name and build it for n participants."""
    if name not in STRATEGIES:
        raise ValueError(f"Unknown strategy {name!r}, choose from {', '.join(sorted(STRATEGIES))}")

    factory, sizes = STRATEGIES[name]
    if sizes is not None and n not in sizes:
        supported = ', '.join(str(s) for s in sizes)
        raise ValueError(f"Strategy {name!r} only works for n={supported}, got n={n}")
    if n <= 0:
        raise ValueError(f"n must be at least 1, got {n}")
    return factory(n)


# The fixed set of (strategy, n) pairs checked when run with no arguments
SAMPLES: List[Tuple[str, int]] = [
    ('paper-2', 2),
    ('paper-3', 3),
    ('alternate-3', 3),
    ('generated', 3),
    ('generated', 4),
    ('generated', 7),
]
