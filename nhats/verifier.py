"""
n-hats Strategy Verifier
========================
Checks a strategy against every possible hat assignment.

The size-7 variant of the puzzle:

- You and 6 others are wearing one of 7 colored hats.
- You can see everyone else's hat color, but not your own.
- Everyone guesses their own hat color at the same time.
- Everyone wins if at least one person guesses correctly.

A hat color is an int in 0..n-1. A guess is a function that takes the
assignment with the caller's own position blanked out and returns a color.
A strategy is a list of guesses, one per participant.
"""

from typing import Callable, Iterator, List, Optional, Sequence, Tuple

Guess = Callable[[List[int]], int]
Strategy = Sequence[Guess]
Failure = Tuple[List[int], List[int]]

# Written over a participant's own hat before their guess is called
SENTINEL = -1


def positive_mod(x: int, n: int) -> int:
    """Modulus normalized into [0, n)."""
    return ((x % n) + n) % n


def prune(assignment: Sequence[int], i: int, n: int) -> List[int]:
    """Copy of the assignment with position i cleared, so a guess can't peek at its own hat."""
    view = list(assignment)
    view[i] = SENTINEL
    return view


def check_precondition(strategy: Strategy, n: int) -> None:
    """Raise ValueError if (strategy, n) is outside what the verifier accepts."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"n must be an int, got {type(n).__name__}")
    if n <= 0:
        raise ValueError(f"n must be at least 1, got {n}")
    if len(strategy) != n:
        raise ValueError(f"Strategy has {len(strategy)} guesses, expected {n}")


def check_row(assignment: Sequence[int], strategy: Strategy, n: int) -> bool:
    """True if at least one participant guesses their own color."""
    for i in range(n):
        if assignment[i] == strategy[i](prune(assignment, i, n)):
            return True
    return False


def guesses_for(assignment: Sequence[int], strategy: Strategy, n: int) -> List[int]:
    """Every participant's guess, each made on their own pruned view."""
    return [strategy[i](prune(assignment, i, n)) for i in range(n)]


def advance(assignment: List[int], n: int) -> bool:
    """
    Step the assignment to the next one in place, odometer style.

    The last position turns fastest and carries into the one before it.
    Returns False once the carry runs off position 0, at which point the
    assignment has wrapped back to all zeros.
    """
    for i in range(n - 1, -1, -1):
        assignment[i] = (assignment[i] + 1) % n
        if assignment[i] > 0:
            return True
    return False


def iter_assignments(n: int) -> Iterator[List[int]]:
    """Yield a copy of each of the n**n assignments, starting at all zeros."""
    current = [0] * n
    # do-while: the all-zero assignment comes out before the first advance
    more = True
    while more:
        yield list(current)
        more = advance(current, n)


def find_failure(strategy: Strategy, n: int) -> Optional[Failure]:
    """
    Find the first assignment where nobody guesses correctly.

    Returns:
        (assignment, guesses) for the first losing assignment in odometer
        order, or None if the strategy always wins.
    """
    check_precondition(strategy, n)

    for current in iter_assignments(n):
        if not check_row(current, strategy, n):
            return current, guesses_for(current, strategy, n)
    return None


def format_row(assignment: Sequence[int], guesses: Sequence[int]) -> str:
    """Render a losing row as 'colors | guesses'."""
    actual = ' '.join(str(c) for c in assignment)
    guessed = ' '.join(str(g) for g in guesses)
    return f"{actual} | {guessed}"


def verify(strategy: Strategy, n: int, verbose: bool = True) -> bool:
    """
    Check a strategy against all n**n assignments.

    Args:
        strategy: one guess function per participant
        n: number of participants and of colors
        verbose: print the first losing row, if there is one

    Returns:
        True if some participant guesses correctly under every assignment.
    """
    failure = find_failure(strategy, n)
    if failure is None:
        return True

    if verbose:
        print(format_row(*failure))
    return False
