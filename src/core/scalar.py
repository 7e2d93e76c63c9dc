# core/scalar.py
"""
Scalar helpers used by the shading and intersection code.
"""
import math


def sqrt(val: float) -> float:
    """
    Square root by Newton-Raphson iteration.

    Iterates from above the root so the sequence decreases monotonically and
    stops once it no longer shrinks. Negative input yields NaN, matching
    math.sqrt's domain without raising.
    """
    if val != val or val < 0:
        return math.nan
    if val == 0 or val == math.inf:
        return val
    curr = val if val > 1.0 else 1.0
    while True:
        nxt = 0.5 * (curr + val / curr)
        if nxt >= curr:
            return curr
        curr = nxt


def floor(val: float) -> int:
    """Largest integer not greater than val."""
    return math.floor(val)


def ipow(base: float, iexp: int) -> float:
    """
    Raises base to a non-negative integer power by repeated multiplication.
    Exponents below 1 give 1.0.
    """
    val = 1.0
    while iexp > 0:
        val *= base
        iexp -= 1
    return val
