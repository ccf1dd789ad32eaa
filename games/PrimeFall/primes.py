"""
Primality check used to score intercepted numbers.
"""

import math


def is_prime(n: int) -> bool:
    """Check whether n is prime by trial division up to floor(sqrt(n)).

    1 has no candidate divisors and is reported as prime. The game relies
    on this: at score 0 every enemy carries the number 1, and catching it
    is how a fresh game earns its first points.

    Args:
        n: Positive integer

    Returns:
        False if any integer in [2, sqrt(n)] divides n, True otherwise

    Examples:
        >>> is_prime(7)
        True
        >>> is_prime(9)
        False
        >>> is_prime(1)
        True
    """
    for divisor in range(2, math.isqrt(n) + 1):
        if n % divisor == 0:
            return False
    return True
