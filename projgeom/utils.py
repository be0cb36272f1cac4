# coding: utf-8

def abs_int(a):
    """Absolute value of an integral number; identity for non-negative input."""
    return -a if a < 0 else a


def gcd(m, n):
    """
    Greatest common divisor, always non-negative.

    Works for any integral type supporting % and comparison with 0,
    so it is not restricted to python ints (unlike math.gcd).
    gcd(0, n) = |n|, in particular gcd(0, 0) = 0.
    """
    if m == 0:
        return abs_int(n)
    while n != 0:
        m, n = n, m % n
    return abs_int(m)


def lcm(m, n):
    """Least common multiple, non-negative; 0 if any argument is 0."""
    if m == 0 or n == 0:
        return m * n  # zero of the operands type
    return (abs_int(m) // gcd(m, n)) * abs_int(n)


def get_lcm(iterable):
    """Least common multiple of integer sequence."""
    result = 1
    for x in iterable:
        result = lcm(result, x)
        if result == 0:
            break
    return result
