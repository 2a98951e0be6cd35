# core/utils.py
EPSILON = 1e-5


def equal(a: float, b: float) -> bool:
    """
    Floating-point comparison tolerating rounding errors from chained
    transformations: values closer than EPSILON are equal.
    """
    return abs(a - b) < EPSILON


def clamp(value: float, low: float, high: float) -> float:
    return min(max(low, value), high)
