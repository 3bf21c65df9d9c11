"""All share index calculations"""

from collections.abc import Iterable


def calculate_geometric_mean(values: Iterable[float]) -> tuple[float, int]:
    """
    Calculate the geometric mean of the strictly positive values

    GM = (v1 * v2 * ... * vn) ** (1 / n)

    Non-positive values are left out of both the product and the count.
    The product is not rescaled, so very large or very small inputs can
    overflow to inf or underflow to 0.

    Returns:
        Tuple of (geometric mean or 0.0 when nothing participates, participant count)
    """
    product = 1.0
    count = 0

    for value in values:
        if value > 0:
            product *= value
            count += 1

    if count == 0:
        return 0.0, 0

    return product ** (1.0 / count), count
