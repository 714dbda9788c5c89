"""
Normal distribution helpers.

The error function uses the Abramowitz & Stegun 7.1.26 rational
approximation (absolute error below 1.5e-7), which is plenty for
bracket probabilities reported in whole percent.
"""

import math

# Abramowitz & Stegun 7.1.26 coefficients
A1 = 0.254829592
A2 = -0.284496736
A3 = 1.421413741
A4 = -1.453152027
A5 = 1.061405429
P = 0.3275911


def erf(x: float) -> float:
    """Error function approximation."""
    sign = 1.0 if x >= 0 else -1.0
    x = abs(x)

    t = 1.0 / (1.0 + P * x)
    y = 1.0 - (((((A5 * t + A4) * t) + A3) * t + A2) * t + A1) * t * math.exp(-x * x)

    return sign * y


def normal_cdf(x: float, mean: float = 0.0, std_dev: float = 1.0) -> float:
    """
    Calculate the cumulative distribution function of a normal distribution.

    Args:
        x: The value to evaluate (may be +/-inf for open bracket ends)
        mean: Distribution mean
        std_dev: Distribution standard deviation

    Returns:
        Probability that a random variable is less than or equal to x
    """
    if math.isinf(x):
        return 1.0 if x > 0 else 0.0

    if std_dev <= 0:
        # Degenerate case: all probability mass at mean
        return 1.0 if x >= mean else 0.0

    z = (x - mean) / std_dev
    return 0.5 * (1.0 + erf(z / math.sqrt(2.0)))
