"""
sunmoon Pegasus Root Finder

Finds a root of a continuous function within a bracketing interval using
the Pegasus method, a variant of regula falsi that rescales the retained
end point to avoid the one-sided convergence of the plain method.
"""

from sunmoon.exceptions import NoRootFoundError
from sunmoon.logging_config import get_logger
from sunmoon.types import ScalarFunction

logger = get_logger(__name__)

# Safety cap; well-posed calls converge in far fewer steps
MAX_ITERATIONS = 30


def calculate(lower: float, upper: float, accuracy: float, f: ScalarFunction) -> float:
    """Find a root of ``f`` between ``lower`` and ``upper``.

    Args:
        lower: Lower bound of the interval
        upper: Upper bound of the interval
        accuracy: Desired accuracy of the root, in units of x
        f: Function to find the root of

    Returns:
        X of the root

    Raises:
        NoRootFoundError: If ``f`` does not change its sign between the
            bounds, or if the iteration cap was reached
    """
    x1 = lower
    x2 = upper
    f1 = f(x1)
    f2 = f(x2)

    if f1 * f2 >= 0.0:
        raise NoRootFoundError("No root within the interval", lower=lower, upper=upper)

    for iteration in range(MAX_ITERATIONS):
        x3 = x2 - f2 / ((f2 - f1) / (x2 - x1))
        f3 = f(x3)

        if f3 * f2 <= 0.0:
            x1 = x2
            f1 = f2
        else:
            f1 = f1 * f2 / (f2 + f3)
        x2 = x3
        f2 = f3

        if abs(x2 - x1) <= accuracy:
            logger.debug("Root found after %d iterations", iteration + 1)
            return x1 if abs(f1) < abs(f2) else x2

    raise NoRootFoundError("Maximum number of iterations exceeded", lower=lower, upper=upper)
