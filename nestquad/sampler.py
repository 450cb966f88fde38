"""
Midpoint sampling of a single interval.

Two flavours:

  * `IntervalSampler` — a lazy, single-pass iterator over the
    (midpoint, width) cells of [low, high].  Used by the nested
    driver, where inner bounds change with every outer sample.
  * `get_midpoints` / `map_to_interval` / `midpoint_quad` — the same
    partition as JAX arrays, for integrands that can be evaluated on a
    whole grid at once.  Unit nodes are computed once via NumPy and
    cached, mirroring how Gauss-Legendre nodes are usually handled.

Width is (high - low) / n and may be negative; a reversed interval
simply flips the sign of every contribution.
"""

import operator
from functools import lru_cache

import numpy as np
import jax.numpy as jnp

from .errors import InvalidResolution
from .types import Sample


def check_resolution(n, name=None) -> int:
    """Return `n` as a Python int, or raise InvalidResolution."""
    if isinstance(n, (bool, np.bool_)):
        raise InvalidResolution(n, name)
    try:
        n = operator.index(n)
    except TypeError:
        raise InvalidResolution(n, name) from None
    if n < 1:
        raise InvalidResolution(n, name)
    return n


class IntervalSampler:
    """
    Iterate the n equal-width cells of [low, high], cell 0 first.

    Yields `Sample(midpoint, width)` with
        midpoint_i = low + (i + 0.5) * width,   width = (high - low) / n.

    Single pass: once exhausted, build a new sampler.
    """

    __slots__ = ("low", "width", "n", "_i")

    def __init__(self, low, high, n):
        self.n = check_resolution(n)
        self.low = float(low)
        self.width = (float(high) - self.low) / self.n
        self._i = 0

    def __iter__(self):
        return self

    def __next__(self) -> Sample:
        if self._i >= self.n:
            raise StopIteration
        x_mid = self.low + (self._i + 0.5) * self.width
        self._i += 1
        return Sample(x_mid, self.width)

    def __len__(self):
        return self.n - self._i

    def __repr__(self):
        return (f"IntervalSampler(low={self.low!r}, width={self.width!r}, "
                f"n={self.n}, consumed={self._i})")


def sample_interval(low, high, n) -> IntervalSampler:
    """Fresh sampler over the n midpoint cells of [low, high]."""
    return IntervalSampler(low, high, n)


# ------------------------------------------------------------------ #
#  Vectorized grid                                                    #
# ------------------------------------------------------------------ #

@lru_cache(maxsize=32)
def _midpoints_numpy(n: int):
    """Cache unit-interval midpoints as plain NumPy (never traced)."""
    return (np.arange(n, dtype=np.float64) + 0.5) / n


def get_midpoints(n: int = 100):
    """Midpoints (i + 0.5)/n of [0, 1] as a fresh float64 JAX array."""
    n = check_resolution(n)
    return jnp.array(_midpoints_numpy(n), dtype=jnp.float64)


def map_to_interval(nodes, a, b):
    """Map unit midpoints onto [a, b]. Returns (mapped_nodes, width)."""
    span = b - a
    width = span / nodes.shape[0]
    return a + span * nodes, width


def midpoint_quad(f_vals, width):
    """
    Contract pre-evaluated integrand values with the cell width.

    Parameters
    ----------
    f_vals : array, shape (n,) or (n, ...)
        Integrand evaluated at the midpoints.
    width : float
        Cell width, (b - a) / n.

    Returns
    -------
    Scalar (or array if f_vals has trailing dims).
    """
    return width * jnp.sum(f_vals, axis=0)
