"""
Exceptions raised by the quadrature engine.

All of them are ValueErrors: they describe an unusable input (a bad
resolution, a bound that is not a finite number), never an internal
fault.  Exceptions raised by user callbacks are not wrapped.
"""


class QuadratureError(ValueError):
    """Base class for invalid quadrature inputs."""


class InvalidResolution(QuadratureError):
    """A sample count is not a positive integer."""

    def __init__(self, n, name=None):
        self.n = n
        self.name = name
        where = f" for dimension '{name}'" if name is not None else ""
        super().__init__(f"Resolution must be a positive integer{where}, got {n!r}.")


class NonFiniteBound(QuadratureError):
    """A bound evaluated to NaN or ±inf."""

    def __init__(self, name, bounds):
        self.name = name
        self.bounds = bounds
        lo, hi = bounds
        super().__init__(
            f"Non-finite bounds for dimension '{name}': [{lo!r}, {hi!r}]."
        )
