"""
Containers for the nested midpoint rule.

    Sample         one (midpoint, width) cell of an interval
    Interval       (low, high, n) triple with its derived cell width
    DimensionSpec  bound callbacks + variable name + resolution for one axis
    Bindings       read-only view of the variables bound so far

Design note:
    Bound and resolution callbacks receive a `Bindings` view that only
    holds the variables of strictly-outer dimensions.  A callback that
    reads an inner (not yet bound) name gets a KeyError, so illegal
    dependencies fail on the first evaluation rather than silently
    reading a stale value.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, NamedTuple, Optional, Union

# Read-only view over the current name -> midpoint assignments
Bindings = Mapping[str, float]

BoundFn = Callable[[Bindings], float]
CountFn = Callable[[Bindings], int]


class Sample(NamedTuple):
    midpoint: float     # cell centre
    width: float        # signed cell width (negative for reversed bounds)


class Interval(NamedTuple):
    low: float
    high: float
    n: int

    @property
    def width(self):
        return (self.high - self.low) / self.n


@dataclass(frozen=True)
class DimensionSpec:
    """
    One axis of an iterated integral.

    `lower`, `upper` and a callable `n` are evaluated against the
    bindings of the outer dimensions only.  `n=None` selects the
    caller's default resolution.
    """
    lower: BoundFn
    upper: BoundFn
    name: str
    n: Union[None, int, CountFn] = None

    def bounds(self, bindings: Bindings):
        return self.lower(bindings), self.upper(bindings)

    def resolution(self, bindings: Bindings, default: int):
        if self.n is None:
            return default
        if callable(self.n):
            return self.n(bindings)
        return self.n


def _as_callback(value):
    if callable(value):
        return value
    return lambda bindings: value


def make_dimension(lower, upper, name: str,
                   n: Optional[Union[int, CountFn]] = None) -> DimensionSpec:
    """Construct a DimensionSpec; plain numbers are wrapped as constant callbacks."""
    if not isinstance(name, str) or not name.isidentifier():
        raise ValueError(f"Dimension name must be an identifier, got {name!r}.")
    return DimensionSpec(
        lower=_as_callback(lower),
        upper=_as_callback(upper),
        name=name,
        n=n,
    )


def readonly(env: dict) -> Bindings:
    """Read-only live view of a bindings dict."""
    return MappingProxyType(env)
