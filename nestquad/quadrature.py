"""
Nested midpoint-rule quadrature.

`integrate_nested` approximates the iterated integral

    ∫_{a0}^{b0} ∫_{a1(x0)}^{b1(x0)} ... f(x0, ..., x_{k-1}) dx_{k-1} ... dx0

by one IntervalSampler per dimension.  Inner bounds are re-evaluated
for every outer midpoint, so the region may be any region whose
bounds depend on the outer variables (revolved solids, triangles,
balls in iterated coordinates ...).

Each leaf contributes  f(bindings) · Π widths  along its path; the
total work is Π n_d integrand calls.  No error estimate is formed,
accuracy is controlled by the per-dimension resolutions only.

`integrate_box` is the rectangular special case evaluated on a
tensorized JAX grid in a single integrand call.
"""

import math

import jax.numpy as jnp

from .errors import NonFiniteBound
from .sampler import IntervalSampler, check_resolution, get_midpoints, map_to_interval
from .types import readonly

# Default resolution per dimension
DEFAULT_N = 100


def _finite_bounds(lo, hi, name):
    lo, hi = float(lo), float(hi)
    if not (math.isfinite(lo) and math.isfinite(hi)):
        raise NonFiniteBound(name, (lo, hi))
    return lo, hi


def _check_dimensions(dimensions):
    dims = tuple(dimensions)
    if not dims:
        raise ValueError("dimensions must have at least 1 entry")
    seen = set()
    for spec in dims:
        if spec.name in seen:
            raise ValueError(f"Duplicate dimension name: {spec.name!r}.")
        seen.add(spec.name)
    return dims


def integrate_nested(integrand, dimensions, default_n: int = DEFAULT_N) -> float:
    """
    Iterated midpoint-rule integral over a region with dependent bounds.

    Parameters
    ----------
    integrand : callable
        f(bindings) -> float, where bindings maps every dimension name
        to its current midpoint.
    dimensions : sequence of DimensionSpec
        Outermost first.  Dimension d's callbacks see the names of
        dimensions 0..d-1 only.
    default_n : int
        Resolution for dimensions whose spec has n=None.

    Returns
    -------
    float

    Raises
    ------
    InvalidResolution
        A resolved sample count is not a positive integer.
    NonFiniteBound
        A bound callback returned NaN or ±inf.
    """
    dims = _check_dimensions(dimensions)
    default_n = check_resolution(default_n)
    last = len(dims) - 1

    env = {}
    bindings = readonly(env)
    total = 0.0

    def descend(d, carried):
        nonlocal total
        spec = dims[d]
        lo, hi = _finite_bounds(*spec.bounds(bindings), spec.name)
        n = check_resolution(spec.resolution(bindings, default_n), spec.name)

        for x_mid, dx in IntervalSampler(lo, hi, n):
            env[spec.name] = x_mid
            if d == last:
                total += integrand(bindings) * dx * carried
            else:
                descend(d + 1, carried * dx)

        # unbind before the caller evaluates its sibling's inner bounds
        del env[spec.name]

    descend(0, 1.0)
    return float(total)


def integrate_box(integrand, bounds, n=DEFAULT_N) -> float:
    """
    Midpoint rule over a rectangle [a0, b0] × ... × [a_{k-1}, b_{k-1}].

    The integrand is called once, as f(x0, ..., x_{k-1}), with one
    array per dimension shaped to broadcast against the others
    (x_d has shape (1, ..., n_d, ..., 1)).  Fully vectorized, so it
    is fast for integrands written in jnp.

    `n` is a single resolution or one per dimension.
    """
    bounds = tuple(bounds)
    k = len(bounds)
    if k == 0:
        raise ValueError("bounds must have at least 1 dimension")

    if isinstance(n, (list, tuple)):
        if len(n) != k:
            raise ValueError(f"Expected {k} resolutions, got {len(n)}.")
        ns = [check_resolution(n_d, str(d)) for d, n_d in enumerate(n)]
    else:
        ns = [check_resolution(n)] * k

    grids = []
    cell_volume = 1.0
    for d, ((a, b), n_d) in enumerate(zip(bounds, ns)):
        a, b = _finite_bounds(a, b, str(d))
        xs, width = map_to_interval(get_midpoints(n_d), a, b)
        shape = [1] * k
        shape[d] = n_d
        grids.append(xs.reshape(shape))
        cell_volume *= width

    f_vals = jnp.broadcast_to(integrand(*grids), tuple(ns))
    return float(cell_volume * jnp.sum(f_vals))
