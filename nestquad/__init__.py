"""
nestquad — nested midpoint-rule quadrature over dependent-bound regions.

Iterated integrals whose inner bounds depend on outer variables,
evaluated with one equal-width midpoint sampler per dimension.
A vectorized JAX path covers rectangular regions.
"""

# Enable 64-bit precision globally (midpoints and widths are float64)
import jax
jax.config.update("jax_enable_x64", True)

# --- Types ---
from .types import (
    Sample, Interval, DimensionSpec, Bindings,
    make_dimension,
)

# --- Errors ---
from .errors import QuadratureError, InvalidResolution, NonFiniteBound

# --- Sampling ---
from .sampler import (
    IntervalSampler, sample_interval, check_resolution,
    get_midpoints, map_to_interval, midpoint_quad,
)

# --- Quadrature ---
from .quadrature import DEFAULT_N, integrate_nested, integrate_box

# --- Reference regions ---
from .regions import (
    revolved_solid_dimensions, revolved_solid_integrand, revolved_solid_volume,
    triangle_dimensions,
)
