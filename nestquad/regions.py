"""
Reference regions with known closed-form integrals.

Used by the example driver and as regression fixtures.
"""

import math

from .types import make_dimension


# ------------------------------------------------------------------ #
#  Revolved solid                                                     #
# ------------------------------------------------------------------ #

def revolved_solid_dimensions(n=None):
    """
    t ∈ [0, π],  r ∈ [0, 2 sin t],  z ∈ [0, √(4 - r²)].

    `n=None` leaves every axis on the default resolution.
    """
    return [
        make_dimension(0.0, math.pi, "t", n),
        make_dimension(0.0, lambda b: 2.0 * math.sin(b["t"]), "r", n),
        make_dimension(0.0, lambda b: math.sqrt(4.0 - b["r"] ** 2), "z", n),
    ]


def revolved_solid_integrand(bindings):
    """Jacobian r of the (t, r, z) coordinates."""
    return bindings["r"]


def revolved_solid_volume():
    """
    Closed form of the revolved-solid integral.

    ∫ r dz = r √(4 - r²);  ∫₀^{2 sin t} ... dr = (8/3)(1 - |cos t|³);
    ∫₀^π ... dt = (8/3)(π - 4/3).
    """
    return 8.0 / 3.0 * (math.pi - 4.0 / 3.0)


# ------------------------------------------------------------------ #
#  Triangle                                                           #
# ------------------------------------------------------------------ #

def triangle_dimensions(a, n=None):
    """0 ≤ x ≤ a,  0 ≤ y ≤ x.  Area a²/2."""
    return [
        make_dimension(0.0, a, "x", n),
        make_dimension(0.0, lambda b: b["x"], "y", n),
    ]
