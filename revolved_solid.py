#!/usr/bin/env python
"""
Volume of the revolved solid

    t ∈ [0, π],  r ∈ [0, 2 sin t],  z ∈ [0, √(4 - r²)],  integrand r

by nested midpoint quadrature, compared against the closed form.

Usage:
    python revolved_solid.py
    python revolved_solid.py --n 200
"""

import argparse
import time

from nestquad import (
    DEFAULT_N, integrate_nested,
    revolved_solid_dimensions, revolved_solid_integrand, revolved_solid_volume,
)


def run(n):
    dims = revolved_solid_dimensions(n)

    t0 = time.perf_counter()
    result = integrate_nested(revolved_solid_integrand, dims)
    dt = time.perf_counter() - t0

    exact = revolved_solid_volume()
    print(f"n = {n}  ({n ** 3:,} integrand evaluations, {dt:.2f}s)")
    print(f"  nested midpoint: {result:.10f}")
    print(f"  closed form:     {exact:.10f}")
    print(f"  relative error:  {abs(result - exact) / exact:.2e}")
    return result


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Integrate the revolved-solid example")
    parser.add_argument("--n", type=int, default=DEFAULT_N,
                        help=f"Resolution per dimension (default {DEFAULT_N})")
    args = parser.parse_args()

    run(args.n)
