"""Bezier evaluation and extrema, compiled with numba."""

# allow mathematical names, which would be invalid otherwise
# ruff: noqa: N803
from __future__ import annotations

import math
import os
from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar

import numba
from numba import njit
from numpy import nan

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")

# for easier access
f64 = numba.types.float64
Tuple = numba.types.Tuple

if os.environ.get("COVERAGE_DEBUG", "0") == "1":

    def njit(  # pylint: disable=function-redefined
        *args: Any, **kwargs: Any
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """Dummy decorator if numba is deactivated."""
        del args, kwargs  # as it is just a debug tool, args and kwargs are not used

        def decorator(func: Callable[P, R]) -> Callable[P, R]:
            return func

        return decorator


@njit(f64(f64, f64, f64))
def lerp(t: float, P0: float, P1: float) -> float:
    """Evaluate the straight segment from P0 to P1 at t."""
    return (1 - t) * P0 + t * P1


@njit(f64(f64, f64, f64, f64))
def quadratic_bezier(t: float, P0: float, P1: float, P2: float) -> float:
    """Evaluate the quadratic Bezier curve at t."""
    return (1 - t) * (1 - t) * P0 + 2 * (1 - t) * t * P1 + t * t * P2


@njit(f64(f64, f64, f64, f64, f64))
def cubic_bezier(t: float, P0: float, P1: float, P2: float, P3: float) -> float:
    """Evaluate the cubic Bezier curve at t."""
    return (
        (1 - t) * (1 - t) * (1 - t) * P0
        + 3 * (1 - t) * (1 - t) * t * P1
        + 3 * (1 - t) * t * t * P2
        + t * t * t * P3
    )


@njit(f64(f64, f64, f64))
def solve_for_extreme(P0: float, P1: float, P2: float) -> float:
    """Solve for the extreme point of a quadratic Bezier curve.

    1. derivative: 2(1-t)(P1-P0) + 2t(P2-P1) = 0
    => t = (P0-P1) / (P0 - 2P1 + P2)
    """
    denominator = P0 - 2 * P1 + P2
    if denominator == 0:
        return nan
    return (P0 - P1) / denominator


@njit(Tuple([f64, f64])(f64, f64, f64))
def quadratic_extrema(P0: float, P1: float, P2: float) -> tuple[float, float]:
    """Get the minimum and maximum of a quadratic Bezier curve along one axis.

    https://www.desmos.com/calculator/fsgcq11iqf
    """
    lower = min(P0, P2)
    upper = max(P0, P2)

    t = solve_for_extreme(P0, P1, P2)
    # if t is not in the range [0, 1] the end points are the extrema
    if 0 <= t <= 1:
        value = quadratic_bezier(t, P0, P1, P2)
        lower = min(lower, value)
        upper = max(upper, value)

    return lower, upper


@njit(Tuple([f64, f64, f64])(f64, f64, f64, f64))
def derivative_coefficients(
    P0: float, P1: float, P2: float, P3: float
) -> tuple[float, float, float]:
    """Get the coefficients of the derivative of the cubic Bezier curve.

    1. derivative: -3(1-t)^2P0 + 3(1-t)^2P1 - 6t(1-t)P1 + 6t(1-t)P2 - 3t^2P2 + 3t^2P3
    to the form: at^2 + bt + c
    gives the coefficients: a, b, c
    """
    return (
        -3 * P0 + 9 * P1 - 9 * P2 + 3 * P3,
        6 * P0 - 12 * P1 + 6 * P2,
        -3 * P0 + 3 * P1,
    )


@njit(Tuple([f64, f64])(f64, f64, f64))
def solve_quadratic_from_coeffs(a: float, b: float, c: float) -> tuple[float, float]:
    """Solve a quadratic equation from the coefficients.

    Returns:
        A tuple with the two solutions of the quadratic equation.
        NaN where a solution is missing or non-real.
    """
    # Solve the quadratic equation ax^2 + bx + c = 0
    # -b +- sqrt(b^2 - 4ac) / 2a
    if a == 0:
        if b == 0:
            return (nan, nan)  # No solution if both `a` and `b` are zero
        # single solution
        return (-c / b, nan)

    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        # No solutions
        return (nan, nan)

    sqrt_discriminant = math.sqrt(discriminant)
    t1 = (-b + sqrt_discriminant) / (2 * a)
    t2 = (-b - sqrt_discriminant) / (2 * a)
    # two solutions
    return (t1, t2)


@njit(Tuple([f64, f64])(f64, f64, f64, f64))
def cubic_extrema(P0: float, P1: float, P2: float, P3: float) -> tuple[float, float]:
    """Get the minimum and maximum of a cubic Bezier curve along one axis.

    https://www.desmos.com/calculator/ifyeddi2eh
    """
    lower = min(P0, P3)
    upper = max(P0, P3)

    # critical points are the roots of the derivative at^2 + bt + c
    a, b, c = derivative_coefficients(P0, P1, P2, P3)
    t1, t2 = solve_quadratic_from_coeffs(a, b, c)

    for t in (t1, t2):
        if not 0 <= t <= 1:
            continue

        value = cubic_bezier(t, P0, P1, P2, P3)
        lower = min(lower, value)
        upper = max(upper, value)

    return lower, upper
