"""
Segment / segment intersection via linear interpolation.

A point on AB is lerp(A, B, t) and a point on CD is lerp(C, D, u). Setting
them equal in x and y gives a 2x2 linear system in (t, u):

    AX + (BX - AX) * t = CX + (DX - CX) * u
    AY + (BY - AY) * t = CY + (DY - CY) * u

Eliminating u (resp. t) and expanding the products yields the closed forms
in parametric_coefficients(). The divider is zero when the segments are
parallel, or when one of them is degenerate. The segments themselves (not
just the lines through them) meet only when 0 <= t <= 1 and 0 <= u <= 1.

No epsilon is applied: the zero check and the range checks use exact
float comparisons, so near-parallel and near-endpoint configurations are
subject to rounding.
"""
import numpy as np

from intersect2d.geometry.primitives import Point


def lerp(a, b, t):
    """Linear interpolation, t is not clamped (t outside [0, 1] extrapolates)."""
    return a + (b - a) * t


def parametric_coefficients(AB, CD):
    """
    Returns (t, u, t_divider) for segments AB and CD.
    Division by zero gives +-inf / nan instead of raising.
    """
    A, B = AB[0], AB[1]
    C, D = CD[0], CD[1]
    AX, AY = A.x, A.y
    BX, BY = B.x, B.y
    CX, CY = C.x, C.y
    DX, DY = D.x, D.y

    t_numerator = (AY * DX - CY * DX - AY * CX + CY * CX
                   - AX * DY + CX * DY + AX * CY - CX * CY)
    t_divider = (BX * DY - AX * DY - BX * CY + AX * CY
                 - BY * DX + AY * DX + BY * CX - AY * CX)
    u_numerator = (CX * BY - AX * BY - CX * AY + AX * AY
                   - CY * BX + AY * BX + CY * AX - AY * AX)
    u_divider = (DY * BX - CY * BX - DY * AX + CY * AX
                 - DX * BY + CX * BY + DX * AY - CX * AY)

    with np.errstate(divide="ignore", invalid="ignore"):
        t = float(np.float64(t_numerator) / np.float64(t_divider))
        u = float(np.float64(u_numerator) / np.float64(u_divider))

    return t, u, float(t_divider)


def intersect(AB, CD):
    """
    Intersection point of segments AB and CD, or None.

    AB, CD: Segment or any 2-sequence of points exposing .x / .y
    Only t_divider is tested for zero; a zero u_divider leaves u at inf/nan,
    which the [0, 1] range test rejects.
    """
    t, u, t_divider = parametric_coefficients(AB, CD)

    if t_divider == 0:
        return None
    if not (0 <= t <= 1 and 0 <= u <= 1):
        return None

    # evaluated on AB from t; the point from u on CD is the same solution
    A, B = AB[0], AB[1]
    return Point(lerp(A.x, B.x, t), lerp(A.y, B.y, t))
