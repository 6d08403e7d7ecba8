# intersect2d/engine/debug_checks.py
import numpy as np

from intersect2d.geometry.intersection import lerp, parametric_coefficients

def _safe_fmt(x):
    try:
        return f"{float(x):+.3e}"
    except (TypeError, ValueError):
        return "n/a"

def _in_unit(x):
    return 0.0 <= x <= 1.0


def check_intersection(AB, CD, point, *, print_each=True, tol=1e-9):
    """
    Verifies an intersect(AB, CD) result against the raw coefficients:
      - point given : t, u in [0,1], t_divider != 0, and lerp(C, D, u) lands on point
                      (|diff| <= tol * max(1, |point|))
      - point None  : t_divider == 0, or t / u outside [0,1]
    AB, CD: Segment. A degenerate input (a == b) is tagged "degen" in the report.
    Prints one [ix] line per call if print_each.
    Returns True if the result is consistent, else False.
    """
    t, u, t_div = parametric_coefficients(AB, CD)
    C, D = CD[0], CD[1]
    tag = " degen" if (AB.is_degenerate or CD.is_degenerate) else ""

    if point is None:
        ok = (t_div == 0) or not (_in_unit(t) and _in_unit(u))
        if print_each:
            print(f"[ix] none{tag}  t={_safe_fmt(t)} u={_safe_fmt(u)} tdiv={_safe_fmt(t_div)}"
                  f" -> {'OK' if ok else 'BAD'}")
        return ok

    p = np.array([point.x, point.y], dtype=float)
    q = np.array([lerp(C.x, D.x, u), lerp(C.y, D.y, u)], dtype=float)
    err = float(np.linalg.norm(p - q))
    scale = max(1.0, float(np.linalg.norm(p)))

    range_ok = _in_unit(t) and _in_unit(u) and t_div != 0
    match_ok = err <= tol * scale
    ok = range_ok and match_ok

    if print_each:
        print(f"[ix]{tag} point=({p[0]:.3f},{p[1]:.3f}) t={_safe_fmt(t)} u={_safe_fmt(u)}"
              f" | err={err:.3e} -> {'OK' if ok else 'BAD'}")
    return ok
