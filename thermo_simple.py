'''
thermodynamics helper (constant relative volatility model)

1-relative_volatility
 ratio of the saturation pressures of both components at one reference
 temperature:

 formula: W = Psat1(T)/Psat2(T)

 W is computed once and kept constant for the whole run (equilibrium curve and
 Rayleigh trace), even though the true ratio changes with temperature.

 W = 1 --> no separation possible, several formulas divide by (W-1)

2-yfxeq
 vapor composition in equilibrium with a liquid of composition x

 formula: y=(W*x)/(1+(W-1)*x)) (equilibrium curve)
 - it bends upward strongly if W is larger --> better separation
 - y=x only at x=0 and x=1
'''

import logging
from dataclasses import dataclass
from typing import List

import numpy as np

from antoine import check_range, saturation_pressure
from config import MixtureContext
from errors import SingularityError

logger = logging.getLogger(__name__)

# |W-1| below this is treated as equal volatility
SINGULAR_ALPHA = 1e-9


@dataclass(frozen=True)
class CompositionPoint:
    x1: float
    y1: float

    @property
    def x2(self):
        return 1.0 - self.x1

    @property
    def y2(self):
        return 1.0 - self.y1


def check_alpha(alpha: float) -> float:
    if not isinstance(alpha, (float, int)):
        raise TypeError("alpha must be a number")
    if alpha <= 0:
        raise ValueError("α must be >0")
    if abs(alpha - 1) <= SINGULAR_ALPHA:
        raise SingularityError("α ≈ 1: both components are equally volatile")
    return float(alpha)


def relative_volatility(ctx: MixtureContext) -> float:

    T = ctx.temperature
    for component in (ctx.light, ctx.heavy):
        error = check_range(component, T)
        if error is not None:
            logger.warning("relative volatility reference %s", error)

    p1 = saturation_pressure(ctx.light, T, warn=False)
    p2 = saturation_pressure(ctx.heavy, T, warn=False)
    if p1 <= 0 or p2 <= 0:
        raise SingularityError(f"non-positive saturation pressure at T={T}")

    alpha = p1 / p2
    check_alpha(alpha)
    logger.info("W(%s/%s) at T=%s: %.6f", ctx.light.name, ctx.heavy.name, T, alpha)
    return alpha


def yfxeq(x: float, alpha: float):

    #type check
    if not isinstance(x, (float, int)):
        raise TypeError("x must be a number")
    if not isinstance(alpha, (float, int)):
        raise TypeError("alpha must be a number")
    #range check
    if alpha <= 0:
        raise ValueError("α must be >0")
    if not (0 <= x <= 1):
        raise ValueError("x must be between 0 and 1")

    denominator = 1 + (alpha - 1) * x
    return (alpha * x) / denominator


def equilibrium_curve(alpha: float, n_points: int = 101) -> List[CompositionPoint]:
    alpha = check_alpha(alpha)
    if n_points < 2:
        raise ValueError("n_points must be >= 2")

    x_eq = np.linspace(0.0, 1.0, n_points)
    return [CompositionPoint(float(x), yfxeq(float(x), alpha)) for x in x_eq]


if __name__ == "__main__":
    from config import benzene_toluene

    W = relative_volatility(benzene_toluene())
    print(f"W = {W:.6f}")
    for point in equilibrium_curve(W, 11):
        print(f"x1 = {point.x1:.2f} -> y1 = {point.y1:.6f}")
