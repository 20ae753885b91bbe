'''
vapor pressure model (Antoine equation, natural log form)

formula: ln(Psat) = A - B/(C + T)      -->  Psat = exp(A - B/(C + T))

inverse (boiling temperature at a given pressure):
         T = B/(A - ln(P)) - C

the constants are only fitted over [Tmin, Tmax] of each component.
outside that range the formula is still evaluated (extrapolation) but the
result is not guaranteed to be physical --> a DomainError is reported.

units follow the constants the user supplies
(the presets in config.py use °C and mbar).
'''

import logging
import math
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from errors import DomainError, SingularityError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Component:
    """Antoine constants of a pure component and their valid temperature range."""
    name: str
    a: float
    b: float
    c: float
    t_min: float
    t_max: float

    def __post_init__(self):
        for field in ("a", "b", "c", "t_min", "t_max"):
            value = getattr(self, field)
            if not isinstance(value, (float, int)):
                raise TypeError(f"{field} must be a number")
            if not math.isfinite(value):
                raise ValueError(f"{field} must be finite")
        if self.t_min >= self.t_max:
            raise ValueError("t_min must be smaller than t_max")


@dataclass(frozen=True)
class VaporPressurePoint:
    temperature: float
    pressure: float
    in_range: bool


def check_range(component: Component, T: float) -> Optional[DomainError]:
    """Return the DomainError for T without raising it, None when T is valid."""
    if component.t_min <= T <= component.t_max:
        return None
    return DomainError(component.name, T, component.t_min, component.t_max)


def saturation_pressure(component: Component, T: float, strict: bool = False, warn: bool = True):

    #range check
    error = check_range(component, T)
    if error is not None:
        if strict:
            raise error
        if warn:
            logger.warning("extrapolating Antoine equation: %s", error)

    # T <= -C is past the asymptote of the correlation
    denominator = component.c + T
    if denominator <= 0:
        raise SingularityError(f"T <= -C for {component.name} (T={T}, C={component.c})")

    return math.exp(component.a - component.b / denominator)


def boiling_temperature(component: Component, P: float):

    if not isinstance(P, (float, int)):
        raise TypeError("P must be a number")
    if P <= 0:
        raise ValueError("P must be >0")

    # A <= ln(P): the correlation never reaches P above T = -C
    denominator = component.a - math.log(P)
    if denominator < 1e-12:
        raise SingularityError(f"no boiling point of {component.name} at P={P} (A <= ln P)")

    return component.b / denominator - component.c


def vapor_pressure_curve(component: Component, n_points: int = 1001,
                         t_low: Optional[float] = None, t_high: Optional[float] = None) -> List[VaporPressurePoint]:
    """
    Psat sampled uniformly over [t_low, t_high], by default the valid range.

    Samples outside the valid range are kept with in_range=False, samples at
    or below T = -C are skipped.
    """
    if n_points < 2:
        raise ValueError("n_points must be >= 2")
    t_low = component.t_min if t_low is None else t_low
    t_high = component.t_max if t_high is None else t_high
    if t_low >= t_high:
        raise ValueError("t_low must be smaller than t_high")

    points = []
    for T in np.linspace(t_low, t_high, n_points):
        T = float(T)
        if component.c + T <= 0:
            logger.warning("skipping T=%.3f: at or below T = -C for %s", T, component.name)
            continue
        in_range = check_range(component, T) is None
        points.append(VaporPressurePoint(T, saturation_pressure(component, T, warn=False), in_range))
    return points
