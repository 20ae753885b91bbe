'''
bubble point and dew point lines (T-x-y diagram) at constant total pressure

1) temperature bracket
   at the boiling point of the heavy component  --> x1 = 0
   at the boiling point of the light component  --> x1 = 1
   both from the inverse Antoine equation T = B/(A - ln P) - C

2) bubble point line (Raoult):
   x1 = (P - P2*) / (P1* - P2*)

3) dew point line:
   y1 = x1 * P1* / P

special case:
 P1* = P2* at some T --> the vapor pressure curves cross inside the bracket,
 the sample is skipped (logged) and the curve goes on.
'''

import logging
import math
from dataclasses import dataclass
from typing import List, Tuple

from antoine import boiling_temperature, check_range, saturation_pressure
from config import MixtureContext, validate_positive

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TemperatureCurvePoint:
    temperature: float
    x1: float
    y1: float
    issues: Tuple[str, ...] = ()

    @property
    def x2(self):
        return 1.0 - self.x1

    @property
    def y2(self):
        return 1.0 - self.y1


def temperature_bracket(ctx: MixtureContext) -> Tuple[float, float]:
    t_x0 = boiling_temperature(ctx.heavy, ctx.pressure)   # x1 = 0
    t_x1 = boiling_temperature(ctx.light, ctx.pressure)   # x1 = 1
    return min(t_x0, t_x1), max(t_x0, t_x1)


def _temperatures(t_low: float, t_high: float, step: float) -> List[float]:
    n = int(math.floor((t_high - t_low) / step + 1e-9))
    temperatures = [t_low + i * step for i in range(n + 1)]
    # always close the curve at the upper boiling point
    if t_high - temperatures[-1] > 1e-9:
        temperatures.append(t_high)
    else:
        temperatures[-1] = t_high
    return temperatures


def bubble_dew_samples(ctx: MixtureContext, step: float = 0.1) -> Tuple[List[TemperatureCurvePoint], List[float]]:
    """Bubble/dew points and the temperatures skipped because P1* = P2*."""
    step = validate_positive(step, "step")
    P = ctx.pressure
    t_low, t_high = temperature_bracket(ctx)

    points = []
    skipped = []
    for T in _temperatures(t_low, t_high, step):
        issues = tuple(
            str(error) for error in
            (check_range(ctx.light, T), check_range(ctx.heavy, T))
            if error is not None
        )

        # out of range samples are recorded in issues
        p1 = saturation_pressure(ctx.light, T, warn=False)
        p2 = saturation_pressure(ctx.heavy, T, warn=False)

        denominator = p1 - p2
        if abs(denominator) <= 1e-12 * max(p1, p2):
            logger.warning("skipping T=%.3f: P1* = P2* (vapor pressure curves cross)", T)
            skipped.append(T)
            continue

        x1 = (P - p2) / denominator
        y1 = x1 * p1 / P
        points.append(TemperatureCurvePoint(T, x1, y1, issues))

    return points, skipped


def bubble_dew_curve(ctx: MixtureContext, step: float = 0.1) -> List[TemperatureCurvePoint]:
    points, _ = bubble_dew_samples(ctx, step)
    return points
