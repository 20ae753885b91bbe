'''
============================
Rayleigh (batch) distillation
============================

 ============
 assumptions:
 ============
 1- simple batch still, the vapor is removed as soon as it is formed
 2- constant relative volatility W (fixed at the reference temperature)

 ============
  equation:
 ============

 NL/NLo = (x1/xo)^(1/(W-1)) * ((1-xo)/(1-x1))^(W/(W-1))

 where:
 NL/NLo: fraction of the original liquid still in the vessel (ratio r)
 xo: initial mole fraction of component 1
 x1: mole fraction of component 1 in the remaining liquid

 no closed form for x1(r) --> numeric search for x1 on a grid over [0,1]

 ====================
  search on the grid:
 ====================

 candidates x = 0, dx, 2dx, ... 1

 accepted solution = first candidate (increasing x) with

        |RHS(x) - r| / r <= tol

 RHS is monotone in x (increasing for W > 1, decreasing for W < 1), so the
 accepted candidates form one contiguous block on the grid and the first one
 can be found by bisection over the grid index instead of scanning it.
 "scan" keeps the plain linear search as a reference.

 -----------
 termination:
 -----------
 1) a candidate inside the tolerance band     --> solved
 2) grid exhausted without one                --> unsolved (x1 = None)
 3) r = 0 (everything evaporated)             --> boundary rule:
        W > 1: x1 = 0 (volatile component depleted)
        W < 1: x1 = 1
'''

import logging
import math
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from config import (validate_fraction, validate_grid_step, validate_open_fraction,
                    validate_positive)
from thermo_simple import check_alpha, yfxeq

logger = logging.getLogger(__name__)

SOLVED = "solved"
BOUNDARY = "boundary"
UNSOLVED = "unsolved"


@dataclass(frozen=True)
class TracePoint:
    ratio: float
    x1: Optional[float]
    y1: Optional[float]
    status: str

    @property
    def solved(self):
        return self.status != UNSOLVED

    @property
    def x2(self):
        return None if self.x1 is None else 1.0 - self.x1

    @property
    def y2(self):
        return None if self.y1 is None else 1.0 - self.y1


def rayleigh_rhs(x: float, x0: float, alpha: float) -> float:
    """Remaining liquid fraction NL/NLo reached when the still holds x."""
    a = 1 / (alpha - 1)
    b = alpha / (alpha - 1)

    # limits at the ends of [0,1]
    if x <= 0:
        return 0.0 if alpha > 1 else math.inf
    if x >= 1:
        return math.inf if alpha > 1 else 0.0

    try:
        return ((x / x0) ** a) * (((1 - x0) / (1 - x)) ** b)
    except OverflowError:
        return math.inf


def _candidates(grid_step: float):
    n = int(round(1 / validate_grid_step(grid_step)))
    return np.linspace(0.0, 1.0, n + 1)


def _within(value: float, ratio: float, tolerance: float) -> bool:
    return abs(value - ratio) / ratio <= tolerance


def _scan(ratio, x0, alpha, xs, tolerance):
    for x in xs:
        if _within(rayleigh_rhs(float(x), x0, alpha), ratio, tolerance):
            return float(x)
    return None


def _bisect(ratio, x0, alpha, xs, tolerance):

    # reached(i) is False ... False True ... True along the grid
    if alpha > 1:
        edge = ratio * (1 - tolerance)
        reached = lambda value: value >= edge
    else:
        edge = ratio * (1 + tolerance)
        reached = lambda value: value <= edge

    lo, hi = 0, len(xs)
    while lo < hi:
        mid = (lo + hi) // 2
        if reached(rayleigh_rhs(float(xs[mid]), x0, alpha)):
            hi = mid
        else:
            lo = mid + 1

    if lo == len(xs):
        return None
    x = float(xs[lo])
    if _within(rayleigh_rhs(x, x0, alpha), ratio, tolerance):
        return x
    # jumped over the band between two grid points
    return None


def solve_ratio(ratio: float, x0: float, alpha: float,
                grid_step: float = 1e-3, tolerance: float = 1e-2,
                method: str = "bisect") -> TracePoint:

    #validation inputs
    ratio = validate_fraction(ratio, "ratio")
    x0 = validate_open_fraction(x0, "x0")
    alpha = check_alpha(alpha)
    tolerance = validate_positive(tolerance, "tolerance")
    grid_step = validate_grid_step(grid_step)

    if ratio == 0:
        x1 = 0.0 if alpha > 1 else 1.0
        return TracePoint(ratio, x1, yfxeq(x1, alpha), BOUNDARY)

    xs = _candidates(grid_step)
    if method == "bisect":
        x1 = _bisect(ratio, x0, alpha, xs, tolerance)
    elif method == "scan":
        x1 = _scan(ratio, x0, alpha, xs, tolerance)
    else:
        raise ValueError("method must be 'bisect' or 'scan'")

    if x1 is None:
        logger.debug("NL/NLo=%.4f unsolved within tol=%g on grid dx=%g",
                     ratio, tolerance, grid_step)
        return TracePoint(ratio, None, None, UNSOLVED)

    return TracePoint(ratio, x1, yfxeq(x1, alpha), SOLVED)


def rayleigh_trace(x0: float, alpha: float, n_ratios: int = 101,
                   grid_step: float = 1e-3, tolerance: float = 1e-2,
                   method: str = "bisect") -> List[TracePoint]:
    """
    Trace the still composition while the batch is boiled off.

    Ratios NL/NLo go from 1 (nothing evaporated) down to 0. Every ratio is
    solved on its own; unsolved ratios are kept in the trace as UNSOLVED
    points.
    """
    if n_ratios < 2:
        raise ValueError("n_ratios must be >= 2")

    ratios = np.linspace(1.0, 0.0, n_ratios)
    trace = [
        solve_ratio(float(r), x0, alpha, grid_step, tolerance, method)
        for r in ratios
    ]

    unsolved = sum(1 for point in trace if not point.solved)
    if unsolved:
        logger.warning("%d of %d ratios unsolved (tol=%g, dx=%g)",
                       unsolved, len(trace), tolerance, grid_step)
    return trace
