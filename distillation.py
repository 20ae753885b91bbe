'''
batch distillation of a binary mixture: full run

 1- vapor pressure of both components over their valid ranges
 2- relative volatility W at the reference temperature
 3- equilibrium curve y1(x1)
 4- bubble point / dew point lines at the total pressure
 5- Rayleigh trace of the still composition vs NL/NLo

a SingularityError from step 2 aborts the run (every later step needs W).
per point problems (temperatures out of range, unsolved ratios) are collected
in "warnings" and the run goes on.
'''

import logging
from typing import Dict

import pandas as pd

from antoine import check_range, vapor_pressure_curve
from bubble_dew import bubble_dew_samples
from config import GridSettings, MixtureContext
from rayleigh import rayleigh_trace
from thermo_simple import equilibrium_curve, relative_volatility

logger = logging.getLogger(__name__)


def simulate(ctx: MixtureContext, grid: GridSettings = GridSettings()) -> Dict:

    warnings = []

    vapor_pressure = {
        component.name: vapor_pressure_curve(component, grid.vapor_points)
        for component in (ctx.light, ctx.heavy)
    }

    for component in (ctx.light, ctx.heavy):
        error = check_range(component, ctx.temperature)
        if error is not None:
            warnings.append(f"reference temperature: {error}")

    alpha = relative_volatility(ctx)

    equilibrium = equilibrium_curve(alpha, grid.equilibrium_points)

    bubble_dew, skipped = bubble_dew_samples(ctx, grid.temperature_step)
    if skipped:
        warnings.append(
            f"{len(skipped)} bubble/dew samples skipped where P1* = P2* "
            f"(T = " + ", ".join(f"{T:.2f}" for T in skipped) + ")"
        )
    out_of_range = sum(1 for point in bubble_dew if point.issues)
    if out_of_range:
        warnings.append(f"{out_of_range} bubble/dew points outside the Antoine ranges")

    trace = rayleigh_trace(ctx.x0, alpha, grid.ratio_points,
                           grid.grid_step, grid.tolerance, grid.method)
    unsolved = [point.ratio for point in trace if not point.solved]
    if unsolved:
        warnings.append(
            f"{len(unsolved)} ratios unsolved within tol={grid.tolerance:g} "
            f"(NL/NLo <= {max(unsolved):.3f})"
        )

    if not warnings:
        message = "All curves computed."
    else:
        message = "Computed with warnings: " + "; ".join(warnings)
    logger.info(message)

    return {
        "vapor_pressure": vapor_pressure,
        "alpha": alpha,
        "equilibrium": equilibrium,
        "bubble_dew": bubble_dew,
        "trace": trace,
        "warnings": warnings,
        "message": message,
    }


def to_frames(result: Dict) -> Dict[str, pd.DataFrame]:
    """Tables of every curve in a simulate() result."""
    vapor = pd.DataFrame(
        [(name, p.temperature, p.pressure, p.in_range)
         for name, points in result["vapor_pressure"].items() for p in points],
        columns=["component", "T", "P", "in_range"],
    )
    equilibrium = pd.DataFrame(
        [(p.x1, p.x2, p.y1, p.y2) for p in result["equilibrium"]],
        columns=["x1", "x2", "y1", "y2"],
    )
    bubble_dew = pd.DataFrame(
        [(p.temperature, p.x1, p.y1) for p in result["bubble_dew"]],
        columns=["T", "x1", "y1"],
    )
    trace = pd.DataFrame(
        [(p.ratio, p.x1, p.x2, p.y1, p.y2, p.status) for p in result["trace"]],
        columns=["ratio", "x1", "x2", "y1", "y2", "status"],
    )
    return {
        "vapor_pressure": vapor,
        "equilibrium": equilibrium,
        "bubble_dew": bubble_dew,
        "trace": trace,
    }


# =============================================================================
# MAIN EXECUTION
# =============================================================================

if __name__ == "__main__":
    from config import benzene_toluene

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    result = simulate(benzene_toluene())
    frames = to_frames(result)

    print(f"\n{'='*50}")
    print("SIMULATION RESULTS:")
    print(f"{'='*50}")
    print(f"W = {result['alpha']:.6f}")
    print(f"message: '{result['message']}'")
    print(frames["trace"].iloc[::10].to_string(index=False))
