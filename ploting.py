from typing import Dict, List

import plotly.graph_objects as go

from bubble_dew import TemperatureCurvePoint
from rayleigh import TracePoint
from thermo_simple import CompositionPoint


def _grid(fig: "go.Figure") -> "go.Figure":
    fig.update_layout(
        width=950, height=600,
        legend=dict(bgcolor="rgba(255,255,255,0.6)"),
        margin=dict(l=40, r=20, t=40, b=40),
    )
    fig.update_xaxes(showgrid=True, gridcolor="rgba(0,0,0,0.2)")
    fig.update_yaxes(showgrid=True, gridcolor="rgba(0,0,0,0.2)")
    return fig


def plot_vapor_pressure(curves: Dict[str, List]) -> "go.Figure":
    fig = go.Figure()
    for name, points in curves.items():
        fig.add_trace(go.Scatter(
            x=[p.temperature for p in points], y=[p.pressure for p in points],
            mode="lines", name=name, line=dict(width=2)
        ))
    fig.update_layout(
        title="Saturation pressure (Antoine equation)",
        xaxis=dict(title="Temperature"),
        yaxis=dict(title="Pressure"),
    )
    return _grid(fig)


def plot_equilibrium(points: List[CompositionPoint], names=("Component 1", "Component 2")) -> "go.Figure":
    fig = go.Figure()

    # Equilibrium curves of both components
    fig.add_trace(go.Scatter(
        x=[p.x1 for p in points], y=[p.y1 for p in points],
        mode="lines", name=names[0], line=dict(width=2)
    ))
    fig.add_trace(go.Scatter(
        x=[p.x2 for p in points], y=[p.y2 for p in points],
        mode="lines", name=names[1], line=dict(width=2)
    ))

    # Diagonal y=x
    fig.add_trace(go.Scatter(
        x=[0, 1], y=[0, 1], mode="lines", name="y = x",
        line=dict(width=1, dash="dash", color="black"), showlegend=False
    ))

    fig.update_layout(
        title="Equilibrium curves",
        xaxis=dict(range=[0, 1], title="x (liquid mole fraction)"),
        yaxis=dict(range=[0, 1], title="y (vapor mole fraction)"),
    )
    return _grid(fig)


def plot_txy(points: List[TemperatureCurvePoint]) -> "go.Figure":
    temperatures = [p.temperature for p in points]

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=[p.x1 for p in points], y=temperatures,
        mode="lines", name="Bubble point line", line=dict(width=2, color="red")
    ))
    fig.add_trace(go.Scatter(
        x=[p.y1 for p in points], y=temperatures,
        mode="lines", name="Dew point line", line=dict(width=2, color="green")
    ))
    fig.update_layout(
        title="Temperature dependence",
        xaxis=dict(range=[0, 1], title="Mole fractions x1, y1"),
        yaxis=dict(title="Temperature"),
    )
    return _grid(fig)


def plot_trace(points: List[TracePoint]) -> "go.Figure":
    # unsolved ratios become gaps in the lines
    ratios = [p.ratio for p in points]

    fig = go.Figure()
    for label, values, color, dash in (
        ("x1", [p.x1 for p in points], "blue", "solid"),
        ("x2", [p.x2 for p in points], "red", "solid"),
        ("y1", [p.y1 for p in points], "blue", "dash"),
        ("y2", [p.y2 for p in points], "red", "dash"),
    ):
        fig.add_trace(go.Scatter(
            x=ratios, y=values, mode="lines", name=label,
            line=dict(width=2, color=color, dash=dash)
        ))

    fig.update_layout(
        title="Trace fractional distillation",
        xaxis=dict(range=[0, 1], title="NL/NLo"),
        yaxis=dict(range=[0, 1], title="x, y (mole fractions: x liquid, y vapor)"),
    )
    return _grid(fig)
