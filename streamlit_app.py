# streamlit_app.py
import logging

import streamlit as st

from antoine import Component
from config import ATMOSPHERIC_PRESSURE, PRESETS, GridSettings, MixtureContext
from distillation import simulate, to_frames
from errors import SingularityError
from ploting import plot_equilibrium, plot_trace, plot_txy, plot_vapor_pressure

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

CUSTOM = "Custom"


def component_input(label: str, default: str) -> Component:
    st.sidebar.subheader(label)
    names = list(PRESETS) + [CUSTOM]
    choice = st.sidebar.selectbox(f"{label} preset", names, index=names.index(default))
    preset = PRESETS.get(choice, PRESETS[default])

    a = st.sidebar.number_input(f"A ({label})", value=preset.a, format="%.6f")
    b = st.sidebar.number_input(f"B ({label})", value=preset.b, format="%.6f")
    c = st.sidebar.number_input(f"C ({label})", value=preset.c, format="%.6f")
    t_min = st.sidebar.number_input(f"Tmin ({label})", value=preset.t_min, format="%.2f")
    t_max = st.sidebar.number_input(f"Tmax ({label})", value=preset.t_max, format="%.2f")
    name = preset.name if choice != CUSTOM else f"{label} (custom)"
    return Component(name, a, b, c, t_min, t_max)


# ──────────────────────────────────────────────────────────────────────────────
# App
# ──────────────────────────────────────────────────────────────────────────────
def main():
    st.set_page_config(page_title="Batch Distillation Simulator", page_icon="🧪", layout="wide")
    st.title("🧪 Batch (Rayleigh) Distillation of a Binary Mixture")

    st.sidebar.header("📊 Input Parameters")
    try:
        light = component_input("Component 1", "Benzene")
        heavy = component_input("Component 2", "Toluene")
    except ValueError as e:
        st.error(f"⚠️ Invalid Antoine constants: {e}")
        st.stop()

    st.sidebar.subheader("⚙️ Operating Conditions")
    P = st.sidebar.number_input("Total pressure (P)", min_value=1e-6, value=ATMOSPHERIC_PRESSURE, format="%.4f")
    T = st.sidebar.number_input("Reference temperature for W", value=100.0, format="%.2f")
    x0 = st.sidebar.number_input("Initial mole fraction of component 1 (xo)", min_value=0.001, max_value=0.999, value=0.8, step=0.01, format="%.4f")

    st.sidebar.subheader("🔧 Advanced Settings")
    ratio_points = st.sidebar.number_input("Number of NL/NLo points", min_value=2, max_value=2001, value=101, step=10)
    grid_step = st.sidebar.number_input("Search grid step", min_value=1e-6, max_value=0.1, value=1e-3, step=1e-4, format="%.1e")
    tolerance = st.sidebar.number_input("Relative tolerance", min_value=1e-6, max_value=0.5, value=1e-2, step=1e-3, format="%.1e")
    temperature_step = st.sidebar.number_input("Temperature step (T-x-y)", min_value=1e-3, max_value=10.0, value=0.1, step=0.1)
    method = st.sidebar.selectbox("Search method", ["bisect", "scan"])

    try:
        ctx = MixtureContext(light=light, heavy=heavy, pressure=float(P), temperature=float(T), x0=float(x0))
        grid = GridSettings(
            temperature_step=float(temperature_step), ratio_points=int(ratio_points),
            grid_step=float(grid_step), tolerance=float(tolerance), method=method,
        )
    except ValueError as e:
        st.error(f"⚠️ Invalid settings: {e}")
        st.stop()

    try:
        with st.spinner("Running batch distillation model..."):
            result = simulate(ctx, grid)
    except SingularityError as e:
        st.error(f"❌ Simulation failed: {e}")
        st.stop()

    frames = to_frames(result)

    st.metric("Relative volatility W", f"{result['alpha']:.4f}")
    if result["warnings"]:
        for warning in result["warnings"]:
            st.warning(warning)
    else:
        st.info(result["message"])

    tab1, tab2, tab3, tab4 = st.tabs(
        ["📈 Vapor pressure", "🔍 Equilibrium", "🌡️ T-x-y", "🧪 Rayleigh trace"]
    )
    tabs = (
        (tab1, "vapor_pressure", plot_vapor_pressure(result["vapor_pressure"])),
        (tab2, "equilibrium", plot_equilibrium(result["equilibrium"], (light.name, heavy.name))),
        (tab3, "bubble_dew", plot_txy(result["bubble_dew"])),
        (tab4, "trace", plot_trace(result["trace"])),
    )
    for tab, key, fig in tabs:
        with tab:
            st.plotly_chart(fig, use_container_width=True)
            st.dataframe(frames[key], use_container_width=True)
            st.download_button(
                "📥 Download data (CSV)",
                frames[key].to_csv(index=False),
                file_name=f"{key}.csv",
                mime="text/csv",
                key=f"download_{key}",
            )


if __name__ == "__main__":
    main()
