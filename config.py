'''
configuration of one run

everything the model needs is passed around in frozen dataclasses, nothing is
kept in module level variables:

* MixtureContext --> the mixture (P, both components, reference T, x0)
* GridSettings   --> resolution of every sampled curve and of the Rayleigh search

component 1 ("light") is the one whose mole fraction x1 is reported.
'''

from dataclasses import dataclass

from antoine import Component


# =============================================================================
# VALIDATION UTILITIES
# =============================================================================

def validate_fraction(value: float, name: str) -> float:
    """Validate that a value is a number between 0 and 1."""
    if not isinstance(value, (float, int)):
        raise TypeError(f"{name} must be a number")
    if not (0 <= value <= 1):
        raise ValueError(f"{name} must be between 0 and 1")
    return float(value)

def validate_open_fraction(value: float, name: str) -> float:
    """Validate that a value is a number strictly between 0 and 1."""
    value = validate_fraction(value, name)
    if value in (0.0, 1.0):
        raise ValueError(f"{name} must be strictly between 0 and 1")
    return value

def validate_positive(value: float, name: str) -> float:
    """Validate that a value is a number > 0."""
    if not isinstance(value, (float, int)):
        raise TypeError(f"{name} must be a number")
    if value <= 0:
        raise ValueError(f"{name} must be > 0")
    return float(value)

def validate_grid_step(value: float, name: str = "grid_step") -> float:
    """Validate a step that splits [0,1] into a whole number of intervals."""
    value = validate_positive(value, name)
    if value > 1:
        raise ValueError(f"{name} must be <= 1")
    n = round(1 / value)
    if abs(n * value - 1) > 1e-9:
        raise ValueError(f"{name} must divide [0,1] evenly (1/{name} must be a whole number)")
    return value


# =============================================================================
# PRESETS (ln form, T in °C, P in mbar)
# =============================================================================

BENZENE = Component("Benzene", a=16.27, b=2817.29, c=221.37, t_min=6.0, t_max=140.0)
TOLUENE = Component("Toluene", a=16.4387, b=3173.958, c=222.88, t_min=-18.4, t_max=177.8)

PRESETS = {
    BENZENE.name: BENZENE,
    TOLUENE.name: TOLUENE,
}

ATMOSPHERIC_PRESSURE = 1013.25  # mbar


@dataclass(frozen=True)
class MixtureContext:
    light: Component
    heavy: Component
    pressure: float = ATMOSPHERIC_PRESSURE
    temperature: float = 100.0
    x0: float = 0.8

    def __post_init__(self):
        validate_positive(self.pressure, "pressure")
        validate_open_fraction(self.x0, "x0")
        if not isinstance(self.temperature, (float, int)):
            raise TypeError("temperature must be a number")


@dataclass(frozen=True)
class GridSettings:
    vapor_points: int = 1001
    equilibrium_points: int = 101
    temperature_step: float = 0.1
    ratio_points: int = 101
    grid_step: float = 1e-3
    tolerance: float = 1e-2
    method: str = "bisect"

    def __post_init__(self):
        for name in ("vapor_points", "equilibrium_points", "ratio_points"):
            if int(getattr(self, name)) < 2:
                raise ValueError(f"{name} must be >= 2")
        validate_positive(self.temperature_step, "temperature_step")
        validate_grid_step(self.grid_step, "grid_step")
        validate_positive(self.tolerance, "tolerance")
        if self.method not in ("bisect", "scan"):
            raise ValueError("method must be 'bisect' or 'scan'")


def benzene_toluene() -> MixtureContext:
    """Benzene/toluene at atmospheric pressure, W fixed at 100 °C, x0 = 0.8."""
    return MixtureContext(light=BENZENE, heavy=TOLUENE)
