'''
error kinds of the batch distillation model

1- DomainError
   a temperature lies outside the fitted range of an Antoine correlation.
   usually recorded next to the point and the computation goes on with the
   extrapolated value.

2- SingularityError
   a division that the model needs would be undefined:
   * relative volatility W ≈ 1 (formulas divide by W-1)
   * Psat1(T) = Psat2(T) in the bubble point relation
   * T = -C or A = ln(P) in the Antoine equation and its inverse
'''


class DomainError(ValueError):
    """Temperature outside a component's valid Antoine range."""

    def __init__(self, component: str, temperature: float, t_min: float, t_max: float):
        self.component = component
        self.temperature = temperature
        self.t_min = t_min
        self.t_max = t_max
        super().__init__(
            f"T={temperature:.3f} is outside the range of {component} "
            f"[{t_min}, {t_max}]"
        )


class SingularityError(ZeroDivisionError):
    """A required division is undefined (W ≈ 1 or equal vapor pressures)."""
