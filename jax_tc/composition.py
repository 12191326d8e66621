"""Mean molecular weight models.

The conduction closure needs mu to turn p/rho into a temperature and to
normalise the coefficients. The models below cover the usual cases:
a fixed value, a fully ionised H/He/metal mixture, and a mixture whose
hydrogen is partly neutral (fraction carried as a tracer in the state).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging

from jax_tc.constants import CONST_AH, CONST_AHE, CONST_AZ, H_MASS_FRAC, HE_MASS_FRAC
from jax_tc.input_validation import validate_non_negative, validate_positive
from jax_tc.state import PrimitiveState

log = logging.getLogger(__name__)


class MeanMolecularWeight(ABC):
    """Base class for mean molecular weight models."""

    @abstractmethod
    def __call__(self, prim: PrimitiveState):
        """Return mu for the given state."""
        pass

    @classmethod
    def create(cls, config: dict) -> "MeanMolecularWeight":
        """Factory method to create a model from config."""
        mmw_type = config.get("type", "ionized")
        if mmw_type == "constant":
            mu = float(config.get("value", 0.6))
            validate_positive(mu, "mean_molecular_weight.value")
            model = ConstantMeanMolecularWeight(mu=mu)
        elif mmw_type == "ionized":
            model = IonizedMeanMolecularWeight(**_mass_fractions(config))
        elif mmw_type == "neutral_fraction":
            model = NeutralFractionMeanMolecularWeight(**_mass_fractions(config))
        else:
            raise ValueError(f"Unknown mean molecular weight type: {mmw_type}")
        log.debug("Created mean molecular weight model %s", model)
        return model


def _mass_fractions(config: dict) -> dict:
    h = float(config.get("h_mass_frac", H_MASS_FRAC))
    he = float(config.get("he_mass_frac", HE_MASS_FRAC))
    validate_positive(h, "mean_molecular_weight.h_mass_frac")
    validate_non_negative(he, "mean_molecular_weight.he_mass_frac")
    validate_non_negative(1.0 - h - he, "metal mass fraction (1 - X - Y)")
    return {"h_mass_frac": h, "he_mass_frac": he}


@dataclass(frozen=True)
class ConstantMeanMolecularWeight(MeanMolecularWeight):
    """Fixed mean molecular weight."""
    mu: float = 0.6

    def __call__(self, prim: PrimitiveState):
        return self.mu


@dataclass(frozen=True)
class IonizedMeanMolecularWeight(MeanMolecularWeight):
    """Fully ionised hydrogen, helium and metals.

    mu = (A_H + f_He A_He + f_Z A_Z) / (2 + f_He + 2 f_Z)

    where f_He and f_Z are number fractions relative to hydrogen, derived
    from the mass fractions X (hydrogen), Y (helium) and Z = 1 - X - Y.
    """
    h_mass_frac: float = H_MASS_FRAC
    he_mass_frac: float = HE_MASS_FRAC

    @property
    def frac_he(self) -> float:
        return (self.he_mass_frac / CONST_AHE) * (CONST_AH / self.h_mass_frac)

    @property
    def frac_z(self) -> float:
        z_mass_frac = 1.0 - self.h_mass_frac - self.he_mass_frac
        return (z_mass_frac / CONST_AZ) * (CONST_AH / self.h_mass_frac)

    @property
    def mass_per_hydrogen(self) -> float:
        return CONST_AH + self.frac_he * CONST_AHE + self.frac_z * CONST_AZ

    def __call__(self, prim: PrimitiveState):
        return self.mass_per_hydrogen / (2.0 + self.frac_he + 2.0 * self.frac_z)


@dataclass(frozen=True)
class NeutralFractionMeanMolecularWeight(IonizedMeanMolecularWeight):
    """Mixture with a neutral hydrogen fraction tracked per cell.

    Each neutral hydrogen atom removes one free electron:
    mu = (A_H + f_He A_He + f_Z A_Z) / (2 + f_He + 2 f_Z - x_HI)
    """

    def __call__(self, prim: PrimitiveState):
        if prim.x_hi is None:
            raise ValueError(
                "NeutralFractionMeanMolecularWeight requires x_hi in the state"
            )
        return self.mass_per_hydrogen / (
            2.0 + self.frac_he + 2.0 * self.frac_z - prim.x_hi
        )
