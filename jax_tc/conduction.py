"""Anisotropic thermal conduction coefficients for MHD.

Supplies the conductivities along (κ_∥) and across (κ_⊥) magnetic field
lines together with the parameter φ that sets the saturated heat flux
F_sat = 5 φ ρ c_iso³.

κ_∥ follows a Spitzer-like power law κ_∥ = κ_0 T^(5/2), evaluated at
T = max(T_gas, T_transition) so the power law never reaches zero
temperature. Both coefficients are converted from CGS to code units with

    m_p μ / (ρ_0 v_0 L_0 k_B)

The closure is pointwise and pure, so it works on a single cell or on
whole grid arrays, and can be jitted or vmapped freely.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from functools import partial
from typing import NamedTuple

import jax
import jax.numpy as jnp

from jax_tc.composition import IonizedMeanMolecularWeight, MeanMolecularWeight
from jax_tc.constants import SATURATION_PHI
from jax_tc.state import PrimitiveState
from jax_tc.units import UnitSystem


class ConductionCoefficients(NamedTuple):
    """Conduction coefficients in code units."""
    kappa_par: jnp.ndarray   # Along B
    kappa_perp: jnp.ndarray  # Across B
    phi: float               # Saturation parameter


@dataclass(frozen=True)
class ConductionParams:
    """Run-time conduction parameters.

    Attributes:
        kappa: Normalisation κ_0 of κ_∥ = κ_0 T^(5/2) [CGS]
        transition_temperature: Temperature floor for the power law [K]
        phi: Saturation parameter
    """
    kappa: float
    transition_temperature: float
    phi: float = SATURATION_PHI


class PerpendicularConduction(ABC):
    """Perpendicular conductivity for a given physics module."""

    @abstractmethod
    def compute(self, kappa_par):
        """Return κ_⊥ given κ_∥ (both in CGS)."""
        pass

    @classmethod
    def create(cls, name: str = "mhd", **kwargs) -> "PerpendicularConduction":
        """Factory method to create a strategy by physics module name."""
        if name == "mhd":
            return MHDParallelOnly()
        elif name == "hd":
            return IsotropicConduction()
        elif name == "mhd_ratio":
            return PerpendicularRatio(ratio=float(kwargs.get("ratio", 0.0)))
        else:
            raise ValueError(f"Unknown physics module: {name}")


@dataclass(frozen=True)
class MHDParallelOnly(PerpendicularConduction):
    """Conduction along field lines only: κ_⊥ = 0."""

    def compute(self, kappa_par):
        return jnp.zeros_like(kappa_par)


@dataclass(frozen=True)
class IsotropicConduction(PerpendicularConduction):
    """No preferred direction (hydrodynamics): κ_⊥ = κ_∥."""

    def compute(self, kappa_par):
        return kappa_par


@dataclass(frozen=True)
class PerpendicularRatio(PerpendicularConduction):
    """Fixed anisotropy: κ_⊥ = ratio * κ_∥."""
    ratio: float = 0.0

    def compute(self, kappa_par):
        return self.ratio * kappa_par


def floored_temperature(temperature, transition_temperature):
    """Apply the transition-temperature floor (exact comparison)."""
    return jnp.where(
        temperature < transition_temperature, transition_temperature, temperature
    )


def spitzer_kappa(temperature, kappa, transition_temperature):
    """κ_0 T^(5/2) in CGS at the floored temperature."""
    T = floored_temperature(temperature, transition_temperature)
    return kappa * T * T * jnp.sqrt(T)


def compute_conduction_coefficients(
    prim: PrimitiveState,
    x1,
    x2,
    x3,
    params: ConductionParams,
    units: UnitSystem,
    mean_molecular_weight: MeanMolecularWeight,
    perpendicular: PerpendicularConduction,
) -> ConductionCoefficients:
    """Compute thermal conduction coefficients.

    Args:
        prim: Primitive state (single cell or grid)
        x1, x2, x3: Cell coordinates; the power law does not depend on them
        params: Conduction normalisation, temperature floor and φ
        units: Code-unit system
        mean_molecular_weight: Model returning μ for the state
        perpendicular: κ_⊥ strategy for the active physics module

    Returns:
        ConductionCoefficients(kappa_par, kappa_perp, phi) in code units.
        Zero density is not checked and yields non-finite values.
    """
    mu = mean_molecular_weight(prim)
    temperature = prim.p / prim.rho * mu * units.kelvin

    kappa_par = spitzer_kappa(temperature, params.kappa, params.transition_temperature)
    kappa_perp = perpendicular.compute(kappa_par)

    # Normalize to code units
    factor = units.conductivity_factor(mu)
    kappa_par = kappa_par * factor
    kappa_perp = kappa_perp * factor

    return ConductionCoefficients(kappa_par=kappa_par, kappa_perp=kappa_perp, phi=params.phi)


@dataclass(frozen=True)
class ThermalConduction:
    """Conduction closure bundled with its configuration.

    Instances are immutable and hashable, so they can be passed as static
    arguments to jitted code.

    Attributes:
        params: Conduction parameters
        units: Code-unit system
        mean_molecular_weight: μ model
        perpendicular: κ_⊥ strategy (MHD: zero)
    """
    params: ConductionParams
    units: UnitSystem = field(default_factory=UnitSystem)
    mean_molecular_weight: MeanMolecularWeight = field(
        default_factory=IonizedMeanMolecularWeight
    )
    perpendicular: PerpendicularConduction = field(default_factory=MHDParallelOnly)

    @partial(jax.jit, static_argnums=(0,))
    def coefficients(self, prim: PrimitiveState, x1=0.0, x2=0.0, x3=0.0) -> ConductionCoefficients:
        """Return (κ_∥, κ_⊥, φ) in code units for the given state."""
        return compute_conduction_coefficients(
            prim, x1, x2, x3,
            self.params, self.units, self.mean_molecular_weight, self.perpendicular,
        )

    def temperature(self, prim: PrimitiveState):
        """Gas temperature [K] before the floor is applied."""
        return prim.p / prim.rho * self.mean_molecular_weight(prim) * self.units.kelvin

    def physical_kappa_parallel(self, temperature):
        """κ_∥ in CGS at the given temperature [K], floor included."""
        return spitzer_kappa(
            temperature, self.params.kappa, self.params.transition_temperature
        )

    @classmethod
    def from_config(cls, config: dict) -> "ThermalConduction":
        """Factory method to create the closure from a config dict."""
        from jax_tc.config.loader import build_conduction
        return build_conduction(config)
