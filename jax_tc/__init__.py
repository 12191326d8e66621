"""JAX-TC: thermal conduction closures for MHD simulations."""

__version__ = "0.1.0"

import jax

# Conduction coefficients span many decades in T^(5/2); keep double precision.
jax.config.update("jax_enable_x64", True)

# Core classes
from jax_tc.state import PrimitiveState
from jax_tc.units import UnitSystem
from jax_tc.conduction import (
    ConductionCoefficients,
    ConductionParams,
    ThermalConduction,
    PerpendicularConduction,
    MHDParallelOnly,
    IsotropicConduction,
    PerpendicularRatio,
    compute_conduction_coefficients,
)
from jax_tc.composition import (
    MeanMolecularWeight,
    ConstantMeanMolecularWeight,
    IonizedMeanMolecularWeight,
    NeutralFractionMeanMolecularWeight,
)

# Constants
from jax_tc.constants import CONST_MP, CONST_KB, CONST_AMU, KAPPA_SPITZER, SATURATION_PHI

# Submodules for qualified imports
from jax_tc import saturation
from jax_tc import config

__all__ = [
    # Core classes
    "PrimitiveState",
    "UnitSystem",
    "ConductionCoefficients",
    "ConductionParams",
    "ThermalConduction",
    "PerpendicularConduction",
    "MHDParallelOnly",
    "IsotropicConduction",
    "PerpendicularRatio",
    "compute_conduction_coefficients",
    "MeanMolecularWeight",
    "ConstantMeanMolecularWeight",
    "IonizedMeanMolecularWeight",
    "NeutralFractionMeanMolecularWeight",
    # Constants
    "CONST_MP",
    "CONST_KB",
    "CONST_AMU",
    "KAPPA_SPITZER",
    "SATURATION_PHI",
    # Submodules
    "saturation",
    "config",
]
