"""Shared fixtures for conduction tests."""
import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from jax_tc.composition import ConstantMeanMolecularWeight
from jax_tc.conduction import ConductionParams, ThermalConduction
from jax_tc.constants import KAPPA_SPITZER
from jax_tc.units import UnitSystem


@pytest.fixture
def unit_conduction():
    """Returns a factory for closures in a unit system where everything is one."""
    def make(kappa=1.0, transition_temperature=0.0, mu=1.0, **kwargs):
        return ThermalConduction(
            params=ConductionParams(
                kappa=kappa, transition_temperature=transition_temperature
            ),
            units=UnitSystem.dimensionless(),
            mean_molecular_weight=ConstantMeanMolecularWeight(mu=mu),
            **kwargs,
        )
    return make


@pytest.fixture
def conduction_config():
    """Minimal valid conduction config."""
    return {
        "conduction": {
            "kappa": KAPPA_SPITZER,
            "transition_temperature": 1.0e5,
        },
    }
