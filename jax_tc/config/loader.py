"""Configuration loading and validation.

A conduction config looks like::

    conduction:
      kappa: 5.6e-7         # KAPPA_SPITZER
      transition_temperature: 1.0e5
      phi: 0.3
      physics: mhd          # mhd | hd | mhd_ratio
      perp_ratio: 1.0e-6    # only for mhd_ratio
    units:
      density: 1.67262171e-24
      velocity: 1.0e5
      length: 1.49597892e13
    mean_molecular_weight:
      type: ionized         # constant | ionized | neutral_fraction
"""

from pathlib import Path
from typing import Union
import logging

import yaml

from jax_tc.composition import MeanMolecularWeight
from jax_tc.conduction import ConductionParams, PerpendicularConduction, ThermalConduction
from jax_tc.constants import SATURATION_PHI
from jax_tc.input_validation import validate_non_negative, validate_positive
from jax_tc.units import UnitSystem

log = logging.getLogger(__name__)


def load_config(path: Union[str, Path]) -> dict:
    """Load configuration from YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, 'r') as f:
        config = yaml.safe_load(f)

    return config or {}


def save_config(config: dict, path: Union[str, Path]) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w') as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)


def _build_units(config: dict) -> UnitSystem:
    defaults = UnitSystem()
    units = UnitSystem(
        unit_density=float(config.get("density", defaults.unit_density)),
        unit_velocity=float(config.get("velocity", defaults.unit_velocity)),
        unit_length=float(config.get("length", defaults.unit_length)),
        proton_mass=float(config.get("proton_mass", defaults.proton_mass)),
        boltzmann=float(config.get("boltzmann", defaults.boltzmann)),
        atomic_mass_unit=float(config.get("atomic_mass_unit", defaults.atomic_mass_unit)),
    )
    validate_positive(units.unit_density, "units.density")
    validate_positive(units.unit_velocity, "units.velocity")
    validate_positive(units.unit_length, "units.length")
    validate_positive(units.proton_mass, "units.proton_mass")
    validate_positive(units.boltzmann, "units.boltzmann")
    validate_positive(units.atomic_mass_unit, "units.atomic_mass_unit")
    return units


def build_conduction(config: dict) -> ThermalConduction:
    """Build a ThermalConduction closure from a config dict.

    Raises:
        KeyError: If conduction.kappa or conduction.transition_temperature is missing
        ValidationError: If a value is out of range
        ValueError: If a physics module or mu model name is unknown
    """
    cond = config.get("conduction", {})
    params = ConductionParams(
        kappa=float(cond["kappa"]),
        transition_temperature=float(cond["transition_temperature"]),
        phi=float(cond.get("phi", SATURATION_PHI)),
    )
    validate_non_negative(params.kappa, "conduction.kappa")
    validate_non_negative(params.transition_temperature, "conduction.transition_temperature")
    validate_positive(params.phi, "conduction.phi")

    physics = cond.get("physics", "mhd")
    perp_ratio = float(cond.get("perp_ratio", 0.0))
    if physics == "mhd_ratio":
        validate_non_negative(perp_ratio, "conduction.perp_ratio")
    perpendicular = PerpendicularConduction.create(physics, ratio=perp_ratio)

    units = _build_units(config.get("units", {}))
    mean_molecular_weight = MeanMolecularWeight.create(config.get("mean_molecular_weight", {}))

    log.info(
        "Thermal conduction: kappa=%g, T_transition=%g K, phi=%g, physics=%s",
        params.kappa, params.transition_temperature, params.phi, physics,
    )
    return ThermalConduction(
        params=params,
        units=units,
        mean_molecular_weight=mean_molecular_weight,
        perpendicular=perpendicular,
    )
