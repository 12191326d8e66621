"""Unit system utilities."""

from jax_tc.units.normalization import UnitSystem

__all__ = [
    "UnitSystem",
]
