"""Code-unit scales and physical-to-code conversions."""

from dataclasses import dataclass

from jax_tc.constants import CONST_AMU, CONST_AU, CONST_KB, CONST_MP


@dataclass(frozen=True)
class UnitSystem:
    """Base scales of the code-unit system.

    Attributes:
        unit_density: Density scale [g/cm^3]
        unit_velocity: Velocity scale [cm/s]
        unit_length: Length scale [cm]
        proton_mass: Proton mass [g]
        boltzmann: Boltzmann constant [erg/K]
        atomic_mass_unit: Atomic mass unit [g]
    """

    unit_density: float = CONST_MP
    unit_velocity: float = 1.0e5
    unit_length: float = CONST_AU
    proton_mass: float = CONST_MP
    boltzmann: float = CONST_KB
    atomic_mass_unit: float = CONST_AMU

    @classmethod
    def dimensionless(cls) -> "UnitSystem":
        """Unit system with every scale and constant set to one."""
        return cls(
            unit_density=1.0,
            unit_velocity=1.0,
            unit_length=1.0,
            proton_mass=1.0,
            boltzmann=1.0,
            atomic_mass_unit=1.0,
        )

    @property
    def unit_pressure(self) -> float:
        return self.unit_density * self.unit_velocity**2

    @property
    def unit_time(self) -> float:
        return self.unit_length / self.unit_velocity

    @property
    def kelvin(self) -> float:
        """Factor turning code p/rho (times mu) into a temperature in K."""
        return self.unit_velocity**2 * self.atomic_mass_unit / self.boltzmann

    def conductivity_factor(self, mu):
        """Convert a conductivity from CGS to code units.

        kappa_code = kappa_cgs * m_p * mu / (rho0 * v0 * L0 * k_B)

        Args:
            mu: Mean molecular weight (scalar or array)

        Returns:
            Multiplicative factor with the shape of mu
        """
        return self.proton_mass * mu / (
            self.unit_density * self.unit_velocity * self.unit_length * self.boltzmann
        )
