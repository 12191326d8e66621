"""Physical constants and default composition for conduction closures.

Values are in CGS units, matching the unit system most astrophysical MHD
codes use for their physical-to-code conversions.
"""

from typing import Final

# Particle properties
CONST_MP: Final[float] = 1.67262171e-24  # Proton mass [g]
CONST_AMU: Final[float] = 1.66053886e-24  # Atomic mass unit [g]

# Thermodynamic constants
CONST_KB: Final[float] = 1.3806505e-16  # Boltzmann constant [erg/K]

# Length scales
CONST_AU: Final[float] = 1.49597892e13  # Astronomical unit [cm]

# Atomic weights
CONST_AH: Final[float] = 1.008   # Hydrogen
CONST_AHE: Final[float] = 4.004  # Helium
CONST_AZ: Final[float] = 30.0    # Representative metal

# Default mass fractions (solar)
H_MASS_FRAC: Final[float] = 0.7110
HE_MASS_FRAC: Final[float] = 0.2741

# Spitzer parallel conductivity coefficient [erg/(s cm K^(7/2))]
KAPPA_SPITZER: Final[float] = 5.6e-7

# Default saturation parameter for F_sat = 5 phi rho c_iso^3
SATURATION_PHI: Final[float] = 0.3
