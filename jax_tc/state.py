"""Primitive MHD state used by the conduction closures.

Primitive Variables:
    - rho: Mass density
    - vx, vy, vz: Velocity components
    - p: Thermal pressure
    - Bx, By, Bz: Magnetic field components
    - x_hi: Neutral hydrogen fraction (optional passive tracer)

Each field is either a Python float or a jax array; all fields of one
state share a shape (a single cell, or a whole grid).
"""

from typing import NamedTuple, Optional, Union

import jax.numpy as jnp
from jax import Array

Scalar = Union[float, Array]

# Field offsets into a raw primitive vector
RHO = 0
VX1 = 1
VX2 = 2
VX3 = 3
PRS = 4
BX1 = 5
BX2 = 6
BX3 = 7
X_HI = 8

NVAR = 8


class PrimitiveState(NamedTuple):
    """Primitive MHD state vector."""
    rho: Scalar  # Mass density
    vx: Scalar = 0.0   # Velocity x1
    vy: Scalar = 0.0   # Velocity x2
    vz: Scalar = 0.0   # Velocity x3
    p: Scalar = 0.0    # Thermal pressure
    Bx: Scalar = 0.0   # Magnetic field x1
    By: Scalar = 0.0   # Magnetic field x2
    Bz: Scalar = 0.0   # Magnetic field x3
    x_hi: Optional[Scalar] = None  # Neutral hydrogen fraction

    @classmethod
    def from_vector(cls, v) -> "PrimitiveState":
        """Build a state from a raw vector indexed by the field offsets.

        The first axis of ``v`` runs over variables; any trailing axes are
        kept (e.g. a (NVAR, nx, ny, nz) grid). A ninth entry, when present,
        is read as the neutral hydrogen fraction.
        """
        v = jnp.asarray(v)
        n_entries = v.shape[0] if v.ndim > 0 else 0
        if n_entries < NVAR:
            raise ValueError(
                f"Primitive vector needs at least {NVAR} entries, got {n_entries}"
            )
        x_hi = v[X_HI] if v.shape[0] > X_HI else None
        return cls(
            rho=v[RHO],
            vx=v[VX1],
            vy=v[VX2],
            vz=v[VX3],
            p=v[PRS],
            Bx=v[BX1],
            By=v[BX2],
            Bz=v[BX3],
            x_hi=x_hi,
        )

    @property
    def B(self) -> Array:
        """Magnetic field with components on the last axis."""
        return jnp.stack(
            jnp.broadcast_arrays(self.Bx, self.By, self.Bz), axis=-1
        )
