"""Heat flux assembly and saturation limiting.

The classical anisotropic heat flux is

    q = -κ_∥ (b·∇T) b - κ_⊥ (∇T - (b·∇T) b)

with b = B/|B|. In steep gradients the classical flux can exceed what
the electrons can physically carry, so it is limited by the saturated
flux F_sat = 5 φ ρ c_iso³ using the harmonic form

    q = q_class / (1 + |q_class| / F_sat)

All quantities are in code units and vector fields carry their three
components on the last axis.
"""

import jax.numpy as jnp
from jax import Array, jit

from jax_tc.conduction import ConductionCoefficients
from jax_tc.state import PrimitiveState

# Floor on |B| when forming the unit vector along the field
B_FLOOR = 1e-10


@jit
def isothermal_sound_speed(rho, p):
    """c_iso = sqrt(p / ρ)."""
    return jnp.sqrt(p / rho)


@jit
def saturated_flux(rho, p, phi):
    """F_sat = 5 φ ρ c_iso³."""
    c_iso = isothermal_sound_speed(rho, p)
    return 5.0 * phi * rho * c_iso**3


@jit
def classical_heat_flux(kappa_par, kappa_perp, grad_T: Array, B: Array) -> Array:
    """Compute the unsaturated anisotropic heat flux.

    Args:
        kappa_par: Parallel conductivity, shape (...)
        kappa_perp: Perpendicular conductivity, shape (...)
        grad_T: Temperature gradient, shape (..., 3)
        B: Magnetic field, shape (..., 3)

    Returns:
        Heat flux with shape (..., 3)
    """
    B_mag = jnp.sqrt(jnp.sum(B**2, axis=-1, keepdims=True))
    b = B / jnp.maximum(B_mag, B_FLOOR)

    grad_T_parallel = jnp.sum(b * grad_T, axis=-1, keepdims=True)
    grad_T_perp = grad_T - grad_T_parallel * b

    kappa_par = jnp.asarray(kappa_par)[..., None]
    kappa_perp = jnp.asarray(kappa_perp)[..., None]

    return -kappa_par * grad_T_parallel * b - kappa_perp * grad_T_perp


@jit
def limit_heat_flux(q_classical: Array, f_sat) -> Array:
    """Harmonic saturation limiter; |q| stays below F_sat."""
    q_mag = jnp.sqrt(jnp.sum(q_classical**2, axis=-1, keepdims=True))
    f_sat = jnp.asarray(f_sat)[..., None]
    # Zero flux stays zero even where F_sat vanishes
    nonzero = q_mag > 0
    ratio = jnp.where(nonzero, q_mag / jnp.where(nonzero, f_sat, 1.0), 0.0)
    return q_classical / (1.0 + ratio)


def saturated_heat_flux(
    coeffs: ConductionCoefficients, prim: PrimitiveState, grad_T: Array
) -> Array:
    """Classical anisotropic flux limited by the saturated flux.

    Args:
        coeffs: Output of the conduction closure for this state
        prim: Primitive state the coefficients were computed for
        grad_T: Temperature gradient in code units, shape (..., 3)

    Returns:
        Limited heat flux with shape (..., 3)
    """
    q = classical_heat_flux(coeffs.kappa_par, coeffs.kappa_perp, grad_T, prim.B)
    f_sat = saturated_flux(prim.rho, prim.p, coeffs.phi)
    return limit_heat_flux(q, f_sat)
