"""Input validation utilities for conduction models.

These checks run when models are built from configuration, never inside
the per-cell closure.
"""

import math
from typing import Union

import jax.numpy as jnp

Array = jnp.ndarray


class ValidationError(ValueError):
    """Raised when input validation fails."""
    pass


def validate_finite(value: float, name: str) -> None:
    """Validate that a scalar is neither NaN nor infinite.

    Raises:
        ValidationError: If value is NaN or Inf
    """
    if not math.isfinite(value):
        raise ValidationError(f"{name} must be finite, got {value}")


def validate_positive(value: float, name: str) -> None:
    """Validate that a value is finite and strictly positive.

    Args:
        value: The value to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If value <= 0
    """
    validate_finite(value, name)
    if value <= 0:
        raise ValidationError(f"{name} must be positive, got {value}")


def validate_non_negative(value: float, name: str) -> None:
    """Validate that a value is finite and non-negative.

    Args:
        value: The value to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If value < 0
    """
    validate_finite(value, name)
    if value < 0:
        raise ValidationError(f"{name} must be non-negative, got {value}")


def validate_density(rho: Union[float, Array], name: str = "density") -> None:
    """Validate that density is positive everywhere.

    Args:
        rho: Density value or array
        name: Parameter name for error messages

    Raises:
        ValidationError: If density is non-positive
    """
    rho_min = jnp.min(rho) if hasattr(rho, 'shape') else rho

    if not rho_min > 0:
        raise ValidationError(f"{name} must be positive everywhere, min value: {rho_min}")
