"""Configuration loading and management for JAX-TC."""

from jax_tc.config.loader import load_config, save_config, build_conduction

__all__ = ["load_config", "save_config", "build_conduction"]
