#!/usr/bin/env python
# scripts/evaluate_conduction.py
"""CLI entry point for evaluating conduction coefficients over a temperature sweep."""
import argparse
import logging
import sys
from pathlib import Path

import numpy as np

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from jax_tc.conduction import ThermalConduction
from jax_tc.config import load_config
from jax_tc.input_validation import validate_density, validate_positive
from jax_tc.state import PrimitiveState

log = logging.getLogger(__name__)


def temperature_sweep(conduction: ThermalConduction, rho: float,
                      t_min: float, t_max: float, n_points: int) -> dict:
    """Evaluate the closure on log-spaced temperatures at fixed density.

    Args:
        conduction: Configured conduction closure
        rho: Density in code units
        t_min, t_max: Temperature range [K]
        n_points: Number of samples

    Returns:
        Dict of numpy arrays: T, p, kappa_par, kappa_perp, phi
    """
    T = np.logspace(np.log10(t_min), np.log10(t_max), n_points)
    rho_arr = np.full_like(T, rho)

    # Every sweep point is fully ionised
    x_hi = np.zeros_like(T)
    mu = np.asarray(conduction.mean_molecular_weight(
        PrimitiveState(rho=rho_arr, x_hi=x_hi)
    ))
    p = rho_arr * T / (mu * conduction.units.kelvin)

    prim = PrimitiveState(rho=rho_arr, p=p, x_hi=x_hi)
    coeffs = conduction.coefficients(prim)

    return {
        "T": T,
        "p": p,
        "kappa_par": np.asarray(coeffs.kappa_par),
        "kappa_perp": np.asarray(coeffs.kappa_perp),
        "phi": np.full_like(T, float(coeffs.phi)),
    }


def plot_sweep(sweep: dict, path: Path, t_transition: float) -> None:
    """Save a log-log plot of κ_∥ against temperature."""
    import matplotlib
    matplotlib.use('Agg')  # Use non-interactive backend
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.loglog(sweep["T"], sweep["kappa_par"], label=r"$\kappa_\parallel$")
    if np.any(sweep["kappa_perp"] > 0):
        ax.loglog(sweep["T"], sweep["kappa_perp"], label=r"$\kappa_\perp$")
    if t_transition > 0:
        ax.axvline(t_transition, color='gray', linestyle='--', label="T transition")
    ax.set_xlabel("T [K]")
    ax.set_ylabel(r"$\kappa$ [code units]")
    ax.legend()
    fig.tight_layout()

    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=150)
    plt.close(fig)
    log.info(f"Saved plot to {path}")


def main():
    parser = argparse.ArgumentParser(
        description="Evaluate thermal conduction coefficients",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/evaluate_conduction.py --config examples/conduction.yaml
  python scripts/evaluate_conduction.py --config examples/conduction.yaml --t-min 1e4 --t-max 1e8
  python scripts/evaluate_conduction.py --config examples/conduction.yaml --plot out/kappa.png
""",
    )
    parser.add_argument('--config', required=True, help='YAML configuration file')
    parser.add_argument('--rho', type=float, default=1.0, help='Density in code units')
    parser.add_argument('--t-min', type=float, default=1e3, help='Lowest temperature [K]')
    parser.add_argument('--t-max', type=float, default=1e8, help='Highest temperature [K]')
    parser.add_argument('--n-points', type=int, default=11, help='Number of samples')
    parser.add_argument('--plot', type=Path, default=None, help='Save a plot to this path')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    try:
        validate_density(args.rho, "--rho")
        validate_positive(args.t_min, "--t-min")
        validate_positive(args.t_max, "--t-max")
        validate_positive(args.n_points, "--n-points")
        conduction = ThermalConduction.from_config(load_config(args.config))
    except (FileNotFoundError, KeyError, ValueError) as e:
        log.error(f"{e}")
        return 1

    sweep = temperature_sweep(conduction, args.rho, args.t_min, args.t_max, args.n_points)

    print(f"{'T [K]':>12} {'kappa_par':>14} {'kappa_perp':>14} {'phi':>6}")
    for T, k_par, k_perp, phi in zip(sweep["T"], sweep["kappa_par"],
                                     sweep["kappa_perp"], sweep["phi"]):
        print(f"{T:12.4e} {k_par:14.6e} {k_perp:14.6e} {phi:6.3f}")

    if args.plot is not None:
        plot_sweep(sweep, args.plot, conduction.params.transition_temperature)

    return 0


if __name__ == '__main__':
    sys.exit(main())
